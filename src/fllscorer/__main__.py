"""Command line entry point for the scorer.

Usage:
    python -m fllscorer sheet.json
    cat sheet.json | python -m fllscorer --json
    python -m fllscorer sheet.json --strict  # Exit 1 when warnings were raised
    python -m fllscorer --rules  # List the scoring rules
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .core.config import ScorerConfig
from .core.mission_state import MissionStateError, load_mission_state
from .core.scoring import evaluate
from .utils.logger import setup_logger
from .utils.warning_text import format_rules, format_score_sheet


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fllscorer",
        description="Score a Hydro Dynamics robot game round from a JSON score sheet",
    )
    parser.add_argument('path', nargs='?', default='-',
                        help='Score sheet JSON file, "-" for stdin (default)')
    parser.add_argument('--json', action='store_true',
                        help='Print the result as JSON')
    parser.add_argument('--rules', action='store_true',
                        help='List the scoring rules and exit')
    parser.add_argument('--strict', action='store_true', default=None,
                        help='Exit with status 1 when any warning was raised')
    parser.add_argument('--verbose', '-v', action='store_true', default=None,
                        help='Log every warning as it is raised')
    parser.add_argument('--save-logs', action='store_true', default=None,
                        help='Also write a timestamped log file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the scorer."""
    args = build_parser().parse_args(argv)

    # Flags override the environment
    config = ScorerConfig.from_env()
    if args.strict is not None:
        config.strict = args.strict
    if args.verbose is not None:
        config.verbose = args.verbose
    if args.save_logs is not None:
        config.save_logs = args.save_logs

    setup_logger(verbose=config.verbose, save_to_file=config.save_logs, log_dir=config.log_dir)
    logger = logging.getLogger(__name__)

    if args.rules:
        print(format_rules())
        return 0

    try:
        if args.path == '-':
            text = sys.stdin.read()
        else:
            with open(args.path, 'r', encoding='utf-8') as f:
                text = f.read()
        state = load_mission_state(text)
    except (OSError, MissionStateError) as e:
        logger.error(f"Cannot read score sheet: {e}")
        return 2

    result = evaluate(state)
    logger.info(f"Scored {result.score} points with {len(result.warnings)} warning(s)")

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_score_sheet(result))

    if config.strict and result.warnings:
        logger.warning("Score sheet has warnings, review before accepting")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
