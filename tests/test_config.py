"""Tests for scorer configuration."""

from fllscorer.core.config import ScorerConfig


def test_defaults(scorer_config):
    """Test default configuration values."""
    config = ScorerConfig()

    assert config.verbose is False
    assert config.save_logs is False
    assert config.strict is False
    assert config.log_dir == "data/scores"
    assert scorer_config == config


def test_from_env(monkeypatch, tmp_path):
    """Test settings read from environment variables."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FLLSCORER_VERBOSE", "true")
    monkeypatch.setenv("FLLSCORER_STRICT", "1")
    monkeypatch.setenv("FLLSCORER_SAVE_LOGS", "no")
    monkeypatch.setenv("FLLSCORER_LOG_DIR", str(tmp_path / "logs"))

    config = ScorerConfig.from_env()

    assert config.verbose is True
    assert config.strict is True
    assert config.save_logs is False
    assert config.log_dir == str(tmp_path / "logs")


def test_from_env_unset(monkeypatch, tmp_path):
    """Test defaults when nothing is set."""
    monkeypatch.chdir(tmp_path)
    for name in ("FLLSCORER_VERBOSE", "FLLSCORER_STRICT", "FLLSCORER_SAVE_LOGS", "FLLSCORER_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)

    assert ScorerConfig.from_env() == ScorerConfig()
