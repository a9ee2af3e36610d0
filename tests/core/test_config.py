import pytest
from pydantic import ValidationError
from optkit.core.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("OPTKIT_LOG_LEVEL", "OPTKIT_LOG_FORMAT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.load()
    assert settings.LOG_LEVEL == "INFO"
    assert "%(message)s" in settings.LOG_FORMAT


def test_package_level_variable_wins(clean_env):
    clean_env.setenv("LOG_LEVEL", "WARNING")
    clean_env.setenv("OPTKIT_LOG_LEVEL", "debug")
    assert Settings.load().LOG_LEVEL == "DEBUG"


def test_generic_log_level_fallback(clean_env):
    clean_env.setenv("LOG_LEVEL", "error")
    assert Settings.load().LOG_LEVEL == "ERROR"


def test_custom_format(clean_env):
    clean_env.setenv("OPTKIT_LOG_FORMAT", "%(levelname)s %(message)s")
    assert Settings.load().LOG_FORMAT == "%(levelname)s %(message)s"


def test_unknown_level_rejected(clean_env):
    clean_env.setenv("OPTKIT_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings.load()
