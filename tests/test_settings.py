from unittest.mock import patch

import pytest

from cqueue.config.settings import Settings, get_settings


def test_default_settings():
    """Test default settings values."""
    settings = Settings()

    assert settings.app_name == "cqueue"
    assert settings.version == "0.1.0"
    assert settings.environment == "development"
    assert settings.debug is True
    assert settings.host == "localhost"
    assert settings.port == 3000
    assert settings.workers == 1


def test_multiple_workers_rejected():
    """Test that more than one worker process is refused."""
    with pytest.raises(ValueError, match="WORKERS=4 is not supported"):
        Settings(workers=4)


def test_invalid_log_level_rejected():
    """Test that log level is restricted to known names."""
    with pytest.raises(ValueError):
        Settings(log_level="TRACE")


def test_settings_dependency_injection():
    """Test the get_settings dependency function."""
    settings = get_settings()
    assert isinstance(settings, Settings)
    assert settings.app_name == "cqueue"


@patch.dict("os.environ", {"PORT": "8080", "LOG_LEVEL": "DEBUG", "HOST": "0.0.0.0"})
def test_env_var_loading():
    """Test that environment variables are loaded correctly."""
    settings = Settings()
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.host == "0.0.0.0"
