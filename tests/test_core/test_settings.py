"""
Tests for Settings loading.
"""

from tgkeyboard.core.config import Settings, get_settings


class TestSettings:
    """Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.keyboard_resize_default is True
        assert settings.keyboard_one_time_default is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("KEYBOARD_RESIZE_DEFAULT", "0")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)

        assert settings.keyboard_resize_default is False
        assert settings.log_level == "DEBUG"

    def test_test_environment_from_conftest(self):
        assert get_settings().environment == "test"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("KEYBOARD_ONE_TIME_DEFAULT", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("KEYBOARD_ONE_TIME_DEFAULT=true\nUNRELATED_VAR=1\n")

        settings = Settings(_env_file=env_file)

        assert settings.keyboard_one_time_default is True
