import sys

import pytest
from pydantic import ValidationError

from core.config import AppSettings, read_env_file, save_user_settings, user_env_file


def test_defaults():
    settings = AppSettings(_env_file=None)

    assert settings.connect_timeout_seconds == 8.0
    assert settings.read_timeout_seconds == 25.0
    assert settings.gemini_model == "gemini-2.0-flash"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("FITGEN_GEMINI_API_KEY", "from-env")
    monkeypatch.setenv("FITGEN_GEMINI_MODEL", "gemini-pro")
    monkeypatch.setenv("FITGEN_LOG_LEVEL", "debug")

    settings = AppSettings(_env_file=None)

    assert settings.gemini_api_key == "from-env"
    assert settings.gemini_model == "gemini-pro"
    assert settings.log_level == "DEBUG"
    assert settings.has_usable_api_key


@pytest.mark.parametrize("key", [None, "", "  ", "CHANGE_ME"])
def test_placeholder_keys_are_not_usable(key):
    assert not AppSettings(_env_file=None, gemini_api_key=key).has_usable_api_key


def test_endpoint_url_and_redaction():
    settings = AppSettings(_env_file=None, gemini_api_key="secret", gemini_model="m1")

    assert settings.endpoint_url() == (
        "https://generativelanguage.googleapis.com/v1beta/models/m1:generateContent?key=secret"
    )
    assert "secret" not in settings.redacted_endpoint_url()


def test_settings_are_immutable():
    settings = AppSettings(_env_file=None)

    with pytest.raises(ValidationError):
        settings.gemini_model = "other"


def test_rejects_invalid_values():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, read_timeout_seconds=0)
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, log_level="chatty")


def test_save_user_settings_merges_existing(tmp_path):
    env_file = tmp_path / "cfg" / ".env"
    env_file.parent.mkdir()
    env_file.write_text("# old\nFITGEN_GEMINI_MODEL='old-model'\nOTHER=1\nnot a setting\n", encoding="utf-8")

    save_user_settings({"FITGEN_GEMINI_MODEL": "new-model", "FITGEN_GEMINI_API_KEY": "k"}, env_file=env_file)

    assert read_env_file(env_file) == {
        "FITGEN_GEMINI_API_KEY": "k",
        "FITGEN_GEMINI_MODEL": "new-model",
        "OTHER": "1",
    }


def test_save_user_settings_quotes_values_and_is_readable_by_settings(tmp_path):
    env_file = tmp_path / ".env"

    save_user_settings({"FITGEN_USER_AGENT": "fitgen tests #1"}, env_file=env_file)

    assert 'FITGEN_USER_AGENT="fitgen tests #1"' in env_file.read_text(encoding="utf-8")
    assert AppSettings(_env_file=env_file).user_agent == "fitgen tests #1"


def test_save_user_settings_rejects_foreign_keys(tmp_path):
    env_file = tmp_path / ".env"

    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        save_user_settings({"OPENAI_API_KEY": "x", "FITGEN_GEMINI_MODEL": "m"}, env_file=env_file)
    assert not env_file.exists()


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permissions")
def test_saved_user_settings_are_private(tmp_path):
    env_file = save_user_settings({"FITGEN_GEMINI_API_KEY": "secret"}, env_file=tmp_path / ".env")

    assert env_file.stat().st_mode & 0o777 == 0o600


def test_read_env_file_missing_is_empty(tmp_path):
    assert read_env_file(tmp_path / "nope.env") == {}


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout")
def test_user_env_file_follows_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert user_env_file() == tmp_path / "fitgen" / ".env"
