import pytest
from pydantic import ValidationError

from focusfield.config import FocusFieldSettings


def test_defaults(monkeypatch):
	for key in ("FOCUSFIELD_PADDING", "FOCUSFIELD_INTENSITY", "FOCUSFIELD_HOST", "FOCUSFIELD_PORT", "FOCUSFIELD_LOG_LEVEL"):
		monkeypatch.delenv(key, raising=False)
	settings = FocusFieldSettings.from_env()
	assert settings.padding == 2
	assert settings.intensity == "medium"
	assert (settings.host, settings.port) == ("127.0.0.1", 8000)
	assert settings.log_level == "INFO"


def test_from_env(monkeypatch):
	monkeypatch.setenv("FOCUSFIELD_PADDING", "5")
	monkeypatch.setenv("FOCUSFIELD_INTENSITY", "subtle")
	monkeypatch.setenv("FOCUSFIELD_PORT", "9001")
	monkeypatch.setenv("FOCUSFIELD_LOG_LEVEL", "debug")
	settings = FocusFieldSettings.from_env()
	assert settings.padding == 5
	assert settings.intensity == "subtle"
	assert settings.port == 9001
	assert settings.log_level == "DEBUG"


def test_rejects_bad_values():
	with pytest.raises(ValidationError):
		FocusFieldSettings(padding=-1)
	with pytest.raises(ValidationError):
		FocusFieldSettings(intensity="loud")


def test_bad_env_value_is_a_validation_error(monkeypatch):
	monkeypatch.setenv("FOCUSFIELD_PADDING", "abc")
	with pytest.raises(ValidationError):
		FocusFieldSettings.from_env()
	monkeypatch.setenv("FOCUSFIELD_PADDING", "1")
	monkeypatch.setenv("FOCUSFIELD_PORT", "eighty")
	with pytest.raises(ValidationError):
		FocusFieldSettings.from_env()
