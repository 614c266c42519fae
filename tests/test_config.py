import pytest
from pydantic import ValidationError

from explainer.config import Settings, get_settings


def test_defaults(monkeypatch):
	monkeypatch.delenv("EXPLAINER_LOCALE", raising=False)
	monkeypatch.delenv("EXPLAINER_LONG_FUNCTION_LINES", raising=False)
	s = Settings(_env_file=None)
	assert s.locale == "en"
	assert s.long_function_lines == 20
	assert s.port == 8000


def test_environment_overrides(monkeypatch):
	monkeypatch.setenv("EXPLAINER_LOCALE", " PT ")
	monkeypatch.setenv("EXPLAINER_LONG_FUNCTION_LINES", "12")
	monkeypatch.setenv("EXPLAINER_LOG_LEVEL", "debug")
	s = get_settings()
	assert s.locale == "pt"
	assert s.long_function_lines == 12
	assert s.log_level == "DEBUG"


def test_unknown_locale_rejected():
	with pytest.raises(ValidationError, match="Unknown locale"):
		Settings(locale="xx")


def test_non_positive_limit_rejected():
	with pytest.raises(ValidationError, match="at least 1"):
		Settings(long_function_lines=0)


def test_get_catalog():
	from explainer.messages import PORTUGUESE, get_catalog

	assert get_catalog(" PT ") is PORTUGUESE
	with pytest.raises(ValueError, match="Unknown locale"):
		get_catalog("fr")
