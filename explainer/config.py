"""Environment-based settings (``EXPLAINER_*`` variables or a ``.env`` file)."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .advise import DEFAULT_LONG_FUNCTION_LINES
from .messages import CATALOGS, DEFAULT_LOCALE


class Settings(BaseSettings):
	model_config = SettingsConfigDict(
		env_prefix="EXPLAINER_",
		env_file=".env",
		env_file_encoding="utf-8",
		extra="ignore",
	)

	locale: str = DEFAULT_LOCALE
	long_function_lines: int = DEFAULT_LONG_FUNCTION_LINES

	host: str = "127.0.0.1"
	port: int = 8000
	log_level: str = "INFO"

	@field_validator("locale")
	@classmethod
	def _valid_locale(cls, v: str) -> str:
		v = str(v).strip().lower()
		if v not in CATALOGS:
			raise ValueError(f"Unknown locale '{v}'. Valid: {sorted(CATALOGS)}")
		return v

	@field_validator("long_function_lines")
	@classmethod
	def _positive_limit(cls, v: int) -> int:
		if v < 1:
			raise ValueError("long_function_lines must be at least 1")
		return v

	@field_validator("log_level")
	@classmethod
	def _upper_level(cls, v: str) -> str:
		return str(v).strip().upper()


def get_settings(**overrides) -> Settings:
	return Settings(**overrides)
