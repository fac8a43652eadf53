"""Application configuration using pydantic-settings."""

import json
from ast import literal_eval
from functools import lru_cache
from typing import Annotated, ClassVar, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "gpt-api-sync"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    DEFAULT_STANDARD_MODELS: ClassVar[tuple[str, ...]] = (
        "gpt-4o",
        "gpt-4o-mini",
        "gpt-4.1-nano",
        "gpt-4.1-mini",
        "gpt-4.1",
        "claude-4-opus",
        "claude-4-sonnet",
        "claude-4-haiku",
        "claude-3.7-sonnet",
        "gemini-2.5-flash-lite",
        "gemini-2.5-flash",
        "gemini-2.5-pro",
    )

    # Model redirect
    standard_models: Annotated[list[str], NoDecode] = list(DEFAULT_STANDARD_MODELS)
    model_redirect_downgrade_suffixes: Annotated[list[str], NoDecode] = [
        "-mini",
        "-nano",
        "-lite",
    ]
    model_redirect_short_name_max_length: int = 3
    model_redirect_case_sensitive: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        """Accept lowercase level names from the environment."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("standard_models", "model_redirect_downgrade_suffixes", mode="before")
    @classmethod
    def _parse_name_list(cls, value: object) -> object:
        """Accept JSON list/string, Python literal list, or comma-separated values."""
        def normalize(name: object) -> str:
            cleaned = str(name).strip().strip("'\"")
            if cleaned.startswith("[") and cleaned.endswith("]"):
                cleaned = cleaned[1:-1].strip().strip("'\"")
            return cleaned

        if isinstance(value, list | tuple):
            return [normalize(name) for name in value if normalize(name)]
        if not isinstance(value, str):
            return value

        raw = value.strip()
        if not raw:
            return []

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            try:
                parsed = literal_eval(raw)
            except (ValueError, SyntaxError):
                parsed = [normalize(name) for name in raw.split(",")]
                return [name for name in parsed if name]

        if isinstance(parsed, str):
            parsed = [parsed]
        if isinstance(parsed, tuple | set):
            parsed = list(parsed)
        if not isinstance(parsed, list):
            raise ValueError(
                "Model lists must be a JSON array, JSON string, or comma-separated string.",
            )
        return [normalize(name) for name in parsed if normalize(name)]

    @field_validator("model_redirect_short_name_max_length")
    @classmethod
    def _validate_short_name_max_length(cls, value: int) -> int:
        if value < 1:
            raise ValueError("MODEL_REDIRECT_SHORT_NAME_MAX_LENGTH must be at least 1")
        return value

    def get_standard_models(self) -> list[str]:
        """Return configured standard models, de-duplicated in order."""
        models = self.standard_models or list(self.DEFAULT_STANDARD_MODELS)
        return list(dict.fromkeys(models))


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()

    return settings


settings = get_settings()
