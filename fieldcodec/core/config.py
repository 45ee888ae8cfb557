"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Ranges (e.g. GEOHASH_PRECISION) are validated at
load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Codec and store settings loaded from environment and .env.

    All settings are optional. Without Firebase credentials the codec
    layer still works; only the REST store client stays uninitialized.
    """

    debug: bool = False

    # Codec
    geohash_precision: int = 11
    default_locale_language: str = "en"

    # Firebase / Firestore: use key (env) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None  # Path to JSON file
    firestore_database: str = "(default)"
    firestore_timeout_seconds: float = 30.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "Settings":
        """Validate codec and client ranges.

        - GEOHASH_PRECISION must be 1-12 (base32 geohash length).
        - FIRESTORE_TIMEOUT_SECONDS must be positive.
        """
        if not 1 <= self.geohash_precision <= 12:
            raise ValueError(
                f"geohash_precision must be between 1 and 12, got: {self.geohash_precision}"
            )
        if self.firestore_timeout_seconds <= 0:
            raise ValueError(
                "firestore_timeout_seconds must be positive. "
                "Set FIRESTORE_TIMEOUT_SECONDS in environment or .env file."
            )
        if not self.default_locale_language:
            raise ValueError("default_locale_language must be a non-empty string")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
