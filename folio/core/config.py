"""Application configuration (settings and environment).

Single source of truth for configuration. Uses pydantic-settings with .env
support. The Firestore project id and web API key are validated at load time.
Only this module reads the environment; the REST client receives an explicit
StoreConfig built from these settings.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment and .env."""

    # App
    app_name: str = "folio"
    app_version: str = "1.0.0"
    debug: bool = False

    # Firestore REST: project + web API key (sent as ?key= on every request)
    firebase_project_id: str = ""
    firebase_api_key: SecretStr = SecretStr("")
    firebase_database_id: str = "(default)"
    firestore_base_url: str = "https://firestore.googleapis.com/v1"
    firestore_timeout_seconds: float = 10.0

    # Optional admin token source (service account). Use key (env) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Require FIREBASE_PROJECT_ID and FIREBASE_API_KEY; check numeric ranges."""
        if not self.firebase_project_id:
            raise ValueError(
                "FIREBASE_PROJECT_ID is required. Set in environment or .env file."
            )
        if not self.firebase_api_key.get_secret_value():
            raise ValueError(
                "FIREBASE_API_KEY is required (Firebase web API key). "
                "Set in environment or .env file."
            )
        if self.firestore_timeout_seconds <= 0:
            raise ValueError(
                f"firestore_timeout_seconds must be positive, got: {self.firestore_timeout_seconds!r}"
            )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError(
                f"telemetry_sample_rate must be between 0.0 and 1.0, got: {self.telemetry_sample_rate!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
