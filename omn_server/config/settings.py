"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Service settings resolved once at startup and shared read-only.

    Environment variable names map directly to field names in uppercase.
    Example: `db_url` reads from `DB_URL`.

    Attributes:
        host: Host interface for web server binding.
        port: Web server port.
        db_url: Optional store address; required when the record endpoint is enabled.
        log_level: Root log level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=7878, ge=0, le=65535, strict=True)
    db_url: str | None = Field(default=None)
    log_level: str = Field(default="INFO")

    @field_validator("port", mode="before")
    @classmethod
    def _validate_port_digits(cls, value: object) -> object:
        if isinstance(value, str) and not (value.isascii() and value.isdigit()):
            raise ValueError("port must be an unsigned decimal integer")
        if isinstance(value, str):
            return int(value)
        return value

    @field_validator("host")
    @classmethod
    def _validate_host(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("db_url")
    @classmethod
    def _validate_db_url(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unsupported log level {value!r}")
        return normalized_value


def config_load_settings(store_required: bool = True) -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Args:
        store_required: Whether `DB_URL` must be present for the record endpoint.

    Returns:
        AppSettings: Validated, immutable runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        settings = AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error

    if store_required and settings.db_url is None:
        raise SettingsLoadError("Startup configuration validation failed. DB_URL must be set.")
    return settings
