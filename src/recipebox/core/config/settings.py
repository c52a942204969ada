"""recipebox settings.

Values come from YAML files under config/ (a base layer plus one directory
per APP_ENV) and from environment variables, which win over both. Secrets
such as the JWT key and the database password are only read from the
environment.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


class AuthMode(StrEnum):
    """Where the caller identity comes from.

    LOCAL_JWT verifies bearer tokens against the shared secret, HEADER reads
    X-User-ID and X-User-Roles from a trusted gateway and DISABLED treats
    every request as a fixed development user.
    """

    LOCAL_JWT = "local_jwt"
    HEADER = "header"
    DISABLED = "disabled"


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Name, version and environment."""

    name: str = "Recipe Box Service"
    version: str = "0.1.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Uvicorn bind address."""

    host: str = "127.0.0.1"
    port: int = 8000


class ApiSettings(BaseModel):
    """Route prefix and docs toggles."""

    v1_prefix: str = "/api/v1"
    cors_origins: list[str] = []


class JwtSettings(BaseModel):
    """Signing parameters for locally issued tokens."""

    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30


class AuthHeaderSettings(BaseModel):
    """Names of the identity headers set by the gateway."""

    user_id: str = "X-User-ID"
    roles: str = "X-User-Roles"
    permissions: str = "X-User-Permissions"


class AuthJwtValidationSettings(BaseModel):
    """Claims checked when verifying a token."""

    issuer: str | None = None
    audience: list[str] = []


class AuthSettings(BaseModel):
    """Auth mode and the per-mode options."""

    mode: str = "local_jwt"
    jwt: JwtSettings = JwtSettings()
    headers: AuthHeaderSettings = AuthHeaderSettings()
    jwt_validation: AuthJwtValidationSettings = AuthJwtValidationSettings()


class DatabaseSettings(BaseModel):
    """PostgreSQL document store settings."""

    host: str = "localhost"
    port: int = 5432
    name: str = "recipebox"
    db_schema: str = "recipebox"  # PostgreSQL schema, used as search_path
    user: str | None = None
    min_pool_size: int = 2
    max_pool_size: int = 10
    command_timeout: float = 30.0  # seconds
    ssl: bool = False


class RateLimitingSettings(BaseModel):
    """SlowAPI limits and storage backend."""

    enabled: bool = True
    default: str = "100/minute"
    storage_uri: str = "memory://"


class LoggingSettings(BaseModel):
    """Level, output format and optional log file."""

    level: str = "INFO"
    format: str = "json"


class MetricsSettings(BaseModel):
    """Prometheus endpoint toggle."""

    enabled: bool = True


class ObservabilitySettings(BaseModel):
    """Logging and metrics grouped together."""

    metrics: MetricsSettings = MetricsSettings()


class UploadSettings(BaseModel):
    """Recipe photo upload settings."""

    directory: str = "public/uploads"
    max_file_size: int = Field(default=1_000_000, gt=0)  # bytes
    url_prefix: str = "/uploads"


class RecipeSettings(BaseModel):
    """Recipe listing and ranking settings."""

    top_rated_min_rating: float = 4.0
    top_rated_limit: int = 5
    default_page_size: int = 25
    max_page_size: int = 100


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Root settings object for the recipe API.

    Nested groups mirror the YAML layout. Any nested value can be overridden
    from the environment with a double underscore, e.g. RECIPES__MAX_PAGE_SIZE=50
    or DATABASE__HOST=db.internal.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    server: ServerSettings = ServerSettings()
    api: ApiSettings = ApiSettings()
    auth: AuthSettings = AuthSettings()
    database: DatabaseSettings = DatabaseSettings()
    rate_limiting: RateLimitingSettings = RateLimitingSettings()
    logging: LoggingSettings = LoggingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
    uploads: UploadSettings = UploadSettings()
    recipes: RecipeSettings = RecipeSettings()

    # =========================================================================
    # Secrets, read from the environment or .env
    # =========================================================================
    JWT_SECRET_KEY: str = ""
    DATABASE_PASSWORD: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Order the sources: init kwargs, env, .env, YAML, then secret files."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def auth_mode_enum(self) -> AuthMode:
        """Configured auth mode, rejecting unknown values."""
        try:
            return AuthMode(self.auth.mode.lower())
        except ValueError:
            msg = (
                f"Invalid auth mode: {self.auth.mode}. "
                f"Must be one of: {', '.join(m.value for m in AuthMode)}"
            )
            raise ValueError(msg) from None

    @property
    def database_url(self) -> str:
        """PostgreSQL connection URL without the password."""
        user_part = f"{self.database.user}@" if self.database.user else ""
        return (
            f"postgresql://{user_part}{self.database.host}:"
            f"{self.database.port}/{self.database.name}"
        )

    # =========================================================================
    # Environment Helpers
    # =========================================================================

    @property
    def is_development(self) -> bool:
        """True for APP_ENV=development."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """True for APP_ENV=production."""
        return self.APP_ENV == "production"

    @property
    def is_non_production(self) -> bool:
        """Local, test and development environments expose API docs."""
        return self.APP_ENV in ("local", "test", "development")

    @property
    def is_testing(self) -> bool:
        """True for APP_ENV=test."""
        return self.APP_ENV == "test"


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, loaded on first use."""
    return Settings()
