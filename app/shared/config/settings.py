# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# Every knob Leaflings can be tuned with: where the database lives, how long a login lasts,
# where pictures are kept, which PayPal account to charge and how strict plant matching is.
#
# 🧪 Purpose (Technical Summary):
# pydantic-settings model read from the environment and an optional .env file, validated
# per field and cached behind get_settings().
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management (.env loading included)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Database connection modules
# - Security manager, image storage and PayPal client
# - All modules requiring configuration

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Leaflings configuration. Names match the environment variables exactly."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Leaflings API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Plant catalog, matching, journaling and premium upgrades for plant lovers",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json or text)")
    LOG_FILE: Optional[str] = Field(default=None, description="Optional log file path")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=True, description="Auto-reload on changes")
    WORKERS: int = Field(default=1, description="Number of worker processes")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./leaflings.db",
        description="SQLAlchemy async database URL"
    )
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements")
    DB_POOL_SIZE: int = Field(default=10, description="Database pool size (server databases only)")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Database pool overflow")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Database pool recycle time")
    DB_CREATE_TABLES: bool = Field(default=True, description="Create missing tables on startup")

    # =========================================================================
    # SECURITY SETTINGS
    # =========================================================================

    JWT_SECRET_KEY: str = Field(
        default="change-me-leaflings-development-secret-key",
        description="JWT signing key"
    )
    JWT_ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    JWT_ISSUER: str = Field(default="leaflings-api", description="JWT issuer claim")
    JWT_AUDIENCE: str = Field(default="leaflings-clients", description="JWT audience claim")
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60,
        description="JWT access token expiry"
    )
    BCRYPT_ROUNDS: int = Field(default=12, description="BCrypt hash rounds")
    LOGIN_RATE_LIMIT: str = Field(default="10/minute", description="Login attempts per client")
    RATE_LIMIT_ENABLED: bool = Field(default=True, description="Enable request rate limiting")

    # CORS Settings
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="CORS allowed origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="CORS allow credentials")

    # =========================================================================
    # FILE STORAGE
    # =========================================================================

    IMAGES_DIR: str = Field(default="wwwroot/images", description="Directory where uploaded images are written")
    IMAGES_URL_PREFIX: str = Field(default="images", description="Relative URL prefix returned for images")
    ALLOWED_IMAGE_EXTENSIONS: str = Field(
        default=".jpg,.jpeg,.png,.gif,.bmp",
        description="Comma separated list of accepted image extensions"
    )
    MAX_IMAGE_SIZE_MB: int = Field(default=5, description="Maximum accepted image size")

    # =========================================================================
    # BUSINESS RULES
    # =========================================================================

    FREE_PLANT_LIMIT: int = Field(default=3, description="Plants a non-paying user may own")
    DEFAULT_PAGE_SIZE: int = Field(default=5, description="Default list page size")
    MATCH_STRICT_USER_LOOKUP: bool = Field(
        default=False,
        description="Return 404 from the match endpoint for unknown users instead of empty buckets"
    )

    # =========================================================================
    # PAYPAL
    # =========================================================================

    PAYPAL_CLIENT_ID: str = Field(default="", description="PayPal REST client id")
    PAYPAL_CLIENT_SECRET: str = Field(default="", description="PayPal REST client secret")
    PAYPAL_BASE_URL: str = Field(
        default="https://api-m.sandbox.paypal.com",
        description="PayPal REST API base URL"
    )
    PAYPAL_CURRENCY: str = Field(default="EUR", description="Currency used for orders")
    PAYPAL_TIMEOUT_SECONDS: float = Field(default=15.0, description="PayPal HTTP timeout")
    PAYPAL_RETRY_ATTEMPTS: int = Field(default=3, description="Retries on PayPal transport errors")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        """Validate JWT algorithm."""
        allowed_algorithms = ["HS256", "HS384", "HS512"]
        if v not in allowed_algorithms:
            raise ValueError(f"JWT algorithm must be one of {allowed_algorithms}")
        return v

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",")]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def allowed_image_extensions(self) -> List[str]:
        return [ext.strip().lower() for ext in self.ALLOWED_IMAGE_EXTENSIONS.split(",") if ext.strip()]

    @property
    def images_path(self) -> Path:
        return Path(self.IMAGES_DIR)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings instance, read from the environment on first use."""
    return Settings()
