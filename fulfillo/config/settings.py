"""
Fulfillo Operations Hub
Centralized Configuration Management

Pydantic settings with environment variable support, validation and type
safety. Every section can be overridden from the environment or a .env file.
"""

from functools import lru_cache
from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Login and session configuration"""

    model_config = SettingsConfigDict(env_prefix="AUTH_")

    login_delay_ms: int = Field(default=800, ge=0, description="Cosmetic delay before answering a login")
    token_bytes: int = Field(default=32, ge=16, description="Entropy of generated session tokens")

    @property
    def login_delay_seconds(self) -> float:
        """Login delay in seconds"""
        return self.login_delay_ms / 1000


class DashboardSettings(BaseSettings):
    """Derived view thresholds"""

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_")

    low_stock_threshold: int = Field(default=10, ge=0, description="Stock below this is flagged as low")
    profit_margin: float = Field(default=0.25, ge=0, le=1, description="Estimated profit share of settled revenue")
    default_locale: str = Field(default="ar", description="Locale for new sessions: ar or en")
    demo_orders: int = Field(default=0, ge=0, le=9000, description="Serve a generated dataset of this many orders instead of the seed data")
    demo_seed: int = Field(default=42, description="Random seed for the generated dataset")

    @field_validator("default_locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Validate locale value"""
        if v.lower() not in ("ar", "en"):
            raise ValueError("Locale must be one of: ['ar', 'en']")
        return v.lower()


class OnboardingSettings(BaseSettings):
    """Partner onboarding pipeline behaviour"""

    model_config = SettingsConfigDict(env_prefix="ONBOARDING_")

    mark_inquiry_approved: bool = Field(
        default=False,
        description="Set the originating inquiry to APPROVED once its brand is created",
    )


class SecuritySettings(BaseSettings):
    """Security and HTTP Configuration"""

    model_config = SettingsConfigDict(env_prefix="")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins"
    )


class MonitoringSettings(BaseSettings):
    """Monitoring and Observability Configuration"""

    model_config = SettingsConfigDict(env_prefix="")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL", description="Logging level")
    log_format: str = Field(default="json", alias="LOG_FORMAT", description="Log format: json or text")
    log_file: Optional[str] = Field(default=None, description="Log file path")


class Settings(BaseSettings):
    """
    Main Application Settings

    Aggregates all configuration sections and provides a single entry point
    for accessing application configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="fulfillo-ops-hub", alias="APP_NAME", description="Application name")
    app_env: str = Field(default="development", alias="APP_ENV", description="Environment")
    debug: bool = Field(default=False, alias="DEBUG", description="Debug mode")

    # API Server
    api_host: str = Field(default="0.0.0.0", alias="API_HOST", description="API host")
    api_port: int = Field(default=8000, alias="API_PORT", description="API port")
    api_reload: bool = Field(default=False, alias="API_RELOAD", description="Enable reload")

    # Version
    version: str = Field(default="1.0.0", description="Application version")

    # Subsystem configurations
    auth: AuthSettings = Field(default_factory=AuthSettings)
    dashboard: DashboardSettings = Field(default_factory=DashboardSettings)
    onboarding: OnboardingSettings = Field(default_factory=OnboardingSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)

    @field_validator("app_env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment value"""
        allowed = ["development", "staging", "production", "testing"]
        if v.lower() not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v.lower()

    @property
    def is_production(self) -> bool:
        """Check if running in production"""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development"""
        return self.app_env == "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses LRU cache to ensure settings are only loaded once.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
