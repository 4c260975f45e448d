"""
Core configuration and settings for the Size Chart Service
Values come from environment variables (and an optional .env file)
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support"""

    # Service information
    service_name: str = Field(default="size-chart-service", env="SERVICE_NAME")
    service_version: str = Field(default="0.4.0", env="SERVICE_VERSION")
    api_version: str = Field(default="1.0.0", env="API_VERSION")
    environment: str = Field(default="development", env="ENVIRONMENT")

    # Server configuration
    port: int = Field(default=8000, env="PORT")
    host: str = Field(default="0.0.0.0", env="HOST")

    # Database configuration
    mongodb_host: str = Field(default="localhost", env="MONGODB_HOST")
    mongodb_port: int = Field(default=27017, env="MONGODB_PORT")
    mongodb_username: Optional[str] = Field(default=None, env="MONGODB_USERNAME")
    mongodb_password: Optional[str] = Field(default=None, env="MONGODB_PASSWORD")
    mongodb_database: str = Field(default="sizecharts", env="MONGODB_DATABASE")

    @property
    def mongodb_url(self) -> str:
        """Construct MongoDB connection URL"""
        if self.mongodb_username and self.mongodb_password:
            return f"mongodb://{self.mongodb_username}:{self.mongodb_password}@{self.mongodb_host}:{self.mongodb_port}/{self.mongodb_database}?authSource=admin"
        return f"mongodb://{self.mongodb_host}:{self.mongodb_port}/{self.mongodb_database}"

    # Logging configuration
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    log_format: str = Field(default="console", env="LOG_FORMAT")
    log_to_file: bool = Field(default=False, env="LOG_TO_FILE")
    log_to_console: bool = Field(default=True, env="LOG_TO_CONSOLE")

    # Request tracing
    correlation_id_header: str = Field(default="X-Correlation-ID", env="CORRELATION_ID_HEADER")

    # Tracing
    enable_tracing: bool = Field(default=True, env="ENABLE_TRACING")

    # Admin authentication (disabled unless both are set)
    admin_username: Optional[str] = Field(default=None, env="ADMIN_USERNAME")
    admin_password: Optional[str] = Field(default=None, env="ADMIN_PASSWORD")
    admin_session_cookie: str = Field(default="admin_session", env="ADMIN_SESSION_COOKIE")
    admin_session_hours: int = Field(default=24, env="ADMIN_SESSION_HOURS")

    # JWT configuration for admin sessions
    jwt_secret: str = Field(default="change-me-size-chart-service-session-secret", env="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", env="JWT_ALGORITHM")

    # Demo mode
    demo_mode: bool = Field(default=False, env="DEMO_MODE")
    cron_secret: Optional[str] = Field(default=None, env="CRON_SECRET")

    # Public API
    api_auth_required: bool = Field(default=False, env="API_AUTH_REQUIRED")
    cors_allowed_origins: str = Field(default="", env="CORS_ALLOWED_ORIGINS")
    rate_limit_per_minute: int = Field(default=100, env="RATE_LIMIT_PER_MINUTE")
    rate_limit_disabled: bool = Field(default=False, env="RATE_LIMIT_DISABLED")

    @property
    def admin_auth_enabled(self) -> bool:
        """Admin auth is on when credentials are configured and demo mode is off"""
        if self.demo_mode:
            return False
        return bool(self.admin_username and self.admin_password)

    @property
    def cors_origins(self) -> List[str]:
        """Parsed list of allowed CORS origins"""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


# Global config instance
config = Config()
