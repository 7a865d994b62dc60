"""
Application configuration management.

Following Sandi Metz principles:
- Single Responsibility: Configuration loading and validation
- Small class: < 100 lines
- Clear naming: Descriptive property names
"""

import re
from typing import List, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from comedy_club.exceptions import ConfigurationError


class AppConfig(BaseSettings):
    """
    Application configuration with validation.

    Loads from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="ContainerComedy Club", description="Application name")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    # API settings
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=3001, ge=1, le=65535, description="API port")
    allowed_origins: str = Field(default="*", description="CORS allowed origins")
    request_log_excluded_paths: str = Field(
        default="/health", description="Comma-separated paths left out of request logs"
    )
    slow_request_threshold_ms: float = Field(
        default=1000.0, gt=0, description="Requests slower than this log a warning"
    )

    # MongoDB settings
    mongodb_uri: str = Field(
        default="mongodb://localhost:27017/docker-chuckles-dev",
        description="MongoDB connection string",
    )
    mongodb_database: str = Field(
        default="docker-chuckles-dev", description="MongoDB database"
    )
    mongodb_collection: str = Field(default="jokes", description="Jokes collection")
    mongodb_server_selection_timeout_ms: int = Field(
        default=5000, ge=1, description="Server selection timeout"
    )
    mongodb_connect_timeout_ms: int = Field(
        default=10000, ge=1, description="Connect timeout"
    )
    mongodb_socket_timeout_ms: int = Field(
        default=45000, ge=1, description="Socket timeout"
    )
    mongodb_max_pool_size: int = Field(default=10, ge=1, description="Max pool size")
    mongodb_min_pool_size: int = Field(default=2, ge=0, description="Min pool size")

    # Redis settings
    redis_host: str = Field(default="localhost", description="Redis host")
    redis_port: int = Field(default=6379, ge=1, le=65535, description="Redis port")
    redis_db: int = Field(default=0, ge=0, le=15, description="Redis database")
    redis_password: str = Field(default="", description="Redis password")
    redis_max_connections: int = Field(default=10, ge=1, description="Max connections")
    redis_socket_timeout_seconds: float = Field(
        default=2.0, gt=0, description="Redis command timeout"
    )
    redis_socket_connect_timeout_seconds: float = Field(
        default=2.0, gt=0, description="Redis connect timeout"
    )

    # Cache settings
    cache_ttl_seconds: int = Field(default=300, ge=1, description="TTL seconds")
    cache_key_prefix: str = Field(default="joke", min_length=1, description="Key prefix")

    # Feature settings
    auto_seed: bool = Field(default=True, description="Seed empty store on startup")
    top_jokes_limit: int = Field(default=5, ge=1, description="Jokes listed in stats")

    @field_validator("mongodb_uri")
    @classmethod
    def validate_mongodb_uri(cls, v: str) -> str:
        """Validate MongoDB URI scheme."""
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MONGODB_URI must start with mongodb:// or mongodb+srv://")
        return v

    @property
    def allowed_origins_list(self) -> List[str]:
        """Get allowed origins as list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def request_log_excluded_paths_list(self) -> List[str]:
        """Get request log exclusions as list."""
        return [
            path.strip() for path in self.request_log_excluded_paths.split(",") if path.strip()
        ]

    @property
    def redis_url(self) -> str:
        """Build Redis URL."""
        if self.redis_password:
            return (
                f"redis://:{self.redis_password}@"
                f"{self.redis_host}:{self.redis_port}/{self.redis_db}"
            )
        return f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"

    @property
    def is_atlas_deployment(self) -> bool:
        """Check if MongoDB is an Atlas (SRV) deployment."""
        return self.mongodb_uri.startswith("mongodb+srv://")

    @property
    def masked_mongodb_uri(self) -> str:
        """MongoDB URI with the password hidden, safe for logs."""
        return re.sub(r"://([^:/@]+):([^@]+)@", r"://\1:****@", self.mongodb_uri)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"


def load_config(**overrides) -> AppConfig:
    """
    Build and validate configuration.

    Args:
        **overrides: Explicit values taking precedence over the environment

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If any setting is invalid
    """
    try:
        return AppConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


# Global configuration instance
config = load_config()
