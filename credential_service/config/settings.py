# settings.py
# Version: 1.0
# Purpose: Core settings module for credential service configuration using Pydantic

# External imports - versions specified for production deployments
from pydantic import AliasChoices, Field, SecretStr, field_validator  # pydantic v2
from pydantic_settings import BaseSettings, SettingsConfigDict  # pydantic-settings v2
from typing import Any, Dict, Optional
from pathlib import Path
import logging
from functools import lru_cache

# Configure logger
logger = logging.getLogger(__name__)

# Global constants
BASE_DIR = Path(__file__).parent.parent.parent
CONFIG_VERSION = "1.0"
ALLOWED_ENVIRONMENTS = ["development", "staging", "production", "test"]
SUPPORTED_ALGORITHMS = ["HS256", "HS384", "HS512"]

class Settings(BaseSettings):
    """
    Settings management using Pydantic BaseSettings.
    Values come from the process environment or a local .env file and are
    read once per process through get_settings().
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
    )

    # Core Application Settings
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    PROJECT_NAME: str = "Credential Service"
    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # MongoDB Configuration
    MONGODB_URL: SecretStr = Field(
        ...,
        validation_alias=AliasChoices("MONGO_URI", "MONGODB_URL"),
    )
    MONGODB_DB_NAME: str = "credential_service"

    # Token signing
    JWT_SECRET: Optional[SecretStr] = None
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Password hashing cost factor (log2 of bcrypt iterations)
    BCRYPT_ROUNDS: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment setting."""
        if v not in ALLOWED_ENVIRONMENTS:
            raise ValueError(f"Environment must be one of {ALLOWED_ENVIRONMENTS}")
        return v

    @field_validator("MONGODB_URL")
    @classmethod
    def validate_mongodb_url(cls, v: SecretStr) -> SecretStr:
        """Validate MongoDB URL format."""
        url = v.get_secret_value()
        if not url.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("Invalid MongoDB URL format")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        if v not in SUPPORTED_ALGORITHMS:
            raise ValueError(f"JWT_ALGORITHM must be one of {SUPPORTED_ALGORITHMS}")
        return v

    @field_validator("ACCESS_TOKEN_EXPIRE_MINUTES")
    @classmethod
    def validate_token_lifetime(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("ACCESS_TOKEN_EXPIRE_MINUTES must be positive")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """bcrypt accepts cost factors between 4 and 31."""
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    def get_mongodb_settings(self) -> Dict[str, Any]:
        """
        Returns MongoDB connection settings.
        """
        return {
            "url": self.MONGODB_URL.get_secret_value(),
            "db_name": self.MONGODB_DB_NAME,
        }

    def get_signing_secret(self) -> Optional[str]:
        """Returns the raw signing secret, or None when unconfigured."""
        if self.JWT_SECRET is None:
            return None
        return self.JWT_SECRET.get_secret_value() or None

@lru_cache()
def get_settings() -> Settings:
    """
    Returns cached settings instance.
    Uses lru_cache to prevent multiple environment variable reads.
    """
    return Settings()

# Export settings
__all__ = ['Settings', 'get_settings', 'CONFIG_VERSION', 'SUPPORTED_ALGORITHMS']
