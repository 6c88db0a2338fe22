"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Catalog storage
    CATALOG_BACKEND: str = os.getenv("CATALOG_BACKEND", "memory").lower()
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    CATALOG_KEY_PREFIX: str = os.getenv("CATALOG_KEY_PREFIX", "catalog:")
    SEED_CATALOG: bool = os.getenv("SEED_CATALOG", "true").lower() == "true"

    # Query defaults
    DEFAULT_RADIUS_KM: float = float(os.getenv("DEFAULT_RADIUS_KM", "25"))

    # Mock identity used until real authentication is wired in
    DEFAULT_PROVIDER_ID: int = int(os.getenv("DEFAULT_PROVIDER_ID", "1"))
    DEFAULT_PROVIDER_NAME: str = os.getenv("DEFAULT_PROVIDER_NAME", "Current Provider")
    DEFAULT_REVIEWER_ID: int = int(os.getenv("DEFAULT_REVIEWER_ID", "1"))
    DEFAULT_REVIEWER_NAME: str = os.getenv("DEFAULT_REVIEWER_NAME", "You")

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.
        """
        return self.ENVIRONMENT.lower() == "production"

    @property
    def uses_redis(self) -> bool:
        """Return True when the catalog is backed by Redis."""
        return self.CATALOG_BACKEND == "redis"

    def __init__(self):
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        logging.basicConfig(level=self.log_level)
        self.logger = logging.getLogger(__name__)

        self.logger.debug(
            f"Config initialized with environment={self.ENVIRONMENT}, "
            f"catalog_backend={self.CATALOG_BACKEND}, log_level={self.log_level}"
        )


# Create a global settings instance for import
settings = Settings()
