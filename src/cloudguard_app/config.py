import logging
import os
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Custom exception for configuration-related errors."""

    pass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration loaded from environment variables."""

    service_name: str
    environment: str
    log_level: str
    metrics_namespace: str

    @classmethod
    def load_from_env(cls) -> "AppConfig":
        """
        Loads configuration from environment variables, performing validation.
        Every variable is optional. Fails fast with a ConfigurationError if a
        value is present but invalid.
        """
        try:
            service_name = os.getenv("POWERTOOLS_SERVICE_NAME", "cloudguard-app").strip()
            if not service_name:
                raise ValueError("POWERTOOLS_SERVICE_NAME must not be empty.")

            environment = os.getenv("ENVIRONMENT", "dev").strip()
            if not environment:
                raise ValueError("ENVIRONMENT must not be empty.")

            metrics_namespace = os.getenv("METRICS_NAMESPACE", "CloudGuardApp").strip()
            if not metrics_namespace:
                raise ValueError("METRICS_NAMESPACE must not be empty.")

            log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
            # The handler must always emit its INFO line.
            allowed_log_levels = ["DEBUG", "INFO"]
            if log_level not in allowed_log_levels:
                raise ValueError(
                    f"LOG_LEVEL must be one of {allowed_log_levels}, not '{log_level}'"
                )

        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for an environment variable: {e}"
            ) from e

        return cls(
            service_name=service_name,
            environment=environment,
            log_level=log_level,
            metrics_namespace=metrics_namespace,
        )


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Loads the application configuration from environment variables.
    The result is cached, so the environment is only read once on the first call.
    """
    logger.debug("Loading application configuration from environment...")
    return AppConfig.load_from_env()
