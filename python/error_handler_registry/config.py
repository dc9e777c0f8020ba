"""Environment-driven configuration for the native hook installer."""

import os
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .constants import ENV_VAR_PREFIX
from .exceptions import ConfigurationError
from .logging_config import get_logger

logger = get_logger(__name__)


class RegistryConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    capture_warnings: bool = Field(
        default=True,
        description="Route warnings.showwarning into the error category",
    )
    capture_thread_exceptions: bool = Field(
        default=False,
        description="Also route threading.excepthook into the exception category",
    )

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Create RegistryConfig from environment variables.

        Returns:
            RegistryConfig instance with values loaded from ERROR_HANDLER_REGISTRY_* env vars

        Raises:
            ConfigurationError: If an environment value cannot be parsed
        """
        try:
            return cls()
        except ValidationError as e:
            logger.error(f"Configuration validation failed: {e}")
            raise ConfigurationError(str(e)) from e

    @model_validator(mode="before")
    @classmethod
    def load_from_env_vars(cls, data: Any) -> Dict[str, Any]:
        """Load configuration from environment variables.

        Extracts ERROR_HANDLER_REGISTRY_* environment variables and merges with any
        provided data. Provided data takes precedence over environment variables.
        Unknown variables with the prefix (the log level, for one) are ignored.
        """
        env_config = {
            key[len(ENV_VAR_PREFIX) :].lower(): val.strip()
            for key, val in os.environ.items()
            if key.startswith(ENV_VAR_PREFIX)
        }

        if isinstance(data, dict):
            return {**env_config, **data}
        return env_config
