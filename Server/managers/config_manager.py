"""
Version Check Service - Configuration Manager

Builds the service configuration from environment variables.
The environment is read on every call so each request sees the
current process configuration.
"""

import logging
import os
from typing import Dict, Mapping, Optional

from exceptions import ConfigurationError
from models.infrastructure import ServiceConfig

# Configure logging
logger = logging.getLogger(__name__)


# Default values for optional settings
DEFAULT_CONFIG = {
    "api_url": "https://api.github.com",
    "user_agent": "Version-Check-Service",
    "timeout": None  # No explicit timeout, requests waits indefinitely
}

# Environment variable for each configuration key
ENVIRONMENT_KEYS = {
    "repo_owner": "GITHUB_REPO_OWNER",
    "repo_name": "GITHUB_REPO_NAME",
    "token": "GITHUB_TOKEN",
    "api_url": "GITHUB_API_URL",
    "user_agent": "GITHUB_USER_AGENT",
    "timeout": "GITHUB_API_TIMEOUT"
}


class ConfigManager:
    """
    Reads service configuration from the environment.

    Responsibilities:
    - Map environment variables to ServiceConfig fields
    - Apply defaults for optional settings
    - Reject malformed optional settings
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize configuration manager.

        Args:
            environ: Mapping to read from, defaults to os.environ
        """
        self.environ = environ if environ is not None else os.environ

    def _Get(self, key: str) -> Optional[str]:
        """Return the environment value for a config key, empty strings as None"""
        value = self.environ.get(ENVIRONMENT_KEYS[key])
        return value or None

    def _GetTimeout(self) -> Optional[float]:
        raw = self._Get("timeout")
        if raw is None:
            return DEFAULT_CONFIG["timeout"]
        try:
            return float(raw)
        except ValueError:
            raise ConfigurationError(f"{ENVIRONMENT_KEYS['timeout']} must be a number of seconds, got '{raw}'")

    def LoadConfig(self) -> ServiceConfig:
        """
        Load configuration from the environment.

        Missing owner or repository name is not an error here; callers
        check ServiceConfig.is_configured.

        Returns:
            ServiceConfig for the current environment

        Raises:
            ConfigurationError: If an optional setting is malformed
        """
        config = ServiceConfig(
            repo_owner=self._Get("repo_owner"),
            repo_name=self._Get("repo_name"),
            token=self._Get("token"),
            api_url=(self._Get("api_url") or DEFAULT_CONFIG["api_url"]).rstrip("/"),
            user_agent=self._Get("user_agent") or DEFAULT_CONFIG["user_agent"],
            timeout=self._GetTimeout()
        )
        logger.debug(
            f"Loaded configuration: repository={config.repository}, api_url={config.api_url}, "
            f"token={'set' if config.token else 'not set'}"
        )
        return config

    def Describe(self) -> Dict[str, str]:
        """
        List configuration variables and whether each one is set.

        Token values are never included.

        Returns:
            Dict mapping environment variable name to "set" or "not set"
        """
        return {
            env_key: "set" if self.environ.get(env_key) else "not set"
            for env_key in ENVIRONMENT_KEYS.values()
        }


def GetConfigManager() -> ConfigManager:
    """
    FastAPI dependency returning a configuration manager bound to os.environ
    """
    return ConfigManager()
