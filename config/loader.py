"""Environment-backed settings for nso-auth

A variable set in the process environment wins over the same variable in
``.env``. A variable found in neither keeps the default given in
``settings.py``. Values that cannot be used are logged and replaced by
that default, so a typo in ``.env`` never stops the CLI from starting.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigLoader:
    """Reads nso-auth settings from ``NSO_*`` style environment variables"""

    def __init__(self, env_path: Optional[str] = None):
        """Load ``env_path`` (default ``./.env``) without overriding the environment"""
        env_file = Path(env_path or ".env")
        if load_dotenv(dotenv_path=env_file, override=False):
            logger.debug(f"Read settings from {env_file}")

    def _raw(self, env_var: str) -> Optional[str]:
        value = os.getenv(env_var)
        if value is None or not value.strip():
            return None
        return value.strip()

    def text(self, env_var: str, default: str) -> str:
        """String setting such as a URL or version tag"""
        value = self._raw(env_var)
        return default if value is None else value

    def seconds(self, env_var: str, default: float) -> float:
        """Positive duration in seconds"""
        value = self._raw(env_var)
        if value is None:
            return default
        try:
            seconds = float(value)
        except ValueError:
            seconds = 0.0
        if not seconds > 0:
            logger.warning(f"{env_var}={value!r} is not a positive number of seconds, keeping {default}")
            return default
        return seconds

    def log_level(self, env_var: str, default: str) -> str:
        """Name of a standard logging level, upper-cased"""
        value = self._raw(env_var)
        if value is None:
            return default
        if value.upper() not in LOG_LEVELS:
            logger.warning(f"{env_var}={value!r} is not a logging level, keeping {default}")
            return default
        return value.upper()


@lru_cache(maxsize=None)
def get_config_loader() -> ConfigLoader:
    """Process-wide ConfigLoader reading ``./.env``"""
    return ConfigLoader()
