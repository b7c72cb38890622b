"""
Configuration settings for Stubwright.

This module provides configuration management through environment variables
and programmatic configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class StubwrightConfig:
    """
    Library-wide settings.

    Environment Variables:
        STUBWRIGHT_DEFAULT_NAME: Label prefix for object doubles ("obj")
        STUBWRIGHT_FUNCTION_NAME: Default label for mock functions ("func")
        STUBWRIGHT_SHOW_INTERACTIONS: List recorded interactions in failure messages
        STUBWRIGHT_MAX_INTERACTIONS: Maximum number of interactions listed

    Example:
        >>> config = StubwrightConfig.from_env()
        >>> set_config(StubwrightConfig(show_interactions=False))
    """
    default_name: str = "obj"
    function_name: str = "func"
    show_interactions: bool = True
    max_interactions: int = 50

    @classmethod
    def from_env(cls) -> "StubwrightConfig":
        """Load configuration from environment variables."""
        config = cls(
            default_name=os.getenv("STUBWRIGHT_DEFAULT_NAME", "obj"),
            function_name=os.getenv("STUBWRIGHT_FUNCTION_NAME", "func"),
            show_interactions=_env_bool("STUBWRIGHT_SHOW_INTERACTIONS", True),
            max_interactions=int(os.getenv("STUBWRIGHT_MAX_INTERACTIONS", "50")),
        )
        logger.debug("Loaded configuration from environment: %s", config)
        return config


_config: StubwrightConfig | None = None


def get_config() -> StubwrightConfig:
    """Get the global configuration, loading it from the environment on first use."""
    global _config
    if _config is None:
        _config = StubwrightConfig.from_env()
    return _config


def set_config(config: StubwrightConfig | None) -> None:
    """Replace the global configuration; ``None`` reloads it from the environment."""
    global _config
    _config = config
