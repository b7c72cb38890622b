"""
Configuration module for Stubwright.
"""

from stubwright.config.settings import (
    StubwrightConfig,
    get_config,
    set_config,
)

__all__ = [
    "StubwrightConfig",
    "get_config",
    "set_config",
]
