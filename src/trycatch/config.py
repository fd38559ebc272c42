"""
Configuration for the trycatch package.
"""

from typing import Final

# --- Logging ---
LOGGER_NAME: Final[str] = "trycatch"

# --- Runtime Type Checking ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "TRYCATCH_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "TRYCATCH_BEARTYPE_ALL"
ENV_ENABLED: Final[str] = "1"

__all__ = [
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "ENV_ENABLED",
    "LOGGER_NAME",
]
