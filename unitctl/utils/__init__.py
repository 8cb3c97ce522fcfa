"""Utility functions and constants."""

from .constants import *

__all__ = ["APP_NAME", "APP_VERSION", "CONFIG_DIR", "CONFIG_FILE", "SYSTEMCTL_PATH", "UNIT_PATHS"]
