"""Core functionality for systemd unit management."""

from .config_manager import ConfigManager
from .errors import (CommandExecutionError, FilesystemError, UnexpectedOutputError, UnitctlError,
                     UnitNotFoundError)
from .locator import UnitLocator
from .runner import CommandResult, CommandRunner, SystemctlRunner
from .service_manager import ServiceManager

__all__ = [
    "CommandExecutionError",
    "CommandResult",
    "CommandRunner",
    "ConfigManager",
    "FilesystemError",
    "ServiceManager",
    "SystemctlRunner",
    "UnexpectedOutputError",
    "UnitLocator",
    "UnitNotFoundError",
    "UnitctlError",
]
