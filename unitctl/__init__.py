"""Query and control systemd service units through systemctl."""

import logging

from .core import (CommandExecutionError, CommandResult, CommandRunner, ConfigManager,
                   FilesystemError, ServiceManager, SystemctlRunner, UnexpectedOutputError,
                   UnitctlError, UnitLocator, UnitNotFoundError)
from .models import ActiveState, EnabledState, ServiceHandle, ServiceInfo
from .services import (disable_service, enable_service, get_default_manager, is_active, is_enabled,
                       reload_service, restart_service, set_default_manager, start_service,
                       stop_service, unit, unit_exists)
from .utils.constants import APP_VERSION as __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ActiveState",
    "CommandExecutionError",
    "CommandResult",
    "CommandRunner",
    "ConfigManager",
    "EnabledState",
    "FilesystemError",
    "ServiceHandle",
    "ServiceInfo",
    "ServiceManager",
    "SystemctlRunner",
    "UnexpectedOutputError",
    "UnitLocator",
    "UnitNotFoundError",
    "UnitctlError",
    "disable_service",
    "enable_service",
    "get_default_manager",
    "is_active",
    "is_enabled",
    "reload_service",
    "restart_service",
    "set_default_manager",
    "start_service",
    "stop_service",
    "unit",
    "unit_exists",
]
