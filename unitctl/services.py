"""Name-based shortcuts that act on a unit without holding a handle.

Example::

    import unitctl

    nm = unitctl.unit("NetworkManager.service")
    if not nm.is_active():
        nm.start()

    unitctl.restart_service("nginx.service")

The mutating shortcuts look the unit up on disk on every call and raise
UnitNotFoundError before systemctl is run. `is_active` and `is_enabled` do
not, and report whatever systemctl says about the name.
"""

import logging
from typing import Optional

from .core.config_manager import ConfigManager
from .core.service_manager import ServiceManager
from .models.service import ServiceHandle

logger = logging.getLogger(__name__)

_default_manager: Optional[ServiceManager] = None


def get_default_manager() -> ServiceManager:
    """Return the shared ServiceManager, building it from the user config on first use."""
    global _default_manager
    if _default_manager is None:
        config_manager = ConfigManager()
        config_manager.load_config()
        _default_manager = ServiceManager.from_config(config_manager)
        logger.debug(f"Created default service manager using {_default_manager.runner!r}")
    return _default_manager


def set_default_manager(manager: Optional[ServiceManager]):
    """Replace the shared ServiceManager. None rebuilds it from config on next use."""
    global _default_manager
    _default_manager = manager


def unit(name: str) -> ServiceHandle:
    """Get a handle for an existing unit, raising UnitNotFoundError otherwise."""
    return get_default_manager().resolve(name)


def unit_exists(name: str) -> bool:
    return get_default_manager().unit_exists(name)


def is_active(name: str) -> bool:
    return get_default_manager().is_active(name)


def is_enabled(name: str) -> bool:
    return get_default_manager().is_enabled(name)


def enable_service(name: str) -> None:
    """Enable the given unit."""
    get_default_manager().enable_service(name)


def disable_service(name: str) -> None:
    """Disable the given unit."""
    get_default_manager().disable_service(name)


def start_service(name: str) -> None:
    """Start the given unit."""
    get_default_manager().start_service(name)


def stop_service(name: str) -> None:
    """Stop the given unit."""
    get_default_manager().stop_service(name)


def restart_service(name: str) -> None:
    """Restart the given unit."""
    get_default_manager().restart_service(name)


def reload_service(name: str) -> None:
    """Reload the given unit."""
    get_default_manager().reload_service(name)
