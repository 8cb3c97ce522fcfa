"""Data models for systemd service units."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.service_manager import ServiceManager


class ActiveState(Enum):
    """Enumeration of states reported by `systemctl is-active`."""

    ACTIVE = "active"
    RELOADING = "reloading"
    INACTIVE = "inactive"
    FAILED = "failed"
    ACTIVATING = "activating"
    DEACTIVATING = "deactivating"
    MAINTENANCE = "maintenance"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, status_str: str) -> 'ActiveState':
        """Convert a string to ActiveState enum.

        Args:
            status_str: Status string from systemctl

        Returns:
            ActiveState enum value, UNKNOWN for anything unrecognised
        """
        try:
            return cls(status_str.strip().lower())
        except ValueError:
            return cls.UNKNOWN


class EnabledState(Enum):
    """Enumeration of states reported by `systemctl is-enabled`."""

    ENABLED = "enabled"
    ENABLED_RUNTIME = "enabled-runtime"
    LINKED = "linked"
    LINKED_RUNTIME = "linked-runtime"
    ALIAS = "alias"
    MASKED = "masked"
    MASKED_RUNTIME = "masked-runtime"
    STATIC = "static"
    INDIRECT = "indirect"
    DISABLED = "disabled"
    GENERATED = "generated"
    TRANSIENT = "transient"
    BAD = "bad"
    NOT_FOUND = "not-found"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, status_str: str) -> 'EnabledState':
        """Convert a string to EnabledState enum.

        Args:
            status_str: Status string from systemctl

        Returns:
            EnabledState enum value, UNKNOWN for anything unrecognised
        """
        try:
            return cls(status_str.strip().lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class ServiceInfo:
    """Point-in-time state of a unit.

    Attributes:
        name: Systemd unit name
        active: Whether the unit was active when queried
        enabled: Whether the unit was enabled when queried
    """

    name: str
    active: bool
    enabled: bool


@dataclass(frozen=True)
class ServiceHandle:
    """A unit whose definition file was found on disk.

    Handles are obtained from `ServiceManager.resolve` (or `unitctl.unit`).
    Every method queries or changes live system state through the manager
    that resolved the handle; nothing is cached.

    Attributes:
        name: Systemd unit name (e.g., 'nginx.service')
    """

    name: str
    manager: "ServiceManager" = field(compare=False, repr=False)

    def is_active(self) -> bool:
        """Check if the unit is running.

        Returns:
            True for `active`, False for `inactive`

        Raises:
            CommandExecutionError: systemctl failed
            UnexpectedOutputError: systemctl reported any other state
        """
        return self.manager.is_active(self.name)

    def is_enabled(self) -> bool:
        """Check if the unit is enabled.

        Returns:
            True for `enabled`, False for `disabled`

        Raises:
            CommandExecutionError: systemctl failed
            UnexpectedOutputError: systemctl reported any other state
        """
        return self.manager.is_enabled(self.name)

    def active_state(self) -> ActiveState:
        """Get the unit's active state, including intermediate states."""
        return self.manager.active_state(self.name)

    def enabled_state(self) -> EnabledState:
        """Get the unit's enablement state, including static, masked etc."""
        return self.manager.enabled_state(self.name)

    def snapshot(self) -> ServiceInfo:
        """Query both states and record them in a ServiceInfo."""
        return ServiceInfo(name=self.name, active=self.is_active(), enabled=self.is_enabled())

    def enable(self) -> None:
        """Enable the unit to start on boot."""
        self.manager.execute_action("enable", self.name)

    def disable(self) -> None:
        """Disable the unit from starting on boot."""
        self.manager.execute_action("disable", self.name)

    def start(self) -> None:
        self.manager.execute_action("start", self.name)

    def stop(self) -> None:
        self.manager.execute_action("stop", self.name)

    def restart(self) -> None:
        self.manager.execute_action("restart", self.name)

    def reload(self) -> None:
        """Ask the unit to reload its configuration."""
        self.manager.execute_action("reload", self.name)
