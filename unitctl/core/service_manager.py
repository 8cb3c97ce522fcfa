"""Service manager for interacting with systemd via systemctl."""

import logging
import subprocess
from typing import List, Optional

from .errors import CommandExecutionError, UnexpectedOutputError, UnitNotFoundError
from .locator import UnitLocator
from .runner import CommandResult, CommandRunner, SystemctlRunner
from ..models.service import ActiveState, EnabledState, ServiceHandle
from ..utils.constants import (DEFAULT_NORMALIZE_OUTPUT, MUTATING_ACTIONS, OUTPUT_ACTIVE,
                               OUTPUT_DISABLED, OUTPUT_ENABLED, OUTPUT_INACTIVE)

logger = logging.getLogger(__name__)


class ServiceManager:
    """Manages systemd units via systemctl commands."""

    def __init__(
        self,
        locator: Optional[UnitLocator] = None,
        runner: Optional[CommandRunner] = None,
        normalize_output: bool = DEFAULT_NORMALIZE_OUTPUT
    ):
        """Initialize the service manager.

        Args:
            locator: UnitLocator used for existence checks
            runner: CommandRunner used to invoke systemctl
            normalize_output: Strip trailing whitespace from query replies before
                comparing them. Off by default, replies must then be exactly
                e.g. 'active\\n'.
        """
        self.locator = locator or UnitLocator()
        self.runner = runner or SystemctlRunner()
        self.normalize_output = normalize_output

    @classmethod
    def from_config(cls, config_manager) -> 'ServiceManager':
        """Build a service manager from a loaded ConfigManager.

        Args:
            config_manager: ConfigManager holding the settings

        Returns:
            ServiceManager instance
        """
        return cls(
            locator=UnitLocator(config_manager.unit_paths),
            runner=SystemctlRunner(config_manager.systemctl_path, config_manager.timeout),
            normalize_output=config_manager.normalize_output
        )

    def unit_exists(self, service_name: str) -> bool:
        """Check if a unit file exists in any unit directory.

        Raises:
            FilesystemError: A unit directory could not be listed
        """
        return self.locator.exists(service_name)

    def resolve(self, service_name: str) -> ServiceHandle:
        """Get a handle for an existing unit.

        Args:
            service_name: Name of the systemd unit

        Returns:
            ServiceHandle bound to this manager

        Raises:
            FilesystemError: A unit directory could not be listed
            UnitNotFoundError: No unit directory holds the unit
        """
        self._require_unit(service_name)
        return ServiceHandle(service_name, self)

    def is_active(self, service_name: str) -> bool:
        """Check if a unit is running.

        Args:
            service_name: Name of the systemd unit, not checked for existence

        Returns:
            True if systemctl replied 'active', False if it replied 'inactive'

        Raises:
            CommandExecutionError: systemctl could not run or exited non-zero
            UnexpectedOutputError: systemctl replied anything else
        """
        return self._query("is-active", service_name, OUTPUT_ACTIVE, OUTPUT_INACTIVE)

    def is_enabled(self, service_name: str) -> bool:
        """Check if a unit is enabled.

        Args:
            service_name: Name of the systemd unit, not checked for existence

        Returns:
            True if systemctl replied 'enabled', False if it replied 'disabled'

        Raises:
            CommandExecutionError: systemctl could not run or exited non-zero
            UnexpectedOutputError: systemctl replied anything else
        """
        return self._query("is-enabled", service_name, OUTPUT_ENABLED, OUTPUT_DISABLED)

    def active_state(self, service_name: str) -> ActiveState:
        """Get the active state of a unit.

        systemctl exits non-zero for every state other than active, so the
        exit status is ignored here and only the reply is parsed.

        Raises:
            CommandExecutionError: systemctl could not be run
        """
        result = self._run("is-active", service_name)
        return ActiveState.from_string(result.output)

    def enabled_state(self, service_name: str) -> EnabledState:
        """Get the enablement state of a unit.

        Raises:
            CommandExecutionError: systemctl could not be run
        """
        result = self._run("is-enabled", service_name)
        return EnabledState.from_string(result.output)

    def execute_action(self, action: str, service_name: str, check_exists: bool = False) -> None:
        """Execute a systemctl action (enable, disable, start, stop, restart, reload).

        Success is decided by the exit status alone; the output is only kept
        for the error message.

        Args:
            action: Systemctl action
            service_name: Name of the systemd unit
            check_exists: Look the unit up on disk before running systemctl

        Raises:
            ValueError: `action` is not a supported action
            FilesystemError: A unit directory could not be listed
            UnitNotFoundError: `check_exists` is set and the unit does not exist
            CommandExecutionError: systemctl could not run or exited non-zero
        """
        if action not in MUTATING_ACTIONS:
            raise ValueError(f"Invalid action: {action}. Must be one of {', '.join(MUTATING_ACTIONS)}")

        if check_exists:
            self._require_unit(service_name)

        result = self._run(action, service_name)
        self._check(result)
        logger.debug(f"Successfully ran {action} on {service_name}")

    def enable_service(self, service_name: str) -> None:
        """Enable an existing unit to start on boot."""
        self.execute_action("enable", service_name, check_exists=True)

    def disable_service(self, service_name: str) -> None:
        """Disable an existing unit from starting on boot."""
        self.execute_action("disable", service_name, check_exists=True)

    def start_service(self, service_name: str) -> None:
        """Start an existing unit."""
        self.execute_action("start", service_name, check_exists=True)

    def stop_service(self, service_name: str) -> None:
        """Stop an existing unit."""
        self.execute_action("stop", service_name, check_exists=True)

    def restart_service(self, service_name: str) -> None:
        """Restart an existing unit."""
        self.execute_action("restart", service_name, check_exists=True)

    def reload_service(self, service_name: str) -> None:
        """Reload the configuration of an existing unit."""
        self.execute_action("reload", service_name, check_exists=True)

    def _require_unit(self, service_name: str):
        if not self.locator.exists(service_name):
            raise UnitNotFoundError(service_name)

    def _query(self, subcommand: str, service_name: str, true_reply: str, false_reply: str) -> bool:
        result = self._run(subcommand, service_name)
        self._check(result)

        output = result.output
        if self.normalize_output:
            output = output.rstrip() + "\n"

        if output == true_reply:
            return True
        if output == false_reply:
            return False
        raise UnexpectedOutputError(result.args, result.output)

    def _run(self, subcommand: str, service_name: str) -> CommandResult:
        try:
            return self.runner.run(subcommand, service_name)
        except (OSError, subprocess.SubprocessError) as e:
            output = getattr(e, "output", None) or ""
            if isinstance(output, bytes):
                output = output.decode("utf-8", "replace")
            raise CommandExecutionError(self._command_line(subcommand, service_name), output, e) from e

    def _command_line(self, subcommand: str, service_name: str) -> List[str]:
        systemctl_path = getattr(self.runner, "systemctl_path", None)
        cmd = [subcommand, service_name]
        return [systemctl_path] + cmd if systemctl_path else cmd

    @staticmethod
    def _check(result: CommandResult):
        if not result.ok:
            error = subprocess.CalledProcessError(result.returncode, list(result.args), result.output)
            raise CommandExecutionError(result.args, result.output, error) from error
