"""Command runners that invoke systemctl for a single unit."""

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from ..utils.constants import DEFAULT_TIMEOUT, SYSTEMCTL_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one systemctl invocation.

    Attributes:
        args: Full command line that was run
        returncode: Exit status of the command
        output: Combined stdout and stderr
    """

    args: Tuple[str, ...]
    returncode: int
    output: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Runs `<subcommand> <unit_name>` against the service manager.

    Implementations raise OSError or subprocess.SubprocessError when the
    command cannot be executed at all. A non-zero exit is reported through
    the returned CommandResult, not raised.
    """

    def run(self, subcommand: str, unit_name: str) -> CommandResult:
        ...


class SystemctlRunner:
    """Runs the systemctl binary as a subprocess."""

    def __init__(self, systemctl_path: str = SYSTEMCTL_PATH, timeout: Optional[float] = DEFAULT_TIMEOUT):
        """Initialize the runner.

        Args:
            systemctl_path: Absolute path of the systemctl binary
            timeout: Seconds to wait for the command, or None to wait forever
        """
        self.systemctl_path = systemctl_path
        self.timeout = timeout

    def run(self, subcommand: str, unit_name: str) -> CommandResult:
        """Run systemctl and capture its combined output.

        Args:
            subcommand: Systemctl subcommand (is-active, start, ...)
            unit_name: Name of the systemd unit

        Returns:
            CommandResult with the exit status and combined output
        """
        cmd = (self.systemctl_path, subcommand, unit_name)
        logger.debug(f"Exec: {' '.join(cmd)}")

        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=self.timeout
        )
        logger.debug(f"{subcommand} {unit_name} exited with status {result.returncode}")
        return CommandResult(args=cmd, returncode=result.returncode, output=result.stdout or "")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.systemctl_path!r}, timeout={self.timeout!r})"
