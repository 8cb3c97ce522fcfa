"""Exceptions raised by unit lookups and systemctl invocations."""

from typing import Optional, Sequence


class UnitctlError(Exception):
    """Base class for every error raised by unitctl."""


class FilesystemError(UnitctlError):
    """A unit directory exists but could not be listed.

    Attributes:
        path: Directory that failed to list
        error: Underlying OS error
    """

    def __init__(self, path: str, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"failed to read unit directory {path}: {error}")


class UnitNotFoundError(UnitctlError):
    """No unit directory holds a unit file with the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unit not exist: {name}")


class CommandExecutionError(UnitctlError):
    """systemctl could not be run, or exited with a failure status.

    Attributes:
        command: Command line that was run
        output: Combined stdout and stderr captured from the command
        error: Underlying execution error
    """

    def __init__(self, args: Sequence[str], output: str, error: Optional[BaseException]):
        self.command = list(args)
        self.output = output
        self.error = error
        super().__init__(f"failed to run systemctl: {output} {error}")


class UnexpectedOutputError(UnitctlError):
    """systemctl succeeded but printed a reply the query does not recognise."""

    def __init__(self, args: Sequence[str], output: str):
        self.command = list(args)
        self.output = output
        super().__init__(f"invalid response: {output}")
