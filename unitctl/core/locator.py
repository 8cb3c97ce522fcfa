"""Lookup of unit definition files in the systemd unit directories."""

import logging
import os
from typing import Iterable, Optional, Tuple

from .errors import FilesystemError
from ..utils.constants import UNIT_PATHS

logger = logging.getLogger(__name__)


class UnitLocator:
    """Decides whether a unit name is known to systemd by scanning unit directories."""

    def __init__(self, unit_paths: Iterable[str] = UNIT_PATHS):
        """Initialize the locator.

        Args:
            unit_paths: Directories to scan, in order
        """
        self.unit_paths: Tuple[str, ...] = tuple(unit_paths)

    def find(self, name: str) -> Optional[str]:
        """Find the first unit directory holding a file called `name`.

        Missing directories are skipped. Only the direct entries of each
        directory are compared, and the comparison is literal.

        Args:
            name: Unit name, e.g. 'nginx.service'

        Returns:
            The directory containing the unit, or None if no directory does

        Raises:
            FilesystemError: An existing directory could not be examined or listed
        """
        for unit_path in self.unit_paths:
            try:
                os.stat(unit_path)
            except FileNotFoundError:
                continue
            except OSError as e:
                raise FilesystemError(unit_path, e) from e

            try:
                entries = os.listdir(unit_path)
            except OSError as e:
                raise FilesystemError(unit_path, e) from e

            if name in entries:
                logger.debug(f"Found unit {name} in {unit_path}")
                return unit_path

        logger.debug(f"Unit {name} not found in {len(self.unit_paths)} unit directories")
        return None

    def exists(self, name: str) -> bool:
        """Check whether a unit file called `name` exists in any unit directory.

        Raises:
            FilesystemError: An existing directory could not be examined or listed
        """
        return self.find(name) is not None
