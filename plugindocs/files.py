"""File location and size checks."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from plugindocs.directory import REGISTRY_MAXIMUM_SIZE_OF_FILE, CheckError

logger = logging.getLogger(__name__)


@dataclass
class FileOptions:
    """Options shared by file checks."""

    base_path: str = ""

    def full_path(self, path: str) -> str:
        """Return path joined to the base path, if one is set."""
        if self.base_path:
            return os.path.normpath(os.path.join(self.base_path, path))
        return path


def file_size_check(provider_dir: str | os.PathLike[str], path: str) -> None:
    """Raise CheckError if the file is at or above the registry size limit.

    OSError propagates if the file cannot be examined.
    """
    size = os.stat(os.path.join(provider_dir, path)).st_size
    logger.debug(
        "File %s size: %d (limit: %d)", path, size, REGISTRY_MAXIMUM_SIZE_OF_FILE
    )
    if size >= REGISTRY_MAXIMUM_SIZE_OF_FILE:
        raise CheckError(
            f"exceeded maximum ({REGISTRY_MAXIMUM_SIZE_OF_FILE}) size of documentation "
            f"file for Terraform Registry: {size}"
        )