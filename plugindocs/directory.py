"""Checks on the directory layout of provider documentation."""

from __future__ import annotations

import logging
import os
import posixpath
from collections.abc import Iterable

logger = logging.getLogger(__name__)

CDKTF_INDEX_DIRECTORY = "cdktf"

LEGACY_INDEX_DIRECTORY = "website/docs"
LEGACY_DATA_SOURCES_DIRECTORY = "d"
LEGACY_EPHEMERAL_RESOURCES_DIRECTORY = "ephemeral-resources"
LEGACY_GUIDES_DIRECTORY = "guides"
LEGACY_RESOURCES_DIRECTORY = "r"
LEGACY_FUNCTIONS_DIRECTORY = "functions"

REGISTRY_INDEX_DIRECTORY = "docs"
REGISTRY_DATA_SOURCES_DIRECTORY = "data-sources"
REGISTRY_EPHEMERAL_RESOURCES_DIRECTORY = "ephemeral-resources"
REGISTRY_GUIDES_DIRECTORY = "guides"
REGISTRY_RESOURCES_DIRECTORY = "resources"
REGISTRY_FUNCTIONS_DIRECTORY = "functions"

# Terraform Registry storage limits.
REGISTRY_MAXIMUM_NUMBER_OF_FILES = 2000
REGISTRY_MAXIMUM_SIZE_OF_FILE = 500_000  # 500KB

VALID_LEGACY_DIRECTORIES: tuple[str, ...] = (
    LEGACY_INDEX_DIRECTORY,
    f"{LEGACY_INDEX_DIRECTORY}/{LEGACY_DATA_SOURCES_DIRECTORY}",
    f"{LEGACY_INDEX_DIRECTORY}/{LEGACY_EPHEMERAL_RESOURCES_DIRECTORY}",
    f"{LEGACY_INDEX_DIRECTORY}/{LEGACY_GUIDES_DIRECTORY}",
    f"{LEGACY_INDEX_DIRECTORY}/{LEGACY_RESOURCES_DIRECTORY}",
    f"{LEGACY_INDEX_DIRECTORY}/{LEGACY_FUNCTIONS_DIRECTORY}",
)

VALID_REGISTRY_DIRECTORIES: tuple[str, ...] = (
    REGISTRY_INDEX_DIRECTORY,
    f"{REGISTRY_INDEX_DIRECTORY}/{REGISTRY_DATA_SOURCES_DIRECTORY}",
    f"{REGISTRY_INDEX_DIRECTORY}/{REGISTRY_EPHEMERAL_RESOURCES_DIRECTORY}",
    f"{REGISTRY_INDEX_DIRECTORY}/{REGISTRY_GUIDES_DIRECTORY}",
    f"{REGISTRY_INDEX_DIRECTORY}/{REGISTRY_RESOURCES_DIRECTORY}",
    f"{REGISTRY_INDEX_DIRECTORY}/{REGISTRY_FUNCTIONS_DIRECTORY}",
)

VALID_CDKTF_LANGUAGES: tuple[str, ...] = (
    "csharp",
    "go",
    "java",
    "python",
    "typescript",
)

VALID_LEGACY_SUBDIRECTORIES: tuple[str, ...] = (
    LEGACY_INDEX_DIRECTORY,
    LEGACY_DATA_SOURCES_DIRECTORY,
    LEGACY_EPHEMERAL_RESOURCES_DIRECTORY,
    LEGACY_GUIDES_DIRECTORY,
    LEGACY_RESOURCES_DIRECTORY,
)

VALID_REGISTRY_SUBDIRECTORIES: tuple[str, ...] = (
    REGISTRY_INDEX_DIRECTORY,
    REGISTRY_DATA_SOURCES_DIRECTORY,
    REGISTRY_EPHEMERAL_RESOURCES_DIRECTORY,
    REGISTRY_GUIDES_DIRECTORY,
    REGISTRY_RESOURCES_DIRECTORY,
)

MIXED_DIRECTORIES_MESSAGE = (
    "mixed Terraform Provider documentation directory layouts found, "
    "must use only legacy or registry layout"
)


class CheckError(Exception):
    """Raised when provider documentation fails a check."""


def _from_slash(path: str) -> str:
    return path.replace("/", os.sep)


def _cdktf_directories() -> frozenset[str]:
    dirs = {
        f"{LEGACY_INDEX_DIRECTORY}/{CDKTF_INDEX_DIRECTORY}",
        f"{REGISTRY_INDEX_DIRECTORY}/{CDKTF_INDEX_DIRECTORY}",
    }
    for language in VALID_CDKTF_LANGUAGES:
        legacy_base = f"{LEGACY_INDEX_DIRECTORY}/{CDKTF_INDEX_DIRECTORY}/{language}"
        registry_base = f"{REGISTRY_INDEX_DIRECTORY}/{CDKTF_INDEX_DIRECTORY}/{language}"
        dirs.add(legacy_base)
        dirs.add(registry_base)
        dirs.update(f"{legacy_base}/{sub}" for sub in VALID_LEGACY_SUBDIRECTORIES)
        dirs.update(f"{registry_base}/{sub}" for sub in VALID_REGISTRY_SUBDIRECTORIES)
    return frozenset(dirs)


_VALID_CDKTF_DIRECTORIES = _cdktf_directories()


def invalid_directories_check(dir_path: str) -> None:
    """Raise CheckError unless dir_path is a known documentation directory."""
    if (
        is_valid_registry_directory(dir_path)
        or is_valid_legacy_directory(dir_path)
        or is_valid_cdktf_directory(dir_path)
    ):
        return
    raise CheckError(
        "invalid Terraform Provider documentation directory found: "
        f"{_from_slash(dir_path)}"
    )


def mixed_directories_check(doc_files: Iterable[str]) -> None:
    """Raise CheckError if the files use both legacy and registry layouts."""
    legacy_found = False
    registry_found = False

    for file in doc_files:
        directory = posixpath.dirname(file) or "."
        logger.debug("Found directory: %s", directory)

        # docs/ itself may hold other files alongside a legacy layout.
        if is_valid_registry_directory(directory) and directory != REGISTRY_INDEX_DIRECTORY:
            registry_found = True
            if legacy_found:
                logger.debug("Found mixed directories")
                raise CheckError(MIXED_DIRECTORIES_MESSAGE)

        if is_valid_legacy_directory(directory):
            legacy_found = True
            if registry_found:
                logger.debug("Found mixed directories")
                raise CheckError(MIXED_DIRECTORIES_MESSAGE)


def is_valid_legacy_directory(directory: str) -> bool:
    """Whether directory is one of the legacy website layout directories."""
    return directory in VALID_LEGACY_DIRECTORIES


def is_valid_registry_directory(directory: str) -> bool:
    """Whether directory is one of the registry layout directories."""
    return directory in VALID_REGISTRY_DIRECTORIES


def is_valid_cdktf_directory(directory: str) -> bool:
    """Whether directory is a CDKTF documentation directory."""
    return directory in _VALID_CDKTF_DIRECTORIES