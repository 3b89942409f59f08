"""File extension checks for documentation files."""

from __future__ import annotations

import os
from collections.abc import Sequence

from plugindocs.directory import CheckError

FILE_EXTENSION_HTML_MARKDOWN = ".html.markdown"
FILE_EXTENSION_HTML_MD = ".html.md"
FILE_EXTENSION_MARKDOWN = ".markdown"
FILE_EXTENSION_MD = ".md"

VALID_LEGACY_FILE_EXTENSIONS: tuple[str, ...] = (
    FILE_EXTENSION_HTML_MARKDOWN,
    FILE_EXTENSION_HTML_MD,
    FILE_EXTENSION_MARKDOWN,
    FILE_EXTENSION_MD,
)

VALID_REGISTRY_FILE_EXTENSIONS: tuple[str, ...] = (FILE_EXTENSION_MD,)


def file_extension_check(path: str, valid_extensions: Sequence[str]) -> None:
    """Raise CheckError unless path ends with one of valid_extensions."""
    if not file_path_ends_with_extension_from(path, valid_extensions):
        listed = " ".join(valid_extensions)
        raise CheckError(
            f"file does not end with a valid extension, valid extensions: [{listed}]"
        )


def file_path_ends_with_extension_from(path: str, valid_extensions: Sequence[str]) -> bool:
    """Whether path ends with any of valid_extensions."""
    return any(path.endswith(ext) for ext in valid_extensions)


def _base_name(path: str) -> str:
    if not path:
        return "."
    separators = os.sep + (os.altsep or "")
    stripped = path.rstrip(separators)
    if not stripped:
        return os.sep
    cut = max(stripped.rfind(sep) for sep in separators)
    return stripped[cut + 1 :]


def trim_file_extension(path: str) -> str:
    """Return the file name of path without any extensions, even multi-part ones."""
    filename = _base_name(path)
    if filename == ".":
        return ""
    dot_index = filename.find(".")
    if dot_index > 0:
        return filename[:dot_index]
    return filename