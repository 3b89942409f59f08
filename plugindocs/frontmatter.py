"""YAML frontmatter checks for documentation files."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional, Union

import yaml

from plugindocs.directory import CheckError

_DELIMITER = "---"


@dataclass
class FrontMatterData:
    """The YAML frontmatter of a provider documentation file."""

    description: Optional[str] = None
    layout: Optional[str] = None
    page_title: Optional[str] = None
    sidebar_current: Optional[str] = None
    subcategory: Optional[str] = None


@dataclass
class FrontMatterOptions:
    """Which frontmatter fields are forbidden, required or restricted."""

    allowed_subcategories: Sequence[str] = ()
    no_layout: bool = False
    no_page_title: bool = False
    no_sidebar_current: bool = False
    no_subcategory: bool = False
    require_description: bool = False
    require_layout: bool = False
    require_page_title: bool = False


def extract_front_matter(src: Union[str, bytes]) -> Optional[str]:
    """Return the YAML text between the leading ``---`` lines, or None if there is none.

    Blank lines may precede the opening delimiter. Without a closing delimiter the
    frontmatter runs to the end of the document.
    """
    text = src.decode("utf-8") if isinstance(src, bytes) else src
    lines = text.splitlines()
    start = next((i for i, line in enumerate(lines) if line.strip()), None)
    if start is None or lines[start].rstrip() != _DELIMITER:
        return None
    body = []
    for line in lines[start + 1 :]:
        if line.rstrip() == _DELIMITER:
            break
        body.append(line)
    return "\n".join(body)


def _as_text(key: str, value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise CheckError(
            f"error parsing YAML frontmatter: field {key} must be a string, "
            f"not {type(value).__name__}"
        )
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _decode(front_matter: str) -> FrontMatterData:
    try:
        loaded = yaml.safe_load(front_matter)
    except yaml.YAMLError as err:
        raise CheckError(f"error parsing YAML frontmatter: {err}") from err
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise CheckError(
            "error parsing YAML frontmatter: expected a mapping, "
            f"not {type(loaded).__name__}"
        )
    return FrontMatterData(
        description=_as_text("description", loaded.get("description")),
        layout=_as_text("layout", loaded.get("layout")),
        page_title=_as_text("page_title", loaded.get("page_title")),
        sidebar_current=_as_text("sidebar_current", loaded.get("sidebar_current")),
        subcategory=_as_text("subcategory", loaded.get("subcategory")),
    )


class FrontMatterCheck:
    """Validates the frontmatter of a documentation file against its options."""

    def __init__(self, options: Optional[FrontMatterOptions] = None) -> None:
        self.options = options if options is not None else FrontMatterOptions()

    def run(self, src: Union[str, bytes]) -> FrontMatterData:
        """Return the parsed frontmatter, raising CheckError if it fails a check."""
        raw = extract_front_matter(src)
        if raw is None:
            raise CheckError("no frontmatter found")
        data = _decode(raw)
        opts = self.options

        if opts.no_layout and data.layout is not None:
            raise CheckError("YAML frontmatter should not contain layout")
        if opts.no_page_title and data.page_title is not None:
            raise CheckError("YAML frontmatter should not contain page_title")
        if opts.no_sidebar_current and data.sidebar_current is not None:
            raise CheckError("YAML frontmatter should not contain sidebar_current")
        if opts.no_subcategory and data.subcategory is not None:
            raise CheckError("YAML frontmatter should not contain subcategory")
        if opts.require_description and data.description is None:
            raise CheckError("YAML frontmatter missing required description")
        if opts.require_layout and data.layout is None:
            raise CheckError("YAML frontmatter missing required layout")
        if opts.require_page_title and data.page_title is None:
            raise CheckError("YAML frontmatter missing required page_title")
        if (
            opts.allowed_subcategories
            and data.subcategory is not None
            and data.subcategory not in opts.allowed_subcategories
        ):
            raise CheckError(
                f"YAML frontmatter contains a subcategory ({data.subcategory}) "
                "that is not in the allowed list"
            )
        return data