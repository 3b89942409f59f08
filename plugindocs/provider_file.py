"""Checks applied to a single provider documentation file."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from plugindocs.directory import CheckError
from plugindocs.file_extension import file_extension_check
from plugindocs.files import FileOptions, file_size_check
from plugindocs.frontmatter import FrontMatterCheck, FrontMatterData, FrontMatterOptions

logger = logging.getLogger(__name__)


def _from_slash(path: str) -> str:
    return path.replace("/", os.sep)


@dataclass
class ProviderFileOptions:
    """Options for ProviderFileCheck."""

    file_options: FileOptions = field(default_factory=FileOptions)
    front_matter: FrontMatterOptions = field(default_factory=FrontMatterOptions)
    valid_extensions: Sequence[str] = ()


class ProviderFileCheck:
    """Checks extension, size and frontmatter of files under a provider directory."""

    def __init__(
        self,
        provider_dir: str | os.PathLike[str],
        options: Optional[ProviderFileOptions] = None,
    ) -> None:
        self.provider_dir = provider_dir
        self.options = options if options is not None else ProviderFileOptions()
        if self.options.file_options is None:
            self.options.file_options = FileOptions()
        if self.options.front_matter is None:
            self.options.front_matter = FrontMatterOptions()

    def run(self, path: str) -> FrontMatterData:
        """Check the file at path, relative to the provider directory.

        Returns the parsed frontmatter; raises CheckError naming the file and
        the failed check otherwise.
        """
        full_path = self.options.file_options.full_path(path)
        logger.debug("Checking file: %s", full_path)
        shown = _from_slash(path)

        try:
            file_extension_check(path, self.options.valid_extensions)
        except CheckError as err:
            raise CheckError(f"{shown}: error checking file extension: {err}") from err

        try:
            file_size_check(self.provider_dir, path)
        except (CheckError, OSError) as err:
            raise CheckError(f"{shown}: error checking file size: {err}") from err

        try:
            with open(os.path.join(self.provider_dir, path), "rb") as handle:
                content = handle.read()
        except OSError as err:
            raise CheckError(f"{shown}: error reading file: {err}") from err

        try:
            return FrontMatterCheck(self.options.front_matter).run(content)
        except CheckError as err:
            raise CheckError(f"{shown}: error checking file frontmatter: {err}") from err