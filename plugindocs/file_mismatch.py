"""Checks that documentation files match the provider schema."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from plugindocs.directory import CheckError
from plugindocs.file_extension import trim_file_extension
from plugindocs.files import FileOptions

logger = logging.getLogger(__name__)


@dataclass
class ProviderSchema:
    """The parts of a provider schema that documentation files are matched against."""

    resource_schemas: dict[str, Any] = field(default_factory=dict)
    data_source_schemas: dict[str, Any] = field(default_factory=dict)
    ephemeral_resource_schemas: dict[str, Any] = field(default_factory=dict)
    functions: dict[str, Any] = field(default_factory=dict)


@dataclass
class FileMismatchOptions:
    """Options for FileMismatchCheck.

    Entries may be plain file names or objects with a ``name`` attribute,
    such as ``os.DirEntry`` or ``pathlib.Path``.
    """

    file_options: FileOptions = field(default_factory=FileOptions)
    ignore_file_mismatch: Sequence[str] = ()
    ignore_file_missing: Sequence[str] = ()
    provider_short_name: str = ""
    datasource_entries: Optional[Sequence[Any]] = None
    resource_entries: Optional[Sequence[Any]] = None
    function_entries: Optional[Sequence[Any]] = None
    ephemeral_resource_entries: Optional[Sequence[Any]] = None
    schema: Optional[ProviderSchema] = None


def _entry_name(entry: Any) -> str:
    name = getattr(entry, "name", None)
    if isinstance(name, str):
        return name
    return os.fspath(entry)


def _collect(messages: list[str], check: Callable[..., None], *args: Any) -> None:
    try:
        check(*args)
    except CheckError as err:
        messages.append(str(err))


class FileMismatchCheck:
    """Finds documentation files that are missing or have no matching schema entry."""

    def __init__(self, options: Optional[FileMismatchOptions] = None) -> None:
        self.options = options if options is not None else FileMismatchOptions()
        if self.options.file_options is None:
            self.options.file_options = FileOptions()

    def run(self) -> None:
        """Raise CheckError listing every mismatch found."""
        opts = self.options
        schema = opts.schema
        if schema is None:
            logger.debug("Skipping file mismatch checks due to missing provider schema")
            return

        messages: list[str] = []
        if opts.resource_entries is not None:
            _collect(
                messages,
                self.resource_file_mismatch_check,
                opts.resource_entries,
                "resource",
                schema.resource_schemas,
            )
        if opts.datasource_entries is not None:
            _collect(
                messages,
                self.resource_file_mismatch_check,
                opts.datasource_entries,
                "datasource",
                schema.data_source_schemas,
            )
        if opts.function_entries is not None:
            _collect(
                messages,
                self.function_file_mismatch_check,
                opts.function_entries,
                schema.functions,
            )
        if opts.ephemeral_resource_entries is not None:
            _collect(
                messages,
                self.resource_file_mismatch_check,
                opts.ephemeral_resource_entries,
                "ephemeral resource",
                schema.ephemeral_resource_schemas,
            )

        if messages:
            raise CheckError("\n".join(messages))

    def resource_file_mismatch_check(
        self, files: Sequence[Any], resource_type: str, schemas: Mapping[str, Any]
    ) -> None:
        """Raise CheckError for extraneous or missing resource documentation files."""
        if not files:
            logger.debug(
                "Skipping %s file mismatch checks due to missing file list", resource_type
            )
            return
        if not schemas:
            logger.debug(
                "Skipping %s file mismatch checks due to missing schemas", resource_type
            )
            return

        provider = self.options.provider_short_name
        extra_files = []
        for entry in files:
            name = _entry_name(entry)
            logger.debug("Found file %s", name)
            if file_has_resource(schemas, provider, name) or self.ignore_file_mismatch(name):
                continue
            logger.debug("Found extraneous file %s", name)
            extra_files.append(name)

        missing_files = []
        for resource_name in resource_names(schemas):
            logger.debug("Found %s %s", resource_type, resource_name)
            if resource_has_file(files, provider, resource_name):
                continue
            if self.ignore_file_missing(resource_name):
                continue
            logger.debug("Missing file for %s %s", resource_type, resource_name)
            missing_files.append(resource_name)

        messages = [
            f"matching {resource_type} for documentation file ({name}) not found, "
            "file is extraneous or incorrectly named"
            for name in extra_files
        ]
        messages.extend(
            f"missing documentation file for {resource_type}: {name}"
            for name in missing_files
        )
        if messages:
            raise CheckError("\n".join(messages))

    def function_file_mismatch_check(
        self, files: Sequence[Any], functions: Mapping[str, Any]
    ) -> None:
        """Raise CheckError for extraneous or missing function documentation files."""
        if not files:
            logger.debug("Skipping function file mismatch checks due to missing file list")
            return
        if not functions:
            logger.debug("Skipping function file mismatch checks due to missing schemas")
            return

        extra_files = [
            name
            for name in map(_entry_name, files)
            if not file_has_function(functions, name) and not self.ignore_file_mismatch(name)
        ]
        missing_files = [
            name
            for name in function_names(functions)
            if not function_has_file(files, name) and not self.ignore_file_missing(name)
        ]

        messages = [
            f"matching function for documentation file ({name}) not found, "
            "file is extraneous or incorrectly named"
            for name in extra_files
        ]
        messages.extend(
            f"missing documentation file for function: {name}" for name in missing_files
        )
        if messages:
            raise CheckError("\n".join(messages))

    def ignore_file_mismatch(self, file: str) -> bool:
        """Whether an extraneous file is on the ignore list."""
        with_provider = file_resource_name_with_provider(
            self.options.provider_short_name, file
        )
        bare = trim_file_extension(file)
        # A resource type may be named the same as the provider itself.
        return any(
            ignored in (with_provider, bare) for ignored in self.options.ignore_file_mismatch
        )

    def ignore_file_missing(self, resource_name: str) -> bool:
        """Whether a missing file for resource_name is on the ignore list."""
        return resource_name in self.options.ignore_file_missing


def file_has_resource(
    schema_resources: Mapping[str, Any], provider_name: str, file: str
) -> bool:
    """Whether the file documents a resource present in schema_resources."""
    if file_resource_name_with_provider(provider_name, file) in schema_resources:
        return True
    # A resource type may be named the same as the provider itself.
    return trim_file_extension(file) in schema_resources


def file_has_function(functions: Mapping[str, Any], file: str) -> bool:
    """Whether the file documents a function present in functions."""
    return trim_file_extension(file) in functions


def file_resource_name_with_provider(provider_name: str, file_name: str) -> str:
    """Return the resource type name the file documents for the given provider."""
    return f"{provider_name}_{trim_file_extension(file_name)}"


def resource_has_file(files: Sequence[Any], provider_name: str, resource_name: str) -> bool:
    """Whether any of the files documents resource_name."""
    for entry in files:
        name = _entry_name(entry)
        if file_resource_name_with_provider(provider_name, name) == resource_name:
            return True
        if trim_file_extension(name) == resource_name:
            return True
    return False


def function_has_file(files: Sequence[Any], function_name: str) -> bool:
    """Whether any of the files documents function_name."""
    return any(trim_file_extension(_entry_name(entry)) == function_name for entry in files)


def resource_names(resources: Mapping[str, Any]) -> list[str]:
    """Return the resource names, sorted."""
    return sorted(resources)


def function_names(functions: Mapping[str, Any]) -> list[str]:
    """Return the function names, sorted."""
    return sorted(functions)