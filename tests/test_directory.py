import os

import pytest

from plugindocs.directory import (
    CheckError,
    invalid_directories_check,
    is_valid_cdktf_directory,
    is_valid_legacy_directory,
    is_valid_registry_directory,
    mixed_directories_check,
)

# File lists are those the documentation glob selects from each source tree.
MIXED_CASES = {
    "valid mixed directories": (["website/docs/index.md"], False),
    "valid mixed directories - cdktf": (["website/docs/index.md"], False),
    "invalid mixed directories - registry data source": (
        ["docs/data-sources/invalid.md", "website/docs/index.md"],
        True,
    ),
    "invalid mixed directories - registry ephemeral resource": (
        ["docs/ephemeral-resources/invalid.md", "website/docs/index.md"],
        True,
    ),
    "invalid mixed directories - registry resource": (
        ["docs/resources/invalid.md", "website/docs/index.md"],
        True,
    ),
    "invalid mixed directories - registry guide": (
        ["docs/guides/invalid.md", "website/docs/index.md"],
        True,
    ),
    "invalid mixed directories - registry function": (
        ["docs/functions/invalid.md", "website/docs/index.md"],
        True,
    ),
    "invalid mixed directories - legacy data source": (
        ["docs/resources/thing.md", "website/docs/d/invalid.html.markdown"],
        True,
    ),
    "invalid mixed directories - legacy ephemeral resource": (
        [
            "docs/resources/thing.md",
            "website/docs/ephemeral-resources/invalid.html.markdown",
        ],
        True,
    ),
    "invalid mixed directories - legacy resource": (
        ["docs/resources/thing.md", "website/docs/r/invalid.html.markdown"],
        True,
    ),
    "invalid mixed directories - legacy guide": (
        ["docs/resources/thing.md", "website/docs/guides/invalid.html.markdown"],
        True,
    ),
    "invalid mixed directories - legacy function": (
        ["docs/resources/thing.md", "website/docs/functions/invalid.html.markdown"],
        True,
    ),
    "invalid mixed directories - legacy index": (
        ["docs/resources/thing.md", "website/docs/index.html.markdown"],
        True,
    ),
}


@pytest.mark.parametrize("name", sorted(MIXED_CASES))
def test_mixed_directories_check(name):
    files, expect_error = MIXED_CASES[name]
    if expect_error:
        with pytest.raises(CheckError, match="mixed Terraform Provider"):
            mixed_directories_check(files)
    else:
        assert mixed_directories_check(files) is None


def test_mixed_directories_order_independent():
    files = ["website/docs/r/a.html.markdown", "docs/resources/b.md"]
    with pytest.raises(CheckError):
        mixed_directories_check(files)
    with pytest.raises(CheckError):
        mixed_directories_check(list(reversed(files)))


def test_docs_index_with_legacy_allowed():
    assert mixed_directories_check(["docs/index.md", "website/docs/r/a.md"]) is None


@pytest.mark.parametrize(
    "directory, expected",
    [
        ("website/docs", True),
        ("website/docs/r", True),
        ("website/docs/d", True),
        ("website/docs/functions", True),
        ("docs/resources", False),
        ("website", False),
    ],
)
def test_is_valid_legacy_directory(directory, expected):
    assert is_valid_legacy_directory(directory) is expected


@pytest.mark.parametrize(
    "directory, expected",
    [
        ("docs", True),
        ("docs/resources", True),
        ("docs/data-sources", True),
        ("docs/ephemeral-resources", True),
        ("docs/functions", True),
        ("docs/r", False),
        ("website/docs", False),
    ],
)
def test_is_valid_registry_directory(directory, expected):
    assert is_valid_registry_directory(directory) is expected


@pytest.mark.parametrize(
    "directory, expected",
    [
        ("docs/cdktf", True),
        ("website/docs/cdktf", True),
        ("docs/cdktf/python", True),
        ("docs/cdktf/typescript/resources", True),
        ("website/docs/cdktf/go/r", True),
        ("website/docs/cdktf/java/website/docs", True),
        ("docs/cdktf/rust", False),
        ("docs/cdktf/python/r", False),
        ("docs/cdktf/python/functions", False),
    ],
)
def test_is_valid_cdktf_directory(directory, expected):
    assert is_valid_cdktf_directory(directory) is expected


@pytest.mark.parametrize(
    "directory", ["docs", "website/docs/guides", "docs/cdktf/csharp/guides"]
)
def test_invalid_directories_check_accepts(directory):
    assert invalid_directories_check(directory) is None


def test_invalid_directories_check_rejects():
    with pytest.raises(CheckError) as excinfo:
        invalid_directories_check("docs/other")
    assert str(excinfo.value) == (
        "invalid Terraform Provider documentation directory found: "
        + os.path.join("docs", "other")
    )