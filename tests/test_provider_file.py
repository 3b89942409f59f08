import os

import pytest

from plugindocs.directory import REGISTRY_MAXIMUM_SIZE_OF_FILE, CheckError
from plugindocs.files import FileOptions
from plugindocs.frontmatter import FrontMatterOptions
from plugindocs.provider_file import ProviderFileCheck, ProviderFileOptions

VALID = "---\nsubcategory: Example Subcategory\npage_title: Example Page Title\n---\n\n# Body\n"


def _write(root, relative, data):
    target = root.joinpath(*relative.split("/"))
    target.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, bytes):
        target.write_bytes(data)
    else:
        target.write_text(data)
    return relative


def _options(**front):
    return ProviderFileOptions(
        front_matter=FrontMatterOptions(**front),
        valid_extensions=(".md",),
    )


def test_valid_file_returns_frontmatter(tmp_path):
    path = _write(tmp_path, "docs/resources/thing.md", VALID)
    data = ProviderFileCheck(tmp_path, _options()).run(path)
    assert data.subcategory == "Example Subcategory"
    assert data.page_title == "Example Page Title"


def test_invalid_extension(tmp_path):
    path = _write(tmp_path, "docs/resources/thing.txt", VALID)
    with pytest.raises(CheckError, match="error checking file extension") as info:
        ProviderFileCheck(tmp_path, _options()).run(path)
    assert str(info.value).startswith(os.path.join("docs", "resources", "thing.txt") + ":")


def test_default_options_accept_no_extension(tmp_path):
    path = _write(tmp_path, "docs/index.md", VALID)
    with pytest.raises(CheckError, match="error checking file extension"):
        ProviderFileCheck(tmp_path).run(path)


def test_file_at_size_limit(tmp_path):
    body = VALID.encode() + b"x" * REGISTRY_MAXIMUM_SIZE_OF_FILE
    path = _write(tmp_path, "docs/index.md", body)
    with pytest.raises(CheckError, match="error checking file size"):
        ProviderFileCheck(tmp_path, _options()).run(path)


def test_missing_file(tmp_path):
    with pytest.raises(CheckError, match="error checking file size"):
        ProviderFileCheck(tmp_path, _options()).run("docs/absent.md")


def test_missing_frontmatter(tmp_path):
    path = _write(tmp_path, "docs/index.md", "# Just markdown\n")
    with pytest.raises(CheckError, match="error checking file frontmatter: no frontmatter found"):
        ProviderFileCheck(tmp_path, _options()).run(path)


def test_frontmatter_options_are_applied(tmp_path):
    path = _write(tmp_path, "docs/index.md", "---\nsubcategory: Example Subcategory\n---\n")
    with pytest.raises(CheckError, match="missing required page_title"):
        ProviderFileCheck(tmp_path, _options(require_page_title=True)).run(path)


def test_disallowed_subcategory(tmp_path):
    path = _write(tmp_path, "docs/index.md", VALID)
    options = _options(allowed_subcategories=["Subcategory"])
    with pytest.raises(CheckError, match="not in the allowed list"):
        ProviderFileCheck(tmp_path, options).run(path)


def test_base_path_only_affects_reporting(tmp_path):
    path = _write(tmp_path, "docs/index.md", VALID)
    options = _options()
    options.file_options = FileOptions(base_path=os.path.join("elsewhere", "provider"))
    data = ProviderFileCheck(tmp_path, options).run(path)
    assert data.subcategory == "Example Subcategory"