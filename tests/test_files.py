import os

import pytest

from plugindocs.directory import REGISTRY_MAXIMUM_SIZE_OF_FILE, CheckError
from plugindocs.files import FileOptions, file_size_check


def _write(tmp_path, size):
    (tmp_path / "file.md").write_bytes(b"\0" * size)
    return tmp_path


def test_file_size_under_limit(tmp_path):
    _write(tmp_path, REGISTRY_MAXIMUM_SIZE_OF_FILE - 1)
    assert file_size_check(tmp_path, "file.md") is None


@pytest.mark.parametrize("delta", [0, 1])
def test_file_size_on_or_over_limit(tmp_path, delta):
    size = REGISTRY_MAXIMUM_SIZE_OF_FILE + delta
    _write(tmp_path, size)
    with pytest.raises(CheckError) as excinfo:
        file_size_check(tmp_path, "file.md")
    assert str(excinfo.value) == (
        "exceeded maximum (500000) size of documentation file for "
        f"Terraform Registry: {size}"
    )


def test_file_size_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_size_check(tmp_path, "missing.md")


def test_full_path_without_base_path():
    path = os.path.join("docs", "resources", "thing.md")
    assert FileOptions().full_path(path) == path


def test_full_path_with_base_path():
    options = FileOptions(base_path=os.path.normpath("/full/path/to"))
    path = os.path.join("docs", "resources", "thing.md")
    assert options.full_path(path) == os.path.normpath(
        "/full/path/to/docs/resources/thing.md"
    )