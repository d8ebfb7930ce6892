from __future__ import annotations

from pathlib import Path

import pytest

from fbc_core.catalog import (
    CatalogDecodeError,
    CatalogIOError,
    iter_catalog_files,
    list_packages,
    read_catalog_record,
)


def test_list_packages_returns_immediate_entries(tmp_path: Path) -> None:
    (tmp_path / "etcd" / "nested").mkdir(parents=True)
    (tmp_path / "prometheus").mkdir()
    (tmp_path / "README.md").write_text("notes", encoding="utf-8")

    assert list_packages(tmp_path) == ["README.md", "etcd", "prometheus"]


def test_list_packages_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(CatalogIOError):
        list_packages(tmp_path / "missing")


def test_read_catalog_record_detects_format_by_brace(tmp_path: Path) -> None:
    json_file = tmp_path / "package.yaml"
    json_file.write_text('{"schema": "olm.package", "name": "etcd"}', encoding="utf-8")
    yaml_file = tmp_path / "package.json"
    yaml_file.write_text("schema: olm.package\nname: etcd\n", encoding="utf-8")

    assert read_catalog_record(json_file) == read_catalog_record(yaml_file)


def test_read_catalog_record_missing_file_raises_io_error(tmp_path: Path) -> None:
    with pytest.raises(CatalogIOError, match="couldn't open"):
        read_catalog_record(tmp_path / "missing.json")


def test_read_catalog_record_rejects_non_mapping_yaml(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(CatalogDecodeError):
        read_catalog_record(path)


def test_read_catalog_record_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe{\x00")
    with pytest.raises(CatalogDecodeError):
        read_catalog_record(path)


def test_iter_catalog_files_excludes_named_directories(tmp_path: Path) -> None:
    (tmp_path / "a" / "updated-configs").mkdir(parents=True)
    (tmp_path / "a" / "catalog.json").write_text("{}", encoding="utf-8")
    (tmp_path / "a" / "updated-configs" / "x.json").write_text("{}", encoding="utf-8")

    found = list(iter_catalog_files(tmp_path, exclude_dirnames=("updated-configs",)))

    assert found == [tmp_path / "a" / "catalog.json"]
