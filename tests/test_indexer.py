from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from fbc_core.catalog import CatalogIOError, DiagnosticSink, build_catalog_index


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_index_is_keyed_by_name_and_schema(tmp_path: Path) -> None:
    _write(tmp_path / "package.json", json.dumps({"schema": "olm.package", "name": "etcd", "defaultChannel": "stable"}))
    _write(tmp_path / "channel.yaml", "schema: olm.channel\nname: stable\npackage: etcd\n")

    index = build_catalog_index(tmp_path)

    assert sorted(index) == ["etcd=olm.package", "stable=olm.channel"]
    assert index["etcd=olm.package"].default_channel == "stable"
    assert index["stable=olm.channel"].package == "etcd"


def test_last_visited_duplicate_wins(tmp_path: Path) -> None:
    _write(tmp_path / "a.json", json.dumps({"schema": "y", "name": "x", "description": "first"}))
    _write(tmp_path / "b.json", json.dumps({"schema": "y", "name": "x", "description": "second"}))

    index = build_catalog_index(tmp_path)

    assert list(index) == ["x=y"]
    assert index["x=y"].description == "second"


def test_undecodable_and_incomplete_files_are_skipped(tmp_path: Path, caplog) -> None:
    _write(tmp_path / "broken.json", '{"schema": "olm.package", "name": ')
    _write(tmp_path / "nameless.yaml", "schema: olm.package\n")
    _write(tmp_path / "schemaless.json", '{"name": "etcd"}')
    _write(tmp_path / "good.json", '{"schema": "olm.package", "name": "etcd"}')
    sink = DiagnosticSink(logging.getLogger("test.indexer"))

    with caplog.at_level(logging.WARNING):
        index = build_catalog_index(tmp_path, sink=sink)

    assert list(index) == ["etcd=olm.package"]
    assert sorted(diag.source.name for diag in sink.items) == ["broken.json", "nameless.yaml", "schemaless.json"]
    assert "could not decode" in caplog.text


def test_recursive_flag_controls_depth(tmp_path: Path) -> None:
    _write(tmp_path / "top.json", '{"schema": "olm.package", "name": "top"}')
    _write(tmp_path / "nested" / "deep.json", '{"schema": "olm.package", "name": "deep"}')

    assert sorted(build_catalog_index(tmp_path)) == ["deep=olm.package", "top=olm.package"]
    assert sorted(build_catalog_index(tmp_path, recursive=False)) == ["top=olm.package"]


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(CatalogIOError):
        build_catalog_index(tmp_path / "missing")


def test_deeply_nested_file_is_skipped(tmp_path: Path) -> None:
    _write(tmp_path / "deep.json", '{"schema": "olm.package", "name": "deep", "extra": ' + "[" * 200000)
    _write(tmp_path / "good.json", '{"schema": "olm.package", "name": "etcd"}')
    sink = DiagnosticSink(logging.getLogger("test.indexer"))

    index = build_catalog_index(tmp_path, sink=sink)

    assert list(index) == ["etcd=olm.package"]
    assert [diag.source.name for diag in sink.items] == ["deep.json"]
