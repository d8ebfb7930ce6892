"""Filesystem helpers: package listing, tree walking and single-record reads."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator

import yaml

from .errors import CatalogDecodeError, CatalogIOError
from .models import CatalogRecord


def list_packages(directory: Path) -> list[str]:
    """Return the names of the immediate entries of ``directory``."""

    try:
        return sorted(entry.name for entry in Path(directory).iterdir())
    except OSError as exc:
        raise CatalogIOError(f"unable to list packages in {directory}: {exc}") from exc


def iter_catalog_files(
    root: Path,
    *,
    recursive: bool = True,
    exclude_dirnames: tuple[str, ...] = (),
) -> Iterator[Path]:
    root = Path(root)
    if not root.is_dir():
        raise CatalogIOError(f"catalog root is not a directory: {root}")
    candidates = root.rglob("*") if recursive else root.iterdir()
    for path in sorted(candidates):
        if not path.is_file():
            continue
        if exclude_dirnames and any(part in exclude_dirnames for part in path.relative_to(root).parts[:-1]):
            continue
        yield path


def read_source_text(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise CatalogDecodeError(f"not valid UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise CatalogIOError(f"couldn't open {path}: {exc}") from exc


def load_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogDecodeError(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise CatalogDecodeError("invalid JSON: nesting too deep") from exc


def load_document(text: str) -> Any:
    """Parse ``text`` as JSON when it contains ``{``, otherwise as YAML."""

    if "{" in text:
        return load_json(text)
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CatalogDecodeError(f"invalid YAML: {exc}") from exc
    except RecursionError as exc:
        raise CatalogDecodeError("invalid YAML: nesting too deep") from exc


def decode_catalog_document(text: str) -> CatalogRecord:
    return CatalogRecord.from_dict(load_document(text))


def read_catalog_record(path: Path) -> CatalogRecord:
    return decode_catalog_document(read_source_text(path))
