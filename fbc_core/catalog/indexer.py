"""Index catalog records found under a directory by ``name=schema``."""

from __future__ import annotations

import logging
from pathlib import Path

from .diagnostics import DiagnosticSink
from .errors import CatalogDecodeError
from .models import CatalogRecord
from .reader import iter_catalog_files, read_catalog_record

log = logging.getLogger(__name__)


def build_catalog_index(
    root: Path,
    *,
    recursive: bool = True,
    logger: logging.Logger | None = None,
    sink: DiagnosticSink | None = None,
) -> dict[str, CatalogRecord]:
    """Decode every file under ``root`` as a single record.

    Files are visited in sorted path order, so when two files share a key the
    one sorting last wins. Undecodable files and records missing ``name`` or
    ``schema`` are skipped with a diagnostic.
    """

    logger = logger or log
    sink = sink if sink is not None else DiagnosticSink(logger)
    index: dict[str, CatalogRecord] = {}
    for path in iter_catalog_files(Path(root), recursive=recursive):
        try:
            record = read_catalog_record(path)
        except CatalogDecodeError as exc:
            sink.report(path, "could not decode", cause=exc)
            continue
        if not record.is_valid:
            sink.report(
                path,
                "record is missing name or schema",
                cause=f"name={record.name} schema={record.schema}",
            )
            continue
        key = record.identity_key()
        if key in index:
            logger.debug("replacing %s with %s", key, path)
        index[key] = record
    logger.info("indexed %s : records=%d skipped=%d", root, len(index), len(sink))
    return index
