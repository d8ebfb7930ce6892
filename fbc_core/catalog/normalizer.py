"""Break file-based catalog blobs into one normalized JSON file per record."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .diagnostics import DiagnosticSink
from .errors import CatalogDecodeError, CatalogIOError
from .models import CatalogRecord
from .reader import iter_catalog_files, load_json, read_source_text
from .repair import repair_property_values_counted
from .splitter import get_splitter
from .types import CatalogConfig, NormalizeReport

log = logging.getLogger(__name__)


def _is_safe_output_name(name: str) -> bool:
    if not name.strip() or name in {".", ".."}:
        return False
    return "/" not in name and "\\" not in name and "\x00" not in name


def render_record(record: CatalogRecord, *, indent: int | None = None) -> bytes:
    """Serialize ``record`` to UTF-8 JSON.

    Raises ``UnicodeEncodeError`` for text that has no UTF-8 form, such as a
    lone surrogate decoded from a ``\\ud800`` escape.
    """

    separators = (",", ":") if indent is None else None
    contents = json.dumps(record.to_dict(), ensure_ascii=False, indent=indent, separators=separators)
    return contents.encode("utf-8")


def write_record(record: CatalogRecord, output_dir: Path, *, indent: int | None = None) -> Path:
    if record.name is None:
        raise ValueError("record name is required to write output")
    data = render_record(record, indent=indent)
    target = output_dir / f"{record.name}.json"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as exc:
        raise CatalogIOError(f"must write updated json file {target}: {exc}") from exc
    return target


def normalize_catalog_text(
    text: str,
    source: Path,
    *,
    config: CatalogConfig,
    sink: DiagnosticSink,
    logger: logging.Logger,
) -> list[Path]:
    splitter = get_splitter(config.split_mode)
    output_dir = source.parent / config.output_dirname
    written: list[Path] = []
    for pos, chunk in enumerate(splitter(text)):
        repaired, count = repair_property_values_counted(chunk)
        if count:
            logger.debug("repaired %d property value(s) : %s : %d", count, source, pos)
        try:
            record = CatalogRecord.from_dict(load_json(repaired))
        except CatalogDecodeError as exc:
            sink.report(source, "could not parse", chunk=pos, cause=exc)
            continue
        if record.name is None:
            sink.report(source, "record has no name", chunk=pos, cause=f"schema={record.schema}")
            continue
        if not _is_safe_output_name(record.name):
            sink.report(source, "record name is not usable as a file name", chunk=pos, cause=repr(record.name))
            continue
        try:
            target = write_record(record, output_dir, indent=config.output_indent)
        except UnicodeEncodeError as exc:
            sink.report(source, "record is not encodable as UTF-8", chunk=pos, cause=exc)
            continue
        logger.info("wrote %s", target)
        written.append(target)
    return written


def normalize_catalogs(
    root: Path,
    *,
    config: CatalogConfig | None = None,
    logger: logging.Logger | None = None,
) -> NormalizeReport:
    """Split every catalog blob under ``root`` into per-record JSON files.

    Records land in ``<blob dir>/<output_dirname>/<name>.json``. Chunks that do
    not decode, or decode without a name, are reported and skipped. Only
    filesystem failures raise (``CatalogIOError``).
    """

    config = config or CatalogConfig()
    logger = logger or log
    root = Path(root)
    sink = DiagnosticSink(logger)
    report = NormalizeReport(root=root, diagnostics=sink.items)
    catalog_names = set(config.catalog_filenames)

    for path in iter_catalog_files(
        root,
        recursive=config.recursive,
        exclude_dirnames=(config.output_dirname,),
    ):
        report.files_scanned += 1
        try:
            text = read_source_text(path)
        except CatalogDecodeError as exc:
            if path.name in catalog_names:
                sink.report(path, "could not read", cause=exc)
            else:
                logger.debug("skipping non-text file : %s", path)
            continue
        if "{" not in text:
            continue
        if path.name not in catalog_names:
            continue
        logger.debug("updating config : %s", path.relative_to(root))
        report.catalogs_processed += 1
        report.written.extend(
            normalize_catalog_text(text, path, config=config, sink=sink, logger=logger)
        )

    logger.info(
        "normalized %s : files=%d catalogs=%d written=%d skipped=%d",
        root,
        report.files_scanned,
        report.catalogs_processed,
        len(report.written),
        len(report.diagnostics),
    )
    return report
