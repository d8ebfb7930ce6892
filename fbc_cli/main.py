from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import NoReturn, Optional

import typer

from fbc_core.catalog import (
    CatalogDecodeError,
    CatalogIOError,
    DiagnosticSink,
    build_catalog_index,
    get_splitter,
    list_packages,
    normalize_catalogs,
    read_catalog_record,
)
from fbc_core.config import load_catalog_config

app = typer.Typer(help="Declarative catalog normalizer", no_args_is_help=True)
log = logging.getLogger("fbc_cli")

_FORMATS = ("text", "json")


def _check_format(fmt: str) -> str:
    if fmt not in _FORMATS:
        raise typer.BadParameter(f"expected one of: {', '.join(_FORMATS)}")
    return fmt


def _fail(command: str, exc: Exception) -> NoReturn:
    typer.echo(f"[fbc:{command}] ERROR {exc}", err=True)
    raise typer.Exit(1)


@app.callback()
def configure(
    log_level: str = typer.Option("WARNING", "--log-level", help="Python logging level"),
) -> None:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"unknown log level: {log_level}")
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@app.command()
def normalize(
    root: Path = typer.Argument(..., help="Directory tree holding catalog blobs"),
    workspace_dir: Path = typer.Option(Path("."), "--workspace-dir", help="Workspace root holding config/config.toml"),
    flat: bool = typer.Option(False, "--flat", help="Only visit files directly under ROOT"),
    split_mode: Optional[str] = typer.Option(None, "--split-mode", help="boundary (default) or depth"),
    fmt: str = typer.Option("text", "--format", help="text or json"),
) -> None:
    """Write one updated-configs/<name>.json per record found in catalog blobs."""

    _check_format(fmt)
    try:
        config = load_catalog_config(workspace_dir)
        if flat:
            config = replace(config, recursive=False)
        if split_mode:
            config = replace(config, split_mode=split_mode.strip().lower())
        get_splitter(config.split_mode)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    try:
        report = normalize_catalogs(root, config=config)
    except CatalogIOError as exc:
        _fail("normalize", exc)

    if fmt == "json":
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return
    for diagnostic in report.diagnostics:
        typer.echo(f"[fbc:normalize] skipped {diagnostic}")
    typer.echo(
        f"[fbc:normalize] catalogs={report.catalogs_processed} "
        f"written={len(report.written)} skipped={len(report.diagnostics)}"
    )


@app.command()
def index(
    root: Path = typer.Argument(..., help="Directory of single-record catalog files"),
    flat: bool = typer.Option(False, "--flat", help="Only visit files directly under ROOT"),
    fmt: str = typer.Option("text", "--format", help="text or json"),
) -> None:
    """Decode each file as one record and list the name=schema index."""

    _check_format(fmt)
    sink = DiagnosticSink(log)
    try:
        records = build_catalog_index(root, recursive=not flat, sink=sink)
    except CatalogIOError as exc:
        _fail("index", exc)

    if fmt == "json":
        payload = {
            "ok": not sink.items,
            "count": len(records),
            "records": {key: records[key].to_dict() for key in sorted(records)},
            "diagnostics": [item.to_dict() for item in sink.items],
        }
        typer.echo(json.dumps(payload, indent=2))
        return
    for key in sorted(records):
        typer.echo(key)
    typer.echo(f"[fbc:index] records={len(records)} skipped={len(sink)}")


@app.command()
def packages(directory: Path = typer.Argument(..., help="Directory whose entries are packages")) -> None:
    """List the package directories directly under DIRECTORY."""

    try:
        names = list_packages(directory)
    except CatalogIOError as exc:
        _fail("packages", exc)
    for name in names:
        typer.echo(name)


@app.command()
def read(path: Path = typer.Argument(..., help="JSON or YAML catalog file")) -> None:
    """Decode a single catalog file and print its normalized JSON."""

    try:
        record = read_catalog_record(path)
    except (CatalogIOError, CatalogDecodeError) as exc:
        _fail("read", exc)
    typer.echo(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))
