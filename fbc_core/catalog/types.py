"""Catalog pipeline datatypes and configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_CATALOG_FILENAMES: tuple[str, ...] = ("catalog.json", "index.json")
DEFAULT_OUTPUT_DIRNAME = "updated-configs"


@dataclass(frozen=True)
class CatalogConfig:
    recursive: bool = True
    catalog_filenames: tuple[str, ...] = DEFAULT_CATALOG_FILENAMES
    output_dirname: str = DEFAULT_OUTPUT_DIRNAME
    split_mode: str = "boundary"
    output_indent: int | None = None


@dataclass(frozen=True)
class Diagnostic:
    source: Path
    message: str
    chunk: int | None = None
    cause: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": str(self.source),
            "chunk": self.chunk,
            "message": self.message,
            "cause": self.cause,
        }

    def __str__(self) -> str:
        location = str(self.source) if self.chunk is None else f"{self.source} : {self.chunk}"
        if self.cause:
            return f"{self.message} : {location} : {self.cause}"
        return f"{self.message} : {location}"


@dataclass
class NormalizeReport:
    root: Path
    files_scanned: int = 0
    catalogs_processed: int = 0
    written: list[Path] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "root": str(self.root),
            "files_scanned": self.files_scanned,
            "catalogs_processed": self.catalogs_processed,
            "written": [str(path) for path in self.written],
            "diagnostics": [diag.to_dict() for diag in self.diagnostics],
        }
