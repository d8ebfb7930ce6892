from __future__ import annotations

import logging
from pathlib import Path

from .types import Diagnostic


class DiagnosticSink:
    """Collects skipped-chunk and skipped-file diagnostics for one run.

    Every diagnostic is also emitted as a warning on ``logger``. Callers decide
    what to do with the collected list; the pipeline never branches on it.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger
        self.items: list[Diagnostic] = []

    def report(
        self,
        source: Path,
        message: str,
        *,
        chunk: int | None = None,
        cause: BaseException | str | None = None,
    ) -> Diagnostic:
        diagnostic = Diagnostic(
            source=source,
            message=message,
            chunk=chunk,
            cause=str(cause) if cause is not None else None,
        )
        self.items.append(diagnostic)
        self.logger.warning("%s", diagnostic)
        return diagnostic

    def __len__(self) -> int:
        return len(self.items)
