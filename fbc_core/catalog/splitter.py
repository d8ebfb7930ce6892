"""Split catalog blobs made of back-to-back JSON objects.

File-based catalogs are often written as several JSON objects concatenated in
one file, with no enclosing array and no separators. ``split_catalog_blob``
recovers the individual objects using the textual boundary between them. It
is not a parser: a boundary literal that appears inside a string value splits
the object in the wrong place, and the damaged pieces then fail to decode.

``split_catalog_blob_by_depth`` tracks brace depth and string literals instead
and is available as an opt-in alternative.
"""

from __future__ import annotations

from typing import Iterator

NEWLINE_BOUNDARY = "}\n{"
COMPACT_BOUNDARY = "}{"


def _rebuild(piece: str, pos: int, count: int) -> str:
    if count == 1:
        return piece
    if pos == 0:
        return piece + "}"
    if pos == count - 1:
        return "{" + piece
    return "{" + piece + "}"


def split_catalog_blob(text: str) -> Iterator[str]:
    pieces = text.split(NEWLINE_BOUNDARY)
    if len(pieces) <= 1:
        pieces = text.split(COMPACT_BOUNDARY)
    count = len(pieces)
    for pos, piece in enumerate(pieces):
        yield _rebuild(piece, pos, count)


def split_catalog_blob_by_depth(text: str) -> Iterator[str]:
    start: int | None = None
    depth = 0
    in_string = False
    escaped = False
    for index, ch in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            if depth == 0:
                start = index
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0 and start is not None:
                yield text[start : index + 1]
                start = None
    if start is not None:
        # unterminated trailing object; surface it so decode reports the error
        yield text[start:]


SPLITTERS = {
    "boundary": split_catalog_blob,
    "depth": split_catalog_blob_by_depth,
}


def get_splitter(mode: str):
    try:
        return SPLITTERS[mode]
    except KeyError as exc:
        raise ValueError(f"split mode must be one of: {', '.join(sorted(SPLITTERS))}") from exc
