"""Rewrite malformed ``"value"`` encodings so catalog chunks decode."""

from __future__ import annotations

import re

PLACEHOLDER_VALUE = '"value": {"group":""}'

_MALFORMED_VALUE_RE = re.compile(
    r'("value": [0-9.]+)|("value": "[0-9.]+")|("value": null)'
)


def repair_property_values_counted(text: str) -> tuple[str, int]:
    return _MALFORMED_VALUE_RE.subn(lambda _match: PLACEHOLDER_VALUE, text)


def repair_property_values(text: str) -> str:
    """Replace numeric, quoted-numeric and null property values with an empty object.

    The original value is discarded. Well-formed object values are left alone.
    """

    repaired, _count = repair_property_values_counted(text)
    return repaired
