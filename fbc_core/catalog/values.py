"""Decoding for ``Property.value``, which may be a bare string or an object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .errors import CatalogDecodeError


def optional_str(payload: Mapping[str, Any], key: str, *, where: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise CatalogDecodeError(f"{where}.{key}: expected string, got {type(value).__name__}")
    return value


def required_str(payload: Mapping[str, Any], key: str, *, where: str) -> str:
    if key not in payload:
        raise CatalogDecodeError(f"{where}: missing field `{key}`")
    value = optional_str(payload, key, where=where)
    if value is None:
        raise CatalogDecodeError(f"{where}.{key}: expected string, got null")
    return value


@dataclass(frozen=True)
class Value:
    group: str | None = None
    kind: str | None = None
    version: str | None = None
    package_name: str | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Value":
        return cls(
            group=optional_str(payload, "group", where="value"),
            kind=optional_str(payload, "kind", where="value"),
            version=optional_str(payload, "version", where="value"),
            package_name=optional_str(payload, "packageName", where="value"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.group is not None:
            data["group"] = self.group
        if self.kind is not None:
            data["kind"] = self.kind
        if self.version is not None:
            data["version"] = self.version
        if self.package_name is not None:
            data["packageName"] = self.package_name
        return data


def decode_property_value(raw: Any) -> Value:
    """Decode a property value from either a string scalar or an object.

    A string is copied into every field of the structured form. Catalogs in
    the wild rely on this shape, so it is kept as-is even though the fields
    end up carrying the same text.
    """

    if isinstance(raw, str):
        return Value(group=raw, kind=raw, version=raw, package_name=raw)
    if isinstance(raw, Mapping):
        return Value.from_dict(raw)
    shape = "null" if raw is None else type(raw).__name__
    raise CatalogDecodeError(f"property.value: expected string or object, got {shape}")
