"""Typed representation of declarative catalog records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .errors import CatalogDecodeError
from .values import Value, decode_property_value, optional_str, required_str


def _ensure_mapping(data: Any, *, where: str) -> Mapping[str, Any]:
    if isinstance(data, Mapping):
        return data
    shape = "null" if data is None else type(data).__name__
    raise CatalogDecodeError(f"{where}: expected object, got {shape}")


def _optional_list(payload: Mapping[str, Any], key: str, *, where: str) -> list[Any] | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise CatalogDecodeError(f"{where}.{key}: expected list, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ChannelEntry:
    name: str
    replaces: str | None = None
    skips: tuple[str, ...] | None = None
    skip_range: str | None = None

    @classmethod
    def from_dict(cls, payload: Any) -> "ChannelEntry":
        raw = _ensure_mapping(payload, where="entries[]")
        skips_raw = _optional_list(raw, "skips", where="entries[]")
        skips: tuple[str, ...] | None = None
        if skips_raw is not None:
            for item in skips_raw:
                if not isinstance(item, str):
                    raise CatalogDecodeError("entries[].skips: expected list of strings")
            skips = tuple(skips_raw)
        return cls(
            name=required_str(raw, "name", where="entries[]"),
            replaces=optional_str(raw, "replaces", where="entries[]"),
            skips=skips,
            skip_range=optional_str(raw, "skipRange", where="entries[]"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.replaces is not None:
            data["replaces"] = self.replaces
        if self.skips is not None:
            data["skips"] = list(self.skips)
        if self.skip_range is not None:
            data["skipRange"] = self.skip_range
        return data


@dataclass(frozen=True)
class RelatedImage:
    name: str
    image: str

    @classmethod
    def from_dict(cls, payload: Any) -> "RelatedImage":
        raw = _ensure_mapping(payload, where="relatedImages[]")
        return cls(
            name=required_str(raw, "name", where="relatedImages[]"),
            image=required_str(raw, "image", where="relatedImages[]"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "image": self.image}


@dataclass(frozen=True)
class Property:
    type: str
    value: Value

    @classmethod
    def from_dict(cls, payload: Any) -> "Property":
        raw = _ensure_mapping(payload, where="properties[]")
        if "value" not in raw:
            raise CatalogDecodeError("properties[]: missing field `value`")
        return cls(
            type=required_str(raw, "type", where="properties[]"),
            value=decode_property_value(raw["value"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "value": self.value.to_dict()}


@dataclass(frozen=True)
class CatalogMeta:
    """Identity triple shared by every record that belongs to a package."""

    schema: str
    package: str
    name: str


@dataclass(frozen=True)
class CatalogRecord:
    schema: str | None = None
    name: str | None = None
    default_channel: str | None = None
    description: str | None = None
    package: str | None = None
    entries: tuple[ChannelEntry, ...] | None = None
    properties: tuple[Property, ...] | None = None
    image: str | None = None
    related_images: tuple[RelatedImage, ...] | None = None

    @classmethod
    def from_dict(cls, payload: Any) -> "CatalogRecord":
        raw = _ensure_mapping(payload, where="record")
        entries = _optional_list(raw, "entries", where="record")
        properties = _optional_list(raw, "properties", where="record")
        related = _optional_list(raw, "relatedImages", where="record")
        return cls(
            schema=optional_str(raw, "schema", where="record"),
            name=optional_str(raw, "name", where="record"),
            default_channel=optional_str(raw, "defaultChannel", where="record"),
            description=optional_str(raw, "description", where="record"),
            package=optional_str(raw, "package", where="record"),
            entries=tuple(ChannelEntry.from_dict(item) for item in entries) if entries is not None else None,
            properties=(
                tuple(Property.from_dict(item) for item in properties) if properties is not None else None
            ),
            image=optional_str(raw, "image", where="record"),
            related_images=(
                tuple(RelatedImage.from_dict(item) for item in related) if related is not None else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.schema is not None:
            data["schema"] = self.schema
        if self.name is not None:
            data["name"] = self.name
        if self.default_channel is not None:
            data["defaultChannel"] = self.default_channel
        if self.description is not None:
            data["description"] = self.description
        if self.package is not None:
            data["package"] = self.package
        if self.entries is not None:
            data["entries"] = [entry.to_dict() for entry in self.entries]
        if self.properties is not None:
            data["properties"] = [prop.to_dict() for prop in self.properties]
        if self.image is not None:
            data["image"] = self.image
        if self.related_images is not None:
            data["relatedImages"] = [image.to_dict() for image in self.related_images]
        return data

    @property
    def is_valid(self) -> bool:
        return self.schema is not None and self.name is not None

    def identity_key(self) -> str:
        if not self.is_valid:
            raise ValueError("record identity requires both name and schema")
        return f"{self.name}={self.schema}"

    def meta(self) -> CatalogMeta | None:
        if self.schema is None or self.package is None or self.name is None:
            return None
        return CatalogMeta(schema=self.schema, package=self.package, name=self.name)
