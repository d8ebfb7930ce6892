from __future__ import annotations

import pytest

from fbc_core.catalog import CatalogDecodeError, Value, decode_property_value


def test_string_value_is_copied_into_every_field() -> None:
    value = decode_property_value("foo")
    assert value == Value(group="foo", kind="foo", version="foo", package_name="foo")


def test_object_value_decodes_field_by_field() -> None:
    value = decode_property_value({"packageName": "etcd", "version": "0.9.4"})
    assert value.package_name == "etcd"
    assert value.version == "0.9.4"
    assert value.group is None
    assert value.kind is None


def test_object_value_ignores_unknown_keys() -> None:
    value = decode_property_value({"group": "etcd.database.coreos.com", "plural": "etcdclusters"})
    assert value.to_dict() == {"group": "etcd.database.coreos.com"}


@pytest.mark.parametrize("raw", [["a"], 1.0, 3, True, None])
def test_other_shapes_are_rejected(raw) -> None:
    with pytest.raises(CatalogDecodeError):
        decode_property_value(raw)


def test_non_string_subfield_is_rejected() -> None:
    with pytest.raises(CatalogDecodeError, match="value.version"):
        decode_property_value({"version": 1})
