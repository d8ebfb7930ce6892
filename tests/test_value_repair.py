from __future__ import annotations

import json

import pytest

from fbc_core.catalog import PLACEHOLDER_VALUE, repair_property_values, repair_property_values_counted


@pytest.mark.parametrize(
    "raw",
    [
        '"value": 3.14',
        '"value": "3.14"',
        '"value": null',
        '"value": 1',
    ],
)
def test_malformed_values_become_placeholder(raw: str) -> None:
    assert repair_property_values(raw) == PLACEHOLDER_VALUE


def test_every_occurrence_is_rewritten() -> None:
    text = (
        '{"properties": [{"type": "a", "value": 1.0}, '
        '{"type": "b", "value": "2.0"}, {"type": "c", "value": null}]}'
    )

    repaired, count = repair_property_values_counted(text)

    assert count == 3
    payload = json.loads(repaired)
    assert [prop["value"] for prop in payload["properties"]] == [{"group": ""}] * 3


def test_object_and_text_values_are_left_alone() -> None:
    text = (
        '{"properties": [{"type": "olm.package", "value": {"packageName": "etcd", "version": "0.9.4"}}, '
        '{"type": "olm.maxOpenShiftVersion", "value": "4.8"}, '
        '{"type": "olm.bundle.object", "value": {"data": "eyJ"}}]}'
    )
    # "4.8" is a quoted number and is rewritten; the objects are not
    repaired = repair_property_values(text)
    payload = json.loads(repaired)
    assert payload["properties"][0]["value"] == {"packageName": "etcd", "version": "0.9.4"}
    assert payload["properties"][1]["value"] == {"group": ""}
    assert payload["properties"][2]["value"] == {"data": "eyJ"}


def test_text_without_malformed_values_is_identical() -> None:
    text = '{"schema":"olm.channel","name":"stable","entries":[{"name":"demo.v1"}]}'
    assert repair_property_values_counted(text) == (text, 0)
