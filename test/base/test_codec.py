"""Tests for the declarative body decoder."""

import pytest

from cisco_nxapi.base.codec import Field, ListOf, Nested, Schema, Table
from cisco_nxapi.base.duration import Duration
from cisco_nxapi.base.exceptions import DecodeError, MalformedDuration
from cisco_nxapi.base.timestamp import TimeStamp

NEIGHBOR = Schema(
    {
        "neighbor_id": Field("neighbor-id"),
        "remote_as": Field("remoteas", int),
        "last_flap": Field("lastflap", Duration),
    }
)

VRF = Schema(
    {
        "vrf_name": Field("vrf-name-out"),
        "neighbors": Table("TABLE_neighbor", "ROW_neighbor", NEIGHBOR),
    }
)

BODY = Schema({"vrfs": Table("TABLE_vrf", "ROW_vrf", VRF)})

SCALARS = Schema(
    {
        "name": Field("name"),
        "count": Field("count", int),
        "ratio": Field("ratio", float),
        "enabled": Field("enabled", bool),
        "age": Field("age", Duration),
        "seen": Field("seen", TimeStamp),
        "tags": Field("tags", ListOf(str)),
        "mode": Field("mode", default="auto"),
    }
)


def test_missing_fields_are_zero():
    record = SCALARS.decode({})
    assert record == {
        "name": "",
        "count": 0,
        "ratio": 0.0,
        "enabled": False,
        "age": 0,
        "seen": 0,
        "tags": [],
        "mode": "auto",
    }
    assert isinstance(record["age"], Duration)
    assert isinstance(record["seen"], TimeStamp)


@pytest.mark.parametrize("raw", [None, ""])
def test_empty_body(raw):
    assert SCALARS.decode(raw)["count"] == 0


def test_conversions():
    record = SCALARS.decode(
        {
            "name": 42,
            "count": "17",
            "ratio": "0.5",
            "enabled": "true",
            "age": "00:04:30",
            "seen": "11/04/2019",
            "tags": "router",
            "mode": "manual",
            "unknown": "ignored",
        }
    )
    assert record["name"] == "42"
    assert record["count"] == 17
    assert record["ratio"] == 0.5
    assert record["enabled"] is True
    assert record["age"] == 270 * 10 ** 9
    assert record["seen"] == 1572825600
    assert record["tags"] == ["router"]
    assert record["mode"] == "manual"
    assert "unknown" not in record


def test_blank_numbers_are_zero():
    record = SCALARS.decode({"count": " ", "ratio": ""})
    assert record["count"] == 0
    assert record["ratio"] == 0.0


def test_single_row_table_is_a_list():
    body = BODY.decode(
        {
            "TABLE_vrf": {
                "ROW_vrf": {
                    "vrf-name-out": "default",
                    "TABLE_neighbor": {
                        "ROW_neighbor": {"neighbor-id": "10.0.0.2", "remoteas": "65002"}
                    },
                }
            }
        }
    )
    assert len(body["vrfs"]) == 1
    assert body["vrfs"][0]["neighbors"] == [
        {"neighbor_id": "10.0.0.2", "remote_as": 65002, "last_flap": 0}
    ]


def test_missing_table_is_empty():
    assert BODY.decode({}) == {"vrfs": []}
    assert VRF.decode({"vrf-name-out": "x", "TABLE_neighbor": ""})["neighbors"] == []


def test_malformed_duration_fails_the_record():
    raw = {
        "TABLE_vrf": {
            "ROW_vrf": [
                {"vrf-name-out": "default"},
                {
                    "vrf-name-out": "tenant",
                    "TABLE_neighbor": {
                        "ROW_neighbor": [{"neighbor-id": "10.1.0.2", "lastflap": "soon"}]
                    },
                },
            ]
        }
    }
    with pytest.raises(DecodeError) as e:
        BODY.decode(raw)
    assert e.value.path == "body.vrfs[1].neighbors[0].last_flap"
    assert isinstance(e.value.__cause__, MalformedDuration)
    assert str(e.value).startswith("body.vrfs[1].neighbors[0].last_flap: ")


@pytest.mark.parametrize(
    "raw, path",
    [
        ({"count": "many"}, "body.count"),
        ({"ratio": True}, "body.ratio"),
        ({"enabled": "maybe"}, "body.enabled"),
        ({"seen": "2019-11-04"}, "body.seen"),
        ({"name": {"nested": "object"}}, "body.name"),
        ({"tags": ["ok", ["nested"]]}, "body.tags[1]"),
    ],
)
def test_decode_errors(raw, path):
    with pytest.raises(DecodeError) as e:
        SCALARS.decode(raw)
    assert e.value.path == path


def test_body_must_be_an_object():
    with pytest.raises(DecodeError) as e:
        SCALARS.decode(["not", "an", "object"], "outputs[0].body")
    assert e.value.path == "outputs[0].body"


def test_nested():
    power = Schema({"level": Field("voltage_level", int)})
    schema = Schema({"power": Nested("powersup", power)})
    assert schema.decode({"powersup": {"voltage_level": "12"}}) == {
        "power": {"level": 12}
    }
    assert schema.decode({}) == {"power": {"level": 0}}


def test_encode():
    record = {
        "vrfs": [
            {
                "vrf_name": "default",
                "neighbors": [
                    {
                        "neighbor_id": "10.0.0.2",
                        "remote_as": 65002,
                        "last_flap": Duration.parse("1w2d"),
                    }
                ],
            }
        ]
    }
    assert BODY.encode(record) == {
        "TABLE_vrf": {
            "ROW_vrf": [
                {
                    "vrf-name-out": "default",
                    "TABLE_neighbor": {
                        "ROW_neighbor": [
                            {
                                "neighbor-id": "10.0.0.2",
                                "remoteas": 65002,
                                "lastflap": "P9D",
                            }
                        ]
                    },
                }
            ]
        }
    }
    assert BODY.decode(BODY.encode(record)) == record


def test_unsupported_kinds():
    with pytest.raises(TypeError):
        Field("x", dict)
    with pytest.raises(TypeError):
        ListOf(list)
