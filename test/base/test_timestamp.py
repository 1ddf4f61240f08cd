"""Tests for TimeStamp."""

from datetime import datetime, timezone

import pytest

from cisco_nxapi.base.exceptions import MalformedTimeStamp
from cisco_nxapi.base.timestamp import TimeStamp


@pytest.mark.parametrize(
    "text, seconds, rendered",
    [
        ("11/04/2019 22:13:33", 1572905613, "11/04/2019 22:13:33"),
        ("11/04/2019", 1572825600, "11/04/2019 00:00:00"),
        (" 5/22/2018 15:00:00", 1527001200, "05/22/2018 15:00:00"),
        ("05/22/2018 15:26:08", 1527002768, "05/22/2018 15:26:08"),
        ("10/18/2016", 1476748800, "10/18/2016 00:00:00"),
        (" Wed May 23 18:26:12 2018", 1527099972, "05/23/2018 18:26:12"),
        ("", 0, "01/01/1970 00:00:00"),
    ],
)
def test_parse(text, seconds, rendered):
    stamp = TimeStamp.parse(text)
    assert isinstance(stamp, TimeStamp)
    assert stamp == seconds
    assert str(stamp) == rendered
    assert stamp.format() == rendered


def test_parse_bytes():
    assert TimeStamp.parse(b"11/04/2019 22:13:33") == 1572905613
    assert TimeStamp.from_text("11/04/2019") == 1572825600


@pytest.mark.parametrize(
    "text",
    [
        "2019-11-04",
        "13/45/2019",
        "11/04/2019 25:00:00",
        "yesterday",
        "\u00a011/04/2019 22:13:33",
    ],
)
def test_parse_malformed(text):
    with pytest.raises(MalformedTimeStamp):
        TimeStamp.parse(text)


def test_parse_malformed_is_value_error():
    with pytest.raises(ValueError):
        TimeStamp.parse("2019-11-04")


def test_parse_not_text():
    with pytest.raises(MalformedTimeStamp):
        TimeStamp.parse(1572905613)


def test_time():
    stamp = TimeStamp(1572905613)
    assert stamp.time() == datetime(2019, 11, 4, 22, 13, 33, tzinfo=timezone.utc)
    assert repr(stamp) == "TimeStamp(1572905613)"


def test_constructor():
    assert TimeStamp() == 0
    with pytest.raises(ValueError):
        TimeStamp(-1)
    with pytest.raises(TypeError):
        TimeStamp("11/04/2019")
