"""Tests for the Duration parser and formatter."""

import logging
from datetime import timedelta

import pytest

from cisco_nxapi.base.duration import Duration, Token, tokenize
from cisco_nxapi.base.exceptions import MalformedDuration

NS = 10 ** 9


@pytest.mark.parametrize(
    "text, expected",
    [
        ("P1M", [Token(1, "month")]),
        ("PT1M", [Token(1, "minute")]),
        ("P1MT1M", [Token(1, "month"), Token(1, "minute")]),
        ("1M", [Token(1, "month")]),
        ("1m", [Token(1, "minute")]),
        ("1w2d", [Token(1, "week"), Token(2, "day")]),
        ("00:04:30", [Token(0, "hour"), Token(4, "minute"), Token(30, "second")]),
    ],
)
def test_tokenize(text, expected):
    assert tokenize(text) == expected


@pytest.mark.parametrize(
    "text, seconds",
    [
        ("P7DT12H2M5S", 648125),
        ("P1MT4M31S", 2592271),
        ("P2W", 14 * 86400),
        ("PT31S", 31),
        ("1w2d", 9 * 86400),
        ("1D2H", 93600),
        ("3h15m", 11700),
        ("1M", 30 * 86400),
        ("5s", 5),
        ("00:04:30", 270),
        ("02:00:00", 7200),
        ("100:00:00", 360000),
        # clock fields are not range checked
        ("00:75:00", 4500),
        # ISO units may come in any order
        ("PT30S1H", 3630),
        ("  PT5S  ", 5),
        ("", 0),
        ("0", 0),
        ("   ", 0),
    ],
)
def test_parse(text, seconds):
    duration = Duration.parse(text)
    assert isinstance(duration, Duration)
    assert duration == seconds * NS


def test_parse_bytes():
    assert Duration.parse(b"1w2d") == Duration.parse("1w2d")


def test_from_text_alias():
    assert Duration.from_text("00:04:30") == Duration.parse("00:04:30")


def test_years_are_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="cisco_nxapi.base.duration"):
        assert Duration.parse("P1Y") == 0
        assert Duration.parse("P1Y2D") == 2 * 86400 * NS
    assert "year" in caplog.text


@pytest.mark.parametrize(
    "text",
    [
        "garbage",
        "P",
        "PT",
        "P1DT",
        "P1H",
        "PT1D",
        "PT1H1H",
        "P1D2D",
        "1d1d",
        "1d5",
        "P5",
        "12:34",
        "1:2:3:4",
        "12:3x:00",
        "-5s",
        "1.5s",
        "PT1.5S",
        "TP1D",
        "\u00a0PT5S",
        "PT5S\u2003",
        "P" + "9" * 5000 + "D",
        "9" * 5000 + "s",
        "9" * 5000 + ":00:00",
    ],
)
def test_parse_malformed(text):
    with pytest.raises(MalformedDuration) as e:
        Duration.parse(text)
    assert e.value.text == text
    assert str(e.value).startswith('invalid duration "{}"'.format(text))


def test_parse_malformed_is_value_error():
    with pytest.raises(ValueError):
        Duration.parse("garbage")


def test_parse_not_text():
    with pytest.raises(MalformedDuration):
        Duration.parse(5)
    with pytest.raises(MalformedDuration):
        Duration.parse(b"\xff\xfe")


def test_parse_overflow():
    assert Duration.parse("P213503D") == 213503 * 86400 * NS
    with pytest.raises(MalformedDuration, match="overflows"):
        Duration.parse("P213504D")
    with pytest.raises(MalformedDuration):
        Duration.parse("99999999999999999999s")


def test_constructor():
    assert Duration() == 0
    assert Duration(5) == 5
    with pytest.raises(ValueError):
        Duration(-1)
    with pytest.raises(ValueError):
        Duration(2 ** 64)
    with pytest.raises(TypeError):
        Duration("PT5S")


@pytest.mark.parametrize(
    "nanoseconds, expected",
    [
        (0, "PT0S"),
        (NS // 2, "PT0S"),
        (3 * NS // 2, "PT1S"),
        (86400 * NS, "P1D"),
        (3600 * NS, "PT1H"),
        (270 * NS, "PT4M30S"),
        (648125 * NS, "P7DT12H2M5S"),
        (86405 * NS, "P1DT5S"),
    ],
)
def test_format(nanoseconds, expected):
    duration = Duration(nanoseconds)
    assert duration.format() == expected
    assert str(duration) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1w2d", "P9D"),
        ("P1M", "P30D"),
        ("00:04:30", "PT4M30S"),
        ("P1MT4M31S", "P30DT4M31S"),
        ("", "PT0S"),
    ],
)
def test_canonical_form(text, expected):
    assert str(Duration.parse(text)) == expected


@pytest.mark.parametrize(
    "text", ["P7DT12H2M5S", "1w2d3h4m5s", "00:04:30", "P1M", "PT0S", "P213503D"]
)
def test_format_parses_back(text):
    duration = Duration.parse(text)
    assert Duration.parse(str(duration)) == duration


def test_repr():
    assert repr(Duration.parse("00:04:30")) == "Duration(270000000000)"


def test_timedelta():
    delta = timedelta(days=1, seconds=5, microseconds=7)
    duration = Duration.from_timedelta(delta)
    assert duration == 86405 * NS + 7000
    assert duration.to_timedelta() == delta
    assert Duration.parse("00:04:30").to_timedelta() == timedelta(minutes=4, seconds=30)


def test_total_seconds():
    assert Duration.parse("PT1M").total_seconds() == 60.0
    assert Duration(NS // 2).total_seconds() == 0.5
