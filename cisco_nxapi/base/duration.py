# Copyright 2015 Spotify AB. All rights reserved.
#
# The contents of this file are licensed under the Apache License, Version 2.0
# (the "License"); you may not use this file except in compliance with the
# License. You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""
Elapsed time values reported by NX-OS.

NX-API reports the same kind of value in several ways depending on the
command and the software release::

    "lastflap": "P7DT12H2M5S"     # ISO-8601 like
    "time-stamp": "1w2d"          # compact, unit suffixed
    "time-stamp": "00:04:30"      # clock

All of them decode to a :class:`Duration`, an unsigned nanosecond count that
renders back in the canonical ISO-8601 form (``PT4M30S``).

The letter ``M`` is ambiguous. In the ISO form it is a month before the ``T``
marker and a minute after it. In the compact form the case decides: ``M`` is
a month and ``m`` a minute. A month is always 30 days.
"""

import logging
import re
from collections import namedtuple
from datetime import timedelta
from typing import List, Union

from cisco_nxapi.base import constants as c
from cisco_nxapi.base.exceptions import MalformedDuration

logger = logging.getLogger(__name__)

Token = namedtuple("Token", ["quantity", "unit"])

_DIGITS = re.compile(r"[0-9]+")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _quantity(digits: str, text: str) -> int:
    if len(digits) > c.UINT64_DIGITS:
        raise MalformedDuration(text, "number too large")
    return int(digits)


def _tokenize_iso(text: str) -> List[Token]:
    """Split ``P[nY][nM][nW][nD][T[nH][nM][nS]]`` into tokens."""
    tokens = []
    units = c.ISO_DATE_UNITS
    seen = set()
    digits = ""
    time_part = False
    time_tokens = 0

    for char in text[1:]:
        if _is_digit(char):
            digits += char
        elif char == "T":
            if time_part or digits:
                raise MalformedDuration(text, "unexpected 'T'")
            time_part = True
            units = c.ISO_TIME_UNITS
            seen = set()
        elif char in units:
            unit = units[char]
            if not digits:
                raise MalformedDuration(text, "missing number before '{}'".format(char))
            if unit in seen:
                raise MalformedDuration(text, "repeated unit '{}'".format(char))
            seen.add(unit)
            tokens.append(Token(_quantity(digits, text), unit))
            digits = ""
            if time_part:
                time_tokens += 1
        else:
            raise MalformedDuration(text, "unknown unit '{}'".format(char))

    if digits:
        raise MalformedDuration(text, "missing unit after '{}'".format(digits))
    if time_part and not time_tokens:
        raise MalformedDuration(text, "no time components after 'T'")
    if not tokens:
        raise MalformedDuration(text, "no components")
    return tokens


def _tokenize_compact(text: str) -> List[Token]:
    """Split ``1w2d3h4m5s`` (any subset, any order) into tokens."""
    tokens = []
    seen = set()
    digits = ""

    for char in text:
        if _is_digit(char):
            digits += char
            continue
        unit = c.COMPACT_UNITS.get(char)
        if unit is None:
            raise MalformedDuration(text, "unknown unit '{}'".format(char))
        if not digits:
            raise MalformedDuration(text, "missing number before '{}'".format(char))
        if unit in seen:
            raise MalformedDuration(text, "repeated unit '{}'".format(char))
        seen.add(unit)
        tokens.append(Token(_quantity(digits, text), unit))
        digits = ""

    if digits:
        raise MalformedDuration(text, "missing unit after '{}'".format(digits))
    if not tokens:
        raise MalformedDuration(text, "no components")
    return tokens


def _tokenize_clock(text: str) -> List[Token]:
    """Split ``HH:MM:SS`` into tokens."""
    fields = text.split(":")
    if len(fields) != 3:
        raise MalformedDuration(text, "expected HH:MM:SS")
    for field in fields:
        if not _DIGITS.fullmatch(field):
            raise MalformedDuration(text, "expected HH:MM:SS")
    hours, minutes, seconds = fields
    return [
        Token(_quantity(hours, text), "hour"),
        Token(_quantity(minutes, text), "minute"),
        Token(_quantity(seconds, text), "second"),
    ]


def tokenize(text: str) -> List[Token]:
    """
    Turn a duration string into ``(quantity, unit)`` tokens.

    The grammar is picked from the first character: ``P`` is ISO-8601, a
    digit followed somewhere by ``:`` is a clock, anything else is the
    compact form. Unit names are resolved here, so ``M`` already reads as
    ``month`` or ``minute`` in the result.

    :raise MalformedDuration: if the text does not match the grammar.
    """
    if text.startswith("P"):
        return _tokenize_iso(text)
    if text[:1] and _is_digit(text[0]) and ":" in text:
        return _tokenize_clock(text)
    return _tokenize_compact(text)


def _accumulate(tokens: List[Token], text: str) -> int:
    total = 0
    for token in tokens:
        if token.unit == "year" and token.quantity:
            logger.warning(
                "Ignoring %d year(s) in duration %r: years are not supported",
                token.quantity,
                text,
            )
        total += token.quantity * c.DURATION_UNIT_SCALE[token.unit]
        if total > c.UINT64_MAX:
            raise MalformedDuration(text, "overflows 64 bits")
    return total


class Duration(int):
    """
    Unsigned nanosecond count.

    Example:

    .. code-block:: python

        >>> d = Duration.parse("00:04:30")
        >>> int(d)
        270000000000
        >>> str(d)
        'PT4M30S'
    """

    def __new__(cls, nanoseconds: int = 0) -> "Duration":
        if isinstance(nanoseconds, (str, bytes)):
            raise TypeError("Use Duration.parse() to build a Duration from text")
        value = int.__new__(cls, nanoseconds)
        if not 0 <= value <= c.UINT64_MAX:
            raise ValueError(
                "Duration must be between 0 and {} ns, got {}".format(
                    c.UINT64_MAX, int(value)
                )
            )
        return value

    @classmethod
    def parse(cls, text: Union[str, bytes]) -> "Duration":
        """
        Parse any of the accepted duration forms.

        An empty string and ``"0"`` are zero. Each call returns a new value.

        :param text: ``P7DT12H2M5S``, ``1w2d``, ``00:04:30``...
        :raise MalformedDuration: if the text is not a valid duration.
        """
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError:
                raise MalformedDuration(repr(text), "not UTF-8")
        if not isinstance(text, str):
            raise MalformedDuration(repr(text), "expected text")

        token = text.strip(c.ASCII_WHITESPACE)
        if token in ("", "0"):
            return cls(0)
        return cls(_accumulate(tokenize(token), token))

    from_text = parse

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        return cls(
            (delta.days * 86400 + delta.seconds) * c.NS_SECOND
            + delta.microseconds * 1000
        )

    def to_timedelta(self) -> timedelta:
        return timedelta(microseconds=int(self) // 1000)

    def total_seconds(self) -> float:
        return int(self) / c.NS_SECOND

    def format(self) -> str:
        """
        Render the canonical ``P[nD][T[nH][nM][nS]]`` form.

        Weeks and months are folded into days. Anything below a second is
        truncated.
        """
        seconds = int(self) // c.NS_SECOND
        days, seconds = divmod(seconds, 86400)
        hours, seconds = divmod(seconds, 3600)
        minutes, seconds = divmod(seconds, 60)

        text = "P"
        if days:
            text += "{}D".format(days)
        time_part = "".join(
            "{}{}".format(value, unit)
            for value, unit in ((hours, "H"), (minutes, "M"), (seconds, "S"))
            if value
        )
        if time_part:
            text += "T" + time_part
        elif not days:
            text += "T0S"
        return text

    __str__ = format

    def __repr__(self) -> str:
        return "Duration({})".format(int(self))
