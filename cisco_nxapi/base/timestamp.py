"""Wall clock timestamps reported by NX-OS (compile times, reset times, ARP entries)."""

import calendar
from datetime import datetime, timezone
from typing import Union

from cisco_nxapi.base import constants as c
from cisco_nxapi.base.exceptions import MalformedTimeStamp


class TimeStamp(int):
    """
    Seconds since the Unix epoch, UTC.

    Parses ``11/04/2019 22:13:33``, ``11/04/2019`` and ``Wed May 23 18:26:12 2018``;
    always renders as ``MM/DD/YYYY hh:mm:ss``.
    """

    def __new__(cls, seconds: int = 0) -> "TimeStamp":
        if isinstance(seconds, (str, bytes)):
            raise TypeError("Use TimeStamp.parse() to build a TimeStamp from text")
        value = int.__new__(cls, seconds)
        if value < 0:
            raise ValueError("TimeStamp cannot be before the epoch")
        return value

    @classmethod
    def parse(cls, text: Union[str, bytes]) -> "TimeStamp":
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError:
                raise MalformedTimeStamp(repr(text), "not UTF-8")
        if not isinstance(text, str):
            raise MalformedTimeStamp(repr(text), "expected text")

        token = text.strip(c.ASCII_WHITESPACE)
        if not token:
            return cls(0)

        for layout in c.TIMESTAMP_INPUT_FORMATS:
            try:
                parsed = datetime.strptime(token, layout)
            except ValueError:
                continue
            seconds = calendar.timegm(parsed.timetuple())
            if seconds < 0:
                raise MalformedTimeStamp(token, "before the epoch")
            return cls(seconds)

        raise MalformedTimeStamp(token, "expected MM/DD/YYYY hh:mm:ss")

    from_text = parse

    def time(self) -> datetime:
        return datetime.fromtimestamp(int(self), tz=timezone.utc)

    def format(self) -> str:
        return self.time().strftime(c.TIMESTAMP_FORMAT)

    __str__ = format

    def __repr__(self) -> str:
        return "TimeStamp({})".format(int(self))
