"""
Declarative decoding of NX-API response bodies.

A body is described with a :class:`Schema` that maps the Python field names
to the NX-API keys::

    NEIGHBOR = Schema(
        {
            "neighbor_id": Field("neighbor-id"),
            "last_flap": Field("lastflap", Duration),
            "remote_as": Field("remoteas", int),
        }
    )
    BODY = Schema({"neighbors": Table("TABLE_neighbor", "ROW_neighbor", NEIGHBOR)})

Decoding follows what the device sends rather than what the documentation
promises: missing keys get the zero value of their kind, numbers and numeric
strings are converted both ways, and single-row tables are lists like any
other. Text values such as durations and timestamps go through their
``parse`` hook; a value that does not decode fails the whole record with a
:class:`DecodeError` naming the field.
"""

import logging
from typing import Any, Callable, Dict, Union

from cisco_nxapi.base.duration import Duration
from cisco_nxapi.base.exceptions import DecodeError
from cisco_nxapi.base.helpers import get_table_rows
from cisco_nxapi.base.timestamp import TimeStamp

logger = logging.getLogger(__name__)

_TRUE_STRINGS = ("true", "yes", "1", "enabled", "on")
_FALSE_STRINGS = ("false", "no", "0", "disabled", "off", "")


def _to_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ValueError("expected a string, got {}".format(type(value).__name__))


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        return int(text, 10)
    raise ValueError("expected an integer, got {!r}".format(value))


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("expected a number, got {!r}".format(value))
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        return float(text)
    raise ValueError("expected a number, got {!r}".format(value))


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError("expected a boolean, got {!r}".format(value))


def _to_duration(value: Any) -> Duration:
    return Duration.parse(_to_str(value))


def _to_timestamp(value: Any) -> TimeStamp:
    return TimeStamp.parse(_to_str(value))


_DECODERS: Dict[Any, Callable[[Any], Any]] = {
    str: _to_str,
    int: _to_int,
    float: _to_float,
    bool: _to_bool,
    Duration: _to_duration,
    TimeStamp: _to_timestamp,
}

_ZERO_VALUES: Dict[Any, Callable[[], Any]] = {
    str: str,
    int: int,
    float: float,
    bool: bool,
    Duration: Duration,
    TimeStamp: TimeStamp,
}


class ListOf(object):
    """A field that holds a list of scalars, e.g. CDP capabilities."""

    def __init__(self, kind: Any):
        if kind not in _DECODERS:
            raise TypeError("Unsupported list element kind: {!r}".format(kind))
        self.kind = kind

    def __repr__(self) -> str:
        return "ListOf({})".format(self.kind.__name__)


class Field(object):
    """A scalar value stored under ``key``."""

    def __init__(self, key: str, kind: Any = str, default: Any = None):
        if not isinstance(kind, ListOf) and kind not in _DECODERS:
            raise TypeError("Unsupported field kind: {!r}".format(kind))
        self.key = key
        self.kind = kind
        self.default = default

    def zero(self) -> Any:
        if self.default is not None:
            return self.default
        if isinstance(self.kind, ListOf):
            return []
        return _ZERO_VALUES[self.kind]()

    def decode(self, value: Any, path: str) -> Any:
        if isinstance(self.kind, ListOf):
            if not isinstance(value, list):
                value = [value]
            return [
                self._convert(self.kind.kind, item, "{}[{}]".format(path, i))
                for i, item in enumerate(value)
            ]
        return self._convert(self.kind, value, path)

    @staticmethod
    def _convert(kind: Any, value: Any, path: str) -> Any:
        try:
            return _DECODERS[kind](value)
        except (ValueError, TypeError) as e:
            raise DecodeError(
                path, "cannot decode {!r} as {}: {}".format(value, kind.__name__, e)
            ) from e

    def encode(self, value: Any) -> Any:
        if isinstance(value, list):
            return [self.encode(item) for item in value]
        if isinstance(value, (Duration, TimeStamp)):
            return str(value)
        return value


class Nested(object):
    """A sub-object stored under ``key``."""

    def __init__(self, key: str, schema: "Schema"):
        self.key = key
        self.schema = schema


class Table(object):
    """An NX-OS ``TABLE_x``/``ROW_x`` pair, decoded as a flat list of rows."""

    def __init__(self, table: str, row: str, schema: "Schema"):
        self.table = table
        self.row = row
        self.schema = schema


FieldSpec = Union[Field, Nested, Table]


class Schema(object):
    """Maps Python field names to NX-API keys."""

    def __init__(self, fields: Dict[str, FieldSpec]):
        self.fields = fields

    def decode(self, raw: Any, path: str = "body") -> Dict[str, Any]:
        """
        Decode an NX-API object into a dict keyed by the schema field names.

        :raise DecodeError: if a present value cannot be converted.
        """
        if raw is None or raw == "":
            raw = {}
        if not isinstance(raw, dict):
            raise DecodeError(
                path, "expected an object, got {}".format(type(raw).__name__)
            )

        record: Dict[str, Any] = {}
        for name, spec in self.fields.items():
            field_path = "{}.{}".format(path, name)
            if isinstance(spec, Table):
                rows = get_table_rows(raw, spec.table, spec.row)
                record[name] = [
                    spec.schema.decode(row, "{}[{}]".format(field_path, i))
                    for i, row in enumerate(rows)
                ]
            elif isinstance(spec, Nested):
                record[name] = spec.schema.decode(raw.get(spec.key), field_path)
            else:
                value = raw.get(spec.key)
                if value is None:
                    record[name] = spec.zero()
                else:
                    record[name] = spec.decode(value, field_path)

        unknown = set(raw) - self.keys()
        if unknown:
            logger.debug("%s: ignoring keys %s", path, sorted(unknown))
        return record

    def encode(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Map a decoded record back to NX-API keys, rendering text values."""
        raw: Dict[str, Any] = {}
        for name, spec in self.fields.items():
            if name not in record:
                continue
            value = record[name]
            if isinstance(spec, Table):
                raw[spec.table] = {
                    spec.row: [spec.schema.encode(row) for row in value]
                }
            elif isinstance(spec, Nested):
                raw[spec.key] = spec.schema.encode(value)
            else:
                raw[spec.key] = spec.encode(value)
        return raw

    def keys(self) -> set:
        keys = set()
        for spec in self.fields.values():
            keys.add(spec.table if isinstance(spec, Table) else spec.key)
        return keys

