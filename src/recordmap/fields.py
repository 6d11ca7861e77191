"""
Field model for records.

A record is an instance of a dataclass. Its fields are described by
``Field`` objects built from ``dataclasses.fields()`` at call time:

    - name: declared attribute name
    - type: declared annotation (a string under postponed evaluation)
    - tag: raw tag string found under the selected tag name
    - exported: False for underscore-prefixed names
    - embedded: True when the field stands in for an anonymous member

Tags live in the dataclass field metadata, keyed by tag name:

    @dataclass
    class Server:
        name: str = field(default="", metadata={"structs": "server_name"})
        port: int = tag("port,omitempty", default=0)
"""

import dataclasses
import datetime
import numbers
from collections.abc import Sized
from dataclasses import dataclass
from functools import cached_property
from typing import Any, List, Tuple

from .errors import NotARecordError
from .tags import SKIP, TagOptions, parse_tag


DEFAULT_TAG_NAME = "structs"
EMBEDDED = "embedded"

# Types whose zero value is not what a bare constructor call yields
_ZERO_VALUES: Tuple[Tuple[type, Any], ...] = (
    (datetime.datetime, datetime.datetime.min),
    (datetime.date, datetime.date.min),
)

# Value types whose zero is what a bare constructor call yields
_CONSTRUCTIBLE_ZEROS = (numbers.Number, str, bytes, bytearray, datetime.time, datetime.timedelta)


def is_record(value: Any) -> bool:
    """Return True for dataclass instances. Dataclass classes are not records."""
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def is_zero(value: Any) -> bool:
    """
    Return True when ``value`` equals the zero value of its type.

    None, 0, False, "", empty containers, datetime.min and date.min are zero.
    A record is zero when every one of its fields is zero. Numbers, text,
    bytes, times and timedeltas are compared against ``type(value)()``.
    Other sized objects are zero when empty. Anything else is never zero,
    and so is any value whose comparison raises.
    """
    if value is None:
        return True
    if is_record(value):
        return all(is_zero(getattr(value, f.name)) for f in dataclasses.fields(value))
    for kind, zero in _ZERO_VALUES:
        if isinstance(value, kind):
            return _equals(value, zero)
    if isinstance(value, _CONSTRUCTIBLE_ZEROS):
        try:
            zero = type(value)()
        except (TypeError, ValueError):
            return False
        return _equals(value, zero)
    if isinstance(value, Sized):
        try:
            return len(value) == 0
        except (TypeError, ValueError):
            return False
    return False


def _equals(value: Any, other: Any) -> bool:
    try:
        return bool(value == other)
    except (TypeError, ValueError):
        return False


@dataclass(frozen=True)
class Field:
    """
    Describes one field of a record under a given tag name.

    Properties:
        name: Declared attribute name
        type: Declared annotation as stored on the dataclass
        tag: Raw tag string, empty when the field carries none
        exported: Whether the field is visible to conversion
        embedded: Whether the field is an embedded member that may be flattened
    """

    name: str
    type: Any
    tag: str = ""
    exported: bool = True
    embedded: bool = False

    @cached_property
    def parsed_tag(self) -> Tuple[str, TagOptions]:
        return parse_tag(self.tag)

    @property
    def options(self) -> TagOptions:
        return self.parsed_tag[1]

    @property
    def key(self) -> str:
        """Output key: the tag name when given, else the declared name."""
        tag_name = self.parsed_tag[0]
        return tag_name or self.name

    @property
    def excluded(self) -> bool:
        return self.tag == SKIP or self.options.has(SKIP)

    def value(self, record: Any) -> Any:
        return getattr(record, self.name)

    def is_zero(self, record: Any) -> bool:
        return is_zero(self.value(record))


def describe(record: Any, tag_name: str = DEFAULT_TAG_NAME) -> List[Field]:
    """Describe every field of ``record``, visible or not, in declaration order."""
    if not is_record(record):
        raise NotARecordError(record)

    described = []
    for f in dataclasses.fields(record):
        described.append(
            Field(
                name=f.name,
                type=f.type,
                tag=f.metadata.get(tag_name, ""),
                exported=not f.name.startswith("_"),
                embedded=bool(f.metadata.get(EMBEDDED, False)),
            )
        )
    return described


def record_fields(record: Any, tag_name: str = DEFAULT_TAG_NAME) -> List[Field]:
    """
    Return the visible fields of ``record`` in declaration order.

    Unexported fields and fields excluded with ``-`` are left out.

    Raises:
        NotARecordError: if ``record`` is not a dataclass instance
    """
    return [f for f in describe(record, tag_name) if f.exported and not f.excluded]


def tag(value: str, *, tag_name: str = DEFAULT_TAG_NAME, embedded: bool = False, **kwargs: Any) -> Any:
    """
    Build a dataclass field carrying a tag.

    Keyword arguments other than ``tag_name`` and ``embedded`` are passed
    to ``dataclasses.field`` (default, default_factory, repr, ...).

    Example:
        @dataclass
        class Address:
            country: str = tag("country", default="")
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[tag_name] = value
    if embedded:
        metadata[EMBEDDED] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def embed(value: str = "", **kwargs: Any) -> Any:
    """Build an embedded record field. Shorthand for ``tag(value, embedded=True)``."""
    return tag(value, embedded=True, **kwargs)
