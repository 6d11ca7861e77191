"""
Conversion of records into plain mappings.

Walks a record's visible fields in declaration order and produces a dict
keyed by field name (or tag override). Nested records, sequences of records
and mappings of records are expanded into the same shape. Everything else
is stored unchanged.

The only error raised is NotARecordError for a top-level argument that is
not a dataclass instance. Structural surprises deeper down never raise:
values pass through as they are.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from .errors import NotARecordError
from .fields import DEFAULT_TAG_NAME, Field, describe, is_record, is_zero, record_fields
from .tags import FLATTEN, OMITEMPTY, OMITNESTED, STRING


logger = logging.getLogger(__name__)


def _holds_records(value: Any) -> bool:
    if is_record(value):
        return True
    if isinstance(value, (list, tuple)):
        return any(is_record(item) for item in value)
    return False


class Struct:
    """
    Wraps a record for conversion and inspection.

    Properties:
        record:
            The wrapped dataclass instance (read-only to this class)

        tag_name:
            Metadata key tags are read from. Defaults to "structs" and may be
            reassigned before calling map(), e.g. to read "json" tags.

    Raises:
        NotARecordError: if ``record`` is not a dataclass instance
    """

    def __init__(self, record: Any, tag_name: str = DEFAULT_TAG_NAME):
        if not is_record(record):
            raise NotARecordError(record)
        self.record = record
        self.tag_name = tag_name

    def name(self) -> str:
        """Class name of the wrapped record."""
        return type(self.record).__name__

    def fields(self) -> List[Field]:
        return record_fields(self.record, self.tag_name)

    def names(self) -> List[str]:
        return [f.name for f in self.fields()]

    def field(self, name: str) -> Field:
        """
        Retrieve a field descriptor by declared name.

        Unexported and excluded fields can be looked up too; check
        ``Field.exported`` and ``Field.excluded``.

        Raises:
            KeyError: if the record declares no such field
        """
        for f in describe(self.record, self.tag_name):
            if f.name == name:
                return f
        raise KeyError(f"{self.name()} has no field {name!r}")

    def map(self) -> Dict[str, Any]:
        """Convert the record into a new dict."""
        out: Dict[str, Any] = {}
        self.fill_map(out)
        return out

    def fill_map(self, out: Optional[Dict[str, Any]]) -> None:
        """Write the converted fields into ``out``. A None target is ignored."""
        if out is None:
            return

        for f in self.fields():
            value = f.value(self.record)
            options = f.options

            if value is None:
                logger.debug("Skipping %s.%s: value is None", self.name(), f.name)
                continue
            if options.has(OMITEMPTY) and is_zero(value):
                continue

            if f.embedded and options.has(FLATTEN) and not options.has(OMITNESTED) and is_record(value):
                nested = self._nested(value)
                if isinstance(nested, dict):
                    out.update(nested)
                    continue

            if options.has(STRING):
                out[f.key] = str(value)
            elif options.has(OMITNESTED):
                out[f.key] = value
            else:
                out[f.key] = self._nested(value)

    def values(self) -> List[Any]:
        """
        Field values in declaration order.

        Nested records contribute their own values inline unless tagged
        omitnested. None values and empty omitempty fields are skipped.
        """
        out: List[Any] = []
        for f in self.fields():
            value = f.value(self.record)
            options = f.options

            if value is None:
                continue
            if options.has(OMITEMPTY) and is_zero(value):
                continue
            if options.has(STRING):
                out.append(str(value))
                continue

            if is_record(value) and not options.has(OMITNESTED):
                nested = Struct(value, self.tag_name)
                if nested.fields():
                    out.extend(nested.values())
                    continue

            out.append(value)
        return out

    def is_zero(self) -> bool:
        """True when every visible field holds its zero value."""
        for f in self.fields():
            value = f.value(self.record)
            if is_record(value) and not f.options.has(OMITNESTED):
                if not Struct(value, self.tag_name).is_zero():
                    return False
                continue
            if not is_zero(value):
                return False
        return True

    def has_zero(self) -> bool:
        """True when any visible field holds its zero value."""
        for f in self.fields():
            value = f.value(self.record)
            if is_record(value) and not f.options.has(OMITNESTED):
                if Struct(value, self.tag_name).has_zero():
                    return True
                continue
            if is_zero(value):
                return True
        return False

    def _nested_mapping(self, value: Mapping) -> Dict[Any, Any]:
        out: Dict[Any, Any] = {}
        for key, item in value.items():
            text = key if isinstance(key, str) else str(key)
            if text in out or (text != key and text in value):
                # Keep the original key so colliding entries are not lost
                logger.debug("Keeping key %r as is: %r is already taken", key, text)
                text = key
            out[text] = self._nested(item)
        return out

    def _nested(self, value: Any) -> Any:
        if is_record(value):
            nested = Struct(value, self.tag_name)
            if not nested.fields():
                # Opaque leaf: a record with nothing visible stays as it is
                logger.debug("Keeping %s as a leaf: no visible fields", nested.name())
                return value
            return nested.map()

        if isinstance(value, Mapping):
            if any(_holds_records(item) for item in value.values()):
                return self._nested_mapping(value)
            return value

        if isinstance(value, (list, tuple)):
            if any(is_record(item) for item in value):
                return [self._nested(item) for item in value]
            return value

        return value


def to_map(record: Any, tag_name: str = DEFAULT_TAG_NAME) -> Dict[str, Any]:
    """Convert ``record`` into a dict. Raises NotARecordError for non-records."""
    return Struct(record, tag_name).map()


def fill_map(record: Any, out: Optional[Dict[str, Any]], tag_name: str = DEFAULT_TAG_NAME) -> None:
    Struct(record, tag_name).fill_map(out)


def values(record: Any, tag_name: str = DEFAULT_TAG_NAME) -> List[Any]:
    return Struct(record, tag_name).values()


def names(record: Any, tag_name: str = DEFAULT_TAG_NAME) -> List[str]:
    return Struct(record, tag_name).names()


def fields(record: Any, tag_name: str = DEFAULT_TAG_NAME) -> List[Field]:
    return Struct(record, tag_name).fields()


def all_zero(record: Any, tag_name: str = DEFAULT_TAG_NAME) -> bool:
    return Struct(record, tag_name).is_zero()


def has_zero(record: Any, tag_name: str = DEFAULT_TAG_NAME) -> bool:
    return Struct(record, tag_name).has_zero()


def name(record: Any) -> str:
    return Struct(record).name()
