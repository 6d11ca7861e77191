"""
recordmap: convert dataclass records into plain mappings.

Reads per-field tags from dataclass field metadata:

    @dataclass
    class Server:
        name: str = tag("server_name")
        port: int = tag(",omitempty", default=0)

    to_map(Server(name="web")) == {"server_name": "web"}

The output is built from plain dicts, lists and the original leaf values.
Turning it into JSON, YAML or anything else is left to the caller.
"""

from .converter import Struct, all_zero, fill_map, has_zero, name, names, to_map, values
from .errors import NotARecordError, RecordMapError
from .fields import DEFAULT_TAG_NAME, Field, embed, is_record, is_zero, record_fields, tag
from .tags import TagOptions, parse_tag

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TAG_NAME",
    "Field",
    "NotARecordError",
    "RecordMapError",
    "Struct",
    "TagOptions",
    "all_zero",
    "embed",
    "fill_map",
    "has_zero",
    "is_record",
    "is_zero",
    "name",
    "names",
    "parse_tag",
    "record_fields",
    "tag",
    "to_map",
    "values",
]
