"""
Tag parsing for record fields.

A tag is a comma-separated string stored in a dataclass field's metadata:

    name[,opt1,opt2,...]

The first segment is the key override (empty means "use the field name").
The remaining segments are option flags.

Recognised flags:
    omitempty   - skip the field when it holds its zero value
    omitnested  - never expand the field into a nested mapping
    flatten     - merge an embedded record's keys into the parent
    string      - store str(value) instead of the value
    -           - exclude the field
"""

from dataclasses import dataclass
from typing import Iterator, Tuple


OMITEMPTY = "omitempty"
OMITNESTED = "omitnested"
FLATTEN = "flatten"
STRING = "string"
SKIP = "-"


@dataclass(frozen=True)
class TagOptions:
    """
    Option flags that follow the name in a tag.

    Tokens are stored exactly as written. ``", opt"`` yields the token
    ``" opt"``, which is not the flag ``opt``.
    """

    tokens: Tuple[str, ...] = ()

    def has(self, flag: str) -> bool:
        """Return True when ``flag`` is one of the tokens."""
        return flag in self.tokens

    def __contains__(self, flag: object) -> bool:
        return flag in self.tokens

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


def parse_tag(tag: str) -> Tuple[str, TagOptions]:
    """
    Split a raw tag into its name and options.

    Examples:
        parse_tag("name,omitempty") -> ("name", TagOptions(("omitempty",)))
        parse_tag(",flatten")       -> ("", TagOptions(("flatten",)))
        parse_tag("")               -> ("", TagOptions(()))
    """
    name, *options = tag.split(",")
    return name.strip(), TagOptions(tuple(options))
