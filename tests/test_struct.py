"""
Tests for record inspection through Struct.

These tests verify:
    - Names, fields and field lookup
    - Values with nested records inlined
    - Zero checks across nested records
    - Record name
"""

import datetime
from dataclasses import dataclass, field
from typing import Optional

import pytest

from recordmap.converter import Struct, all_zero, fields, has_zero, name, names, values
from recordmap.errors import NotARecordError
from recordmap.fields import tag


@dataclass
class Inner:
    C: bool = False


@dataclass
class Sample:
    A: str = ""
    B: int = 0
    Nested: Inner = field(default_factory=Inner)
    _private: str = ""


@dataclass
class Options:
    Empty: str = tag(",omitempty", default="")
    Count: int = tag("count,string", default=0)
    Kept: Inner = tag(",omitnested", default_factory=Inner)
    Missing: Optional[str] = None


class TestStructConstruction:
    """Test wrapping records."""

    def test_rejects_non_records(self):
        with pytest.raises(NotARecordError):
            Struct(["foo"])

    def test_default_tag_name(self):
        assert Struct(Sample()).tag_name == "structs"

    def test_name(self):
        assert Struct(Sample()).name() == "Sample"
        assert name(Inner()) == "Inner"


class TestStructFields:
    """Test field listing and lookup."""

    def test_names_skip_private_fields(self):
        assert names(Sample()) == ["A", "B", "Nested"]

    def test_fields_follow_declaration_order(self):
        assert [f.key for f in fields(Options())] == ["Empty", "count", "Kept", "Missing"]

    def test_field_lookup(self):
        s = Struct(Sample(A="a"))
        a = s.field("A")
        assert a.value(s.record) == "a"
        assert s.field("_private").exported is False

    def test_field_lookup_missing_raises(self):
        with pytest.raises(KeyError, match="Sample has no field 'Z'"):
            Struct(Sample()).field("Z")


class TestStructValues:
    """Test value listing."""

    def test_nested_values_are_inlined(self):
        assert values(Sample(A="a", B=2, Nested=Inner(C=True))) == ["a", 2, True]

    def test_options_apply_to_values(self):
        kept = Inner(C=True)
        assert values(Options(Count=4, Kept=kept)) == ["4", kept]

    def test_leaf_values_are_kept(self):
        @dataclass
        class Stamped:
            when: datetime.datetime = datetime.datetime.min

        when = datetime.datetime(2024, 1, 1)
        assert values(Stamped(when=when)) == [when]


class TestStructZero:
    """Test zero checks."""

    def test_all_zero(self):
        assert all_zero(Sample())
        assert not all_zero(Sample(A="a"))

    def test_all_zero_looks_into_nested_records(self):
        assert not all_zero(Sample(Nested=Inner(C=True)))

    def test_all_zero_ignores_private_fields(self):
        assert Struct(Sample(_private="x")).is_zero()

    def test_has_zero(self):
        assert has_zero(Sample(A="a"))
        assert not has_zero(Sample(A="a", B=1, Nested=Inner(C=True)))

    def test_has_zero_looks_into_nested_records(self):
        assert has_zero(Sample(A="a", B=1))

    def test_omitnested_record_is_compared_whole(self):
        @dataclass
        class Outer:
            inner: Inner = tag(",omitnested", default_factory=Inner)

        assert Struct(Outer()).is_zero()
        assert not Struct(Outer(inner=Inner(C=True))).is_zero()
