"""Tests for get_zero."""

import unittest
from dataclasses import InitVar, dataclass, field
from typing import Dict, List, Optional

from expbackoff.zero import get_zero


@dataclass
class Point:
    x: int
    y: float


@dataclass
class Record:
    name: str
    point: Point
    tags: List[str]
    note: Optional[str]
    counts: Dict[str, int] = field(default_factory=dict)


@dataclass
class Named:
    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("name required")


@dataclass(frozen=True)
class Scaled:
    value: float
    scale: InitVar[float]
    total: float = field(init=False)

    def __post_init__(self, scale):
        object.__setattr__(self, "total", self.value * scale)


@dataclass
class Dangling:
    count: int
    other: "DoesNotExist"  # noqa: F821


class Opaque:
    def __init__(self, required):
        self.required = required


class TestGetZero(unittest.TestCase):
    """Verify zero values for builtin, generic and dataclass types."""

    def test_builtin_scalars(self):
        """Scalars map to their empty constructor value."""
        self.assertEqual(get_zero(int), 0)
        self.assertEqual(get_zero(float), 0.0)
        self.assertEqual(get_zero(str), "")
        self.assertEqual(get_zero(bytes), b"")
        self.assertIs(get_zero(bool), False)

    def test_containers(self):
        """Containers map to empty instances."""
        self.assertEqual(get_zero(list), [])
        self.assertEqual(get_zero(dict), {})
        self.assertEqual(get_zero(tuple), ())

    def test_parameterized_generics(self):
        """Generic aliases use their origin type."""
        self.assertEqual(get_zero(List[int]), [])
        self.assertEqual(get_zero(Dict[str, int]), {})
        self.assertEqual(get_zero(list[str]), [])

    def test_optional_is_none(self):
        """Optional types have None as their zero value."""
        self.assertIsNone(get_zero(Optional[int]))

    def test_none_and_unknown(self):
        """None and types that cannot be built give None."""
        self.assertIsNone(get_zero(None))
        self.assertIsNone(get_zero(type(None)))
        self.assertIsNone(get_zero(Opaque))

    def test_dataclass_fields_are_zeroed(self):
        """Dataclasses are built with zero values for every field, recursively."""
        rec = get_zero(Record)
        self.assertEqual(rec, Record(name="", point=Point(0, 0.0), tags=[], note=None, counts={}))

    def test_validating_dataclass_is_not_validated(self):
        """A zero value skips __post_init__, so validation cannot reject it."""
        named = get_zero(Named)
        self.assertIsInstance(named, Named)
        self.assertEqual(named.name, "")

    def test_initvar_and_non_init_fields(self):
        """InitVars are not required and init=False fields are zeroed too."""
        scaled = get_zero(Scaled)
        self.assertIsInstance(scaled, Scaled)
        self.assertEqual(scaled.value, 0.0)
        self.assertEqual(scaled.total, 0.0)

    def test_unresolvable_annotation_zeroes_to_none(self):
        """A field whose annotation cannot be resolved holds None."""
        dangling = get_zero(Dangling)
        self.assertEqual(dangling.count, 0)
        self.assertIsNone(dangling.other)

    def test_fresh_instances(self):
        """Each call returns a new mutable container."""
        first = get_zero(list)
        first.append(1)
        self.assertEqual(get_zero(list), [])


if __name__ == "__main__":
    unittest.main()
