"""
Field Values for the Form State Model

A field is one named unit of model state. It is always one of two kinds:
    - ScalarField: a single string value
    - CodeSetField: an ordered, duplicate-free list of string codes

ARCHITECTURAL RULE:
    Fields are immutable.
    Every mutation of the model builds a NEW field and swaps it in.
    Nothing outside a field can reach its internal storage.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterable, List, Tuple


class FieldKind(Enum):
    """The two field kinds. Fixed per field name for the life of a model."""

    SCALAR = "scalar"
    CODE_SET = "code_set"


class Field(ABC):
    """
    Base class for all field values.

    Concrete kinds are frozen dataclasses. Branching on the kind is done
    with isinstance() against ScalarField / CodeSetField.
    """

    kind: ClassVar[FieldKind]

    @property
    @abstractmethod
    def value(self) -> Any:
        """Read accessor. Never exposes internal storage."""


@dataclass(frozen=True)
class ScalarField(Field):
    """
    A single-valued field.

    The raw value is held as-is (including the empty string).
    Appending to a scalar replaces it; there is no accumulation.
    """

    raw: Any = ""

    kind: ClassVar[FieldKind] = FieldKind.SCALAR

    @property
    def value(self) -> Any:
        return self.raw


@dataclass(frozen=True)
class CodeSetField(Field):
    """
    An ordered set of hierarchical codes.

    Codes are either bare ("region") or qualified ("region_north"),
    depending on the model's delimiter. Insertion order is significant.

    Codes are always stored as strings. None and "" entries are dropped and
    duplicates collapse to their first occurrence, however the field is built.
    """

    codes: Tuple[str, ...] = ()

    kind: ClassVar[FieldKind] = FieldKind.CODE_SET

    def __post_init__(self):
        kept = [str(c) for c in self.codes if c is not None and c != ""]
        object.__setattr__(self, "codes", tuple(dict.fromkeys(kept)))

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> "CodeSetField":
        return cls(codes=tuple(values))

    @property
    def value(self) -> List[str]:
        return list(self.codes)

    def __contains__(self, code: object) -> bool:
        return code in self.codes

    def __len__(self) -> int:
        return len(self.codes)


def create_field(raw: Any) -> Field:
    """
    Classify a raw value into a field.

    Lists and tuples become a CodeSetField (with empty entries filtered out);
    anything else, strings included, becomes a ScalarField holding the raw value.

    Examples:
        create_field("north")            -> ScalarField(raw="north")
        create_field(["a", "", None, "b"]) -> CodeSetField(codes=("a", "b"))
    """
    if isinstance(raw, (list, tuple)):
        return CodeSetField.from_values(raw)
    return ScalarField(raw=raw)


__all__ = [
    "FieldKind",
    "Field",
    "ScalarField",
    "CodeSetField",
    "create_field",
]
