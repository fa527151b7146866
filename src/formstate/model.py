"""
Core Form State Model

FormModel is the container behind a view's model layer. It owns a fixed set
of named fields and exposes the only way to change them:
    - append (set for scalars, hierarchical insert for code sets)
    - remove
    - clear_field / clear_state

ARCHITECTURAL RULE:
    The key set is frozen at construction.
    A field's kind never changes after construction.
    Callers read through `state` snapshots; they never touch the fields directly.

HIERARCHICAL CODES:
    With the default delimiter "_", "region" is a bare parent code and
    "region_north" is a qualified child of it. Within one code set a bare
    parent and any of its qualified children never coexist:

        ["region_north", "region_south"]  + "region"       -> ["region"]
        ["region"]                        + "region_north" -> ["region_north"]
        ["region_north"]                  + "region_south" -> ["region_north", "region_south"]
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from formstate.fields import CodeSetField, Field, FieldKind, ScalarField


DEFAULT_DELIMITER = "_"


class FormStateError(Exception):
    """Base class for form state errors."""
    pass


class InvalidInitialStateError(FormStateError):
    """Raised when the initial field mapping is missing or malformed."""
    pass


class InvalidFieldNameError(FormStateError):
    """Raised when a field name is not one of the model's keys."""

    def __init__(self, field_name: Any):
        super().__init__(f"{field_name} is invalid fieldName.")
        self.field_name = field_name


def split_code(code: str, delimiter: str = DEFAULT_DELIMITER) -> Tuple[str, Optional[str]]:
    """
    Split a hierarchical code into (parent, child).

    Only the first delimiter matters. The child is None unless there is a
    non-empty segment after it.

    Examples:
        split_code("a")     -> ("a", None)
        split_code("a_1")   -> ("a", "1")
        split_code("a_")    -> ("a", None)
        split_code("a_1_x") -> ("a", "1")
    """
    parts = code.split(delimiter)
    parent = parts[0]
    child = parts[1] if len(parts) > 1 and parts[1] else None
    return parent, child


class FormModel:
    """
    Fixed-key container of fields with a controlled mutation API.

    Properties:
        keys:
            Field names in construction order (a new list each call)

        delimiter:
            Separator between parent and child codes, default "_"

        state:
            Read-only snapshot of field name -> field value

        fields:
            Read-only snapshot of field name -> Field object

    Not thread-safe. Every mutation reads a field and then replaces it,
    so concurrent writers must be serialized by the caller.
    """

    def __init__(self, initial_state: Mapping[str, Field], delimiter: str = DEFAULT_DELIMITER):
        if initial_state is None or not isinstance(initial_state, Mapping):
            raise InvalidInitialStateError("initial_state is required.")
        for name, field in initial_state.items():
            if not isinstance(field, Field):
                raise InvalidInitialStateError(
                    f"{name}: expected a Field, got {type(field).__name__}. "
                    "Use create_field() or InitialStateBuilder."
                )
        if not isinstance(delimiter, str) or not delimiter:
            raise ValueError("delimiter must be a non-empty string")

        self._fields: Dict[str, Field] = dict(initial_state)
        self._keys: Tuple[str, ...] = tuple(initial_state.keys())
        self._delimiter = delimiter

    def __repr__(self) -> str:
        return f"FormModel(keys={list(self._keys)!r}, delimiter={self._delimiter!r})"

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def keys(self) -> List[str]:
        return list(self._keys)

    @property
    def state(self) -> Mapping[str, Any]:
        """Point-in-time snapshot. Code set values are fresh lists."""
        return MappingProxyType({name: field.value for name, field in self._fields.items()})

    @property
    def fields(self) -> Mapping[str, Field]:
        return MappingProxyType(dict(self._fields))

    def field_kind(self, field_name: str) -> FieldKind:
        self._validate_field_name(field_name)
        return self._fields[field_name].kind

    def _validate_field_name(self, field_name: str) -> None:
        if field_name not in self._keys:
            raise InvalidFieldNameError(field_name)

    def append(self, field_name: str, code_value: Any) -> None:
        """
        Add a value to a field.

        Scalar fields are overwritten with code_value.

        Code set fields apply the hierarchical rule:
            1. code_value already present -> no change
            2. qualified code ("a_1")     -> drop a bare "a", then add
            3. bare code ("a")            -> drop every "a_...", then add
        The new code always goes to the end; surviving codes keep their order.
        Appending None or "" to a code set changes nothing. Any other value
        is stored as str(code_value), for scalars and code sets alike.

        Raises:
            InvalidFieldNameError: field_name is not one of the keys
        """
        self._validate_field_name(field_name)
        field = self._fields[field_name]

        if isinstance(field, ScalarField):
            raw = code_value if code_value is None else str(code_value)
            self._fields[field_name] = ScalarField(raw=raw)
        elif isinstance(field, CodeSetField):
            if code_value is None or code_value == "":
                return
            code_value = str(code_value)
            if code_value in field:
                return
            parent, child = split_code(code_value, self._delimiter)
            if child is not None:
                kept = [c for c in field.codes if c != parent]
            else:
                prefix = parent + self._delimiter
                kept = [c for c in field.codes if not c.startswith(prefix)]
            self._fields[field_name] = CodeSetField.from_values(kept + [code_value])
        else:
            raise TypeError(f"Unsupported Field type: {type(field)}")

    def clear_field(self, field_name: str) -> None:
        """Reset a field: scalars become "", code sets become empty."""
        self._validate_field_name(field_name)
        field = self._fields[field_name]

        if isinstance(field, ScalarField):
            self.append(field_name, "")
        elif isinstance(field, CodeSetField):
            self._fields[field_name] = CodeSetField()
        else:
            raise TypeError(f"Unsupported Field type: {type(field)}")

    def remove(self, field_name: str, code_value: Any) -> None:
        """
        Remove a value from a field.

        Code sets drop the exact code, compared as a string (missing codes
        are ignored).
        Scalars hold a single slot, so they are cleared whatever code_value is.
        """
        self._validate_field_name(field_name)
        field = self._fields[field_name]

        if isinstance(field, ScalarField):
            self.clear_field(field_name)
        elif isinstance(field, CodeSetField):
            code = str(code_value)
            self._fields[field_name] = CodeSetField(
                codes=tuple(c for c in field.codes if c != code)
            )
        else:
            raise TypeError(f"Unsupported Field type: {type(field)}")

    def clear_state(self) -> None:
        """Clear every field, in key order."""
        for name in self._keys:
            self.clear_field(name)


__all__ = [
    "DEFAULT_DELIMITER",
    "FormStateError",
    "InvalidInitialStateError",
    "InvalidFieldNameError",
    "split_code",
    "FormModel",
]
