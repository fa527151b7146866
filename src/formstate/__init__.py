"""
Form State Package

Immutable-field state container for a view's model layer.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Rendering or the DOM
    - Network submission
    - Persistence

The model holds STATE only. Views read `state`; controllers call the
mutation API. Output formats live in `formstate.backends`.
"""

from formstate.builder import InitialStateBuilder
from formstate.fields import CodeSetField, Field, FieldKind, ScalarField, create_field
from formstate.model import (
    DEFAULT_DELIMITER,
    FormModel,
    FormStateError,
    InvalidFieldNameError,
    InvalidInitialStateError,
    split_code,
)

__version__ = "0.1.0"

__all__ = [
    "CodeSetField",
    "DEFAULT_DELIMITER",
    "Field",
    "FieldKind",
    "FormModel",
    "FormStateError",
    "InitialStateBuilder",
    "InvalidFieldNameError",
    "InvalidInitialStateError",
    "ScalarField",
    "create_field",
    "split_code",
]
