"""
Initial state builder.

Collects raw name -> value pairs and turns them into the frozen
name -> Field mapping that FormModel takes as its only required argument.

Example:
    builder = InitialStateBuilder({"keyword": ""})
    builder.set_prop("industries", [])
    builder.set_prop({"regions": ["north"], "sort": "relevance"})
    model = FormModel(builder.build())
"""

import warnings
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from formstate.fields import Field, create_field
from formstate.model import InvalidInitialStateError


class InitialStateBuilder:
    """Accumulates raw field values; build() classifies them into fields."""

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        if initial is not None and not isinstance(initial, Mapping):
            raise InvalidInitialStateError(
                f"Illegal arguments: expected a mapping, got {type(initial).__name__}"
            )
        self._values: Dict[str, Any] = dict(initial) if initial else {}

    def set_prop(self, name_or_values: Union[str, Mapping[str, Any]], value: Any = None) -> None:
        """
        Set one property, or several from a mapping.

        Overwriting an existing property is allowed but emits a UserWarning.
        """
        if isinstance(name_or_values, Mapping):
            for name, v in name_or_values.items():
                self._set(name, v)
        else:
            self._set(name_or_values, value)

    def _set(self, name: str, value: Any) -> None:
        if name in self._values:
            warnings.warn(f"[{value}] will overwrite [{name}]", UserWarning)
        self._values[name] = value

    def build(self) -> Mapping[str, Field]:
        return MappingProxyType(
            {name: create_field(value) for name, value in self._values.items()}
        )


__all__ = ["InitialStateBuilder"]
