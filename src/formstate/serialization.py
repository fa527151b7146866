"""
Serialization helpers for form state (fields, models, form values).

Provides JSON/YAML round-trip via an intermediate dict representation:

    {"delimiter": "_",
     "fields": {"keyword": {"kind": "scalar", "value": "bank"},
                "regions": {"kind": "code_set", "value": ["nsw", "vic_melbourne"]}}}

Field order is preserved. This module intentionally keeps the structure
stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from formstate.builder import InitialStateBuilder
from formstate.fields import CodeSetField, Field, FieldKind, ScalarField
from formstate.model import DEFAULT_DELIMITER, FormModel, InvalidInitialStateError


FORM_VALUE_SEPARATOR = ","


def field_to_dict(f: Field) -> Dict[str, Any]:
    if isinstance(f, (ScalarField, CodeSetField)):
        return {"kind": f.kind.value, "value": f.value}
    raise TypeError(f"Unsupported Field type: {type(f)}")


def field_from_dict(d: Dict[str, Any]) -> Field:
    try:
        kind = FieldKind(d["kind"])
    except (KeyError, ValueError, TypeError) as e:
        raise InvalidInitialStateError(f"Unsupported field dict: {d!r}") from e
    if kind is FieldKind.CODE_SET:
        values = d.get("value")
        if values is None:
            values = []
        if not isinstance(values, (list, tuple)):
            raise InvalidInitialStateError(
                f"code_set value must be a list, got {type(values).__name__}"
            )
        return CodeSetField.from_values(values)
    return ScalarField(raw=d.get("value", ""))


def model_to_dict(m: FormModel) -> Dict[str, Any]:
    return {
        "delimiter": m.delimiter,
        "fields": {name: field_to_dict(f) for name, f in m.fields.items()},
    }


def model_from_dict(d: Dict[str, Any]) -> FormModel:
    if not isinstance(d, dict):
        raise InvalidInitialStateError(f"Expected a dict, got {type(d).__name__}")
    raw_fields = d.get("fields")
    if raw_fields is None:
        raw_fields = {}
    if not isinstance(raw_fields, dict):
        raise InvalidInitialStateError(
            f"fields must be a mapping, got {type(raw_fields).__name__}"
        )
    fields = {name: field_from_dict(fd) for name, fd in raw_fields.items()}
    return FormModel(fields, delimiter=d.get("delimiter", DEFAULT_DELIMITER))


def model_to_json(m: FormModel) -> str:
    return json.dumps(model_to_dict(m))


def model_from_json(s: str) -> FormModel:
    d = json.loads(s)
    return model_from_dict(d)


def model_to_yaml(m: FormModel) -> str:
    return yaml.safe_dump(model_to_dict(m), sort_keys=False)


def model_from_yaml(s: str) -> FormModel:
    d = yaml.safe_load(s)
    return model_from_dict(d)


def initial_state_from_yaml(s: str):
    """
    Build an initial field mapping from a plain YAML document.

    The document maps field names to raw values; lists become code sets:

        keyword: ""
        regions: [nsw, vic_melbourne]
    """
    d = yaml.safe_load(s)
    if d is None:
        d = {}
    return InitialStateBuilder(d).build()


def form_value(f: Field) -> str:
    """
    Stringify one field for form submission.

    Code sets are joined with "," (no spaces). Scalars use str(), with
    None rendered as "".
    """
    if isinstance(f, CodeSetField):
        return FORM_VALUE_SEPARATOR.join(str(c) for c in f.codes)
    if isinstance(f, ScalarField):
        return "" if f.raw is None else str(f.raw)
    raise TypeError(f"Unsupported Field type: {type(f)}")


def form_values(m: FormModel) -> Dict[str, str]:
    """Field name -> submission string, in key order."""
    return {name: form_value(f) for name, f in m.fields.items()}
