"""
Hidden HTML form generator for form state models.

Converts a FormModel into a hidden <form> with one hidden <input> per field,
ready to be inserted into a page and submitted.

The model layer knows nothing about HTML. This backend only consumes the
name -> string mapping from serialization.form_values().
"""

import html
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from formstate.model import FormModel
from formstate.serialization import form_values


@dataclass(frozen=True)
class HiddenInput:
    """One <input type="hidden"> element."""
    name: str
    value: str


@dataclass
class HiddenForm:
    """
    Structure of the hidden form before rendering.

    Properties:
        form_id: Element id (a random UUID unless given)
        method: HTTP method attribute, "post" by default
        inputs: One hidden input per model field, in key order
        action: Optional action URL; omitted from the markup when None
    """
    form_id: str
    method: str = "post"
    inputs: List[HiddenInput] = field(default_factory=list)
    action: Optional[str] = None


def _attr(name: str, value: str) -> str:
    return f'{name}="{html.escape(value, quote=True)}"'


def build_hidden_form(
    model: FormModel,
    method: str = "post",
    form_id: Optional[str] = None,
    action: Optional[str] = None,
) -> HiddenForm:
    inputs = [HiddenInput(name=name, value=value) for name, value in form_values(model).items()]
    return HiddenForm(
        form_id=form_id or str(uuid.uuid4()),
        method=method,
        inputs=inputs,
        action=action,
    )


def render_hidden_form(form: HiddenForm) -> str:
    """Render a HiddenForm as an HTML fragment."""
    attrs = [_attr("id", form.form_id), _attr("method", form.method)]
    if form.action is not None:
        attrs.append(_attr("action", form.action))
    attrs.append('style="display:none"')

    lines = [f"<form {' '.join(attrs)}>"]
    for inp in form.inputs:
        lines.append(f'  <input type="hidden" {_attr("name", inp.name)} {_attr("value", inp.value)}>')
    lines.append("</form>")
    return "\n".join(lines)


def generate_form(
    model: FormModel,
    method: str = "post",
    form_id: Optional[str] = None,
    action: Optional[str] = None,
) -> str:
    """
    Generate hidden-form markup for a model.

    Args:
        model: Model to export
        method: Form method attribute
        form_id: Element id; a random UUID when omitted
        action: Optional action URL

    Returns:
        HTML fragment as a string
    """
    return render_hidden_form(build_hidden_form(model, method=method, form_id=form_id, action=action))


def save_form_file(
    model: FormModel,
    filepath: str,
    method: str = "post",
    form_id: Optional[str] = None,
    action: Optional[str] = None,
) -> None:
    """Generate hidden-form markup and write it to a file."""
    markup = generate_form(model, method=method, form_id=form_id, action=action)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(markup)
