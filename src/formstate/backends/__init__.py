"""Backends for form state output (hidden HTML form, etc.)."""

from .hidden_form import (
    HiddenForm,
    HiddenInput,
    build_hidden_form,
    generate_form,
    render_hidden_form,
    save_form_file,
)

__all__ = [
    "HiddenForm",
    "HiddenInput",
    "build_hidden_form",
    "generate_form",
    "render_hidden_form",
    "save_form_file",
]
