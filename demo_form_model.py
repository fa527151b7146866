#!/usr/bin/env python3
"""
Demo: Drive a search-filter model and export it.

Shows the hierarchical code rules, snapshots, YAML export and the hidden form.
"""

from formstate.examples import build_example_search_model
from formstate.serialization import form_values, model_to_yaml
from formstate.backends import generate_form, save_form_file


def main():
    model = build_example_search_model()

    print("=" * 80)
    print("FORM MODEL DEMO")
    print("=" * 80)

    print("\nSTATE:")
    print("-" * 80)
    for name, value in model.state.items():
        print(f"  {name}: {value!r}")

    print("\nAdding bare 'K' collapses its classes:")
    model.append("industries", "K")
    print(f"  industries: {model.state['industries']!r}")

    print("\nYAML:")
    print("-" * 80)
    print(model_to_yaml(model))

    print("FORM VALUES:")
    print("-" * 80)
    for name, value in form_values(model).items():
        print(f"  {name}={value}")

    print("\nHIDDEN FORM:")
    print("-" * 80)
    print(generate_form(model))

    filename = "search_form.html"
    save_form_file(model, filename)
    print(f"\nSaved to: {filename}")

    model.clear_state()
    print(f"\nAfter clear_state: {dict(model.state)!r}")
    print("=" * 80)


if __name__ == "__main__":
    main()
