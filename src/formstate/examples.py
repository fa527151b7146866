"""
Example model for a search filter form.

Builds a business-search form with a free-text keyword, a sort order, and two
hierarchical code sets: industries (division_class) and regions (state_city).
"""
from formstate.builder import InitialStateBuilder
from formstate.model import DEFAULT_DELIMITER, FormModel


EXAMPLE_INDUSTRIES = {
    "K": ["K62", "K63"],
}

EXAMPLE_REGIONS = {
    "nsw": ["sydney", "newcastle"],
    "vic": ["melbourne", "geelong"],
}


def build_example_search_model(delimiter: str = DEFAULT_DELIMITER) -> FormModel:
    builder = InitialStateBuilder({"keyword": "", "sort": "relevance"})
    builder.set_prop({"industries": [], "regions": []})
    model = FormModel(builder.build(), delimiter=delimiter)

    # Whole "K" division, then narrowed to its classes
    model.append("industries", "K")
    for child in EXAMPLE_INDUSTRIES["K"]:
        model.append("industries", f"K{delimiter}{child}")

    # Every Victorian city, then widened to the whole state
    for child in EXAMPLE_REGIONS["vic"]:
        model.append("regions", f"vic{delimiter}{child}")
    model.append("regions", "vic")
    model.append("regions", f"nsw{delimiter}{EXAMPLE_REGIONS['nsw'][0]}")

    model.append("keyword", "bank")
    return model
