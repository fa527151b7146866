"""
Tests for InitialStateBuilder.
"""

import warnings

import pytest
from formstate.builder import InitialStateBuilder
from formstate.fields import CodeSetField, ScalarField
from formstate.model import FormModel, InvalidInitialStateError


class TestInitialStateBuilder:
    """Test building initial field mappings."""

    def test_build_from_initial_mapping(self):
        fields = InitialStateBuilder({"keyword": "bank", "tags": ["a", ""]}).build()
        assert fields["keyword"] == ScalarField(raw="bank")
        assert fields["tags"] == CodeSetField(codes=("a",))

    def test_empty_builder(self):
        assert dict(InitialStateBuilder().build()) == {}

    def test_non_mapping_rejected(self):
        """Anything but a mapping or None is illegal."""
        with pytest.raises(InvalidInitialStateError):
            InitialStateBuilder(["keyword"])

    def test_set_prop_single(self):
        builder = InitialStateBuilder()
        builder.set_prop("keyword", "bank")
        assert builder.build()["keyword"].value == "bank"

    def test_set_prop_mapping(self):
        builder = InitialStateBuilder()
        builder.set_prop({"keyword": "", "regions": ["nsw"]})
        fields = builder.build()
        assert list(fields) == ["keyword", "regions"]
        assert fields["regions"].value == ["nsw"]

    def test_overwrite_warns_but_applies(self):
        builder = InitialStateBuilder({"keyword": "bank"})
        with pytest.warns(UserWarning, match="will overwrite \\[keyword\\]"):
            builder.set_prop("keyword", "insurance")
        assert builder.build()["keyword"].value == "insurance"

    def test_new_key_does_not_warn(self):
        builder = InitialStateBuilder({"keyword": "bank"})
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            builder.set_prop("sort", "name")

    def test_build_is_read_only(self):
        fields = InitialStateBuilder({"keyword": ""}).build()
        with pytest.raises(TypeError):
            fields["keyword"] = ScalarField(raw="x")

    def test_builder_not_affected_by_source_changes(self):
        source = {"keyword": "bank"}
        builder = InitialStateBuilder(source)
        source["extra"] = "x"
        assert list(builder.build()) == ["keyword"]

    def test_build_feeds_model(self):
        """Built mapping is accepted by FormModel and fixes its keys."""
        builder = InitialStateBuilder({"keyword": ""})
        builder.set_prop("tags", [])
        model = FormModel(builder.build())
        assert model.keys == ["keyword", "tags"]
        model.append("tags", "a")
        assert model.state["tags"] == ["a"]
