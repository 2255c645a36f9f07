# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the structured encoding of classifiers."""

import pytest

from classml.codec.structured import DecodeError, classifier_from_dict, classifier_to_dict
from classml.model import (
    Attribute,
    Classifier,
    ClassifierKind,
    Meta,
    Operation,
    Parameter,
    ParameterDirection,
    Visibility,
)

# ###############
# Helpers
# ###############


def _roundtrip(classifier: Classifier) -> Classifier:
    """Encode and decode a classifier."""
    return classifier_from_dict(classifier_to_dict(classifier))


def _full_classifier() -> Classifier:
    return Classifier(
        meta={"color": Meta(key="color", value="blue"), "order": Meta(key="order", value=2), "x": Meta(key="x")},
        is_abstract=True,
        is_final=True,
        kind=ClassifierKind.DATA_TYPE,
        name="Point",
        id="p1",
        stereotypes=["ValueObject", "Serializable"],
        attributes=[
            Attribute(
                name="x",
                type="Float",
                visibility=Visibility.PRIVATE,
                multiplicity="1",
                default="0.0",
                is_static=True,
                is_derived=True,
            ),
            Attribute(name="y"),
        ],
        operations=[
            Operation(
                name="move",
                parameters=[
                    Parameter(name="dx", type="Float", direction=ParameterDirection.IN, default="0"),
                    Parameter(name="dy"),
                ],
                return_type="Point",
                visibility=Visibility.PUBLIC,
                is_static=True,
                is_abstract=True,
            )
        ],
    )


# ###############
# Encoding
# ###############


class TestEncoding:
    def test_minimal(self) -> None:
        c = Classifier(kind=ClassifierKind.CLASS, name="Order")
        assert classifier_to_dict(c) == {"kind": "class", "name": "Order"}

    def test_kind_uses_kebab_case_token(self) -> None:
        c = Classifier(kind=ClassifierKind.DATA_TYPE, name="Point")
        assert classifier_to_dict(c)["kind"] == "data-type"

    def test_false_flags_are_omitted(self) -> None:
        d = classifier_to_dict(Classifier(kind=ClassifierKind.CLASS, name="Order"))
        assert "abstract" not in d
        assert "final" not in d

    def test_true_flags_are_written(self) -> None:
        c = Classifier(kind=ClassifierKind.CLASS, name="Order", is_abstract=True, is_final=True)
        d = classifier_to_dict(c)
        assert d["abstract"] is True
        assert d["final"] is True

    def test_meta_is_flattened(self) -> None:
        c = Classifier(
            kind=ClassifierKind.CLASS,
            name="Order",
            meta={"color": Meta(key="color", value="red"), "deprecated": Meta(key="deprecated")},
        )
        assert classifier_to_dict(c) == {"color": "red", "deprecated": True, "kind": "class", "name": "Order"}

    def test_members(self) -> None:
        d = classifier_to_dict(_full_classifier())
        assert d["attributes"][0] == {
            "name": "x",
            "type": "Float",
            "visibility": "private",
            "multiplicity": "1",
            "default": "0.0",
            "static": True,
            "derived": True,
        }
        assert d["attributes"][1] == {"name": "y"}
        assert d["operations"][0]["return"] == "Point"
        assert d["operations"][0]["parameters"][0] == {
            "name": "dx",
            "type": "Float",
            "direction": "in",
            "default": "0",
        }


# ###############
# Decoding
# ###############


class TestDecoding:
    def test_unknown_keys_become_meta(self) -> None:
        c = classifier_from_dict({"kind": "class", "name": "Order", "tag": "core", "hidden": False})
        assert c.meta == {
            "hidden": Meta(key="hidden", value=False),
            "tag": Meta(key="tag", value="core"),
        }

    def test_all_kind_tokens(self) -> None:
        tokens = ["class", "data-type", "enumeration", "interface", "primitive"]
        kinds = [classifier_from_dict({"kind": t, "name": "X"}).kind for t in tokens]
        assert kinds == list(ClassifierKind)

    def test_numeric_free_text_is_stringified(self) -> None:
        c = classifier_from_dict(
            {"kind": "class", "name": "Order", "attributes": [{"name": "n", "multiplicity": 1, "default": 0}]}
        )
        assert c.attributes[0].multiplicity == "1"
        assert c.attributes[0].default == "0"

    def test_null_sequences_are_empty(self) -> None:
        c = classifier_from_dict({"kind": "class", "name": "Order", "stereotypes": None, "attributes": None})
        assert c.stereotypes == []
        assert c.attributes == []


class TestDecodeErrors:
    def test_not_a_mapping(self) -> None:
        with pytest.raises(DecodeError, match="must be a mapping"):
            classifier_from_dict(["class", "Order"])

    def test_missing_name(self) -> None:
        with pytest.raises(DecodeError, match="missing required field 'name'"):
            classifier_from_dict({"kind": "class"})

    def test_missing_kind(self) -> None:
        with pytest.raises(DecodeError, match="missing required field 'kind'"):
            classifier_from_dict({"name": "Order"})

    def test_unknown_kind(self) -> None:
        with pytest.raises(DecodeError, match="unknown kind 'dataType'"):
            classifier_from_dict({"kind": "dataType", "name": "Point"})

    def test_non_boolean_flag(self) -> None:
        with pytest.raises(DecodeError, match="'abstract' must be a boolean"):
            classifier_from_dict({"kind": "class", "name": "Order", "abstract": "yes"})

    def test_non_string_stereotype(self) -> None:
        with pytest.raises(DecodeError, match=r"stereotypes\[1\] must be a string"):
            classifier_from_dict({"kind": "class", "name": "Order", "stereotypes": ["Entity", 3]})

    def test_non_scalar_meta(self) -> None:
        with pytest.raises(DecodeError, match="annotation 'tags' must be"):
            classifier_from_dict({"kind": "class", "name": "Order", "tags": ["a"]})

    def test_unknown_visibility(self) -> None:
        with pytest.raises(DecodeError, match="unknown visibility 'secret'"):
            classifier_from_dict(
                {"kind": "class", "name": "Order", "attributes": [{"name": "id", "visibility": "secret"}]}
            )

    def test_unknown_attribute_field(self) -> None:
        with pytest.raises(DecodeError, match=r"attributes\[0\]: unknown field\(s\) 'typ'"):
            classifier_from_dict({"kind": "class", "name": "Order", "attributes": [{"name": "id", "typ": "UUID"}]})

    def test_unknown_parameter_direction(self) -> None:
        obj = {
            "kind": "class",
            "name": "Order",
            "operations": [{"name": "f", "parameters": [{"name": "a", "direction": "both"}]}],
        }
        with pytest.raises(DecodeError, match=r"operations\[0\]: parameters\[0\]: unknown direction 'both'"):
            classifier_from_dict(obj)

    def test_error_mentions_source_label(self) -> None:
        with pytest.raises(DecodeError, match="^model.yaml"):
            classifier_from_dict({"kind": "class"}, source_label="model.yaml")


# ###############
# Round trip
# ###############


class TestRoundtrip:
    def test_annotations_survive(self) -> None:
        c = Classifier(
            kind=ClassifierKind.CLASS,
            name="Order",
            meta={"a": Meta(key="a", value=1), "label": Meta(key="label", value="x")},
        )
        assert classifier_to_dict(c) == {"a": 1, "label": "x", "kind": "class", "name": "Order"}
        assert _roundtrip(c) == c

    def test_minimal(self) -> None:
        c = Classifier(kind=ClassifierKind.PRIMITIVE, name="Int")
        assert _roundtrip(c) == c

    def test_full(self) -> None:
        c = _full_classifier()
        assert _roundtrip(c) == c

    @pytest.mark.parametrize("kind", list(ClassifierKind))
    def test_every_kind(self, kind: ClassifierKind) -> None:
        c = Classifier(kind=kind, name="X", is_abstract=True)
        assert _roundtrip(c) == c
