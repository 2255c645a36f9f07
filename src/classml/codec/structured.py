# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion between classifiers and plain structured data.

The structured form is what YAML and JSON documents decode to: nested dicts,
lists and scalars. Fields holding their default value are left out, and the
classifier's annotations are flattened into the classifier mapping itself,
so every key that is not a known classifier field is an annotation::

    {"color": "blue", "abstract": True, "kind": "data-type", "name": "Point"}
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from classml.model.classifier import CLASSIFIER_FIELDS, Classifier, ClassifierKind
from classml.model.helpers import is_empty, is_false, is_none
from classml.model.members import Attribute, Operation, Parameter, ParameterDirection, Visibility
from classml.model.meta import Meta, MetaValue

# ###############
# Public Interface
# ###############


class DecodeError(Exception):
    """Raised when structured data does not describe a valid classifier."""


def classifier_to_dict(classifier: Classifier) -> dict[str, Any]:
    """Convert *classifier* to its structured form."""
    d: dict[str, Any] = {key: meta.value for key, meta in classifier.meta.items()}
    if not is_false(classifier.is_abstract):
        d["abstract"] = True
    if not is_false(classifier.is_final):
        d["final"] = True
    d["kind"] = classifier.kind.value
    d["name"] = classifier.name
    if not is_none(classifier.id):
        d["id"] = classifier.id
    if not is_empty(classifier.stereotypes):
        d["stereotypes"] = list(classifier.stereotypes)
    if not is_empty(classifier.attributes):
        d["attributes"] = [_attribute_to_dict(a) for a in classifier.attributes]
    if not is_empty(classifier.operations):
        d["operations"] = [_operation_to_dict(o) for o in classifier.operations]
    return d


def classifier_from_dict(obj: object, source_label: str = "<classifier>") -> Classifier:
    """Build a :class:`Classifier` from its structured form.

    Args:
        obj: A mapping as produced by :func:`classifier_to_dict` or read from
            a YAML/JSON document.
        source_label: Location prefix used in error messages.

    Returns:
        The decoded classifier.

    Raises:
        DecodeError: If *obj* is not a mapping, a required field is missing,
            or a field has the wrong type or an unknown value.
    """
    mapping = _require_mapping(obj, source_label)
    name = _require_string(mapping, "name", source_label)
    location = f"{source_label} '{name}'"

    meta: dict[str, Meta] = {}
    for key, value in mapping.items():
        if key in CLASSIFIER_FIELDS:
            continue
        if not isinstance(key, str):
            raise DecodeError(f"{location}: annotation key {key!r} must be a string")
        meta[key] = Meta(key=key, value=_meta_value(value, key, location))

    return Classifier(
        meta=meta,
        is_abstract=_optional_bool(mapping, "abstract", location),
        is_final=_optional_bool(mapping, "final", location),
        kind=_enum_value(ClassifierKind, _require_string(mapping, "kind", location), "kind", location),
        name=name,
        id=_optional_string(mapping, "id", location),
        stereotypes=_string_list(mapping, "stereotypes", location),
        attributes=[
            _attribute_from_dict(entry, f"{location}: attributes[{index}]")
            for index, entry in enumerate(_list(mapping, "attributes", location))
        ],
        operations=[
            _operation_from_dict(entry, f"{location}: operations[{index}]")
            for index, entry in enumerate(_list(mapping, "operations", location))
        ],
    )


# ################
# Implementation
# ################

_ATTRIBUTE_FIELDS = frozenset({"name", "type", "visibility", "multiplicity", "default", "static", "derived"})
_OPERATION_FIELDS = frozenset({"name", "parameters", "return", "visibility", "static", "abstract"})
_PARAMETER_FIELDS = frozenset({"name", "type", "direction", "default"})

_E = TypeVar("_E", bound=Enum)


def _attribute_to_dict(attr: Attribute) -> dict[str, Any]:
    d: dict[str, Any] = {"name": attr.name}
    if attr.type is not None:
        d["type"] = attr.type
    if attr.visibility is not None:
        d["visibility"] = attr.visibility.value
    if attr.multiplicity is not None:
        d["multiplicity"] = attr.multiplicity
    if attr.default is not None:
        d["default"] = attr.default
    if attr.is_static:
        d["static"] = True
    if attr.is_derived:
        d["derived"] = True
    return d


def _attribute_from_dict(obj: object, location: str) -> Attribute:
    mapping = _require_mapping(obj, location)
    _reject_unknown(mapping, _ATTRIBUTE_FIELDS, location)
    return Attribute(
        name=_require_string(mapping, "name", location),
        type=_optional_string(mapping, "type", location),
        visibility=_optional_enum(Visibility, mapping, "visibility", location),
        multiplicity=_optional_text(mapping, "multiplicity", location),
        default=_optional_text(mapping, "default", location),
        is_static=_optional_bool(mapping, "static", location),
        is_derived=_optional_bool(mapping, "derived", location),
    )


def _parameter_to_dict(param: Parameter) -> dict[str, Any]:
    d: dict[str, Any] = {"name": param.name}
    if param.type is not None:
        d["type"] = param.type
    if param.direction is not None:
        d["direction"] = param.direction.value
    if param.default is not None:
        d["default"] = param.default
    return d


def _parameter_from_dict(obj: object, location: str) -> Parameter:
    mapping = _require_mapping(obj, location)
    _reject_unknown(mapping, _PARAMETER_FIELDS, location)
    return Parameter(
        name=_require_string(mapping, "name", location),
        type=_optional_string(mapping, "type", location),
        direction=_optional_enum(ParameterDirection, mapping, "direction", location),
        default=_optional_text(mapping, "default", location),
    )


def _operation_to_dict(op: Operation) -> dict[str, Any]:
    d: dict[str, Any] = {"name": op.name}
    if op.parameters:
        d["parameters"] = [_parameter_to_dict(p) for p in op.parameters]
    if op.return_type is not None:
        d["return"] = op.return_type
    if op.visibility is not None:
        d["visibility"] = op.visibility.value
    if op.is_static:
        d["static"] = True
    if op.is_abstract:
        d["abstract"] = True
    return d


def _operation_from_dict(obj: object, location: str) -> Operation:
    mapping = _require_mapping(obj, location)
    _reject_unknown(mapping, _OPERATION_FIELDS, location)
    return Operation(
        name=_require_string(mapping, "name", location),
        parameters=[
            _parameter_from_dict(entry, f"{location}: parameters[{index}]")
            for index, entry in enumerate(_list(mapping, "parameters", location))
        ],
        return_type=_optional_string(mapping, "return", location),
        visibility=_optional_enum(Visibility, mapping, "visibility", location),
        is_static=_optional_bool(mapping, "static", location),
        is_abstract=_optional_bool(mapping, "abstract", location),
    )


def _require_mapping(obj: object, location: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise DecodeError(f"{location} must be a mapping")
    return obj


def _reject_unknown(mapping: dict[str, Any], known: frozenset[str], location: str) -> None:
    unknown = sorted(str(key) for key in mapping if key not in known)
    if unknown:
        raise DecodeError(f"{location}: unknown field(s) {', '.join(repr(k) for k in unknown)}")


def _require_string(mapping: dict[str, Any], key: str, location: str) -> str:
    if key not in mapping:
        raise DecodeError(f"{location}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise DecodeError(f"{location}: '{key}' must be a string")
    return value


def _optional_string(mapping: dict[str, Any], key: str, location: str) -> str | None:
    if mapping.get(key) is None:
        return None
    return _require_string(mapping, key, location)


def _optional_text(mapping: dict[str, Any], key: str, location: str) -> str | None:
    """Read a free-text field, accepting numbers and booleans as YAML tends to produce them."""
    value = mapping.get(key)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return str(value)
    raise DecodeError(f"{location}: '{key}' must be a scalar")


def _optional_bool(mapping: dict[str, Any], key: str, location: str) -> bool:
    value = mapping.get(key, False)
    if not isinstance(value, bool):
        raise DecodeError(f"{location}: '{key}' must be a boolean")
    return value


def _list(mapping: dict[str, Any], key: str, location: str) -> list[Any]:
    value = mapping.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DecodeError(f"{location}: '{key}' must be a list")
    return value


def _string_list(mapping: dict[str, Any], key: str, location: str) -> list[str]:
    values = _list(mapping, key, location)
    for index, value in enumerate(values):
        if not isinstance(value, str):
            raise DecodeError(f"{location}: {key}[{index}] must be a string")
    return values


def _enum_value(enum_type: type[_E], token: str, key: str, location: str) -> _E:
    try:
        return enum_type(token)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise DecodeError(f"{location}: unknown {key} {token!r} (expected one of: {allowed})") from None


def _optional_enum(enum_type: type[_E], mapping: dict[str, Any], key: str, location: str) -> _E | None:
    token = _optional_string(mapping, key, location)
    if token is None:
        return None
    return _enum_value(enum_type, token, key, location)


def _meta_value(value: object, key: str, location: str) -> MetaValue:
    if isinstance(value, str | int | float | bool):
        return value
    raise DecodeError(f"{location}: annotation '{key}' must be a string, number or boolean")
