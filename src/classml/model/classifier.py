# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""The classifier entity: a class, interface, enumeration, data type, or primitive."""

from __future__ import annotations

from enum import Enum
from typing import assert_never

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

from classml.model.members import Attribute, Operation
from classml.model.meta import Meta

# ###############
# Public Interface
# ###############

# Field names of the structured form. Annotations share that mapping, so they
# may not use these names.
CLASSIFIER_FIELDS = frozenset({"abstract", "final", "kind", "name", "id", "stereotypes", "attributes", "operations"})


class ClassifierKind(Enum):
    """Supported kinds of classifiers.

    The enum values are the tokens used in structured documents. They differ
    from the notation keywords returned by :attr:`keyword`.
    """

    CLASS = "class"
    DATA_TYPE = "data-type"
    ENUMERATION = "enumeration"
    INTERFACE = "interface"
    PRIMITIVE = "primitive"

    @property
    def keyword(self) -> str:
        """The declaration keyword used in the textual notation."""
        match self:
            case ClassifierKind.CLASS:
                return "class"
            case ClassifierKind.DATA_TYPE:
                return "dataType"
            case ClassifierKind.ENUMERATION:
                return "enumeration"
            case ClassifierKind.INTERFACE:
                return "interface"
            case ClassifierKind.PRIMITIVE:
                return "primitive"
            case _:
                assert_never(self)


class Classifier(BaseModel):
    """A single classifier declaration.

    Attributes:
        meta: Annotations keyed by name. Always held in ascending key order.
        is_abstract: Rendered as ``abstract`` unless the kind is an interface.
        is_final: Rendered as ``final``.
        kind: Selects the declaration keyword.
        name: Identifier of the classifier.
        id: Optional alias, rendered as ``as <id>``.
        stereotypes: Stereotype names in rendering order.
        attributes: Attribute members in rendering order.
        operations: Operation members in rendering order.
    """

    model_config = ConfigDict(frozen=True)

    meta: dict[str, Meta] = _Field(default_factory=dict)
    is_abstract: bool = False
    is_final: bool = False
    kind: ClassifierKind
    name: str
    id: str | None = None
    stereotypes: list[str] = _Field(default_factory=list)
    attributes: list[Attribute] = _Field(default_factory=list)
    operations: list[Operation] = _Field(default_factory=list)

    @field_validator("meta")
    @classmethod
    def _sort_meta(cls, meta: dict[str, Meta]) -> dict[str, Meta]:
        for key, entry in meta.items():
            if entry.key != key:
                raise ValueError(f"annotation stored under {key!r} is keyed {entry.key!r}")
            if key in CLASSIFIER_FIELDS:
                raise ValueError(f"annotation {key!r} clashes with a classifier field")
        return dict(sorted(meta.items()))
