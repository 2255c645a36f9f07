# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classifier members: attributes and operations.

Each member renders itself to a single line of UML-style notation. The
classifier renderer places these lines inside the member block verbatim.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Visibility(Enum):
    """UML visibility of a member."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    PACKAGE = "package"

    @property
    def symbol(self) -> str:
        """The single-character UML marker for this visibility."""
        return _VISIBILITY_SYMBOLS[self]


class ParameterDirection(Enum):
    """Data-flow direction of an operation parameter."""

    IN = "in"
    OUT = "out"
    INOUT = "inout"


class Attribute(BaseModel):
    """A structural feature of a classifier.

    Renders as ``[{static} ][visibility][/]name[: type][[multiplicity]][ = default]``,
    e.g. ``+/total: Money[0..1] = 0``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: str | None = None
    visibility: Visibility | None = None
    multiplicity: str | None = None
    default: str | None = None
    is_static: bool = False
    is_derived: bool = False

    def render(self) -> str:
        parts: list[str] = []
        if self.is_static:
            parts.append("{static} ")
        if self.visibility is not None:
            parts.append(self.visibility.symbol)
        if self.is_derived:
            parts.append("/")
        parts.append(self.name)
        if self.type is not None:
            parts.append(f": {self.type}")
        if self.multiplicity is not None:
            parts.append(f"[{self.multiplicity}]")
        if self.default is not None:
            parts.append(f" = {self.default}")
        return "".join(parts)


class Parameter(BaseModel):
    """A formal parameter of an operation."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str | None = None
    direction: ParameterDirection | None = None
    default: str | None = None

    def render(self) -> str:
        text = self.name
        if self.direction is not None:
            text = f"{self.direction.value} {text}"
        if self.type is not None:
            text += f": {self.type}"
        if self.default is not None:
            text += f" = {self.default}"
        return text


class Operation(BaseModel):
    """A behavioural feature of a classifier.

    Renders as ``[{abstract} ][{static} ][visibility]name(params)[: return_type]``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    parameters: list[Parameter] = _Field(default_factory=list)
    return_type: str | None = None
    visibility: Visibility | None = None
    is_static: bool = False
    is_abstract: bool = False

    def render(self) -> str:
        prefix = ""
        if self.is_abstract:
            prefix += "{abstract} "
        if self.is_static:
            prefix += "{static} "
        if self.visibility is not None:
            prefix += self.visibility.symbol
        params = ", ".join(p.render() for p in self.parameters)
        text = f"{prefix}{self.name}({params})"
        if self.return_type is not None:
            text += f": {self.return_type}"
        return text


# ################
# Implementation
# ################

_VISIBILITY_SYMBOLS: dict[Visibility, str] = {
    Visibility.PUBLIC: "+",
    Visibility.PRIVATE: "-",
    Visibility.PROTECTED: "#",
    Visibility.PACKAGE: "~",
}
