# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Canonical textual notation for classifiers.

A classifier renders to a block of the form::

    #[meta1, meta2]
    abstract final «Stereotype1, Stereotype2» class Name as id {
      attribute
      operation()
    }

The annotation line, modifiers, stereotypes, alias and member block are each
left out entirely when there is nothing to show. Output uses ``\\n`` line
separators and never ends with one.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from classml.model.classifier import Classifier, ClassifierKind

# ###############
# Public Interface
# ###############

INDENT = "  "


class Renderable(Protocol):
    """Anything that renders itself to a self-contained piece of notation."""

    def render(self) -> str: ...


def render_classifier(classifier: Classifier) -> str:
    """Render *classifier* to its textual notation.

    The result depends only on *classifier*; the input is never modified.
    """
    out: list[str] = []
    if classifier.meta:
        out.append(f"#[{_join(classifier.meta.values())}]\n")
    out.append(_modifiers(classifier))
    if classifier.stereotypes:
        out.append(f"«{', '.join(classifier.stereotypes)}» ")
    out.append(f"{classifier.kind.keyword} {classifier.name}")
    if classifier.id is not None:
        out.append(f" as {classifier.id}")
    if classifier.attributes or classifier.operations:
        out.append(" {")
        for member in [*classifier.attributes, *classifier.operations]:
            out.append(f"\n{INDENT}{member.render()}")
        out.append("\n}")
    return "".join(out)


def render_classifiers(classifiers: Iterable[Classifier]) -> str:
    """Render several classifiers, separated by a blank line."""
    return "\n\n".join(render_classifier(c) for c in classifiers)


# ################
# Implementation
# ################


def _modifiers(classifier: Classifier) -> str:
    """Return the modifier prefix; interfaces are implicitly abstract."""
    text = ""
    if classifier.is_abstract and classifier.kind is not ClassifierKind.INTERFACE:
        text += "abstract "
    if classifier.is_final:
        text += "final "
    return text


def _join(items: Iterable[Renderable]) -> str:
    return ", ".join(item.render() for item in items)
