# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Textual views of the ClassML model."""

from classml.views.notation import INDENT, Renderable, render_classifier, render_classifiers

__all__ = [
    "INDENT",
    "Renderable",
    "render_classifier",
    "render_classifiers",
]
