# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for ClassML classifiers and their members."""

from classml.model.classifier import CLASSIFIER_FIELDS, Classifier, ClassifierKind
from classml.model.members import Attribute, Operation, Parameter, ParameterDirection, Visibility
from classml.model.meta import Meta, MetaValue

__all__ = [
    # Classifiers
    "CLASSIFIER_FIELDS",
    "ClassifierKind",
    "Classifier",
    # Members
    "Visibility",
    "ParameterDirection",
    "Attribute",
    "Parameter",
    "Operation",
    # Annotations
    "Meta",
    "MetaValue",
]
