# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structured encoding of classifiers and the documents that hold them."""

from classml.codec.document import (
    DOCUMENT_SUFFIXES,
    deserialize,
    deserialize_yaml,
    document_stem,
    load_document,
    parse_document,
    serialize,
)
from classml.codec.structured import DecodeError, classifier_from_dict, classifier_to_dict

__all__ = [
    "DOCUMENT_SUFFIXES",
    "DecodeError",
    "classifier_from_dict",
    "classifier_to_dict",
    "deserialize",
    "deserialize_yaml",
    "document_stem",
    "load_document",
    "parse_document",
    "serialize",
]
