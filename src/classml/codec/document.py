# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading and writing documents that hold a list of classifiers.

A document is either a bare list of classifier mappings or a mapping with a
``classifiers`` list. JSON documents are read with :mod:`json`, so
:func:`serialize` output decodes exactly; YAML documents are read with PyYAML.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

import yaml

from classml.codec.structured import DecodeError, classifier_from_dict, classifier_to_dict
from classml.model.classifier import Classifier

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

DOCUMENT_SUFFIXES = (".classml.yaml", ".classml.yml", ".classml.json")


def serialize(classifiers: Iterable[Classifier]) -> str:
    """Serialize *classifiers* to a compact JSON document."""
    doc = {"classifiers": [classifier_to_dict(c) for c in classifiers]}
    return json.dumps(doc, separators=(",", ":"), ensure_ascii=False)


def deserialize(text: str, source_label: str = "<string>") -> list[Classifier]:
    """Decode a JSON document string, such as :func:`serialize` output, into classifiers.

    Raises:
        DecodeError: If the text is not valid JSON or does not describe
            a list of classifiers.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid JSON document {source_label}: {exc}") from exc
    return parse_document(data, source_label)


def deserialize_yaml(text: str, source_label: str = "<string>") -> list[Classifier]:
    """Decode a YAML document string into classifiers.

    Raises:
        DecodeError: If the text is not valid YAML or does not describe
            a list of classifiers.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DecodeError(f"Invalid YAML document {source_label}: {exc}") from exc
    return parse_document(data, source_label)


def parse_document(data: object, source_label: str = "<document>") -> list[Classifier]:
    """Decode already-parsed document data into classifiers."""
    if isinstance(data, dict):
        if "classifiers" not in data:
            raise DecodeError(f"{source_label}: missing required field 'classifiers'")
        data = data["classifiers"]
    if data is None:
        return []
    if not isinstance(data, list):
        raise DecodeError(f"{source_label}: document must be a list of classifiers")
    return [classifier_from_dict(entry, f"{source_label}: classifiers[{index}]") for index, entry in enumerate(data)]


def load_document(path: Path) -> list[Classifier]:
    """Read and decode the document at *path*.

    Raises:
        DecodeError: If the file cannot be read or its content is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DecodeError(f"Document not found: {path}") from None
    except OSError as exc:
        raise DecodeError(f"Cannot read document: {exc}") from exc

    if path.name.endswith(".json"):
        classifiers = deserialize(text, source_label=str(path))
    else:
        classifiers = deserialize_yaml(text, source_label=str(path))
    logger.debug("Loaded %d classifier(s) from %s", len(classifiers), path)
    return classifiers


def document_stem(path: Path) -> str:
    """Return the file name of *path* without its document suffix."""
    for suffix in DOCUMENT_SUFFIXES:
        if path.name.endswith(suffix):
            return path.name[: -len(suffix)]
    return path.stem
