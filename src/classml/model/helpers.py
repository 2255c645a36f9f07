# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Predicates deciding which field values are left out of structured encodings."""

from __future__ import annotations

from collections.abc import Sized

# ###############
# Public Interface
# ###############


def is_false(value: bool) -> bool:
    """Return True if a boolean flag is unset and can be omitted."""
    return not value


def is_none(value: object) -> bool:
    """Return True if an optional value is absent."""
    return value is None


def is_empty(value: Sized) -> bool:
    """Return True if a sequence or mapping has no entries."""
    return len(value) == 0
