# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Annotation values attached to classifiers."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict

# ###############
# Public Interface
# ###############

MetaValue = str | int | float | bool


class Meta(BaseModel):
    """A single key/value annotation, rendered inside a ``#[...]`` line.

    A flag annotation (value ``True``) renders as its bare key, anything else
    as ``key = literal``.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    value: MetaValue = True

    def render(self) -> str:
        if self.value is True:
            return self.key
        return f"{self.key} = {_literal(self.value)}"


# ################
# Implementation
# ################


def _literal(value: MetaValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return str(value)
