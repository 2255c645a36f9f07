# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the ClassML workspace configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".classml.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class WorkspaceConfigError(Exception):
    """Raised when a workspace configuration file is invalid or cannot be loaded."""


@dataclass
class WorkspaceConfig:
    """The parsed configuration for a ClassML workspace.

    Attributes:
        output_directory: Relative path (from the workspace root) for rendered notation files.
        source_directory: Relative path (from the workspace root) searched for classifier documents.
        log_level: Name of the logging level used by the command-line interface.
    """

    output_directory: str
    source_directory: str = "."
    log_level: str = "WARNING"


def load_workspace_config(path: Path) -> WorkspaceConfig:
    """Load and parse a ClassML workspace configuration file.

    Args:
        path: Path to the `.classml.yaml` file.

    Returns:
        A WorkspaceConfig instance populated from the file.

    Raises:
        WorkspaceConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise WorkspaceConfigError(f"Workspace config file not found: {path}") from None
    except OSError as exc:
        raise WorkspaceConfigError(f"Cannot read workspace config file: {exc}") from exc

    return _parse_workspace_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_workspace_config(text: str, source_label: str = "<string>") -> WorkspaceConfig:
    """Parse workspace config YAML text into a WorkspaceConfig.

    Raises:
        WorkspaceConfigError: If the YAML is invalid or required fields are missing.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WorkspaceConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise WorkspaceConfigError(f"{source_label}: workspace config must be a YAML mapping")

    output_directory = _require_string(data, "output-directory", source_label)

    source_directory = "."
    if "source-directory" in data:
        source_directory = _require_string(data, "source-directory", source_label)

    log_level = "WARNING"
    if "log-level" in data:
        log_level = _require_string(data, "log-level", source_label).upper()
        if log_level not in LOG_LEVELS:
            raise WorkspaceConfigError(f"{source_label}: 'log-level' must be one of {', '.join(LOG_LEVELS)}")

    return WorkspaceConfig(
        output_directory=output_directory,
        source_directory=source_directory,
        log_level=log_level,
    )


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising WorkspaceConfigError if missing."""
    if key not in mapping:
        raise WorkspaceConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise WorkspaceConfigError(f"{source_label}: '{key}' must be a string")
    return value
