# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the workspace configuration module."""

from pathlib import Path

import pytest

from classml.workspace import (
    CONFIG_FILE_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a workspace config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_minimal_config(tmp_path: Path) -> None:
    """A config with only output-directory falls back to defaults for the rest."""
    config = load_workspace_config(_write_config(tmp_path, "output-directory: diagrams\n"))

    assert isinstance(config, WorkspaceConfig)
    assert config.output_directory == "diagrams"
    assert config.source_directory == "."
    assert config.log_level == "WARNING"


def test_full_config(tmp_path: Path) -> None:
    """All supported fields are read."""
    content = """\
output-directory: build/notation
source-directory: model
log-level: DEBUG
"""
    config = load_workspace_config(_write_config(tmp_path, content))

    assert config == WorkspaceConfig(
        output_directory="build/notation",
        source_directory="model",
        log_level="DEBUG",
    )


def test_log_level_is_case_insensitive(tmp_path: Path) -> None:
    """Log level names are normalised to upper case."""
    config = load_workspace_config(_write_config(tmp_path, "output-directory: out\nlog-level: info\n"))
    assert config.log_level == "INFO"


# ###############
# Error Cases
# ###############


def test_file_not_found(tmp_path: Path) -> None:
    """Loading a non-existent file raises WorkspaceConfigError."""
    with pytest.raises(WorkspaceConfigError, match="not found"):
        load_workspace_config(tmp_path / "missing.yaml")


def test_invalid_yaml_syntax(tmp_path: Path) -> None:
    """A file with invalid YAML raises WorkspaceConfigError."""
    config_file = _write_config(tmp_path, "output-directory: [\nbroken yaml")
    with pytest.raises(WorkspaceConfigError, match="Invalid YAML"):
        load_workspace_config(config_file)


def test_not_a_mapping(tmp_path: Path) -> None:
    """A YAML file that is not a mapping raises WorkspaceConfigError."""
    config_file = _write_config(tmp_path, "- just a list\n")
    with pytest.raises(WorkspaceConfigError, match="must be a YAML mapping"):
        load_workspace_config(config_file)


def test_missing_output_directory(tmp_path: Path) -> None:
    """A config without output-directory raises WorkspaceConfigError."""
    config_file = _write_config(tmp_path, "source-directory: model\n")
    with pytest.raises(WorkspaceConfigError, match="output-directory"):
        load_workspace_config(config_file)


def test_output_directory_not_a_string(tmp_path: Path) -> None:
    """A non-string output-directory raises WorkspaceConfigError."""
    config_file = _write_config(tmp_path, "output-directory: 42\n")
    with pytest.raises(WorkspaceConfigError, match="output-directory"):
        load_workspace_config(config_file)


def test_source_directory_not_a_string(tmp_path: Path) -> None:
    """A non-string source-directory raises WorkspaceConfigError."""
    config_file = _write_config(tmp_path, "output-directory: out\nsource-directory: [a, b]\n")
    with pytest.raises(WorkspaceConfigError, match="'source-directory' must be a string"):
        load_workspace_config(config_file)


def test_unknown_log_level(tmp_path: Path) -> None:
    """An unsupported log level raises WorkspaceConfigError."""
    config_file = _write_config(tmp_path, "output-directory: out\nlog-level: LOUD\n")
    with pytest.raises(WorkspaceConfigError, match="'log-level' must be one of"):
        load_workspace_config(config_file)
