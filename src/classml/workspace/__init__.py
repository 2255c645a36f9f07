# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Workspace configuration for ClassML."""

from classml.workspace.config import (
    CONFIG_FILE_NAME,
    LOG_LEVELS,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "LOG_LEVELS",
    "WorkspaceConfig",
    "WorkspaceConfigError",
    "load_workspace_config",
]
