# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for ClassML."""
