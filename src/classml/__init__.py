# Copyright 2026 ClassML Contributors
# SPDX-License-Identifier: Apache-2.0

"""ClassML: canonical textual notation for UML classifiers."""
