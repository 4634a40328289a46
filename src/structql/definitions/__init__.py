# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""YAML descriptor definition files."""

from structql.definitions.loader import Definitions, DefinitionsError, load_definitions

__all__ = [
    "Definitions",
    "DefinitionsError",
    "load_definitions",
]
