# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while tagging descriptors or generating schema types."""

from __future__ import annotations

from typing import Any

# ###############
# Public Interface
# ###############


class SchemaGenerationError(Exception):
    """Base class for all descriptor-to-schema generation failures."""


class MissingNameError(SchemaGenerationError):
    """Raised when a struct, interface or tagged subtype descriptor has no name."""


class UnsupportedDescriptorError(SchemaGenerationError):
    """Raised when a descriptor kind has no GraphQL mapping.

    Attributes:
        descriptor: The offending descriptor.
    """

    def __init__(self, descriptor: Any) -> None:
        super().__init__(f"Type not supported: {descriptor}")
        self.descriptor = descriptor


class InvalidInterfaceTargetError(SchemaGenerationError):
    """Raised when the interface tag is applied to something other than a struct or interface."""
