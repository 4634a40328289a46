# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptor-to-GraphQL schema type generation."""

from structql.generator.builtins import BUILTIN_GENERATORS, TypeGenerator, merge_generators, type_generator
from structql.generator.generator import SchemaGenerator

__all__ = [
    "BUILTIN_GENERATORS",
    "SchemaGenerator",
    "TypeGenerator",
    "merge_generators",
    "type_generator",
]
