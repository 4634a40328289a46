# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""structql - GraphQL schema types generated from runtime type descriptors."""

from structql.errors import (
    InvalidInterfaceTargetError,
    MissingNameError,
    SchemaGenerationError,
    UnsupportedDescriptorError,
)
from structql.generator import BUILTIN_GENERATORS, SchemaGenerator, TypeGenerator, merge_generators, type_generator
from structql.model import (
    BOOLEAN,
    ID,
    INTEGER,
    NUMBER,
    STRING,
    Descriptor,
    EnumsDescriptor,
    InterfaceDescriptor,
    ListDescriptor,
    MaybeDescriptor,
    PrimitiveDescriptor,
    StructDescriptor,
    SubtypeDescriptor,
    UnionDescriptor,
    is_graphql_interface,
    mark_as_interface,
)

__all__ = [
    # Descriptors
    "Descriptor",
    "PrimitiveDescriptor",
    "StructDescriptor",
    "InterfaceDescriptor",
    "MaybeDescriptor",
    "ListDescriptor",
    "EnumsDescriptor",
    "UnionDescriptor",
    "SubtypeDescriptor",
    "STRING",
    "NUMBER",
    "INTEGER",
    "BOOLEAN",
    "ID",
    "is_graphql_interface",
    "mark_as_interface",
    # Generation
    "BUILTIN_GENERATORS",
    "SchemaGenerator",
    "TypeGenerator",
    "merge_generators",
    "type_generator",
    # Errors
    "SchemaGenerationError",
    "MissingNameError",
    "UnsupportedDescriptorError",
    "InvalidInterfaceTargetError",
]
