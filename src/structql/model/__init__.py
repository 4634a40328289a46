# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""Runtime type descriptors (structs, interfaces, wrappers, primitives)."""

from structql.model.descriptors import (
    BOOLEAN,
    ID,
    INTEGER,
    INTERFACE_NAME_PREFIX,
    NUMBER,
    STRING,
    Descriptor,
    EnumsDescriptor,
    InterfaceDescriptor,
    ListDescriptor,
    MaybeDescriptor,
    Primitive,
    PrimitiveDescriptor,
    StructDescriptor,
    SubtypeDescriptor,
    UnionDescriptor,
    is_graphql_interface,
    mark_as_interface,
    name_of,
)

__all__ = [
    # Descriptor kinds
    "Descriptor",
    "PrimitiveDescriptor",
    "StructDescriptor",
    "InterfaceDescriptor",
    "MaybeDescriptor",
    "ListDescriptor",
    "EnumsDescriptor",
    "UnionDescriptor",
    "SubtypeDescriptor",
    # Built-in primitives
    "Primitive",
    "STRING",
    "NUMBER",
    "INTEGER",
    "BOOLEAN",
    "ID",
    # Interface tagging
    "INTERFACE_NAME_PREFIX",
    "is_graphql_interface",
    "mark_as_interface",
    "name_of",
]
