# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive translation of type descriptors into GraphQL schema types.

A :class:`SchemaGenerator` keeps a registry of nullability-parameterized
generators keyed by type name. Each named struct or interface is walked once;
later references reuse the registered generator. The name is registered before
its props are walked, so self-referential and mutually recursive descriptors
terminate.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from graphql import (
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLObjectType,
    GraphQLType,
    get_named_type,
    is_interface_type,
    is_object_type,
)

from structql.errors import InvalidInterfaceTargetError, MissingNameError, UnsupportedDescriptorError
from structql.generator.builtins import BUILTIN_GENERATORS, TypeGenerator, merge_generators, type_generator
from structql.model.descriptors import (
    Descriptor,
    InterfaceDescriptor,
    ListDescriptor,
    MaybeDescriptor,
    StructDescriptor,
    SubtypeDescriptor,
    is_graphql_interface,
    name_of,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class SchemaGenerator:
    """Translate a descriptor tree into the list of GraphQL types it needs.

    Args:
        generators: Optional custom generators keyed by type name. They are
            merged over the built-in scalar generators, so they may override
            ``String``, ``Integer`` and friends as well as any named struct.
            A struct whose name has a custom generator is never walked.
    """

    def __init__(self, generators: Mapping[str, TypeGenerator] | None = None) -> None:
        self._generators: dict[str, TypeGenerator] = merge_generators(BUILTIN_GENERATORS, generators)
        self._field_generators: list[TypeGenerator] = []

    def generate(self, descriptor: Descriptor) -> list[GraphQLType]:
        """Generate the schema types reachable from *descriptor*.

        Args:
            descriptor: The root descriptor.

        Returns:
            The root schema type (nullable unless the root implies otherwise),
            followed by every named type discovered in field position, in the
            order first encountered and instantiated as nullable. Each named
            type appears once.

        Raises:
            SchemaGenerationError: If any descriptor in the tree cannot be mapped.
        """
        root = self._resolve(descriptor, is_non_nullable=False, is_field=False)
        discovered = [generator(False) for generator in self._field_generators]
        for gql_type in [root, *discovered]:
            named = get_named_type(gql_type)
            if is_object_type(named) or is_interface_type(named):
                # Field maps are thunks; force them so no error surfaces later.
                _ = named.fields
        return [root, *discovered]

    # ################
    # Implementation
    # ################

    def _resolve(self, descriptor: Descriptor, is_non_nullable: bool, is_field: bool) -> GraphQLType:
        """Return the schema type for *descriptor* in the given context."""
        name = name_of(descriptor)
        if name is not None and name in self._generators:
            logger.debug("Reusing registered generator for '%s'", name)
            return self._generators[name](is_non_nullable)

        if isinstance(descriptor, MaybeDescriptor):
            return self._resolve(descriptor.type, is_non_nullable=False, is_field=is_field)

        if isinstance(descriptor, StructDescriptor | InterfaceDescriptor):
            return self._resolve_named_type(GraphQLObjectType, descriptor, is_non_nullable, is_field)

        if isinstance(descriptor, ListDescriptor):
            # Elements are non-null unless wrapped in maybe; the list itself
            # takes the nullability of its context.
            element = self._resolve(descriptor.type, is_non_nullable=True, is_field=is_field)
            return type_generator(GraphQLList(element))(is_non_nullable)

        if isinstance(descriptor, SubtypeDescriptor) and is_graphql_interface(descriptor):
            if not descriptor.name:
                raise MissingNameError("Tagged GraphQL interface descriptors must have a name")
            target = descriptor.type
            if not isinstance(target, StructDescriptor | InterfaceDescriptor):
                raise InvalidInterfaceTargetError(
                    f"GraphQL interface tag '{descriptor.name}' must wrap a struct or interface, got '{target}'"
                )
            return self._resolve_named_type(GraphQLInterfaceType, target, is_non_nullable, is_field)

        # Enums, unions and untagged refinements have no mapping.
        raise UnsupportedDescriptorError(descriptor)

    def _resolve_named_type(
        self,
        gql_type: type[GraphQLObjectType] | type[GraphQLInterfaceType],
        descriptor: StructDescriptor | InterfaceDescriptor,
        is_non_nullable: bool,
        is_field: bool,
    ) -> GraphQLType:
        """Return the schema type for a named struct or interface.

        The generator for the name is registered before any prop is walked.
        The field map handed to graphql-core is a thunk over a dict that is
        filled afterwards, so recursive references resolve to the registered
        generator instead of walking the same descriptor again.
        """
        name = descriptor.name
        if not name:
            raise MissingNameError(f"Structs and interfaces must have a name: '{descriptor}'")

        if name not in self._generators:
            fields: dict[str, GraphQLField] = {}
            generator = type_generator(gql_type(name, fields=lambda: fields))
            self._generators[name] = generator
            if is_field:
                self._field_generators.append(generator)
            logger.debug("Registered %s '%s'", gql_type.__name__, name)

            for prop_name, prop in descriptor.props.items():
                fields[prop_name] = GraphQLField(self._resolve(prop, is_non_nullable=True, is_field=True))

        return self._generators[name](is_non_nullable)
