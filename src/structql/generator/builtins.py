# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""Nullability-parameterized constructors for GraphQL schema types."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from graphql import (
    GraphQLBoolean,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLNonNull,
    GraphQLString,
    GraphQLType,
)

from structql.model.descriptors import Primitive

# ###############
# Public Interface
# ###############

# Given `is_non_nullable`, returns the schema type (wrapped in GraphQLNonNull when True).
TypeGenerator = Callable[[bool], GraphQLType]


def type_generator(gql_type: GraphQLType) -> TypeGenerator:
    """Return a generator producing *gql_type*, optionally wrapped as non-null."""

    def _generate(is_non_nullable: bool = False) -> GraphQLType:
        return GraphQLNonNull(gql_type) if is_non_nullable else gql_type

    return _generate


def merge_generators(
    lhs: Mapping[str, TypeGenerator], rhs: Mapping[str, TypeGenerator] | None
) -> dict[str, TypeGenerator]:
    """Return a new mapping with the entries of *lhs* overridden by *rhs*."""
    merged = dict(lhs)
    if rhs:
        merged.update(rhs)
    return merged


BUILTIN_GENERATORS: Mapping[str, TypeGenerator] = {
    Primitive.STRING.value: type_generator(GraphQLString),
    Primitive.NUMBER.value: type_generator(GraphQLFloat),
    Primitive.INTEGER.value: type_generator(GraphQLInt),
    Primitive.BOOLEAN.value: type_generator(GraphQLBoolean),
    Primitive.ID.value: type_generator(GraphQLID),
}
