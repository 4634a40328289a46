# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""Render generated GraphQL types as schema definition language (SDL)."""

from __future__ import annotations

from collections.abc import Iterable

from graphql import GraphQLType, get_named_type, print_type

# ###############
# Public Interface
# ###############


def render_sdl(types: Iterable[GraphQLType]) -> str:
    """Return the SDL declarations of *types*, separated by blank lines.

    List and non-null wrappers are unwrapped to the named type they wrap, so
    the root returned by :meth:`SchemaGenerator.generate` can be passed as is.
    """
    return "\n\n".join(print_type(get_named_type(gql_type)) for gql_type in types)
