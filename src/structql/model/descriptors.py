# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""Runtime type descriptors consumed by the schema generator.

Descriptors form a tree (or, for recursive models, a graph) discriminated by
their ``kind`` field. Nested descriptors are held by reference, so a struct can
be created first and have props pointing back at itself inserted afterwards.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from structql.errors import InvalidInterfaceTargetError, MissingNameError

# ###############
# Public Interface
# ###############

INTERFACE_NAME_PREFIX = "_GraphQLInterface_"


class Primitive(Enum):
    """Built-in primitive descriptor names."""

    STRING = "String"
    NUMBER = "Number"
    INTEGER = "Integer"
    BOOLEAN = "Boolean"
    ID = "ID"


class _DescriptorBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def __str__(self) -> str:
        return _display(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}<{self}>"


class PrimitiveDescriptor(_DescriptorBase):
    """A scalar leaf, identified by name only."""

    kind: Literal["primitive"] = "primitive"
    name: str


class StructDescriptor(_DescriptorBase):
    """A named record with an ordered map of props."""

    kind: Literal["struct"] = "struct"
    name: str | None = None
    props: dict[str, Descriptor] = _Field(default_factory=dict)


class InterfaceDescriptor(_DescriptorBase):
    """A named record describing a shape shared by several structs."""

    kind: Literal["interface"] = "interface"
    name: str | None = None
    props: dict[str, Descriptor] = _Field(default_factory=dict)


class MaybeDescriptor(_DescriptorBase):
    """An optional wrapper around another descriptor."""

    kind: Literal["maybe"] = "maybe"
    type: Descriptor


class ListDescriptor(_DescriptorBase):
    """A homogeneous sequence of elements of ``type``."""

    kind: Literal["list"] = "list"
    type: Descriptor


class EnumsDescriptor(_DescriptorBase):
    """A closed set of string values."""

    kind: Literal["enums"] = "enums"
    name: str | None = None
    values: list[str] = _Field(default_factory=list)


class UnionDescriptor(_DescriptorBase):
    """One of several alternative descriptors."""

    kind: Literal["union"] = "union"
    name: str | None = None
    types: list[Descriptor] = _Field(default_factory=list)


class SubtypeDescriptor(_DescriptorBase):
    """A refinement of ``type``.

    With ``is_graphql_interface`` set, the refinement is the interface tag: the
    wrapped struct or interface is emitted as a GraphQL interface type.
    """

    kind: Literal["subtype"] = "subtype"
    name: str | None = None
    type: Descriptor
    is_graphql_interface: bool = False


# Any descriptor; the `kind` discriminator selects the concrete model.
Descriptor = Annotated[
    PrimitiveDescriptor
    | StructDescriptor
    | InterfaceDescriptor
    | MaybeDescriptor
    | ListDescriptor
    | EnumsDescriptor
    | UnionDescriptor
    | SubtypeDescriptor,
    _Field(discriminator="kind"),
]

STRING = PrimitiveDescriptor(name=Primitive.STRING.value)
NUMBER = PrimitiveDescriptor(name=Primitive.NUMBER.value)
INTEGER = PrimitiveDescriptor(name=Primitive.INTEGER.value)
BOOLEAN = PrimitiveDescriptor(name=Primitive.BOOLEAN.value)
ID = PrimitiveDescriptor(name=Primitive.ID.value)


def name_of(descriptor: Descriptor) -> str | None:
    """Return the registry key of a descriptor, or None for unnamed wrappers."""
    return getattr(descriptor, "name", None)


def mark_as_interface(descriptor: Descriptor) -> SubtypeDescriptor:
    """Wrap a named struct or interface in the GraphQL interface tag.

    Args:
        descriptor: The struct or interface descriptor to tag.

    Returns:
        A tagged :class:`SubtypeDescriptor` wrapping *descriptor*.

    Raises:
        InvalidInterfaceTargetError: If *descriptor* is not a struct or interface.
        MissingNameError: If *descriptor* has no name.
    """
    if not isinstance(descriptor, StructDescriptor | InterfaceDescriptor):
        raise InvalidInterfaceTargetError(f"Descriptor '{descriptor}' must be a struct or interface")
    if not descriptor.name:
        raise MissingNameError("Descriptor must have a name to be marked as a GraphQL interface")
    return SubtypeDescriptor(
        name=INTERFACE_NAME_PREFIX + descriptor.name,
        type=descriptor,
        is_graphql_interface=True,
    )


def is_graphql_interface(descriptor: Descriptor) -> bool:
    """Return True if *descriptor* carries the GraphQL interface tag."""
    return isinstance(descriptor, SubtypeDescriptor) and descriptor.is_graphql_interface


# ################
# Implementation
# ################


def _display(descriptor: _DescriptorBase) -> str:
    """Return a short, non-recursive display form for error messages."""
    if isinstance(descriptor, PrimitiveDescriptor):
        return descriptor.name
    if isinstance(descriptor, MaybeDescriptor):
        return f"?{descriptor.type}"
    if isinstance(descriptor, ListDescriptor):
        return f"Array<{descriptor.type}>"
    if isinstance(descriptor, StructDescriptor | InterfaceDescriptor):
        if descriptor.name:
            return descriptor.name
        label = "Struct" if isinstance(descriptor, StructDescriptor) else "Interface"
        return f"{label}{{{', '.join(descriptor.props)}}}"
    if isinstance(descriptor, EnumsDescriptor):
        return descriptor.name or " | ".join(repr(v) for v in descriptor.values)
    if isinstance(descriptor, UnionDescriptor):
        return descriptor.name or " | ".join(str(t) for t in descriptor.types)
    if isinstance(descriptor, SubtypeDescriptor):
        return descriptor.name or f"{{{descriptor.type} | <predicate>}}"
    return type(descriptor).__name__


# Resolve forward references for models that use Descriptor.
StructDescriptor.model_rebuild()
InterfaceDescriptor.model_rebuild()
MaybeDescriptor.model_rebuild()
ListDescriptor.model_rebuild()
UnionDescriptor.model_rebuild()
SubtypeDescriptor.model_rebuild()
