# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""Demonstration scenario: an interface with an object, optional and list fields."""

from structql.generator import SchemaGenerator
from structql.model import (
    BOOLEAN,
    ID,
    INTEGER,
    ListDescriptor,
    MaybeDescriptor,
    StructDescriptor,
    SubtypeDescriptor,
    mark_as_interface,
)
from structql.views import render_sdl


def demo_descriptor() -> SubtypeDescriptor:
    """Return the interface-tagged ``Foo`` struct referencing struct ``Bar``."""
    bar = StructDescriptor(name="Bar", props={"quux": BOOLEAN})
    foo = StructDescriptor(
        name="Foo",
        props={
            "bar": bar,
            "baz": MaybeDescriptor(type=INTEGER),
            "id": MaybeDescriptor(type=ListDescriptor(type=ID)),
        },
    )
    return mark_as_interface(foo)


def run_demo() -> str:
    """Generate the demonstration schema and return it as SDL."""
    return render_sdl(SchemaGenerator().generate(demo_descriptor()))
