# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for loading descriptor definitions from YAML files."""

from pathlib import Path

import pytest
from graphql import GraphQLFloat, GraphQLInt, GraphQLInterfaceType, GraphQLScalarType, GraphQLString

from structql.definitions import Definitions, DefinitionsError, load_definitions
from structql.generator import SchemaGenerator
from structql.model import (
    EnumsDescriptor,
    InterfaceDescriptor,
    ListDescriptor,
    MaybeDescriptor,
    PrimitiveDescriptor,
    StructDescriptor,
    SubtypeDescriptor,
    UnionDescriptor,
    is_graphql_interface,
)

# ###############
# Helpers
# ###############


def _write_definitions(tmp_path: Path, content: str) -> Path:
    """Write a definitions file and return its path."""
    path = tmp_path / "types.yaml"
    path.write_text(content, encoding="utf-8")
    return path


_FOO_BAR = """\
types:
  Bar:
    kind: struct
    fields:
      quux: Boolean
  Foo:
    kind: struct
    graphql-interface: true
    fields:
      bar: Bar
      baz: Integer?
      id: "[ID]?"
"""


# ###############
# Normal Cases
# ###############


def test_empty_file(tmp_path: Path) -> None:
    """An empty file yields empty definitions."""
    definitions = load_definitions(_write_definitions(tmp_path, ""))

    assert isinstance(definitions, Definitions)
    assert definitions.types == {}
    assert definitions.scalars == {}


def test_struct_fields_and_expressions(tmp_path: Path) -> None:
    """Type expressions build maybe and list wrappers around named types."""
    definitions = load_definitions(_write_definitions(tmp_path, _FOO_BAR))

    bar = definitions.types["Bar"]
    assert isinstance(bar, StructDescriptor)
    assert bar.props["quux"].name == "Boolean"

    foo = definitions.types["Foo"]
    assert is_graphql_interface(foo)
    inner = foo.type
    assert isinstance(inner, StructDescriptor)
    assert list(inner.props) == ["bar", "baz", "id"]
    assert inner.props["bar"] is bar
    assert isinstance(inner.props["baz"], MaybeDescriptor)
    assert inner.props["baz"].type.name == "Integer"
    assert isinstance(inner.props["id"], MaybeDescriptor)
    assert isinstance(inner.props["id"].type, ListDescriptor)
    assert inner.props["id"].type.type.name == "ID"


def test_list_of_optional_elements(tmp_path: Path) -> None:
    """'[Expr?]' is a list of optional elements."""
    content = """\
types:
  Stats:
    kind: struct
    fields:
      values: "[Number?]"
"""
    stats = load_definitions(_write_definitions(tmp_path, content)).types["Stats"]
    values = stats.props["values"]
    assert isinstance(values, ListDescriptor)
    assert isinstance(values.type, MaybeDescriptor)


def test_forward_and_cyclic_references(tmp_path: Path) -> None:
    """Types may reference types declared later, including cycles."""
    content = """\
types:
  Author:
    kind: struct
    fields:
      books: "[Book]"
  Book:
    kind: struct
    fields:
      author: Author
      sequel: Book?
"""
    definitions = load_definitions(_write_definitions(tmp_path, content))

    author = definitions.types["Author"]
    book = definitions.types["Book"]
    assert author.props["books"].type is book
    assert book.props["author"] is author
    assert book.props["sequel"].type is book


def test_interface_enums_and_union_kinds(tmp_path: Path) -> None:
    """Every supported kind produces the matching descriptor."""
    content = """\
types:
  Shape:
    kind: interface
    fields:
      area: Number
  Color:
    kind: enums
    values: [red, green]
  Pet:
    kind: union
    types: [Cat, Dog?]
  Cat:
    kind: struct
  Dog:
    kind: struct
"""
    types = load_definitions(_write_definitions(tmp_path, content)).types

    assert isinstance(types["Shape"], InterfaceDescriptor)
    assert isinstance(types["Color"], EnumsDescriptor)
    assert types["Color"].values == ["red", "green"]
    assert isinstance(types["Pet"], UnionDescriptor)
    assert types["Pet"].types[0] is types["Cat"]
    assert types["Pet"].types[1].type is types["Dog"]


def test_tagged_references_resolve_to_tag(tmp_path: Path) -> None:
    """References to a graphql-interface type point at the tagged descriptor."""
    content = """\
types:
  Node:
    kind: interface
    graphql-interface: true
    fields:
      id: ID
  Query:
    kind: struct
    fields:
      node: Node?
"""
    types = load_definitions(_write_definitions(tmp_path, content)).types

    assert isinstance(types["Node"], SubtypeDescriptor)
    assert types["Query"].props["node"].type is types["Node"]


def test_scalars_become_primitives_and_generators(tmp_path: Path) -> None:
    """Declared scalars are usable in fields and produce custom generators."""
    content = """\
scalars:
  Date: String
  JSON:
types:
  Event:
    kind: struct
    fields:
      at: Date
      payload: JSON?
"""
    definitions = load_definitions(_write_definitions(tmp_path, content))

    assert definitions.scalars == {"Date": "String", "JSON": None}
    event = definitions.types["Event"]
    assert event.props["at"] == PrimitiveDescriptor(name="Date")

    generators = definitions.generators()
    assert generators["Date"](False) is GraphQLString
    json_type = generators["JSON"](False)
    assert isinstance(json_type, GraphQLScalarType)
    assert json_type.name == "JSON"


def test_scalar_alias_accepts_primitive_spelling(tmp_path: Path) -> None:
    """Scalar aliases accept the primitive names used in field expressions."""
    content = "scalars:\n  Timestamp: Integer\n  Ratio: Number\n  Count: Int\n"
    generators = load_definitions(_write_definitions(tmp_path, content)).generators()

    assert generators["Timestamp"](False) is GraphQLInt
    assert generators["Ratio"](False) is GraphQLFloat
    assert generators["Count"](False) is GraphQLInt


def test_definitions_feed_the_generator(tmp_path: Path) -> None:
    """Loaded definitions generate the expected schema types."""
    definitions = load_definitions(_write_definitions(tmp_path, _FOO_BAR))

    types = SchemaGenerator(definitions.generators()).generate(definitions.types["Foo"])

    assert [t.name for t in types] == ["Foo", "Bar"]
    assert isinstance(types[0], GraphQLInterfaceType)


# ###############
# Error Cases
# ###############


def test_file_not_found(tmp_path: Path) -> None:
    """Loading a missing file raises DefinitionsError."""
    with pytest.raises(DefinitionsError, match="not found"):
        load_definitions(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    """Broken YAML raises DefinitionsError."""
    with pytest.raises(DefinitionsError, match="Invalid YAML"):
        load_definitions(_write_definitions(tmp_path, "types: [\nbroken"))


def test_not_a_mapping(tmp_path: Path) -> None:
    """A top-level list is rejected."""
    with pytest.raises(DefinitionsError, match="must be a YAML mapping"):
        load_definitions(_write_definitions(tmp_path, "- a\n- b\n"))


def test_unknown_top_level_key(tmp_path: Path) -> None:
    """Unexpected top-level keys are rejected."""
    with pytest.raises(DefinitionsError, match="unknown top-level key"):
        load_definitions(_write_definitions(tmp_path, "queries: {}\n"))


def test_types_must_be_mapping(tmp_path: Path) -> None:
    """The types section must be a mapping."""
    with pytest.raises(DefinitionsError, match="'types' must be a mapping"):
        load_definitions(_write_definitions(tmp_path, "types: [Foo]\n"))


def test_unknown_kind(tmp_path: Path) -> None:
    """An unsupported kind is rejected with its location."""
    content = "types:\n  Foo:\n    kind: tuple\n"
    with pytest.raises(DefinitionsError, match="types.Foo: 'kind' must be one of"):
        load_definitions(_write_definitions(tmp_path, content))


def test_missing_kind(tmp_path: Path) -> None:
    """A type without kind is rejected."""
    content = "types:\n  Foo:\n    fields: {}\n"
    with pytest.raises(DefinitionsError, match="'kind' must be one of"):
        load_definitions(_write_definitions(tmp_path, content))


def test_unknown_entry_key(tmp_path: Path) -> None:
    """Keys that do not belong to the kind are rejected."""
    content = "types:\n  Color:\n    kind: enums\n    fields: {}\n"
    with pytest.raises(DefinitionsError, match="unknown key\\(s\\) for enums: fields"):
        load_definitions(_write_definitions(tmp_path, content))


def test_graphql_interface_must_be_boolean(tmp_path: Path) -> None:
    """The graphql-interface flag must be a boolean."""
    content = "types:\n  Foo:\n    kind: struct\n    graphql-interface: sometimes\n"
    with pytest.raises(DefinitionsError, match="'graphql-interface' must be a boolean"):
        load_definitions(_write_definitions(tmp_path, content))


def test_unknown_type_reference(tmp_path: Path) -> None:
    """A field referencing an undeclared type is rejected."""
    content = "types:\n  Foo:\n    kind: struct\n    fields:\n      bar: Bar\n"
    with pytest.raises(DefinitionsError, match="types.Foo.fields.bar: unknown type 'Bar'"):
        load_definitions(_write_definitions(tmp_path, content))


def test_unquoted_list_expression(tmp_path: Path) -> None:
    """An unquoted list expression parses as a YAML list and is rejected."""
    content = "types:\n  Foo:\n    kind: struct\n    fields:\n      ids: [ID]\n"
    with pytest.raises(DefinitionsError, match="must be a string"):
        load_definitions(_write_definitions(tmp_path, content))


def test_unbalanced_brackets(tmp_path: Path) -> None:
    """A list expression without closing bracket is rejected."""
    content = 'types:\n  Foo:\n    kind: struct\n    fields:\n      ids: "[ID"\n'
    with pytest.raises(DefinitionsError, match="unbalanced brackets"):
        load_definitions(_write_definitions(tmp_path, content))


def test_empty_expression(tmp_path: Path) -> None:
    """An empty type expression is rejected."""
    content = 'types:\n  Foo:\n    kind: struct\n    fields:\n      ids: "[]"\n'
    with pytest.raises(DefinitionsError, match="empty type expression"):
        load_definitions(_write_definitions(tmp_path, content))


def test_type_name_clashes_with_primitive(tmp_path: Path) -> None:
    """Declared types cannot shadow built-in primitives."""
    content = "types:\n  String:\n    kind: struct\n"
    with pytest.raises(DefinitionsError, match="already taken"):
        load_definitions(_write_definitions(tmp_path, content))


def test_scalar_redefines_primitive(tmp_path: Path) -> None:
    """Scalars cannot redefine built-in primitives."""
    with pytest.raises(DefinitionsError, match="cannot redefine built-in primitive"):
        load_definitions(_write_definitions(tmp_path, "scalars:\n  Integer: Int\n"))


def test_scalar_unknown_alias(tmp_path: Path) -> None:
    """A scalar alias must name a built-in GraphQL scalar."""
    with pytest.raises(DefinitionsError, match="unknown scalar alias 'Long'"):
        load_definitions(_write_definitions(tmp_path, "scalars:\n  BigInt: Long\n"))


def test_type_name_must_be_graphql_name(tmp_path: Path) -> None:
    """Type names GraphQL cannot represent are rejected with their location."""
    content = "types:\n  my-type:\n    kind: struct\n"
    with pytest.raises(DefinitionsError, match=r"types\.my-type: Names must only contain"):
        load_definitions(_write_definitions(tmp_path, content))


def test_type_name_must_not_start_with_digit(tmp_path: Path) -> None:
    """Type names must start with a letter or underscore."""
    content = "types:\n  1Foo:\n    kind: struct\n"
    with pytest.raises(DefinitionsError, match=r"types\.1Foo: Names must start with"):
        load_definitions(_write_definitions(tmp_path, content))


def test_field_name_must_be_graphql_name(tmp_path: Path) -> None:
    """Field names GraphQL cannot represent are rejected with their location."""
    content = "types:\n  Foo:\n    kind: struct\n    fields:\n      bad-field: String\n"
    with pytest.raises(DefinitionsError, match=r"types\.Foo\.fields\.bad-field: Names must only contain"):
        load_definitions(_write_definitions(tmp_path, content))


def test_scalar_name_must_be_graphql_name(tmp_path: Path) -> None:
    """Scalar names GraphQL cannot represent are rejected with their location."""
    with pytest.raises(DefinitionsError, match=r"scalars\.My-Date: Names must only contain"):
        load_definitions(_write_definitions(tmp_path, "scalars:\n  My-Date: String\n"))


def test_enum_values_must_be_strings(tmp_path: Path) -> None:
    """Enum values must be a list of strings."""
    content = "types:\n  Level:\n    kind: enums\n    values: [1, 2]\n"
    with pytest.raises(DefinitionsError, match="'values' must be a list of strings"):
        load_definitions(_write_definitions(tmp_path, content))
