# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for descriptor definition files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml
from graphql import (
    GraphQLBoolean,
    GraphQLError,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLScalarType,
    GraphQLString,
    assert_name,
)

from structql.generator.builtins import TypeGenerator, type_generator
from structql.model.descriptors import (
    Descriptor,
    EnumsDescriptor,
    InterfaceDescriptor,
    ListDescriptor,
    MaybeDescriptor,
    Primitive,
    PrimitiveDescriptor,
    StructDescriptor,
    UnionDescriptor,
    mark_as_interface,
)

# ###############
# Public Interface
# ###############


class DefinitionsError(Exception):
    """Raised when a definitions file is invalid or cannot be loaded."""


@dataclass
class Definitions:
    """The parsed contents of a definitions file.

    Attributes:
        types: Declared descriptors by name. Types flagged with
            ``graphql-interface`` map to their tagged descriptor.
        scalars: Custom scalar names, each mapped to the name of the built-in
            GraphQL scalar it aliases, or None for a new scalar type.
    """

    types: dict[str, Descriptor] = field(default_factory=dict)
    scalars: dict[str, str | None] = field(default_factory=dict)

    def generators(self) -> dict[str, TypeGenerator]:
        """Return custom generators for the declared scalars."""
        result: dict[str, TypeGenerator] = {}
        for name, alias in self.scalars.items():
            gql_type = GraphQLScalarType(name) if alias is None else _GRAPHQL_SCALARS[alias]
            result[name] = type_generator(gql_type)
        return result


def load_definitions(path: Path) -> Definitions:
    """Load and parse a descriptor definitions file.

    Args:
        path: Path to the YAML definitions file.

    Returns:
        A Definitions instance populated from the file.

    Raises:
        DefinitionsError: If the file cannot be read or the definitions are invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DefinitionsError(f"Definitions file not found: {path}") from None
    except OSError as exc:
        raise DefinitionsError(f"Cannot read definitions file: {exc}") from exc

    return _parse_definitions(text, source_label=str(path))


# ################
# Implementation
# ################

# Aliases accept the GraphQL spelling and the primitive spelling used in fields.
_GRAPHQL_SCALARS: dict[str, GraphQLScalarType] = {
    "String": GraphQLString,
    "Float": GraphQLFloat,
    "Number": GraphQLFloat,
    "Int": GraphQLInt,
    "Integer": GraphQLInt,
    "Boolean": GraphQLBoolean,
    "ID": GraphQLID,
}

_RECORD_KINDS = ("struct", "interface")
_ALLOWED_KEYS: dict[str, set[str]] = {
    "struct": {"kind", "fields", "graphql-interface"},
    "interface": {"kind", "fields", "graphql-interface"},
    "enums": {"kind", "values"},
    "union": {"kind", "types"},
}


def _parse_definitions(text: str, source_label: str = "<string>") -> Definitions:
    """Parse definitions YAML text into Definitions.

    Declared types are created empty first, then their fields, values and
    members are filled in, so types may reference each other in any order,
    including recursively.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Returns:
        A Definitions instance.

    Raises:
        DefinitionsError: If the YAML is invalid or a definition is malformed.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DefinitionsError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DefinitionsError(f"{source_label}: definitions must be a YAML mapping")

    unknown = set(data) - {"scalars", "types"}
    if unknown:
        raise DefinitionsError(f"{source_label}: unknown top-level key(s): {', '.join(sorted(map(str, unknown)))}")

    scalars = _parse_scalars(data.get("scalars", {}), source_label)
    raw_types = _require_mapping(data, "types", source_label)

    names: dict[str, Descriptor] = {p.value: PrimitiveDescriptor(name=p.value) for p in Primitive}
    for scalar_name in scalars:
        names[scalar_name] = PrimitiveDescriptor(name=scalar_name)

    shells: dict[str, Descriptor] = {}
    for name, entry in raw_types.items():
        location = f"{source_label}: types.{name}"
        if not isinstance(name, str) or not name:
            raise DefinitionsError(f"{source_label}: type names must be non-empty strings, got {name!r}")
        _require_graphql_name(name, location)
        if name in names:
            raise DefinitionsError(f"{location}: name is already taken by a primitive or scalar")
        shell = _create_shell(name, entry, location)
        shells[name] = shell
        names[name] = mark_as_interface(shell) if entry.get("graphql-interface", False) else shell

    for name, shell in shells.items():
        _fill_shell(shell, raw_types[name], names, f"{source_label}: types.{name}")

    return Definitions(types={name: names[name] for name in shells}, scalars=scalars)


def _require_mapping(mapping: dict[str, object], key: str, location: str) -> dict:
    """Extract an optional mapping field, defaulting to an empty mapping."""
    value = mapping.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DefinitionsError(f"{location}: '{key}' must be a mapping")
    return value


def _require_graphql_name(name: str, location: str) -> None:
    """Reject names that GraphQL cannot represent."""
    try:
        assert_name(name)
    except GraphQLError as exc:
        raise DefinitionsError(f"{location}: {exc.message}") from None


def _parse_scalars(raw: object, source_label: str) -> dict[str, str | None]:
    """Parse the scalars section into a name -> alias mapping."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise DefinitionsError(f"{source_label}: 'scalars' must be a mapping")

    scalars: dict[str, str | None] = {}
    for name, alias in raw.items():
        location = f"{source_label}: scalars.{name}"
        if not isinstance(name, str) or not name:
            raise DefinitionsError(f"{source_label}: scalar names must be non-empty strings, got {name!r}")
        _require_graphql_name(name, location)
        if name in {p.value for p in Primitive}:
            raise DefinitionsError(f"{location}: cannot redefine built-in primitive '{name}'")
        if alias is not None and alias not in _GRAPHQL_SCALARS:
            raise DefinitionsError(
                f"{location}: unknown scalar alias {alias!r}"
                f" (expected a GraphQL or primitive name: {', '.join(_GRAPHQL_SCALARS)})"
            )
        scalars[name] = alias
    return scalars


def _create_shell(name: str, entry: object, location: str) -> Descriptor:
    """Create an empty descriptor of the declared kind."""
    if not isinstance(entry, dict):
        raise DefinitionsError(f"{location} must be a YAML mapping")

    kind = entry.get("kind")
    if not isinstance(kind, str) or kind not in _ALLOWED_KEYS:
        raise DefinitionsError(f"{location}: 'kind' must be one of {', '.join(_ALLOWED_KEYS)}, got {kind!r}")

    unknown = set(entry) - _ALLOWED_KEYS[kind]
    if unknown:
        raise DefinitionsError(f"{location}: unknown key(s) for {kind}: {', '.join(sorted(map(str, unknown)))}")

    if kind in _RECORD_KINDS and not isinstance(entry.get("graphql-interface", False), bool):
        raise DefinitionsError(f"{location}: 'graphql-interface' must be a boolean")

    if kind == "struct":
        return StructDescriptor(name=name)
    if kind == "interface":
        return InterfaceDescriptor(name=name)
    if kind == "enums":
        return EnumsDescriptor(name=name)
    return UnionDescriptor(name=name)


def _fill_shell(shell: Descriptor, entry: dict, names: dict[str, Descriptor], location: str) -> None:
    """Populate the props, values or members of a shell descriptor in place."""
    if isinstance(shell, StructDescriptor | InterfaceDescriptor):
        for field_name, expr in _require_mapping(entry, "fields", location).items():
            field_location = f"{location}.fields.{field_name}"
            if not isinstance(field_name, str):
                raise DefinitionsError(f"{location}: field names must be strings, got {field_name!r}")
            _require_graphql_name(field_name, field_location)
            shell.props[field_name] = _parse_type_expression(expr, names, field_location)
    elif isinstance(shell, EnumsDescriptor):
        values = entry.get("values", [])
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise DefinitionsError(f"{location}: 'values' must be a list of strings")
        shell.values.extend(values)
    elif isinstance(shell, UnionDescriptor):
        members = entry.get("types", [])
        if not isinstance(members, list):
            raise DefinitionsError(f"{location}: 'types' must be a list")
        for index, expr in enumerate(members):
            shell.types.append(_parse_type_expression(expr, names, f"{location}.types[{index}]"))


def _parse_type_expression(expr: object, names: dict[str, Descriptor], location: str) -> Descriptor:
    """Parse a type expression: ``Name``, ``Expr?`` (maybe) or ``[Expr]`` (list)."""
    if not isinstance(expr, str):
        raise DefinitionsError(f"{location}: type expression must be a string (quote list types like \"[ID]\")")
    text = expr.strip()
    if not text:
        raise DefinitionsError(f"{location}: empty type expression")
    if text.endswith("?"):
        return MaybeDescriptor(type=_parse_type_expression(text[:-1], names, location))
    if text.startswith("["):
        if not text.endswith("]"):
            raise DefinitionsError(f"{location}: unbalanced brackets in {expr!r}")
        return ListDescriptor(type=_parse_type_expression(text[1:-1], names, location))
    if text not in names:
        raise DefinitionsError(f"{location}: unknown type '{text}'")
    return names[text]
