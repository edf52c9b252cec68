#!/usr/bin/env python3

"""Struct and enum definition models produced by source extraction."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StructDefinition:
    """A struct declaration: name plus ordered (field name, raw type token) pairs."""

    name: str
    fields: tuple[tuple[str, str], ...]
    declaration_line: int | None = None


@dataclass(frozen=True)
class EnumDefinition:
    """An enum declaration."""

    name: str
    variants: tuple[str, ...]
    declaration_line: int | None = None

    @property
    def variant_count(self) -> int:
        return len(self.variants)


@dataclass
class SourceDefinitions:
    """All struct and enum definitions found in one scan, in declaration order."""

    structs: dict[str, StructDefinition] = field(default_factory=dict)
    enums: dict[str, EnumDefinition] = field(default_factory=dict)

    @property
    def enum_variant_counts(self) -> dict[str, int]:
        return {name: enum.variant_count for name, enum in self.enums.items()}
