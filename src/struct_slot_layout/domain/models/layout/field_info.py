#!/usr/bin/env python3

"""Field and field table models."""

from collections.abc import Iterator
from dataclasses import dataclass

from .type_descriptor import TypeDescriptor


@dataclass(frozen=True)
class Field:
    """A single declared struct field with its resolved type."""

    name: str
    type: TypeDescriptor
    declaration_index: int
    type_name: str = ""

    def __post_init__(self) -> None:
        if not self.type_name:
            object.__setattr__(self, "type_name", self.type.name)


@dataclass(frozen=True)
class FieldTable:
    """Ordered, immutable list of a struct's fields.

    Declaration order is the sole determinant of packing order.
    """

    struct_name: str
    fields: tuple[Field, ...] = ()

    @classmethod
    def from_pairs(
        cls, struct_name: str, pairs: list[tuple[str, TypeDescriptor, str]]
    ) -> "FieldTable":
        """Build a table from (field name, descriptor, raw type token) triples."""
        return cls(
            struct_name=struct_name,
            fields=tuple(
                Field(name=name, type=descriptor, declaration_index=index, type_name=raw)
                for index, (name, descriptor, raw) in enumerate(pairs)
            ),
        )

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def prefix(self, count: int) -> "FieldTable":
        """Return a table holding only the first ``count`` fields."""
        return FieldTable(struct_name=self.struct_name, fields=self.fields[:count])
