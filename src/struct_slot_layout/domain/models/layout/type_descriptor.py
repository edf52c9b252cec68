#!/usr/bin/env python3

"""Type descriptor model for storage layout computation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TypeKind(Enum):
    """Closed set of type kinds understood by the layout allocator."""

    UNSIGNED_INT = "uint"
    SIGNED_INT = "int"
    BOOL = "bool"
    ADDRESS = "address"
    FIXED_BYTES = "fixed_bytes"
    ENUM = "enum"
    STRUCT_REF = "struct"
    FIXED_ARRAY = "fixed_array"
    DYNAMIC = "dynamic"


# Kinds that never share a slot with a preceding field
SLOT_ALIGNED_KINDS = frozenset({TypeKind.STRUCT_REF, TypeKind.FIXED_ARRAY, TypeKind.DYNAMIC})


@dataclass(frozen=True)
class TypeDescriptor:
    """Semantic description of one resolved type token."""

    kind: TypeKind
    name: str
    byte_size: int
    struct_name: str | None = None
    element: TypeDescriptor | None = None
    length: int | None = None

    @property
    def forces_new_slot(self) -> bool:
        """Composite and variable-size values always begin at offset 0 of a fresh slot."""
        return self.kind in SLOT_ALIGNED_KINDS

    @property
    def is_elementary(self) -> bool:
        return not self.forces_new_slot
