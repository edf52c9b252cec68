#!/usr/bin/env python3

"""Storage layout domain models."""

from .errors import (
    CyclicStructReferenceError,
    InvalidArrayLengthError,
    InvalidWidthError,
    LayoutError,
    SourceParseError,
    UnknownTypeError,
)
from .field_info import Field, FieldTable
from .layout_entry import LayoutEntry, StructLayout, slots_for
from .struct_info import EnumDefinition, SourceDefinitions, StructDefinition
from .type_constants import SLOT_SIZE_BYTES
from .type_descriptor import TypeDescriptor, TypeKind

__all__ = [
    "CyclicStructReferenceError",
    "EnumDefinition",
    "Field",
    "FieldTable",
    "InvalidArrayLengthError",
    "InvalidWidthError",
    "LayoutEntry",
    "LayoutError",
    "SLOT_SIZE_BYTES",
    "SourceDefinitions",
    "SourceParseError",
    "StructDefinition",
    "StructLayout",
    "TypeDescriptor",
    "TypeKind",
    "UnknownTypeError",
    "slots_for",
]
