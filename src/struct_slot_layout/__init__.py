"""Struct Slot Layout - storage slot/offset/size tables for contract structs."""

from .application import LayoutGenerator
from .domain.models.layout import (
    CyclicStructReferenceError,
    InvalidWidthError,
    LayoutError,
    StructLayout,
    UnknownTypeError,
)
from .domain.services import StructLayoutService, TypeResolver, allocate
from .domain.services.parsing import extract_definitions
from .infrastructure.config import Config
from .main import main

__all__ = [
    "Config",
    "CyclicStructReferenceError",
    "InvalidWidthError",
    "LayoutError",
    "LayoutGenerator",
    "StructLayout",
    "StructLayoutService",
    "TypeResolver",
    "UnknownTypeError",
    "allocate",
    "extract_definitions",
    "main",
]
