#!/usr/bin/env python3

"""Errors raised while resolving types and laying out structs."""


class LayoutError(ValueError):
    """Base class for all layout computation errors."""


class UnknownTypeError(LayoutError):
    """A type token names no elementary type, known struct or known enum."""

    def __init__(self, type_name: str, struct_name: str | None = None):
        self.type_name = type_name
        self.struct_name = struct_name
        where = f" in struct {struct_name}" if struct_name else ""
        super().__init__(f"Unknown type '{type_name}'{where}")


class InvalidWidthError(LayoutError):
    """An integer or fixed-bytes width annotation is out of range."""

    def __init__(self, type_name: str, reason: str):
        self.type_name = type_name
        super().__init__(f"Invalid width in '{type_name}': {reason}")


class InvalidArrayLengthError(LayoutError):
    """A fixed-size array declares zero elements."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Fixed-size array '{type_name}' must have at least one element")


class CyclicStructReferenceError(LayoutError):
    """A struct reaches itself through a chain of struct-valued fields."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(f"Cyclic struct reference: {' -> '.join(chain)}")


class SourceParseError(LayoutError):
    """Source text could not be scanned into struct definitions."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        location = f" (line {line})" if line is not None else ""
        super().__init__(f"{message}{location}")
