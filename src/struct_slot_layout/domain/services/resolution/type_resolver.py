#!/usr/bin/env python3

"""Type descriptor resolution for struct field type tokens.

This module maps a raw type token, as written in a struct declaration, to a
TypeDescriptor carrying its byte size and packing class. It handles:
- Elementary value types (bool, address, uintN/intN, bytesN)
- Enum references (sized by variant count)
- Struct references (sized by a recursive layout computation)
- Fixed-size arrays and variable-size containers (one-slot header)
"""

import re
from collections.abc import Callable, Collection, Mapping

from ....infrastructure.logging import get_logger
from ...models.layout import (
    SLOT_SIZE_BYTES,
    InvalidArrayLengthError,
    InvalidWidthError,
    TypeDescriptor,
    TypeKind,
    UnknownTypeError,
    slots_for,
)
from ...models.layout.type_constants import (
    ARRAY_SUFFIX_PATTERN,
    DYNAMIC_TYPE_NAMES,
    FIXED_BYTES_PATTERN,
    FIXED_SIZE_TYPES,
    INTEGER_ALIASES,
    INTEGER_PATTERN,
    MAX_INTEGER_BITS,
    MIN_INTEGER_BITS,
)

logger = get_logger(__name__)

MAPPING_PATTERN = re.compile(r"^mapping\s*\(.+=>.+\)$")


def normalize_type_name(type_name: str) -> str:
    """Collapse whitespace in a type token (``address  payable`` -> ``address payable``)."""
    normalized = " ".join(type_name.split())
    normalized = re.sub(r"\s*\[\s*", "[", normalized)
    return re.sub(r"\s*\]", "]", normalized)


def enum_byte_size(variant_count: int) -> int:
    """Smallest byte count able to index ``variant_count`` variants, minimum 1."""
    size = 1
    while (1 << (8 * size)) < variant_count:
        size += 1
    return size


class TypeResolver:
    """Resolves type tokens to TypeDescriptors.

    The resolver is side-effect free. Struct sizes are obtained through the
    ``struct_slots`` callback, which is expected to run a layout computation
    for the named struct and return its total slot count.

    Attributes:
        struct_names: Struct names known in the current scan
        enums: Mapping of enum name -> variant count
    """

    def __init__(
        self,
        struct_names: Collection[str] = (),
        enums: Mapping[str, int] | None = None,
        struct_slots: Callable[[str], int] | None = None,
    ):
        """Initialize resolver with the names known in the current scan.

        Args:
            struct_names: Names of structs that may be referenced
            enums: Enum name -> number of variants
            struct_slots: Callback returning the total slot count of a struct;
                without it struct names are not resolvable
        """
        self.struct_names = frozenset(struct_names)
        self.enums = dict(enums or {})
        self._struct_slots = struct_slots

    def resolve(self, type_name: str) -> TypeDescriptor:
        """Resolve a type token into a TypeDescriptor.

        Args:
            type_name: Raw type token, e.g. ``uint256``, ``bytes4``, ``Inner[2]``

        Returns:
            Resolved TypeDescriptor

        Raises:
            UnknownTypeError: If the token matches no known type
            InvalidWidthError: If an integer/bytes width is out of range
            InvalidArrayLengthError: If a fixed-size array has zero length
        """
        token = normalize_type_name(type_name)
        if not token:
            raise UnknownTypeError(type_name)

        array_match = ARRAY_SUFFIX_PATTERN.match(token)
        if array_match:
            return self._resolve_array(token, array_match["element"], array_match["length"])

        if token.startswith("mapping"):
            if not MAPPING_PATTERN.match(token):
                raise UnknownTypeError(token)
            return self._dynamic(token)

        if token in DYNAMIC_TYPE_NAMES:
            return self._dynamic(token)

        descriptor = self._resolve_elementary(token)
        if descriptor is not None:
            return descriptor

        enum_name = self._lookup(token, self.enums)
        if enum_name is not None:
            return TypeDescriptor(
                kind=TypeKind.ENUM,
                name=token,
                byte_size=enum_byte_size(self.enums[enum_name]),
            )

        struct_name = self._lookup(token, self.struct_names)
        if struct_name is not None and self._struct_slots is not None:
            total_slots = self._struct_slots(struct_name)
            logger.debug(f"Struct reference {token} occupies {total_slots} slot(s)")
            return TypeDescriptor(
                kind=TypeKind.STRUCT_REF,
                name=token,
                byte_size=total_slots * SLOT_SIZE_BYTES,
                struct_name=struct_name,
            )

        raise UnknownTypeError(token)

    def _resolve_elementary(self, token: str) -> TypeDescriptor | None:
        """Resolve bool/address/integer/fixed-bytes tokens, or None if not elementary."""
        if token in FIXED_SIZE_TYPES:
            kind = TypeKind.BOOL if token == "bool" else TypeKind.ADDRESS
            return TypeDescriptor(kind=kind, name=token, byte_size=FIXED_SIZE_TYPES[token])

        canonical = INTEGER_ALIASES.get(token, token)

        integer_match = INTEGER_PATTERN.match(canonical)
        if integer_match:
            bits = int(integer_match[2])
            if bits % 8 != 0:
                raise InvalidWidthError(token, f"{bits} is not a multiple of 8")
            if not MIN_INTEGER_BITS <= bits <= MAX_INTEGER_BITS:
                raise InvalidWidthError(
                    token, f"{bits} bits outside {MIN_INTEGER_BITS}..{MAX_INTEGER_BITS}"
                )
            kind = TypeKind.UNSIGNED_INT if integer_match[1] == "uint" else TypeKind.SIGNED_INT
            return TypeDescriptor(kind=kind, name=token, byte_size=bits // 8)

        bytes_match = FIXED_BYTES_PATTERN.match(token)
        if bytes_match:
            size = int(bytes_match[1])
            if not 1 <= size <= SLOT_SIZE_BYTES:
                raise InvalidWidthError(token, f"{size} bytes outside 1..{SLOT_SIZE_BYTES}")
            return TypeDescriptor(kind=TypeKind.FIXED_BYTES, name=token, byte_size=size)

        return None

    def _resolve_array(self, token: str, element_name: str, length_text: str) -> TypeDescriptor:
        """Resolve ``T[]`` (dynamic) or ``T[N]`` (laid out in place).

        The element of a dynamic array lives outside the struct and is left
        unresolved, so a struct may hold a dynamic array of itself.
        """
        if not length_text:
            return self._dynamic(token)

        element = self.resolve(element_name)

        length = int(length_text)
        if length == 0:
            raise InvalidArrayLengthError(token)

        if element.forces_new_slot:
            slot_count = length * slots_for(element.byte_size)
        else:
            per_slot = SLOT_SIZE_BYTES // element.byte_size
            slot_count = -(-length // per_slot)

        return TypeDescriptor(
            kind=TypeKind.FIXED_ARRAY,
            name=token,
            byte_size=slot_count * SLOT_SIZE_BYTES,
            element=element,
            length=length,
        )

    @staticmethod
    def _dynamic(token: str) -> TypeDescriptor:
        # Only the header slot lives at the declaration site
        return TypeDescriptor(kind=TypeKind.DYNAMIC, name=token, byte_size=SLOT_SIZE_BYTES)

    @staticmethod
    def _lookup(token: str, names: Collection[str]) -> str | None:
        """Find ``token`` among ``names``, falling back to its last dotted component."""
        if token in names:
            return token
        if "." in token:
            short_name = token.rsplit(".", 1)[1]
            if short_name in names:
                return short_name
        return None
