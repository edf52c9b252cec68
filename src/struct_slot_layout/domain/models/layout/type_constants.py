#!/usr/bin/env python3

"""Storage model constants and elementary type families."""

import re

# Width of one storage slot
SLOT_SIZE_BYTES = 32

# Fixed-size elementary names with no width annotation
FIXED_SIZE_TYPES: dict[str, int] = {
    "bool": 1,
    "address": 20,
    "address payable": 20,
}

# Unannotated integer aliases map to their full-width spelling
INTEGER_ALIASES: dict[str, str] = {
    "uint": "uint256",
    "int": "int256",
}

# Names whose storage is a one-slot header with hash-derived contents
DYNAMIC_TYPE_NAMES = frozenset({"bytes", "string"})

INTEGER_PATTERN = re.compile(r"^(u?int)(\d+)$")
FIXED_BYTES_PATTERN = re.compile(r"^bytes(\d+)$")
ARRAY_SUFFIX_PATTERN = re.compile(r"^(?P<element>.+?)\s*\[\s*(?P<length>\d*)\s*\]$")

MIN_INTEGER_BITS = 8
MAX_INTEGER_BITS = 256
