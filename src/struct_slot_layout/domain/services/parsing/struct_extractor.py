#!/usr/bin/env python3

"""Best-effort extraction of struct and enum declarations from source text.

This is a lexical scan, not a parser: comments are blanked out, then
``struct Name { ... }`` and ``enum Name { ... }`` blocks are located and
their bodies split into field declarations / variants. Everything outside
those blocks (pragmas, contracts, functions) is ignored.
"""

import re

from ....infrastructure.logging import get_logger, log_timing
from ...models.layout import (
    EnumDefinition,
    SourceDefinitions,
    SourceParseError,
    StructDefinition,
)

logger = get_logger(__name__)

BLOCK_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)
LINE_COMMENT_PATTERN = re.compile(r"//[^\n]*")
DECLARATION_PATTERN = re.compile(r"\b(?P<keyword>struct|enum)\s+(?P<name>\w+)\s*\{(?P<body>[^{}]*)\}")
FIELD_PATTERN = re.compile(r"^(?P<type>.+?)\s+(?P<name>[A-Za-z_$][\w$]*)$")
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][\w$]*$")


def strip_comments(source: str) -> str:
    """Blank out comments, keeping newlines so line numbers stay valid."""
    without_blocks = BLOCK_COMMENT_PATTERN.sub(
        lambda m: "\n" * m.group(0).count("\n"), source
    )
    return LINE_COMMENT_PATTERN.sub("", without_blocks)


def compact_type(type_text: str) -> str:
    """Normalize whitespace in a type token (``mapping ( a=>b )`` -> ``mapping(a => b)``)."""
    compact = " ".join(type_text.split())
    compact = re.sub(r"\s*\(\s*", "(", compact)
    compact = re.sub(r"\s*\)", ")", compact)
    compact = re.sub(r"\s*=>\s*", " => ", compact)
    compact = re.sub(r"\s*\[\s*", "[", compact)
    return re.sub(r"\s*\]", "]", compact)


def _line_of(source: str, position: int) -> int:
    return source.count("\n", 0, position) + 1


def parse_struct_body(name: str, body: str, body_line: int) -> StructDefinition:
    """Split a struct body into (field name, raw type token) pairs.

    Args:
        name: Struct name
        body: Text between the braces
        body_line: Line number where the body starts

    Returns:
        StructDefinition in declaration order

    Raises:
        SourceParseError: If a statement is not a ``type name;`` declaration
    """
    fields: list[tuple[str, str]] = []
    seen: set[str] = set()
    *statements, trailing = body.split(";")

    if trailing.strip():
        line = body_line + body.count("\n", 0, body.rfind(trailing.strip()))
        raise SourceParseError(
            f"Missing ';' after '{' '.join(trailing.split())}' in struct {name}", line
        )

    consumed = 0
    for statement in statements:
        line = body_line + body.count("\n", 0, consumed + len(statement) - len(statement.lstrip()))
        consumed += len(statement) + 1

        text = " ".join(statement.split())
        if not text:
            continue

        match = FIELD_PATTERN.match(text)
        if not match:
            raise SourceParseError(f"Invalid field declaration '{text}' in struct {name}", line)

        field_name = match["name"]
        if field_name in seen:
            raise SourceParseError(f"Duplicate field '{field_name}' in struct {name}", line)
        seen.add(field_name)
        fields.append((field_name, compact_type(match["type"])))

    return StructDefinition(name=name, fields=tuple(fields))


def parse_enum_body(name: str, body: str, line: int) -> EnumDefinition:
    """Split an enum body into its variant names.

    Raises:
        SourceParseError: If a variant is not an identifier
    """
    variants = tuple(part.strip() for part in body.split(",") if part.strip())
    for variant in variants:
        if not IDENTIFIER_PATTERN.match(variant):
            raise SourceParseError(f"Invalid variant '{variant}' in enum {name}", line)
    return EnumDefinition(name=name, variants=variants, declaration_line=line)


@log_timing
def extract_definitions(source: str) -> SourceDefinitions:
    """Scan source text for struct and enum declarations.

    Args:
        source: Source text containing one or more declarations

    Returns:
        SourceDefinitions with structs and enums in declaration order

    Raises:
        SourceParseError: If a declaration is malformed or a name is declared twice
    """
    cleaned = strip_comments(source)
    definitions = SourceDefinitions()

    for match in DECLARATION_PATTERN.finditer(cleaned):
        name = match["name"]
        line = _line_of(cleaned, match.start())

        if name in definitions.structs or name in definitions.enums:
            raise SourceParseError(f"Duplicate declaration of '{name}'", line)

        if match["keyword"] == "enum":
            definitions.enums[name] = parse_enum_body(name, match["body"], line)
            logger.debug(f"Found enum {name} ({definitions.enums[name].variant_count} variants)")
            continue

        body_line = _line_of(cleaned, match.start("body"))
        struct = parse_struct_body(name, match["body"], body_line)
        definitions.structs[name] = StructDefinition(
            name=struct.name, fields=struct.fields, declaration_line=line
        )
        logger.debug(f"Found struct {name} ({len(struct.fields)} fields) at line {line}")

    logger.info(
        f"Extracted {len(definitions.structs)} struct(s) and {len(definitions.enums)} enum(s)"
    )
    return definitions
