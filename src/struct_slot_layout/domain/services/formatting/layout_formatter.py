#!/usr/bin/env python3

"""Rendering of struct layouts as text tables and JSON."""

import json
from collections.abc import Iterable
from typing import Any

from ...models.layout import StructLayout

TABLE_HEADERS = ("Field", "Type", "Slot", "Offset", "Bytes")


def format_slot(slot: int, hex_slots: bool = False, base_slot: int = 0) -> str:
    """Render a relative slot index, shifted by ``base_slot``."""
    absolute = base_slot + slot
    return f"0x{absolute:x}" if hex_slots else str(absolute)


def layout_to_dict(
    layout: StructLayout, hex_slots: bool = False, base_slot: int = 0
) -> dict[str, Any]:
    """Convert a layout into a JSON-serializable dictionary."""
    fields = []
    for record in layout.to_records():
        if hex_slots:
            record["slot"] = format_slot(record["slot"], hex_slots, base_slot)
        else:
            record["slot"] += base_slot
        fields.append(record)

    return {
        "name": layout.name,
        "total_slots": layout.total_slots,
        "fields": fields,
    }


def format_table(layout: StructLayout, hex_slots: bool = False, base_slot: int = 0) -> str:
    """Render one layout as a fixed-width text table.

    Args:
        layout: Layout to render
        hex_slots: Show slot numbers in hexadecimal
        base_slot: Storage root added to every relative slot

    Returns:
        Table text ending with a total slot count line
    """
    rows = [
        (
            entry.name,
            entry.type_name,
            format_slot(entry.slot, hex_slots, base_slot),
            str(entry.offset),
            str(entry.size),
        )
        for entry in layout.entries
    ]

    widths = [
        max([len(header)] + [len(row[i]) for row in rows])
        for i, header in enumerate(TABLE_HEADERS)
    ]

    def render(cells: tuple[str, ...]) -> str:
        # Text columns left aligned, numeric columns right aligned
        parts = [
            cell.ljust(widths[i]) if i < 2 else cell.rjust(widths[i])
            for i, cell in enumerate(cells)
        ]
        return " | ".join(parts).rstrip()

    lines = [f"{layout.name}:", render(TABLE_HEADERS)]
    lines.append("-+-".join("-" * width for width in widths))
    lines.extend(render(row) for row in rows)
    lines.append(f"Total slots: {layout.total_slots}")

    return "\n".join(lines)


def format_tables(
    layouts: Iterable[StructLayout], hex_slots: bool = False, base_slot: int = 0
) -> str:
    """Render several layouts as tables separated by blank lines."""
    return "\n\n".join(format_table(layout, hex_slots, base_slot) for layout in layouts)


def format_json(
    layouts: Iterable[StructLayout], hex_slots: bool = False, base_slot: int = 0
) -> str:
    """Render several layouts as one JSON document."""
    document = {
        "structs": [layout_to_dict(layout, hex_slots, base_slot) for layout in layouts],
    }
    return json.dumps(document, indent=2)
