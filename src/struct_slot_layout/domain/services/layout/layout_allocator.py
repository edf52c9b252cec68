#!/usr/bin/env python3

"""Storage slot allocation for struct fields.

Walks a field table in declaration order and assigns each field a slot, a
byte offset within that slot and a byte size, following the platform's
storage packing rules:
- Value types use only as many bytes as necessary and pack tightly into the
  current slot, lower-order aligned.
- A value type that does not fit the remainder of the current slot starts
  the next slot; values are never split across slots.
- Structs, fixed-size arrays and variable-size containers always start a new
  slot, and the field following them always starts a new slot too.
"""

from ...models.layout import (
    SLOT_SIZE_BYTES,
    FieldTable,
    LayoutEntry,
    StructLayout,
    slots_for,
)


def allocate(field_table: FieldTable) -> StructLayout:
    """Compute the storage layout of a field table.

    Pure and deterministic: the same table always yields an identical layout,
    and the placement of a field never depends on fields declared after it.

    Args:
        field_table: Resolved fields in declaration order

    Returns:
        StructLayout with one entry per field, in declaration order
    """
    entries: list[LayoutEntry] = []
    current_slot = 0
    current_offset = 0

    for field in field_table:
        size = field.type.byte_size

        if field.type.forces_new_slot:
            if current_offset != 0:
                current_slot += 1
                current_offset = 0
            entries.append(LayoutEntry(field=field, slot=current_slot, offset=0, size=size))
            current_slot += slots_for(size)
            current_offset = 0
            continue

        if current_offset + size > SLOT_SIZE_BYTES:
            current_slot += 1
            current_offset = 0
        entries.append(LayoutEntry(field=field, slot=current_slot, offset=current_offset, size=size))
        current_offset += size
        if current_offset == SLOT_SIZE_BYTES:
            current_slot += 1
            current_offset = 0

    return StructLayout(name=field_table.struct_name, entries=tuple(entries))
