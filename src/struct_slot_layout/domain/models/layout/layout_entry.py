#!/usr/bin/env python3

"""Layout table models: per-field placement and the whole-struct layout."""

from dataclasses import dataclass
from typing import Any

from .field_info import Field
from .type_constants import SLOT_SIZE_BYTES


def slots_for(byte_count: int) -> int:
    """Number of whole slots needed to hold ``byte_count`` bytes."""
    return -(-byte_count // SLOT_SIZE_BYTES)


@dataclass(frozen=True)
class LayoutEntry:
    """Placement of one field: slot index, byte offset within the slot and size."""

    field: Field
    slot: int
    offset: int
    size: int

    @property
    def name(self) -> str:
        return self.field.name

    @property
    def type_name(self) -> str:
        return self.field.type_name

    @property
    def end_offset(self) -> int:
        return self.offset + self.size

    @property
    def slot_span(self) -> int:
        """Number of slots this entry touches, starting at ``slot``."""
        return slots_for(self.end_offset)

    def to_record(self) -> dict[str, Any]:
        """Record handed to formatters."""
        return {
            "name": self.name,
            "type": self.type_name,
            "slot": self.slot,
            "offset": self.offset,
            "size": self.size,
        }


@dataclass(frozen=True)
class StructLayout:
    """Ordered layout entries for one struct."""

    name: str
    entries: tuple[LayoutEntry, ...] = ()

    @property
    def total_slots(self) -> int:
        if not self.entries:
            return 0
        last = self.entries[-1]
        return last.slot + last.slot_span

    @property
    def byte_size(self) -> int:
        """Size of the struct rounded up to whole slots."""
        return self.total_slots * SLOT_SIZE_BYTES

    def __len__(self) -> int:
        return len(self.entries)

    def entry(self, field_name: str) -> LayoutEntry:
        """Look up an entry by field name.

        Raises:
            KeyError: If no field has that name
        """
        for entry in self.entries:
            if entry.name == field_name:
                return entry
        raise KeyError(field_name)

    def entries_in_slot(self, slot: int) -> list[LayoutEntry]:
        """Entries whose byte range starts in ``slot``."""
        return [entry for entry in self.entries if entry.slot == slot]

    def prefix(self, count: int) -> "StructLayout":
        return StructLayout(name=self.name, entries=self.entries[:count])

    def to_records(self) -> list[dict[str, Any]]:
        return [entry.to_record() for entry in self.entries]
