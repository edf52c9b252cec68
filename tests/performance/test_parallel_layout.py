"""Tests for parallel layout with a shared cache."""

import pytest

from struct_slot_layout.domain.models.layout import (
    CyclicStructReferenceError,
    StructDefinition,
)
from struct_slot_layout.domain.repositories.cache import LayoutCache
from struct_slot_layout.domain.services.layout import StructLayoutService


def chain_definitions(depth: int) -> dict[str, StructDefinition]:
    """S0 holds packed values; each S<i> embeds S<i-1> twice plus a flag."""
    structs = {"S0": StructDefinition(name="S0", fields=(("a", "uint128"), ("b", "uint128")))}
    for i in range(1, depth):
        structs[f"S{i}"] = StructDefinition(
            name=f"S{i}",
            fields=(("flag", "bool"), ("left", f"S{i - 1}"), ("right", f"S{i - 1}")),
        )
    return structs


@pytest.mark.performance
def test_parallel_layout_matches_sequential() -> None:
    """Test that parallel runs produce the same layouts as sequential runs."""
    structs = chain_definitions(12)

    sequential, _ = StructLayoutService(structs).layout_all()
    parallel, failures = StructLayoutService(structs, cache=LayoutCache()).layout_all(
        parallel=True, max_workers=6
    )

    assert failures == {}
    assert parallel == sequential
    # S_i = 1 flag slot + 2 * S_{i-1}
    assert sequential["S1"].total_slots == 3
    assert sequential["S11"].total_slots == 2 ** 12 - 1


@pytest.mark.performance
def test_parallel_layout_with_cycles_does_not_hang() -> None:
    structs = chain_definitions(4)
    structs["X"] = StructDefinition(name="X", fields=(("y", "Y"),))
    structs["Y"] = StructDefinition(name="Y", fields=(("x", "X"), ("s", "S3")))

    layouts, failures = StructLayoutService(structs, cache=LayoutCache()).layout_all(
        parallel=True, max_workers=4
    )

    assert set(failures) == {"X", "Y"}
    assert all(isinstance(e, CyclicStructReferenceError) for e in failures.values())
    assert set(layouts) == {"S0", "S1", "S2", "S3"}


@pytest.mark.performance
def test_cache_avoids_recomputing_shared_structs() -> None:
    cache = LayoutCache()
    service = StructLayoutService(chain_definitions(10), cache=cache)

    service.layout("S9")

    assert len(cache) == 10
    assert cache.stats()["hits"] >= 9
