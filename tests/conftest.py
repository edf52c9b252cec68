"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from struct_slot_layout.domain.models.layout import FieldTable, SourceDefinitions
from struct_slot_layout.domain.services.layout import StructLayoutService
from struct_slot_layout.domain.services.parsing import extract_definitions
from struct_slot_layout.domain.services.resolution import TypeResolver
from struct_slot_layout.infrastructure.logging import LoggerSetup

CONFIG_ENV_VARS = (
    "INPUT_FILE",
    "OUTPUT_FORMAT",
    "HEX_SLOTS",
    "BASE_SLOT",
    "VERBOSE",
    "PARALLEL",
    "LOG_DIR",
    "SLOT_LAYOUT_LAYOUT_CACHE_SIZE",
    "SLOT_LAYOUT_ENABLE_LAYOUT_CACHE",
    "SLOT_LAYOUT_MAX_WORKERS",
)

SAMPLE_SOURCE = """\
// SPDX-License-Identifier: MIT
pragma solidity ^0.8.20;

enum Status { Pending, Active, Closed }

struct Inner {
    uint256 p;
    bool q;
}

struct Outer {
    bool m;
    Inner n;
    uint256 o;
}

struct Example {
    uint256 a;
    bytes4 b;
    bool c;
    int88 d;
    uint256 e;
}
"""


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Clear configuration variables and restore them after the test.

    Setting before deleting makes monkeypatch undo anything a .env load adds.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield
    LoggerSetup.reset()


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_source() -> str:
    """Source text with an enum, a nested struct and the motivating example."""
    return SAMPLE_SOURCE


@pytest.fixture
def sample_definitions(sample_source: str) -> SourceDefinitions:
    return extract_definitions(sample_source)


@pytest.fixture
def service(sample_definitions: SourceDefinitions) -> StructLayoutService:
    """Service over the sample definitions, without a cache."""
    return StructLayoutService(
        sample_definitions.structs, sample_definitions.enum_variant_counts
    )


def build_table(*pairs: tuple[str, str], resolver: TypeResolver | None = None) -> FieldTable:
    """Resolve (field name, type token) pairs into a FieldTable named ``T``."""
    resolver = resolver or TypeResolver()
    return FieldTable.from_pairs(
        "T", [(name, resolver.resolve(type_name), type_name) for name, type_name in pairs]
    )


@pytest.fixture
def table_builder():
    """Expose build_table to tests as a fixture."""
    return build_table
