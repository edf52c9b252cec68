#!/usr/bin/env python3

"""Struct layout service: recursion glue between resolver and allocator.

Builds field tables for named structs, sizes nested struct references by
recursively laying out the referenced struct, detects reference cycles and
optionally memoizes layouts per struct name.
"""

from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor

from ....infrastructure.config import get_config
from ....infrastructure.logging import ProgressTracker, get_logger, log_timing
from ...models.layout import (
    CyclicStructReferenceError,
    FieldTable,
    LayoutError,
    SourceDefinitions,
    StructDefinition,
    StructLayout,
    UnknownTypeError,
)
from ...repositories.cache import LayoutCache
from ..resolution import TypeResolver
from .layout_allocator import allocate

logger = get_logger(__name__)


class StructLayoutService:
    """Computes layouts for the structs of one source scan.

    The service holds only immutable definitions and an optional cache, so
    independent structs can be laid out concurrently. The chain of structs
    currently being resolved is passed down each recursive call rather than
    kept on the instance.

    Attributes:
        structs: Struct name -> definition
        enums: Enum name -> variant count
        cache: Optional layout cache keyed by struct name
    """

    def __init__(
        self,
        structs: Mapping[str, StructDefinition],
        enums: Mapping[str, int] | None = None,
        cache: LayoutCache | None = None,
        tracker: ProgressTracker | None = None,
    ):
        """Initialize service with the definitions of one scan.

        Args:
            structs: Struct name -> definition
            enums: Enum name -> number of variants
            cache: Layout cache to memoize nested struct layouts
            tracker: Progress tracker for layout statistics
        """
        self.structs = dict(structs)
        self.enums = dict(enums or {})
        self.cache = cache
        self.tracker = tracker or ProgressTracker(logger)

    @classmethod
    def from_definitions(
        cls, definitions: SourceDefinitions, use_cache: bool | None = None
    ) -> "StructLayoutService":
        """Create a service from extractor output, configuring the cache from settings.

        Args:
            definitions: Structs and enums found in one scan
            use_cache: Override for the ENABLE_LAYOUT_CACHE setting
        """
        config = get_config()
        if use_cache is None:
            use_cache = config["ENABLE_LAYOUT_CACHE"]

        cache = LayoutCache(max_size=config["LAYOUT_CACHE_SIZE"]) if use_cache else None
        return cls(definitions.structs, definitions.enum_variant_counts, cache=cache)

    @property
    def struct_names(self) -> list[str]:
        """Known struct names in declaration order."""
        return list(self.structs)

    def field_table(self, struct_name: str) -> FieldTable:
        """Resolve the field table of a struct.

        Raises:
            UnknownTypeError: If the struct or one of its field types is unknown
            InvalidWidthError: If a field type has an invalid width
            CyclicStructReferenceError: If a nested struct reaches back to itself
        """
        self._require_known(struct_name)
        return self._build_field_table(struct_name, (struct_name,))

    @log_timing
    def layout(self, struct_name: str) -> StructLayout:
        """Compute the storage layout of a struct.

        Args:
            struct_name: Name of a struct in this scan

        Returns:
            StructLayout with slots relative to the struct's base location

        Raises:
            LayoutError: If the struct cannot be laid out
        """
        return self._layout(struct_name, ())

    @log_timing
    def layout_all(
        self,
        struct_names: Iterable[str] | None = None,
        parallel: bool = False,
        max_workers: int | None = None,
    ) -> tuple[dict[str, StructLayout], dict[str, LayoutError]]:
        """Lay out several structs, collecting failures per struct.

        Args:
            struct_names: Structs to lay out (default: all, in declaration order)
            parallel: Lay out structs on a thread pool
            max_workers: Pool size (default: MAX_WORKERS setting)

        Returns:
            Tuple of (layouts, failures), both keyed by struct name in request order
        """
        names = list(struct_names) if struct_names is not None else self.struct_names
        outcomes: dict[str, StructLayout | LayoutError] = {}

        with self.tracker.track_operation(f"layout of {len(names)} struct(s)"):
            if parallel and len(names) > 1:
                workers = max_workers or get_config()["MAX_WORKERS"]
                logger.debug(f"Laying out {len(names)} structs on {workers} workers")
                with ThreadPoolExecutor(max_workers=workers) as executor:
                    for name, outcome in zip(names, executor.map(self._try_layout, names)):
                        outcomes[name] = outcome
            else:
                for name in names:
                    outcomes[name] = self._try_layout(name)

        layouts = {n: o for n, o in outcomes.items() if isinstance(o, StructLayout)}
        failures = {n: o for n, o in outcomes.items() if isinstance(o, LayoutError)}

        if self.cache is not None:
            logger.debug(f"Layout cache: {self.cache.stats()}")
        self.tracker.report_summary()

        return layouts, failures

    def _try_layout(self, struct_name: str) -> StructLayout | LayoutError:
        try:
            layout = self.layout(struct_name)
        except LayoutError as e:
            self.tracker.record_failure(struct_name, e)
            return e
        self.tracker.record_struct(struct_name, len(layout))
        return layout

    def _layout(self, struct_name: str, path: tuple[str, ...]) -> StructLayout:
        """Lay out ``struct_name`` reached through the chain ``path``."""
        if struct_name in path:
            raise CyclicStructReferenceError([*path, struct_name])
        self._require_known(struct_name)

        inner_path = (*path, struct_name)

        def compute() -> StructLayout:
            return allocate(self._build_field_table(struct_name, inner_path))

        if self.cache is None:
            return compute()
        return self.cache.get_or_compute(struct_name, compute)

    def _build_field_table(self, struct_name: str, path: tuple[str, ...]) -> FieldTable:
        resolver = TypeResolver(
            struct_names=self.structs.keys(),
            enums=self.enums,
            struct_slots=lambda ref: self._layout(ref, path).total_slots,
        )

        resolved = []
        for field_name, raw_type in self.structs[struct_name].fields:
            try:
                descriptor = resolver.resolve(raw_type)
            except UnknownTypeError as e:
                if e.struct_name is not None:
                    raise
                raise UnknownTypeError(e.type_name, struct_name) from e
            resolved.append((field_name, descriptor, raw_type))

        return FieldTable.from_pairs(struct_name, resolved)

    def _require_known(self, struct_name: str) -> None:
        if struct_name not in self.structs:
            raise UnknownTypeError(struct_name)
