"""
Clip Region Registry
====================

Bounded Context: Naming of renderer clip regions.

Responsibilities:
  - Hand out clip ids that are never reused
  - Record which layer each clip region belongs to

Threading: Thread-safe (uses lock for read-and-increment and writes)
Pattern: Injected id generator + caller-owned registry. Registries built
  without a generator draw from one process-wide generator, so ids stay
  unique across Peel instances unless a caller supplies its own.
"""

import itertools
import threading
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from peel_engine.logging import LogEvent, StructuredLogger
from peel_engine.rendering.schemas import ShapeDescriptor, ShapeKind


class ClipIdGenerator:
    """
    Monotonically increasing clip id source.

    Example:
        generator = ClipIdGenerator()
        generator.next_id()  # 'svg-clip-1'
        generator.next_id()  # 'svg-clip-2'
    """

    def __init__(self, prefix: str = "svg-clip-", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        """Read and increment exactly once."""
        with self._lock:
            return f"{self.prefix}{next(self._counter)}"


_process_generator = ClipIdGenerator()


def default_id_generator() -> ClipIdGenerator:
    """Generator shared by every registry created without one."""
    return _process_generator


@dataclass(frozen=True)
class ClipRegion:
    """
    A named clip region attached to one layer.

    Attributes:
        region_id: Unique id (e.g. "svg-clip-3")
        layer: Layer name ("top", "back", "top-shape", ...)
        shape: Clip shape; polygon regions are updated every frame
    """

    region_id: str
    layer: str
    shape: ShapeDescriptor

    @property
    def is_polygon(self) -> bool:
        return self.shape.kind == ShapeKind.POLYGON


class ClipRegistry:
    """
    Caller-owned record of clip regions.

    Example:
        registry = ClipRegistry(ClipIdGenerator())
        region = registry.create("top")
        region.region_id  # 'svg-clip-1'
        registry.get(region.region_id) is region  # True
    """

    def __init__(
        self,
        id_generator: Optional[ClipIdGenerator] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self._id_generator = id_generator or default_id_generator()
        self._regions: Dict[str, ClipRegion] = {}
        self._lock = threading.Lock()
        self._logger = logger

    def create(self, layer: str, shape: Optional[ShapeDescriptor] = None) -> ClipRegion:
        """
        Register a new clip region.

        Args:
            layer: Layer the region clips
            shape: Clip shape (default: empty polygon)

        Returns:
            The new region
        """
        shape = shape or ShapeDescriptor(ShapeKind.POLYGON)
        region = ClipRegion(
            region_id=self._id_generator.next_id(),
            layer=layer,
            shape=shape,
        )
        with self._lock:
            self._regions[region.region_id] = region

        if self._logger:
            self._logger.debug(
                event=LogEvent.CLIP_REGION_CREATED,
                message=f"Created clip region for layer '{layer}'",
                metadata={'region_id': region.region_id, 'shape': shape.kind.value},
            )
        return region

    def get(self, region_id: str) -> ClipRegion:
        """
        Raises:
            KeyError: If the id was never registered
        """
        return self._regions[region_id]

    def __contains__(self, region_id: str) -> bool:
        return region_id in self._regions

    def __iter__(self) -> Iterator[ClipRegion]:
        return iter(list(self._regions.values()))

    def __len__(self) -> int:
        return len(self._regions)

    def __repr__(self) -> str:
        return f"ClipRegistry(regions={len(self._regions)})"
