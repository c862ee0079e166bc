"""
Peel Builder Module
===================

Fluent construction of a Peel controller.

Design:
- Builder pattern: fluent configuration
- Fail Fast: validation at build time
- The first position update runs after constraints and path are in place
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from peel_engine.config import PeelOptions
from peel_engine.controller import Peel
from peel_engine.geometry.container import PeelTarget
from peel_engine.logging import StructuredLogger
from peel_engine.presets import Preset
from peel_engine.rendering.clipping import ClipRegistry


class PeelBuilder:
    """
    Builder for Peel controllers.

    Usage:
        peel = (
            PeelBuilder()
            .with_size(200, 100)
            .with_corner(Corner.BOTTOM_RIGHT)
            .add_constraint(Corner.BOTTOM_LEFT)
            .with_path(200, 100, 0, 0)
            .with_fade_threshold(0.9)
            .build()
        )
    """

    def __init__(self):
        self._size: Optional[Tuple[float, float]] = None
        self._options: PeelOptions = PeelOptions()
        self._overrides: Dict[str, Any] = {}
        self._constraints: List[PeelTarget] = []
        self._path: Optional[Tuple[float, ...]] = None
        self._registry: Optional[ClipRegistry] = None
        self._logger: Optional[StructuredLogger] = None

    def with_size(self, width: float, height: float) -> "PeelBuilder":
        """Set container size."""
        self._size = (width, height)
        return self

    def with_options(self, options: Union[PeelOptions, Mapping[str, Any]]) -> "PeelBuilder":
        """Set base options (single overrides still apply on top)."""
        if not isinstance(options, PeelOptions):
            options = PeelOptions.from_dict(options)
        self._options = options
        return self

    def with_option(self, key: str, value: Any) -> "PeelBuilder":
        """Override a single option."""
        self._overrides[key] = value
        return self

    def with_corner(self, corner: PeelTarget) -> "PeelBuilder":
        """Set the anchor corner."""
        return self.with_option("corner", corner)

    def with_preset(self, preset: Union[Preset, str]) -> "PeelBuilder":
        """Apply a preset ("book" or "calendar")."""
        return self.with_option("preset", preset)

    def with_fade_threshold(self, threshold: float) -> "PeelBuilder":
        """Set the fade threshold."""
        return self.with_option("fade_threshold", threshold)

    def add_constraint(self, target: PeelTarget) -> "PeelBuilder":
        """
        Add a hinge constraint (applied after any preset constraints).

        Args:
            target: Corner id or Point

        Returns:
            Self for chaining
        """
        self._constraints.append(target)
        return self

    def with_path(self, *coords: float) -> "PeelBuilder":
        """Set the peel path (4 or 8 coordinates)."""
        self._path = coords
        return self

    def with_registry(self, registry: ClipRegistry) -> "PeelBuilder":
        """Share a clip registry with other instances."""
        self._registry = registry
        return self

    def with_logger(self, logger: StructuredLogger) -> "PeelBuilder":
        """Set structured logger."""
        self._logger = logger
        return self

    def build(self) -> Peel:
        """
        Build the controller.

        Raises:
            ValueError: If the size is missing
            PeelConfigurationError: If options are invalid
            PathArgumentError: If the path has neither 4 nor 8 coordinates
        """
        if self._size is None:
            raise ValueError("Container size is required (use .with_size())")

        options = self._options.with_overrides(**self._overrides)
        width, height = self._size

        peel = Peel(
            width,
            height,
            options.with_overrides(set_peel_on_init=False),
            registry=self._registry,
            logger=self._logger,
        )
        peel.set_option("set_peel_on_init", options.set_peel_on_init)

        for target in self._constraints:
            peel.add_peel_constraint(target)
        if self._path is not None:
            peel.set_peel_path(*self._path)

        if options.set_peel_on_init:
            peel.set_peel_position(peel.corner)
        return peel
