"""
Peel Controller Module
======================

Bounded Context: Orchestration of one peel effect.

Design:
- Owns the only mutable state (PeelState), one record per instance
- Delegates all computation to the pure layers:
  constraints -> folding -> effects -> rendering schemas
- Every position update returns a complete, immutable PeelFrame
- Synchronous: no scheduling, callers drive position/time updates

Usage:
    peel = Peel(200, 100, PeelOptions(preset="book"))

    frame = peel.set_peel_position(Point(120, 60))
    frame.front_clip.to_svg_points()   # polygon for the top layer clip
    frame.back_transform.to_css()      # transform for the back layer

    peel.set_peel_path(200, 100, 0, 0)
    frame = peel.set_time_along_path(0.5)
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

from peel_engine.config import OPTION_NAMES, PeelConfigurationError, PeelOptions, option_name
from peel_engine.constraints.hinges import ConstraintSet, HingeClamp
from peel_engine.effects import shading
from peel_engine.folding.fold_line import back_transform, build_fold_line, peel_line_distance
from peel_engine.folding.regions import clipped_area_ratio, split_box
from peel_engine.geometry.container import Box, Container, Corner, PeelTarget
from peel_engine.geometry.shapes import Circle, LineSegment, Point
from peel_engine.logging import LogEvent, StructuredLogger, create_logger
from peel_engine.path import PathArgumentError, PeelPath, path_from_coordinates, point_along_path
from peel_engine.presets import Preset, get_preset
from peel_engine.rendering.clipping import ClipRegion, ClipRegistry
from peel_engine.rendering.schemas import ClipOutline, PeelFrame, TransformDescriptor

# Fixed once the layers exist; each has a dedicated setter or none at all
_SETUP_ONLY_OPTIONS = {
    "corner": "set_corner()",
    "preset": "apply_preset()",
    "clipping_box_scale": None,
    "rect": None,
    "circle": None,
    "polygon": None,
    "path": None,
}


class PeelStateError(RuntimeError):
    """Raised when an operation is called before its preconditions hold."""
    pass


@dataclass
class PeelState:
    """
    Mutable per-instance peel state.

    Attributes:
        container: Container extents (captured once)
        corner: Anchor corner point
        constraints: Ordered hinge constraints
        path: Optional peel path
        time_along_path: Last path time, None until a path time is set
        position: Last constrained peel position
        fold_line: Current fold line
        fold_rotation: Rotation of the fold line (degrees)
    """

    container: Container
    corner: Point
    constraints: ConstraintSet = field(default_factory=ConstraintSet)
    path: Optional[PeelPath] = None
    time_along_path: Optional[float] = None
    position: Optional[Point] = None
    fold_line: Optional[LineSegment] = None
    fold_rotation: float = 0.0


@dataclass(frozen=True)
class LayerClips:
    """Clip regions created for the layers at setup."""

    top: ClipRegion
    back: ClipRegion
    top_shape: Optional[ClipRegion] = None
    back_shape: Optional[ClipRegion] = None
    bottom_shape: Optional[ClipRegion] = None


class Peel:
    """
    Controls one page-peel effect.

    Design Philosophy:
    - Single Responsibility: orchestration only
    - State is private; read through properties, change through setters
    - Fail Fast: options validated before any geometry is built

    Args:
        width: Container width (pixels)
        height: Container height (pixels)
        options: PeelOptions or a mapping of option names
        registry: Clip registry to name clip regions in (default: a new
            registry on the process-wide id generator)
        logger: Structured logger (default: "peel" component)
    """

    def __init__(
        self,
        width: float,
        height: float,
        options: Union[PeelOptions, Mapping[str, Any], None] = None,
        registry: Optional[ClipRegistry] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self._logger = logger or create_logger("peel")
        self._options = self._coerce_options(options)

        container = Container(width, height)
        self._registry = registry or ClipRegistry(logger=self._logger)
        self._clips = self._setup_clip_regions()
        self._clipping_box: Box = container.scaled_box(self._options.clipping_box_scale)

        self._state = PeelState(
            container=container,
            corner=container.corner_point(Corner.BOTTOM_RIGHT),
        )
        self._frame: Optional[PeelFrame] = None

        self.set_corner(self._options.corner)
        if self._options.preset is not None:
            self.apply_preset(self._options.preset)

        self._logger.info(
            event=LogEvent.PEEL_INITIALIZED,
            message="Peel initialized",
            metadata={
                'width': width,
                'height': height,
                'corner': self.corner.to_tuple(),
                'constraints': len(self._state.constraints),
                'clip_regions': [self._clips.top.region_id, self._clips.back.region_id],
            },
        )

        if self._options.set_peel_on_init:
            self.set_peel_position(self.corner)

    def _coerce_options(self, options) -> PeelOptions:
        if options is None:
            return PeelOptions()
        if isinstance(options, PeelOptions):
            return options
        try:
            return PeelOptions.from_dict(options)
        except PeelConfigurationError as e:
            self._logger.error(
                event=LogEvent.CONFIG_ERROR,
                message="Invalid peel options",
                exc_info=e,
            )
            raise

    def _setup_clip_regions(self) -> LayerClips:
        """
        Name the clip regions for the layers.

        A custom shape clips the top/back layers through their own
        regions, wrapped by the polygon clips, and clips the bottom
        layer directly.
        """
        shape = self._options.shape
        shape_regions = {}
        if shape is not None:
            shape_regions = {
                'top_shape': self._registry.create("top-shape", shape),
                'back_shape': self._registry.create("back-shape", shape),
                'bottom_shape': self._registry.create("bottom-shape", shape),
            }
        return LayerClips(
            top=self._registry.create("top"),
            back=self._registry.create("back"),
            **shape_regions,
        )

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def options(self) -> PeelOptions:
        return self._options

    @property
    def container(self) -> Container:
        return self._state.container

    @property
    def width(self) -> float:
        return self._state.container.width

    @property
    def height(self) -> float:
        return self._state.container.height

    @property
    def center(self) -> Point:
        return self._state.container.center

    @property
    def corner(self) -> Point:
        return self._state.corner

    @property
    def constraints(self) -> Tuple[Circle, ...]:
        return self._state.constraints.circles

    @property
    def flip_constraint(self) -> Optional[Circle]:
        return self._state.constraints.flip_constraint

    @property
    def path(self) -> Optional[PeelPath]:
        return self._state.path

    @property
    def time_along_path(self) -> Optional[float]:
        return self._state.time_along_path

    @property
    def position(self) -> Optional[Point]:
        return self._state.position

    @property
    def fold_line(self) -> Optional[LineSegment]:
        return self._state.fold_line

    @property
    def fold_rotation(self) -> float:
        return self._state.fold_rotation

    @property
    def frame(self) -> Optional[PeelFrame]:
        """Frame of the last position update."""
        return self._frame

    @property
    def clips(self) -> LayerClips:
        return self._clips

    @property
    def registry(self) -> ClipRegistry:
        return self._registry

    @property
    def uses_box_shadow(self) -> bool:
        """Box shadow without a custom shape, drop-shadow filter with one."""
        return self._clips.top_shape is None

    @property
    def state(self) -> PeelState:
        """Snapshot copy of the current state."""
        return dataclasses.replace(self._state)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def set_corner(self, target: Optional[PeelTarget] = None) -> None:
        """
        Set the corner the peel starts from (default: bottom right).

        Already added constraints keep their radii.
        """
        if target is None:
            target = Corner.BOTTOM_RIGHT
        corner = self.container.resolve(target)
        self._state.corner = corner
        self._state.constraints = self._state.constraints.reindexed(corner)

        self._logger.info(
            event=LogEvent.PEEL_CORNER_SET,
            message="Peel corner set",
            metadata={'corner': corner.to_tuple()},
        )

    def apply_preset(self, preset: Union[Preset, str]) -> None:
        """
        Apply a named preset ("book" or "calendar").

        Raises:
            PeelConfigurationError: If preset is unknown
        """
        try:
            definition = get_preset(preset)
        except ValueError as e:
            error = PeelConfigurationError(f"Invalid preset: {preset!r}")
            self._logger.error(
                event=LogEvent.CONFIG_ERROR,
                message="Unknown preset",
                exc_info=error,
            )
            raise error from e

        for corner in definition.constraints:
            self.add_peel_constraint(corner)
        self._options = self._options.with_overrides(
            preset=Preset(preset), **definition.overrides
        )

        self._logger.info(
            event=LogEvent.PEEL_PRESET_APPLIED,
            message=f"Applied preset '{Preset(preset).value}'",
            metadata={'constraints': len(definition.constraints)},
        )

    def add_peel_constraint(self, target: PeelTarget) -> Circle:
        """
        Add a hinge the layers cannot separate past.

        Typically a point on the outer edge (both left corners for a
        book, both top corners for a calendar), or any point acting
        like a thumbtack. Hinges apply in the order they are added.

        Returns:
            The constraint circle (radius frozen at the current corner)
        """
        hinge = self.container.resolve(target)
        self._state.constraints = self._state.constraints.add(hinge, self.corner)
        circle = self._state.constraints.circles[-1]

        self._logger.info(
            event=LogEvent.PEEL_CONSTRAINT_ADDED,
            message="Added peel constraint",
            metadata={
                'center': circle.center.to_tuple(),
                'radius': circle.radius,
                'flip_index': self._state.constraints.flip_index,
            },
        )
        self._check_flip_offset()
        return circle


    def set_peel_path(self, *coords: float) -> PeelPath:
        """
        Set a path for the peel to follow.

        Args:
            coords: 4 numbers for a line from (x1, y1) to (x2, y2), or
                8 numbers for a bezier curve (p1, c1, c2, p2)

        Raises:
            PathArgumentError: For any other number of coordinates
        """
        try:
            path = path_from_coordinates(*coords)
        except PathArgumentError as e:
            self._logger.error(
                event=LogEvent.PATH_ERROR,
                message="Invalid peel path",
                metadata={'coordinates': list(coords)},
                exc_info=e,
            )
            raise
        self._state.path = path

        self._logger.info(
            event=LogEvent.PEEL_PATH_SET,
            message=f"Peel path set ({type(path).__name__})",
            metadata={'coordinates': list(coords)},
        )
        return path

    def set_fade_threshold(self, threshold: float) -> None:
        """
        Progress (0-1) above which the top and back layers fade out.

        Progress is the time along the path when one is in use,
        otherwise the clipped area of the top layer.
        """
        self.set_option("fade_threshold", threshold)

    def set_option(self, key: str, value: Any) -> None:
        """
        Change one option (snake_case or camelCase name).

        Raises:
            PeelConfigurationError: If the option is unknown, invalid, or
                fixed once the layers are set up
        """
        name = option_name(key)
        if name in _SETUP_ONLY_OPTIONS:
            setter = _SETUP_ONLY_OPTIONS[name]
            hint = f", use {setter}" if setter else ""
            raise PeelConfigurationError(f"Option '{name}' is fixed at setup{hint}")
        self._options = self._options.with_overrides(**{name: value})

        self._logger.debug(
            event=LogEvent.PEEL_OPTION_CHANGED,
            message=f"Option '{name}' changed",
            metadata={'value': value},
        )
        if name == "flip_constraint_offset":
            self._check_flip_offset()

    def _check_flip_offset(self) -> None:
        flip = self.flip_constraint
        offset = self._options.flip_constraint_offset
        if flip is None or not offset or offset < flip.radius:
            return
        self._logger.warning(
            event=LogEvent.PEEL_FLIP_OFFSET_EXCEEDS_RADIUS,
            message="Flip constraint offset reaches the flip constraint radius",
            metadata={
                'offset': offset,
                'radius': flip.radius,
                'center': flip.center.to_tuple(),
            },
        )

    def get_option(self, key: str) -> Any:
        """
        Raises:
            PeelConfigurationError: If the option is unknown
        """
        name = option_name(key)
        if name not in OPTION_NAMES:
            raise PeelConfigurationError(f"Unknown option: {key!r}")
        return getattr(self._options, name)

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def set_time_along_path(self, t: float) -> PeelFrame:
        """
        Move the peel to time t (clamped to [0, 1]) along the path.

        Raises:
            PeelStateError: If no path was set
        """
        if self._state.path is None:
            error = PeelStateError("No peel path set, call set_peel_path() first")
            self._logger.error(
                event=LogEvent.STATE_ERROR,
                message="Time along path requested without a path",
                exc_info=error,
            )
            raise error

        t, point = point_along_path(self._state.path, t)
        self._state.time_along_path = t
        return self.set_peel_position(point)

    def set_peel_position(self, target: PeelTarget) -> PeelFrame:
        """
        Move the peeling corner to a position.

        Args:
            target: Corner id or Point

        Returns:
            Frame with every value the renderer needs
        """
        position = self.constrain_position(self.container.resolve(target))

        fold_line = build_fold_line(self.container, self.corner, position)
        self._state.position = position
        self._state.fold_line = fold_line
        self._state.fold_rotation = fold_line.angle

        self._frame = self._build_frame(position)

        self._logger.debug(
            event=LogEvent.PEEL_POSITION_UPDATED,
            message="Peel position updated",
            metadata={
                'position': position.to_tuple(),
                'fold_rotation': self._frame.fold_rotation,
                'peel_line_distance': self._frame.peel_line_distance,
            },
        )
        return self._frame

    def constrain_position(self, position: Point) -> Point:
        """Position after applying every hinge constraint in order."""
        return HingeClamp.clamp(
            self._state.constraints,
            position,
            corner=self.corner,
            center=self.center,
            flip_offset=self._options.flip_constraint_offset,
        )

    def get_amount_clipped(self) -> float:
        """
        Ratio of the top layer area that has been peeled away (0-1).

        Raises:
            PeelStateError: Before the first position update
        """
        return clipped_area_ratio(self.container, self._require_fold_line())

    def get_peel_line_distance(self) -> float:
        """
        Fold progress along the diagonal it faces (0 at the corner).

        Raises:
            PeelStateError: Before the first position update
        """
        return peel_line_distance(self.container, self._require_fold_line())

    def _require_fold_line(self) -> LineSegment:
        if self._state.fold_line is None:
            raise PeelStateError("No peel position set, call set_peel_position() first")
        return self._state.fold_line

    def _build_frame(self, position: Point) -> PeelFrame:
        container = self.container
        fold_line = self._state.fold_line
        rotation = self._state.fold_rotation
        options = self._options

        regions = split_box(self._clipping_box, fold_line, container)
        translate, rotate = back_transform(container, self.corner, position, rotation)

        t = peel_line_distance(container, fold_line)
        # A custom shape without a shadow shape has no top shadow layer
        has_top_shadow = self.uses_box_shadow or options.top_shadow_creates_shape
        top_shadow = shading.top_shadow(t, options, self.uses_box_shadow) if has_top_shadow else None

        opacity = None
        if options.fade_threshold:
            opacity = shading.fade_opacity(self._fade_progress(), options.fade_threshold)

        return PeelFrame(
            front_clip=ClipOutline.from_points(self._clips.top.region_id, regions.front.points),
            back_clip=ClipOutline.from_points(self._clips.back.region_id, regions.back.points),
            back_transform=TransformDescriptor(translate.x, translate.y, rotate),
            top_shadow=top_shadow,
            back_reflection=shading.back_reflection(t, rotation, options),
            back_shadow=shading.back_shadow(t, rotation, options),
            bottom_shadow=shading.bottom_shadow(t, rotation, options),
            opacity=opacity,
            peel_line_distance=t,
            fold_rotation=rotation,
        )

    def _fade_progress(self) -> float:
        if self._state.time_along_path is not None:
            return self._state.time_along_path
        return clipped_area_ratio(self.container, self._state.fold_line)

    def __repr__(self) -> str:
        return (
            f"Peel(width={self.width}, height={self.height}, "
            f"corner={self.corner.to_tuple()}, constraints={len(self._state.constraints)})"
        )
