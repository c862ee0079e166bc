"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)
- Searchable in log aggregators

Event Naming Convention:
    <component>.<category>.<action>

    component: peel, clip, config, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - peel.*: Peel controller lifecycle and updates
    - clip.*: Clip region bookkeeping
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Peel Events ==========
    PEEL_INITIALIZED = "peel.initialized"
    """Peel controller set up for a container."""

    PEEL_CORNER_SET = "peel.corner.set"
    """Anchor corner changed."""

    PEEL_PRESET_APPLIED = "peel.preset.applied"
    """Named preset (book, calendar) applied."""

    PEEL_CONSTRAINT_ADDED = "peel.constraint.added"
    """Hinge constraint added."""

    PEEL_PATH_SET = "peel.path.set"
    """Peel path configured."""

    PEEL_POSITION_UPDATED = "peel.position.updated"
    """Peel position computed and a new frame produced."""

    PEEL_OPTION_CHANGED = "peel.option.changed"
    """Single option changed after setup."""

    PEEL_FLIP_OFFSET_EXCEEDS_RADIUS = "peel.constraint.flip_offset_exceeds_radius"
    """Flip offset can shrink the flip constraint to a non-positive radius."""

    # ========== Clip Events ==========
    CLIP_REGION_CREATED = "clip.region.created"
    """Clip region registered under a new id."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Options loaded from a YAML file."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Invalid configuration."""

    PATH_ERROR = "error.path"
    """Invalid peel path arguments."""

    STATE_ERROR = "error.state"
    """Operation called in an invalid state."""
