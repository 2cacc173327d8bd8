"""nodepath - Waypoint sequencing with eased, tick-driven playback."""
from __future__ import annotations

from nodepath_easing import EasingStyle

from nodepath.config import DEFAULT_DURATION, PathConfig
from nodepath.controller import NodePathController
from nodepath.state import PlaybackState
from nodepath.ticker import Ticker
from nodepath.types import ConfigurationError, Movable, SnapshotError, Transform, Vec

__all__ = [
    "ConfigurationError",
    "DEFAULT_DURATION",
    "EasingStyle",
    "Movable",
    "NodePathController",
    "PathConfig",
    "PlaybackState",
    "SnapshotError",
    "Ticker",
    "Transform",
    "Vec",
]
