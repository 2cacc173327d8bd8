"""PlaybackState dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from nodepath.types import Vec


@dataclass
class PlaybackState:
    """Mutable playback state owned by a single controller.

    ``current_index`` is the waypoint being approached and only changes when
    a segment completes. ``elapsed`` is seconds into the current segment and
    resets to 0 whenever a segment begins. ``start_position`` is where the
    current (or last) segment began, ``None`` before the first one.
    """

    current_index: int = 0
    elapsed: float = 0.0
    is_moving: bool = False
    has_started: bool = False
    start_position: Vec | None = None
    progress: float = 0.0
