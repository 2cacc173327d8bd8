"""NodePathController - moves one object through a sequence of waypoints."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Iterable

from nodepath_easing import EASINGS, EasingStyle, clamp01

from nodepath.config import PathConfig
from nodepath.state import PlaybackState
from nodepath.types import Movable, SnapshotError, Transform, Vec
from nodepath.vec import lerp, project, zero

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1

SegmentCallback = Callable[["NodePathController", int], None]
FinishedCallback = Callable[["NodePathController"], None]


class NodePathController:
    """Idle/Moving state machine driven by an external ``advance(dt)`` tick.

    ``play()`` starts a segment toward ``waypoints[current_index]`` from the
    target's current position. Each ``advance(dt)`` eases the target along the
    segment. On completion the index moves to ``(i + 1) % N`` and playback
    continues while ``loop or current_index != 0``; otherwise it goes Idle.

    The controller is the only writer of ``target.position`` while moving.
    """

    def __init__(
        self,
        config: PathConfig,
        target: Movable | None = None,
        start_position: Iterable[float] | None = None,
        on_segment_complete: SegmentCallback | None = None,
        on_finished: FinishedCallback | None = None,
    ) -> None:
        dims = config.dimensions
        if target is None:
            pos = project(start_position, dims) if start_position is not None else zero(dims)
            target = Transform(position=pos)
        elif start_position is not None:
            target.position = project(start_position, dims)
        self._config = config
        self._target = target
        self._state = PlaybackState()
        self._on_segment_complete = on_segment_complete
        self._on_finished = on_finished
        self._stop_requested = False

    @classmethod
    def configure(
        cls,
        waypoints: Iterable[Iterable[float]],
        durations: Iterable[float] | None = (),
        style: EasingStyle | str = EasingStyle.LINEAR,
        dimensions: int = 2,
        loop: bool = False,
        autoplay: bool = False,
        click_triggered: bool = False,
        *,
        target: Movable | None = None,
        start_position: Iterable[float] | None = None,
        on_segment_complete: SegmentCallback | None = None,
        on_finished: FinishedCallback | None = None,
    ) -> NodePathController:
        """One-shot setup. Raises ConfigurationError if ``waypoints`` is empty."""
        config = PathConfig(
            waypoints=tuple(tuple(wp) for wp in waypoints),
            durations=tuple(durations or ()),
            easing=style,
            dimensions=dimensions,
            loop=loop,
            autoplay_on_start=autoplay,
            trigger_on_click=click_triggered,
        )
        return cls(
            config,
            target=target,
            start_position=start_position,
            on_segment_complete=on_segment_complete,
            on_finished=on_finished,
        )

    # --- Accessors ---

    @property
    def config(self) -> PathConfig:
        return self._config

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def target(self) -> Movable:
        return self._target

    @property
    def position(self) -> Vec:
        return self._target.position

    @property
    def is_moving(self) -> bool:
        return self._state.is_moving

    @property
    def is_idle(self) -> bool:
        return not self._state.is_moving

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def progress(self) -> float:
        """Un-eased progress of the current segment as of the last advance."""
        return self._state.progress

    # --- Triggers ---

    def on_start(self) -> None:
        """Host activation hook. Autoplays once if configured."""
        if self._config.autoplay_on_start and not self._state.has_started:
            self.play()

    def on_pointer_clicked(self) -> None:
        """Host pointer-down hook. Plays if click triggering is enabled."""
        if self._config.trigger_on_click:
            self.play()

    def play(self) -> bool:
        """Begin a segment unless one is already running. Returns True if started."""
        if self._state.is_moving:
            return False
        self._begin_segment()
        self._state.has_started = True
        return True

    def stop(self) -> bool:
        """Force Idle. Index and position are kept. Returns True if it was moving."""
        self._stop_requested = True
        if not self._state.is_moving:
            return False
        self._state.is_moving = False
        logger.debug(
            "stopped at index %d (progress %.3f)",
            self._state.current_index,
            self._state.progress,
        )
        return True

    # --- Tick ---

    def advance(self, dt: float) -> None:
        """Consume ``dt`` seconds of the current segment. No-op while Idle.

        At most one segment completes per call; leftover time is dropped so
        large deltas never skip waypoints.
        """
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        state = self._state
        if not state.is_moving:
            return

        state.elapsed += dt
        index = state.current_index
        easing = self._config.easing

        if easing is EasingStyle.INSTANT:
            progress = 1.0
        else:
            duration = self._config.duration_for(index)
            progress = 1.0 if duration <= 0 else clamp01(state.elapsed / duration)
        state.progress = progress

        if progress >= 1.0:
            self._finish_segment(index)
            return

        goal = self._config.waypoints[index]
        start = state.start_position if state.start_position is not None else goal
        self._target.position = lerp(start, goal, EASINGS[easing](progress))

    # --- Internal ---

    def _begin_segment(self) -> None:
        state = self._state
        state.start_position = project(self._target.position, self._config.dimensions)
        state.elapsed = 0.0
        state.progress = 0.0
        state.is_moving = True
        logger.debug(
            "segment %d started from %s toward %s",
            state.current_index,
            state.start_position,
            self._config.waypoints[state.current_index],
        )

    def _finish_segment(self, index: int) -> None:
        state = self._state
        self._target.position = self._config.waypoints[index]
        state.current_index = (index + 1) % self._config.node_count
        state.is_moving = False
        logger.debug("segment %d complete, next index %d", index, state.current_index)

        self._stop_requested = False
        if self._on_segment_complete is not None:
            self._on_segment_complete(self, index)

        finished = not self._config.loop and state.current_index == 0
        if finished:
            # The traversal is over even if the callback stopped playback.
            logger.info("path finished after %d waypoints", self._config.node_count)
            if self._on_finished is not None:
                self._on_finished(self)
            return
        # A callback may have called stop() or play() itself.
        if self._stop_requested or state.is_moving:
            return
        self._begin_segment()

    # --- Snapshot / restore ---

    def snapshot(self) -> dict[str, Any]:
        state = dataclasses.asdict(self._state)
        if state["start_position"] is not None:
            state["start_position"] = list(state["start_position"])
        return {
            "version": _SNAPSHOT_VERSION,
            "node_count": self._config.node_count,
            "position": list(self._target.position),
            "state": state,
        }

    def restore(self, data: dict[str, Any]) -> None:
        """Restore playback state. Raises SnapshotError on any shape mismatch."""
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        count = data.get("node_count")
        if count != self._config.node_count:
            raise SnapshotError(
                f"Waypoint count mismatch: snapshot has {count}, "
                f"path has {self._config.node_count}"
            )
        if "state" not in data or "position" not in data:
            raise SnapshotError("Snapshot is missing 'state' or 'position'")

        dims = self._config.dimensions
        try:
            fields = dict(data["state"])
            if fields.get("start_position") is not None:
                fields["start_position"] = tuple(float(c) for c in fields["start_position"])
            position = tuple(float(c) for c in data["position"])
            state = PlaybackState(**fields)
        except (TypeError, ValueError) as e:
            raise SnapshotError(f"Malformed playback state: {e}") from e

        index = state.current_index
        if not isinstance(index, int) or not 0 <= index < count:
            raise SnapshotError(
                f"current_index {index!r} out of range for {count} waypoints"
            )
        if state.start_position is not None and len(state.start_position) != dims:
            raise SnapshotError(
                f"start_position has {len(state.start_position)} components, need {dims}"
            )
        if len(position) != dims:
            raise SnapshotError(f"position has {len(position)} components, need {dims}")

        self._state = state
        self._target.position = position
