"""Path configuration dataclass."""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Iterable, Mapping

from nodepath_easing import EasingStyle

from nodepath.types import ConfigurationError, Vec

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 1.0


@dataclass(frozen=True)
class PathConfig:
    """Immutable configuration for one waypoint path.

    Attributes:
        waypoints: Ordered, non-empty target positions. In 2D mode extra
            components are dropped.
        durations: Seconds per segment, aligned by index to ``waypoints``.
            May be shorter; missing entries use ``default_duration``.
            A zero duration is an instant segment.
        easing: Curve applied to segment progress.
        dimensions: 2 or 3.
        loop: Keep cycling after returning to the first waypoint.
        autoplay_on_start: ``on_start()`` begins playback.
        trigger_on_click: ``on_pointer_clicked()`` begins playback.
        default_duration: Duration for indices without an entry.
    """

    waypoints: tuple[Vec, ...]
    durations: tuple[float, ...] = ()
    easing: EasingStyle = EasingStyle.LINEAR
    dimensions: int = 2
    loop: bool = False
    autoplay_on_start: bool = False
    trigger_on_click: bool = False
    default_duration: float = DEFAULT_DURATION

    def __post_init__(self) -> None:
        if self.dimensions not in (2, 3):
            raise ConfigurationError(
                f"dimensions must be 2 or 3, got {self.dimensions!r}"
            )
        if not self.waypoints:
            raise ConfigurationError("a path needs at least one waypoint")

        points: list[Vec] = []
        for i, wp in enumerate(self.waypoints):
            try:
                comps = tuple(float(c) for c in wp)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"waypoint {i} is not a point: {e}") from e
            if len(comps) < self.dimensions:
                raise ConfigurationError(
                    f"waypoint {i} has {len(comps)} components, "
                    f"need {self.dimensions}"
                )
            points.append(comps[: self.dimensions])

        try:
            durations = tuple(float(d) for d in self.durations)
            default_duration = float(self.default_duration)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"durations must be numbers: {e}") from e
        for i, d in enumerate(durations):
            if d < 0:
                raise ConfigurationError(f"duration {i} is negative: {d}")
        if default_duration < 0:
            raise ConfigurationError(
                f"default_duration is negative: {default_duration}"
            )
        if len(durations) > len(points):
            logger.debug(
                "ignoring %d duration entries beyond the last waypoint",
                len(durations) - len(points),
            )

        try:
            easing = EasingStyle.parse(self.easing)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        # Frozen: normalize through object.__setattr__.
        object.__setattr__(self, "waypoints", tuple(points))
        object.__setattr__(self, "durations", durations)
        object.__setattr__(self, "default_duration", default_duration)
        object.__setattr__(self, "easing", easing)

    @property
    def node_count(self) -> int:
        return len(self.waypoints)

    def duration_for(self, index: int) -> float:
        """Segment duration for ``index``, falling back to ``default_duration``."""
        if 0 <= index < len(self.durations):
            return self.durations[index]
        return self.default_duration

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PathConfig:
        """Build a config from plain data (e.g. parsed JSON).

        Raises ConfigurationError on unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(
                f"unknown config keys: {', '.join(sorted(unknown))}"
            )
        if "waypoints" not in data:
            raise ConfigurationError("a path needs at least one waypoint")
        kwargs = dict(data)
        kwargs["waypoints"] = _as_points(data["waypoints"])
        try:
            kwargs["durations"] = tuple(data.get("durations") or ())
        except TypeError as e:
            raise ConfigurationError(f"durations must be a list of numbers: {e}") from e
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "waypoints": [list(wp) for wp in self.waypoints],
            "durations": list(self.durations),
            "easing": self.easing.value,
            "dimensions": self.dimensions,
            "loop": self.loop,
            "autoplay_on_start": self.autoplay_on_start,
            "trigger_on_click": self.trigger_on_click,
            "default_duration": self.default_duration,
        }


def _as_points(raw: Iterable[Iterable[float]]) -> tuple[Vec, ...]:
    try:
        return tuple(tuple(wp) for wp in raw)
    except TypeError as e:
        raise ConfigurationError(f"waypoints must be a list of points: {e}") from e
