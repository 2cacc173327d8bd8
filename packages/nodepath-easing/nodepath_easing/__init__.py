"""nodepath-easing - Easing curves for waypoint interpolation."""
from __future__ import annotations

from nodepath_easing.easing import EASINGS, clamp01, sample, warp
from nodepath_easing.styles import EasingStyle

__all__ = ["EasingStyle", "EASINGS", "clamp01", "sample", "warp"]
