"""Easing functions mapping normalized progress to warped progress.

Every curve takes ``t`` in [0, 1] and returns a value in [0, 1]. The Expo
curves compare ``t`` against 0.0 and 1.0 exactly; a progress value that lands
a hair off either end takes the formula branch instead. Sine-in at t=1 lands one
ulp short of 1.0 because cos(pi/2) is not exactly zero.
"""
from __future__ import annotations

import math
from typing import Callable

from nodepath_easing.styles import EasingStyle


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return 1 - (1 - t) ** 2


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def expo_in(t: float) -> float:
    if t == 0.0:
        return 0.0
    return 2 ** (10 * (t - 1))


def expo_out(t: float) -> float:
    if t == 1.0:
        return 1.0
    return 1 - 2 ** (-10 * t)


def expo_in_out(t: float) -> float:
    if t == 0.0 or t == 1.0:
        return t
    if t < 0.5:
        return 0.5 * 2 ** (10 * (2 * t - 1))
    return 0.5 * (2 - 2 ** (-10 * (2 * t - 1)))


def circ_in(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


def circ_out(t: float) -> float:
    return math.sqrt(1 - (t - 1) ** 2)


def circ_in_out(t: float) -> float:
    if t < 0.5:
        return 0.5 * (1 - math.sqrt(1 - 4 * t * t))
    return 0.5 * (math.sqrt(1 - (-2 * t + 2) ** 2) + 1)


def sine_in(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def sine_out(t: float) -> float:
    return math.sin(t * math.pi / 2)


def sine_in_out(t: float) -> float:
    return 0.5 * (1 - math.cos(t * math.pi))


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    return 1 - (1 - t) ** 3


def cubic_in_out(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def instant(t: float) -> float:
    """Always fully arrived. Controllers treat this style as a snap."""
    return 1.0


EASINGS: dict[EasingStyle, Callable[[float], float]] = {
    EasingStyle.LINEAR: linear,
    EasingStyle.EASE_IN: ease_in,
    EasingStyle.EASE_OUT: ease_out,
    EasingStyle.EASE_IN_OUT: ease_in_out,
    EasingStyle.EXPO_IN: expo_in,
    EasingStyle.EXPO_OUT: expo_out,
    EasingStyle.EXPO_IN_OUT: expo_in_out,
    EasingStyle.CIRC_IN: circ_in,
    EasingStyle.CIRC_OUT: circ_out,
    EasingStyle.CIRC_IN_OUT: circ_in_out,
    EasingStyle.SINE_IN: sine_in,
    EasingStyle.SINE_OUT: sine_out,
    EasingStyle.SINE_IN_OUT: sine_in_out,
    EasingStyle.CUBIC_IN: cubic_in,
    EasingStyle.CUBIC_OUT: cubic_out,
    EasingStyle.CUBIC_IN_OUT: cubic_in_out,
    EasingStyle.INSTANT: instant,
}


def clamp01(t: float) -> float:
    return max(0.0, min(1.0, t))


def warp(style: EasingStyle | str, t: float) -> float:
    """Apply the easing curve for ``style`` to ``t`` (clamped to [0, 1])."""
    return EASINGS[EasingStyle.parse(style)](clamp01(t))


def sample(style: EasingStyle | str, steps: int = 32) -> list[tuple[float, float]]:
    """Return ``steps + 1`` evenly spaced ``(t, warp(style, t))`` pairs."""
    if steps < 1:
        raise ValueError("steps must be at least 1")
    fn = EASINGS[EasingStyle.parse(style)]
    return [(i / steps, fn(i / steps)) for i in range(steps + 1)]
