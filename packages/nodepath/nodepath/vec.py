"""Vector helpers operating on tuple[float, ...]."""
from __future__ import annotations

from typing import Iterable

from nodepath.types import Vec


def project(v: Iterable[float], dimensions: int) -> Vec:
    """Keep the first ``dimensions`` components, padding missing ones with 0.0."""
    comps = [float(c) for c in v][:dimensions]
    comps.extend(0.0 for _ in range(dimensions - len(comps)))
    return tuple(comps)


def lerp(a: Vec, b: Vec, t: float) -> Vec:
    """Component-wise ``a + (b - a) * t``. Unclamped."""
    return tuple(ai + (bi - ai) * t for ai, bi in zip(a, b, strict=True))


def zero(dimensions: int) -> Vec:
    return tuple(0.0 for _ in range(dimensions))
