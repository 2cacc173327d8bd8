"""Shared types, protocols, and errors for nodepath."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

Vec = tuple[float, ...]


@dataclass
class Transform:
    """Default moving object: just a mutable position."""

    position: Vec


class Movable(Protocol):
    """Anything with a readable and writable ``position``."""

    position: Vec


class ConfigurationError(ValueError):
    """Raised when a path configuration is invalid (e.g. no waypoints)."""


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, waypoint count mismatch)."""
