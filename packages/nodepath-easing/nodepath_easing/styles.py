"""EasingStyle enum."""
from __future__ import annotations

from enum import Enum


class EasingStyle(Enum):
    """Named time-warping curve. Values are snake_case names."""

    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"
    EXPO_IN = "expo_in"
    EXPO_OUT = "expo_out"
    EXPO_IN_OUT = "expo_in_out"
    CIRC_IN = "circ_in"
    CIRC_OUT = "circ_out"
    CIRC_IN_OUT = "circ_in_out"
    SINE_IN = "sine_in"
    SINE_OUT = "sine_out"
    SINE_IN_OUT = "sine_in_out"
    CUBIC_IN = "cubic_in"
    CUBIC_OUT = "cubic_out"
    CUBIC_IN_OUT = "cubic_in_out"
    INSTANT = "instant"

    @classmethod
    def parse(cls, name: EasingStyle | str) -> EasingStyle:
        """Resolve a member, value, member name, or PascalCase name ("EaseInOut").

        Raises ValueError if nothing matches.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip()
        for style in cls:
            if key in (style.value, style.name, style.pascal_name):
                return style
        raise ValueError(f"Unknown easing style {name!r}")

    @property
    def pascal_name(self) -> str:
        return "".join(part.capitalize() for part in self.value.split("_"))
