"""Basic value types: RGBA colours, integer rectangles and entities."""

from __future__ import annotations

from dataclasses import dataclass, replace

_CHANNELS = ("red", "green", "blue", "alpha")


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in _CHANNELS:
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


def color_from_floats(red: float, green: float, blue: float, alpha: float) -> Color:
    """Build a colour from channels in the 0.0..1.0 range, truncating to 8 bits."""
    values = []
    for name, channel in zip(_CHANNELS, (red, green, blue, alpha)):
        if not 0.0 <= channel <= 1.0:
            raise ValueError(f"{name} must be within 0.0..1.0, got {channel!r}")
        values.append(int(channel * 255.0))
    return Color(*values)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with integer coordinates."""

    x: int
    y: int
    w: int
    h: int

    @property
    def empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def intersects(self, other: Rect) -> bool:
        """True when both rectangles are non-empty and overlap by a positive area."""
        if self.empty or other.empty:
            return False
        return (
            max(self.x, other.x) < min(self.right, other.right)
            and max(self.y, other.y) < min(self.bottom, other.bottom)
        )

    def contains_point(self, x: int, y: int) -> bool:
        """True when the point lies inside; right and bottom edges are exclusive."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def shifted(self, dx: int, dy: int) -> Rect:
        """Return a copy moved by the given offsets."""
        return replace(self, x=self.x + dx, y=self.y + dy)


class Entity:
    """A positioned, optionally animated sprite slot."""

    SIZE = 32

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.position = Rect(x, y, self.SIZE, self.SIZE)
        self.frame = 0
        self.x_offset = 0
        self.y_offset = 0
        self.animated = False

    def __repr__(self) -> str:
        return f"Entity(position={self.position!r}, frame={self.frame})"