"""Single sand grains and how they fall."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .geometry import Color, Rect


class Behaviour(Enum):
    """How a pixel reacts on each simulation step."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    WATER = "water"


class Pixel:
    """A one-by-one cell of coloured material."""

    __slots__ = ("position", "color", "behaviour", "moved")

    def __init__(
        self,
        x: int,
        y: int,
        color: Color,
        behaviour: Behaviour = Behaviour.DYNAMIC,
    ) -> None:
        self.position = Rect(x, y, 1, 1)
        self.color = color
        self.behaviour = behaviour
        self.moved = True

    def __repr__(self) -> str:
        return (
            f"Pixel(x={self.position.x}, y={self.position.y}, "
            f"color={self.color!r}, behaviour={self.behaviour.name})"
        )

    def collides_with(self, other: Pixel) -> bool:
        """True when moving one cell down would overlap ``other``."""
        if self is other:
            return False
        return self.position.shifted(0, 1).intersects(other.position)

    def update(self, nearby: Iterable[Pixel], world_height: int) -> bool:
        """Advance one step; return True if the pixel fell."""
        if self.behaviour is Behaviour.STATIC:
            return False
        return self._fall(nearby, world_height)

    def _fall(self, nearby: Iterable[Pixel], world_height: int) -> bool:
        if self.position.y >= world_height - 1:
            return False
        if any(self.collides_with(other) for other in nearby):
            return False
        self.position = self.position.shifted(0, 1)
        return True