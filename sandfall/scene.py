"""Scenes: the base screen and the falling-sand sandbox."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Optional

from .geometry import Color, Rect, color_from_floats
from .pixel import Behaviour, Pixel

COOLDOWN_RESET = 100.0
COOLDOWN_DECAY = 0.1


class Screen:
    """A scene that the main loop updates once per frame."""

    def update(self) -> None:
        """Advance the scene by one frame; the base screen does nothing."""


@dataclass
class MouseState:
    """Pointer position and buttons as seen on the last frame."""

    x: int = 0
    y: int = 0
    left: bool = False
    right: bool = False
    ui_captured: bool = False


PixelCallback = Callable[[Pixel], None]


class SandboxScene(Screen):
    """A world of pixels that the user paints and erases with the mouse."""

    def __init__(
        self,
        width: int,
        height: int,
        on_place: Optional[PixelCallback] = None,
        on_erase: Optional[PixelCallback] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("world size must be positive")
        self.bounds = Rect(0, 0, width, height)
        self.pixels: list[Pixel] = []
        self.current_behaviour = Behaviour.DYNAMIC
        self.brush_color = color_from_floats(1.0, 0.0, 0.0, 1.0)
        self.background_color = color_from_floats(0.0, 0.0, 0.0, 1.0)
        self.cooldown = 0.0
        self.brush_menu = False
        self.sandbox_menu = False
        self.mouse = MouseState()
        self.on_place = on_place
        self.on_erase = on_erase
        self._cells: dict[tuple[int, int], list[Pixel]] = defaultdict(list)

    def set_brush_color(self, red: float, green: float, blue: float, alpha: float) -> Color:
        """Set the painting colour from 0.0..1.0 channels and return it."""
        self.brush_color = color_from_floats(red, green, blue, alpha)
        return self.brush_color

    def set_background_color(self, red: float, green: float, blue: float) -> Color:
        """Set the opaque background colour from 0.0..1.0 channels and return it."""
        self.background_color = color_from_floats(red, green, blue, 1.0)
        return self.background_color

    def _reindex(self) -> None:
        self._cells.clear()
        for pixel in self.pixels:
            self._cells[(pixel.position.x, pixel.position.y)].append(pixel)

    def _move_in_index(self, pixel: Pixel, old: Rect) -> None:
        bucket = self._cells.get((old.x, old.y))
        if bucket is not None:
            bucket[:] = [p for p in bucket if p is not pixel]
            if not bucket:
                del self._cells[(old.x, old.y)]
        self._cells[(pixel.position.x, pixel.position.y)].append(pixel)

    def nearby(self, rect: Rect) -> list[Pixel]:
        """Pixels in or directly around ``rect``: the candidates for collision."""
        found: list[Pixel] = []
        for cx in range(rect.x - 1, rect.right + 1):
            for cy in range(rect.y - 1, rect.bottom + 1):
                found.extend(self._cells.get((cx, cy), ()))
        return found

    def step(self) -> int:
        """Let every pixel fall once; return how many moved."""
        self._reindex()
        moved = 0
        for pixel in self.pixels:
            old = pixel.position
            if pixel.update(self.nearby(old), self.bounds.h):
                self._move_in_index(pixel, old)
                moved += 1
        return moved

    def place(self, x: int, y: int) -> Optional[Pixel]:
        """Add a pixel with the current brush; None if outside or occupied."""
        if not self.bounds.contains_point(x, y):
            return None
        target = Rect(x, y, 1, 1)
        if any(
            p.position.x == x and p.position.y == y for p in self.nearby(target)
        ):
            return None
        pixel = Pixel(x, y, self.brush_color, self.current_behaviour)
        self.pixels.append(pixel)
        self._cells[(x, y)].append(pixel)
        if self.on_place is not None:
            self.on_place(pixel)
        return pixel

    def erase(self, x: int, y: int) -> list[Pixel]:
        """Remove every pixel covering the point and return them."""
        removed = [p for p in self.pixels if p.position.contains_point(x, y)]
        if removed:
            self.pixels = [p for p in self.pixels if not p.position.contains_point(x, y)]
            self._reindex()
            if self.on_erase is not None:
                for pixel in removed:
                    self.on_erase(pixel)
        return removed

    def handle_mouse(
        self, x: int, y: int, left: bool, right: bool, ui_captured: bool
    ) -> None:
        """Paint on left click, erase on right click, honouring the cooldown."""
        if ui_captured or self.cooldown >= 1:
            return
        if left:
            if self.place(x, y) is not None:
                self.cooldown = COOLDOWN_RESET
        elif right:
            self.cooldown = COOLDOWN_RESET
            self.erase(x, y)

    def update(self) -> None:
        """Decay the cooldown, run physics, then apply the stored mouse state."""
        self.cooldown *= COOLDOWN_DECAY
        self.step()
        m = self.mouse
        self.handle_mouse(m.x, m.y, m.left, m.right, m.ui_captured)