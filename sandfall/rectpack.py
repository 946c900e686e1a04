"""Skyline bottom-left / best-fit rectangle packing into a fixed target area."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional

MAX_COORD = 0x7FFFFFFF
_SENTINEL_Y = 1 << 30


class Heuristic(IntEnum):
    """Placement strategy used when choosing a spot on the skyline."""

    SKYLINE_BL_SORT_HEIGHT = 0
    SKYLINE_BF_SORT_HEIGHT = 1
    SKYLINE_DEFAULT = 0


@dataclass
class PackRect:
    """A rectangle to place; ``x``/``y`` are filled in by the packer."""

    w: int
    h: int
    id: int = 0
    x: Optional[int] = None
    y: Optional[int] = None
    was_packed: bool = False


@dataclass(slots=True)
class _Node:
    x: int
    y: int


@dataclass(frozen=True)
class _Placement:
    index: int
    x: int
    y: int


class RectPacker:
    """Packs rectangles into a ``width`` by ``height`` area along a skyline.

    ``num_nodes`` bounds the number of skyline segments; unless out-of-memory
    is allowed, widths are rounded up so that the bound is never exceeded.
    """

    def __init__(self, width: int, height: int, num_nodes: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("target size must be positive")
        if num_nodes <= 0:
            raise ValueError("num_nodes must be positive")
        self.width = width
        self.height = height
        self.num_nodes = num_nodes
        self.heuristic = Heuristic.SKYLINE_DEFAULT
        self._free = num_nodes
        self._nodes = [_Node(0, 0), _Node(width, _SENTINEL_Y)]
        self.align = 1
        self.allow_out_of_mem(False)

    @property
    def skyline(self) -> list[tuple[int, int]]:
        """The current skyline segments as ``(x, y)`` pairs, without the sentinel."""
        return [(node.x, node.y) for node in self._nodes[:-1]]

    @property
    def free_nodes(self) -> int:
        """How many skyline segments may still be created."""
        return self._free

    def allow_out_of_mem(self, allow: bool) -> None:
        """Choose exact widths (may run out of nodes) or quantised widths."""
        if allow:
            self.align = 1
        else:
            self.align = -(-self.width // self.num_nodes)

    def set_heuristic(self, heuristic: Heuristic | int) -> None:
        """Select the placement heuristic."""
        try:
            self.heuristic = Heuristic(heuristic)
        except ValueError:
            raise ValueError(f"unknown heuristic: {heuristic!r}") from None

    def _find_min_y(self, start: int, x0: int, width: int) -> tuple[int, int]:
        """Lowest y a span starting at ``x0`` can rest on, and the area wasted under it."""
        nodes = self._nodes
        x1 = x0 + width
        min_y = 0
        waste = 0
        visited = 0
        i = start
        while nodes[i].x < x1:
            node, nxt = nodes[i], nodes[i + 1]
            if node.y > min_y:
                waste += visited * (node.y - min_y)
                min_y = node.y
                if node.x < x0:
                    visited += nxt.x - x0
                else:
                    visited += nxt.x - node.x
            else:
                under = nxt.x - node.x
                if under + visited > width:
                    under = width - visited
                waste += under * (min_y - node.y)
                visited += under
            i += 1
        return min_y, waste

    def _find_best_pos(self, width: int, height: int) -> Optional[_Placement]:
        width = width + self.align - 1
        width -= width % self.align
        if width > self.width or height > self.height:
            return None

        nodes = self._nodes
        best: Optional[int] = None
        best_y = _SENTINEL_Y
        best_waste = _SENTINEL_Y
        bottom_left = self.heuristic == Heuristic.SKYLINE_BL_SORT_HEIGHT

        i = 0
        while nodes[i].x + width <= self.width:
            y, waste = self._find_min_y(i, nodes[i].x, width)
            if bottom_left:
                if y < best_y:
                    best_y, best = y, i
            elif y + height <= self.height:
                if y < best_y or (y == best_y and waste < best_waste):
                    best_y, best_waste, best = y, waste, i
            i += 1

        best_x = 0 if best is None else nodes[best].x

        if not bottom_left:
            tail = 0
            while nodes[tail].x < width:
                tail += 1
            left = 0
            for tail_node in nodes[tail:]:
                xpos = tail_node.x - width
                while nodes[left + 1].x <= xpos:
                    left += 1
                y, waste = self._find_min_y(left, xpos, width)
                if y + height <= self.height and y <= best_y:
                    if (
                        y < best_y
                        or waste < best_waste
                        or (waste == best_waste and xpos < best_x)
                    ):
                        best_x, best_y, best_waste, best = xpos, y, waste, left

        if best is None:
            return None
        return _Placement(best, best_x, best_y)

    def _pack_one(self, width: int, height: int) -> Optional[tuple[int, int]]:
        found = self._find_best_pos(width, height)
        if found is None or found.y + height > self.height or self._free == 0:
            return None

        nodes = self._nodes
        self._free -= 1
        new = _Node(found.x, found.y + height)
        at = found.index + 1 if nodes[found.index].x < found.x else found.index
        nodes.insert(at, new)

        cur = at + 1
        right = found.x + width
        while cur + 1 < len(nodes) and nodes[cur + 1].x <= right:
            del nodes[cur]
            self._free += 1
        if nodes[cur].x < right:
            nodes[cur].x = right
        return found.x, found.y

    def pack(self, rects: Iterable[PackRect]) -> bool:
        """Place the rectangles in place; return True if every one fitted."""
        rects = list(rects)
        for rect in sorted(rects, key=lambda r: (-r.h, -r.w)):
            if rect.w == 0 or rect.h == 0:
                rect.x, rect.y, rect.was_packed = 0, 0, True
                continue
            spot = self._pack_one(rect.w, rect.h)
            if spot is None:
                rect.x, rect.y, rect.was_packed = None, None, False
            else:
                rect.x, rect.y = spot
                rect.was_packed = True
        return all(rect.was_packed for rect in rects)