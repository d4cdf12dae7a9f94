"""The worm that crawls across the calendar grid eating contributions."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, replace

from .grid import Color, Grid

Point = tuple[int, int]

WORM_COLOR: Color = (0xFF, 0xA5, 0x00)
EATEN_COLOR: Color = (255, 255, 255)
WORM_LENGTH = 4

# Up, down, left, right in (week, day) coordinates.
_DIRECTIONS: tuple[Point, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class WormSegment:
    """One segment of the worm: its (week, day) position, colour and size ratio."""

    point: Point
    color: Color = WORM_COLOR
    scale: float = 1.0


class Worm:
    """A four-segment worm that moves one cell per step towards the nearest target.

    A target is a cell whose contribution count is non-zero and no greater
    than the current level. Eaten cells are zeroed and painted white.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._segments: list[WormSegment] = [
            WormSegment((week, 0)) for week in range(WORM_LENGTH)
        ]
        self._planned_path: deque[Point] = deque()

    @property
    def segments(self) -> tuple[WormSegment, ...]:
        """The worm's segments, head first."""
        return tuple(self._segments)

    @property
    def head(self) -> Point:
        return self._segments[0].point

    def move(self, level: int) -> bool:
        """Advance one step; return False when no target at ``level`` is reachable."""
        if not self._planned_path:
            self._planned_path.extend(self.find_path(level))
            if not self._planned_path:
                return False

        step = self._planned_path.popleft()
        self._segments = [replace(self._segments[0], point=step)] + self._segments[:-1]
        week, day = step
        self._grid.set_contribution_count(week, day, 0)
        self._grid.set_color(week, day, EATEN_COLOR)
        return True

    def find_path(self, level: int) -> list[Point]:
        """Breadth-first path from the head to the nearest target, both included.

        Returns an empty list when no target is reachable.
        """
        start = self.head
        queue: deque[Point] = deque([start])
        parents: dict[Point, Point] = {}
        visited = {start}

        while queue:
            current = queue.popleft()
            if current != start and self._is_target(current, level):
                return self._build_path(current, parents)
            for dx, dy in _DIRECTIONS:
                neighbour = (current[0] + dx, current[1] + dy)
                if neighbour in visited or not self._grid.is_inside(*neighbour):
                    continue
                visited.add(neighbour)
                parents[neighbour] = current
                queue.append(neighbour)
        return []

    def _is_target(self, point: Point, level: int) -> bool:
        if not self._grid.is_inside(*point):
            return False
        count = self._grid.contribution_count(*point)
        return count != 0 and count <= level

    @staticmethod
    def _build_path(goal: Point, parents: dict[Point, Point]) -> list[Point]:
        path = [goal]
        while path[-1] in parents:
            path.append(parents[path[-1]])
        path.reverse()
        return path