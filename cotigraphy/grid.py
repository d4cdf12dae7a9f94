"""The contribution calendar grid: cells indexed by week and day."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .errors import require

Color = tuple[int, int, int]


@dataclass
class GridCell:
    """One day of the calendar."""

    week: int = 0
    day: int = 0
    count: int = 0
    color: Color = (0, 0, 0)


@dataclass
class GridData:
    """Raw calendar data: cells[week][day] plus its dimensions."""

    cells: list[list[GridCell]] = field(default_factory=list)
    day_count: int = 0
    week_count: int = 0
    max_count: int = 0


class Grid:
    """Bounds-checked access to a calendar's cells."""

    def __init__(self, data: GridData) -> None:
        self._data = data

    @property
    def day_count(self) -> int:
        """Number of rows (days of the week, at most 7)."""
        return self._data.day_count

    @property
    def week_count(self) -> int:
        """Number of columns (weeks)."""
        return self._data.week_count

    @property
    def max_count(self) -> int:
        return self._data.max_count

    def is_inside(self, week: int, day: int) -> bool:
        return 0 <= week < self._data.week_count and 0 <= day < self._data.day_count

    def _check(self, week: int, day: int) -> None:
        require(self.is_inside(week, day), f"cell ({week}, {day}) is outside the grid")

    def cell(self, week: int, day: int) -> GridCell:
        self._check(week, day)
        return self._data.cells[week][day]

    def contribution_count(self, week: int, day: int) -> int:
        self._check(week, day)
        return self._data.cells[week][day].count

    def set_contribution_count(self, week: int, day: int, count: int) -> None:
        self._check(week, day)
        self._data.cells[week][day].count = count

    def set_color(self, week: int, day: int, color: Color) -> None:
        self._check(week, day)
        self._data.cells[week][day].color = color

    def __iter__(self) -> Iterator[GridCell]:
        """Yield the cells inside the grid, week by week."""
        for column in self._data.cells[: self.week_count]:
            yield from column[: self.day_count]