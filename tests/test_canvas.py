import pytest

from cotigraphy.canvas import CanvasLayout, GridCanvas
from cotigraphy.errors import ContractViolation
from cotigraphy.grid import Grid, GridCell, GridData
from cotigraphy.worm import WORM_COLOR, Worm

CELL = 10
MARGIN = 3
BACKGROUND = (0x01, 0x04, 0x09)


def _layout(weeks: int, days: int) -> CanvasLayout:
    return CanvasLayout(
        width=weeks * (CELL + MARGIN) - MARGIN,
        height=days * (CELL + MARGIN) - MARGIN,
        cell_size=CELL,
        cell_margin=MARGIN,
    )


def _grid(weeks: int, days: int, color=(10, 200, 30)) -> Grid:
    cells = [
        [GridCell(week=w, day=d, count=1, color=color) for d in range(days)]
        for w in range(weeks)
    ]
    return Grid(GridData(cells=cells, day_count=days, week_count=weeks, max_count=1))


@pytest.mark.parametrize(
    "layout",
    [
        CanvasLayout(0, 10, 10, 3),
        CanvasLayout(10, 0, 10, 3),
        CanvasLayout(10, 10, 0, 3),
        CanvasLayout(10, 10, 10, 0),
    ],
)
def test_zero_dimension_is_rejected(layout):
    with pytest.raises(ContractViolation):
        GridCanvas(layout)


def test_buffer_size_matches_layout():
    layout = _layout(5, 7)
    canvas = GridCanvas(layout)
    assert len(canvas.buffer) == layout.width * layout.height * 4


def test_clear_fills_every_pixel_opaque():
    layout = _layout(3, 2)
    canvas = GridCanvas(layout)
    canvas.clear(BACKGROUND)
    assert canvas.buffer == bytes((*BACKGROUND, 255)) * (layout.width * layout.height)


def test_full_cell_rect_has_cell_size():
    canvas = GridCanvas(_layout(4, 7))
    left, top, right, bottom = canvas.cell_rect(2, 3, 1.0)
    assert right - left == CELL
    assert bottom - top == CELL


def test_first_cell_starts_at_origin():
    canvas = GridCanvas(_layout(4, 7))
    assert canvas.cell_rect(0, 0, 1.0) == (0, 0, CELL, CELL)


def test_neighbouring_cells_are_separated_by_margin():
    canvas = GridCanvas(_layout(4, 7))
    first = canvas.cell_rect(0, 0)
    right_of = canvas.cell_rect(1, 0)
    below = canvas.cell_rect(0, 1)
    assert right_of[0] - first[2] == MARGIN
    assert below[1] - first[3] == MARGIN


def test_scaled_rect_lies_inside_full_rect():
    canvas = GridCanvas(_layout(4, 7))
    full = canvas.cell_rect(1, 1, 1.0)
    small = canvas.cell_rect(1, 1, 0.5)
    assert full[0] <= small[0] < small[2] <= full[2]
    assert full[1] <= small[1] < small[3] <= full[3]
    assert small[2] - small[0] < full[2] - full[0]


@pytest.mark.parametrize("scale", [0.0, -0.5, 1.5])
def test_bad_scale_is_rejected(scale):
    canvas = GridCanvas(_layout(4, 7))
    with pytest.raises(ContractViolation):
        canvas.cell_rect(0, 0, scale)


def test_index_outside_canvas_is_rejected():
    layout = _layout(2, 2)
    canvas = GridCanvas(layout)
    with pytest.raises(ContractViolation):
        canvas.cell_rect(layout.width, 0)
    with pytest.raises(ContractViolation):
        canvas.cell_rect(0, layout.height)


def test_draw_cell_paints_only_its_rect():
    canvas = GridCanvas(_layout(3, 3))
    canvas.clear(BACKGROUND)
    color = (200, 100, 50)
    canvas.draw_cell(1, 1, color)
    left, top, right, bottom = canvas.cell_rect(1, 1)
    assert canvas.pixel(left, top) == (*color, 255)
    assert canvas.pixel(right - 1, bottom - 1) == (*color, 255)
    assert canvas.pixel(left - 1, top) == (*BACKGROUND, 255)
    assert canvas.pixel(right, bottom - 1) == (*BACKGROUND, 255)
    assert canvas.pixel(left, bottom) == (*BACKGROUND, 255)


def test_draw_cell_is_clipped_to_canvas():
    layout = CanvasLayout(width=CELL + MARGIN + 2, height=CELL, cell_size=CELL, cell_margin=MARGIN)
    canvas = GridCanvas(layout)
    canvas.clear(BACKGROUND)
    color = (9, 99, 199)
    canvas.draw_cell(1, 0, color)
    assert canvas.pixel(layout.width - 1, 0) == (*color, 255)
    assert len(canvas.buffer) == layout.width * layout.height * 4


def test_draw_grid_paints_every_cell():
    color = (10, 200, 30)
    grid = _grid(3, 2, color)
    canvas = GridCanvas(_layout(3, 2))
    canvas.clear(BACKGROUND)
    canvas.draw_grid(grid)
    for cell in grid:
        left, top, right, bottom = canvas.cell_rect(cell.week, cell.day)
        assert canvas.pixel(left, top) == (*color, 255)
        assert canvas.pixel(right - 1, bottom - 1) == (*color, 255)
    # Gap between the first two columns stays background.
    assert canvas.pixel(CELL, 0) == (*BACKGROUND, 255)


def test_draw_worm_paints_segments():
    grid = _grid(5, 2)
    worm = Worm(grid)
    canvas = GridCanvas(_layout(5, 2))
    canvas.clear(BACKGROUND)
    canvas.draw_grid(grid)
    canvas.draw_worm(worm)
    for segment in worm.segments:
        left, top, _, _ = canvas.cell_rect(*segment.point, segment.scale)
        assert canvas.pixel(left, top) == (*WORM_COLOR, 255)
    left, top, _, _ = canvas.cell_rect(4, 0)
    assert canvas.pixel(left, top) != (*WORM_COLOR, 255)
    assert canvas.pixel(left, top) == (10, 200, 30, 255)


def test_pixel_outside_canvas_is_rejected():
    layout = _layout(2, 2)
    canvas = GridCanvas(layout)
    with pytest.raises(ContractViolation):
        canvas.pixel(layout.width, 0)
    with pytest.raises(ContractViolation):
        canvas.pixel(0, -1)