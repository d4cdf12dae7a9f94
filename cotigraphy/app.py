"""Command-line entry point: fetch a contribution calendar and animate a worm eating it."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .canvas import CanvasLayout, GridCanvas
from .cli_parser import CommandLineOption, CommandLineParser
from .errors import ContractViolation, CoTigraphyError, ErrorCode
from .github_client import GitHubContributionClient
from .grid import Color, Grid, GridData
from .webp_writer import WebPWriter
from .worm import Worm

VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_PATCH = 0
BUILD_NUMBER = 759
BUILD_DATE = "2025-06-15"
VERSION = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}.{BUILD_NUMBER}"

REQUIRED_FIELDS = "date contributionCount color"
CELL_SIZE = 10
CELL_MARGIN = 3
DAYS_PER_WEEK = 7
BACKGROUND: Color = (0x01, 0x04, 0x09)


@dataclass
class Settings:
    """Values gathered from the command line."""

    token: str = ""
    user_name: str = ""
    output_path: str = ""


def build_parser(settings: Settings, stdout: TextIO) -> CommandLineParser:
    """A parser whose options write their values into ``settings``."""
    parser = CommandLineParser(version=VERSION)

    def show_help(_value: str) -> None:
        parser.print_help(stdout)

    def show_version(_value: str) -> None:
        stdout.write(f"Version: {VERSION}\n")

    def set_token(value: str) -> None:
        settings.token = value

    def set_user_name(value: str) -> None:
        settings.user_name = value

    def set_output(value: str) -> None:
        settings.output_path = value

    options = (
        CommandLineOption("--help", "-h", "Show help message", False, True, show_help),
        CommandLineOption("--version", "-v", "Show program version", False, False, show_version),
        CommandLineOption("--token", "-t", "Github personal access token", True, False, set_token),
        CommandLineOption("--user_name", "-n", "Github user name", True, False, set_user_name),
        CommandLineOption("--output", "-o", "Output Path", True, False, set_output),
    )
    for option in options:
        parser.add_option(option)
    return parser


def parse_settings(argv: Sequence[str], stdout: TextIO) -> Settings | None:
    """Parse ``argv`` (without the program name).

    Returns None when the program should stop early (help was shown, or no
    arguments were given). On a parse error, help is written to ``stdout``
    and the CoTigraphyError is raised again.
    """
    settings = Settings()
    parser = build_parser(settings, stdout)
    args = list(argv)
    if not args:
        parser.print_help(stdout)
        return None
    try:
        result = parser.parse(args)
    except CoTigraphyError:
        parser.print_help(stdout)
        raise
    if result == ErrorCode.EARLY_EXIT:
        return None
    return settings


def render_animation(grid_data: GridData) -> WebPWriter:
    """Simulate the worm over ``grid_data`` and collect one frame per step.

    The worm eats cells level by level, from a contribution count of 1 up
    to the calendar's maximum. ``grid_data`` is updated as cells are eaten.
    """
    width = grid_data.week_count * (CELL_SIZE + CELL_MARGIN) - CELL_MARGIN
    height = DAYS_PER_WEEK * (CELL_SIZE + CELL_MARGIN) - CELL_MARGIN
    layout = CanvasLayout(width=width, height=height, cell_size=CELL_SIZE, cell_margin=CELL_MARGIN)

    canvas = GridCanvas(layout)
    grid = Grid(grid_data)
    worm = Worm(grid)
    writer = WebPWriter(width, height)

    level = 1
    while True:
        if not worm.move(level):
            level += 1
            if level > grid_data.max_count:
                break
            continue
        canvas.clear(BACKGROUND)
        canvas.draw_grid(grid)
        canvas.draw_worm(worm)
        writer.add_frame(canvas.buffer)
    return writer


def run(token: str, user_name: str, output_path: str | os.PathLike[str]) -> None:
    """Fetch the calendar of ``user_name`` and save the animation to ``output_path``."""
    client = GitHubContributionClient(token)
    grid_data = client.fetch(user_name, REQUIRED_FIELDS)
    writer = render_animation(grid_data)
    writer.save(output_path)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_settings(argv, sys.stdout)
        if settings is None:
            return 0
        run(settings.token, settings.user_name, settings.output_path)
    except CoTigraphyError as exc:
        sys.stderr.write(f"error: {exc.message}\n")
        return int(exc.code)
    except (ContractViolation, OSError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 0