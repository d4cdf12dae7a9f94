"""Registration and parsing of command-line options."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

from .errors import CoTigraphyError, ErrorCode, require

Handler = Callable[[str], None]

_HELP_COLUMN_WIDTH = 28


@dataclass(frozen=True)
class CommandLineOption:
    """One option: its long and short names, help text and handler.

    The handler receives the option's value, or an empty string when the
    option takes none.
    """

    name: str
    short_name: str
    description: str
    requires_value: bool = False
    causes_exit: bool = False
    handler: Handler | None = None

    def is_valid(self) -> bool:
        """True when the name, short name and description are all non-empty."""
        return bool(self.name and self.short_name and self.description)


class CommandLineParser:
    """Holds registered options and dispatches arguments to their handlers.

    Options that cause an exit (such as ``--help``) are handled first,
    wherever they appear among the arguments.
    """

    def __init__(self, version: str = "") -> None:
        self.version = version
        self._options: list[CommandLineOption] = []
        self._lookup: dict[str, CommandLineOption] = {}

    @property
    def options(self) -> tuple[CommandLineOption, ...]:
        """Registered options in registration order."""
        return tuple(self._options)

    def add_option(self, option: CommandLineOption) -> None:
        """Register ``option``; raise ContractViolation if invalid or a name is taken."""
        require(option.is_valid(), "option must have a name, a short name and a description")
        require(option.name not in self._lookup, f"option {option.name!r} is already registered")
        require(
            option.short_name not in self._lookup,
            f"option {option.short_name!r} is already registered",
        )
        self._options.append(option)
        self._lookup[option.name] = option
        self._lookup[option.short_name] = option

    def parse(self, args: Sequence[str]) -> ErrorCode:
        """Process ``args`` (without the program name).

        Returns ``ErrorCode.EARLY_EXIT`` when an exit-causing option was handled
        or no arguments were given (help is then printed to standard output),
        and ``ErrorCode.SUCCEEDED`` otherwise. Raises CoTigraphyError on an
        unknown option, a missing or empty value, or an option without handler.
        """
        args = list(args)
        if not args:
            self.print_help(sys.stdout)
            return ErrorCode.EARLY_EXIT

        for index, token in enumerate(args):
            option = self._lookup.get(token)
            if option is not None and option.causes_exit:
                self._process_token(args, index)
                return ErrorCode.EARLY_EXIT

        index = 0
        while index < len(args):
            index = self._process_token(args, index) + 1
        return ErrorCode.SUCCEEDED

    def help_text(self) -> str:
        """The help message listing every registered option."""
        lines = [
            f"CoTigraphy {self.version}".rstrip(),
            "",
            "Usage:",
            "  CoTigraphy [options]",
            "",
            "Available options:",
        ]
        for option in self._options:
            names = f"{option.short_name}, {option.name}"
            if option.requires_value:
                names += " <value>"
            lines.append(f"  {names:<{_HELP_COLUMN_WIDTH}}{option.description}")
        lines.append("")
        lines.append("For more information, see the project documentation.")
        return "\n".join(lines) + "\n"

    def print_help(self, stream: TextIO) -> TextIO:
        """Write the help message to ``stream`` and return the stream."""
        stream.write(self.help_text())
        return stream

    def _process_token(self, args: list[str], index: int) -> int:
        """Handle the option at ``index``; return the index of the last token consumed."""
        require(0 <= index < len(args), "token index out of range")
        token = args[index]
        option = self._lookup.get(token)
        if option is None:
            raise CoTigraphyError(
                ErrorCode.COMMAND_LINE_ARGUMENT_NOT_FOUND, f"unknown option: {token}"
            )

        value = ""
        if option.requires_value:
            if index + 1 >= len(args):
                raise CoTigraphyError(ErrorCode.INVALID_ARG, f"option {token} requires a value")
            index += 1
            value = args[index]
            if not value:
                raise CoTigraphyError(ErrorCode.INVALID_ARG, f"option {token} has an empty value")

        if option.handler is None:
            raise CoTigraphyError(ErrorCode.INVALID_ARG, f"option {token} has no handler")

        option.handler(value)
        return index