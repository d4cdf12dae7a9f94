"""Fetches a user's contribution calendar from the GitHub GraphQL API."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any

from .errors import require
from .grid import Color, GridCell, GridData

GRAPHQL_URL = "https://api.github.com/graphql"
USER_AGENT = "CoTigraphy/1.0"
DEFAULT_FIELDS = "date contributionCount color"
DEFAULT_COLOR = "#FFFFFF"
REQUEST_TIMEOUT_SECONDS = 30.0

_SIMPLE_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _is_surrogate(code: int) -> bool:
    return 0xD800 <= code <= 0xDFFF


def _escape_char(ch: str) -> str:
    escaped = _SIMPLE_ESCAPES.get(ch)
    if escaped is not None:
        return escaped
    code = ord(ch)
    if code > 0xFFFF:
        # Characters outside the BMP are written as a UTF-16 surrogate pair,
        # and surrogates are always escaped.
        offset = code - 0x10000
        high = 0xD800 + (offset >> 10)
        low = 0xDC00 + (offset & 0x3FF)
        return f"\\u{high:04x}\\u{low:04x}"
    if code < 0x20 or code == 0x7F or _is_surrogate(code):
        return f"\\u{code:04x}"
    return ch


def escape_json_string(text: str) -> str:
    """Escape ``text`` for use inside a JSON string literal.

    Quotes, backslashes and the usual control characters get their short
    escapes; other control characters, DEL and surrogates become ``\\uXXXX``.
    """
    require(text != "", "text to escape must not be empty")
    result = "".join(_escape_char(ch) for ch in text)
    require(result != "", "escaped text must not be empty")
    return result


def build_contribution_query(user_name: str, fields: str) -> str:
    """The JSON request body asking for the contribution calendar of ``user_name``."""
    require(user_name != "", "user name must not be empty")
    require(fields != "", "fields must not be empty")
    return (
        '{ "query": "query { '
        f'user(login: \\"{escape_json_string(user_name)}\\") {{ '
        "contributionsCollection { "
        "contributionCalendar { "
        "weeks { "
        f"contributionDays {{ {escape_json_string(fields)} }} "
        '} } } } }" }'
    )


def hex_to_color(text: str) -> Color:
    """Parse a ``#RRGGBB`` colour into an (r, g, b) tuple."""
    require(len(text) == 7, f"colour {text!r} must have 7 characters")
    require(text[0] == "#", f"colour {text!r} must start with '#'")
    return int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16)


def _walk(node: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def parse_response(text: str) -> GridData:
    """Turn a GraphQL contribution-calendar response into GridData.

    Raises ContractViolation when the response is not the expected shape,
    when a later week has more days than an earlier one, or when there are
    no contributions at all.
    """
    require(text != "", "response must not be empty")
    try:
        root = json.loads(text)
    except ValueError:
        root = None
    require(isinstance(root, dict) and "data" in root, "response has no 'data' member")

    weeks = _walk(root, "data", "user", "contributionsCollection", "contributionCalendar", "weeks")
    require(isinstance(weeks, list), "response has no list of weeks")

    data = GridData(week_count=len(weeks))
    for week_index, week in enumerate(weeks):
        days = _walk(week, "contributionDays")
        require(isinstance(days, list), f"week {week_index} has no list of days")

        # The current week may be partial, so later weeks may be shorter.
        if data.day_count != 0:
            require(
                len(days) <= data.day_count,
                f"week {week_index} has more days than the week before",
            )
        data.day_count = len(days)

        column: list[GridCell] = []
        for day_index, day in enumerate(days):
            require(isinstance(day, dict), f"day {day_index} of week {week_index} is not an object")
            cell = GridCell(
                week=week_index,
                day=day_index,
                count=int(day.get("contributionCount", 0)),
                color=hex_to_color(str(day.get("color", DEFAULT_COLOR))),
            )
            data.max_count = max(data.max_count, cell.count)
            column.append(cell)
        data.cells.append(column)

    require(data.week_count != 0, "calendar has no weeks")
    require(data.day_count != 0, "calendar has no days")
    require(data.max_count != 0, "calendar has no contributions")
    require(data.cells, "calendar has no cells")
    return data


class GitHubContributionClient:
    """Requests contribution calendars with a personal access token.

    Network failures surface as ``OSError`` (``urllib.error.URLError``).
    """

    def __init__(self, token: str) -> None:
        require(token != "", "access token must not be empty")
        self._token = token

    @property
    def headers(self) -> dict[str, str]:
        """The HTTP headers sent with every request."""
        return {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._token}",
        }

    def fetch(self, user_name: str, fields: str = DEFAULT_FIELDS) -> GridData:
        """Fetch and parse the contribution calendar of ``user_name``."""
        body = build_contribution_query(user_name, fields).encode("utf-8")
        request = urllib.request.Request(
            GRAPHQL_URL, data=body, headers=self.headers, method="POST"
        )
        try:
            with urllib.request.urlopen(request, timeout=REQUEST_TIMEOUT_SECONDS) as response:
                raw = response.read()
        except urllib.error.HTTPError as exc:
            # The body of an error reply is parsed like any other.
            raw = exc.read()
        return parse_response(raw.decode("utf-8", errors="replace"))