# cotigraphy

`cotigraphy` fetches a user's GitHub contribution calendar and renders it as an
animated WebP: an orange worm crawls across the calendar grid and eats the
contribution cells, smallest counts first, turning every eaten cell white.

## Installation

```
pip install cotigraphy
```

Pillow is the only runtime dependency; it does the WebP encoding. The HTTP
request uses the standard library.

## Command line

```
cotigraphy --token token --user_name octocat --output contributions.webp
```

Options:

| Short | Long          | Value   | Meaning                                   |
|-------|---------------|---------|-------------------------------------------|
| `-h`  | `--help`      | no      | Show the help message and exit            |
| `-v`  | `--version`   | no      | Print the program version                 |
| `-t`  | `--token`     | yes     | GitHub personal access token              |
| `-n`  | `--user_name` | yes     | GitHub user name whose calendar is drawn  |
| `-o`  | `--output`    | yes     | Path of the WebP file to write            |

Notes on behaviour:

- Running `cotigraphy` with no arguments prints the help text and exits with status 0.
- `--help` is handled before anything else, wherever it appears on the line,
  and the command then exits with status 0 without doing anything more.
- `--version` prints `Version: 1.0.0.759` but does not stop the command: the
  remaining options are still processed and the calendar is still fetched, so
  a token, a user name and an output path are still needed.
- An unknown option, an option missing its value, or an empty value is an
  error: the help text is printed, a message goes to standard error, and the
  command exits with a non-zero status (the failure's error code).
- The output path must end in `.webp` (any letter case) and must have a file
  name before the extension.
- A missing token or user name, a malformed response, a calendar without any
  contributions, or a network or file error ends the command with status 1
  and a message on standard error.

The token is sent as a bearer token to the GitHub GraphQL API.

## How the animation is made

1. The contribution calendar (weeks × days, with each day's count and colour)
   is fetched from the GraphQL API.
2. The grid is drawn with 10 px cells and 3 px gaps on a dark background.
3. The worm is four segments long and starts in the top row of the first four
   weeks. Starting at level 1, it finds the nearest cell whose count is
   non-zero and no greater than the current level (breadth-first search over
   the four neighbouring cells) and moves there one cell per frame. When
   nothing is left at the current level, the level goes up, until it passes
   the largest count in the calendar.
4. Every step becomes one frame, 80 ms apart, in the written WebP animation,
   which loops forever.

## Using it from Python

```python
from cotigraphy.app import run

run("token", "octocat", "contributions.webp")
```

The building blocks are available on their own as well:

- `cotigraphy.github_client.GitHubContributionClient` fetches a calendar;
  `parse_response` turns a GraphQL response body into `GridData`, and
  `build_contribution_query`, `escape_json_string` and `hex_to_color` are
  the helpers it uses.
- `cotigraphy.grid.Grid` gives bounds-checked access to the cells of a `GridData`.
- `cotigraphy.worm.Worm` moves across a `Grid` one step per `move(level)` call;
  `find_path(level)` returns the path to the nearest target.
- `cotigraphy.canvas.GridCanvas` draws a grid and a worm into an RGBA buffer
  laid out by a `CanvasLayout`.
- `cotigraphy.webp_writer.WebPWriter` collects RGBA frames and saves the animation.
- `cotigraphy.cli_parser.CommandLineParser` registers `CommandLineOption`s and
  dispatches arguments to their handlers.
- `cotigraphy.app.render_animation` runs the whole simulation for a `GridData`
  and returns the filled `WebPWriter`.

Failures are raised as `cotigraphy.errors.CoTigraphyError`, which carries an
`ErrorCode`; broken preconditions raise `cotigraphy.errors.ContractViolation`.

## What it does not do

- It writes WebP only; there is no other output format.
- It has no caching or offline mode: every run fetches the calendar again.
- Frame delay, cell size, colours and worm length are fixed; there are no
  options to change them.

## Running the tests

```
pip install "cotigraphy[test]"
pytest
```