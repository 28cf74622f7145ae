# skyline

A library that turns a GitHub user's contribution history into a 3D
printable model and a text preview.

Each day with contributions becomes a square column standing on a solid base.
The model is written as a binary STL file. A block-character preview of each
year can be drawn for the terminal.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Fetching contribution data

`skyline.github_client.initialize_github_client()` returns a `Client` that
talks to the GitHub GraphQL API. It reads its settings from the environment:

- `GH_HOST` picks the host; it defaults to `github.com`.
- For `github.com` the token comes from `GH_TOKEN` or `GITHUB_TOKEN`; for
  other hosts from `GH_ENTERPRISE_TOKEN` or `GITHUB_ENTERPRISE_TOKEN`.

Without a token it raises `SkylineError`.

`Client` offers:

- `get_authenticated_user()`: the login of the token's owner
- `get_user_join_year(username)`: the year the account was created
- `fetch_contributions(username, year)`: a `ContributionsResponse` whose
  `weeks` is a list of weeks, each a list of `ContributionDay` values

A `Client` can also be built around any object with a
`do(query, variables)` method that returns the response's `data` object.

## Building a model

```python
from skyline.github_client import initialize_github_client
from skyline.generator import generate_stl
from skyline.utils import generate_output_filename

client = initialize_github_client()
user = client.get_authenticated_user()
weeks = client.fetch_contributions(user, 2024).weeks

path = generate_output_filename(user, 2024, 2024, "")  # "<user>-2024-github-skyline.stl"
generate_stl(weeks, path, user, 2024)
```

`skyline.generator.generate_stl_range(contributions, output_path, username,
start_year, end_year)` takes one grid per year and places the years one behind
the other, the most recent at the front. Column heights are scaled on a
square-root scale against the largest daily count over all years.

The same thing works with made-up data:

```python
from skyline.generator import generate_stl
from skyline.types import ContributionDay

weeks = [
    [ContributionDay(contribution_count=(w + d) % 5) for d in range(7)]
    for w in range(52)
]
generate_stl(weeks, "example.stl", "octocat", 2024)
```

## The text preview

```python
from skyline.ascii_art import generate_ascii

print(generate_ascii(weeks, "octocat", 2024, include_header=True, include_user_info=True))
```

Each column is one week. Days within a week are reordered so that days with
contributions stack up from the bottom like a building.

```
' '   no contributions
'.'   future dates
'░'   low activity
'▒'   medium activity
'▓'   high activity
'╻┃╽' top block of a week's column (low, medium, high)
```

## Other pieces

- `skyline.utils`: `parse_year_range("2014-2024")`, `validate_year_range`,
  `format_year_range` (`"2020-24"` style) and `generate_output_filename`
  (adds `.stl` to a given name when missing).
- `skyline.geometry`: boxes, cubes, columns, the base slab, normals and vector
  helpers.
- `skyline.stl`: `write_stl_binary(filename, triangles)`.
- `skyline.types`: `ContributionDay`, `ContributionsResponse`, `Point3D`,
  `Triangle` and their single-precision counterparts.
- `skyline.logger`: `get_logger()` returns a shared, thread-safe `Logger`
  whose level is set with `set_level(LogLevel.DEBUG)` and the like.

Failures are raised as `skyline.errors.SkylineError`, which carries an
`ErrorType` (`VALIDATION`, `IO`, `NETWORK`, `GRAPHQL` or `STL`).

## What this package does not do

- It installs no command-line program. Fetching data, printing previews and
  writing files are done by calling the library from your own code.
- Models hold the base and the contribution columns only; no username, year
  or logo is embossed on the front face.
- It does not open profiles in a web browser.