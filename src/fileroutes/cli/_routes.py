"""``fileroutes routes`` — list discovered routes.

Discovers and normalizes the views directory and prints every route with
its URL template, title, and parameters.
"""

import argparse
import sys

from fileroutes.generator import load_routes
from fileroutes.cli._build import config_from_args
from fileroutes.errors import FileRoutesError
from fileroutes.routing.table import flatten_routes


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of URL, TITLE, and PARAMS for the views directory."""
    config = config_from_args(args)
    try:
        routes = load_routes(config)
    except FileRoutesError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    entries = flatten_routes(routes)
    if not entries:
        print("No routes discovered.")
        return

    # Build rows: (url, title, params_str)
    rows: list[tuple[str, str, str]] = []
    for entry in entries:
        params_str = ", ".join(f"{marker}={kind}" for marker, kind in entry.params.items())
        rows.append((entry.url, entry.title or "", params_str))

    # Column widths
    max_url = max(max(len(r[0]) for r in rows), 3)  # "URL" header
    max_title = max(max(len(r[1]) for r in rows), 5)  # "TITLE" header

    fmt = f"{{:<{max_url}}}  {{:<{max_title}}}  {{}}"
    print(fmt.format("URL", "TITLE", "PARAMS"))
    sep_len = max_url + max_title + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for url, title, params_str in rows:
        print(fmt.format(url, title, params_str).rstrip())
