"""fileroutes CLI — route artifact generation and route listing.

Entry point registered as ``fileroutes`` in ``pyproject.toml``::

    [project.scripts]
    fileroutes = "fileroutes.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``fileroutes`` command."""
    parser = argparse.ArgumentParser(
        prog="fileroutes",
        description="fileroutes — route configuration from the views directory.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- fileroutes build -------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Generate file-routes.json and file-routes.ts")
    build_parser.add_argument(
        "views_dir",
        nargs="?",
        default=None,
        help="Views directory (default: frontend/views)",
    )
    build_parser.add_argument("--output-dir", default=None, help="Directory for generated files")
    build_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (0 for compact output)",
    )
    build_parser.add_argument(
        "--no-ts",
        action="store_true",
        help="Skip generating the file-routes.ts module",
    )
    build_parser.add_argument(
        "--runtime-module",
        default=None,
        help="Module the generated file-routes.ts imports createRoute from",
    )
    build_parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity",
    )

    # -- fileroutes routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List discovered routes")
    routes_parser.add_argument(
        "views_dir",
        nargs="?",
        default=None,
        help="Views directory (default: frontend/views)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "build":
        from fileroutes.cli._build import run_build

        run_build(args)
    elif args.command == "routes":
        from fileroutes.cli._routes import run_routes

        run_routes(args)
