"""``fileroutes build`` — generate route artifacts.

CLI flags override the ``GeneratorConfig`` defaults.
"""

import argparse
import dataclasses
import logging
import sys

from fileroutes.generator import build
from fileroutes.config import GeneratorConfig
from fileroutes.errors import FileRoutesError


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Build a ``GeneratorConfig`` from parsed CLI arguments."""
    overrides: dict[str, object] = {}
    if args.views_dir is not None:
        overrides["views_dir"] = args.views_dir
    if getattr(args, "output_dir", None) is not None:
        overrides["output_dir"] = args.output_dir
    if getattr(args, "indent", None) is not None:
        overrides["json_indent"] = args.indent or None
    if getattr(args, "no_ts", False):
        overrides["generate_routes_module"] = False
    if getattr(args, "runtime_module", None) is not None:
        overrides["runtime_module"] = args.runtime_module
    if getattr(args, "log_level", None) is not None:
        overrides["log_level"] = args.log_level
    return dataclasses.replace(GeneratorConfig(), **overrides)


def configure_logging(level: str) -> None:
    """Route ``fileroutes.*`` loggers to stderr at *level*."""
    logging.basicConfig(
        level=level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("fileroutes").setLevel(level.upper())


def run_build(args: argparse.Namespace) -> None:
    """Generate ``file-routes.json`` (and ``file-routes.ts``).

    Exits with code 1 on any route tree or configuration error.
    """
    config = config_from_args(args)
    configure_logging(config.log_level)

    try:
        result = build(config)
    except FileRoutesError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Wrote {result.json_path}")
    if result.routes_module_path is not None:
        print(f"Wrote {result.routes_module_path}")
