"""Build orchestration — discover, normalize, serialize, write.

The route-tree core is pure and silent; this layer owns the file I/O and
the logging around it.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from fileroutes.codegen.routes_ts import render_routes_module
from fileroutes.config import GeneratorConfig
from fileroutes.pages.discovery import collect_routes
from fileroutes.routing.route import RouteConfig
from fileroutes.routing.serialize import dump_view_config
from fileroutes.routing.table import flatten_routes
from fileroutes.routing.tree import normalize_routes

logger = logging.getLogger("fileroutes.generator")


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of a build.

    Attributes:
        routes: The normalized route tree.
        json_path: Written ``file-routes.json``.
        routes_module_path: Written ``file-routes.ts``, or ``None`` when
            module generation is disabled.
    """

    routes: tuple[RouteConfig, ...]
    json_path: Path
    routes_module_path: Path | None = None


def load_routes(config: GeneratorConfig) -> tuple[RouteConfig, ...]:
    """Discover and normalize the routes under ``config.views_dir``."""
    return normalize_routes(collect_routes(config.views_dir, config=config))


def build(config: GeneratorConfig) -> BuildResult:
    """Generate route artifacts into ``config.output_dir``.

    Any ``FileRoutesError`` aborts the build before anything is written.
    """
    start = time.perf_counter()
    routes = load_routes(config)

    json_text = dump_view_config(routes, indent=config.json_indent)
    module_text: str | None = None
    if config.generate_routes_module:
        module_text = render_routes_module(
            routes,
            output_dir=config.output_dir,
            runtime_module=config.runtime_module,
        )

    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    json_path = output_dir / config.json_file
    _write_if_changed(json_path, json_text)

    module_path: Path | None = None
    if module_text is not None:
        module_path = output_dir / config.routes_file
        _write_if_changed(module_path, module_text)

    logger.info(
        "Generated %d routes from %s in %.1fms",
        len(flatten_routes(routes)),
        config.views_dir,
        (time.perf_counter() - start) * 1000,
    )
    return BuildResult(routes=routes, json_path=json_path, routes_module_path=module_path)


def _write_if_changed(path: Path, content: str) -> None:
    """Write *content* unless the file already holds it (keeps watchers quiet)."""
    if path.is_file() and path.read_text(encoding="utf-8") == content:
        logger.debug("Unchanged %s", path)
        return
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s", path)
