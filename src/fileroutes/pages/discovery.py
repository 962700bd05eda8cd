"""Filesystem route discovery for the views directory.

Walks the views directory tree and discovers:

- ``@layout.tsx`` files as directory layouts
- ``@index.tsx`` files as index routes (path ``""``)
- other view files as routes named after their stem

Names wrapped in braces become path parameters::

    {user}        -> :user        (required)
    {{section}}   -> :section?    (optional)
    {...rest}     -> *            (wildcard)

A view file and a directory with the same name (``about.tsx`` and
``about/``) merge into one route.  Names starting with ``_`` or ``.`` are
ignored, as are files with other extensions.
"""

import logging
import re
from pathlib import Path

from fileroutes.config import GeneratorConfig
from fileroutes.errors import ConfigurationError, DuplicateRouteError
from fileroutes.pages.exports import extract_exports
from fileroutes.routing.route import ModuleRef, RouteMeta

logger = logging.getLogger("fileroutes.pages")

# Regexes matching parameter names in file and directory names
_OPTIONAL_PARAM_RE = re.compile(r"^\{\{([^{}]+)\}\}$")
_WILDCARD_PARAM_RE = re.compile(r"^\{\.\.\.([^{}]+)\}$")
_PARAM_RE = re.compile(r"^\{([^{}]+)\}$")


def convert_fs_name_to_segment(name: str) -> str:
    """Convert a file stem or directory name to a route segment."""
    if _WILDCARD_PARAM_RE.match(name):
        return "*"
    match = _OPTIONAL_PARAM_RE.match(name)
    if match:
        return f":{match.group(1)}?"
    match = _PARAM_RE.match(name)
    if match:
        return f":{match.group(1)}"
    return name


def _is_param_name(name: str) -> bool:
    return convert_fs_name_to_segment(name) != name


def segment_sort_key(segment: str) -> tuple[int, str]:
    """Stable sibling order: index, static, required, optional, wildcard."""
    if segment == "":
        rank = 0
    elif segment == "*":
        rank = 4
    elif segment.startswith(":") and segment.endswith("?"):
        rank = 3
    elif segment.startswith(":"):
        rank = 2
    else:
        rank = 1
    return rank, segment


def collect_routes(
    views_dir: str | Path,
    *,
    config: GeneratorConfig | None = None,
) -> tuple[RouteMeta, ...]:
    """Walk a views directory and build the route metadata tree.

    Args:
        views_dir: Path to the views directory.
        config: Naming conventions and extensions (defaults if omitted).

    Returns:
        The children of the implicit root.  A root-level layout wraps
        everything in a single ``""`` route.
    """
    config = config or GeneratorConfig()
    root = Path(views_dir).resolve()
    if not root.is_dir():
        raise ConfigurationError(f"Views directory not found: {root}")

    children, layout = _collect_directory(root, config, path=())
    if layout is not None:
        return (RouteMeta(path="", layout=layout, children=children),)
    return children


def _collect_directory(
    directory: Path,
    config: GeneratorConfig,
    *,
    path: tuple[str, ...],
) -> tuple[tuple[RouteMeta, ...], ModuleRef | None]:
    """Collect one directory level.

    Returns the child routes (sorted) and the directory's own layout.
    """
    layout: ModuleRef | None = None
    index: ModuleRef | None = None
    views: dict[str, ModuleRef] = {}
    subdirs: dict[str, Path] = {}

    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise ConfigurationError(f"Cannot read {directory}: {exc}") from exc

    for item in entries:
        if item.name.startswith(("_", ".")):
            continue

        if item.is_dir():
            segment = convert_fs_name_to_segment(item.name)
            if segment in subdirs:
                raise DuplicateRouteError(segment, path=(*path, segment))
            subdirs[segment] = item
            continue

        if not item.is_file() or item.suffix not in config.extensions:
            continue
        # foo.test.tsx, foo.d.ts; {...rest}.tsx is a wildcard view
        if "." in item.stem and not _is_param_name(item.stem):
            continue

        if item.stem == config.layout_name:
            layout = _load_module(item)
        elif item.stem == config.index_name:
            index = _load_module(item)
        else:
            segment = convert_fs_name_to_segment(item.stem)
            if segment in views:
                raise DuplicateRouteError(segment, path=(*path, segment))
            views[segment] = _load_module(item)

    routes: list[RouteMeta] = []
    if index is not None:
        routes.append(RouteMeta(path="", view=index))

    for segment in sorted(views.keys() | subdirs.keys(), key=segment_sort_key):
        subdir = subdirs.get(segment)
        children: tuple[RouteMeta, ...] | None = None
        sublayout: ModuleRef | None = None
        if subdir is not None:
            children, sublayout = _collect_directory(subdir, config, path=(*path, segment))
        routes.append(
            RouteMeta(
                path=segment,
                view=views.get(segment),
                layout=sublayout,
                children=children,
            )
        )

    return tuple(routes), layout


def _load_module(file: Path) -> ModuleRef:
    """Read a view or layout file and extract its exports."""
    try:
        source = file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read {file}: {exc}") from exc
    exports = extract_exports(source)
    logger.debug("Discovered %s (exports: %s)", file, ", ".join(sorted(exports)) or "none")
    return ModuleRef(file=file, exports=exports)
