"""fileroutes — route configuration from a views directory.

Lay out view files, ``@layout`` files and ``{param}`` names; fileroutes
derives the declarative route tree the client-side router consumes.

Basic usage::

    from fileroutes import GeneratorConfig, build

    build(GeneratorConfig(views_dir="frontend/views"))

In-memory metadata::

    from fileroutes import ModuleRef, RouteMeta, create_view_config_json

    create_view_config_json([
        RouteMeta(path="about", view=ModuleRef(exports={"title": "About"})),
    ])
"""

__version__ = "0.1.0"
__all__ = [
    "AmbiguousParameterNameError",
    "BuildResult",
    "ConfigurationError",
    "DuplicateRouteError",
    "FileRoutesError",
    "GeneratorConfig",
    "InvalidSegmentError",
    "ModuleRef",
    "ParamType",
    "RouteConfig",
    "RouteMeta",
    "RouteTreeError",
    "build",
    "collect_routes",
    "create_view_config_json",
    "normalize_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fileroutes`` fast while providing a clean top-level API.
    """
    if name in ("build", "BuildResult"):
        from fileroutes import generator as _generator

        return getattr(_generator, name)

    if name == "GeneratorConfig":
        from fileroutes.config import GeneratorConfig

        return GeneratorConfig

    if name in ("ModuleRef", "ParamType", "RouteConfig", "RouteMeta"):
        from fileroutes.routing import route as _route

        return getattr(_route, name)

    if name == "normalize_routes":
        from fileroutes.routing.tree import normalize_routes

        return normalize_routes

    if name == "create_view_config_json":
        from fileroutes.routing.serialize import create_view_config_json

        return create_view_config_json

    if name == "collect_routes":
        from fileroutes.pages.discovery import collect_routes

        return collect_routes

    if name in (
        "AmbiguousParameterNameError",
        "ConfigurationError",
        "DuplicateRouteError",
        "FileRoutesError",
        "InvalidSegmentError",
        "RouteTreeError",
    ):
        from fileroutes import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
