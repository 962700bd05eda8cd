"""Route config serialization — ``file-routes.json``.

Projects the normalized tree to plain JSON data.  Key *presence* is part
of the contract with the client router:

- ``title`` only when a title was resolved
- ``params`` always, ``{}`` when no parameter applies
- ``children`` absent for leaf routes, ``[]`` for an empty subtree,
  a list in source order otherwise
"""

import json
from collections.abc import Sequence
from typing import Any

from fileroutes.routing.route import EmptySubtree, NoSubtree, Populated, RouteConfig, RouteMeta
from fileroutes.routing.tree import normalize_routes


def route_to_json_data(config: RouteConfig) -> dict[str, Any]:
    """Convert a single route config (and its subtree) to JSON data."""
    data: dict[str, Any] = {"route": config.route}
    if config.title is not None:
        data["title"] = config.title
    data["params"] = {marker: str(kind) for marker, kind in config.params.items()}

    match config.children:
        case NoSubtree():
            pass
        case EmptySubtree():
            data["children"] = []
        case Populated(routes=routes):
            data["children"] = [route_to_json_data(child) for child in routes]

    return data


def to_json_data(configs: Sequence[RouteConfig]) -> list[dict[str, Any]]:
    """Convert a normalized route tree to a JSON-ready list."""
    return [route_to_json_data(config) for config in configs]


def dump_view_config(configs: Sequence[RouteConfig], *, indent: int | None = 2) -> str:
    """Serialize an already normalized route tree.

    Deterministic: the same tree always produces the same text.
    """
    return json.dumps(to_json_data(configs), indent=indent, ensure_ascii=False)


def create_view_config_json(routes: Sequence[RouteMeta], *, indent: int | None = 2) -> str:
    """Normalize discovered routes and serialize them to JSON text."""
    return dump_view_config(normalize_routes(routes), indent=indent)
