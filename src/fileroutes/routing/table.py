"""Flattened route table for introspection (``fileroutes routes``)."""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass

from fileroutes.routing.route import ParamType, RouteConfig


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One routable node with its full URL template.

    Attributes:
        url: Full template from the root, e.g. ``/profile/friends/:user``.
        title: Resolved title, if any.
        params: Parameter markers visible at this route.
        has_view: Whether the route renders its own view.
        has_layout: Whether the route wraps its children in a layout.
    """

    url: str
    title: str | None
    params: Mapping[str, ParamType]
    has_view: bool
    has_layout: bool


def flatten_routes(configs: Sequence[RouteConfig]) -> list[RouteEntry]:
    """List every route depth-first, in router precedence order."""
    return list(_walk(configs, ()))


def _walk(configs: Sequence[RouteConfig], parts: tuple[str, ...]) -> Iterator[RouteEntry]:
    for config in configs:
        current = (*parts, config.route) if config.route else parts
        yield RouteEntry(
            url="/" + "/".join(current),
            title=config.title,
            params=config.params,
            has_view=config.view is not None,
            has_layout=config.layout is not None,
        )
        yield from _walk(config.child_routes, current)
