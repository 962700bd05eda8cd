"""Route tree normalization.

Turns the discovered ``RouteMeta`` tree into immutable ``RouteConfig``
nodes in one recursive descent:

1. classify the segment; parameter segments extend the inherited
   ``params`` (copy-on-write) and the extended map is threaded down
2. a node has content if it has a view, a layout, or is the index route
3. children are normalized in source order, pruned ones dropped
4. the subtree state is decided:

   - no subdirectory and no layout   -> ``NoSubtree``
   - subdirectory (or layout) but nothing routable  -> ``EmptySubtree``
   - otherwise                        -> ``Populated``

5. nodes without content and without surviving children are pruned

Sibling conflicts abort the whole run with the offending path attached.
"""

from collections.abc import Mapping, Sequence

from fileroutes.errors import (
    AmbiguousParameterNameError,
    DuplicateRouteError,
    InvalidSegmentError,
)
from fileroutes.routing.params import classify_segment
from fileroutes.routing.route import (
    EmptySubtree,
    NoSubtree,
    ParamType,
    Populated,
    RouteConfig,
    RouteMeta,
    Subtree,
)
from fileroutes.routing.titles import resolve_title

# Path of an index (default) route
INDEX_ROUTE = ""

_EMPTY_PARAMS: Mapping[str, ParamType] = {}


def normalize_routes(routes: Sequence[RouteMeta]) -> tuple[RouteConfig, ...]:
    """Normalize the children of the (implicit) root into route configs.

    The root itself is never emitted.  Input order is kept as is; sort
    siblings before calling if the source order is not meaningful.

    Raises:
        InvalidSegmentError: A segment uses marker syntax incorrectly.
        DuplicateRouteError: Two siblings produce the same route text.
        AmbiguousParameterNameError: Two siblings declare different
            parameters at the same position.
    """
    return _normalize_children(routes, params=_EMPTY_PARAMS, path=())


def _normalize_children(
    children: Sequence[RouteMeta],
    *,
    params: Mapping[str, ParamType],
    path: tuple[str, ...],
) -> tuple[RouteConfig, ...]:
    """Normalize sibling nodes and check them against each other."""
    results: list[RouteConfig] = []
    for meta in children:
        config = _normalize_node(meta, params=params, path=path)
        if config is not None:
            results.append(config)
    _check_siblings(results, path)
    return tuple(results)


def _normalize_node(
    meta: RouteMeta,
    *,
    params: Mapping[str, ParamType],
    path: tuple[str, ...],
) -> RouteConfig | None:
    """Normalize one node, returning ``None`` if it is pruned."""
    node_path = (*path, meta.path)
    try:
        segment = classify_segment(meta.path)
    except InvalidSegmentError as exc:
        raise exc.with_path(node_path) from exc

    if segment.param_type is not None:
        params = {**params, segment.route: segment.param_type}

    has_content = (
        meta.view is not None or meta.layout is not None or segment.route == INDEX_ROUTE
    )

    nested: tuple[RouteConfig, ...] = ()
    if meta.children is not None:
        nested = _normalize_children(meta.children, params=params, path=node_path)

    if not has_content and not nested:
        return None

    children: Subtree
    if nested:
        children = Populated(nested)
    elif meta.children is not None or meta.layout is not None:
        # A layout always owns a directory, even when nothing is nested in it
        children = EmptySubtree()
    else:
        children = NoSubtree()

    return RouteConfig(
        route=segment.route,
        params=params,
        title=resolve_title(meta.view, meta.layout),
        children=children,
        view=meta.view,
        layout=meta.layout,
    )


def _check_siblings(routes: Sequence[RouteConfig], path: tuple[str, ...]) -> None:
    """Reject duplicate routes and conflicting parameters among siblings."""
    seen: set[str] = set()
    param_marker: str | None = None
    for config in routes:
        if config.route in seen:
            raise DuplicateRouteError(config.route, path=(*path, config.route))
        seen.add(config.route)

        kind = config.params.get(config.route)
        if kind is None or kind is ParamType.Wildcard:
            continue
        if param_marker is not None:
            raise AmbiguousParameterNameError(
                param_marker, config.route, path=(*path, config.route)
            )
        param_marker = config.route
