"""Route metadata and route config frozen dataclasses.

``RouteMeta`` is what discovery hands over: one node per directory or
view file.  ``RouteConfig`` is what the normalizer builds from it and the
serializer writes out.  Both are immutable once built.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any


class ParamType(StrEnum):
    """Kind of a parameterized route segment.

    The value is the wire representation in ``file-routes.json``.
    """

    Required = "Required"
    Optional = "Optional"
    Wildcard = "Wildcard"


@dataclass(frozen=True, slots=True)
class ModuleRef:
    """A view or layout source module.

    Attributes:
        file: Source file on disk (``None`` for in-memory metadata).
        exports: Named export values read from the module.  Only
            ``title`` is consumed when building the route tree.
    """

    file: Path | None = None
    exports: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RouteMeta:
    """A discovered directory or view file.

    ``children`` distinguishes "no subdirectory" (``None``) from
    "subdirectory exists but is empty" (``()``).
    """

    path: str
    view: ModuleRef | None = None
    layout: ModuleRef | None = None
    children: tuple[RouteMeta, ...] | None = None


@dataclass(frozen=True, slots=True)
class Segment:
    """A classified route segment.

    Static:    ``about``        (param_type=None)
    Required:  ``:user``        (param_type=Required, name="user")
    Optional:  ``:optional?``   (param_type=Optional, name="optional")
    Wildcard:  ``*``            (param_type=Wildcard, name=None)
    """

    route: str
    param_type: ParamType | None = None
    name: str | None = None

    @property
    def is_param(self) -> bool:
        return self.param_type is not None


@dataclass(frozen=True, slots=True)
class NoSubtree:
    """Leaf route: no nested directory.  ``children`` is omitted."""


@dataclass(frozen=True, slots=True)
class EmptySubtree:
    """A nested directory exists but nothing in it is routable.  ``children: []``."""


@dataclass(frozen=True, slots=True)
class Populated:
    """Nested routes in source order."""

    routes: tuple[RouteConfig, ...]


Subtree = NoSubtree | EmptySubtree | Populated


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """A normalized route, ready for serialization.

    Attributes:
        route: Segment text as it appears in the URL template.
        params: Every parameter marker visible at this node (its own and
            its ancestors'), mapped to the parameter kind.
        title: Resolved title, or ``None`` when no export provided one.
        children: Tagged subtree state, projected to JSON by the serializer.
        view: Source view module (code generation only, never serialized).
        layout: Source layout module (code generation only, never serialized).
    """

    route: str
    params: Mapping[str, ParamType] = field(default_factory=dict)
    title: str | None = None
    children: Subtree = field(default_factory=NoSubtree)
    view: ModuleRef | None = field(default=None, compare=False)
    layout: ModuleRef | None = field(default=None, compare=False)

    @property
    def child_routes(self) -> tuple[RouteConfig, ...]:
        """Nested routes, empty for both leaf and empty-subtree nodes."""
        if isinstance(self.children, Populated):
            return self.children.routes
        return ()
