"""fileroutes exception hierarchy.

Shared across discovery, the route-tree normalizer, code generation and the
CLI so every module raises and catches the same types.
"""


class FileRoutesError(Exception):
    """Base for all fileroutes-specific errors."""


class ConfigurationError(FileRoutesError):
    """Raised when generator configuration is invalid.

    Also raised when the views directory does not exist.
    """


def format_route_path(path: tuple[str, ...]) -> str:
    """Render a segment path for diagnostics (``/profile/friends/:user``)."""
    return "/" + "/".join(path)


class RouteTreeError(FileRoutesError):
    """A structural problem in the route tree.

    Carries the offending path (segment texts from the root) so the
    caller can point at the file that caused it.  Aborts the whole
    build; no partial tree is emitted.
    """

    def __init__(self, detail: str, *, path: tuple[str, ...] = ()) -> None:
        self.detail = detail
        self.path = path
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.path:
            return f"{self.detail} (at {format_route_path(self.path)})"
        return self.detail

    def with_path(self, path: tuple[str, ...]) -> "RouteTreeError":
        """Return a copy of this error located at *path*."""
        located = type(self).__new__(type(self))
        located.__dict__.update(self.__dict__)
        located.path = path
        located.args = (str(located),)
        return located


class InvalidSegmentError(RouteTreeError):
    """A segment uses parameter marker syntax incorrectly (``a:b``, ``:``)."""

    def __init__(self, segment: str, reason: str = "", *, path: tuple[str, ...] = ()) -> None:
        self.segment = segment
        detail = f"Invalid route segment {segment!r}"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail, path=path)


class AmbiguousParameterNameError(RouteTreeError):
    """Sibling routes declare different parameters at the same position.

    The router tries one parameter per level and cannot tell
    ``/users/:id`` from ``/users/:name``.
    """

    def __init__(self, first: str, second: str, *, path: tuple[str, ...] = ()) -> None:
        self.markers = (first, second)
        super().__init__(
            f"Conflicting parameters {first!r} and {second!r} under the same parent",
            path=path,
        )


class DuplicateRouteError(RouteTreeError):
    """Two siblings normalize to the same ``route`` text."""

    def __init__(self, route: str, *, path: tuple[str, ...] = ()) -> None:
        self.route = route
        super().__init__(f"Duplicate route {route!r}", path=path)
