"""Title resolution from view and layout exports."""

from collections.abc import Mapping
from typing import Any

from fileroutes.routing.route import ModuleRef

TITLE_EXPORT = "title"


def export_title(exports: Mapping[str, Any]) -> str | None:
    """Return the ``title`` export if it is a string, else ``None``."""
    title = exports.get(TITLE_EXPORT)
    if isinstance(title, str):
        return title
    return None


def resolve_title(view: ModuleRef | None, layout: ModuleRef | None) -> str | None:
    """Resolve the title for a route merged from a view and a layout.

    The view represents the routable content, so its title wins over
    the layout's.  Returns ``None`` when neither exports a title.
    """
    for module in (view, layout):
        if module is None:
            continue
        title = export_title(module.exports)
        if title is not None:
            return title
    return None
