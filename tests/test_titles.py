"""Tests for fileroutes.routing.titles — title resolution."""

from fileroutes.routing.route import ModuleRef
from fileroutes.routing.titles import export_title, resolve_title


def _module(**exports: object) -> ModuleRef:
    return ModuleRef(exports=exports)


class TestExportTitle:
    def test_string_title(self) -> None:
        assert export_title({"title": "About"}) == "About"

    def test_missing(self) -> None:
        assert export_title({"default": "About"}) is None

    def test_non_string_ignored(self) -> None:
        assert export_title({"title": 42}) is None


class TestResolveTitle:
    def test_view_only(self) -> None:
        assert resolve_title(_module(title="About"), None) == "About"

    def test_layout_only(self) -> None:
        assert resolve_title(None, _module(title="Layout Only")) == "Layout Only"

    def test_view_wins_over_layout(self) -> None:
        view = _module(title="Friends")
        layout = _module(title="Friends Layout")
        assert resolve_title(view, layout) == "Friends"

    def test_layout_used_when_view_has_no_title(self) -> None:
        assert resolve_title(_module(), _module(title="Account")) == "Account"

    def test_nothing(self) -> None:
        assert resolve_title(None, None) is None
        assert resolve_title(_module(), _module()) is None

    def test_other_exports_ignored(self) -> None:
        assert resolve_title(_module(default="About", menu={"title": "Nope"}), None) is None
