"""Tests for fileroutes.routing.serialize — file-routes.json output."""

import json
from typing import Any

from fileroutes.routing.route import (
    EmptySubtree,
    ModuleRef,
    ParamType,
    Populated,
    RouteConfig,
    RouteMeta,
)
from fileroutes.routing.serialize import (
    create_view_config_json,
    dump_view_config,
    route_to_json_data,
    to_json_data,
)
from fileroutes.routing.tree import normalize_routes

EXPECTED: list[dict[str, Any]] = [
    {"route": "about", "title": "About", "params": {}},
    {
        "route": "profile",
        "params": {},
        "children": [
            {"route": "", "title": "Profile", "params": {}},
            {
                "route": "account",
                "title": "Account",
                "params": {},
                "children": [
                    {
                        "route": "security",
                        "params": {},
                        "children": [
                            {"route": "password", "title": "Password", "params": {}},
                            {"route": "two-factor-auth", "title": "Two Factor Auth", "params": {}},
                        ],
                    },
                ],
            },
            {
                "route": "friends",
                "title": "Friends Layout",
                "params": {},
                "children": [
                    {"route": "list", "title": "List", "params": {}},
                    {"route": ":user", "title": "User", "params": {":user": "Required"}},
                ],
            },
        ],
    },
    {
        "route": "test",
        "params": {},
        "children": [
            {"route": ":optional?", "title": "Optional", "params": {":optional?": "Optional"}},
            {"route": "*", "title": "Wildcard", "params": {"*": "Wildcard"}},
            {
                "route": "issue-002378",
                "params": {},
                "children": [
                    {
                        "route": ":requiredParam",
                        "params": {":requiredParam": "Required"},
                        "children": [
                            {
                                "route": "edit",
                                "title": "Issue002378 Required Param",
                                "params": {":requiredParam": "Required"},
                            },
                        ],
                    },
                ],
            },
            {
                "route": "issue-002571-empty-layout",
                "title": "Issue002571 Empty Layout",
                "params": {},
                "children": [],
            },
            {"route": "issue-002879-config-below", "title": "Config Below", "params": {}},
        ],
    },
    {"route": "layout-only", "title": "Layout Only", "params": {}, "children": []},
]


class TestRouteToJsonData:
    def test_leaf_omits_children_and_title(self) -> None:
        data = route_to_json_data(RouteConfig(route="about"))
        assert data == {"route": "about", "params": {}}
        assert "children" not in data
        assert "title" not in data

    def test_empty_subtree_is_empty_list(self) -> None:
        data = route_to_json_data(RouteConfig(route="x", children=EmptySubtree()))
        assert data["children"] == []

    def test_populated(self) -> None:
        child = RouteConfig(route=":user", params={":user": ParamType.Required}, title="User")
        data = route_to_json_data(RouteConfig(route="friends", children=Populated((child,))))
        assert data["children"] == [{"route": ":user", "title": "User", "params": {":user": "Required"}}]

    def test_key_order(self) -> None:
        config = RouteConfig(route="a", title="A", children=EmptySubtree())
        assert list(route_to_json_data(config)) == ["route", "title", "params", "children"]

    def test_param_values_are_plain_strings(self) -> None:
        data = route_to_json_data(RouteConfig(route="*", params={"*": ParamType.Wildcard}))
        assert type(data["params"]["*"]) is str

    def test_source_modules_not_serialized(self) -> None:
        config = RouteConfig(route="a", view=ModuleRef(exports={"title": "A"}))
        assert route_to_json_data(config) == {"route": "a", "params": {}}


class TestReferenceTree:
    def test_matches_expected_shape(self, route_meta: tuple[RouteMeta, ...]) -> None:
        assert to_json_data(normalize_routes(route_meta)) == EXPECTED

    def test_json_text_round_trips(self, route_meta: tuple[RouteMeta, ...]) -> None:
        assert json.loads(create_view_config_json(route_meta)) == EXPECTED

    def test_about_scenario(self, route_meta: tuple[RouteMeta, ...]) -> None:
        about = json.loads(create_view_config_json(route_meta))[0]
        assert about == {"route": "about", "title": "About", "params": {}}

    def test_layout_only_scenario(self, route_meta: tuple[RouteMeta, ...]) -> None:
        layout_only = json.loads(create_view_config_json(route_meta))[-1]
        assert layout_only["title"] == "Layout Only"
        assert layout_only["children"] == []


class TestDeterminism:
    def test_idempotent(self, route_meta: tuple[RouteMeta, ...]) -> None:
        configs = normalize_routes(route_meta)
        assert dump_view_config(configs) == dump_view_config(configs)

    def test_fresh_runs_identical(self, route_meta: tuple[RouteMeta, ...]) -> None:
        assert create_view_config_json(route_meta) == create_view_config_json(route_meta)

    def test_indent(self) -> None:
        meta = [RouteMeta("about", view=ModuleRef(exports={"title": "About"}))]
        assert create_view_config_json(meta, indent=None) == (
            '[{"route": "about", "title": "About", "params": {}}]'
        )
        assert create_view_config_json(meta).startswith("[\n  {\n")

    def test_non_ascii_title_kept(self) -> None:
        meta = [RouteMeta("cafe", view=ModuleRef(exports={"title": "Café"}))]
        assert '"Café"' in create_view_config_json(meta, indent=None)

    def test_empty_tree(self) -> None:
        assert create_view_config_json([]) == "[]"
