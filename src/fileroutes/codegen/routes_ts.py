"""``file-routes.ts`` generation.

Renders a TypeScript module that imports every view and layout module and
builds the runtime route tree::

    import { createRoute } from "@fileroutes/runtime";
    import * as View_1 from "../views/about.js";

    const routes = [
      createRoute("about", { view: View_1 }),
    ];

    export default routes;

Import specifiers are relative to the output directory, with the source
extension rewritten to ``.js``.
"""

import json
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from kida import Environment

from fileroutes.routing.route import ModuleRef, RouteConfig

ROUTES_MODULE_TEMPLATE = """\
// Generated by fileroutes. Do not edit.
import { createRoute } from "{{ runtime_module }}";
{% for module in imports %}
import * as {{ module.alias }} from "{{ module.specifier }}";
{% end %}

const routes = [
{{ body }}
];

export default routes;
"""

_INDENT = "  "


@dataclass(frozen=True, slots=True)
class ModuleImport:
    """A namespace import in the generated module."""

    alias: str
    specifier: str


def _create_environment() -> Environment:
    return Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)


def import_specifier(file: Path, output_dir: Path) -> str:
    """Relative ES module specifier for *file* as seen from *output_dir*."""
    relative = Path(os.path.relpath(file.with_suffix(".js"), output_dir)).as_posix()
    if not relative.startswith("."):
        relative = f"./{relative}"
    return relative


class _ModuleRenderer:
    """Collects imports while rendering the route tree expression."""

    __slots__ = ("_aliases", "_output_dir", "imports")

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir
        self._aliases: dict[Path, str] = {}
        self.imports: list[ModuleImport] = []

    def alias_for(self, module: ModuleRef | None, kind: str) -> str | None:
        if module is None or module.file is None:
            return None
        alias = self._aliases.get(module.file)
        if alias is None:
            alias = f"{kind}_{len(self.imports) + 1}"
            self._aliases[module.file] = alias
            self.imports.append(
                ModuleImport(alias=alias, specifier=import_specifier(module.file, self._output_dir))
            )
        return alias

    def render_routes(self, configs: Sequence[RouteConfig], depth: int) -> list[str]:
        lines: list[str] = []
        for config in configs:
            lines.extend(self.render_route(config, depth))
        return lines

    def render_route(self, config: RouteConfig, depth: int) -> list[str]:
        indent = _INDENT * depth
        modules: list[str] = []
        view = self.alias_for(config.view, "View")
        if view is not None:
            modules.append(f"view: {view}")
        layout = self.alias_for(config.layout, "Layout")
        if layout is not None:
            modules.append(f"layout: {layout}")
        modules_expr = "{ " + ", ".join(modules) + " }" if modules else "{}"
        head = f"{indent}createRoute({json.dumps(config.route)}, {modules_expr}"

        children = config.child_routes
        if not children:
            return [f"{head}),"]
        return [
            f"{head}, [",
            *self.render_routes(children, depth + 1),
            f"{indent}]),",
        ]


def render_routes_module(
    configs: Sequence[RouteConfig],
    *,
    output_dir: str | Path,
    runtime_module: str = "@fileroutes/runtime",
) -> str:
    """Render ``file-routes.ts`` for a normalized route tree."""
    renderer = _ModuleRenderer(Path(output_dir).resolve())
    body = "\n".join(renderer.render_routes(configs, 1))

    env = _create_environment()
    template = env.from_string(ROUTES_MODULE_TEMPLATE)
    return template.render(
        {
            "runtime_module": runtime_module,
            "imports": renderer.imports,
            "body": body,
        }
    )
