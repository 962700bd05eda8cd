"""Generator configuration.

GeneratorConfig is a frozen dataclass shared by discovery, the generator and
the CLI. CLI flags produce a modified copy via ``dataclasses.replace``.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Route generator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = GeneratorConfig(views_dir="src/main/frontend/views", json_indent=0)
    """

    # Input
    views_dir: str | Path = "frontend/views"
    extensions: tuple[str, ...] = (".tsx", ".jsx", ".ts", ".js")
    layout_name: str = "@layout"
    index_name: str = "@index"

    # Output
    output_dir: str | Path = "frontend/generated"
    json_file: str = "file-routes.json"
    routes_file: str = "file-routes.ts"
    json_indent: int | None = 2
    generate_routes_module: bool = True

    # Runtime module imported by the generated file-routes.ts
    runtime_module: str = "@fileroutes/runtime"

    # Logging
    log_level: str = "info"
