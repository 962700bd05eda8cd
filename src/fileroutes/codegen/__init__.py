"""Code generation for the client runtime (``file-routes.ts``)."""

from fileroutes.codegen.routes_ts import render_routes_module

__all__ = ["render_routes_module"]
