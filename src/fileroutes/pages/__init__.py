"""Filesystem-based route discovery with layout merging.

The ``views/`` directory structure defines URL paths, layouts, and titles.

Usage::

    from fileroutes.pages import collect_routes
    from fileroutes.routing.serialize import create_view_config_json

    json_text = create_view_config_json(collect_routes("frontend/views"))

Conventions:

    views/
      @layout.tsx          # Root layout
      about.tsx            # about
      profile/
        @index.tsx         # profile (index route "")
        friends/
          @layout.tsx      # Layout wrapping friends/*
          list.tsx         # profile/friends/list
          {user}.tsx       # profile/friends/:user
      test/
        {{optional}}.tsx   # test/:optional?
        {...wildcard}.tsx  # test/*
"""

from fileroutes.pages.discovery import collect_routes, convert_fs_name_to_segment
from fileroutes.pages.exports import convert_component_name_to_title, extract_exports

__all__ = [
    "collect_routes",
    "convert_component_name_to_title",
    "convert_fs_name_to_segment",
    "extract_exports",
]
