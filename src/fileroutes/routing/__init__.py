"""Routing — route-tree construction from discovered view metadata.

Segments are classified, layouts and views merged per directory, and the
resulting immutable tree serialized for the client-side router.
"""
