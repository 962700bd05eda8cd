"""Export extraction from view and layout source modules.

Reads just enough of a ``.tsx``/``.ts``/``.jsx``/``.js`` module to find:

- ``export const config = { title: "..." }`` (with or without a type
  annotation, above or below the default export)
- ``export default function Name`` / ``export default class Name`` /
  ``export default Name;``

When no ``config.title`` is declared, the title is derived from the
default export's component name (``TwoFactorAuth`` -> ``Two Factor Auth``).
"""

import re
from typing import Any

# export const config = { ... }   /   export const config: ViewConfig = { ... }
_CONFIG_RE = re.compile(r"export\s+const\s+config\b[^=]*=\s*\{")

# title: 'Password'  (quotes: ' " `), matched on a body with string contents blanked
_TITLE_KEY_RE = re.compile(r"(?:^|[\s,{])title\s*:\s*(?=['\"`])")

_DEFAULT_DECL_RE = re.compile(
    r"export\s+default\s+(?:async\s+)?(?:function\s*\*?|class)\s+(?P<name>[A-Za-z_$][\w$]*)"
)
_DEFAULT_IDENT_RE = re.compile(
    r"export\s+default\s+(?P<name>[A-Za-z_$][\w$]*)\s*;?\s*$",
    re.MULTILINE,
)

# Split points in component names: aB, 0B, ABc
_WORD_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

_QUOTES = "'\"`"


def convert_component_name_to_title(name: str) -> str:
    """Turn a component name into a human-readable title.

    Examples::

        "About"                    -> "About"
        "TwoFactorAuth"            -> "Two Factor Auth"
        "Issue002378RequiredParam" -> "Issue002378 Required Param"
    """
    words = _WORD_BOUNDARY_RE.sub(" ", name).replace("_", " ")
    title = " ".join(words.split())
    return title[:1].upper() + title[1:]


def extract_exports(source: str) -> dict[str, Any]:
    """Extract the exports the route generator cares about.

    Returns a dict with ``default`` (component name) and ``title`` keys,
    each present only when found.
    """
    exports: dict[str, Any] = {}

    default_name = _find_default_name(source)
    if default_name is not None:
        exports["default"] = default_name

    title = _find_config_title(source)
    if title is None and default_name is not None:
        title = convert_component_name_to_title(default_name)
    if title:
        exports["title"] = title

    return exports


def _find_default_name(source: str) -> str | None:
    match = _DEFAULT_DECL_RE.search(source) or _DEFAULT_IDENT_RE.search(source)
    if match is None:
        return None
    return match.group("name")


def _find_config_title(source: str) -> str | None:
    """Return the top-level ``title`` of ``export const config``, if any."""
    match = _CONFIG_RE.search(source)
    if match is None:
        return None
    body = _top_level_object(source, match.end() - 1)
    key = _TITLE_KEY_RE.search(_mask_strings(body))
    if key is None:
        return None
    return _read_string(body, key.end())


def _top_level_object(source: str, start: int) -> str:
    """Return the object literal at *start* with nested objects blanked out.

    Only first-level keys survive, so ``menu: { title: ... }`` inside the
    config does not shadow the config's own title.
    """
    depth = 0
    quote: str | None = None
    escaped = False
    kept: list[str] = []
    for char in source[start:]:
        if quote is not None:
            if depth == 1:
                kept.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in _QUOTES:
            quote = char
            if depth == 1:
                kept.append(char)
            continue
        if char == "{":
            depth += 1
            if depth == 1:
                kept.append(char)
            continue
        if char == "}":
            depth -= 1
            if depth == 0:
                kept.append(char)
                break
            continue
        if depth == 1:
            kept.append(char)
    return "".join(kept)


def _mask_strings(body: str) -> str:
    """Blank the contents of string literals, keeping quotes and offsets.

    ``description: 'a title: "x"'`` must not look like a ``title`` key.
    """
    masked = list(body)
    quote: str | None = None
    escaped = False
    for i, char in enumerate(body):
        if quote is None:
            if char in _QUOTES:
                quote = char
        elif escaped:
            escaped = False
            masked[i] = " "
        elif char == "\\":
            escaped = True
            masked[i] = " "
        elif char == quote:
            quote = None
        else:
            masked[i] = " "
    return "".join(masked)


def _read_string(body: str, start: int) -> str:
    """Read the string literal whose opening quote is at *start*."""
    quote = body[start]
    chars: list[str] = []
    escaped = False
    for char in body[start + 1 :]:
        if escaped:
            chars.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == quote:
            break
        else:
            chars.append(char)
    return "".join(chars)
