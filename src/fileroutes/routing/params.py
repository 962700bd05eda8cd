"""Route segment classification.

Maps a raw segment to its route text and parameter kind::

    "about"      -> static
    ":user"      -> Required
    ":section?"  -> Optional
    "*"          -> Wildcard
"""

from fileroutes.errors import InvalidSegmentError
from fileroutes.routing.route import ParamType, Segment

WILDCARD = "*"
PARAM_PREFIX = ":"
OPTIONAL_SUFFIX = "?"


def classify_segment(segment: str) -> Segment:
    """Classify a raw path segment.

    The returned ``route`` keeps the marker syntax verbatim, so the
    parameter marker doubles as the key in ``params``.

    Raises ``InvalidSegmentError`` when ``:`` appears anywhere but as the
    leading character, or a parameter marker has no name.
    """
    if segment == WILDCARD:
        return Segment(route=WILDCARD, param_type=ParamType.Wildcard)

    if not segment.startswith(PARAM_PREFIX):
        if PARAM_PREFIX in segment:
            raise InvalidSegmentError(segment, "':' is only allowed as the leading marker")
        return Segment(route=segment)

    name = segment[len(PARAM_PREFIX) :]
    param_type = ParamType.Required
    if name.endswith(OPTIONAL_SUFFIX):
        name = name[: -len(OPTIONAL_SUFFIX)]
        param_type = ParamType.Optional

    if not name:
        raise InvalidSegmentError(segment, "parameter name is empty")
    if PARAM_PREFIX in name:
        raise InvalidSegmentError(segment, "':' is only allowed as the leading marker")
    if OPTIONAL_SUFFIX in name:
        raise InvalidSegmentError(segment, "'?' is only allowed at the end of a parameter")

    return Segment(route=segment, param_type=param_type, name=name)
