"""Path normalization and identifier casing helpers."""

import re

_COLON_PARAM = re.compile(r":(\w+)")
_BRACE_PARAM = re.compile(r"\{(\w+)\}")
_SNAKE_BOUNDARY = re.compile(r"_([a-z])")
_LEADING_LOWER = re.compile(r"^[a-z]")


def normalize_path(url: str) -> tuple[str, list[str]]:
    """
    Rewrite ``:param`` markers into OpenAPI ``{param}`` templates.

    Args:
        url: apiDoc URL such as "/services/:id/gameservers"

    Returns:
        A tuple of (normalized_path, parameter_names) with names in the
        order they appear in the URL

    Example:
        >>> normalize_path("/domain/:domain/service")
        ('/domain/{domain}/service', ['domain'])
    """
    names = _COLON_PARAM.findall(url)
    return _COLON_PARAM.sub(r"{\1}", url), names


def extract_path_parameters(path: str) -> list[str]:
    """Return the ``{param}`` names of a normalized path, left to right."""
    return _BRACE_PARAM.findall(path)


def capitalize_first(value: str) -> str:
    """Uppercase the first character if it is a lowercase ASCII letter."""
    return _LEADING_LOWER.sub(lambda m: m.group(0).upper(), value)


def to_pascal_case(value: str) -> str:
    """
    Convert a snake_case token to PascalCase.

    Each ``_x`` pair with a lowercase letter becomes ``X``; other characters
    are left as they are.

    Example:
        >>> to_pascal_case("service_id")
        'ServiceId'
    """
    return capitalize_first(_SNAKE_BOUNDARY.sub(lambda m: m.group(1).upper(), value))


def split_path(path: str) -> list[str]:
    """Split a URL path into its non-empty segments."""
    return [part for part in path.split("/") if part]


def _segment_name(segment: str) -> str:
    if segment.startswith(":"):
        return segment[1:]
    if segment.startswith("{") and segment.endswith("}"):
        return segment[1:-1]
    return segment


def pascal_segments(path: str) -> list[str]:
    """
    PascalCase every segment of a path.

    Parameter segments (``:name`` or ``{name}``) are cased from their name
    without the marker.

    Example:
        >>> pascal_segments("/services/:service_id/users")
        ['Services', 'ServiceId', 'Users']
    """
    return [to_pascal_case(_segment_name(segment)) for segment in split_path(path)]
