"""Mapping of free-text apiDoc type tokens to OpenAPI schema primitives.

apiDoc types are arbitrary strings ("Integer", "String[]", "Boolean",
"Object"). They are matched case-insensitively by substring against a fixed
table; the first table key found in the token wins. The mapping is lossy:
numeric subtypes, array item types and enums are not recovered.
"""

from collections.abc import Callable

_TYPE_TABLE: list[tuple[str, Callable[[], dict]]] = [
    ("string", lambda: {"type": "string"}),
    ("number", lambda: {"type": "integer"}),
    ("integer", lambda: {"type": "integer"}),
    ("int", lambda: {"type": "integer"}),
    ("boolean", lambda: {"type": "boolean"}),
    ("bool", lambda: {"type": "boolean"}),
    ("array", lambda: {"type": "array", "items": {"type": "string"}}),
    ("object", lambda: {"type": "object"}),
]


def parse_parameter_type(type_token: str | None) -> dict:
    """
    Convert an apiDoc type token into a fresh OpenAPI schema dict.

    Args:
        type_token: The declared type, e.g. "Integer" or "String[]"

    Returns:
        Schema dict; {"type": "string"} for unknown, empty or missing tokens

    Example:
        >>> parse_parameter_type("Integer")
        {'type': 'integer'}
        >>> parse_parameter_type("whatever")
        {'type': 'string'}
    """
    if not type_token or not isinstance(type_token, str):
        return {"type": "string"}

    normalized = type_token.lower()
    for key, factory in _TYPE_TABLE:
        if key in normalized:
            return factory()

    return {"type": "string"}
