"""Construction of OpenAPI parameter objects for an endpoint."""

from nitrado_extractor.converter.fields import HEADER_LABELS, QUERY_LABELS, get_fields
from nitrado_extractor.converter.paths import extract_path_parameters
from nitrado_extractor.converter.type_coercion import parse_parameter_type


def build_path_parameters(path: str) -> list[dict]:
    """One required string parameter per ``{param}`` in a normalized path."""
    return [
        {
            "name": name,
            "in": "path",
            "required": True,
            "schema": {"type": "string"},
            "description": f"The {name} parameter",
        }
        for name in extract_path_parameters(path)
    ]


def build_query_parameters(endpoint: dict) -> list[dict]:
    """Query parameters from the endpoint's Parameter/Query fields."""
    return [
        {
            "name": field["field"],
            "in": "query",
            "required": not field.get("optional", False),
            "schema": parse_parameter_type(field.get("type")),
            "description": field.get("description") or "",
        }
        for field in get_fields(endpoint, "parameter", QUERY_LABELS)
    ]


def build_header_parameters(endpoint: dict) -> list[dict]:
    """Header parameters from the endpoint's Header fields, always strings."""
    return [
        {
            "name": field["field"],
            "in": "header",
            "required": not field.get("optional", False),
            "schema": {"type": "string"},
            "description": field.get("description") or "",
        }
        for field in get_fields(endpoint, "header", HEADER_LABELS)
    ]


def build_parameters(endpoint: dict, path: str) -> list[dict]:
    """
    Collect every parameter of an operation.

    Path parameters come first in URL order, followed by query and then
    header parameters in declaration order.

    Args:
        endpoint: The apiDoc endpoint record
        path: The normalized OpenAPI path of the endpoint

    Returns:
        List of OpenAPI parameter objects
    """
    return [
        *build_path_parameters(path),
        *build_query_parameters(endpoint),
        *build_header_parameters(endpoint),
    ]
