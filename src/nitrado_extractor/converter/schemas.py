"""Response, request body, security and deprecation parts of an operation."""

from nitrado_extractor.converter.fields import (
    BODY_LABELS,
    ERROR_LABELS,
    SUCCESS_LABELS,
    get_fields,
)
from nitrado_extractor.converter.type_coercion import parse_parameter_type

JSON_MEDIA_TYPE = "application/json"
METHODS_WITH_BODY = ("post", "put", "patch")
SECURITY_SCHEME_NAME = "BearerAuth"

_STANDARD_RESPONSES = {
    "401": "Unauthorized",
    "403": "Forbidden",
    "404": "Not Found",
    "500": "Internal Server Error",
}


def _json_content(schema: dict) -> dict:
    return {JSON_MEDIA_TYPE: {"schema": schema}}


def build_properties(fields: list[dict]) -> dict:
    """Map declared fields to schema properties carrying their descriptions."""
    properties = {}
    for field in fields:
        properties[field["field"]] = {
            **parse_parameter_type(field.get("type")),
            "description": field.get("description") or "",
        }
    return properties


def build_success_response(endpoint: dict) -> dict:
    """The 200 response; an open object schema unless success fields are declared."""
    schema: dict = {"type": "object"}
    fields = get_fields(endpoint, "success", SUCCESS_LABELS)
    if fields:
        schema["properties"] = build_properties(fields)

    return {"description": "Successful operation", "content": _json_content(schema)}


def build_error_response(endpoint: dict) -> dict:
    """The 400 response keyed by status, or an empty dict without error fields."""
    if not get_fields(endpoint, "error", ERROR_LABELS):
        return {}

    schema = {
        "type": "object",
        "properties": {
            "error": {
                "type": "object",
                "properties": {"message": {"type": "string"}},
            }
        },
    }
    return {"400": {"description": "Bad Request", "content": _json_content(schema)}}


def build_standard_responses() -> dict:
    return {status: {"description": text} for status, text in _STANDARD_RESPONSES.items()}


def build_responses(endpoint: dict) -> dict:
    """
    Assemble the responses object of an operation.

    Always contains 200, 401, 403, 404 and 500; 400 is added only when the
    endpoint declares error fields.
    """
    return {
        "200": build_success_response(endpoint),
        **build_error_response(endpoint),
        **build_standard_responses(),
    }


def build_request_body(endpoint: dict, method: str) -> dict | None:
    """
    Build the JSON request body of a POST, PUT or PATCH operation.

    Args:
        endpoint: The apiDoc endpoint record
        method: Lowercase HTTP method

    Returns:
        The requestBody object, or None when the method takes no body or no
        body fields are declared. The body is required when any of its
        fields is.
    """
    if method not in METHODS_WITH_BODY:
        return None

    fields = get_fields(endpoint, "parameter", BODY_LABELS)
    if not fields:
        return None

    required = [field["field"] for field in fields if not field.get("optional", False)]
    schema: dict = {"type": "object", "properties": build_properties(fields)}
    if required:
        schema["required"] = required

    return {"required": bool(required), "content": _json_content(schema)}


def build_security(endpoint: dict) -> list[dict] | None:
    """Bearer auth requirement for every endpoint not marked public."""
    if endpoint.get("public"):
        return None
    return [{SECURITY_SCHEME_NAME: []}]


def apply_deprecation(endpoint: dict, operation: dict) -> None:
    """Flag the operation deprecated and append the deprecation note, if any."""
    deprecated = endpoint.get("deprecated")
    if not deprecated:
        return

    operation["deprecated"] = True
    content = deprecated.get("content") if isinstance(deprecated, dict) else None
    if content:
        operation["description"] += f"\n\n**Deprecated:** {content}"
