"""Lookup of apiDoc field groups under their alternative labels.

apiDoc files place declared fields under ``<section>.fields.<label>`` where
the label depends on how the source annotated them (``@apiParam`` groups
default to "Parameter", ``@apiSuccess`` to "Success 200", and so on). Each
kind of field is therefore looked up under an ordered tuple of labels.
"""

from typing import Any

QUERY_LABELS = ("Parameter", "Query")
BODY_LABELS = ("Body", "Request")
HEADER_LABELS = ("Header",)
SUCCESS_LABELS = ("Success 200", "Success")
ERROR_LABELS = ("Error 4xx", "Error")


def get_fields(endpoint: dict, section: str, labels: tuple[str, ...]) -> list[dict]:
    """
    Return the declared fields of one group of an endpoint.

    The first label that holds a list wins. Missing or misshapen sections
    and entries without a ``field`` name are treated as absent.

    Args:
        endpoint: The apiDoc endpoint record
        section: Top-level key, e.g. "parameter" or "success"
        labels: Accepted group labels in priority order

    Returns:
        List of field dicts, possibly empty
    """
    container: Any = endpoint.get(section)
    if not isinstance(container, dict):
        return []
    groups = container.get("fields")
    if not isinstance(groups, dict):
        return []

    for label in labels:
        fields = groups.get(label)
        if isinstance(fields, list):
            return [f for f in fields if isinstance(f, dict) and f.get("field")]

    return []
