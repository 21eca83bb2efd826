"""Synthesis of readable operation ids from apiDoc endpoint metadata.

apiDoc names are frequently reused across unrelated endpoints (dozens of
endpoints are simply called "Details"). Names are classified as generic or
specific:

- generic names get the group and the full path prepended,
- specific names get the last two path segments prepended on deep URLs,
- endpoints without a name are identified by method and path.

Ids produced here are candidates; uniqueness is enforced by the ledger.
"""

import re
from collections.abc import Iterable

from nitrado_extractor.config import DEFAULT_GENERIC_NAMES
from nitrado_extractor.converter.paths import capitalize_first, pascal_segments, to_pascal_case

DEFAULT_GROUP = "Default"
MIN_SPECIFIC_NAME_LENGTH = 4

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def clean_name(name: str) -> str:
    """Strip every non-alphanumeric character from a declared name."""
    return _NON_ALNUM.sub("", name)


def is_generic_name(name: str, generic_names: Iterable[str] = DEFAULT_GENERIC_NAMES) -> bool:
    """
    Tell whether a cleaned name is too common to identify an operation.

    Example:
        >>> is_generic_name("GetUserProfile")
        True
        >>> is_generic_name("Backups")
        False
    """
    lowered = name.lower()
    if any(generic.lower() in lowered for generic in generic_names):
        return True
    return len(name) < MIN_SPECIFIC_NAME_LENGTH


def group_prefix(group: str | None) -> str:
    if not group or group == DEFAULT_GROUP:
        return ""
    return clean_name(to_pascal_case(group))


def generate_operation_id(
    method: str,
    path: str,
    name: str | None = None,
    group: str | None = None,
    generic_names: Iterable[str] = DEFAULT_GENERIC_NAMES,
) -> str:
    """
    Build a PascalCase operation id candidate for an endpoint.

    Args:
        method: HTTP method, any case
        path: URL path with ``:param`` or ``{param}`` markers
        name: Declared apiDoc name, if any
        group: Declared apiDoc group, if any
        generic_names: Vocabulary of names that need context

    Returns:
        The operation id candidate

    Example:
        >>> generate_operation_id("get", "/company/stats")
        'GetCompanyStats'
        >>> generate_operation_id(
        ...     "get", "/services/:id/gameservers/games/minecraft", "Details", "Game_Minecraft"
        ... )
        'GameMinecraftServicesIdGameserversGamesMinecraftDetails'
    """
    segments = pascal_segments(path or "")

    if not name or not name.strip():
        return to_pascal_case(method.lower()) + "".join(segments)

    cleaned = clean_name(name)

    if is_generic_name(cleaned, generic_names):
        return capitalize_first(group_prefix(group) + "".join(segments) + cleaned)

    if len(segments) > 2:
        return capitalize_first("".join(segments[-2:]) + cleaned)

    return cleaned
