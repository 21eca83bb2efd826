"""Module for loading apiDoc data and OpenAPI specification files."""

import json
import re
from pathlib import Path
from typing import Any

import requests
import yaml
from rich.console import Console

from nitrado_extractor.config import FileFormat

_DEFINE_PREFIX = re.compile(r"^define\(")
_DEFINE_SUFFIX = re.compile(r"\);?\s*$")

# Characters of context shown on each side of a JSON parse failure
_ERROR_CONTEXT = 100


class ApiDataParseError(ValueError):
    """Raised when the apiDoc payload cannot be decoded as JSON."""


def fetch_api_data(url: str, timeout: float = 30) -> str:
    """
    Download the raw apiDoc payload.

    Args:
        url: URL of the api_data.js document
        timeout: Request timeout in seconds

    Returns:
        The response body as text

    Raises:
        requests.HTTPError: If the server answers with an error status
        requests.RequestException: For connection problems and timeouts
    """
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.text


def strip_define_wrapper(text: str) -> str:
    """Remove the AMD ``define(...)`` wrapper apiDoc puts around its JSON."""
    return _DEFINE_SUFFIX.sub("", _DEFINE_PREFIX.sub("", text))


def _print_parse_error(error: json.JSONDecodeError, text: str, console: Console) -> None:
    pos = error.pos
    before = text[max(0, pos - _ERROR_CONTEXT) : pos]
    after = text[pos : pos + _ERROR_CONTEXT]
    console.print(
        f"Problematic area around position {pos}:\n...{before}[HERE]{after}...",
        markup=False,
    )


def parse_api_data(text: str, console: Console | None = None) -> Any:
    """
    Decode an unwrapped apiDoc payload.

    Args:
        text: JSON text with any define() wrapper already removed
        console: Optional Rich Console that receives the failing excerpt

    Returns:
        The decoded document

    Raises:
        ApiDataParseError: If the text is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        if console:
            _print_parse_error(e, text, console)
        raise ApiDataParseError(f"Failed to parse API data: {e}") from e


def extract_api_endpoints(data: Any) -> Any:
    """Return the endpoint list of an apiDoc document, or the data unchanged."""
    if isinstance(data, dict) and isinstance(data.get("api"), list):
        return data["api"]
    return data


def load_api_data(source: str, console: Console | None = None, timeout: float = 30) -> Any:
    """
    Load an apiDoc document from a URL or a local file.

    Args:
        source: http(s) URL or filesystem path
        console: Optional Rich Console for diagnostics
        timeout: Request timeout in seconds for URL sources

    Returns:
        The decoded document, normally of shape {"api": [...]}

    Raises:
        FileNotFoundError: If a path source doesn't exist
        ApiDataParseError: If the payload is not valid JSON
        requests.RequestException: If fetching a URL source fails
    """
    if source.startswith(("http://", "https://")):
        text = fetch_api_data(source, timeout=timeout)
    else:
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"API data file not found: {path}")
        text = path.read_text(encoding="utf-8")

    return parse_api_data(strip_define_wrapper(text), console=console)


_DOCUMENT_FORMATS = {
    ".json": FileFormat.JSON,
    ".yaml": FileFormat.YAML,
    ".yml": FileFormat.YAML,
}


def load_openapi_document(path: Path) -> tuple[Any, FileFormat]:
    """Read a generated (or third-party) OpenAPI document for validation.

    The format is chosen from the file extension; YAML is read with
    ``safe_load`` so a JSON document saved as .yaml also loads.

    Raises:
        FileNotFoundError: If there is no such document
        ValueError: If the extension is neither JSON nor YAML
    """
    if not path.exists():
        raise FileNotFoundError(f"OpenAPI document not found: {path}")

    file_format = _DOCUMENT_FORMATS.get(path.suffix.lower())
    if file_format is None:
        raise ValueError(f"Unsupported file format: {path.suffix}. Expected .json, .yaml or .yml")

    text = path.read_text(encoding="utf-8")
    if file_format == FileFormat.JSON:
        return json.loads(text), file_format
    return yaml.safe_load(text), file_format
