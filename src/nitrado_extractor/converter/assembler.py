"""Conversion of an apiDoc endpoint list into an OpenAPI document.

The converter is idle until an apiDoc document of shape ``{"api": [...]}``
is loaded. Each ``convert()`` call starts from an empty operation id ledger
and builds a new document, so repeated calls on the same instance yield the
same result and separate instances never share state.
"""

from rich.console import Console

from nitrado_extractor.config import ConverterConfig
from nitrado_extractor.converter.ledger import OperationIdLedger
from nitrado_extractor.converter.operation_id import DEFAULT_GROUP, generate_operation_id
from nitrado_extractor.converter.parameters import build_parameters
from nitrado_extractor.converter.paths import normalize_path
from nitrado_extractor.converter.schemas import (
    SECURITY_SCHEME_NAME,
    apply_deprecation,
    build_request_body,
    build_responses,
    build_security,
)

OPENAPI_VERSION = "3.1.1"


class NoApiDataError(ValueError):
    """Raised when converting without a loaded apiDoc endpoint list."""


def endpoint_method(endpoint: dict) -> str:
    """Lowercase HTTP method of an endpoint, defaulting to GET."""
    return (endpoint.get("type") or endpoint.get("method") or "get").lower()


class ApiDocConverter:
    """Builds OpenAPI documents from apiDoc endpoint records."""

    def __init__(self, config: ConverterConfig | None = None, console: Console | None = None):
        """Initialize the converter.

        Args:
            config: Document metadata and heuristics; defaults apply when omitted
            console: Optional Rich Console receiving diagnostics
        """
        self.config = config or ConverterConfig()
        self.console = console
        self.api_data: dict | None = None
        self.ledger = OperationIdLedger()
        self.skipped: list[dict] = []

    @property
    def ready(self) -> bool:
        return self.api_data is not None

    def _log(self, message: str) -> None:
        if self.console:
            self.console.print(message)

    def load(self, document) -> bool:
        """
        Make an apiDoc document available for conversion.

        Args:
            document: Decoded apiDoc data, expected as {"api": [...]}

        Returns:
            True if the document holds an endpoint list; otherwise the
            converter is left without data and False is returned
        """
        if isinstance(document, dict) and isinstance(document.get("api"), list):
            self.api_data = document
            self._log(f"[dim]Found {len(document['api'])} API endpoints[/dim]")
            return True

        self.api_data = None
        return False

    def convert(self) -> dict:
        """
        Convert the loaded endpoints into an OpenAPI document.

        Returns:
            The OpenAPI document as a dictionary

        Raises:
            NoApiDataError: If no endpoint list has been loaded
        """
        if not self.ready:
            raise NoApiDataError("No API data available. Please load data first.")

        self.ledger.reset()
        self.skipped = []

        spec = self.create_base_spec()
        groups = self.group_endpoints()
        self._log(f"[dim]Found {len(groups)} API groups[/dim]")

        for endpoint in self.api_data["api"]:
            self.convert_endpoint(endpoint, spec)

        return spec

    def create_base_spec(self) -> dict:
        """Document skeleton with metadata, servers and empty paths."""
        config = self.config
        return {
            "openapi": OPENAPI_VERSION,
            "info": {
                "title": config.api_title,
                "description": config.api_description,
                "version": config.api_version,
                "contact": {"name": config.contact_name, "url": config.contact_url},
                "license": {"name": config.license_name, "url": config.license_url},
            },
            "servers": [{"url": config.server_url, "description": config.server_description}],
            "paths": {},
            "components": {
                "schemas": {},
                "securitySchemes": {
                    SECURITY_SCHEME_NAME: {
                        "type": "http",
                        "scheme": "bearer",
                        "description": "Bearer token authentication",
                    }
                },
            },
        }

    def group_endpoints(self) -> dict[str, list[dict]]:
        """Endpoints keyed by their group, in first-seen order."""
        groups: dict[str, list[dict]] = {}
        for endpoint in self.api_data["api"]:
            groups.setdefault(endpoint.get("group") or DEFAULT_GROUP, []).append(endpoint)
        return groups

    def convert_endpoint(self, endpoint: dict, spec: dict) -> None:
        """Add one endpoint to the document; endpoints without a URL are skipped."""
        url = endpoint.get("url")
        if not url:
            name = endpoint.get("name") or "Unknown"
            self._log(f"[yellow]![/yellow] Skipping endpoint without URL: {name}")
            self.skipped.append(endpoint)
            return

        path, _ = normalize_path(url)
        method = endpoint_method(endpoint)

        # A later endpoint with the same path and method replaces the earlier one
        spec["paths"].setdefault(path, {})[method] = self.build_operation(endpoint, path, method)

    def build_operation(self, endpoint: dict, path: str, method: str) -> dict:
        """
        Build the OpenAPI operation object for an endpoint.

        Args:
            endpoint: The apiDoc endpoint record
            path: Normalized OpenAPI path
            method: Lowercase HTTP method

        Returns:
            The operation object with a ledger-reserved operationId
        """
        candidate = generate_operation_id(
            method,
            path,
            name=endpoint.get("name"),
            group=endpoint.get("group"),
            generic_names=self.config.generic_names,
        )

        operation = {
            "summary": endpoint.get("title") or endpoint.get("name") or f"{method.upper()} {path}",
            "description": endpoint.get("description") or "",
            "operationId": self.ledger.reserve(candidate),
            "tags": [endpoint.get("group") or DEFAULT_GROUP],
            "parameters": build_parameters(endpoint, path),
            "responses": build_responses(endpoint),
        }

        apply_deprecation(endpoint, operation)

        request_body = build_request_body(endpoint, method)
        if request_body:
            operation["requestBody"] = request_body

        security = build_security(endpoint)
        if security:
            operation["security"] = security

        return operation
