"""Checks for generated OpenAPI documents."""

from dataclasses import dataclass, field

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


@dataclass
class DuplicateOperationId:
    """An operation whose id was already used by an earlier operation."""

    operation_id: str
    path: str
    method: str


@dataclass
class OperationIdReport:
    """Result of scanning a document for operation ids."""

    total_paths: int = 0
    operation_ids: list[str] = field(default_factory=list)
    duplicates: list[DuplicateOperationId] = field(default_factory=list)

    @property
    def total_operations(self) -> int:
        return len(self.operation_ids)

    @property
    def ok(self) -> bool:
        return not self.duplicates


def validate_operation_ids(spec: dict) -> OperationIdReport:
    """
    Find operation ids used by more than one operation.

    Operations without an ``operationId`` are ignored. Only the second and
    later uses of an id are reported, each with its path and upper-cased
    method.

    Args:
        spec: The OpenAPI document as a dictionary

    Returns:
        OperationIdReport with unique ids in first-seen order
    """
    paths = spec.get("paths") or {}
    report = OperationIdReport(total_paths=len(paths))
    seen: set[str] = set()

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        for method, operation in path_item.items():
            if method not in HTTP_METHODS or not isinstance(operation, dict):
                continue
            operation_id = operation.get("operationId")
            if not operation_id:
                continue
            if operation_id in seen:
                report.duplicates.append(
                    DuplicateOperationId(operation_id, path, method.upper())
                )
            else:
                seen.add(operation_id)
                report.operation_ids.append(operation_id)

    return report
