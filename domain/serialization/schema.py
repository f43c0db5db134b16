"""Structural validation of raw (parsed JSON) taxonomy data."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from domain.taxonomy.models import SCHEMA_VERSION


class ValidationErrorCode(str, Enum):
    """Machine-readable validation error codes."""

    INVALID_TYPE = "INVALID_TYPE"
    MISSING_FIELD = "MISSING_FIELD"
    DUPLICATE_ID = "DUPLICATE_ID"
    ORPHAN_NODE = "ORPHAN_NODE"
    FORBIDDEN_CHAR = "FORBIDDEN_CHAR"
    INVALID_ORDER = "INVALID_ORDER"
    INVALID_KIND = "INVALID_KIND"
    CIRCULAR_REF = "CIRCULAR_REF"
    INVALID_SCHEMA_VERSION = "INVALID_SCHEMA_VERSION"
    TAG_HAS_CHILDREN = "TAG_HAS_CHILDREN"


class ValidationIssue(BaseModel):
    """One problem found in taxonomy data."""

    path: str = Field(..., description="Location of the problem, e.g. 'nodes[3].label'.")
    message: str
    code: ValidationErrorCode

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class ValidationResult(BaseModel):
    valid: bool
    errors: list[ValidationIssue] = Field(default_factory=list)


def _major_minor(version: str) -> tuple[int, int] | None:
    parts = version.split(".")
    if len(parts) < 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _check_schema_version(obj: dict[str, Any], errors: list[ValidationIssue]) -> None:
    version = obj.get("schemaVersion")
    if not version:
        errors.append(
            ValidationIssue(
                path="schemaVersion",
                message="Missing schemaVersion",
                code=ValidationErrorCode.MISSING_FIELD,
            )
        )
        return
    if not isinstance(version, str):
        errors.append(
            ValidationIssue(
                path="schemaVersion",
                message="schemaVersion must be a string",
                code=ValidationErrorCode.INVALID_TYPE,
            )
        )
        return
    # Patch-level differences are tolerated
    if _major_minor(version) != _major_minor(SCHEMA_VERSION):
        errors.append(
            ValidationIssue(
                path="schemaVersion",
                message=f"Incompatible schema version: {version}, expected {SCHEMA_VERSION}",
                code=ValidationErrorCode.INVALID_SCHEMA_VERSION,
            )
        )


def _check_node(
    n: dict[str, Any],
    path: str,
    seen_ids: set[str],
    errors: list[ValidationIssue],
) -> None:
    if not isinstance(n.get("label"), str):
        errors.append(
            ValidationIssue(
                path=f"{path}.label",
                message="label must be a string",
                code=ValidationErrorCode.MISSING_FIELD,
            )
        )

    if n["id"] in seen_ids:
        errors.append(
            ValidationIssue(
                path=f"{path}.id",
                message=f"Duplicate node ID: {n['id']}",
                code=ValidationErrorCode.DUPLICATE_ID,
            )
        )
    else:
        seen_ids.add(n["id"])

    if "parentId" not in n or (n["parentId"] is not None and not isinstance(n["parentId"], str)):
        errors.append(
            ValidationIssue(
                path=f"{path}.parentId",
                message="parentId must be null or a string",
                code=ValidationErrorCode.INVALID_TYPE,
            )
        )

    if n.get("kind") not in ("folder", "tag"):
        errors.append(
            ValidationIssue(
                path=f"{path}.kind",
                message='kind must be "folder" or "tag"',
                code=ValidationErrorCode.INVALID_KIND,
            )
        )

    if n.get("export") is not None and not isinstance(n["export"], bool):
        errors.append(
            ValidationIssue(
                path=f"{path}.export",
                message="export must be a boolean",
                code=ValidationErrorCode.INVALID_TYPE,
            )
        )

    # Missing order is allowed; import backfills it
    if "order" in n and not _is_integer(n["order"]):
        errors.append(
            ValidationIssue(
                path=f"{path}.order",
                message="order must be an integer",
                code=ValidationErrorCode.INVALID_ORDER,
            )
        )

    if isinstance(n.get("label"), str) and "," in n["label"]:
        errors.append(
            ValidationIssue(
                path=f"{path}.label",
                message="label must not contain comma",
                code=ValidationErrorCode.FORBIDDEN_CHAR,
            )
        )


def _parent_of(node: dict[str, Any]) -> str | None:
    parent = node.get("parentId")
    return parent if isinstance(parent, str) else None


def _check_references(node_map: dict[str, dict[str, Any]], errors: list[ValidationIssue]) -> None:
    for node_id, node in node_map.items():
        parent = _parent_of(node)
        if parent is not None and parent not in node_map:
            errors.append(
                ValidationIssue(
                    path=f"nodes[{node_id}].parentId",
                    message=f'Orphan node: parentId "{parent}" does not exist',
                    code=ValidationErrorCode.ORPHAN_NODE,
                )
            )

    for start_id in node_map:
        visited: set[str] = set()
        current_id: str | None = start_id
        while current_id is not None:
            if current_id in visited:
                errors.append(
                    ValidationIssue(
                        path=f"nodes[{start_id}]",
                        message=f"Circular reference detected involving node: {current_id}",
                        code=ValidationErrorCode.CIRCULAR_REF,
                    )
                )
                break
            visited.add(current_id)
            node = node_map.get(current_id)
            current_id = _parent_of(node) if node is not None else None


def _check_tag_leaf(node_map: dict[str, dict[str, Any]], errors: list[ValidationIssue]) -> None:
    children_of: dict[str | None, list[str]] = {}
    for node_id, node in node_map.items():
        children_of.setdefault(_parent_of(node), []).append(node_id)

    # One error per child so each violation can be located
    for node_id, node in node_map.items():
        if node.get("kind") != "tag":
            continue
        for child_id in children_of.get(node_id, []):
            child_label = node_map[child_id].get("label", "(unknown)")
            errors.append(
                ValidationIssue(
                    path=f"nodes[{child_id}]",
                    message=(
                        f'Node "{child_label}" (id: {child_id}) has parent tag "{node.get("label")}" '
                        f"(id: {node_id}). Tags cannot have children. Either change parent to a folder, "
                        "or change parent's kind to 'folder'."
                    ),
                    code=ValidationErrorCode.TAG_HAS_CHILDREN,
                )
            )


def validate_taxonomy(data: Any, *, enforce_tag_leaf: bool = True) -> ValidationResult:
    """
    Validate parsed taxonomy data.

    All problems are collected in one pass. Checking stops early only when the
    top-level shape makes further checks meaningless (not an object, no node list).

    Checks:
    - schemaVersion present and major.minor-compatible with SCHEMA_VERSION
    - nodes present and a list of objects
    - id non-empty and unique, label a string without commas
    - parentId null or a string that resolves to an existing node
    - kind is "folder" or "tag", order (if present) is an integer
    - export (if present and not null) is a boolean
    - no cycles in any parent chain
    - optionally (enforce_tag_leaf), no node has a tag as its parent

    Args:
        data: Output of json.loads (or an equivalent dict)
        enforce_tag_leaf: Report TAG_HAS_CHILDREN for every child of a tag

    Returns:
        ValidationResult with all issues found
    """
    errors: list[ValidationIssue] = []

    if not isinstance(data, dict):
        errors.append(
            ValidationIssue(path="", message="Taxonomy must be an object", code=ValidationErrorCode.INVALID_TYPE)
        )
        return ValidationResult(valid=False, errors=errors)

    _check_schema_version(data, errors)

    nodes = data.get("nodes")
    if nodes is None:
        errors.append(
            ValidationIssue(path="nodes", message="Missing nodes array", code=ValidationErrorCode.MISSING_FIELD)
        )
        return ValidationResult(valid=False, errors=errors)
    if not isinstance(nodes, list):
        errors.append(
            ValidationIssue(path="nodes", message="nodes must be an array", code=ValidationErrorCode.INVALID_TYPE)
        )
        return ValidationResult(valid=False, errors=errors)

    seen_ids: set[str] = set()
    node_map: dict[str, dict[str, Any]] = {}

    for i, node in enumerate(nodes):
        path = f"nodes[{i}]"
        if not isinstance(node, dict):
            errors.append(
                ValidationIssue(path=path, message="Node must be an object", code=ValidationErrorCode.INVALID_TYPE)
            )
            continue
        if not isinstance(node.get("id"), str) or not node["id"]:
            errors.append(
                ValidationIssue(
                    path=f"{path}.id",
                    message="id must be a non-empty string",
                    code=ValidationErrorCode.MISSING_FIELD,
                )
            )
            continue

        _check_node(node, path, seen_ids, errors)
        node_map[node["id"]] = node

    _check_references(node_map, errors)

    if enforce_tag_leaf:
        _check_tag_leaf(node_map, errors)

    return ValidationResult(valid=not errors, errors=errors)
