"""Parse, validate and normalize a taxonomy JSON document."""

import json
import logging
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from domain.serialization.order_utils import initialize_order
from domain.serialization.schema import ValidationErrorCode, ValidationIssue, validate_taxonomy
from domain.taxonomy.models import SCHEMA_VERSION, Taxonomy

logger = logging.getLogger(__name__)


class ImportResult(BaseModel):
    """Outcome of `import_taxonomy`; exactly one of taxonomy/errors is meaningful."""

    success: bool
    taxonomy: Taxonomy | None = None
    errors: list[ValidationIssue] = Field(default_factory=list)


def _loc_to_path(loc: tuple[Any, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def _issues_from_pydantic(exc: PydanticValidationError) -> list[ValidationIssue]:
    return [
        ValidationIssue(
            path=_loc_to_path(tuple(err["loc"])),
            message=err["msg"],
            code=ValidationErrorCode.INVALID_TYPE,
        )
        for err in exc.errors()
    ]


def import_taxonomy(json_string: str, *, enforce_tag_leaf: bool = False) -> ImportResult:
    """
    Import a taxonomy from a JSON string.

    Steps:
    1. Parse JSON
    2. Validate structure (all problems collected)
    3. Build the pydantic Taxonomy, defaulting schemaVersion
    4. Backfill missing `order` values by sibling position

    Data problems never raise; they are returned in `ImportResult.errors`.

    The tag-leaf rule is off by default, unlike `validate_taxonomy` and the web editor's
    `importTaxonomy` (tag-core), which both enforce it. Taxonomies where tags carry sub-tags
    (e.g. 丝袜 -> 黑丝) must import; pass `enforce_tag_leaf=True` for the editor's behavior.

    Args:
        json_string: Taxonomy JSON document
        enforce_tag_leaf: Reject tags that have children

    Returns:
        ImportResult with the taxonomy on success, errors otherwise
    """
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        return ImportResult(
            success=False,
            errors=[
                ValidationIssue(
                    path="",
                    message=f"Invalid JSON: {e}",
                    code=ValidationErrorCode.INVALID_TYPE,
                )
            ],
        )

    validation = validate_taxonomy(data, enforce_tag_leaf=enforce_tag_leaf)
    if not validation.valid:
        return ImportResult(success=False, errors=validation.errors)

    try:
        taxonomy = Taxonomy.model_validate(data)
    except PydanticValidationError as e:
        return ImportResult(success=False, errors=_issues_from_pydantic(e))

    if not taxonomy.schema_version:
        taxonomy = taxonomy.model_copy(update={"schema_version": SCHEMA_VERSION})

    taxonomy = initialize_order(taxonomy)
    logger.debug("Imported taxonomy: %d nodes", len(taxonomy.nodes))

    return ImportResult(success=True, taxonomy=taxonomy)
