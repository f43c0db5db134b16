"""
Serialization layer: JSON import/export, structural validation and order backfilling.

Validation runs on raw parsed JSON and collects every problem; import never raises
for bad data. All functions are pure (no file I/O).
"""

from domain.serialization.exporter import export_taxonomy
from domain.serialization.importer import ImportResult, import_taxonomy
from domain.serialization.order_utils import initialize_order, normalize_order
from domain.serialization.schema import (
    ValidationErrorCode,
    ValidationIssue,
    ValidationResult,
    validate_taxonomy,
)

__all__ = [
    "import_taxonomy",
    "ImportResult",
    "export_taxonomy",
    "validate_taxonomy",
    "ValidationResult",
    "ValidationIssue",
    "ValidationErrorCode",
    "initialize_order",
    "normalize_order",
]
