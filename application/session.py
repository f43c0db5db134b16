"""Loading a taxonomy and building its index in one step."""

import logging

from pydantic import BaseModel, ConfigDict, Field

from domain.serialization import ValidationIssue, import_taxonomy, validate_taxonomy
from domain.taxonomy import Taxonomy, TaxonomyIndex, build_index
from infrastructure.config import CoreConfig
from infrastructure.observability import set_log_context

logger = logging.getLogger(__name__)


class LoadedTaxonomy(BaseModel):
    """A taxonomy together with the index built from it, or the reasons it was rejected."""

    model_config = ConfigDict(frozen=True)

    taxonomy: Taxonomy | None = None
    index: TaxonomyIndex | None = None
    errors: list[ValidationIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.index is not None and not self.errors

    def error_summary(self) -> str:
        """Errors as one `path: message; ...` line, for display."""
        return "; ".join(str(e) for e in self.errors) or "Unknown error"


def open_taxonomy(json_string: str, cfg: CoreConfig | None = None) -> LoadedTaxonomy:
    """
    Import a taxonomy JSON document and build its index.

    On failure nothing is built; the validation errors are returned and logged.
    """
    cfg = cfg or CoreConfig()
    set_log_context(operation="import")

    result = import_taxonomy(json_string, enforce_tag_leaf=cfg.validation.enforce_tag_leaf)
    if not result.success or result.taxonomy is None:
        loaded = LoadedTaxonomy(errors=result.errors)
        logger.warning("Import validation errors (%d): %s", len(result.errors), loaded.error_summary())
        return loaded

    set_log_context(taxonomy=result.taxonomy)
    index = build_index(result.taxonomy)
    logger.info("Taxonomy loaded: %d nodes, %d root nodes", len(index.by_id), len(index.children_of.get(None, ())))
    return LoadedTaxonomy(taxonomy=result.taxonomy, index=index)


def replace_taxonomy(taxonomy: Taxonomy) -> LoadedTaxonomy:
    """Adopt an already-trusted taxonomy (e.g. after an edit) and rebuild its index."""
    set_log_context(taxonomy=taxonomy, operation="replace")
    return LoadedTaxonomy(taxonomy=taxonomy, index=build_index(taxonomy))


def rehydrate_taxonomy(taxonomy: Taxonomy, cfg: CoreConfig | None = None) -> LoadedTaxonomy:
    """
    Re-check a cached taxonomy that did not come through `open_taxonomy`.

    The index is built only when the taxonomy still validates; otherwise the
    errors are returned so the caller can ask for a re-import.
    """
    cfg = cfg or CoreConfig()
    set_log_context(taxonomy=taxonomy, operation="rehydrate")

    validation = validate_taxonomy(taxonomy.to_json_dict(), enforce_tag_leaf=cfg.validation.enforce_tag_leaf)
    if not validation.valid:
        logger.warning(
            "Cached taxonomy has %d validation error(s); consider re-importing: %s",
            len(validation.errors),
            [f"{e.code.value}: {e.message}" for e in validation.errors],
        )
        return LoadedTaxonomy(taxonomy=taxonomy, errors=validation.errors)

    return LoadedTaxonomy(taxonomy=taxonomy, index=build_index(taxonomy))
