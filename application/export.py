"""Turning a selection into the keyword string, and bundling project packs."""

import logging
from collections.abc import Collection

from domain.serialization import export_taxonomy
from domain.taxonomy import (
    Taxonomy,
    TaxonomyIndex,
    build_project_pack,
    compute_export_set,
    format_for_export,
    sort_by_user_order,
)
from infrastructure.config import CoreConfig

logger = logging.getLogger(__name__)


def build_export_text(
    index: TaxonomyIndex | None,
    selected_ids: Collection[str],
    cfg: CoreConfig | None = None,
) -> str:
    """
    Export string for a selection: export set -> tree order -> joined labels.

    Returns "" when there is no index or nothing is selected.
    """
    if index is None or not selected_ids:
        return ""
    cfg = cfg or CoreConfig()

    export_set = compute_export_set(index, selected_ids, include_ancestors=cfg.export.include_ancestors)
    sorted_ids = sort_by_user_order(index, export_set)
    text = format_for_export(index, sorted_ids, cfg.export.separator)

    logger.debug("Export text for %d selected ids: %d labels", len(selected_ids), len(sorted_ids))
    return text


def export_taxonomy_json(taxonomy: Taxonomy, cfg: CoreConfig | None = None) -> str:
    """Serialize a taxonomy with the configured JSON options."""
    cfg = cfg or CoreConfig()
    return export_taxonomy(
        taxonomy,
        pretty=cfg.serialization.pretty,
        indent=cfg.serialization.indent,
        include_meta_timestamp=cfg.serialization.include_meta_timestamp,
    )


def export_project_pack_json(taxonomy: Taxonomy, cfg: CoreConfig | None = None) -> str:
    """Serialize the taxonomy with its extensions filled in as a project pack."""
    return export_taxonomy_json(build_project_pack(taxonomy), cfg)
