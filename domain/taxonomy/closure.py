"""Ancestor closure and export-set computation."""

import logging
from collections.abc import Iterable

from domain.taxonomy.models import TaxonomyIndex, should_export

logger = logging.getLogger(__name__)


def compute_closure(index: TaxonomyIndex, selected_ids: Iterable[str]) -> set[str]:
    """
    Selected ids plus all of their ancestors up to the root.

    Descendants of a selected node are never added: selecting a tag that has
    children selects only that tag.

    Args:
        index: The TaxonomyIndex
        selected_ids: User-selected node ids

    Returns:
        Set of ids in the closure
    """
    closure: set[str] = set()

    for node_id in selected_ids:
        current_id: str | None = node_id
        while current_id is not None:
            # The rest of this chain was already walked
            if current_id in closure:
                break
            closure.add(current_id)
            node = index.by_id.get(current_id)
            current_id = node.parent_id if node is not None else None

    return closure


def compute_export_set(
    index: TaxonomyIndex,
    selected_ids: Iterable[str],
    *,
    include_ancestors: bool = True,
) -> set[str]:
    """
    Ids to export for a selection.

    Candidates are the ancestor closure (or the selection itself when
    `include_ancestors` is False), filtered through `should_export`.
    Ids unknown to the index are dropped.
    """
    candidates = compute_closure(index, selected_ids) if include_ancestors else set(selected_ids)

    export_set: set[str] = set()
    for node_id in candidates:
        node = index.by_id.get(node_id)
        if node is not None and should_export(node):
            export_set.add(node_id)

    logger.debug("Export set: %d of %d candidates", len(export_set), len(candidates))
    return export_set
