"""Build a TaxonomyIndex from a flat node list."""

import logging
from functools import cmp_to_key

from domain.taxonomy.compare import compare_nodes
from domain.taxonomy.errors import IndexConsistencyError
from domain.taxonomy.models import TagNode, Taxonomy, TaxonomyIndex

logger = logging.getLogger(__name__)


def compute_sort_path(
    by_id: dict[str, TagNode],
    sibling_ordinal: dict[str, int],
    node_id: str,
) -> tuple[int, ...]:
    """
    Ordinal path from the root down to `node_id`.

    Comparing these paths element by element keeps whole sibling subtrees together:
    everything under ordinal 0 sorts before anything under ordinal 1, at any depth.

    Raises:
        IndexConsistencyError: If a node on the parent chain has no sibling ordinal,
            or the chain loops back on itself
    """
    path: list[int] = []
    visited: set[str] = set()
    current_id: str | None = node_id

    while current_id is not None:
        if current_id in visited:
            raise IndexConsistencyError(f"Parent chain of node {node_id} loops at: {current_id}")
        visited.add(current_id)
        ordinal = sibling_ordinal.get(current_id)
        if ordinal is None:
            raise IndexConsistencyError(f"Missing ordinal for node: {current_id}")
        path.append(ordinal)
        node = by_id.get(current_id)
        current_id = node.parent_id if node is not None else None

    path.reverse()
    return tuple(path)


def build_index(taxonomy: Taxonomy) -> TaxonomyIndex:
    """
    Build the lookup structures for a taxonomy.

    Assumes the taxonomy already passed validation (no orphans, no cycles).

    Args:
        taxonomy: Source taxonomy

    Returns:
        A new TaxonomyIndex (by_id, children_of, sibling_ordinal, sort_path_cache)

    Raises:
        IndexConsistencyError: If a sort path cannot be computed
    """
    by_id: dict[str, TagNode] = {}
    children_raw: dict[str | None, list[TagNode]] = {}

    for node in taxonomy.nodes:
        by_id[node.id] = node
        children_raw.setdefault(node.parent_id, []).append(node)

    children_of: dict[str | None, tuple[str, ...]] = {}
    sibling_ordinal: dict[str, int] = {}
    node_key = cmp_to_key(compare_nodes)

    for parent_id, children in children_raw.items():
        ordered = sorted(children, key=node_key)
        children_of[parent_id] = tuple(child.id for child in ordered)
        for position, child in enumerate(ordered):
            sibling_ordinal[child.id] = position

    sort_path_cache = {node_id: compute_sort_path(by_id, sibling_ordinal, node_id) for node_id in by_id}

    logger.debug(
        "Built taxonomy index: %d nodes, %d parent groups",
        len(by_id),
        len(children_of),
    )

    return TaxonomyIndex(
        taxonomy=taxonomy,
        by_id=by_id,
        children_of=children_of,
        sibling_ordinal=sibling_ordinal,
        sort_path_cache=sort_path_cache,
    )
