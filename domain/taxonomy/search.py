"""Label normalization, node search and selection cleanup."""

import re
from collections.abc import Iterable

from domain.taxonomy.models import TagNode, TaxonomyIndex


def normalize_label(label: str) -> str:
    """
    Normalize a label string.

    Examples:
        >>> normalize_label("  black \\n  stockings ")
        'black stockings'
    """
    s = label.strip()
    s = re.sub(r"[\r\n]+", " ", s)
    return re.sub(r"\s+", " ", s)


def node_matches_query(node: TagNode, query: str) -> bool:
    """Case-insensitive substring match on the label or any alias."""
    q = query.strip().lower()
    if not q:
        return False
    if q in node.label.lower():
        return True
    aliases = [a.strip() for a in (node.aliases or []) if isinstance(a, str)]
    return any(q in a.lower() for a in aliases if a)


def search_nodes(index: TaxonomyIndex, query: str) -> list[TagNode]:
    """
    Nodes whose label or aliases contain `query` (case-insensitive).

    Results follow tree order (sort path), so they are stable across runs.
    An empty or blank query matches nothing.
    """
    if not query.strip():
        return []

    matches = [node for node in index.by_id.values() if node_matches_query(node, query)]
    matches.sort(key=lambda node: index.sort_path_cache[node.id])
    return matches


def prune_selection(index: TaxonomyIndex, selected_ids: Iterable[str]) -> set[str]:
    """Drop selected ids that no longer exist in the index."""
    return {node_id for node_id in selected_ids if node_id in index.by_id}
