"""Stable ordering of id sets by sort path, and rendering to the export string."""

from collections.abc import Iterable, Sequence

from domain.taxonomy.errors import IndexConsistencyError
from domain.taxonomy.models import TaxonomyIndex

DEFAULT_SEPARATOR = ", "


def sort_by_user_order(index: TaxonomyIndex, node_ids: Iterable[str]) -> list[str]:
    """
    Order ids by their precomputed sort path.

    Paths compare element by element and an ancestor (a strict prefix) sorts first.
    Only the sort path is consulted, so the result matches the tree order no matter
    how the input collection iterates.

    Raises:
        IndexConsistencyError: If an id has no sort path in this index
    """
    keyed: list[tuple[tuple[int, ...], str]] = []
    for node_id in node_ids:
        path = index.sort_path_cache.get(node_id)
        if path is None:
            raise IndexConsistencyError(f"Missing sortPath for node: {node_id}")
        keyed.append((path, node_id))

    # Sort paths are unique per node, so the id never decides the order
    keyed.sort(key=lambda item: item[0])
    return [node_id for _, node_id in keyed]


def format_for_export(
    index: TaxonomyIndex,
    sorted_ids: Sequence[str],
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """
    Join the labels of `sorted_ids` with `separator`.

    Ids missing from the index are skipped.
    """
    labels = [index.by_id[node_id].label for node_id in sorted_ids if node_id in index.by_id]
    return separator.join(labels)
