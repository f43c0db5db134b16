"""Backfilling and normalizing the sibling `order` field."""

from domain.taxonomy.models import TagNode, Taxonomy


def _group_by_parent(nodes: list[TagNode]) -> dict[str | None, list[TagNode]]:
    groups: dict[str | None, list[TagNode]] = {}
    for node in nodes:
        groups.setdefault(node.parent_id, []).append(node)
    return groups


def initialize_order(taxonomy: Taxonomy) -> Taxonomy:
    """
    Fill in missing `order` values.

    A node without an order gets its position among its siblings in the original
    node list (not the sorted order). Existing values are left untouched.

    Returns:
        A new Taxonomy; the input is not modified
    """
    position_of: dict[str, int] = {}
    for siblings in _group_by_parent(taxonomy.nodes).values():
        for position, node in enumerate(siblings):
            position_of.setdefault(node.id, position)

    updated = [
        node if node.order is not None else node.model_copy(update={"order": position_of.get(node.id, 0)})
        for node in taxonomy.nodes
    ]
    return taxonomy.model_copy(update={"nodes": updated})


def normalize_order(taxonomy: Taxonomy) -> Taxonomy:
    """
    Rewrite `order` as consecutive integers 0..n-1 within each sibling group.

    Siblings keep their relative order by current `order` value; ties keep their
    position in the node list.

    Returns:
        A new Taxonomy; the input is not modified
    """
    new_order: dict[str, int] = {}
    for siblings in _group_by_parent(taxonomy.nodes).values():
        ranked = sorted(siblings, key=lambda node: node.order if node.order is not None else 0)
        for position, node in enumerate(ranked):
            new_order[node.id] = position

    updated = [node.model_copy(update={"order": new_order[node.id]}) for node in taxonomy.nodes]
    return taxonomy.model_copy(update={"nodes": updated})
