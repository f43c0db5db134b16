"""
Deterministic sibling ordering.

Strings are compared by UTF-16 code unit, never by locale collation, so the same
taxonomy orders identically on every machine.
"""

from domain.taxonomy.models import TagNode


def utf16_sort_key(value: str) -> bytes:
    """
    Sort key reproducing UTF-16 code-unit order.

    Big-endian encoding keeps each 16-bit unit's most significant byte first, so byte
    order equals code-unit order (astral characters sort by their leading surrogate).
    """
    return value.encode("utf-16-be", "surrogatepass")


def compare_strings_utf16(a: str, b: str) -> int:
    """
    Compare two strings by UTF-16 code units.

    This is not a natural sort: "A1" < "A10" < "A2".

    Returns:
        -1, 0 or 1
    """
    if a == b:
        return 0
    ka = utf16_sort_key(a)
    kb = utf16_sort_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


def compare_nodes(a: TagNode, b: TagNode) -> int:
    """
    Total order over sibling nodes: order ASC, then label ASC, then id ASC.

    Labels and ids use `compare_strings_utf16`. Distinct ids never compare equal.
    """
    order_a = a.order if a.order is not None else 0
    order_b = b.order if b.order is not None else 0
    if order_a != order_b:
        return order_a - order_b

    label_cmp = compare_strings_utf16(a.label, b.label)
    if label_cmp != 0:
        return label_cmp

    return compare_strings_utf16(a.id, b.id)
