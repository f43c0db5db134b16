"""
Taxonomy core: node model, deterministic ordering, index building and export computation.

All functions in this package are pure (no file I/O). An index is built wholesale from a
taxonomy and never mutated; callers rebuild it after every taxonomy change.
"""

from domain.taxonomy.closure import compute_closure, compute_export_set
from domain.taxonomy.compare import compare_nodes, compare_strings_utf16, utf16_sort_key
from domain.taxonomy.errors import IndexConsistencyError
from domain.taxonomy.extensions import (
    build_project_pack,
    get_extensions,
    get_recommended_tag_ids,
    inject_extensions,
)
from domain.taxonomy.index_builder import build_index, compute_sort_path
from domain.taxonomy.models import (
    SCHEMA_VERSION,
    NodeKind,
    TagNode,
    Taxonomy,
    TaxonomyIndex,
    TaxonomyMeta,
    should_export,
)
from domain.taxonomy.ordering import DEFAULT_SEPARATOR, format_for_export, sort_by_user_order
from domain.taxonomy.search import normalize_label, prune_selection, search_nodes

__all__ = [
    # Models
    "SCHEMA_VERSION",
    "NodeKind",
    "TagNode",
    "Taxonomy",
    "TaxonomyMeta",
    "TaxonomyIndex",
    "should_export",
    # Ordering
    "compare_nodes",
    "compare_strings_utf16",
    "utf16_sort_key",
    # Index
    "build_index",
    "compute_sort_path",
    "IndexConsistencyError",
    # Export
    "compute_closure",
    "compute_export_set",
    "sort_by_user_order",
    "format_for_export",
    "DEFAULT_SEPARATOR",
    # Search / selection
    "normalize_label",
    "search_nodes",
    "prune_selection",
    # Extensions
    "get_extensions",
    "inject_extensions",
    "build_project_pack",
    "get_recommended_tag_ids",
]
