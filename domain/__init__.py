"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- taxonomy: node model, ordering, index building, closure and export formatting
- serialization: JSON import/export, validation and order utilities
"""

from domain.taxonomy import Taxonomy, TaxonomyIndex, TagNode

__all__ = [
    "TagNode",
    "Taxonomy",
    "TaxonomyIndex",
]
