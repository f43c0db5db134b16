"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure. It holds no state:
callers keep the LoadedTaxonomy and pass it back in.
"""

from application.export import build_export_text, export_project_pack_json, export_taxonomy_json
from application.session import LoadedTaxonomy, open_taxonomy, rehydrate_taxonomy, replace_taxonomy

__all__ = [
    # Loading
    "open_taxonomy",
    "rehydrate_taxonomy",
    "replace_taxonomy",
    "LoadedTaxonomy",
    # Export
    "build_export_text",
    "export_taxonomy_json",
    "export_project_pack_json",
]
