"""
Taxonomy extensions stored under `meta.extensions`.

A project pack is a taxonomy whose extensions carry rules, quick trees,
recommendations and UI settings, so one JSON file restores the whole project.
The core treats these as passenger data; only the recommendation map is read here.
"""

from collections.abc import Iterable
from typing import Any

from domain.taxonomy.models import Taxonomy, TaxonomyIndex, TaxonomyMeta

EXTENSIONS_KEY = "extensions"


def _default_extensions() -> dict[str, Any]:
    return {
        "rules": {"version": 1, "savedRules": []},
        "quickTrees": [],
        "recommendations": {"version": 1, "map": {}},
        "ui": {
            "version": 1,
            "folderNavigator": {"version": 1, "mode": "collapsed", "autoOpenFolderIds": []},
        },
    }


def _raw_extensions(taxonomy: Taxonomy) -> dict[str, Any]:
    if taxonomy.meta is None:
        return {}
    ext = (taxonomy.meta.model_extra or {}).get(EXTENSIONS_KEY)
    return dict(ext) if isinstance(ext, dict) else {}


def get_extensions(taxonomy: Taxonomy) -> dict[str, Any]:
    """Extensions with defaults filled in for every missing section."""
    ext = _raw_extensions(taxonomy)
    out = _default_extensions()
    for key in out:
        if ext.get(key) is not None:
            out[key] = ext[key]
    return out


def inject_extensions(taxonomy: Taxonomy, partial: dict[str, Any]) -> Taxonomy:
    """Return a new taxonomy whose extensions are the existing ones merged with `partial`."""
    merged = {**_raw_extensions(taxonomy), **partial}
    meta_raw = taxonomy.meta.to_json_dict() if taxonomy.meta is not None else {}
    new_meta = TaxonomyMeta.model_validate({**meta_raw, EXTENSIONS_KEY: merged})
    return taxonomy.model_copy(update={"meta": new_meta})


def build_project_pack(taxonomy: Taxonomy) -> Taxonomy:
    """
    Taxonomy ready for bundled export.

    Quick trees and recommendations get their defaults when missing; rules and
    UI settings are carried over unchanged.
    """
    ext = _raw_extensions(taxonomy)
    defaults = _default_extensions()
    partial: dict[str, Any] = {
        "rules": ext.get("rules") or defaults["rules"],
        "quickTrees": ext.get("quickTrees") or [],
        "recommendations": ext.get("recommendations") or defaults["recommendations"],
    }
    if ext.get("ui") is not None:
        partial["ui"] = ext["ui"]
    return inject_extensions(taxonomy, partial)


def get_recommended_tag_ids(
    index: TaxonomyIndex,
    selected_ids: Iterable[str],
    limit: int | None = None,
) -> list[str]:
    """
    Tag ids recommended for the current selection via the manual recommendation map.

    Selected ids are visited in tree order; their mapped ids are collected in map order,
    skipping ids already selected, ids missing from the index and duplicates.
    """
    rec_map = get_extensions(index.taxonomy)["recommendations"].get("map") or {}
    selected = {node_id for node_id in selected_ids if node_id in index.sort_path_cache}
    ordered_selected = sorted(selected, key=lambda node_id: index.sort_path_cache[node_id])

    out: list[str] = []
    seen: set[str] = set()
    for node_id in ordered_selected:
        for rec_id in rec_map.get(node_id) or []:
            if rec_id in selected or rec_id in seen or rec_id not in index.by_id:
                continue
            seen.add(rec_id)
            out.append(rec_id)
            if limit is not None and len(out) >= limit:
                return out
    return out
