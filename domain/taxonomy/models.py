"""Pydantic models for taxonomy nodes, the taxonomy container and its derived index."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool

SCHEMA_VERSION = "1.3.1"

NodeKind = Literal["folder", "tag"]

# Optional node fields that are omitted from JSON output unless they were given.
_OPTIONAL_NODE_FIELDS = ("order", "export", "aliases", "meta", "data")
_OPTIONAL_META_FIELDS = ("name", "description", "created_at", "updated_at")


def _drop_unset(model: BaseModel, out: dict[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    """Remove None-valued `fields` from a by-alias dump unless they were explicitly set (e.g. JSON null)."""
    for name in fields:
        key = type(model).model_fields[name].alias or name
        if out.get(key) is None and name not in model.model_fields_set:
            out.pop(key, None)
    return out


class TagNode(BaseModel):
    """
    A single taxonomy entry (folder or tag).

    `kind` is independent of tree position: a tag may have children and a folder may be empty.
    Unknown JSON keys are kept as extras so passenger data survives import/export.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    label: str
    parent_id: str | None = Field(default=None, alias="parentId")
    kind: NodeKind
    order: int | None = None
    export: StrictBool | None = None
    aliases: list[str] | None = None
    meta: dict[str, Any] | None = None
    data: dict[str, Any] | None = None

    def to_json_dict(self) -> dict[str, Any]:
        """Dump with wire (camelCase) keys; `parentId` is always present."""
        return _drop_unset(self, self.model_dump(by_alias=True), _OPTIONAL_NODE_FIELDS)


class TaxonomyMeta(BaseModel):
    """Optional taxonomy metadata; extra keys (e.g. `extensions`) are preserved."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str | None = None
    description: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")

    def to_json_dict(self) -> dict[str, Any]:
        return _drop_unset(self, self.model_dump(by_alias=True), _OPTIONAL_META_FIELDS)


class Taxonomy(BaseModel):
    """Schema-versioned container holding a flat, unordered list of nodes."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    schema_version: str = Field(default=SCHEMA_VERSION, alias="schemaVersion")
    nodes: list[TagNode] = Field(default_factory=list)
    meta: TaxonomyMeta | None = None

    def to_json_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "schemaVersion": self.schema_version,
            "nodes": [node.to_json_dict() for node in self.nodes],
        }
        if self.meta is not None:
            out["meta"] = self.meta.to_json_dict()
        elif "meta" in self.model_fields_set:
            out["meta"] = None
        out.update(self.model_extra or {})
        return out


class TaxonomyIndex(BaseModel):
    """
    Lookup structures derived from a Taxonomy.

    Built wholesale by `build_index` and never updated in place; any taxonomy change
    requires building a new index. The root sentinel key in `children_of` is None.
    """

    model_config = ConfigDict(frozen=True)

    taxonomy: Taxonomy
    by_id: dict[str, TagNode]
    children_of: dict[str | None, tuple[str, ...]]
    sibling_ordinal: dict[str, int]
    sort_path_cache: dict[str, tuple[int, ...]]


def should_export(node: TagNode) -> bool:
    """
    Export eligibility for a node.

    An explicit `export` flag wins; otherwise tags export and folders do not.
    """
    if node.export is not None:
        return node.export
    return node.kind == "tag"
