"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.taxonomy.ordering import DEFAULT_SEPARATOR
from infrastructure.constants import SAMPLE_TAXONOMY_FILE


class ExportConfig(BaseModel):
    """How a selection is turned into the keyword string."""

    separator: str = Field(
        default=DEFAULT_SEPARATOR,
        description="Separator placed between exported labels.",
    )
    include_ancestors: bool = Field(
        default=True,
        description="Add every ancestor of a selected node before filtering by export eligibility.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "ExportConfig":
        if not self.separator:
            raise ValueError("export.separator must not be empty")
        return self


class ValidationConfig(BaseModel):
    """Validation options applied on import."""

    enforce_tag_leaf: bool = Field(
        default=False,
        description=(
            "Reject tags that have children (product-level consistency rule). "
            "Off by default so tags may carry sub-tags; validate_taxonomy alone defaults to on."
        ),
    )


class SerializationConfig(BaseModel):
    """JSON output options."""

    pretty: bool = True
    indent: int = Field(default=2, ge=0)
    include_meta_timestamp: bool = Field(
        default=False,
        description="Stamp meta.updatedAt when exporting.",
    )


class CoreConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from tagcore.yaml (every section optional)
    - Consumed by the application workflows
    """

    export: ExportConfig = Field(default_factory=ExportConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    serialization: SerializationConfig = Field(default_factory=SerializationConfig)
    sample_taxonomy_file: Path = Field(default_factory=lambda: SAMPLE_TAXONOMY_FILE)
