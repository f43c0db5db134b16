"""Configuration loading from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import CoreConfig, ExportConfig, SerializationConfig, ValidationConfig
from infrastructure.constants import SAMPLE_TAXONOMY_FILE


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _section(data: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    block = data.get(key) or {}
    if not isinstance(block, dict):
        raise ValueError(f"Config section '{key}' must be a mapping in {path}")
    return block


def load_core_config(path: Path) -> CoreConfig:
    """
    Load tagcore.yaml into a CoreConfig.

    Missing sections and keys fall back to their defaults.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is not a mapping or a section has the wrong shape
    """
    data = _load_yaml(path)

    sample_file = data.get("sample_taxonomy_file")

    return CoreConfig(
        export=ExportConfig(**_section(data, "export", path)),
        validation=ValidationConfig(**_section(data, "validation", path)),
        serialization=SerializationConfig(**_section(data, "serialization", path)),
        sample_taxonomy_file=Path(sample_file) if sample_file else SAMPLE_TAXONOMY_FILE,
    )
