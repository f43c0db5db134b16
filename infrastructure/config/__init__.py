"""
Configuration management: models and loading.

Handles:
- CoreConfig: export, validation and serialization options
- YAML loading with defaults for missing sections

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_core_config
from infrastructure.config.models import (
    CoreConfig,
    ExportConfig,
    SerializationConfig,
    ValidationConfig,
)

__all__ = [
    # Main config (most commonly used)
    "CoreConfig",
    "load_core_config",
    # Sections
    "ExportConfig",
    "ValidationConfig",
    "SerializationConfig",
]
