"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains:
- Configuration loading (YAML)
- Taxonomy file reading/writing
- Observability (logging)

This is the only layer that performs I/O operations.
"""

from infrastructure.config import CoreConfig, load_core_config
from infrastructure.io import load_sample_taxonomy, read_taxonomy_file, write_taxonomy_file

__all__ = [
    # Configuration (most commonly used)
    "load_core_config",
    "CoreConfig",
    # Taxonomy files
    "read_taxonomy_file",
    "write_taxonomy_file",
    "load_sample_taxonomy",
]
