"""I/O utilities: filesystem operations and taxonomy files."""

from infrastructure.io.fs import ensure_exists, read_text, write_text
from infrastructure.io.taxonomy_files import load_sample_taxonomy, read_taxonomy_file, write_taxonomy_file

__all__ = [
    "ensure_exists",
    "read_text",
    "write_text",
    "read_taxonomy_file",
    "write_taxonomy_file",
    "load_sample_taxonomy",
]
