"""Reading and writing taxonomy JSON files."""

import logging
from pathlib import Path

from domain.serialization import ImportResult, export_taxonomy, import_taxonomy
from domain.taxonomy.models import Taxonomy
from infrastructure.config.models import CoreConfig
from infrastructure.io.fs import ensure_exists, read_text, write_text

logger = logging.getLogger(__name__)


def read_taxonomy_file(path: Path, cfg: CoreConfig | None = None) -> ImportResult:
    """
    Import a taxonomy JSON file.

    Data problems come back in the ImportResult; only a missing file raises.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    cfg = cfg or CoreConfig()
    ensure_exists(path, "taxonomy file")
    result = import_taxonomy(read_text(path), enforce_tag_leaf=cfg.validation.enforce_tag_leaf)
    logger.debug("Read taxonomy file %s (success=%s)", path, result.success)
    return result


def write_taxonomy_file(path: Path, taxonomy: Taxonomy, cfg: CoreConfig | None = None) -> Path:
    """Export a taxonomy to `path` using the serialization options from `cfg`."""
    cfg = cfg or CoreConfig()
    text = export_taxonomy(
        taxonomy,
        pretty=cfg.serialization.pretty,
        indent=cfg.serialization.indent,
        include_meta_timestamp=cfg.serialization.include_meta_timestamp,
    )
    write_text(path, text + "\n")
    logger.info("Saved taxonomy JSON: %s (%d nodes)", path, len(taxonomy.nodes))
    return path


def load_sample_taxonomy(path: Path) -> Taxonomy:
    """
    Load the bundled sample taxonomy.

    Raises:
        FileNotFoundError: If the sample file is missing
        ValueError: If the sample does not import cleanly
    """
    result = read_taxonomy_file(path)
    if not result.success or result.taxonomy is None:
        summary = "; ".join(str(e) for e in result.errors)
        raise ValueError(f"Failed to load sample taxonomy {path}: {summary}")
    return result.taxonomy
