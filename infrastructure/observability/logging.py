"""
Logging setup with contextvars-based metadata injection.

- Adds the taxonomy tag and current operation into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
"""

import contextvars
import hashlib
import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from domain.taxonomy.models import Taxonomy

# Context variables for dynamic log metadata
cv_taxonomy_tag = contextvars.ContextVar("taxonomy_tag", default="-")
cv_operation = contextvars.ContextVar("operation", default="-")

# Kept in context for metadata (not printed every line)
cv_taxonomy_name = contextvars.ContextVar("taxonomy_name", default="-")
cv_fingerprint_full = contextvars.ContextVar("fingerprint_full", default="-")


def taxonomy_fingerprint(taxonomy: Taxonomy) -> str:
    """SHA-256 of the compact, key-sorted JSON form of the taxonomy."""
    canonical = json.dumps(taxonomy.to_json_dict(), ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8", "surrogatepass")).hexdigest()


def make_taxonomy_tag(fingerprint: str, length: int = 8) -> str:
    """
    Stable short tag derived from the full fingerprint.
    Uses BLAKE2s so the tag does not leak a prefix of the fingerprint itself.
    """
    h = hashlib.blake2s(fingerprint.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.taxonomy = cv_taxonomy_tag.get() or "-"
        record.op = cv_operation.get() or "-"
        return True


def set_log_context(
    *,
    taxonomy: Taxonomy | None = None,
    operation: str | None = None,
) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if taxonomy is not None:
        fingerprint = taxonomy_fingerprint(taxonomy)
        cv_fingerprint_full.set(fingerprint)
        cv_taxonomy_tag.set(make_taxonomy_tag(fingerprint))
        name = taxonomy.meta.name if taxonomy.meta is not None else None
        cv_taxonomy_name.set(name or "-")

    if operation is not None:
        cv_operation.set(str(operation))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form."""
    return {
        "taxonomy_tag": str(cv_taxonomy_tag.get() or "-"),
        "taxonomy_name": str(cv_taxonomy_name.get() or "-"),
        "fingerprint_full": str(cv_fingerprint_full.get() or "-"),
        "operation": str(cv_operation.get() or "-"),
    }


def clear_operation_context() -> None:
    """Reset operation context to default (keep taxonomy info)."""
    cv_operation.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 5_000_000,  # 5MB
    backup_count: int = 3,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file (console only when None)
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] t=%(taxonomy)s op=%(op)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | t=%(taxonomy)s op=%(op)s | %(message)s"

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(console_fmt, datefmt="%H:%M:%S"))
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S"))
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
