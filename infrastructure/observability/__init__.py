"""
Observability: contextual logging.

Provides:
- Log lines tagged with the active taxonomy and operation
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    clear_operation_context,
    configure_logging,
    get_log_context,
    make_taxonomy_tag,
    set_log_context,
    taxonomy_fingerprint,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "get_log_context",
    "clear_operation_context",
    "make_taxonomy_tag",
    "taxonomy_fingerprint",
]
