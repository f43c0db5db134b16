"""Serialize a taxonomy to JSON."""

import json
import re
from datetime import datetime, timezone

from domain.taxonomy.models import Taxonomy

# Paired surrogates decode to one code point, so any left in a str are unpaired
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _escape_lone_surrogates(text: str) -> str:
    """Write unpaired surrogates as `\\udXXX` escapes so the output is valid UTF-8."""
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def iso_timestamp(now: datetime | None = None) -> str:
    """UTC timestamp with millisecond precision and a trailing 'Z'."""
    moment = now if now is not None else datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def export_taxonomy(
    taxonomy: Taxonomy,
    *,
    pretty: bool = True,
    indent: int = 2,
    include_meta_timestamp: bool = False,
    now: datetime | None = None,
) -> str:
    """
    Export a taxonomy to a JSON string.

    Args:
        taxonomy: Taxonomy to serialize
        pretty: Indent the output
        indent: Indent width when pretty
        include_meta_timestamp: Stamp meta.updatedAt with the current time
        now: Clock override for the timestamp

    Returns:
        JSON string (non-ASCII characters are written as-is, unpaired surrogates as escapes)
    """
    payload = taxonomy.to_json_dict()

    if include_meta_timestamp:
        payload["meta"] = {**(payload.get("meta") or {}), "updatedAt": iso_timestamp(now)}

    if pretty:
        text = json.dumps(payload, ensure_ascii=False, indent=indent)
    else:
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return _escape_lone_surrogates(text)
