"""Model mapping (alias table) parsing."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import TypeAdapter, ValidationError

_LOG = logging.getLogger(__name__)

_MAPPING_ADAPTER: TypeAdapter[dict[str, str]] = TypeAdapter(dict[str, str])


def parse_model_mapping(blob: str | Mapping[str, str] | None) -> dict[str, str]:
    """Parse an alias -> canonical mapping blob.

    Absent or malformed data yields an empty mapping; it is never an error.
    """
    if blob is None:
        return {}
    try:
        if isinstance(blob, str):
            if not blob.strip():
                return {}
            return _MAPPING_ADAPTER.validate_json(blob)
        return _MAPPING_ADAPTER.validate_python(dict(blob))
    except (ValidationError, TypeError, ValueError):
        _LOG.debug("Ignoring malformed model mapping: %r", blob)
        return {}
