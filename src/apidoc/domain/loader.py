from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from apidoc.domain.models import EndpointDescription

logger = logging.getLogger(__name__)

_DESCRIPTIONS = TypeAdapter(list[EndpointDescription])


class DescriptionLoadError(Exception):
    """Input file could not be read as a collection of endpoint descriptions."""


def parse_descriptions(payload: Any) -> list[EndpointDescription]:
    """
    Accepts either a bare list of descriptions or {"endpoints": [...]}.
    """
    if isinstance(payload, dict):
        if "endpoints" not in payload:
            raise DescriptionLoadError(
                f"Expected a list or an object with an 'endpoints' list, got keys {sorted(payload)}"
            )
        payload = payload["endpoints"]
    return _DESCRIPTIONS.validate_python(payload)


def load_descriptions(path: Path) -> list[EndpointDescription]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise DescriptionLoadError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DescriptionLoadError(f"Invalid JSON in {path}: {e}") from e

    try:
        descriptions = parse_descriptions(payload)
    except ValidationError as e:
        raise DescriptionLoadError(f"Invalid endpoint descriptions in {path}:\n{e}") from e
    except DescriptionLoadError as e:
        raise DescriptionLoadError(f"{path}: {e}") from e

    logger.debug("Loaded %d endpoint descriptions from %s", len(descriptions), path)
    return descriptions
