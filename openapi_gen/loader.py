"""Load a Swagger/OpenAPI schema document from disk.

Reads the input file and decodes it as JSON, keeping object key order as it
appears in the document.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .exceptions import SchemaDecodeError, SchemaReadError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON token {name}")


def load_spec(path: Path | str) -> dict[str, Any]:
    """Load the schema document at ``path`` as a JSON object."""
    spec_file = Path(path)
    try:
        content = spec_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaReadError(f"Unable to read file: {exc}") from exc

    try:
        # dicts keep insertion order, so definitions come out in document order
        spec = json.loads(content, parse_constant=_reject_constant)
    except ValueError as exc:
        raise SchemaDecodeError(f"Unable to decode input {path} : {exc}") from exc

    if not isinstance(spec, dict):
        raise SchemaDecodeError(
            f"Unable to decode input {path} : expected a JSON object,"
            f" got {type(spec).__name__}"
        )
    logger.debug("Loaded %s (%d bytes)", spec_file, len(content))
    return spec

