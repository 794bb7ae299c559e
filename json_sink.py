"""JSON file sink for resolved publication records."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from models import PublicationRecord

JSON_OUTPUT_PATH = os.getenv("PUBLICATIONS_OUTPUT_PATH", os.path.join("data", "publications.json"))

LOGGER = logging.getLogger(__name__)


def write_publications(
    records: list[PublicationRecord], output_path: str | None = None
) -> Path:
    """Overwrite the output file with all records as a pretty-printed JSON array.

    The parent directory is created if needed. Content goes to a sibling
    temp file first and is moved into place, so an interrupted write never
    leaves a truncated file behind.

    Args:
        records: Final records in listing order.
        output_path: Destination file; falls back to JSON_OUTPUT_PATH.
    """
    path = Path(output_path or JSON_OUTPUT_PATH)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = [record.to_dict() for record in records]
    tmp_path = path.with_name(path.name + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, ensure_ascii=False, indent=2)
    os.replace(tmp_path, path)

    LOGGER.info("Wrote %s publications to %s", len(payload), path)
    return path

