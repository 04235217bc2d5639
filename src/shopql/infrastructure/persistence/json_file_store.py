"""Directory of JSON documents, one file per record.

Record ``X`` lives in ``<directory>/X.json``. The store knows nothing
about products or carts; repositories map its raw dicts to domain objects.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from shopql.domain.exceptions import RecordDecodeError, ValidationError

logger = logging.getLogger(__name__)

SUFFIX = ".json"


class JsonFileStore:

    def __init__(self, directory: Path) -> None:
        self._directory = directory
        self._ensure_directory()

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, record_id: str) -> Path:
        """Return the file backing *record_id*, rejecting ids that leave the directory."""
        if (
            not record_id
            or record_id in (".", "..")
            or "/" in record_id
            or "\\" in record_id
            or "\0" in record_id
        ):
            raise ValidationError(f"Invalid record id: {record_id!r}")
        return self._directory / f"{record_id}{SUFFIX}"

    def exists(self, record_id: str) -> bool:
        return self.path_for(record_id).is_file()

    def read(self, record_id: str) -> Any:
        path = self.path_for(record_id)
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise RecordDecodeError(f"Record '{path.name}' is not valid JSON") from exc

    def write(self, record_id: str, data: Any) -> None:
        path = self.path_for(record_id)
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        logger.debug("Wrote %s", path)

    def delete(self, record_id: str) -> None:
        path = self.path_for(record_id)
        path.unlink()
        logger.debug("Deleted %s", path)

    def record_ids(self) -> list[str]:
        """IDs of all records, in directory-listing order."""
        return [
            path.name[: -len(SUFFIX)]
            for path in self._directory.iterdir()
            if path.is_file() and path.name.endswith(SUFFIX)
        ]

    def _ensure_directory(self) -> None:
        if not self._directory.exists():
            self._directory.mkdir(parents=True, exist_ok=True)


def text_field(raw: dict, key: str) -> str:
    """Return ``raw[key]``, which must already be a JSON string."""
    value = raw[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value
