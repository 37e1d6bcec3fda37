"""JSON file option storage.

Each option is one JSON document in a directory:

    <storage_dir>/<option_name>.json

JSON object keys are always strings, so integer attribute ids come back as
digit strings; the metadata store normalizes them on load.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_OPTION_NAME = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileOptionStore:
    """Option store that keeps one JSON file per option.

    Reads of a missing or undecodable file yield None. Writes replace the
    file atomically via a temp file and os.replace.

    Args:
        storage_dir: Directory holding the option files. Created if missing.
    """

    def __init__(self, storage_dir: str | Path):
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, name: str) -> Path:
        if not _OPTION_NAME.match(name):
            raise ValueError(f"Invalid option name: {name!r}")
        return self.storage_dir / f"{name}.json"

    def load_option(self, name: str) -> Any | None:
        path = self._path(name)
        if not path.exists():
            return None
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read option %s from %s: %s", name, path, e)
            return None

    def save_option(self, name: str, value: Any) -> None:
        path = self._path(name)
        fd, tmp_name = tempfile.mkstemp(dir=self.storage_dir, prefix=f".{name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(value, f, indent=2, sort_keys=True)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved option %s to %s", name, path)

    def delete_option(self, name: str) -> bool:
        path = self._path(name)
        if not path.exists():
            return False
        path.unlink()
        return True
