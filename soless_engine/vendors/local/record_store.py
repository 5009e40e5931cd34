"""
JSON Record Store

Small read-modify-write JSON records (persona, telegram settings) kept as
one file each under the data directory.
"""

# Python Packages
from pathlib import Path
from typing import Dict, Any
import json
import logging
import os
import threading


logger = logging.getLogger(__name__)





class JsonRecordStore:
    """
    Persists named dict records as <data_dir>/<name>.json.
    Missing or unreadable records are replaced with the supplied defaults.
    """

    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents = True, exist_ok = True)
        self._lock = threading.Lock()


    def load(self, name: str, defaults: Dict[str, Any]) -> Dict[str, Any]:
        """
        Read a record, filling absent keys from defaults.
        On first run the defaults are written back so the file exists.
        """

        path = self._path(name)

        with self._lock:
            record = None

            if path.exists():
                try:
                    record = json.loads(path.read_text(encoding = "utf-8"))
                except (OSError, ValueError) as error:
                    logger.warning(f"⚠️ Record {path.name} unreadable, using defaults: {error}")

            if not isinstance(record, dict):
                record = dict(defaults)
                self._write(path, record)
                return record

            merged = dict(defaults)
            merged.update(record)
            return merged


    def save(self, name: str, record: Dict[str, Any]) -> None:
        with self._lock:
            self._write(self._path(name), record)



    # ── Private ────────────────────────────────────────────────────────────────
    def _path(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"


    def _write(self, path: Path, record: Dict[str, Any]) -> None:
        tmp_path = path.with_name(f".{path.name}.tmp")
        tmp_path.write_text(json.dumps(record, indent = 2), encoding = "utf-8")
        os.replace(tmp_path, path)
