"""
Local Document Store

Handles:
    - List stored documents
    - Read / save / delete a single document
    - Keep every file inside the documents directory
"""

# Python Packages
from pathlib import Path
from typing import List
import logging
import os

# Exceptions
from ...util.exceptions import NotFoundException, ValidationException

# Messages
from ...util import messages


logger = logging.getLogger(__name__)





class LocalDocumentStore:
    """
    Filesystem-backed key-value store of uploaded documents.
    Keys are bare filenames; values are raw bytes.
    """

    def __init__(self, root_dir: str):
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents = True, exist_ok = True)


    # ---------------------------------------------------------
    # 🔹 List Documents
    # ---------------------------------------------------------
    def list(self) -> List[str]:
        """
        Filenames of every regular file in the store, in directory order.
        """

        return [
            entry.name
            for entry in os.scandir(self.root_dir)
            if entry.is_file() and not entry.name.startswith(".")
        ]


    # ---------------------------------------------------------
    # 🔹 Read / Save / Delete
    # ---------------------------------------------------------
    def read(self, filename: str) -> bytes:
        path = self._path(filename)

        if not path.is_file():
            raise NotFoundException(
                message = messages.ERROR["DOCUMENT_NOT_FOUND"],
                error_code = "DOCUMENT_NOT_FOUND"
            )

        return path.read_bytes()


    def save(self, filename: str, content: bytes) -> str:
        """
        Write a document, replacing any file with the same name.

        Returns:
            str: the stored filename
        """

        path = self._path(filename)
        tmp_path = path.with_name(f".{path.name}.tmp")

        tmp_path.write_bytes(content)
        os.replace(tmp_path, path)

        logger.info(f"📄 Stored document {path.name} ({len(content)} bytes)")
        return path.name


    def delete(self, filename: str) -> None:
        path = self._path(filename)

        if not path.is_file():
            raise NotFoundException(
                message = messages.ERROR["DOCUMENT_NOT_FOUND"],
                error_code = "DOCUMENT_NOT_FOUND"
            )

        path.unlink()
        logger.info(f"🗑️ Deleted document {path.name}")


    def exists(self, filename: str) -> bool:
        return self._path(filename).is_file()



    # ── Private ────────────────────────────────────────────────────────────────
    def _path(self, filename: str) -> Path:
        """
        Resolve a filename inside the store. Directory parts are dropped.
        """

        name = os.path.basename((filename or "").replace("\\", "/")).strip()

        if not name or name in (".", "..") or name.startswith("."):
            raise ValidationException(
                message = messages.ERROR["DOCUMENT_INVALID_NAME"],
                error_code = "DOCUMENT_INVALID_NAME"
            )

        return self.root_dir / name
