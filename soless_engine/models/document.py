"""
Model: Document

A stored knowledge file. The bytes belong to the document store; the engine
only borrows them while assembling the knowledge base.
"""

# Python Packages
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import os


class DocumentFormat(str, Enum):
    PDF         =   "pdf"
    MARKDOWN    =   "markdown"
    TEXT        =   "text"

    @classmethod
    def from_filename(cls, filename: str) -> Optional["DocumentFormat"]:
        """Map a filename extension to a format, or None when unsupported."""
        extension = os.path.splitext(filename or "")[1].lower()
        return EXTENSION_FORMATS.get(extension)


EXTENSION_FORMATS = {
    ".pdf":         DocumentFormat.PDF,
    ".md":          DocumentFormat.MARKDOWN,
    ".markdown":    DocumentFormat.MARKDOWN,
    ".txt":         DocumentFormat.TEXT,
    ".text":        DocumentFormat.TEXT,
}

# Extensions accepted by the upload endpoint
UPLOAD_EXTENSIONS = (".pdf", ".md", ".txt")





@dataclass(frozen=True)
class DocumentSnapshot:
    """Contents of one document as read at assembly time."""

    filename: str
    format: DocumentFormat
    content: bytes
