"""
Service: KnowledgeAssembler
============================
Builds the single knowledge blob that every prompt carries.

Flow
----
1. snapshot()         — read every supported document from the store
2. build_knowledge()  — pure: snapshot + persona background → text
3. get_knowledge_base — 1 + 2, never raises

Blob layout
-----------
    CORE_KNOWLEDGE
    ## Assistant Background
    <persona background>
    # Document: a.md
    <normalized text>
    # Document: b.pdf
    ...

Documents that normalize to empty text get no section at all. When the store
is empty (or cannot be listed) the blob is the preamble plus a sentinel note,
so the assistant can still answer from persona knowledge.

Caching
-------
The baseline reads and normalizes every document on every turn, which keeps
answers in step with the latest uploads. CachedKnowledgeAssembler adds an
opt-in memo keyed by a SHA-256 fingerprint of the snapshot and background;
the output is identical, only repeated normalization is skipped.
"""

# Python Packages
from typing import List, Optional, Tuple
import hashlib
import logging
import threading

# Models
from ...models.document import DocumentFormat, DocumentSnapshot

# Document processing
from ...document_processing.services.document_normalizer import DocumentNormalizer

# Config
from ..config import core_knowledge


logger = logging.getLogger(__name__)





def build_knowledge(
    snapshot: List[DocumentSnapshot],
    normalizer: DocumentNormalizer,
    background: str = ""
) -> str:
    """
    Assemble the knowledge blob from a document snapshot.
    Pure apart from the normalizer's logging.
    """

    parts = [core_knowledge.CORE_KNOWLEDGE]

    if background:
        parts.append(f"{core_knowledge.BACKGROUND_HEADER}\n{background}")

    if not snapshot:
        parts.append(core_knowledge.NO_DOCUMENTS_NOTE)
        return "\n\n".join(parts)

    sections = []
    for document in snapshot:
        text = normalizer.normalize(document.content, document.format, document.filename)

        if not text or not text.strip():
            logger.info(f"   ⏭️  {document.filename}: no text, section omitted")
            continue

        header = core_knowledge.DOCUMENT_HEADER.format(filename = document.filename)
        sections.append(f"{header}\n{text}")

    parts.extend(sections or [core_knowledge.NO_READABLE_DOCUMENTS_NOTE])
    return "\n\n".join(parts)


def fingerprint(snapshot: List[DocumentSnapshot], background: str = "") -> str:
    """SHA-256 over background, then every (filename, format, bytes) in order."""

    digest = hashlib.sha256()
    digest.update(background.encode("utf-8"))

    for document in snapshot:
        digest.update(b"\x00" + document.filename.encode("utf-8"))
        digest.update(b"\x00" + document.format.value.encode("utf-8"))
        digest.update(b"\x00" + hashlib.sha256(document.content).digest())

    return digest.hexdigest()





class KnowledgeAssembler:
    """
    Reads the document store and assembles the knowledge blob.
    Borrows documents read-only; never writes to the store.
    """

    def __init__(self, document_store, normalizer: Optional[DocumentNormalizer] = None):
        self.document_store = document_store
        self.normalizer     = normalizer or DocumentNormalizer()


    def snapshot(self) -> List[DocumentSnapshot]:
        """
        Read every supported document, in store enumeration order.

        Raises:
            Exception: only when the store itself cannot be listed.
        """

        documents = []

        for filename in self.document_store.list():
            document_format = DocumentFormat.from_filename(filename)

            if document_format is None:
                logger.warning(f"⚠️ Skipping unsupported document: {filename}")
                continue

            try:
                content = self.document_store.read(filename)
            except Exception as error:
                logger.error(f"❌ Could not read document {filename}: {error}")
                continue

            documents.append(DocumentSnapshot(filename, document_format, content))

        return documents


    def get_knowledge_base(self, background: str = "") -> str:
        """
        Current knowledge blob. Falls back to the preamble when the store
        cannot be reached.
        """

        try:
            snapshot = self.snapshot()
        except Exception as error:
            logger.error(f"❌ Document store unreachable, using core knowledge only: {error}")
            snapshot = []

        return self._build(snapshot, background)


    def stats(self, background: str = "") -> dict:
        """Blob size and document count, for the admin knowledge endpoint."""

        try:
            snapshot = self.snapshot()
        except Exception as error:
            logger.error(f"❌ Document store unreachable: {error}")
            snapshot = []

        blob = self._build(snapshot, background)
        return {
            "documents":   [document.filename for document in snapshot],
            "total":       len(snapshot),
            "length":      len(blob),
            "fingerprint": fingerprint(snapshot, background),
            "knowledge":   blob,
        }


    def _build(self, snapshot: List[DocumentSnapshot], background: str) -> str:
        return build_knowledge(snapshot, self.normalizer, background)





class CachedKnowledgeAssembler(KnowledgeAssembler):
    """
    KnowledgeAssembler that reuses the last blob while the fingerprint of
    (documents, background) is unchanged. Documents are still read every
    call; only normalization is skipped.
    """

    def __init__(self, document_store, normalizer: Optional[DocumentNormalizer] = None):
        super().__init__(document_store, normalizer)
        self._lock = threading.Lock()
        self._cached: Optional[Tuple[str, str]] = None


    def _build(self, snapshot: List[DocumentSnapshot], background: str) -> str:
        key = fingerprint(snapshot, background)

        with self._lock:
            if self._cached and self._cached[0] == key:
                return self._cached[1]

        blob = super()._build(snapshot, background)

        with self._lock:
            self._cached = (key, blob)

        logger.debug(f"🧠 Knowledge cache refreshed ({key[:12]})")
        return blob
