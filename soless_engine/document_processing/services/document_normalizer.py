"""
Document Normalizer

Responsible for:
    - Turning PDF, Markdown and plain-text bytes into plain text
    - Degrading a bad document to empty text instead of failing
    - No storage logic
"""

# Python Packages
from io import BytesIO
import logging
import re

import pdfplumber
from markdown_it import MarkdownIt

# Models
from ...models.document import DocumentFormat

# Exceptions
from ...util.exceptions import IngestionException


logger = logging.getLogger(__name__)

HTML_TAG_RE    = re.compile(r"<[^>]*>")
WHITESPACE_RE  = re.compile(r"\s+")





class DocumentNormalizer:
    """
    Handles normalization using:
        - pdfplumber (PDF)
        - markdown-it-py (Markdown)
    """

    def __init__(self):
        self.markdown = MarkdownIt()


    def normalize(self, content: bytes, document_format: DocumentFormat, filename: str = "") -> str:
        """
        Normalize document bytes to plain text.

        Args:
            content (bytes): raw document bytes
            document_format (DocumentFormat): already-validated format
            filename (str): used for log messages only

        Returns:
            str: plain text, "" when the document cannot be read
        """

        try:
            return self.extract(content, document_format, filename)

        except IngestionException as error:
            logger.error(f"❌ {error.message} {error.details}")
            return ""



    def extract(self, content: bytes, document_format: DocumentFormat, filename: str = "") -> str:
        """
        Strict variant of normalize().

        Raises:
            IngestionException: when the document cannot be read
        """

        try:
            # --------------------------------------------------
            # PDF Extraction
            # --------------------------------------------------
            if document_format == DocumentFormat.PDF:
                return self._extract_pdf(content)

            # --------------------------------------------------
            # Markdown Rendering
            # --------------------------------------------------
            elif document_format == DocumentFormat.MARKDOWN:
                return self._extract_markdown(content)

            # --------------------------------------------------
            # Plain Text
            # --------------------------------------------------
            elif document_format == DocumentFormat.TEXT:
                return self._decode(content)

            raise ValueError(f"unsupported format {document_format!r}")

        except Exception as error:
            raise IngestionException(filename = filename or "<unnamed>", details = str(error))



    def _extract_pdf(self, content: bytes) -> str:
        """
        Extract the text of every page with pdfplumber
        """

        text = ""

        with pdfplumber.open(BytesIO(content)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"

        return text


    def _extract_markdown(self, content: bytes) -> str:
        """
        Render to HTML, drop every tag, collapse whitespace
        """

        html = self.markdown.render(self._decode(content))
        text = HTML_TAG_RE.sub(" ", html)
        return WHITESPACE_RE.sub(" ", text).strip()


    def _decode(self, content: bytes) -> str:
        return content.decode("utf-8", errors = "replace")
