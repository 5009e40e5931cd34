"""
Document normalizer: PDF / Markdown / text to plain text.
"""

import unittest
from unittest import mock

from soless_engine.document_processing.services.document_normalizer import DocumentNormalizer
from soless_engine.models.document import DocumentFormat
from soless_engine.util.exceptions import IngestionException


class FakePage:
    def __init__(self, text):
        self.text = text

    def extract_text(self):
        return self.text


class FakePdf:
    def __init__(self, pages):
        self.pages = pages

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class TestDocumentNormalizer(unittest.TestCase):

    def setUp(self):
        self.normalizer = DocumentNormalizer()

    def test_plain_text_passes_through(self):
        content = "Line one\n\n  Line two  \n".encode("utf-8")
        self.assertEqual(
            self.normalizer.normalize(content, DocumentFormat.TEXT),
            "Line one\n\n  Line two  \n"
        )

    def test_plain_text_bad_bytes_are_replaced(self):
        text = self.normalizer.normalize(b"caf\xe9 menu", DocumentFormat.TEXT)
        self.assertTrue(text.startswith("caf"))
        self.assertTrue(text.endswith(" menu"))

    def test_markdown_tags_stripped_and_whitespace_collapsed(self):
        content = b"# Title\n\nSome **bold** text\n\n- item one\n- item two\n"
        self.assertEqual(
            self.normalizer.normalize(content, DocumentFormat.MARKDOWN),
            "Title Some bold text item one item two"
        )

    def test_markdown_empty(self):
        self.assertEqual(self.normalizer.normalize(b"", DocumentFormat.MARKDOWN), "")

    def test_pdf_pages_joined(self):
        fake = FakePdf([FakePage("Page one"), FakePage(None), FakePage("Page two")])
        with mock.patch("pdfplumber.open", return_value=fake):
            text = self.normalizer.normalize(b"%PDF-fake", DocumentFormat.PDF)
        self.assertEqual(text, "Page one\nPage two\n")

    def test_zero_byte_pdf_degrades_to_empty(self):
        self.assertEqual(self.normalizer.normalize(b"", DocumentFormat.PDF, "a.pdf"), "")

    def test_corrupt_pdf_degrades_to_empty(self):
        self.assertEqual(self.normalizer.normalize(b"not a pdf at all", DocumentFormat.PDF, "b.pdf"), "")

    def test_extract_raises_ingestion_error(self):
        with self.assertRaises(IngestionException) as ctx:
            self.normalizer.extract(b"", DocumentFormat.PDF, "a.pdf")
        self.assertEqual(ctx.exception.filename, "a.pdf")


class TestDocumentFormat(unittest.TestCase):

    def test_from_filename(self):
        self.assertEqual(DocumentFormat.from_filename("a.PDF"), DocumentFormat.PDF)
        self.assertEqual(DocumentFormat.from_filename("notes.md"), DocumentFormat.MARKDOWN)
        self.assertEqual(DocumentFormat.from_filename("notes.markdown"), DocumentFormat.MARKDOWN)
        self.assertEqual(DocumentFormat.from_filename("readme.txt"), DocumentFormat.TEXT)
        self.assertIsNone(DocumentFormat.from_filename("image.png"))
        self.assertIsNone(DocumentFormat.from_filename("noext"))
