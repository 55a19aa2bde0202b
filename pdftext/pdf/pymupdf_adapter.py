import pymupdf

from pdftext.pdf.base import BasePdfDocument, BasePdfEngine
from pdftext.pdf.exceptions import PdfProcessingError, ProcessingStage


class PyMuPdfDocument(BasePdfDocument):
    """Document handle backed by an open ``pymupdf.Document``."""

    def __init__(self, doc: pymupdf.Document) -> None:
        self._doc = doc

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def page_fragments(self, page_number: int) -> list[str]:
        if not 1 <= page_number <= self.page_count:
            raise PdfProcessingError(
                f"Page {page_number} out of range 1..{self.page_count}",
                stage=ProcessingStage.PAGE,
                page_number=page_number,
            )
        page = self._doc.load_page(page_number - 1)
        try:
            content = page.get_text("dict")
        except Exception as exc:
            raise PdfProcessingError(
                f"pymupdf text extraction failed on page {page_number}: {exc}",
                stage=ProcessingStage.TEXT,
                page_number=page_number,
            ) from exc
        # Image blocks carry no "lines".
        return [
            span["text"]
            for block in content["blocks"]
            for line in block.get("lines", [])
            for span in line["spans"]
            if span["text"]
        ]

    def close(self) -> None:
        self._doc.close()


class PyMuPdfEngine(BasePdfEngine):
    """Opens PDFs with PyMuPDF."""

    name = "pymupdf"

    def open(self, pdf_bytes: bytes) -> PyMuPdfDocument:
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfProcessingError(
                f"pymupdf could not open document: {exc}",
                stage=ProcessingStage.OPEN,
            ) from exc
        return PyMuPdfDocument(doc)
