import io

import pdfplumber

from pdftext.pdf.base import BasePdfDocument, BasePdfEngine
from pdftext.pdf.exceptions import PdfProcessingError, ProcessingStage


class PdfPlumberDocument(BasePdfDocument):
    """Document handle backed by an open ``pdfplumber.PDF``."""

    def __init__(self, pdf: pdfplumber.PDF) -> None:
        self._pdf = pdf

    @property
    def page_count(self) -> int:
        return len(self._pdf.pages)

    def page_fragments(self, page_number: int) -> list[str]:
        if not 1 <= page_number <= self.page_count:
            raise PdfProcessingError(
                f"Page {page_number} out of range 1..{self.page_count}",
                stage=ProcessingStage.PAGE,
                page_number=page_number,
            )
        page = self._pdf.pages[page_number - 1]
        try:
            words = page.extract_words()
        except Exception as exc:
            raise PdfProcessingError(
                f"pdfplumber text extraction failed on page {page_number}: {exc}",
                stage=ProcessingStage.TEXT,
                page_number=page_number,
            ) from exc
        return [word["text"] for word in words]

    def close(self) -> None:
        self._pdf.close()


class PdfPlumberEngine(BasePdfEngine):
    """Opens PDFs with pdfplumber."""

    name = "pdfplumber"

    def open(self, pdf_bytes: bytes) -> PdfPlumberDocument:
        try:
            pdf = pdfplumber.open(io.BytesIO(pdf_bytes))
        except Exception as exc:
            raise PdfProcessingError(
                f"pdfplumber could not open document: {exc}",
                stage=ProcessingStage.OPEN,
            ) from exc
        return PdfPlumberDocument(pdf)
