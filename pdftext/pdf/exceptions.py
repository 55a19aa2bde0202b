from enum import Enum

from pdftext.exceptions import PdfTextError


class ProcessingStage(str, Enum):
    """Engine step that was running when extraction failed."""

    OPEN = "open"
    PAGE = "page"
    TEXT = "text"


class PdfProcessingError(PdfTextError):
    """Raised when the PDF engine fails to open a document or read a page."""

    def __init__(
        self,
        message: str,
        stage: ProcessingStage,
        page_number: int | None = None,
    ) -> None:
        super().__init__(message)
        self.stage = stage
        self.page_number = page_number
