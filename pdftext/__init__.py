from pdftext.config.settings import Settings
from pdftext.exceptions import PdfTextError
from pdftext.extraction.aggregator import PageTextAggregator
from pdftext.extraction.extractor import (
    PdfTextExtractor,
    build_text_extractor,
    configure_logging,
    extract_pdf_bytes_text,
    extract_pdf_text,
)
from pdftext.input import InputKind, InputNormalizer, UnsupportedInputKindError
from pdftext.pdf.exceptions import PdfProcessingError, ProcessingStage

__all__ = [
    "InputKind",
    "InputNormalizer",
    "PageTextAggregator",
    "PdfProcessingError",
    "PdfTextError",
    "PdfTextExtractor",
    "ProcessingStage",
    "Settings",
    "UnsupportedInputKindError",
    "build_text_extractor",
    "configure_logging",
    "extract_pdf_bytes_text",
    "extract_pdf_text",
]
