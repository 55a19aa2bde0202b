class PdfTextError(Exception):
    """Base exception for all pdftext errors."""
