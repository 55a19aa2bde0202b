from pdftext.exceptions import PdfTextError
from pdftext.input.models import InputKind


class UnsupportedInputKindError(PdfTextError):
    """Raised when a raw input cannot be normalized to PDF bytes."""

    def __init__(self, message: str, kind: InputKind, input_type: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.input_type = input_type
