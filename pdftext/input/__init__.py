from pdftext.input.exceptions import UnsupportedInputKindError
from pdftext.input.models import InputKind
from pdftext.input.normalizer import InputNormalizer

__all__ = ["InputKind", "InputNormalizer", "UnsupportedInputKindError"]
