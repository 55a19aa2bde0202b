from pdftext.config.settings import Settings
from pdftext.logging.logger import Log
from pdftext.pdf.base import BasePdfEngine
from pdftext.pdf.pdfplumber_adapter import PdfPlumberEngine
from pdftext.pdf.pymupdf_adapter import PyMuPdfEngine


class PdfEngineFactory:
    """Creates the PDF engine named in settings."""

    ENGINES: dict[str, type[BasePdfEngine]] = {
        engine_cls.name: engine_cls for engine_cls in (PdfPlumberEngine, PyMuPdfEngine)
    }

    @classmethod
    def names(cls) -> list[str]:
        return sorted(cls.ENGINES)

    @classmethod
    def create(cls, settings: Settings) -> BasePdfEngine:
        """Return a new engine for ``settings.pdf_engine``.

        The name is matched case-insensitively, ignoring surrounding
        whitespace from env files.

        Raises:
            ValueError: if no engine has that name.
        """
        name = settings.pdf_engine.strip().lower()
        engine_cls = cls.ENGINES.get(name)
        if engine_cls is None:
            raise ValueError(f"Unknown PDF engine '{name}'. Choose from: {cls.names()}")
        engine = engine_cls()
        Log.debug(f"Using PDF engine {engine.name}")
        return engine
