from unittest.mock import MagicMock

import pytest

from pdftext.pdf.factory import PdfEngineFactory
from pdftext.pdf.pdfplumber_adapter import PdfPlumberEngine
from pdftext.pdf.pymupdf_adapter import PyMuPdfEngine


def _make_settings(pdf_engine: str) -> MagicMock:
    """Create a minimal Settings-like object with only pdf_engine."""
    return MagicMock(pdf_engine=pdf_engine)


class TestPdfEngineFactory:
    def test_creates_pdfplumber_engine(self) -> None:
        engine = PdfEngineFactory.create(_make_settings("pdfplumber"))
        assert isinstance(engine, PdfPlumberEngine)

    def test_creates_pymupdf_engine(self) -> None:
        engine = PdfEngineFactory.create(_make_settings("pymupdf"))
        assert isinstance(engine, PyMuPdfEngine)

    def test_is_case_insensitive(self) -> None:
        engine = PdfEngineFactory.create(_make_settings("PyMuPDF"))
        assert isinstance(engine, PyMuPdfEngine)

    def test_ignores_surrounding_whitespace(self) -> None:
        engine = PdfEngineFactory.create(_make_settings(" pymupdf\n"))
        assert isinstance(engine, PyMuPdfEngine)

    def test_names_match_engine_names(self) -> None:
        assert PdfEngineFactory.names() == ["pdfplumber", "pymupdf"]
        assert PdfEngineFactory.names() == sorted(
            [PdfPlumberEngine.name, PyMuPdfEngine.name]
        )

    def test_returns_fresh_instance_per_call(self) -> None:
        settings = _make_settings("pdfplumber")
        assert PdfEngineFactory.create(settings) is not PdfEngineFactory.create(settings)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(
            ValueError,
            match=r"Unknown PDF engine 'pdfjs'. Choose from: \['pdfplumber', 'pymupdf'\]",
        ):
            PdfEngineFactory.create(_make_settings("pdfjs"))
