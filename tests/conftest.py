import io
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from pdftext.config.settings import Settings
from pdftext.pdf.base import BasePdfEngine
from pdftext.pdf.pdfplumber_adapter import PdfPlumberEngine
from pdftext.pdf.pymupdf_adapter import PyMuPdfEngine


def _render_pages(*page_texts: str) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for text in page_texts:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Single-page PDF containing only "Hello World"."""
    return _render_pages("Hello World")


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Two-page PDF with "A" on page one and "B" on page two."""
    return _render_pages("A", "B")


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Valid PDF with one blank page."""
    return _render_pages("")


@pytest.fixture(params=["pdfplumber", "pymupdf"])
def engine_name(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest.fixture()
def engine(engine_name: str) -> BasePdfEngine:
    engines: dict[str, type[BasePdfEngine]] = {
        "pdfplumber": PdfPlumberEngine,
        "pymupdf": PyMuPdfEngine,
    }
    return engines[engine_name]()


@pytest.fixture()
def settings(engine_name: str, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Settings:
    monkeypatch.chdir(tmp_path)
    return Settings(pdf_engine=engine_name, log_level="DEBUG")


@pytest.fixture()
def pdftext_logger() -> Iterator[logging.Logger]:
    """The package logger with its handlers and level restored afterwards."""
    logger = logging.getLogger("pdftext")
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
