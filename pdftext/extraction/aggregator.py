import asyncio

from pdftext.logging.logger import Log
from pdftext.pdf.base import BasePdfEngine
from pdftext.pdf.exceptions import PdfProcessingError, ProcessingStage

FRAGMENT_SEPARATOR = " "
PAGE_SEPARATOR = "\n"


class PageTextAggregator:
    """Concatenates the text of every page of a PDF into one string.

    All engine work runs inline in the caller's thread. The coroutine
    yields to the event loop after the document is opened and after each
    page, but never runs two engine steps at once.
    """

    def __init__(self, engine: BasePdfEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> BasePdfEngine:
        return self._engine

    async def aggregate(self, pdf_bytes: bytes) -> str:
        """Return the text of all pages, one page per line, stripped.

        Raises:
            PdfProcessingError: if the engine fails at any step. No partial
                text is returned.
        """
        stage = ProcessingStage.OPEN
        page_number: int | None = None
        try:
            with self._engine.open(pdf_bytes) as document:
                page_count = document.page_count
                Log.debug(f"Opened PDF with {self._engine.name}: {page_count} pages")
                await asyncio.sleep(0)

                stage = ProcessingStage.PAGE
                text = ""
                for page_number in range(1, page_count + 1):
                    fragments = document.page_fragments(page_number)
                    text += FRAGMENT_SEPARATOR.join(fragments) + PAGE_SEPARATOR
                    await asyncio.sleep(0)
        except PdfProcessingError as exc:
            Log.error(f"Error processing PDF: {exc}")
            raise PdfProcessingError(
                f"PDF text extraction failed: {exc}",
                stage=exc.stage,
                page_number=exc.page_number,
            ) from exc
        except Exception as exc:
            Log.error(f"Error processing PDF: {exc!r}")
            raise PdfProcessingError(
                f"PDF text extraction failed: {exc}",
                stage=stage,
                page_number=page_number,
            ) from exc

        result = text.strip()
        Log.info(f"Extracted {len(result)} chars from {page_count} pages")
        return result
