from pdftext.config.settings import Settings
from pdftext.extraction.aggregator import PageTextAggregator
from pdftext.input.exceptions import UnsupportedInputKindError
from pdftext.input.normalizer import InputNormalizer
from pdftext.logging.logger import Log
from pdftext.pdf.base import BasePdfEngine
from pdftext.pdf.factory import PdfEngineFactory


class PdfTextExtractor:
    """Extracts the text of a PDF given as raw bytes or a bytes-like value.

    Pipeline: normalize -> open -> per-page fragments -> join.
    """

    def __init__(
        self,
        normalizer: InputNormalizer,
        aggregator: PageTextAggregator,
    ) -> None:
        self._normalizer = normalizer
        self._aggregator = aggregator

    @property
    def engine(self) -> BasePdfEngine:
        return self._aggregator.engine

    async def extract(self, raw: object) -> str:
        """Normalize ``raw`` to bytes and return the text of every page.

        Raises:
            UnsupportedInputKindError: if ``raw`` has no supported shape.
            PdfProcessingError: if the engine fails.
        """
        pdf_bytes = self._normalizer.normalize(raw)
        Log.debug(f"Normalized PDF input to {len(pdf_bytes)} bytes")
        return await self._aggregator.aggregate(pdf_bytes)

    async def extract_bytes(self, pdf_bytes: bytes) -> str:
        """Same as :meth:`extract` but accepts only ``bytes``."""
        if not isinstance(pdf_bytes, bytes):
            kind = self._normalizer.classify(pdf_bytes)
            input_type = type(pdf_bytes).__qualname__
            Log.warning(f"Rejected PDF input of type {input_type}: expected bytes")
            raise UnsupportedInputKindError(
                f"Expected bytes, got '{input_type}'",
                kind=kind,
                input_type=input_type,
            )
        return await self._aggregator.aggregate(pdf_bytes)


def build_text_extractor(settings: Settings | None = None) -> PdfTextExtractor:
    """Build a PdfTextExtractor with the configured engine."""
    settings = settings if settings is not None else Settings()
    engine = PdfEngineFactory.create(settings)
    return PdfTextExtractor(
        normalizer=InputNormalizer(),
        aggregator=PageTextAggregator(engine),
    )


async def extract_pdf_text(raw: object, settings: Settings | None = None) -> str:
    """Extract the text of a PDF given in any supported binary shape."""
    return await build_text_extractor(settings).extract(raw)


async def extract_pdf_bytes_text(pdf_bytes: bytes, settings: Settings | None = None) -> str:
    """Extract the text of a PDF given as ``bytes``, skipping normalization."""
    return await build_text_extractor(settings).extract_bytes(pdf_bytes)


def configure_logging(settings: Settings | None = None) -> None:
    """Attach the stdout handler at ``settings.log_level``.

    Call once at application start-up. Extraction never touches logger
    configuration on its own.
    """
    settings = settings if settings is not None else Settings()
    Log.configure(settings.log_level)
