from abc import ABC, abstractmethod
from types import TracebackType


class BasePdfDocument(ABC):
    """An open document handle returned by a PDF engine."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages in the document."""

    @abstractmethod
    def page_fragments(self, page_number: int) -> list[str]:
        """Return the text fragments of one page in engine order.

        Args:
            page_number: 1-based page index.

        Raises:
            PdfProcessingError: if the page does not exist.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the engine's resources for this document."""

    def __enter__(self) -> "BasePdfDocument":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class BasePdfEngine(ABC):
    """Contract for all PDF engine adapters."""

    name: str = ""

    @abstractmethod
    def open(self, pdf_bytes: bytes) -> BasePdfDocument:
        """Open a document from raw PDF bytes.

        The engine parses in the calling thread and must not start any
        worker threads or processes of its own.

        Raises:
            PdfProcessingError: if the bytes cannot be opened as a PDF.
        """
