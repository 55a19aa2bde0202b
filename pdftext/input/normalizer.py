from collections.abc import Sequence
from numbers import Integral

from pdftext.input.exceptions import UnsupportedInputKindError
from pdftext.input.models import InputKind
from pdftext.logging.logger import Log

STREAM_MESSAGE = (
    "Input looks like a stream. Read the stream into bytes, bytearray, "
    "memoryview or a list of byte values before extracting text."
)
UNSUPPORTED_MESSAGE = (
    "Unsupported input type '{input_type}'. Use bytes, bytearray, memoryview, "
    "another buffer-protocol object or a sequence of byte values."
)


def _type_name(raw: object) -> str:
    cls = type(raw)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _exports_buffer(raw: object) -> bool:
    try:
        with memoryview(raw):  # type: ignore[arg-type]
            return True
    except TypeError:
        return False
    except ValueError:
        # Exporter exists but refuses a view (closed mmap, object arrays).
        return True


def _is_int_sequence(raw: object) -> bool:
    if not isinstance(raw, Sequence) or isinstance(raw, str):
        return False
    return all(isinstance(value, Integral) for value in raw)


class InputNormalizer:
    """Turns a raw PDF input into canonical ``bytes``.

    Classification is ordered and the first match wins:

    1. ``bytes`` is returned unchanged.
    2. ``memoryview`` is copied.
    3. Any other buffer-protocol object (``bytearray``, ``array.array``,
       ``mmap``, NumPy arrays) is copied through a ``memoryview``.
    4. A sequence of integers is copied value by value, each wrapped
       modulo 256.
    5. Objects with a callable ``read`` are rejected as streams.
    6. Everything else is rejected.
    """

    def classify(self, raw: object) -> InputKind:
        if isinstance(raw, bytes):
            return InputKind.BYTES
        if isinstance(raw, memoryview):
            return InputKind.MEMORYVIEW
        if _exports_buffer(raw):
            return InputKind.BUFFER
        if _is_int_sequence(raw):
            return InputKind.INT_SEQUENCE
        if callable(getattr(raw, "read", None)):
            return InputKind.STREAM
        return InputKind.UNKNOWN

    def normalize(self, raw: object) -> bytes:
        """Return the canonical bytes for ``raw``.

        Raises:
            UnsupportedInputKindError: if ``raw`` is a stream or has no
                recognized shape.
        """
        kind = self.classify(raw)
        Log.debug(f"Classified PDF input of type {_type_name(raw)} as {kind.value}")

        if kind is InputKind.BYTES:
            return raw  # type: ignore[return-value]
        if kind in (InputKind.MEMORYVIEW, InputKind.BUFFER):
            return self._copy_buffer(raw, kind)
        if kind is InputKind.INT_SEQUENCE:
            # Out-of-range values wrap like an unsigned 8-bit store: 256 -> 0, -1 -> 255.
            return bytes(int(value) & 0xFF for value in raw)  # type: ignore[attr-defined]
        if kind is InputKind.STREAM:
            raise self._reject(STREAM_MESSAGE, kind, raw)
        raise self._reject(
            UNSUPPORTED_MESSAGE.format(input_type=_type_name(raw)), kind, raw
        )

    def _copy_buffer(self, raw: object, kind: InputKind) -> bytes:
        try:
            with memoryview(raw) as view, view.cast("B") as flat:  # type: ignore[arg-type]
                return flat.tobytes()
        except (TypeError, ValueError) as exc:
            # Non-contiguous, released and closed buffers all land here.
            raise self._reject(
                f"Cannot read buffer of type '{_type_name(raw)}': {exc}", kind, raw
            ) from exc

    def _reject(
        self, message: str, kind: InputKind, raw: object
    ) -> UnsupportedInputKindError:
        Log.warning(f"Rejected PDF input: {message}")
        return UnsupportedInputKindError(message, kind=kind, input_type=_type_name(raw))
