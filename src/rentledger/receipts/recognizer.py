"""Abstract text-recognition interface.

The transaction-entry workflow depends only on this contract, so any OCR
engine (or a deterministic stand-in under test) can be injected.
"""

from abc import ABC, abstractmethod


class TextRecognizer(ABC):
    """Reads the text printed on a receipt image."""

    @abstractmethod
    async def recognize(self, image: bytes) -> str:
        """Return the raw text recognized in ``image``.

        Implementations raise on network failure, timeout or unsupported
        images; they never return partial text for a failed read.
        """
        ...
