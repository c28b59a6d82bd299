"""
Abstract base classes for format codecs.

A decoder turns raw text into generic data and an encoder does the
reverse. Concrete codecs delegate parsing to a format library but must
normalise every failure of that library into
:class:`~datacoder.errors.DataFormatInvalidError`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from datacoder.data import GenericData
from datacoder.errors import DataFormatInvalidError


class DataDecoder(ABC):
    """Abstract base class for format decoders.

    Example:
        >>> class UpperDecoder(DataDecoder):
        ...     def decode(self, content):
        ...         return content.upper()
    """

    @abstractmethod
    def decode(self, content: str) -> GenericData:
        """Decode raw text into generic data.

        Args:
            content: Raw file content.

        Returns:
            Decoded data.

        Raises:
            DataFormatInvalidError: If content is empty or not valid
                syntax for the format.
        """
        ...


class DataEncoder(ABC):
    """Abstract base class for format encoders."""

    @abstractmethod
    def encode(self, data: Any) -> str:
        """Encode generic data as text.

        Args:
            data: Data to encode.

        Returns:
            Serialised text.

        Raises:
            DataFormatInvalidError: If data holds a value the format
                cannot represent.
        """
        ...


class DataCodec(DataDecoder, DataEncoder):
    """Paired decoder and encoder for one format.

    Subclasses set ``format_id`` and, when they serve more than one
    file extension, ``extensions``.
    """

    format_id: str = ""
    extensions: tuple[str, ...] = ()

    def __init__(self) -> None:
        if not self.extensions and self.format_id:
            self.extensions = (self.format_id,)

    def _require_content(self, content: str) -> None:
        """Reject content that carries no document."""
        if not isinstance(content, str):
            raise DataFormatInvalidError(
                f"{self.format_id.upper()} content must be text",
                details=f"got {type(content).__name__}",
            )
        if not content.strip():
            raise DataFormatInvalidError(
                f"{self.format_id.upper()} content is empty"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
