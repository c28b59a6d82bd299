"""Exception hierarchy for datacoder.

Every failure raised by the library is a :class:`DataCoderError`, so
callers that do not care about the exact kind can catch the base class.
"""

from __future__ import annotations

from os import PathLike
from typing import Optional, Union


class DataCoderError(Exception):
    """Base error for all datacoder failures.

    Attributes:
        message: Error description.
        path: Path of the file the error relates to, if any.
        details: Additional error details, usually the underlying cause.
    """

    def __init__(
        self,
        message: str,
        path: Union[str, PathLike, None] = None,
        details: Optional[str] = None,
    ) -> None:
        self.message = message
        self.path = path
        self.details = details
        full_message = message
        if path:
            full_message = f"{message}: {path}"
        if details:
            full_message = f"{full_message}\n  Details: {details}"
        super().__init__(full_message)

    def at_path(self, path: Union[str, PathLike]) -> "DataCoderError":
        """Create the same error naming the file it concerns.

        Codecs and the registry work on text and format identifiers and
        never see a path, so their errors are raised without one. The
        file facades call this once they know which file was being
        decoded or encoded and raise the result ``from`` the original.
        Only ``path`` differs; ``message`` and ``details`` are kept.

        Args:
            path: Path of the file the error concerns.

        Returns:
            A new error of the same class.
        """
        return type(self)(self.message, path, self.details)


class InvalidArgumentError(DataCoderError, ValueError):
    """Raised when a caller passes a null or empty path."""


class FileError(DataCoderError):
    """Base error for filesystem failures."""


class NonexistentFileError(FileError):
    """Raised when a file is missing or cannot be read."""


class FileWriteError(FileError):
    """Raised when a file cannot be written."""


class DataFormatInvalidError(DataCoderError):
    """Raised when content cannot be turned into data, or back."""


class UnsupportedFormatError(DataFormatInvalidError):
    """Raised when no codec is registered for a format identifier.

    Attributes:
        format_id: The identifier that failed to resolve.
    """

    def __init__(
        self,
        format_id: str,
        path: Union[str, PathLike, None] = None,
        details: Optional[str] = None,
    ) -> None:
        self.format_id = format_id
        super().__init__(
            f"Unsupported data format '{format_id}'", path, details
        )

    def at_path(self, path: Union[str, PathLike]) -> "UnsupportedFormatError":
        """Create the same error naming the file, keeping ``format_id``."""
        return type(self)(self.format_id, path, self.details)
