"""Filesystem access for data files.

:class:`File` wraps a path and is the only place the library touches the
filesystem. Construction and extension lookup never do I/O.
"""

from __future__ import annotations

import logging
import os
from os import PathLike
from pathlib import Path
from typing import Any, Union

from datacoder.errors import (
    DataFormatInvalidError,
    FileWriteError,
    InvalidArgumentError,
    NonexistentFileError,
)

logger = logging.getLogger(__name__)


class File:
    """A data file identified by its path.

    Example:
        >>> file = File("files/data.json")
        >>> file.extension
        'json'
        >>> data = file.get_content()  # doctest: +SKIP
    """

    __slots__ = ("_path", "_file_path")

    def __init__(self, path: Union[str, PathLike, None]) -> None:
        """Create a file wrapper.

        Args:
            path: Path of the file; the file need not exist yet.

        Raises:
            InvalidArgumentError: If path is None or empty.
        """
        if path is None:
            raise InvalidArgumentError("File path must not be None")
        path = os.fspath(path)
        if not isinstance(path, str) or path == "":
            raise InvalidArgumentError("File path must be a non-empty string")
        self._path = path
        self._file_path = Path(path)

    @property
    def path(self) -> str:
        """Path the file was created with."""
        return self._path

    @property
    def extension(self) -> str:
        """Text after the last dot of the final path segment.

        Returns an empty string when the final segment has no dot.
        """
        _, dot, extension = self._file_path.name.rpartition(".")
        return extension if dot else ""

    def get_extension(self) -> str:
        """Return :attr:`extension`."""
        return self.extension

    def exists(self) -> bool:
        return self._file_path.is_file()

    def readable(self) -> bool:
        return self.exists() and os.access(self._file_path, os.R_OK)

    def writable(self) -> bool:
        """Check whether the file can be created or overwritten."""
        if self._file_path.is_dir():
            return False
        if self._file_path.exists():
            return os.access(self._file_path, os.W_OK)
        parent = self._file_path.absolute().parent
        return parent.is_dir() and os.access(parent, os.W_OK)

    def get_content(self, encoding: str = "utf-8") -> str:
        """Read the whole file as text.

        Args:
            encoding: Text encoding of the file.

        Returns:
            File content.

        Raises:
            NonexistentFileError: If the file is missing or unreadable.
            DataFormatInvalidError: If the bytes are not valid text in
                the given encoding.
        """
        if not self.exists():
            raise NonexistentFileError(
                "File not found", self._path, "file does not exist"
            )
        if not self.readable():
            raise NonexistentFileError(
                "File not found", self._path, "file is not readable"
            )
        try:
            with open(self._file_path, "r", encoding=encoding) as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise DataFormatInvalidError(
                f"File is not valid {encoding} text", self._path, str(e)
            ) from e
        except OSError as e:
            raise NonexistentFileError(
                "File not found", self._path, str(e)
            ) from e
        logger.debug(f"Read {len(content)} characters from {self._path}")
        return content

    def put_content(self, data: str, encoding: str = "utf-8") -> None:
        """Write text to the file, replacing any previous content.

        Args:
            data: Text to write.
            encoding: Text encoding to write with.

        Raises:
            DataFormatInvalidError: If the text cannot be represented in
                the given encoding. The file is left untouched.
            FileWriteError: If the file cannot be written.
        """
        try:
            payload = data.encode(encoding)
        except UnicodeEncodeError as e:
            raise DataFormatInvalidError(
                f"Data cannot be written as {encoding} text",
                self._path,
                str(e),
            ) from e
        if not self.writable():
            raise FileWriteError("File is not writable", self._path)
        try:
            with open(self._file_path, "wb") as f:
                f.write(payload)
        except OSError as e:
            raise FileWriteError(
                "Failed to write file", self._path, str(e)
            ) from e
        logger.debug(f"Wrote {len(payload)} bytes to {self._path}")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, File):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __repr__(self) -> str:
        return f"File({self._path!r})"
