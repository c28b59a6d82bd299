"""Datafile decoder and encoder facades.

These classes tie together :class:`~datacoder.file.File`, the format
registry and the codecs. Decoding runs a fixed pipeline that stops at
the first failing stage:

1. Build a File from the path (InvalidArgumentError).
2. Read its content (NonexistentFileError).
3. Resolve a decoder from the extension (UnsupportedFormatError).
4. Decode the content (DataFormatInvalidError).
5. Check the result fits the generic data model.

Encoding mirrors it, and writes the file only once the whole document
has been serialised in memory.
"""

from __future__ import annotations

import logging
from os import PathLike
from typing import Any, Optional, Union

from datacoder.codecs import DataDecoder, DataEncoder
from datacoder.config import DataCoderConfig
from datacoder.data import GenericData, to_generic
from datacoder.errors import DataFormatInvalidError
from datacoder.file import File
from datacoder.registry import FormatRegistry, default_registry

logger = logging.getLogger(__name__)

PathArg = Union[str, PathLike, None]


class _DatafileFacade:
    """Registry and config handling shared by both facades."""

    def __init__(
        self,
        registry: Optional[FormatRegistry] = None,
        config: Optional[DataCoderConfig] = None,
    ) -> None:
        self.config = config or DataCoderConfig()
        if registry is None:
            registry = default_registry(self.config)
        self.registry = registry


class DatafileDecoder(_DatafileFacade):
    """Decode data files into generic data based on their extension.

    Example:
        >>> decoder = DatafileDecoder()
        >>> decoder.decode_file("settings.yaml")  # doctest: +SKIP
        {'name': 'demo', 'debug': False}
    """

    def decode_file(self, path: PathArg) -> GenericData:
        """Read and decode a data file.

        Args:
            path: Path of the file; its extension selects the format.

        Returns:
            Decoded data.

        Raises:
            InvalidArgumentError: If path is None or empty.
            NonexistentFileError: If the file is missing or unreadable.
            DataFormatInvalidError: If the extension has no registered
                decoder, or the content is not valid for the format.
        """
        file = File(path)
        content = file.get_content(self.config.encoding)
        try:
            decoder = self.registry.resolve_decoder(file.extension)
            logger.debug(f"Decoding {file.path} as '{file.extension}'")
            return self._decode(decoder, content)
        except DataFormatInvalidError as e:
            raise e.at_path(file.path) from e

    def decode_string(self, content: str, format_id: str) -> GenericData:
        """Decode in-memory content using a registered format.

        Raises:
            DataFormatInvalidError: If the format is not registered or
                the content is not valid for it.
        """
        return self._decode(self.registry.resolve_decoder(format_id), content)

    @staticmethod
    def _decode(decoder: DataDecoder, content: str) -> GenericData:
        if not content.strip():
            raise DataFormatInvalidError("Data file is empty")
        return to_generic(decoder.decode(content))


class DatafileEncoder(_DatafileFacade):
    """Encode generic data into data files based on their extension.

    Example:
        >>> encoder = DatafileEncoder()
        >>> encoder.encode_file("out.json", {"a": 1})  # doctest: +SKIP
    """

    def encode_file(
        self,
        path: PathArg,
        data: Any,
        format_id: Optional[str] = None,
    ) -> None:
        """Encode data and write it to a file.

        Args:
            path: Destination path; its extension selects the format.
            data: Generic data to encode.
            format_id: Format to use instead of the path's extension.

        Raises:
            InvalidArgumentError: If path is None or empty.
            DataFormatInvalidError: If the format has no registered
                encoder, or data cannot be represented in it or
                in the configured text encoding.
            FileWriteError: If the file cannot be written.
        """
        file = File(path)
        if format_id is None:
            format_id = file.extension
        try:
            text = self.encode_string(data, format_id)
        except DataFormatInvalidError as e:
            raise e.at_path(file.path) from e
        logger.debug(f"Writing {file.path} as '{format_id}'")
        file.put_content(text, self.config.encoding)

    def encode_string(self, data: Any, format_id: str) -> str:
        """Encode data in memory using a registered format.

        Raises:
            DataFormatInvalidError: If the format is not registered or
                data cannot be represented in it.
        """
        encoder: DataEncoder = self.registry.resolve_encoder(format_id)
        return encoder.encode(to_generic(data))


# Shared registry behind the module-level helpers, built on first use.
_registry: Optional[FormatRegistry] = None


def get_registry() -> FormatRegistry:
    """Get the registry used by the module-level helpers."""
    global _registry
    if _registry is None:
        _registry = default_registry()
    return _registry


def register_format(
    extension: str, decoder: DataDecoder, encoder: DataEncoder
) -> None:
    """Add or replace a format used by decode_file and encode_file.

    Args:
        extension: File extension (format identifier) without the dot.
        decoder: Decoder for files with that extension.
        encoder: Encoder for files with that extension.
    """
    get_registry().register(extension, decoder, encoder)


def supported_formats() -> list[str]:
    """Get the extensions decode_file and encode_file understand."""
    return get_registry().supported_formats()


def decode_file(path: PathArg) -> GenericData:
    """Decode a data file using the shared registry.

    See :meth:`DatafileDecoder.decode_file`.
    """
    return DatafileDecoder(registry=get_registry()).decode_file(path)


def encode_file(
    path: PathArg, data: Any, format_id: Optional[str] = None
) -> None:
    """Encode data to a file using the shared registry.

    See :meth:`DatafileEncoder.encode_file`.
    """
    DatafileEncoder(registry=get_registry()).encode_file(
        path, data, format_id
    )
