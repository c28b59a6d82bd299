"""
datacoder: format-agnostic decoding and encoding of data files.
"""

from datacoder.codecs import (
    DataCodec,
    DataDecoder,
    DataEncoder,
    JsonCodec,
    YamlCodec,
)
from datacoder.config import DataCoderConfig
from datacoder.data import GenericData, is_generic, to_generic
from datacoder.datafile import (
    DatafileDecoder,
    DatafileEncoder,
    decode_file,
    encode_file,
    get_registry,
    register_format,
    supported_formats,
)
from datacoder.errors import (
    DataCoderError,
    DataFormatInvalidError,
    FileError,
    FileWriteError,
    InvalidArgumentError,
    NonexistentFileError,
    UnsupportedFormatError,
)
from datacoder.file import File
from datacoder.registry import FormatRegistry, default_registry

__version__ = "0.1.0"
__author__ = "DataCoder"

# Package metadata
__title__ = "datacoder"
__description__ = "Format-agnostic decoding and encoding of data files"

__license__ = "MIT"

# Version tuple for programmatic access (major, minor, patch)
VERSION = (0, 1, 0)

__all__ = [
    "__version__",
    "__author__",
    "VERSION",
    # Facade
    "DatafileDecoder",
    "DatafileEncoder",
    "decode_file",
    "encode_file",
    "register_format",
    "supported_formats",
    "get_registry",
    # Registry
    "FormatRegistry",
    "default_registry",
    # Codecs
    "DataCodec",
    "DataDecoder",
    "DataEncoder",
    "JsonCodec",
    "YamlCodec",
    # Files and data
    "File",
    "GenericData",
    "to_generic",
    "is_generic",
    "DataCoderConfig",
    # Errors
    "DataCoderError",
    "InvalidArgumentError",
    "FileError",
    "NonexistentFileError",
    "FileWriteError",
    "DataFormatInvalidError",
    "UnsupportedFormatError",
]
