"""
Format codecs: decoders and encoders for each supported data format.

Each codec delegates parsing to a format library and normalises that
library's failures into DataFormatInvalidError.
"""

from datacoder.codecs.base import DataCodec, DataDecoder, DataEncoder
from datacoder.codecs.json_codec import JsonCodec
from datacoder.codecs.yaml_codec import YamlCodec

__all__ = ["DataCodec", "DataDecoder", "DataEncoder", "JsonCodec", "YamlCodec"]
