"""Registry mapping format identifiers to decoders and encoders.

Format identifiers are compared to file extensions by plain equality;
an identifier with no entry is always an error, never a guess.
"""

from __future__ import annotations

import logging
from typing import Optional

from datacoder.codecs import DataCodec, DataDecoder, DataEncoder
from datacoder.codecs import JsonCodec, YamlCodec
from datacoder.config import DataCoderConfig
from datacoder.errors import InvalidArgumentError, UnsupportedFormatError

logger = logging.getLogger(__name__)


class FormatRegistry:
    """Mapping from format identifier to a decoder/encoder pair.

    Registration is expected to happen before concurrent use; the
    registry does no locking.

    Example:
        >>> registry = FormatRegistry()
        >>> registry.register_codec(JsonCodec())
        >>> registry.resolve_decoder("json")
        JsonCodec(indent=2, ensure_ascii=False, sort_keys=False)
    """

    def __init__(self, case_insensitive: bool = False) -> None:
        self.case_insensitive = case_insensitive
        self._entries: dict[str, tuple[DataDecoder, DataEncoder]] = {}

    def _key(self, format_id: str) -> str:
        return format_id.lower() if self.case_insensitive else format_id

    def register(
        self,
        format_id: str,
        decoder: DataDecoder,
        encoder: DataEncoder,
    ) -> None:
        """Associate a format identifier with a decoder and an encoder.

        Registering an identifier again replaces the earlier entry.

        Args:
            format_id: Format identifier, e.g. 'json'.
            decoder: Decoder used for files with this identifier.
            encoder: Encoder used for files with this identifier.

        Raises:
            InvalidArgumentError: If the identifier is empty or the
                decoder or encoder does not implement its contract.
        """
        if not isinstance(format_id, str) or not format_id:
            raise InvalidArgumentError(
                "Format identifier must be a non-empty string"
            )
        if not isinstance(decoder, DataDecoder):
            raise InvalidArgumentError(
                f"Decoder for '{format_id}' must be a DataDecoder",
                details=f"got {type(decoder).__name__}",
            )
        if not isinstance(encoder, DataEncoder):
            raise InvalidArgumentError(
                f"Encoder for '{format_id}' must be a DataEncoder",
                details=f"got {type(encoder).__name__}",
            )
        key = self._key(format_id)
        if key in self._entries:
            logger.debug(f"Replacing codecs registered for '{key}'")
        self._entries[key] = (decoder, encoder)

    def register_codec(self, codec: DataCodec) -> None:
        """Register a codec under every identifier it serves."""
        for format_id in codec.extensions:
            self.register(format_id, codec, codec)

    def unregister(self, format_id: str) -> None:
        """Remove a format identifier.

        Raises:
            UnsupportedFormatError: If the identifier is not registered.
        """
        try:
            del self._entries[self._key(format_id)]
        except KeyError:
            raise UnsupportedFormatError(format_id) from None

    def resolve_decoder(self, format_id: str) -> DataDecoder:
        """Get the decoder registered for a format identifier.

        Raises:
            UnsupportedFormatError: If the identifier is not registered.
        """
        return self._resolve(format_id)[0]

    def resolve_encoder(self, format_id: str) -> DataEncoder:
        """Get the encoder registered for a format identifier.

        Raises:
            UnsupportedFormatError: If the identifier is not registered.
        """
        return self._resolve(format_id)[1]

    def _resolve(self, format_id: str) -> tuple[DataDecoder, DataEncoder]:
        entry = self._entries.get(self._key(format_id))
        if entry is None:
            raise UnsupportedFormatError(
                format_id,
                details=f"supported formats: {self._describe_supported()}",
            )
        return entry

    def is_supported(self, format_id: str) -> bool:
        return self._key(format_id) in self._entries

    def supported_formats(self) -> list[str]:
        """Get the registered identifiers in sorted order."""
        return sorted(self._entries)

    def copy(self) -> "FormatRegistry":
        """Create an independent registry with the same entries."""
        other = FormatRegistry(case_insensitive=self.case_insensitive)
        other._entries = dict(self._entries)
        return other

    def _describe_supported(self) -> str:
        return ", ".join(self.supported_formats()) or "none"

    def __contains__(self, format_id: object) -> bool:
        return isinstance(format_id, str) and self.is_supported(format_id)

    def __len__(self) -> int:
        return len(self._entries)


def default_registry(
    config: Optional[DataCoderConfig] = None,
) -> FormatRegistry:
    """Build a registry holding the built-in JSON and YAML codecs.

    Args:
        config: Options for the codecs; defaults are used if omitted.

    Returns:
        Registry serving 'json', 'yaml' and 'yml'.
    """
    config = config or DataCoderConfig()
    registry = FormatRegistry(
        case_insensitive=config.case_insensitive_extensions
    )
    registry.register_codec(
        JsonCodec(
            indent=config.json_indent,
            ensure_ascii=config.json_ensure_ascii,
            sort_keys=config.json_sort_keys,
        )
    )
    registry.register_codec(
        YamlCodec(
            indent=config.yaml_indent,
            explicit_start=config.yaml_explicit_start,
        )
    )
    return registry
