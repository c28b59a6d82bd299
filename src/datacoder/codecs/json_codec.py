"""
JSON codec built on the standard library ``json`` module.

Only standard JSON is accepted: the ``NaN`` and ``Infinity`` extensions
that ``json`` tolerates by default are rejected on both sides.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from datacoder.codecs.base import DataCodec
from datacoder.data import GenericData, to_generic
from datacoder.errors import DataFormatInvalidError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


class JsonCodec(DataCodec):
    """Codec for JSON documents.

    Example:
        >>> codec = JsonCodec(indent=None)
        >>> codec.decode('{"a": 1, "b": [2, 3]}')
        {'a': 1, 'b': [2, 3]}
        >>> codec.encode({"a": 1})
        '{"a": 1}\\n'
    """

    format_id = "json"

    def __init__(
        self,
        indent: Optional[int] = 2,
        ensure_ascii: bool = False,
        sort_keys: bool = False,
    ) -> None:
        super().__init__()
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.sort_keys = sort_keys

    def decode(self, content: str) -> GenericData:
        """Parse a JSON document.

        Args:
            content: JSON text.

        Returns:
            Decoded data; objects become dicts in document order.

        Raises:
            DataFormatInvalidError: If content is empty or invalid JSON.
        """
        self._require_content(content)
        try:
            return json.loads(content, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            raise DataFormatInvalidError("Invalid JSON", details=str(e)) from e

    def encode(self, data: Any) -> str:
        """Serialise data as a JSON document.

        Args:
            data: Generic data to serialise.

        Returns:
            JSON text ending with a newline.

        Raises:
            DataFormatInvalidError: If data is outside the generic model
                or holds a non-finite float.
        """
        data = to_generic(data)
        try:
            text = json.dumps(
                data,
                indent=self.indent,
                ensure_ascii=self.ensure_ascii,
                sort_keys=self.sort_keys,
                allow_nan=False,
            )
        except (ValueError, TypeError, RecursionError) as e:
            raise DataFormatInvalidError(
                "Data cannot be encoded as JSON", details=str(e)
            ) from e
        return text + "\n"

    def __repr__(self) -> str:
        return (
            f"JsonCodec(indent={self.indent!r}, "
            f"ensure_ascii={self.ensure_ascii!r}, "
            f"sort_keys={self.sort_keys!r})"
        )
