"""
YAML codec built on PyYAML's safe loader and dumper.

The loader is a ``SafeLoader`` without the implicit timestamp resolver,
so unquoted dates stay strings and every decoded value fits the generic
data model.
"""

from __future__ import annotations

import copy
from typing import Any

import yaml

from datacoder.codecs.base import DataCodec
from datacoder.data import GenericData, to_generic
from datacoder.errors import DataFormatInvalidError

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class GenericLoader(yaml.SafeLoader):
    """Safe YAML loader that leaves timestamps as strings."""


# Class-level dict shared with SafeLoader, so copy before filtering.
GenericLoader.yaml_implicit_resolvers = copy.deepcopy(
    yaml.SafeLoader.yaml_implicit_resolvers
)
for _first, _resolvers in list(GenericLoader.yaml_implicit_resolvers.items()):
    GenericLoader.yaml_implicit_resolvers[_first] = [
        r for r in _resolvers if r[0] != TIMESTAMP_TAG
    ]


class YamlCodec(DataCodec):
    """Codec for single-document YAML streams.

    Serves both the ``yaml`` and ``yml`` extensions.

    Example:
        >>> codec = YamlCodec()
        >>> codec.decode("a: 1\\nb: [2, 3]\\n")
        {'a': 1, 'b': [2, 3]}
    """

    format_id = "yaml"
    extensions = ("yaml", "yml")

    def __init__(
        self,
        indent: int = 2,
        default_flow_style: bool = False,
        allow_unicode: bool = True,
        explicit_start: bool = False,
    ) -> None:
        super().__init__()
        self.indent = indent
        self.default_flow_style = default_flow_style
        self.allow_unicode = allow_unicode
        self.explicit_start = explicit_start

    def decode(self, content: str) -> GenericData:
        """Parse a YAML document.

        Args:
            content: YAML text holding exactly one document.

        Returns:
            Decoded data in the generic data model.

        Raises:
            DataFormatInvalidError: If content is empty, invalid YAML,
                holds several documents, or decodes to values outside
                the generic model (binary, sets, non-string keys).
        """
        self._require_content(content)
        loader = None
        try:
            loader = GenericLoader(content)
            node = loader.get_single_node()
            if node is None:
                raise DataFormatInvalidError(
                    "YAML content holds no document"
                )
            data = loader.construct_document(node)
        except yaml.YAMLError as e:
            raise DataFormatInvalidError("Invalid YAML", details=str(e)) from e
        except RecursionError as e:
            raise DataFormatInvalidError(
                "YAML content is nested too deeply", details=str(e)
            ) from e
        finally:
            if loader is not None:
                loader.dispose()
        return to_generic(data)

    def encode(self, data: Any) -> str:
        """Serialise data as a YAML document.

        Mapping order is kept as given.

        Args:
            data: Generic data to serialise.

        Returns:
            YAML text.

        Raises:
            DataFormatInvalidError: If data is outside the generic model.
        """
        data = to_generic(data)
        try:
            return yaml.dump(
                data,
                Dumper=yaml.SafeDumper,
                indent=self.indent,
                default_flow_style=self.default_flow_style,
                allow_unicode=self.allow_unicode,
                explicit_start=self.explicit_start,
                sort_keys=False,
            )
        except (yaml.YAMLError, RecursionError) as e:
            raise DataFormatInvalidError(
                "Data cannot be encoded as YAML", details=str(e)
            ) from e

    def __repr__(self) -> str:
        return (
            f"YamlCodec(indent={self.indent!r}, "
            f"default_flow_style={self.default_flow_style!r}, "
            f"allow_unicode={self.allow_unicode!r}, "
            f"explicit_start={self.explicit_start!r})"
        )
