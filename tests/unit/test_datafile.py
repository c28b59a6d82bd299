"""Unit tests for the datafile decoder and encoder facades."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

import datacoder.datafile as datafile
from datacoder.codecs import DataDecoder, DataEncoder, JsonCodec
from datacoder.config import DataCoderConfig
from datacoder.datafile import DatafileDecoder, DatafileEncoder
from datacoder.errors import (
    DataFormatInvalidError,
    FileWriteError,
    InvalidArgumentError,
    NonexistentFileError,
    UnsupportedFormatError,
)
from datacoder.registry import FormatRegistry


class SetDecoder(DataDecoder):
    """Decoder that returns a value outside the generic model."""

    def decode(self, content: str) -> Any:
        return set(content.split())


class ReprEncoder(DataEncoder):
    def encode(self, data: Any) -> str:
        return repr(data)


@pytest.fixture
def shared_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give each test a fresh module-level registry."""
    monkeypatch.setattr(datafile, "_registry", None)


# --- DatafileDecoder ---


# Test decoding a JSON file.
def test_decode_file_json(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text('{"a": 1, "b": [2, 3]}')

    assert DatafileDecoder().decode_file(path) == {"a": 1, "b": [2, 3]}


# Test decoding a YAML file with the yml extension.
def test_decode_file_yml(tmp_path: Path) -> None:
    path = tmp_path / "data.yml"
    path.write_text("a: 1\nb: [2, 3]\n")

    assert DatafileDecoder().decode_file(str(path)) == {"a": 1, "b": [2, 3]}


# Test decoding with a None or empty path raises InvalidArgumentError.
@pytest.mark.parametrize("path", [None, ""])
def test_decode_file_invalid_path(path) -> None:
    with pytest.raises(InvalidArgumentError):
        DatafileDecoder().decode_file(path)


# Test a missing file is reported before the extension is checked.
def test_decode_file_missing_unsupported_extension(tmp_path: Path) -> None:
    with pytest.raises(NonexistentFileError):
        DatafileDecoder().decode_file(tmp_path / "nonexistent.format")


# Test an unregistered extension fails whatever the content.
def test_decode_file_unsupported_extension(tmp_path: Path) -> None:
    path = tmp_path / "data.nonexistentformat"
    path.write_text('{"a": 1}')

    with pytest.raises(UnsupportedFormatError) as exc_info:
        DatafileDecoder().decode_file(path)

    assert exc_info.value.format_id == "nonexistentformat"
    assert exc_info.value.path == str(path)


# Test a file without extension is unsupported.
def test_decode_file_without_extension(tmp_path: Path) -> None:
    path = tmp_path / "data"
    path.write_text('{"a": 1}')

    with pytest.raises(DataFormatInvalidError, match="format ''"):
        DatafileDecoder().decode_file(path)


# Test invalid content raises DataFormatInvalidError naming the file.
def test_decode_file_invalid_content(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text("{invalid json}")

    with pytest.raises(DataFormatInvalidError) as exc_info:
        DatafileDecoder().decode_file(path)

    assert not isinstance(exc_info.value, UnsupportedFormatError)
    assert exc_info.value.path == str(path)
    assert "Invalid JSON" in str(exc_info.value)


# Test the underlying library error stays reachable through the chain.
def test_decode_file_invalid_content_cause(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text("[1, 2")

    with pytest.raises(DataFormatInvalidError) as exc_info:
        DatafileDecoder().decode_file(path)

    cause = exc_info.value.__cause__
    assert isinstance(cause, DataFormatInvalidError)
    assert isinstance(cause.__cause__, json.JSONDecodeError)


# Test an empty file is a decode error.
@pytest.mark.parametrize("content", ["", " \n"])
def test_decode_file_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text(content)

    with pytest.raises(DataFormatInvalidError, match="empty"):
        DatafileDecoder().decode_file(path)


# Test a control character in YAML is a decode error naming the file.
def test_decode_file_yaml_control_character(tmp_path: Path) -> None:
    path = tmp_path / "data.yaml"
    path.write_text("name: \x01\n")

    with pytest.raises(DataFormatInvalidError, match="Invalid YAML") as info:
        DatafileDecoder().decode_file(path)

    assert info.value.path == str(path)


# Test JSON nested hundreds of levels deep decodes.
def test_decode_file_deeply_nested_json(tmp_path: Path) -> None:
    path = tmp_path / "deep.json"
    path.write_text("[" * 900 + "]" * 900)

    node = DatafileDecoder().decode_file(path)

    depth = 0
    while node:
        node = node[0]
        depth += 1
    assert depth == 899


# Test a decoder result outside the generic model is rejected.
def test_decode_file_rejects_non_generic_result(tmp_path: Path) -> None:
    registry = FormatRegistry()
    registry.register("words", SetDecoder(), ReprEncoder())
    path = tmp_path / "data.words"
    path.write_text("a b")

    with pytest.raises(DataFormatInvalidError, match="not representable"):
        DatafileDecoder(registry=registry).decode_file(path)


# Test the configured encoding is used to read files.
def test_decode_file_with_encoding(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_bytes('{"name": "caf\xe9"}'.encode("latin-1"))
    config = DataCoderConfig(encoding="latin-1")

    assert DatafileDecoder(config=config).decode_file(path) == {
        "name": "caf\xe9"
    }


# Test decode_string uses the registry without touching files.
def test_decode_string() -> None:
    assert DatafileDecoder().decode_string("[1, 2]", "yaml") == [1, 2]


# Test decode_string with an unknown format.
def test_decode_string_unsupported() -> None:
    with pytest.raises(UnsupportedFormatError):
        DatafileDecoder().decode_string("[1, 2]", "toml")


# --- DatafileEncoder ---


# Test encoding to a JSON file.
def test_encode_file_json(tmp_path: Path) -> None:
    path = tmp_path / "out.json"

    DatafileEncoder().encode_file(path, {"a": 1, "b": [2, 3]})

    assert json.loads(path.read_text()) == {"a": 1, "b": [2, 3]}


# Test encoding to a YAML file.
def test_encode_file_yaml(tmp_path: Path) -> None:
    path = tmp_path / "out.yaml"

    DatafileEncoder().encode_file(path, {"a": 1, "b": [2, 3]})

    assert path.read_text() == "a: 1\nb:\n- 2\n- 3\n"


# Test an explicit format overrides the extension.
def test_encode_file_format_override(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"

    DatafileEncoder().encode_file(path, {"a": 1}, format_id="json")

    assert json.loads(path.read_text()) == {"a": 1}


# Test encoding with a None or empty path raises InvalidArgumentError.
@pytest.mark.parametrize("path", [None, ""])
def test_encode_file_invalid_path(path) -> None:
    with pytest.raises(InvalidArgumentError):
        DatafileEncoder().encode_file(path, {"a": 1})


# Test an unsupported extension fails without writing.
def test_encode_file_unsupported_extension(tmp_path: Path) -> None:
    path = tmp_path / "out.xml"

    with pytest.raises(UnsupportedFormatError) as exc_info:
        DatafileEncoder().encode_file(path, {"a": 1})

    assert exc_info.value.path == str(path)
    assert not path.exists()


# Test non-representable data fails without touching an existing file.
def test_encode_file_not_representable(tmp_path: Path) -> None:
    path = tmp_path / "out.json"
    path.write_text('{"kept": true}')

    with pytest.raises(DataFormatInvalidError) as exc_info:
        DatafileEncoder().encode_file(path, {"value": float("nan")})

    assert exc_info.value.path == str(path)
    assert path.read_text() == '{"kept": true}'


# Test self-referencing data fails without creating the file.
def test_encode_file_self_referencing(tmp_path: Path) -> None:
    path = tmp_path / "out.json"
    data: dict = {}
    data["self"] = data

    with pytest.raises(DataFormatInvalidError, match="self-referencing"):
        DatafileEncoder().encode_file(path, data)

    assert not path.exists()


# Test text the configured encoding cannot hold keeps the old content.
def test_encode_file_unencodable_keeps_file(tmp_path: Path) -> None:
    path = tmp_path / "out.yaml"
    path.write_text("kept: true\n")
    config = DataCoderConfig(encoding="ascii")

    with pytest.raises(DataFormatInvalidError) as exc_info:
        DatafileEncoder(config=config).encode_file(path, {"name": "café"})

    assert exc_info.value.path == str(path)
    assert path.read_text() == "kept: true\n"


# Test an unwritable target raises FileWriteError.
def test_encode_file_unwritable(tmp_path: Path) -> None:
    path = tmp_path / "missing" / "out.json"

    with pytest.raises(FileWriteError):
        DatafileEncoder().encode_file(path, {"a": 1})


# Test the configured JSON layout is used.
def test_encode_file_with_config(tmp_path: Path) -> None:
    path = tmp_path / "out.json"
    config = DataCoderConfig(json_indent=None, json_sort_keys=True)

    DatafileEncoder(config=config).encode_file(path, {"b": 1, "a": 2})

    assert path.read_text() == '{"a": 2, "b": 1}\n'


# Test a custom registry is used by the encoder.
def test_encode_file_custom_registry(tmp_path: Path) -> None:
    registry = FormatRegistry()
    registry.register("repr", SetDecoder(), ReprEncoder())
    path = tmp_path / "out.repr"

    DatafileEncoder(registry=registry).encode_file(path, [1, "a"])

    assert path.read_text() == "[1, 'a']"


# Test encode_string returns the serialised text.
def test_encode_string() -> None:
    assert DatafileEncoder().encode_string({"a": 1}, "yml") == "a: 1\n"


# --- Module-level helpers ---


# Test module-level decode_file and encode_file share one registry.
def test_module_helpers_round_trip(
    tmp_path: Path, shared_registry: None
) -> None:
    path = tmp_path / "data.json"

    datafile.encode_file(path, {"a": 1, "b": [2, 3]})

    assert datafile.decode_file(path) == {"a": 1, "b": [2, 3]}


# Test register_format makes a new extension available.
def test_register_format(tmp_path: Path, shared_registry: None) -> None:
    path = tmp_path / "data.conf"
    path.write_text('{"a": 1}')

    with pytest.raises(UnsupportedFormatError):
        datafile.decode_file(path)

    datafile.register_format("conf", JsonCodec(), JsonCodec())

    assert datafile.decode_file(path) == {"a": 1}
    assert "conf" in datafile.supported_formats()


# Test the shared registry is built once.
def test_get_registry_is_shared(shared_registry: None) -> None:
    assert datafile.get_registry() is datafile.get_registry()
    assert datafile.supported_formats() == ["json", "yaml", "yml"]
