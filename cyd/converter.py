"""Core data conversion logic."""

import json
from typing import Any, BinaryIO, Union

import toml
import yaml

from shared.logger import get_logger

from .exceptions import ParseError, SerializeError, StreamError
from .formats import Format
from .value import Value, ensure_representable

logger = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON number")


_TOML_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _dump_toml_string(value: str) -> str:
    """Write a TOML basic string, escaping control characters as \\uXXXX."""
    chars = []
    for ch in value:
        if ch in _TOML_ESCAPES:
            chars.append(_TOML_ESCAPES[ch])
        elif ch < " " or ch == "\x7f":
            chars.append(f"\\u{ord(ch):04x}")
        else:
            chars.append(ch)
    return '"' + "".join(chars) + '"'


class TomlEncoder(toml.TomlEncoder):
    """toml encoder that escapes every control character in string values."""

    def __init__(self):
        super().__init__(_dict=dict)
        self.dump_funcs[str] = _dump_toml_string


class DataConverter:
    """
    Convert documents between JSON, TOML, and YAML.

    Every conversion goes through the same generic value: the input is parsed
    into plain Python data and that data is serialized into the target format.
    """

    def __init__(self):
        """Initialize data converter."""
        logger.debug("Initialized DataConverter")

    def decode(self, raw: bytes) -> str:
        """
        Decode raw input as UTF-8.

        A leading byte-order mark is dropped.

        Raises:
            ParseError: If the bytes are not valid UTF-8
        """
        try:
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(f"input is not valid UTF-8: {e}") from e

    def parse(self, data: str, format: Format) -> Value:
        """
        Parse a document.

        Args:
            data: Document text
            format: Input format

        Returns:
            Parsed value

        Raises:
            ParseError: If the text is empty or not a valid document
        """
        if not data.strip():
            raise ParseError("input is empty", format)

        logger.debug(f"Parsing {len(data)} characters of {format.label}")

        try:
            if format is Format.JSON:
                return json.loads(data, parse_constant=_reject_constant)
            elif format is Format.TOML:
                return toml.loads(data)
            elif format is Format.YAML:
                return yaml.safe_load(data)
        except (ValueError, TypeError, IndexError, yaml.YAMLError) as e:
            # json.JSONDecodeError and toml.TomlDecodeError are ValueErrors
            logger.debug(f"{format.label} parser rejected input", exc_info=True)
            raise ParseError(_one_line(e), format) from e

        raise ParseError(f"unsupported format: {format!r}", format)

    def serialize(self, data: Value, format: Format) -> str:
        """
        Serialize a value.

        Args:
            data: Value to write
            format: Output format

        Returns:
            Document text. JSON is compact with no trailing newline; TOML and
            YAML end with a newline.

        Raises:
            SerializeError: If the value cannot be written in the format
        """
        ensure_representable(data, format)

        try:
            if format is Format.JSON:
                return json.dumps(
                    data, ensure_ascii=False, allow_nan=False, separators=(",", ":")
                )
            elif format is Format.TOML:
                return toml.dumps(data, encoder=TomlEncoder())
            elif format is Format.YAML:
                return yaml.safe_dump(
                    data,
                    default_flow_style=False,
                    allow_unicode=True,
                    sort_keys=False,
                )
        except (ValueError, TypeError, IndexError, yaml.YAMLError) as e:
            logger.debug(f"{format.label} emitter failed", exc_info=True)
            raise SerializeError(_one_line(e), format) from e

        raise SerializeError(f"unsupported format: {format!r}", format)

    def convert(self, data: str, from_format: Format, to_format: Format) -> str:
        """
        Convert document text from one format to another.

        Args:
            data: Document text
            from_format: Input format
            to_format: Output format

        Returns:
            Converted document text
        """
        value = self.parse(data, from_format)
        return self.serialize(value, to_format)

    def convert_stream(
        self,
        source: BinaryIO,
        target: BinaryIO,
        from_format: Union[Format, str],
        to_format: Union[Format, str],
    ) -> None:
        """
        Read a whole document from a stream, convert it and write the result.

        Format names are resolved before anything is read. The output is fully
        built before it is written, so a failed conversion writes nothing.

        Args:
            source: Binary stream holding the input document
            target: Binary stream receiving the converted document
            from_format: Input format or format name
            to_format: Output format or format name

        Raises:
            ConfigError: If a format name is not recognized
            StreamError: If reading or writing fails
            ParseError: If the input is not a valid document
            SerializeError: If the value cannot be written in the output format
        """
        from_fmt = Format.resolve(from_format)
        to_fmt = Format.resolve(to_format)
        logger.debug(f"Converting {from_fmt.label} to {to_fmt.label}")

        try:
            raw = source.read()
        except OSError as e:
            raise StreamError(f"cannot read input: {e}", action="read") from e

        logger.debug(f"Read {len(raw)} bytes")
        output = self.convert(self.decode(raw), from_fmt, to_fmt)

        try:
            target.write(output.encode("utf-8"))
            target.flush()
        except OSError as e:
            raise StreamError(f"cannot write output: {e}", action="write") from e

        logger.debug(f"Wrote {len(output)} characters of {to_fmt.label}")


def _one_line(error: Exception) -> str:
    """Collapse a library diagnostic onto a single line."""
    return " ".join(str(error).split())
