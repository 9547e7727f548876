"""Generic value model shared by all formats.

A parsed document is held as plain Python data: ``None``, ``bool``, ``int``,
``float``, ``str``, ``list`` and ``dict`` with string keys. Dicts keep their
insertion order, which every emitter is told to preserve.

The format libraries can hand back a few values outside that model (dates
from TOML or YAML, YAML binary and set values, non-string YAML keys). They are
kept as parsed and rejected here, before serialization, when the target
format has no way to write them.
"""

import datetime
import math
from typing import Any, Dict, List, Union

from .exceptions import SerializeError
from .formats import Format

Value = Union[None, bool, int, float, str, List["Value"], Dict[str, "Value"]]

# Leaf types each format can write, besides lists and dicts.
_LEAF_TYPES = {
    Format.JSON: (type(None), bool, int, float, str),
    Format.TOML: (bool, int, float, str, datetime.date, datetime.time),
    Format.YAML: (type(None), bool, int, float, str, bytes, set, datetime.date),
}

# TOML integers are signed 64-bit.
TOML_INT_MIN = -(2**63)
TOML_INT_MAX = 2**63 - 1

_KINDS = [
    (type(None), "null"),
    (bool, "boolean"),
    (int, "integer"),
    (float, "float"),
    (str, "string"),
    (list, "sequence"),
    (dict, "mapping"),
    (datetime.datetime, "datetime"),
    (datetime.date, "date"),
    (datetime.time, "time"),
    (bytes, "binary value"),
    (set, "set"),
]


def describe(value: Any) -> str:
    """Human-readable kind of a value, for diagnostics."""
    for kind, name in _KINDS:
        if type(value) is kind:
            return name
    for kind, name in _KINDS:
        if isinstance(value, kind):
            return name
    return type(value).__name__


def ensure_representable(value: Any, format: Format) -> None:
    """
    Check that a value can be written in the given format.

    Args:
        value: Parsed document
        format: Target format

    Raises:
        SerializeError: On the first part of the value the format cannot hold
    """
    if format is Format.TOML and not isinstance(value, dict):
        raise SerializeError(
            f"document root must be a table, got a {describe(value)}", format
        )
    _check(value, format, "$")


def _check(value: Any, format: Format, path: str, in_array: bool = False) -> None:
    if isinstance(value, dict):
        for key, item in value.items():
            if format is not Format.YAML and not isinstance(key, str):
                raise SerializeError(
                    f"{describe(key)} key {key!r} at {path} (keys must be strings)",
                    format,
                )
            if format is Format.TOML:
                _check_toml_key(key, path)
            _check(item, format, _child_path(path, key))
        return

    if isinstance(value, list):
        if format is Format.TOML:
            _check_toml_array(value, path, in_array)
        for index, item in enumerate(value):
            _check(item, format, f"{path}[{index}]", in_array=True)
        return

    if not isinstance(value, _LEAF_TYPES[format]):
        raise SerializeError(
            f"{describe(value)} at {path} cannot be represented", format
        )

    if format is Format.JSON and isinstance(value, float) and not math.isfinite(value):
        raise SerializeError(f"{value!r} at {path} is not a valid JSON number", format)

    if (
        format is Format.TOML
        and isinstance(value, int)
        and not isinstance(value, bool)
        and not TOML_INT_MIN <= value <= TOML_INT_MAX
    ):
        raise SerializeError(
            f"integer {value} at {path} is outside the 64-bit range TOML allows", format
        )


def _check_toml_array(items: List[Any], path: str, in_array: bool) -> None:
    # The toml encoder writes a list of tables as [[array-of-tables]] and
    # flattens any other table it meets inside a list into its keys.
    tables = sum(1 for item in items if isinstance(item, dict))
    if not tables:
        return
    if in_array:
        raise SerializeError(
            f"table inside a nested array at {path} cannot be written", Format.TOML
        )
    if tables != len(items):
        raise SerializeError(
            f"array at {path} mixes tables and other values", Format.TOML
        )


def _check_toml_key(key: str, path: str) -> None:
    # Quoted keys go through the toml encoder's own escaping, which mangles
    # these two cases.
    if "\\x" in key:
        problem = "a backslash followed by 'x'"
    else:
        problem = next(
            (
                f"control character {ch!r}"
                for ch in key
                if ord(ch) < 0x100 and not ch.isprintable() and ch not in "\t\n\r"
            ),
            None,
        )
    if problem:
        raise SerializeError(
            f"key {key!r} at {path} contains {problem}", Format.TOML
        )


def _child_path(path: str, key: Any) -> str:
    if isinstance(key, str) and key.isidentifier():
        return f"{path}.{key}"
    return f"{path}[{key!r}]"
