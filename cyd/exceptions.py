"""Exceptions raised while converting a document."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .formats import Format


class CydError(Exception):
    """Base class for conversion failures.

    ``stage`` names the failing step and is used as the prefix of the
    one-line diagnostic printed by the CLI.
    """

    stage = "conversion error"

    def __str__(self) -> str:
        return f"{self.stage}: {super().__str__()}"


class ConfigError(CydError):
    """An input or output format name is not recognized."""

    stage = "configuration error"


class StreamError(CydError):
    """Reading standard input or writing standard output failed."""

    def __init__(self, message: str, action: str = "read"):
        super().__init__(message)
        self.action = action

    @property
    def stage(self) -> str:
        return f"{self.action} error"


class ParseError(CydError):
    """The input is not a valid document in the declared format."""

    def __init__(self, message: str, format: Optional["Format"] = None):
        super().__init__(message)
        self.format = format

    @property
    def stage(self) -> str:
        if self.format is None:
            return "parse error"
        return f"{self.format.label} parse error"


class SerializeError(CydError):
    """The value cannot be written in the declared output format."""

    def __init__(self, message: str, format: "Format"):
        super().__init__(message)
        self.format = format

    @property
    def stage(self) -> str:
        return f"{self.format.label} serialize error"
