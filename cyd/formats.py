"""Supported document formats."""

from enum import Enum
from typing import List

from .exceptions import ConfigError


class Format(str, Enum):
    """Supported conversion formats."""

    JSON = "json"
    TOML = "toml"
    YAML = "yaml"

    @classmethod
    def _missing_(cls, value):
        # accept any casing, e.g. "YAML" or " Json "
        if isinstance(value, str):
            val = value.strip().lower()
            for member in cls:
                if member.value == val:
                    return member
        return None

    @classmethod
    def names(cls) -> List[str]:
        """Format names in the order the CLI offers them."""
        return [member.value for member in cls]

    @classmethod
    def resolve(cls, name: str) -> "Format":
        """
        Resolve a user-supplied format name.

        Args:
            name: Format name, matched case-insensitively

        Returns:
            Matching Format

        Raises:
            ConfigError: If the name is not one of the supported formats
        """
        try:
            return cls(name)
        except ValueError:
            raise ConfigError(
                f"unrecognized format {name!r} (expected one of: {', '.join(cls.names())})"
            ) from None

    @property
    def label(self) -> str:
        """Upper-case name used in diagnostics."""
        return self.name
