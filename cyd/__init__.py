"""cyd - convert your data between JSON, TOML, and YAML."""

__version__ = "0.3.0"

from .converter import DataConverter
from .exceptions import ConfigError, CydError, ParseError, SerializeError, StreamError
from .formats import Format

__all__ = [
    "ConfigError",
    "CydError",
    "DataConverter",
    "Format",
    "ParseError",
    "SerializeError",
    "StreamError",
    "__version__",
]
