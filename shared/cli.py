"""Console helpers for the command-line tools.

Every message goes to stderr so that stdout only ever carries tool output.
"""

import functools
import sys

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True, soft_wrap=True, highlight=False)


def error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]error:[/bold red] {escape(message)}")


def warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]warning:[/yellow] {escape(message)}")


def handle_errors(func):
    """
    Turn interrupts and unexpected exceptions into a message and exit code 1.

    ``SystemExit`` raised by the wrapped command (including click's own exits)
    passes through untouched. When the command was called with
    ``verbose=True`` the original exception is re-raised for its traceback.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            warning("Interrupted")
            sys.exit(1)
        except Exception as e:
            if kwargs.get("verbose"):
                raise
            error(f"unexpected error: {e}")
            sys.exit(1)

    return wrapper
