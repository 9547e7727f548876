"""Allow running cyd with ``python -m cyd``."""

from .cli import main

if __name__ == "__main__":
    main(prog_name="cyd")
