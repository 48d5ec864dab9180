"""Allow running the CLI with ``python -m media_finder.cli``."""

from .main import main

main()
