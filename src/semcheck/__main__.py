"""Allow ``python -m semcheck``."""

from .cli import main

main()
