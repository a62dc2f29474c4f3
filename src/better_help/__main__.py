"""Allow running as ``python -m better_help``."""

from better_help.server import main

main()
