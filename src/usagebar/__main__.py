"""Allow running usagebar with ``python -m usagebar``."""

from usagebar.cli import main


main()
