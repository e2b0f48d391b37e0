"""Allow ``python -m line_filter``."""

from line_filter.cli import run

run()
