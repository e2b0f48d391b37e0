"""
Line filtering: keep policy and display mode applied over a stream of lines.
"""

from line_filter.filtering.driver import FilterDriver, render_line

__all__ = ["FilterDriver", "render_line"]
