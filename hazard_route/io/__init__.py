"""I/O layer: input parsing, text results, Parquet schemas and output paths."""

from hazard_route.io.parsing import InputFormatError, RunInput, parse_input, read_input
from hazard_route.io.render import format_result, format_steps, render_grid
from hazard_route.io.results import write_result

__all__ = [
    "InputFormatError",
    "RunInput",
    "format_result",
    "format_steps",
    "render_grid",
    "parse_input",
    "read_input",
    "write_result",
]
