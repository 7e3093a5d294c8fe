"""Parse, simulate and format in one call."""

from .formatter import format_output
from .model.engine import run_simulation
from .parser import parse_input


def process_input(text: str) -> str:
    """Run the whole Martian Robots pipeline on an input string."""
    area, robots = parse_input(text)
    return format_output(run_simulation(area, robots))
