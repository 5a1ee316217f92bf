#!/usr/bin/env python3
"""
Invoice Table Example

Demonstrates a bordered table with a totals footer, then the same data
without borders and with a caption.

Run this example:
    uv run python examples/invoice.py
"""

from tablewriter import Alignment, Preset, Table, apply_preset

HEADER = ["Date", "Description", "CV2", "Amount"]
FOOTER = ["", "", "Total", "$146.93"]
ROWS = [
    ["1/1/2014", "Domain name", "2233", "$10.98"],
    ["1/1/2014", "January Hosting", "2233", "$54.95"],
    ["1/4/2014", "February Hosting", "2233", "$51.00"],
    ["1/4/2014", "February Extra Bandwidth", "2233", "$30.00"],
]


def bordered() -> None:
    """Default look: full borders, centered labels, numbers right-aligned."""
    print("=== Bordered ===\n")
    table = Table()
    table.set_header(HEADER)
    table.set_footer(FOOTER)
    table.append_bulk(ROWS)
    table.render()


def floating_footer() -> None:
    """Without borders the footer rule only spans the populated cells."""
    print("\n=== No border ===\n")
    table = Table()
    table.set_header(HEADER)
    table.set_footer(FOOTER)
    table.set_border(False)
    table.set_caption(True, "Invoice for January and February 2014.")
    table.append_bulk(ROWS)
    table.render()


def markdown() -> None:
    print("\n=== Markdown ===\n")
    table = Table()
    apply_preset(table, Preset.MARKDOWN)
    table.set_header_alignment(Alignment.LEFT)
    table.set_header(HEADER)
    table.append_bulk(ROWS)
    table.render()


if __name__ == "__main__":
    bordered()
    floating_footer()
    markdown()
