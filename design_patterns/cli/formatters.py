"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables for example listings
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_table(data["examples"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_list(data["examples"])
    elif isinstance(data, dict) and "results" in data:
        return format_examples_list(data["results"])
    else:
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_examples_table(examples: List[Dict]) -> str:
    """Format example registrations as a Rich table."""
    if not examples:
        return "No examples found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Category", style="blue", width=11)
    table.add_column("Pattern", style="cyan", width=24)
    table.add_column("Variant", style="green", width=11)
    table.add_column("Interactive", style="yellow", width=11)
    table.add_column("Summary", width=50)

    for example in examples:
        table.add_row(
            str(example.get("category", "N/A")),
            str(example.get("pattern", "N/A")),
            str(example.get("variant", "N/A")),
            "yes" if example.get("interactive") else "no",
            str(example.get("summary", "")),
        )

    return _render(table)


def format_results_table(results: List[Dict]) -> str:
    """Format run results as a Rich table."""
    if not results:
        return "No examples were run."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Pattern", style="cyan")
    table.add_column("Variant", style="green")
    table.add_column("Status", style="yellow")

    for result in results:
        table.add_row(
            str(result.get("pattern", "N/A")),
            str(result.get("variant", "N/A")),
            str(result.get("status", "N/A")),
        )

    return _render(table)


def format_examples_list(items: List[Dict]) -> str:
    """Format dictionaries as 'key: value' blocks separated by blank lines."""
    if not items:
        return "No examples found."

    blocks = []
    for item in items:
        lines = [f"{key}: {value}" for key, value in item.items()]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
