"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables for settings listings
"""

import json
from typing import Any, Dict

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "settings" in data:
        return format_settings_table(data["settings"])
    elif isinstance(data, dict):
        return format_settings_table({str(k): v for k, v in data.items()})
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def _printable(value: Any) -> str:
    """Show undecodable bytes carried in settings as backslash escapes."""
    return str(value).encode("utf-8", "backslashreplace").decode("utf-8")


def format_settings_table(settings: Dict[str, Any]) -> str:
    """Format a key/value mapping as a two-column Rich table."""
    if not settings:
        return "No settings found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")

    for key, value in settings.items():
        table.add_row(_printable(key), _printable(value))

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)

    return capture.get().rstrip("\n")
