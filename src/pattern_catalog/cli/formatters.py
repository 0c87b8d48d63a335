"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Rich tables for pattern listings
- Plain text for demo output
- JSON and YAML for scripting
"""
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console as RichConsole
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return format_text_output(data)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"])
    else:
        # Fallback to text for structures without a tabular shape
        return format_text_output(data)


def format_text_output(data: Any) -> str:
    """Format data as plain text."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_text(data["results"])
    elif isinstance(data, str):
        return data
    else:
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format pattern summaries as a Rich table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Summary")

    for pattern in patterns:
        table.add_row(
            pattern.get("key", "N/A"),
            pattern.get("name", "N/A"),
            pattern.get("category", "N/A"),
            pattern.get("summary", ""),
        )

    return _render(table)


def format_results_table(results: List[Dict]) -> str:
    """Format demo results as a Rich table, one row per printed line."""
    if not results:
        return "No demos run."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Pattern", style="cyan", no_wrap=True)
    table.add_column("Output")

    for result in results:
        table.add_row(result.get("name", "N/A"), "\n".join(result.get("lines", [])))

    return _render(table)


def format_patterns_list(patterns: List[Dict]) -> str:
    """Format pattern summaries grouped by category."""
    if not patterns:
        return "No patterns found."

    lines = []
    current = None
    width = max(len(p.get("key", "")) for p in patterns)
    for pattern in patterns:
        category = pattern.get("category")
        if category != current:
            if current is not None:
                lines.append("")
            lines.append(f"[{category}]")
            current = category
        lines.append(f"  {pattern.get('key', ''):<{width}}  {pattern.get('summary', '')}")
    return "\n".join(lines)


def format_results_text(results: List[Dict]) -> str:
    """Format demo results as headed blocks of output lines."""
    blocks = []
    for result in results:
        blocks.append("\n".join([f"== {result.get('name', 'N/A')} =="] + list(result.get("lines", []))))
    return "\n\n".join(blocks)


def _render(table: Table) -> str:
    console = RichConsole(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
