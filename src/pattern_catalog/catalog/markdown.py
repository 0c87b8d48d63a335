"""Markdown rendering of catalog entries.

Each entry becomes one write-up with the same four parts: the prose
explanation, the ASCII class diagram, the code listing and the sample
output produced by actually running the demo.
"""
import ast
import importlib
import inspect
from pathlib import Path
from typing import List, Optional

from pattern_catalog.catalog.registry import PatternRegistry, get_pattern_registry
from pattern_catalog.domain.entry import DemoResult, PatternEntry
from pattern_catalog.domain.exceptions import ExportError
from pattern_catalog.infrastructure.logging.logger import get_logger

# Module-level names rendered elsewhere in the write-up
_HIDDEN_ASSIGNMENTS = {"DIAGRAM", "PATTERN_KEY"}


def code_listing(entry: PatternEntry) -> str:
    """Source of the entry's module without its docstring and diagram."""
    module = importlib.import_module(entry.module)
    source = inspect.getsource(module)
    lines = source.splitlines()
    skipped = set()
    for index, node in enumerate(ast.parse(source).body):
        is_docstring = (
            index == 0
            and isinstance(node, ast.Expr)
            and isinstance(node.value, ast.Constant)
            and isinstance(node.value.value, str)
        )
        is_hidden = isinstance(node, ast.Assign) and any(
            isinstance(t, ast.Name) and t.id in _HIDDEN_ASSIGNMENTS for t in node.targets
        )
        if is_docstring or is_hidden:
            skipped.update(range(node.lineno - 1, node.end_lineno))
    kept = [line for number, line in enumerate(lines) if number not in skipped]
    return "\n".join(kept).strip("\n")


def render_entry(entry: PatternEntry, result: DemoResult, include_source: bool = True) -> str:
    """Render one entry as a markdown document."""
    parts = [
        f"# {entry.name}",
        "",
        f"*Category: {entry.category.heading}*",
        "",
        f"> {entry.summary}",
        "",
    ]
    if entry.explanation:
        parts += [entry.explanation, ""]
    if entry.diagram:
        parts += ["## Class Diagram", "", "```text", entry.diagram, "```", ""]
    if include_source:
        parts += ["## Code", "", "```python", code_listing(entry), "```", ""]
    parts += ["## Output", "", "```text", *result.lines, "```", ""]
    return "\n".join(parts)


def render_index(entries: List[PatternEntry]) -> str:
    """Render the README table of contents grouped by category."""
    parts = ["# Design Patterns & SOLID Principles", ""]
    current = None
    for entry in entries:
        if entry.category != current:
            current = entry.category
            parts += ["", f"## {current.heading}", "", "| Pattern | Summary |", "| --- | --- |"]
        parts.append(f"| [{entry.name}]({entry.category.value}/{entry.key}.md) | {entry.summary} |")
    parts.append("")
    return "\n".join(parts)


def export_catalog(output_dir: str, registry: Optional[PatternRegistry] = None,
                   include_source: bool = True) -> List[Path]:
    """
    Write one markdown file per entry plus a README index.

    Returns:
        Paths written, README last

    Raises:
        ExportError: If a file cannot be written
    """
    registry = registry or get_pattern_registry()
    logger = get_logger(__name__)
    root = Path(output_dir)
    written: List[Path] = []
    entries = registry.list()
    try:
        for entry in entries:
            result = registry.run(entry.key)
            target = root / entry.category.value / f"{entry.key}.md"
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(render_entry(entry, result, include_source), encoding="utf-8")
            written.append(target)
        index = root / "README.md"
        index.write_text(render_index(entries), encoding="utf-8")
        written.append(index)
    except OSError as e:
        raise ExportError(f"Failed to export catalog to {root}: {e}", details=str(e)) from e
    logger.info("Catalog exported", output_dir=str(root), file_count=len(written))
    return written
