"""
Rendering functions for jabu output.

This module handles all pretty-printing and table formatting.
Tasks and services return data, this module makes it human-readable.
"""

from rich.table import Table
from rich.console import Console
from rich import box
from typing import Dict, Iterable, List, Mapping, Optional
from pathlib import Path

console = Console()


def render_table(headers: List[str], rows: List[List[str]], title: Optional[str] = None) -> None:
    """
    Render a generic table with the given headers and rows.

    Args:
        headers: List of column headers
        rows: List of rows, where each row is a list of values
        title: Optional table title
    """
    if not rows:
        console.print("[yellow]No data to display.[/yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )

    for header in headers:
        table.add_column(header)

    for row in rows:
        table.add_row(*[str(val) for val in row])

    console.print(table)


def render_task_table(descriptors: Iterable, title: str = "Tasks") -> None:
    """Render registered tasks with their description and requirements."""
    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("Task", style="bold blue")
    table.add_column("Description")
    table.add_column("Tools", style="dim")
    table.add_column("Depends on", style="dim")

    for descriptor in descriptors:
        table.add_row(
            descriptor.name,
            descriptor.description,
            ", ".join(sorted(descriptor.required_tools)) or "-",
            ", ".join(sorted(descriptor.dependency_specs)) or "-",
        )

    console.print(table)


def render_options_help(task_name: str, options) -> None:
    """Render the usage guide of a task's options."""
    table = Table(title=f"Options of '{task_name}'", box=box.ROUNDED,
                  show_header=True, header_style="bold magenta")
    table.add_column("Option", style="blue")
    table.add_column("Description")
    table.add_column("Required")
    table.add_column("Default", style="dim")

    for option in options:
        table.add_row(
            option.display_name(),
            option.description or "No description given.",
            "yes" if option.required else "no",
            option.default_value or "-",
        )

    console.print(table)


def render_tool_table(tools: Mapping[str, Optional[Path]], java_home: Optional[Path] = None) -> None:
    """Render JDK tool availability."""
    title = f"Java home: {java_home}" if java_home else "No Java installation found"
    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("Tool", style="blue")
    table.add_column("Availability")
    table.add_column("Path", style="dim")

    for name, path in tools.items():
        if path is not None:
            table.add_row(name, "[bold green]Available[/bold green]", str(path))
        else:
            table.add_row(name, "[bold red]Not available[/bold red]", "-")

    console.print(table)


def render_dependency_status(title: str, status: Dict[str, bool]) -> None:
    """Render dependencies with whether each was found."""
    if not status:
        console.print(f"[yellow]==> No {title.lower()} specified in the jabu file.[/yellow]")
        return

    rows = [
        [index, spec, "Found" if found else "Not found"]
        for index, (spec, found) in enumerate(status.items(), 1)
    ]
    render_table(["#", "Artifact", "Status"], rows, title=title)
