"""Rendering of the application listing."""

from io import StringIO

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from desktop_catalog.models import AppEntry


def render_listing(
    apps: dict[str, AppEntry],
    annotations: dict[str, str],
    width: int = 120,
    color: bool = True
) -> str:
    """
    Render listed applications as a two column table.
    
    Args:
        apps: Entries in display order
        annotations: Text shown next to each name
        width: Console width used for layout
        color: Emit ANSI styles
    
    Returns:
        Formatted string suitable for terminal display
    """
    output_buffer = StringIO()
    console = Console(file=output_buffer, width=width, force_terminal=color, no_color=not color)
    
    if not apps:
        console.print("[dim]No applications found[/dim]")
        return output_buffer.getvalue()
    
    table = Table(box=box.SIMPLE, show_header=False, pad_edge=False)
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Comment", style="dim")
    
    for name, entry in apps.items():
        label = name if entry.visible else f"{name} (hidden)"
        table.add_row(escape(label), escape(annotations.get(name, "")))
    
    console.print(table)
    return output_buffer.getvalue()
