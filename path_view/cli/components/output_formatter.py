import os
from typing import Optional

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.text import Text


class OutputFormatter:
    """Rich panels for the path prompt."""

    BANNER = "path-view"

    @staticmethod
    def print_banner(console: Console, version: str = "1.0.0") -> None:
        console_width = console.size.width

        console.print("=" * console_width, style="green")
        console.print(Align.center(Text(OutputFormatter.BANNER, style=Style(color="green", bold=True))))
        console.print(
            Align.center(f"[dim]Tab completes, Tab again cycles  ·  v{version}[/dim]"), style="green"
        )
        console.print("=" * console_width, style="green")
        console.print()

    @staticmethod
    def describe_path(path: str) -> str:
        if os.path.isdir(path):
            return "existing directory"
        if os.path.exists(path):
            return "existing file"
        return "new path"

    @staticmethod
    def print_selected_path(console: Console, path: str) -> None:
        console_width = console.size.width
        description = OutputFormatter.describe_path(path)

        panel = Panel(
            f"[bold cyan]► {escape(path)}[/bold cyan]\n[dim]{description}[/dim]",
            title=Text(" Selected path ", style="white on blue"),
            border_style="blue",
            title_align="left",
            padding=(1, 2),
            width=console_width,
        )
        console.print(panel)

    @staticmethod
    def print_error(
        console: Console, message: str, exception: Optional[Exception] = None
    ) -> None:
        console_width = console.size.width

        content = f"[bold red]✗ {escape(message)}[/bold red]"
        if exception:
            content += f"\n[dim]{type(exception).__name__}: {escape(str(exception))}[/dim]"

        panel = Panel(
            content,
            title=Text(" Error ", style="white on red"),
            border_style="red",
            title_align="left",
            padding=(1, 2),
            width=console_width,
        )
        console.print(panel)

    @staticmethod
    def print_warning(console: Console, message: str) -> None:
        console_width = console.size.width

        panel = Panel(
            f"[bold yellow]▲ {escape(message)}[/bold yellow]",
            title=Text(" Warning ", style="black on yellow"),
            border_style="yellow",
            title_align="left",
            padding=(1, 2),
            width=console_width,
        )
        console.print(panel)
