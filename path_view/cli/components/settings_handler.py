from typing import List
from rich.console import Console
from rich.markup import escape

from path_view.core.settings import LOG_LEVELS, Settings


class SettingsHandler:
    @staticmethod
    def handle_command(console: Console, settings: Settings, args: str) -> None:
        parts = args.strip().split()

        if not parts:
            SettingsHandler._display_current_settings(console, settings)
            return

        command = parts[0].lower()

        handlers = {
            "locale": SettingsHandler._handle_locale,
            "style": SettingsHandler._handle_style,
            "start": SettingsHandler._handle_start,
            "log": SettingsHandler._handle_log_level,
        }

        handler = handlers.get(command)
        if handler:
            handler(console, settings, parts[1:])
        else:
            console.print(f"[red]Unknown settings option: {escape(command)}[/red]")
            SettingsHandler._display_help(console)

    @staticmethod
    def _display_current_settings(console: Console, settings: Settings) -> None:
        console.print("[bold]Current settings:[/bold]")
        console.print(f"  locale: [cyan]{escape(settings.locale or '(environment default)')}[/cyan]")
        console.print(f"  region_style: [cyan]{escape(settings.region_style)}[/cyan]")
        console.print(f"  start_path: [cyan]{escape(settings.start_path or '(current directory)')}[/cyan]")
        console.print(f"  log_level: [cyan]{settings.log_level}[/cyan]")

        SettingsHandler._display_help(console)

    @staticmethod
    def _display_help(console: Console) -> None:
        console.print("\n[bold]Commands:[/bold]")
        console.print("  [cyan]/settings locale <name>[/cyan]")
        console.print("  [cyan]/settings style <prompt_toolkit style>[/cyan]")
        console.print("  [cyan]/settings start <path>[/cyan]")
        console.print("  [cyan]/settings log <debug|info|warning|error>[/cyan]")

    @staticmethod
    def _handle_locale(console: Console, settings: Settings, args: List[str]) -> None:
        if not args:
            console.print("[yellow]Usage: /settings locale <name>[/yellow]")
            return

        settings.locale = args[0]
        console.print(f"[green]✓[/green] Locale set to [cyan]{escape(args[0])}[/cyan] [dim](applies on next start)[/dim]")

    @staticmethod
    def _handle_style(console: Console, settings: Settings, args: List[str]) -> None:
        if not args:
            console.print("[yellow]Usage: /settings style <prompt_toolkit style>[/yellow]")
            return

        style = " ".join(args)
        settings.region_style = style
        console.print(f"[green]✓[/green] Region style set to [cyan]{escape(style)}[/cyan]")

    @staticmethod
    def _handle_start(console: Console, settings: Settings, args: List[str]) -> None:
        if not args:
            console.print("[yellow]Usage: /settings start <path>[/yellow]")
            return

        settings.start_path = args[0]
        console.print(f"[green]✓[/green] Start path set to [cyan]{escape(args[0])}[/cyan]")

    @staticmethod
    def _handle_log_level(console: Console, settings: Settings, args: List[str]) -> None:
        if not args:
            console.print("[yellow]Usage: /settings log <debug|info|warning|error>[/yellow]")
            return

        level = args[0].upper()
        if level not in LOG_LEVELS:
            console.print(f"[red]Unsupported log level.[/red] Use: {', '.join(sorted(LOG_LEVELS))}")
            return

        settings.log_level = level
        console.print(f"[green]✓[/green] Log level set to [cyan]{level}[/cyan]")
