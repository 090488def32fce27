import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from prompt_toolkit import PromptSession
from prompt_toolkit.styles import Style

from path_view.core.collation import LocaleCollator
from path_view.core.edit_session import EditSession
from path_view.core.engine import CompletionEngine
from path_view.core.settings import Settings, default_settings_path
from path_view.core.snapshot import with_separator
from path_view.cli.components.output_formatter import OutputFormatter
from path_view.cli.components.path_buffer import PathBufferBinding, create_key_bindings
from path_view.cli.components.region_processor import RegionHighlightProcessor
from path_view.cli.components.settings_handler import SettingsHandler


class PathViewInterface:
    def __init__(self, settings_path: Optional[str] = None):
        self.console = Console()
        self.settings = Settings(settings_path or default_settings_path())
        logging.basicConfig(
            level=self.settings.log_level,
            format="%(message)s",
            handlers=[RichHandler(console=self.console, show_path=False)],
        )

        engine = CompletionEngine(collator=LocaleCollator(self.settings.locale))
        self.edit_session = EditSession(engine)
        self.binding = PathBufferBinding(self.edit_session)

        custom_style = Style.from_dict(
            {
                self.edit_session.marker: self.settings.region_style,
                "prompt": "#ffffff bold",
            }
        )

        self.prompt_session = PromptSession(
            style=custom_style,
            key_bindings=create_key_bindings(self.binding),
            input_processors=[RegionHighlightProcessor(self.edit_session)],
        )
        self.binding.attach(self.prompt_session.default_buffer)
        self.current_path = self._initial_path()

    def _initial_path(self) -> str:
        start = self.settings.start_path or os.getcwd()
        start = os.path.abspath(os.path.expanduser(start))
        if os.path.isdir(start):
            return with_separator(start)
        return start

    def _get_prompt_text(self) -> list:
        return [("class:prompt", "Move to: ")]

    def _handle_builtin_command(self, text: str) -> bool:
        lower_text = text.lower()

        if lower_text in ("exit", "quit", "/exit", "/quit"):
            self.console.print("[bold green]Goodbye![/bold green]")
            return True

        if text.startswith("/settings"):
            args = text[len("/settings") :].strip()
            try:
                SettingsHandler.handle_command(self.console, self.settings, args)
            except OSError as exc:
                OutputFormatter.print_error(self.console, "Could not save settings.", exc)
            return True

        return False

    def accept(self, text: str) -> None:
        path = os.path.abspath(os.path.expanduser(text))
        OutputFormatter.print_selected_path(self.console, path)
        if os.path.isdir(path):
            self.current_path = with_separator(path)

    def run(self) -> None:
        self.console.clear()
        OutputFormatter.print_banner(self.console)

        while True:
            self.edit_session.clear_region()
            try:
                text = self.prompt_session.prompt(self._get_prompt_text(), default=self.current_path)
            except (EOFError, KeyboardInterrupt):
                self.console.print("\n[bold green]Goodbye![/bold green]")
                break

            text = text.strip()
            if not text:
                OutputFormatter.print_warning(self.console, "Enter a path, or 'exit' to leave.")
                continue

            if self._handle_builtin_command(text):
                if text.lower() in ("exit", "quit", "/exit", "/quit"):
                    break
                continue

            self.accept(text)


def run_cli() -> None:
    interface = PathViewInterface()
    interface.run()
