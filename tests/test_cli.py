import pytest
from unittest.mock import MagicMock
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.layout.processors import TransformationInput
from prompt_toolkit.selection import SelectionState
from rich.console import Console

from path_view.cli.components.output_formatter import OutputFormatter
from path_view.cli.components.path_buffer import PathBufferBinding, create_key_bindings
from path_view.cli.components.region_processor import RegionHighlightProcessor
from path_view.cli.components.settings_handler import SettingsHandler
from path_view.core.edit_session import EditSession, Region
from path_view.core.engine import CompletionEngine
from path_view.core.settings import Settings

from conftest import ascii_collator


@pytest.fixture
def edit_session(lister):
    return EditSession(CompletionEngine(lister=lister, collator=ascii_collator))


@pytest.fixture
def binding(edit_session):
    return PathBufferBinding(edit_session)


@pytest.fixture
def buffer(binding):
    buf = Buffer()
    binding.attach(buf)
    buf.document = Document("/usr/lo", cursor_position=7)
    return buf


# Buffer binding
def test_complete_applies_edit_and_selection(buffer, binding, edit_session):
    assert binding.complete(buffer) is True
    assert buffer.text == "/usr/local/"
    assert buffer.cursor_position == 11
    assert buffer.selection_state.original_cursor_position == 7
    assert binding.selection(buffer) == (7, 11)
    assert edit_session.region == Region(5, 11)


def test_complete_twice_cycles(buffer, binding):
    binding.complete(buffer)
    binding.complete(buffer)
    assert buffer.text == "/usr/lost+found/"
    assert binding.selection(buffer) == (7, 16)


def test_complete_without_match_leaves_buffer(binding, edit_session):
    buf = Buffer()
    binding.attach(buf)
    buf.document = Document("/nope/x", cursor_position=7)
    assert binding.complete(buf) is False
    assert buf.text == "/nope/x"
    assert edit_session.region is None


def test_typing_clears_region(buffer, binding, edit_session):
    binding.complete(buffer)
    buffer.exit_selection()
    buffer.insert_text("x")
    assert edit_session.region is None


def test_detach_stops_tracking(buffer, binding, edit_session):
    binding.complete(buffer)
    binding.detach(buffer)
    buffer.insert_text("x")
    assert edit_session.region == Region(5, 11)


def test_space_inside_region_is_suppressed(buffer, binding, edit_session):
    binding.complete(buffer)
    assert binding.insert(buffer, " ") is False
    assert buffer.text == "/usr/local/"
    assert edit_session.region == Region(5, 11)


def test_space_outside_region_is_inserted(binding, edit_session):
    buf = Buffer()
    binding.attach(buf)
    buf.document = Document("/usr/lo", cursor_position=7)
    assert binding.insert(buf, " ") is True
    assert buf.text == "/usr/lo "


def test_typing_over_selection_replaces_it(buffer, binding, edit_session):
    binding.complete(buffer)
    assert binding.insert(buffer, "s") is True
    assert buffer.text == "/usr/los"
    assert buffer.cursor_position == 8
    assert edit_session.region is None


def test_selection_without_selection_state():
    buf = Buffer()
    buf.document = Document("abc", cursor_position=2)
    assert PathBufferBinding.selection(buf) == (2, 2)

    buf.selection_state = SelectionState(original_cursor_position=0)
    assert PathBufferBinding.selection(buf) == (0, 2)


def test_key_bindings(binding):
    kb = create_key_bindings(binding)
    keys = [b.keys for b in kb.bindings]
    assert ("c-i",) in keys
    assert (" ",) in keys
    assert len(kb.bindings) == 3


# Region highlighting
def _transform(processor, text):
    document = Document(text, cursor_position=len(text))
    fragments = [("", text)]
    ti = TransformationInput(MagicMock(), document, 0, lambda i: i, fragments, 80, 1)
    return processor.apply_transformation(ti).fragments


def test_processor_without_region(edit_session):
    processor = RegionHighlightProcessor(edit_session)
    assert _transform(processor, "/usr/local/") == [("", "/usr/local/")]


def test_processor_marks_region(edit_session):
    edit_session.region = Region(5, 11)
    processor = RegionHighlightProcessor(edit_session)
    fragments = _transform(processor, "/usr/local/")

    styled = "".join(text for style, text in fragments if "class:path-element" in style)
    plain = "".join(text for style, text in fragments if "class:path-element" not in style)
    assert styled == "local/"
    assert plain == "/usr/"


def test_processor_ignores_region_past_text(edit_session):
    edit_session.region = Region(20, 25)
    processor = RegionHighlightProcessor(edit_session)
    assert _transform(processor, "/usr/") == [("", "/usr/")]


# Settings handler
@pytest.fixture
def settings(tmp_path):
    return Settings(str(tmp_path / "settings.json"))


@pytest.fixture
def console():
    return Console(record=True, width=120)


def test_settings_display(console, settings):
    SettingsHandler.handle_command(console, settings, "")
    output = console.export_text()
    assert "locale: (environment default)" in output
    assert "region_style: underline" in output
    assert "/settings locale <name>" in output


def test_settings_locale(console, settings):
    SettingsHandler.handle_command(console, settings, "locale de_DE.UTF-8")
    assert settings.locale == "de_DE.UTF-8"
    assert "Locale set to de_DE.UTF-8" in console.export_text()


def test_settings_style(console, settings):
    SettingsHandler.handle_command(console, settings, "style underline bold")
    assert settings.region_style == "underline bold"


def test_settings_start(console, settings):
    SettingsHandler.handle_command(console, settings, "start /tmp")
    assert settings.start_path == "/tmp"


def test_settings_log_level(console, settings):
    SettingsHandler.handle_command(console, settings, "log debug")
    assert settings.log_level == "DEBUG"

    SettingsHandler.handle_command(console, settings, "log loud")
    assert settings.log_level == "DEBUG"
    assert "Unsupported log level" in console.export_text()


def test_settings_usage_and_unknown(console, settings):
    SettingsHandler.handle_command(console, settings, "locale")
    SettingsHandler.handle_command(console, settings, "colour red")
    output = console.export_text()
    assert "Usage: /settings locale <name>" in output
    assert "Unknown settings option: colour" in output


# Output formatter
def test_describe_path(tmp_path):
    (tmp_path / "file.txt").write_text("x")
    assert OutputFormatter.describe_path(str(tmp_path)) == "existing directory"
    assert OutputFormatter.describe_path(str(tmp_path / "file.txt")) == "existing file"
    assert OutputFormatter.describe_path(str(tmp_path / "missing")) == "new path"


def test_print_selected_path(console, tmp_path):
    OutputFormatter.print_selected_path(console, str(tmp_path))
    output = console.export_text()
    assert "Selected path" in output
    assert "existing directory" in output


def test_print_error_and_warning(console):
    OutputFormatter.print_error(console, "Could not save settings.", OSError("read-only"))
    OutputFormatter.print_warning(console, "Enter a path")
    output = console.export_text()
    assert "Could not save settings." in output
    assert "OSError: read-only" in output
    assert "Enter a path" in output


def test_print_selected_path_with_brackets(console):
    OutputFormatter.print_selected_path(console, "/tmp/notes[/old]")
    assert "/tmp/notes[/old]" in console.export_text()


def test_print_error_with_brackets(console):
    OutputFormatter.print_error(console, "Cannot open [/x]", OSError("[bold] bad"))
    OutputFormatter.print_warning(console, "[/warn]")
    output = console.export_text()
    assert "Cannot open [/x]" in output
    assert "OSError: [bold] bad" in output
    assert "[/warn]" in output


def test_settings_values_with_brackets(console, settings):
    SettingsHandler.handle_command(console, settings, "start /data/[/old]")
    SettingsHandler.handle_command(console, settings, "")
    SettingsHandler.handle_command(console, settings, "[/odd]")
    output = console.export_text()
    assert "Start path set to /data/[/old]" in output
    assert "start_path: /data/[/old]" in output
    assert "Unknown settings option: [/odd]" in output
