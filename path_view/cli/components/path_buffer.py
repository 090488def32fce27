from typing import Tuple

from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.filters import has_selection
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.selection import SelectionState

from path_view.core.edit_session import EditOp, EditSession


class PathBufferBinding:
    """Keeps an EditSession in step with a prompt_toolkit Buffer."""

    def __init__(self, edit_session: EditSession):
        self.edit_session = edit_session
        self._applying = False

    def attach(self, buffer: Buffer) -> None:
        buffer.on_text_changed += self._on_text_changed

    def detach(self, buffer: Buffer) -> None:
        buffer.on_text_changed -= self._on_text_changed

    def _on_text_changed(self, buffer: Buffer) -> None:
        if not self._applying:
            self.edit_session.notify_mutation()

    @staticmethod
    def selection(buffer: Buffer) -> Tuple[int, int]:
        cursor = buffer.cursor_position
        if buffer.selection_state is None:
            return cursor, cursor
        anchor = buffer.selection_state.original_cursor_position
        return min(anchor, cursor), max(anchor, cursor)

    def complete(self, buffer: Buffer) -> bool:
        op = self.edit_session.request_completion(buffer.text, self.selection(buffer))
        if op is None:
            return False
        self.apply(buffer, op)
        return True

    def apply(self, buffer: Buffer, op: EditOp) -> None:
        text = op.apply(buffer.text)
        start, end = (min(max(pos, 0), len(text)) for pos in op.new_selection)

        self._applying = True
        try:
            buffer.document = Document(text, cursor_position=end)
        finally:
            self._applying = False

        # Setting the document drops the selection, so restore it afterwards.
        if start != end:
            buffer.selection_state = SelectionState(original_cursor_position=start)
        else:
            buffer.exit_selection()

    def insert(self, buffer: Buffer, data: str) -> bool:
        start, end = self.selection(buffer)
        if self.edit_session.should_suppress_insertion(start, data):
            return False

        if start == end:
            buffer.insert_text(data)
        else:
            text = buffer.text[:start] + data + buffer.text[end:]
            buffer.document = Document(text, cursor_position=start + len(data))
        return True


def create_key_bindings(binding: PathBufferBinding) -> KeyBindings:
    kb = KeyBindings()

    @kb.add("tab")
    def _(event):
        binding.complete(event.current_buffer)

    @kb.add(" ")
    def _(event):
        binding.insert(event.current_buffer, " ")

    @kb.add(Keys.Any, filter=has_selection)
    def _(event):
        if event.data.isprintable():
            binding.insert(event.current_buffer, event.data)

    return kb
