from dataclasses import dataclass
from typing import Optional, Tuple

from path_view.core.engine import CompletionEngine

Range = Tuple[int, int]

DEFAULT_MARKER = "path-element"


@dataclass(frozen=True)
class Region:
    start: int
    end: int
    marker: str = DEFAULT_MARKER

    def contains(self, position: int) -> bool:
        return self.start <= position <= self.end


@dataclass(frozen=True)
class EditOp:
    replace_range: Range
    replacement_text: str
    new_region: Region
    new_selection: Range

    def apply(self, text: str) -> str:
        start, end = self.replace_range
        return text[:start] + self.replacement_text + text[end:]


class EditSession:
    """Completion protocol between an editable buffer and the engine.

    Tracks the region produced by the last completion. The host applies the
    returned ``EditOp``, reports every other edit through ``notify_mutation``
    and asks ``should_suppress_insertion`` before inserting typed text.
    """

    def __init__(self, engine: Optional[CompletionEngine] = None, marker: str = DEFAULT_MARKER) -> None:
        self.engine = engine or CompletionEngine()
        self.marker = marker
        self.region: Optional[Region] = None

    @property
    def state(self) -> str:
        return "idle" if self.region is None else "region-active"

    def clear_region(self) -> None:
        self.region = None

    def request_completion(self, buffer_text: str, selection: Optional[Range] = None) -> Optional[EditOp]:
        self.clear_region()

        if selection is None:
            selection = (len(buffer_text), len(buffer_text))
        selection_start, selection_end = selection

        resolution = self.engine.resolve_current(buffer_text, selection_start)
        if resolution is None:
            return None

        prefix_start = resolution.prefix_start
        prefix_end = selection_start
        if prefix_end < prefix_start:
            prefix_end = len(buffer_text)
        prefix = buffer_text[prefix_start:prefix_end]

        match = self.engine.next_match(resolution.snapshot, prefix)
        if match is None:
            return None

        replace_end = max(selection_end, prefix_start)
        match_end = prefix_start + len(match)
        op = EditOp(
            replace_range=(prefix_start, replace_end),
            replacement_text=match,
            new_region=Region(prefix_start, match_end, self.marker),
            new_selection=(prefix_end, match_end),
        )
        self.region = op.new_region
        return op

    def notify_mutation(self, edited_range: Optional[Range] = None) -> None:
        # Any edit invalidates the region, even one that leaves its bounds intact.
        self.clear_region()

    def should_suppress_insertion(self, insert_position: int, inserted_text: str) -> bool:
        region = self.region
        if inserted_text != " " or region is None:
            return False
        return region.contains(insert_position)
