from prompt_toolkit.layout.processors import Processor, Transformation, TransformationInput
from prompt_toolkit.layout.utils import explode_text_fragments

from path_view.core.edit_session import EditSession


class RegionHighlightProcessor(Processor):
    """Styles the characters of the last completed path element."""

    def __init__(self, edit_session: EditSession):
        self.edit_session = edit_session

    def apply_transformation(self, transformation_input: TransformationInput) -> Transformation:
        document = transformation_input.document
        lineno = transformation_input.lineno
        source_to_display = transformation_input.source_to_display
        fragments = transformation_input.fragments

        region = self.edit_session.region
        if region is None:
            return Transformation(fragments)

        line_start = document.translate_row_col_to_index(lineno, 0)
        line_end = line_start + len(document.lines[lineno])
        start = max(region.start, line_start)
        end = min(region.end, line_end)
        if start >= end:
            return Transformation(fragments)

        style = f" class:{region.marker} "
        fragments = explode_text_fragments(fragments)
        for i in range(source_to_display(start - line_start), source_to_display(end - line_start)):
            if i < len(fragments):
                old_style, old_text, *_ = fragments[i]
                fragments[i] = (old_style + style, old_text)
        return Transformation(fragments)
