import logging
import os
from typing import NamedTuple, Optional

from path_view.core.collation import CaseFold, Collator, LocaleCollator, default_case_fold
from path_view.core.lister import DirectoryLister, FileSystemLister
from path_view.core.snapshot import PathSnapshot

logger = logging.getLogger(__name__)

SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


class Resolution(NamedTuple):
    snapshot: PathSnapshot
    prefix_start: int


class CompletionEngine:
    """Turns the text before the caret into a directory snapshot and cycles
    through the entries matching the typed name.

    The last snapshot is cached; resolving a directory whose listing did not
    change hands back the same instance so repeated requests keep walking
    from the previous match.
    """

    def __init__(
        self,
        lister: Optional[DirectoryLister] = None,
        collator: Optional[Collator] = None,
        case_fold: Optional[CaseFold] = None,
        base_dir: Optional[str] = None,
    ) -> None:
        self.lister = lister or FileSystemLister()
        self.collator = collator or LocaleCollator()
        self.case_fold = case_fold or default_case_fold
        self.base_dir = os.path.abspath(base_dir or os.getcwd())
        self.cached_snapshot: Optional[PathSnapshot] = None

    def resolve(self, directory: Optional[str]) -> PathSnapshot:
        if directory is None:
            candidate = PathSnapshot.from_roots(self.lister, self.collator)
        else:
            candidate = PathSnapshot.from_directory(directory, self.lister, self.collator)

        if self.cached_snapshot is None or self.cached_snapshot != candidate:
            logger.debug("New snapshot for %r (%d entries)", candidate.directory_path, len(candidate.entries))
            self.cached_snapshot = candidate
        return self.cached_snapshot

    def resolve_current(self, buffer_text: str, caret: Optional[int] = None) -> Optional[Resolution]:
        if caret is None or caret < 0 or caret > len(buffer_text):
            caret = len(buffer_text)
        typed = buffer_text[:caret]

        if not typed:
            return Resolution(self.resolve(None), 0)

        prefix_start = max(typed.rfind(sep) for sep in SEPARATORS) + 1
        if prefix_start == 0:
            return None

        directory = self._absolute(typed[:prefix_start])
        if not self.lister.is_directory(directory):
            logger.debug("No directory at %r", directory)
            return None
        return Resolution(self.resolve(directory), prefix_start)

    def next_match(self, snapshot: PathSnapshot, prefix: str) -> Optional[str]:
        return snapshot.advance(prefix, self.case_fold)

    def _absolute(self, directory: str) -> str:
        directory = os.path.expanduser(directory)
        if not os.path.isabs(directory):
            directory = os.path.join(self.base_dir, directory)
        return directory
