import os
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Iterable, Optional, Tuple

from path_view.core.collation import CaseFold, Collator, default_case_fold
from path_view.core.lister import DirectoryLister


def with_separator(path: str) -> str:
    if path.endswith(os.sep) or (os.altsep and path.endswith(os.altsep)):
        return path
    return path + os.sep


@dataclass
class PathSnapshot:
    """Sorted entries of one directory plus the cursor of the last match.

    An empty ``directory_path`` is the root selection, whose entries are the
    filesystem roots.
    """

    directory_path: str
    entries: Tuple[str, ...]
    cursor: int = field(default=-1, compare=False)

    @property
    def is_root(self) -> bool:
        return self.directory_path == ""

    @property
    def path_length(self) -> int:
        return len(self.directory_path)

    def advance(self, prefix: str, case_fold: CaseFold = default_case_fold) -> Optional[str]:
        count = len(self.entries)
        if count == 0:
            return None

        if not prefix:
            self.cursor = (self.cursor + 1) % count
            return self.entries[self.cursor]

        folded_prefix = case_fold(prefix)
        for _ in range(count):
            self.cursor = (self.cursor + 1) % count
            if case_fold(self.entries[self.cursor]).startswith(folded_prefix):
                return self.entries[self.cursor]
        return None

    @classmethod
    def from_directory(cls, path: str, lister: DirectoryLister, collator: Collator) -> "PathSnapshot":
        directory_path = with_separator(os.path.abspath(path))
        children = lister.list_directory(directory_path)
        names = (name if not is_dir else with_separator(name) for name, is_dir in children)
        return cls(directory_path, _sorted(names, collator))

    @classmethod
    def from_roots(cls, lister: DirectoryLister, collator: Collator) -> "PathSnapshot":
        roots = (_root_name(root, is_dir) for root, is_dir in lister.list_roots())
        return cls("", _sorted(roots, collator))


def _root_name(root: str, is_dir: bool) -> str:
    root = os.path.abspath(root)
    return with_separator(root) if is_dir else root


def _sorted(names: Iterable[str], collator: Collator) -> Tuple[str, ...]:
    return tuple(sorted(names, key=cmp_to_key(collator)))


