import os
import pytest

from path_view.core.lister import DirectoryLister


class FakeLister(DirectoryLister):
    def __init__(self, tree=None, roots=None):
        self.tree = {self._key(path): list(children) for path, children in (tree or {}).items()}
        self.roots = list(roots if roots is not None else [(os.sep, True)])
        self.calls = []

    @staticmethod
    def _key(path):
        return os.path.abspath(path)

    def list_directory(self, path):
        self.calls.append(path)
        return list(self.tree.get(self._key(path), []))

    def list_roots(self):
        return list(self.roots)

    def is_directory(self, path):
        return self._key(path) in self.tree


def ascii_collator(lhs, rhs):
    a, b = lhs.lower(), rhs.lower()
    return (a > b) - (a < b)


@pytest.fixture
def lister():
    return FakeLister(
        {
            "/usr": [("lost+found", True), ("local", True)],
            "/fruit": [("banana", False), ("Band", False), ("Apple", True)],
            "/empty": [],
        }
    )
