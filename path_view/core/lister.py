import logging
import os
import string
from abc import ABC, abstractmethod
from typing import List, Tuple

logger = logging.getLogger(__name__)

Entry = Tuple[str, bool]


class DirectoryLister(ABC):
    """Lists directory children and filesystem roots.

    Implementations never raise: a directory that cannot be read is reported
    as having no children.
    """

    @abstractmethod
    def list_directory(self, path: str) -> List[Entry]:
        pass

    @abstractmethod
    def list_roots(self) -> List[Entry]:
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        pass


class FileSystemLister(DirectoryLister):
    def list_directory(self, path: str) -> List[Entry]:
        entries: List[Entry] = []
        try:
            with os.scandir(path) as it:
                for entry in it:
                    entries.append((entry.name, self._entry_is_dir(entry)))
        except OSError as exc:
            logger.debug("Cannot list %s: %s", path, exc)
            return []
        return entries

    def list_roots(self) -> List[Entry]:
        if os.name == "nt":
            drives = [f"{letter}:\\" for letter in string.ascii_uppercase]
            return [(drive, True) for drive in drives if os.path.exists(drive)]
        return [(os.path.abspath(os.sep), True)]

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @staticmethod
    def _entry_is_dir(entry: os.DirEntry) -> bool:
        try:
            return entry.is_dir()
        except OSError:
            return False
