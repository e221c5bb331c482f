"""Name lookups over a directory of dataset files.

A name is the file's base name without the extension. All matching is done
on the enumerated names in memory; user input is never used to build a path
or a glob pattern, so "*", "?", "[" or ".." are matched as plain text.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class DatasetResolver:
    """Case-insensitive lookups over one directory of `*.<ext>` files."""

    def __init__(self, directory: Path, ext: str = "geojson"):
        self.directory = Path(directory)
        self.ext = ext
        self._suffix = f".{ext}"

    def list_names(self) -> list[str]:
        """Every base name in the directory, sorted; [] if the directory is missing."""
        try:
            entries = list(os.scandir(self.directory))
        except FileNotFoundError:
            logger.debug("Dataset directory %s does not exist", self.directory)
            return []
        except NotADirectoryError:
            logger.debug("Dataset path %s is not a directory", self.directory)
            return []

        names = []
        for entry in entries:
            # hidden files are skipped, same as a shell "*" pattern
            if entry.name.startswith(".") or not entry.name.endswith(self._suffix):
                continue
            if not entry.is_file():
                continue
            names.append(entry.name[: -len(self._suffix)])

        names.sort()
        return names

    def find_exact(self, query: str) -> str | None:
        """Stored name equal to `query` ignoring case, or None."""
        target = query.lower()
        for name in self.list_names():
            if name.lower() == target:
                return name
        return None

    def autocomplete(self, prefix: str) -> list[str]:
        prefix = prefix.lower()
        return [name for name in self.list_names() if name.lower().startswith(prefix)]

    def search(self, query: str) -> list[str]:
        query = query.lower()
        return [name for name in self.list_names() if query in name.lower()]

    def path_for(self, name: str) -> Path:
        """Path of a name previously returned by this resolver."""
        return self.directory / f"{name}{self._suffix}"


def parent_segment(name: str) -> str | None:
    """Text after the last underscore, or None when there is none."""
    head, sep, tail = name.rpartition("_")
    if not sep or not tail:
        return None
    return tail


def filter_by_parent(names: list[str], parent: str) -> list[str]:
    """Keep names whose trailing `_<PARENT>` equals `parent`, ignoring case.

    This is a suffix match only; the parent entity is not looked up.
    """
    wanted = parent.upper()
    filtered = []
    for name in names:
        segment = parent_segment(name)
        if segment is not None and segment.upper() == wanted:
            filtered.append(name)
    return filtered
