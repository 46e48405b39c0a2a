import os
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

import structlog

from libfinder.models.environment import LoadHistoryEntry
from libfinder.resolution.errors import StaleReferenceError
from libfinder.resolution.search import expand_name, search_directories

logger = structlog.get_logger(__name__)


def strip_suffixes(file: str, compression_suffixes: Sequence[str] = (".gz",)) -> str:
    """
    Drops the directory, any compression suffix and then one extension:
    `/a/b/foo.el.gz` becomes `foo`.
    """
    name = os.path.basename(file)
    for rep in compression_suffixes:
        if rep and name.endswith(rep):
            name = name[: -len(rep)]
            break
    return os.path.splitext(name)[0]


class LoadHistoryIndex:
    """
    Query view over the host's load history.

    Entries are scanned from the most recently appended one backward, so a
    reload supersedes earlier records of the same file.
    """

    def __init__(self, entries: Sequence[LoadHistoryEntry], compression_suffixes: Sequence[str] = (".gz",)):
        self._entries = tuple(entries)
        self._compression_suffixes = tuple(compression_suffixes)

    def _find(self, matches: Callable[[LoadHistoryEntry], bool]) -> Optional[LoadHistoryEntry]:
        for entry in reversed(self._entries):
            if matches(entry):
                return entry
        return None

    def by_provided(self, identifier: str) -> Optional[LoadHistoryEntry]:
        return self._find(lambda entry: identifier in entry.provides)

    def by_defined_symbol(self, symbol: str) -> Optional[LoadHistoryEntry]:
        return self._find(lambda entry: entry.defines_symbol(symbol))

    def by_name(self, name: str) -> Optional[LoadHistoryEntry]:
        def matches(entry: LoadHistoryEntry) -> bool:
            if entry.file == name:
                return True
            if os.path.basename(entry.file) == name:
                return True
            return strip_suffixes(entry.file, self._compression_suffixes) == name

        return self._find(matches)

    def recorded_names(self) -> Iterable[str]:
        for entry in self._entries:
            yield strip_suffixes(entry.file, self._compression_suffixes)


def revalidate(entry: LoadHistoryEntry, search_path: Sequence[str], suffixes: Sequence[str]) -> Path:
    """
    Turns a load record into a file that exists now.

    Absolute records are used as-is when present, otherwise looked up again
    in their own directory. Relative records are searched along the live
    search path. Raises StaleReferenceError when nothing backs the record.
    """
    recorded = Path(entry.file)
    if recorded.is_absolute():
        if recorded.is_file():
            return recorded
        names = expand_name(recorded.name, suffixes) + expand_name(strip_suffixes(entry.file), suffixes)
        hits = search_directories(names, [str(recorded.parent)], collect_all=True)
    else:
        hits = search_directories(expand_name(entry.file, suffixes), search_path, collect_all=True)

    if not hits:
        logger.info("stale_load_history_entry", file=entry.file)
        raise StaleReferenceError(entry.file)
    return hits[0]
