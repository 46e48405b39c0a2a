import re
from pathlib import Path
from typing import FrozenSet, Optional, Set, Tuple

import structlog

from libfinder.config.resolver import ResolverConfig
from libfinder.models.environment import HostEnvironment
from libfinder.resolution.load_history import LoadHistoryIndex
from libfinder.utils.file_utils import list_directory

logger = structlog.get_logger(__name__)


class CompletionCache:
    """
    Known module names for completion, memoized against the search path value.

    Staleness is detected only when the search path itself changes; files
    added to an existing directory require an explicit flush().
    """

    def __init__(self, config: ResolverConfig):
        self.config = config
        suffixes = sorted(config.all_library_suffixes(), key=len, reverse=True)
        self._suffix_pattern = None
        if suffixes:
            self._suffix_pattern = re.compile("(?:" + "|".join(re.escape(s) for s in suffixes) + r")\Z")
        self._table: Optional[FrozenSet[str]] = None
        self._search_path: Optional[Tuple[str, ...]] = None
        self.recompute_count = 0

    def flush(self) -> None:
        self._table = None
        self._search_path = None

    def table(self, environment: HostEnvironment) -> FrozenSet[str]:
        search_path = tuple(environment.search_path)
        if self._table is None or self._search_path != search_path:
            self._table = self._compute(environment)
            self._search_path = search_path
        return self._table

    def completions(self, prefix: str, environment: HostEnvironment) -> Set[str]:
        return {name for name in self.table(environment) if name.startswith(prefix)}

    def _compute(self, environment: HostEnvironment) -> FrozenSet[str]:
        self.recompute_count += 1
        names: Set[str] = set()
        if self._suffix_pattern is not None:
            names.update(self._scan_directories(environment.search_path))
        names.update(environment.features)
        index = LoadHistoryIndex(environment.load_history, self.config.compression_suffixes)
        names.update(index.recorded_names())
        logger.debug("completion_table_recomputed", size=len(names), directories=len(environment.search_path))
        return frozenset(names)

    def _scan_directories(self, search_path: Tuple[str, ...]) -> Set[str]:
        names: Set[str] = set()
        for directory in search_path:
            for file_name in list_directory(Path(directory).expanduser()):
                match = self._suffix_pattern.search(file_name)
                if match and match.start() > 0:
                    names.add(file_name[: match.start()])
        return names
