import re
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Set

import structlog

from libfinder.config.resolver import ResolverConfig
from libfinder.models.environment import HostEnvironment, LoadHistoryEntry
from libfinder.models.location import ResolvedLocation
from libfinder.resolution.artifact_metadata import ArtifactMetadataReader
from libfinder.resolution.completion import CompletionCache
from libfinder.resolution.definition import find_definition
from libfinder.resolution.errors import AmbiguousMatchError, NotFoundError, StaleReferenceError
from libfinder.resolution.load_history import LoadHistoryIndex, revalidate, strip_suffixes
from libfinder.resolution.native_symbols import NativeSymbolLocator
from libfinder.resolution.search import PathPredicate, expand_name, search_directories

logger = structlog.get_logger(__name__)

PathAction = Callable[[Path], None]

MODULE_IDENTIFIER = re.compile(r"[^/\\\s.]+")
HISTORY_NOTE = "found via load history, not in the search path"


class Resolver:
    """
    Resolves library names and symbols to source files.

    Library lookups try the search path first and fall back to the load
    history. Symbol lookups go through the documentation file for native
    symbols and through the symbol's load file otherwise, preferring the
    original source over a compiled artifact wherever one can be found.
    """

    def __init__(self, config: Optional[ResolverConfig] = None):
        self.config = config or ResolverConfig.default()
        self.metadata_reader = ArtifactMetadataReader(self.config)
        self.native_locator = NativeSymbolLocator(self.config)
        self.completion_cache = CompletionCache(self.config)

    # Libraries

    def locate_library(
        self,
        name: str,
        environment: HostEnvironment,
        selector: Optional[int] = None,
        predicate: Optional[PathPredicate] = None,
        suffixes: Optional[Sequence[str]] = None,
        interactive: bool = False,
        first_only: bool = False,
    ) -> List[Path]:
        """
        Searches the search path for `name`.

        Returns an empty list when nothing matches. Several matches without a
        usable selector raise AmbiguousMatchError unless `interactive` is set,
        in which case the whole ordered list is returned for display.
        """
        if suffixes is None:
            suffixes = self.config.library_suffixes
        hits = search_directories(
            expand_name(name, suffixes),
            environment.search_path,
            collect_all=not first_only,
            predicate=predicate,
        )
        if selector is not None and 1 <= selector <= len(hits):
            return [hits[selector - 1]]
        if len(hits) <= 1:
            return hits
        if interactive:
            return hits
        raise AmbiguousMatchError(name, hits)

    def resolve_library(
        self,
        name: str,
        environment: HostEnvironment,
        selector: Optional[int] = None,
        action: Optional[PathAction] = None,
    ) -> ResolvedLocation:
        hits = self.locate_library(name, environment, selector=selector)
        if hits:
            location = ResolvedLocation(path=hits[0])
        else:
            location = self._library_from_history(name, environment)
        if action is not None:
            action(location.path)
        return location

    def _library_from_history(self, name: str, environment: HostEnvironment) -> ResolvedLocation:
        index = LoadHistoryIndex(environment.load_history, self.config.compression_suffixes)
        entries = [index.by_name(name)]
        if MODULE_IDENTIFIER.fullmatch(name):
            entries.append(index.by_provided(name))

        for entry in entries:
            if entry is None:
                continue
            try:
                path = revalidate(entry, environment.search_path, self._load_suffixes())
            except StaleReferenceError:
                continue
            if self._is_compiled(path):
                path = self._source_from_metadata(path) or path
            logger.info("library_found_via_history", name=name, path=str(path))
            return ResolvedLocation(path=path, via_history=True, note=HISTORY_NOTE)

        raise NotFoundError(name)

    # Symbols

    def resolve_symbol_definition(
        self,
        symbol: str,
        environment: HostEnvironment,
        kind: str = "function",
        action: Optional[PathAction] = None,
    ) -> ResolvedLocation:
        """
        Finds the file defining `symbol` and the byte offset of the definition.

        `action` runs on the chosen file before the definition is searched,
        so a DefinitionNotFoundError still leaves the caller with an opened file.
        """
        native = environment.is_native(symbol)
        if native:
            path = self.native_locator.locate(symbol, environment.is_native, kind)
            if path is None or not path.is_file():
                raise NotFoundError(symbol, f"Can't find native source file for {symbol}")
        else:
            path = self._symbol_source(symbol, environment)

        if action is not None:
            action(path)
        offset = find_definition(path, symbol, self.config, kind=kind, native=native)
        return ResolvedLocation(path=path, offset=offset)

    def _symbol_source(self, symbol: str, environment: HostEnvironment) -> Path:
        load_file = environment.symbol_origin(symbol)
        if load_file is None:
            entry = LoadHistoryIndex(environment.load_history, self.config.compression_suffixes).by_defined_symbol(symbol)
            if entry is not None:
                load_file = entry.file
        if load_file is None:
            raise NotFoundError(symbol, f"{symbol} is not currently loaded anywhere")

        try:
            path = revalidate(LoadHistoryEntry(file=load_file), environment.search_path, self._load_suffixes())
        except StaleReferenceError:
            path = self._search_stem(strip_suffixes(load_file, self.config.compression_suffixes), environment)
            if path is None:
                raise NotFoundError(symbol, f"Can't find load file {load_file} for {symbol}")

        if self._is_compiled(path):
            path = (
                self._source_from_metadata(path)
                or self._sibling_source(path)
                or self._search_stem(strip_suffixes(str(path), self.config.compression_suffixes), environment)
                or path
            )
        logger.debug("symbol_source_resolved", symbol=symbol, path=str(path))
        return path

    # Completion

    def completions(self, prefix: str, environment: HostEnvironment) -> Set[str]:
        return self.completion_cache.completions(prefix, environment)

    def flush_completion_cache(self) -> None:
        self.completion_cache.flush()

    # Helpers

    def _load_suffixes(self) -> List[str]:
        suffixes = []
        for base in self.config.load_suffixes:
            for rep in self.config.compression_suffixes:
                if base + rep and base + rep not in suffixes:
                    suffixes.append(base + rep)
        suffixes.append("")
        return suffixes

    def _is_compiled(self, path: Path) -> bool:
        compiled = self.config.compiled_suffix
        return any(path.name.endswith(compiled + rep) for rep in self.config.compression_suffixes)

    def _source_from_metadata(self, artifact: Path) -> Optional[Path]:
        name = self.metadata_reader.read_source_name(artifact)
        if name is None:
            return None
        source = Path(name).expanduser()
        if not source.is_absolute():
            source = artifact.parent / source
        if source.is_file():
            return source
        logger.debug("artifact_source_missing", artifact=str(artifact), source=str(source))
        return None

    def _sibling_source(self, artifact: Path) -> Optional[Path]:
        stem = strip_suffixes(artifact.name, self.config.compression_suffixes)
        for rep in self.config.compression_suffixes:
            sibling = artifact.with_name(stem + self.config.source_suffix + rep)
            if sibling.is_file():
                return sibling
        return None

    def _search_stem(self, stem: str, environment: HostEnvironment) -> Optional[Path]:
        hits = search_directories(expand_name(stem, self.config.library_suffixes), environment.search_path)
        return hits[0] if hits else None
