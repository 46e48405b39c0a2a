from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

import structlog

logger = structlog.get_logger(__name__)

PathPredicate = Callable[[Path], bool]


def expand_name(name: str, suffixes: Sequence[str]) -> List[str]:
    """
    Candidate file names for `name`, one per suffix, in suffix order.
    An empty suffix list yields the bare name.
    """
    if not suffixes:
        return [name]
    return [name + suffix for suffix in suffixes]


def search_directories(
    names: Sequence[str],
    directories: Iterable[str],
    collect_all: bool = False,
    predicate: Optional[PathPredicate] = None,
) -> List[Path]:
    """
    Looks for each candidate name in each directory.

    Results are directory-major, then name-minor. With `collect_all` false
    the first hit is returned as a single-element list.
    """
    found: List[Path] = []
    for directory in directories:
        base = Path(directory).expanduser()
        for name in names:
            candidate = base / name
            if not candidate.is_file():
                continue
            if predicate is not None and not predicate(candidate):
                continue
            candidate = candidate.absolute()
            if not collect_all:
                return [candidate]
            found.append(candidate)
    logger.debug("directory_search_finished", names=list(names), hits=len(found))
    return found
