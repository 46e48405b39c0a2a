from pathlib import Path
from typing import List, Optional


class ResolutionError(Exception):
    """Base class for every failure reported by the resolution engine."""


class NotFoundError(ResolutionError):
    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(message or f"Can't find library {name}")


class AmbiguousMatchError(ResolutionError):
    def __init__(self, name: str, candidates: List[Path]):
        self.name = name
        self.candidates = list(candidates)
        super().__init__(f"{name} is ambiguous: {len(self.candidates)} candidates found")


class StaleReferenceError(ResolutionError):
    """A load-history record points at a file that no longer exists."""

    def __init__(self, file: str):
        self.file = file
        super().__init__(f"Recorded load file no longer exists: {file}")


class DefinitionNotFoundError(ResolutionError):
    """The file was resolved but the symbol's definition could not be found in it."""

    def __init__(self, symbol: str, path: Path):
        self.symbol = symbol
        self.path = path
        super().__init__(f"Cannot find definition of {symbol} in {path}")


class NotNativeSymbolError(ResolutionError):
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"{symbol} is not a native symbol")
