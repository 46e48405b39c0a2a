from pathlib import Path
from typing import Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from libfinder.utils.file_utils import read_yaml_file

DEFINING_MARKER_PREFIX = "defun:"


def defining_marker(symbol: str) -> str:
    """The alternate convention some loaders use to record a definition among provided identifiers."""
    return f"{DEFINING_MARKER_PREFIX}{symbol}"


class LoadHistoryEntry(BaseModel):
    """
    One record of the host runtime loading a file.
    """
    model_config = ConfigDict(frozen=True)

    file: str
    provides: FrozenSet[str] = Field(default_factory=frozenset)
    defines: FrozenSet[str] = Field(default_factory=frozenset)

    def defines_symbol(self, symbol: str) -> bool:
        return symbol in self.defines or defining_marker(symbol) in self.provides


class HostEnvironment(BaseModel):
    """
    Read-only snapshot of the host runtime state a query runs against.
    The host stays the only writer; the engine gets a fresh snapshot per call.
    """
    model_config = ConfigDict(frozen=True)

    search_path: Tuple[str, ...] = ()
    load_history: Tuple[LoadHistoryEntry, ...] = ()
    features: FrozenSet[str] = Field(default_factory=frozenset)
    native_symbols: FrozenSet[str] = Field(default_factory=frozenset)
    symbol_origins: Dict[str, str] = Field(default_factory=dict)

    def is_native(self, symbol: str) -> bool:
        return symbol in self.native_symbols

    def symbol_origin(self, symbol: str) -> Optional[str]:
        return self.symbol_origins.get(symbol)


def load_environment(path: Path) -> HostEnvironment:
    """
    Loads a host environment snapshot from a YAML state file.
    """
    data = read_yaml_file(path)
    return HostEnvironment.model_validate(data)
