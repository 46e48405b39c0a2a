import os
import re
from pathlib import Path
from typing import Callable, Optional

import structlog

from libfinder.config.resolver import ResolverConfig
from libfinder.resolution.errors import NotNativeSymbolError

logger = structlog.get_logger(__name__)

ENTRY_MARKERS = {"function": b"F", "variable": b"V"}
SOURCE_MARKER = re.compile(rb"\x1fS([^\n]*)")


class NativeSymbolLocator:
    """
    Maps a natively implemented symbol to the source file it was compiled from,
    using the global documentation file.

    Each documented symbol is framed as ``\\x1fF<name>\\n`` (or ``V`` for
    variables) and every group of entries is preceded by a
    ``\\x1fS<object file>`` marker naming the object that defines them.
    """

    def __init__(self, config: ResolverConfig):
        self.config = config

    @property
    def doc_file(self) -> Optional[Path]:
        if not self.config.doc_directory:
            return None
        return Path(self.config.doc_directory).expanduser() / self.config.doc_file_name

    def locate(self, symbol: str, is_native: Callable[[str], bool], kind: str = "function") -> Optional[Path]:
        if not is_native(symbol):
            raise NotNativeSymbolError(symbol)

        doc_file = self.doc_file
        if doc_file is None or not doc_file.is_file():
            logger.info("doc_file_missing", doc_file=str(doc_file))
            return None

        object_name = self.find_object_name(doc_file.read_bytes(), symbol, kind)
        if object_name is None:
            return None
        return self.source_path(self.rewrite_object_name(object_name))

    def find_object_name(self, doc: bytes, symbol: str, kind: str = "function") -> Optional[str]:
        marker = ENTRY_MARKERS.get(kind, b"F")
        entry = re.compile(b"\x1f" + marker + re.escape(symbol.encode("utf-8")) + b"(?:\n|\x1f|$)")
        built = set(self.config.built_objects) if self.config.built_objects is not None else None

        resume = 0
        while True:
            hit = entry.search(doc, resume)
            if hit is None:
                return None
            resume = hit.end()

            marker_start = doc.rfind(b"\x1fS", 0, hit.start())
            if marker_start < 0:
                continue
            source = SOURCE_MARKER.match(doc, marker_start)

            object_name = source.group(1).decode("utf-8", errors="replace").strip()
            if built is not None and object_name not in built:
                logger.debug("doc_false_association", symbol=symbol, object_name=object_name)
                continue
            return object_name

    def rewrite_object_name(self, name: str) -> str:
        stem, ext = os.path.splitext(name)
        if ext not in self.config.object_suffixes:
            return name
        for prefix, source_ext in self.config.platform_object_prefixes.items():
            if os.path.basename(name).startswith(prefix):
                return stem + source_ext
        return stem + self.config.native_source_suffix

    def source_path(self, name: str) -> Path:
        if os.path.splitext(name)[1] in self.config.native_source_suffixes:
            root = Path(self.config.source_root or ".").expanduser()
            return root / self.config.native_source_subdir / name
        return Path(name)
