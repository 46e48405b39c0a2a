import os
import re
from pathlib import Path
from typing import BinaryIO, Optional

import structlog

from libfinder.config.resolver import ResolverConfig

logger = structlog.get_logger(__name__)


class ArtifactMetadataReader:
    """
    Extracts the "from file X" source name recorded in a compiled artifact header.

    The file is read chunk by chunk from the start, so a header comment near
    the top never costs a whole-file read. Files without the magic marker
    are skipped after the first chunk.
    """

    def __init__(self, config: ResolverConfig):
        self.config = config
        self._magic = config.artifact_magic.encode("latin-1")
        self._pattern = re.compile(config.artifact_source_pattern, re.IGNORECASE)

    def read_source_name(self, path: Path) -> Optional[str]:
        try:
            with open(path, "rb") as stream:
                name = self.scan(stream)
        except (FileNotFoundError, IsADirectoryError):
            return None
        if name is None:
            logger.debug("artifact_metadata_missing", path=str(path))
            return None
        return self.normalize_source_name(name)

    def scan(self, stream: BinaryIO) -> Optional[str]:
        chunk = stream.read(self.config.artifact_chunk_size)
        if not chunk.startswith(self._magic):
            return None

        pending = b""
        while chunk:
            pending += chunk
            *lines, pending = pending.split(b"\n")
            for line in lines:
                name = self._match(line)
                if name:
                    return name
            chunk = stream.read(self.config.artifact_chunk_size)
        return self._match(pending) if pending else None

    def _match(self, line: bytes) -> Optional[str]:
        match = self._pattern.match(line.rstrip(b"\r").decode("utf-8", errors="replace"))
        if match:
            return match.group("name")
        return None

    def normalize_source_name(self, name: str) -> str:
        """Maps a recorded wrapper extension back to the true source extension."""
        stem, ext = os.path.splitext(name)
        mapped = self.config.source_extension_map.get(ext)
        if mapped is not None:
            return stem + mapped
        return name
