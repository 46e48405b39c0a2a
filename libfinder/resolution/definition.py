import re
from pathlib import Path
from typing import Optional

from libfinder.config.resolver import ResolverConfig
from libfinder.resolution.errors import DefinitionNotFoundError
from libfinder.utils.file_utils import read_source_bytes


def build_pattern(template: str, symbol: str) -> "re.Pattern[bytes]":
    escaped = re.escape(symbol)
    return re.compile(template.replace("{name}", escaped).encode("utf-8"), re.MULTILINE)


def find_definition(
    path: Path,
    symbol: str,
    config: ResolverConfig,
    kind: str = "function",
    native: bool = False,
) -> int:
    """
    Returns the byte offset of `symbol`'s definition in `path`.

    Native sources are searched with the DEFUN/DEFVAR macro templates,
    interpreted sources with the def-form templates. When the template has a
    capturing group the offset points at that group, otherwise at the whole
    match.
    """
    templates = config.definition_templates.native if native else config.definition_templates.interpreted
    template: Optional[str] = templates.get(kind)
    if template is None:
        raise DefinitionNotFoundError(symbol, path)

    pattern = build_pattern(template, symbol)
    match = pattern.search(read_source_bytes(path))
    if match is None:
        raise DefinitionNotFoundError(symbol, path)
    if pattern.groups:
        return match.start(1)
    return match.start()
