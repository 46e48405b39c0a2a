import gzip
import os
from pathlib import Path
from typing import List, Any, Dict
import yaml


def read_yaml_file(path: Path) -> Dict[str, Any]:
    """Reads a YAML file and returns its content as a dictionary."""
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def is_readable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


def read_source_bytes(path: Path) -> bytes:
    """
    Reads a source file, transparently decompressing gzip'd sources.
    """
    if path.suffix == ".gz":
        with gzip.open(path, "rb") as f:
            return f.read()
    with open(path, "rb") as f:
        return f.read()


def list_directory(path: Path) -> List[str]:
    """
    Lists plain file names in a directory. A missing or unreadable directory
    yields an empty list.
    """
    try:
        return [entry.name for entry in os.scandir(path) if not entry.is_dir()]
    except (FileNotFoundError, NotADirectoryError, PermissionError):
        return []
