from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class DefinitionTemplates(BaseModel):
    """Regex templates, one per symbol kind. `{name}` is replaced by the escaped symbol."""
    interpreted: Dict[str, str] = Field(default_factory=lambda: {
        "function": r"^\s*(\((?:defun|defmacro|defsubst|defalias|cl-defun|cl-defmacro|cl-defgeneric|define-[\w-]+)\*?\s+'?{name}(?=[\s)]|$))",
        "variable": r"^\s*(\((?:defvar|defcustom|defconst|defvar-local|defparameter)\s+{name}(?=[\s)]|$))",
        "face": r"^\s*(\(defface\s+{name}(?=[\s)]|$))",
    })
    native: Dict[str, str] = Field(default_factory=lambda: {
        "function": r'DEFUN[ \t\n]*\([ \t\n]*"{name}"',
        "variable": r'DEFVAR[A-Z_]*[ \t\n]*\([ \t\n]*"{name}"',
    })


class ResolverConfig(BaseModel):
    library_suffixes: List[str] = Field(default_factory=lambda: [".el", ".el.gz", ""])
    load_suffixes: List[str] = Field(default_factory=lambda: [".elc", ".el"])
    compression_suffixes: List[str] = Field(default_factory=lambda: ["", ".gz"])
    compiled_suffix: str = ".elc"
    source_suffix: str = ".el"
    # Wrapper extensions recorded in artifact headers mapped back to the real source extension.
    source_extension_map: Dict[str, str] = Field(default_factory=lambda: {".elc": ".el", ".eln": ".el"})

    artifact_magic: str = ";ELC"
    artifact_chunk_size: int = 1024
    artifact_source_pattern: str = r"^;+\s*(?:compiled\s+)?from\s+file\s+(?P<name>\S.*?)\s*$"

    doc_directory: Optional[str] = None
    doc_file_name: str = "DOC"
    source_root: Optional[str] = None
    native_source_subdir: str = "src"
    object_suffixes: List[str] = Field(default_factory=lambda: [".o", ".obj"])
    native_source_suffix: str = ".c"
    platform_object_prefixes: Dict[str, str] = Field(default_factory=lambda: {"ns": ".m"})
    native_source_suffixes: List[str] = Field(default_factory=lambda: [".c", ".m"])
    built_objects: Optional[List[str]] = None

    definition_templates: DefinitionTemplates = Field(default_factory=DefinitionTemplates)

    @classmethod
    def default(cls):
        return ResolverConfig()

    def all_library_suffixes(self) -> List[str]:
        """Suffixes used to recognise library files when listing directories."""
        suffixes = []
        for base in self.load_suffixes + self.library_suffixes:
            if not base:
                continue
            for rep in self.compression_suffixes:
                candidate = base + rep
                if candidate and candidate not in suffixes:
                    suffixes.append(candidate)
        return suffixes
