import gzip
from pathlib import Path

import pytest

from libfinder.config.resolver import ResolverConfig
from libfinder.resolution.definition import find_definition
from libfinder.resolution.errors import DefinitionNotFoundError

LISP_SOURCE = b""";;; alpha.el --- sample

(defvar alpha-width 10)

(defun alpha-helper ()
  nil)

  (defun alpha (x)
    (* x alpha-width))

(defface alpha-face '((t :weight bold)) "Face.")
"""


@pytest.fixture
def config():
    return ResolverConfig()


def test_offset_points_at_definition_form(tmp_path: Path, config):
    source = tmp_path / "alpha.el"
    source.write_bytes(LISP_SOURCE)

    assert find_definition(source, "alpha", config) == LISP_SOURCE.index(b"(defun alpha (x)")


def test_variable_and_face_kinds(tmp_path: Path, config):
    source = tmp_path / "alpha.el"
    source.write_bytes(LISP_SOURCE)

    assert find_definition(source, "alpha-width", config, kind="variable") == LISP_SOURCE.index(b"(defvar")
    assert find_definition(source, "alpha-face", config, kind="face") == LISP_SOURCE.index(b"(defface")


def test_compressed_sources_are_searched(tmp_path: Path, config):
    source = tmp_path / "alpha.el.gz"
    with gzip.open(source, "wb") as f:
        f.write(LISP_SOURCE)

    assert find_definition(source, "alpha-helper", config) == LISP_SOURCE.index(b"(defun alpha-helper")


def test_native_template_matches_defun_macro(tmp_path: Path, config):
    content = b'/* data.c */\n\nDEFUN ("car", Fcar, Scar, 1, 1, 0,\n       doc: /* Return the car of LIST.  */)\n'
    source = tmp_path / "data.c"
    source.write_bytes(content)

    assert find_definition(source, "car", config, native=True) == content.index(b"DEFUN")


def test_missing_definition_raises_with_path(tmp_path: Path, config):
    source = tmp_path / "alpha.el"
    source.write_bytes(LISP_SOURCE)

    with pytest.raises(DefinitionNotFoundError) as excinfo:
        find_definition(source, "beta", config)

    assert excinfo.value.path == source
    assert excinfo.value.symbol == "beta"


def test_symbol_names_are_escaped(tmp_path: Path, config):
    source = tmp_path / "ops.el"
    source.write_bytes(b"(defun 1+x (n) n)\n(defun 1+ (n) n)\n")

    assert find_definition(source, "1+", config) == len(b"(defun 1+x (n) n)\n")
