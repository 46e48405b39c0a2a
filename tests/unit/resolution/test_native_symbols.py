from pathlib import Path

import pytest

from libfinder.config.resolver import ResolverConfig
from libfinder.resolution.errors import NotNativeSymbolError
from libfinder.resolution.native_symbols import NativeSymbolLocator

NATIVE = {"foo", "car", "fill-column", "ns-popup"}


def is_native(symbol):
    return symbol in NATIVE


@pytest.fixture
def emacs_tree(tmp_path: Path):
    etc = tmp_path / "etc"
    etc.mkdir()
    (etc / "DOC").write_bytes(
        b"\x1fSalloc.o\n"
        b"\x1fFfoobar\nDocumentation of foobar.\n"
        b"\x1fSdata.o\n"
        b"\x1fFfoo\nDocumentation of foo.\n"
        b"\x1fFcar\nReturn the car of LIST.\n"
        b"\x1fSbuffer.o\n"
        b"\x1fVfill-column\nColumn beyond which filling happens.\n"
        b"\x1fSnsmenu.o\n"
        b"\x1fFns-popup\nPop up a menu.\n"
    )
    return tmp_path


def make_locator(root: Path, **overrides) -> NativeSymbolLocator:
    config = ResolverConfig(doc_directory=str(root / "etc"), source_root=str(root), **overrides)
    return NativeSymbolLocator(config)


def test_exact_name_is_not_confused_with_longer_name(emacs_tree):
    locator = make_locator(emacs_tree)

    assert locator.locate("foo", is_native) == emacs_tree / "src" / "data.c"


def test_variable_entries_use_their_own_frame(emacs_tree):
    locator = make_locator(emacs_tree)

    assert locator.locate("fill-column", is_native, kind="variable") == emacs_tree / "src" / "buffer.c"
    assert locator.locate("fill-column", is_native, kind="function") is None


def test_platform_wrapper_objects_map_to_their_source_language(emacs_tree):
    locator = make_locator(emacs_tree)

    assert locator.locate("ns-popup", is_native) == emacs_tree / "src" / "nsmenu.m"


def test_false_association_resumes_scanning(tmp_path: Path):
    etc = tmp_path / "etc"
    etc.mkdir()
    (etc / "DOC").write_bytes(
        b"\x1fSlisp-helper.o\n\x1fFcar\nStale entry.\n"
        b"\x1fSdata.o\n\x1fFcar\nReturn the car of LIST.\n"
    )
    locator = make_locator(tmp_path, built_objects=["data.o", "alloc.o"])

    assert locator.locate("car", is_native) == tmp_path / "src" / "data.c"


def test_non_native_symbol_is_rejected(emacs_tree):
    locator = make_locator(emacs_tree)

    with pytest.raises(NotNativeSymbolError):
        locator.locate("interpreted-thing", is_native)


def test_missing_doc_file_or_symbol_yields_none(tmp_path: Path, emacs_tree):
    assert make_locator(tmp_path / "nowhere").locate("car", is_native) is None
    assert NativeSymbolLocator(ResolverConfig()).locate("car", is_native) is None
    assert make_locator(emacs_tree).find_object_name(b"\x1fSdata.o\n\x1fFcdr\n", "car") is None


def test_object_names_rewrite_and_join_source_root(tmp_path: Path):
    locator = make_locator(tmp_path)

    assert locator.rewrite_object_name("xdisp.obj") == "xdisp.c"
    assert locator.rewrite_object_name("lisp/subr.el") == "lisp/subr.el"
    assert locator.source_path("lisp/subr.el") == Path("lisp/subr.el")
    assert locator.source_path("xdisp.c") == tmp_path / "src" / "xdisp.c"
