from pathlib import Path

from libfinder.resolution.search import expand_name, search_directories


def test_expand_name_keeps_suffix_order():
    assert expand_name("foo", [".el", ".el.gz", ""]) == ["foo.el", "foo.el.gz", "foo"]


def test_expand_name_includes_bare_name_for_empty_suffix():
    assert "foo" in expand_name("foo", [".x", ""])
    assert expand_name("foo", []) == ["foo"]


def test_first_match_is_directory_major(tmp_path: Path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    (first / "foo.el.gz").write_text("")
    (second / "foo.el").write_text("")

    names = expand_name("foo", [".el", ".el.gz"])
    hits = search_directories(names, [str(first), str(second)])

    assert hits == [first / "foo.el.gz"]


def test_collect_all_orders_by_directory_then_suffix(tmp_path: Path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    (first / "foo.el.gz").write_text("")
    (first / "foo.el").write_text("")
    (second / "foo.el").write_text("")

    names = expand_name("foo", [".el", ".el.gz"])
    hits = search_directories(names, [str(first), str(second)], collect_all=True)

    assert hits == [first / "foo.el", first / "foo.el.gz", second / "foo.el"]


def test_predicate_filters_candidates(tmp_path: Path):
    (tmp_path / "foo.el").write_text("")
    (tmp_path / "foo").write_text("")

    hits = search_directories(
        ["foo.el", "foo"], [str(tmp_path)], predicate=lambda p: p.suffix == ""
    )

    assert hits == [tmp_path / "foo"]


def test_missing_directories_and_subdirectories_are_skipped(tmp_path: Path):
    (tmp_path / "foo.el").mkdir()

    assert search_directories(["foo.el"], [str(tmp_path / "nope"), str(tmp_path)], collect_all=True) == []
