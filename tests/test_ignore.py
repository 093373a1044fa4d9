"""Ignore policy tests."""

from __future__ import annotations

from code_analyze.ignore import BUILTIN_IGNORES, should_ignore


def test_builtin_directories_are_ignored() -> None:
    assert should_ignore("./target/debug/build.rs")
    assert should_ignore("repo/.git/hooks/pre-commit")
    assert should_ignore("web/node_modules/pkg/index.c")
    assert should_ignore("./build/out.c")


def test_builtin_markers_need_surrounding_separators() -> None:
    assert not should_ignore("target/main.rs")
    assert not should_ignore("src/target.rs")
    assert not should_ignore("src/builder/main.c")


def test_user_patterns_are_plain_substrings() -> None:
    assert should_ignore("src/vendor/lib.c", ["vendor"])
    assert should_ignore("src/gen_bindings.rs", ["gen_"])
    assert not should_ignore("src/main.rs", ["*.rs"])
    assert not should_ignore("src/main.rs", ["^src"])


def test_adding_patterns_never_unignores() -> None:
    paths = ["./src/a.rs", "./target/b.rs", "./vendor/c.c", "./src/d.cpp"]
    base = {path for path in paths if should_ignore(path, [])}
    narrowed = {path for path in paths if should_ignore(path, ["vendor"])}
    assert base <= narrowed
    assert "./vendor/c.c" in narrowed
    for marker in BUILTIN_IGNORES:
        assert should_ignore(f".{marker}x.rs", ["unrelated"])
