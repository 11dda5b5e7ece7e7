"""Tests for the ordered root registry."""

from __future__ import annotations

from pathabbrev.features.abbreviation import HOME_LABEL, RootEntry, RootMatch, RootRegistry


def test_entry_strips_single_trailing_separator() -> None:
    """Root paths are normalized without a trailing separator."""

    assert RootEntry("~", "/home/u/", "/").absolute_path == "/home/u"
    assert RootEntry("~", "/", "/").absolute_path == "/"


def test_match_exact_and_prefix() -> None:
    """Exact paths and directory descendants match; sibling prefixes do not."""

    registry = RootRegistry((RootEntry(HOME_LABEL, "/home/u", "/"),))

    assert registry.match("/home/u") == RootMatch("~", 3)
    assert registry.match("/home/u/src/app") == RootMatch("~", 3)
    assert registry.match("/home/user") == RootMatch.NO_MATCH
    assert not registry.match("/etc")


def test_env_roots_take_priority_over_home() -> None:
    """Named roots are registered before home, even when nested under it."""

    registry = RootRegistry.from_environment(
        ["GOPATH"],
        ["/home/u"],
        environ={"GOPATH": "/home/u/go"},
        separator="/",
    )

    assert [entry.label for entry in registry.entries] == ["$GOPATH", "~"]
    assert registry.match("/home/u/go/src") == RootMatch("$GOPATH", 4)
    assert registry.match("/home/u/docs") == RootMatch("~", 3)


def test_unset_and_blank_env_roots_are_skipped() -> None:
    """Missing or empty environment values never become registry entries."""

    registry = RootRegistry.from_environment(
        ["UNSET", " ", "EMPTY", "WORK"],
        [],
        environ={"EMPTY": "", "WORK": "/srv/work/"},
        separator="/",
    )

    assert registry.entries == (RootEntry("$WORK", "/srv/work", "/"),)


def test_first_configured_home_wins() -> None:
    """With several home directories the earliest matching one is used."""

    registry = RootRegistry.from_environment(
        [],
        ["/home/u", "/home"],
        environ={},
        separator="/",
    )

    assert registry.match("/home/u/x") == RootMatch("~", 3)
    assert registry.match("/home/other") == RootMatch("~", 2)
