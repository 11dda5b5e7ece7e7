"""Tests for building colorizers from color specifications."""

from __future__ import annotations

import pytest

from pathabbrev.features.colorize import (
    Colorizer,
    DecorationRole,
    EscapeMode,
    StyleSpecError,
)


class FakeResolver:
    """Resolver producing readable markers; ``bad`` is rejected."""

    def resolve(self, attribute: str) -> tuple[str, str]:
        if attribute == "bad":
            raise StyleSpecError("bad attribute")
        return f"<{attribute}>", "</>"


def test_default_colorizer_is_identity() -> None:
    """Unset roles pass text through unchanged."""

    colorizer = Colorizer()
    for role in DecorationRole:
        assert colorizer.decorate(role, "text") == "text"


def test_from_spec_sets_configured_roles() -> None:
    """Each role=attribute pair decorates its role only."""

    colorizer = Colorizer.from_spec(
        "project=blue, root = grey ,separator=sep,ellipsis=dim,default=plain",
        FakeResolver(),
    )

    assert colorizer.decorate(DecorationRole.PROJECT, "repo") == "<blue>repo</>"
    assert colorizer.decorate(DecorationRole.ROOT, "~") == "<grey>~</>"
    assert colorizer.decorate(DecorationRole.SEPARATOR, "/") == "<sep>/</>"
    assert colorizer.decorate(DecorationRole.ELLIPSIS, "oc") == "<dim>oc</>"
    assert colorizer.decorate(DecorationRole.DEFAULT, "d") == "<plain>d</>"
    assert colorizer.decorate(DecorationRole.NONE, "file") == "file"


@pytest.mark.parametrize(
    "spec",
    [
        "project",
        "project=blue=bold",
        "project=",
        "unknown=blue",
        "none=blue",
        "project=bad",
        "",
        None,
    ],
)
def test_malformed_entries_are_ignored(spec: str | None) -> None:
    """Wrong field counts, unknown roles and rejected attributes are skipped."""

    colorizer = Colorizer.from_spec(spec, FakeResolver())

    assert colorizer == Colorizer()


def test_valid_entries_survive_invalid_neighbours() -> None:
    """One bad entry does not affect the others."""

    colorizer = Colorizer.from_spec("bogus=1,project=bad,root=ok", FakeResolver())

    assert colorizer.decorate(DecorationRole.ROOT, "~") == "<ok>~</>"
    assert colorizer.decorate(DecorationRole.PROJECT, "repo") == "repo"


def test_last_entry_for_role_wins() -> None:
    """Repeated roles take the last valid attribute."""

    colorizer = Colorizer.from_spec("root=first,root=second,root=bad", FakeResolver())

    assert colorizer.decorate(DecorationRole.ROOT, "~") == "<second>~</>"


def test_escape_mode_wraps_control_sequences() -> None:
    """Prompt escaping brackets start and reset sequences, not the text."""

    colorizer = Colorizer.from_spec("root=x", FakeResolver(), EscapeMode.ZSH)

    assert colorizer.decorate(DecorationRole.ROOT, "~") == "%{<x>%}~%{</>%}"


def test_role_accepts_plain_string() -> None:
    """Role values compare equal to their configuration keys."""

    colorizer = Colorizer.from_spec("ellipsis=x", FakeResolver())

    assert colorizer.decorate(DecorationRole("ellipsis"), "oc") == "<x>oc</>"
