"""Tests for resolving attribute tokens with rich."""

from __future__ import annotations

import pytest
from rich.color import ColorSystem

from pathabbrev.features.colorize import (
    Colorizer,
    DecorationRole,
    EscapeMode,
    RichStyleResolver,
    StyleSpecError,
)
from pathabbrev.features.colorize.adapters.rich_styles import ANSI_RESET


@pytest.mark.parametrize(
    ("token", "definition"),
    [
        ("blue+b", "bold blue"),
        ("245", "color(245)"),
        ("red+bh:white", "bold bright_red on white"),
        (":blue+h", "on bright_blue"),
        ("green+u", "underline green"),
        ("#ff8800", "#ff8800"),
        ("bold blue on black", "bold blue on black"),
        ("color(12)", "color(12)"),
    ],
)
def test_to_rich_definition(token: str, definition: str) -> None:
    """Compact tokens are rewritten; rich definitions pass through."""

    assert RichStyleResolver.to_rich_definition(token) == definition


def test_resolve_bold_blue() -> None:
    """Attributes and colors combine into one SGR sequence."""

    start, reset = RichStyleResolver().resolve("blue+b")

    assert start == "\x1b[1;34m"
    assert reset == ANSI_RESET


def test_resolve_palette_color() -> None:
    """Bare numbers select 256-color palette entries."""

    start, reset = RichStyleResolver().resolve("245")

    assert start == "\x1b[38;5;245m"
    assert reset == ANSI_RESET


def test_resolve_none_token_is_reset_pair() -> None:
    """``[none]`` resets attributes on both sides."""

    assert RichStyleResolver().resolve("[none]") == (ANSI_RESET, ANSI_RESET)


def test_resolve_null_style_is_empty() -> None:
    """Rich's ``none`` style emits no sequences."""

    assert RichStyleResolver().resolve("none") == ("", "")


def test_resolve_rejects_unknown_color() -> None:
    """Invalid definitions raise StyleSpecError."""

    with pytest.raises(StyleSpecError):
        _ = RichStyleResolver().resolve("notacolor")


def test_resolve_downgrades_for_standard_terminals() -> None:
    """Truecolor values fall back to the resolver's color system."""

    start, _ = RichStyleResolver(ColorSystem.STANDARD).resolve("#ff0000")

    assert start.startswith("\x1b[")
    assert "38;2" not in start


def test_default_spec_colorizes_roles() -> None:
    """The shipped color specification decorates the configurable roles."""

    colorizer = Colorizer.from_spec(
        "project=blue+b,root=245,separator=245,ellipsis=247,default=[none]",
        RichStyleResolver(),
        EscapeMode.ZSH,
    )

    assert colorizer.decorate(DecorationRole.PROJECT, "repo") == (
        "%{\x1b[1;34m%}repo%{\x1b[0m%}"
    )
    assert colorizer.decorate(DecorationRole.DEFAULT, "d") == "%{\x1b[0m%}d%{\x1b[0m%}"
    assert colorizer.decorate(DecorationRole.NONE, "file") == "file"


def test_bright_flag_on_default_color_keeps_default() -> None:
    """``default+h`` has no bright variant and resolves like ``default``."""

    assert RichStyleResolver.to_rich_definition("default+h") == "default"
    assert RichStyleResolver().resolve("default+h") == RichStyleResolver().resolve("default")
