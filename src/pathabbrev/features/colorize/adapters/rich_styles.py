"""src/pathabbrev/features/colorize/adapters/rich_styles.py
What: Resolve attribute tokens into ANSI start/reset pairs using rich styles.
Why: Keep terminal code generation in an adapter while the colorizer stays pure.
"""

from __future__ import annotations

import re
from typing import ClassVar, Final, final

from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from pathabbrev.features.colorize.domain.colorizer import StyleResolver, StyleSpecError

ANSI_RESET: Final[str] = "\x1b[0m"

# rich only emits codes around non-empty text; the marker is split back out.
_PLACEHOLDER: Final[str] = "\x00"


@final
class RichStyleResolver(StyleResolver):
    """Translate compact ``fg+attrs:bg`` tokens or rich style definitions."""

    # fg[+attrs][:bg[+h]] as accepted by the ``--color`` option.
    COMPACT_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^(?P<fg>[A-Za-z0-9_#]*)(?:\+(?P<fg_attrs>[bBdhisu]+))?"
        r"(?::(?P<bg>[A-Za-z0-9_#]*)(?:\+(?P<bg_attrs>h))?)?$"
    )

    ATTRIBUTE_FLAGS: ClassVar[dict[str, str]] = {
        "b": "bold",
        "B": "blink",
        "d": "dim",
        "i": "reverse",
        "s": "strike",
        "u": "underline",
    }

    NONE_TOKEN: ClassVar[str] = "[none]"

    def __init__(self, color_system: ColorSystem = ColorSystem.TRUECOLOR) -> None:
        self.color_system = color_system

    def resolve(self, attribute: str) -> tuple[str, str]:
        """Return the ``(start, reset)`` control sequences for ``attribute``.

        Args:
            attribute: ``[none]``, a compact token such as ``blue+b`` or ``245``,
                or any rich style definition such as ``bold #ff8800 on black``.

        Returns:
            tuple[str, str]: Start and reset sequences; both empty for a null style.

        Raises:
            StyleSpecError: If the attribute is not a valid style.
        """
        token = attribute.strip()
        if token == self.NONE_TOKEN:
            return ANSI_RESET, ANSI_RESET

        definition = self.to_rich_definition(token)
        try:
            style = Style.parse(definition)
        except StyleSyntaxError as e:
            raise StyleSpecError(f"invalid style {attribute!r}: {e}") from e

        rendered = style.render(_PLACEHOLDER, color_system=self.color_system)
        start, _, reset = rendered.partition(_PLACEHOLDER)
        return start, reset

    @classmethod
    def to_rich_definition(cls, token: str) -> str:
        """Rewrite a compact token into rich's style grammar.

        Tokens that do not follow the compact form are returned unchanged.
        """
        match = cls.COMPACT_PATTERN.match(token)
        if match is None:
            return token

        words: list[str] = []
        fg_attrs = match.group("fg_attrs") or ""
        for flag in fg_attrs:
            if flag in cls.ATTRIBUTE_FLAGS:
                words.append(cls.ATTRIBUTE_FLAGS[flag])

        fg = cls._color_name(match.group("fg") or "", bright="h" in fg_attrs)
        if fg:
            words.append(fg)

        bg = cls._color_name(match.group("bg") or "", bright=bool(match.group("bg_attrs")))
        if bg:
            words.extend(["on", bg])

        return " ".join(words)

    @staticmethod
    def _color_name(name: str, *, bright: bool) -> str:
        """Map a compact color name to rich; ``+h`` is ignored for numbers, hex and ``default``."""
        if not name:
            return ""
        if name.isdigit():
            return f"color({name})"
        if bright and name.isalpha() and name != "default":
            return f"bright_{name}"
        return name


__all__ = ["ANSI_RESET", "RichStyleResolver"]
