"""Summary: Zero-width markers that hide control sequences from prompt width math.
Why: Shells count every prompt byte unless escapes are bracketed for them.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class EscapeMode(str, Enum):
    """How control sequences are wrapped for embedding in a shell prompt."""

    NONE = "none"
    ZSH = "zsh"
    BASH = "bash"

    @staticmethod
    def from_user_input(value: str) -> "EscapeMode":
        """Translate raw CLI or config input into the matching mode."""

        normalized = value.strip().lower()
        for mode in EscapeMode:
            if mode.value == normalized:
                return mode
        valid: Final[str] = ", ".join(m.value for m in EscapeMode)
        msg = f"Unsupported prompt escape '{value}'. Valid options: {valid}"
        raise ValueError(msg)

    def wrap(self, sequence: str) -> str:
        """Surround a non-empty control sequence with this mode's markers."""

        if not sequence or self is EscapeMode.NONE:
            return sequence
        opening, closing = _MARKERS[self]
        return f"{opening}{sequence}{closing}"


# zsh prompt expansion understands %{...%}; readline (bash) uses SOH/STX.
_MARKERS: Final[dict[EscapeMode, tuple[str, str]]] = {
    EscapeMode.ZSH: ("%{", "%}"),
    EscapeMode.BASH: ("\x01", "\x02"),
}


__all__ = ["EscapeMode"]
