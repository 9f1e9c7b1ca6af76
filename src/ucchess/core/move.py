"""Move value object (UCI-style representation)."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UCI_RE = re.compile(r"^([a-h][1-8])([a-h][1-8])([qrbn])?$")
_SQUARE_RE = re.compile(r"^[a-h][1-8]$")
PROMOTION_PIECES = ("q", "r", "b", "n")


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable move intent: source square, target square, optional promotion."""

    from_square: str
    to_square: str
    promotion: str | None = None

    def __post_init__(self) -> None:
        for square in (self.from_square, self.to_square):
            if not _SQUARE_RE.match(square):
                raise ValueError(f"Invalid square: {square!r}")
        if self.promotion is not None and self.promotion not in PROMOTION_PIECES:
            raise ValueError(f"Invalid promotion piece: {self.promotion!r}")

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.uci

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return f"{self.from_square}{self.to_square}{self.promotion or ''}"

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse ``e2e4`` / ``e7e8q`` into a :class:`Move`."""
        match = _UCI_RE.match(text.strip().lower())
        if match is None:
            raise ValueError(f"Invalid UCI move: {text!r}")
        from_sq, to_sq, promo = match.groups()
        return cls(from_sq, to_sq, promo)
