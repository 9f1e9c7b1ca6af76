"""Paired white/black move listing derived from the move history."""

from __future__ import annotations

from collections.abc import Sequence


def scoresheet_pairs(
    sans: Sequence[str], *, first_number: int = 1, black_first: bool = False
) -> list[tuple[int, str, str]]:
    """Group moves as ``(number, white, black)``; a missing move is ``""``.

    *first_number* is the full-move number of the starting position. When
    *black_first* is set the first move belongs to black, so the first row
    has an empty white cell.
    """
    pairs: list[tuple[int, str, str]] = []
    moves = list(sans)
    number = first_number
    if black_first and moves:
        pairs.append((number, "", moves.pop(0)))
        number += 1
    for idx in range(0, len(moves), 2):
        white = moves[idx]
        black = moves[idx + 1] if idx + 1 < len(moves) else ""
        pairs.append((number + idx // 2, white, black))
    return pairs


def format_scoresheet(
    sans: Sequence[str], *, first_number: int = 1, black_first: bool = False
) -> list[str]:
    """Format *sans* as ``"<n>. <white> <black>"`` lines.

    A row that opens with black's move is written ``"<n>... <black>"``.
    """
    lines = []
    for num, white, black in scoresheet_pairs(
        sans, first_number=first_number, black_first=black_first
    ):
        if not white:
            lines.append(f"{num}... {black}")
        else:
            lines.append(f"{num}. {white} {black}")
    return lines
