from __future__ import annotations

from dataclasses import dataclass

from .board import Board
from .moves import column_moves

# Per-column bonuses, multiplied by the column count so that structural
# progress always outweighs the mobility term.
EMPTY_BONUS = 10
PARTIAL_BONUS = 100
COMPLETE_BONUS = 1000


@dataclass(frozen=True, order=True)
class Score:
    """Heuristic value of a board. A win compares above every numeric score."""
    win: bool = False
    value: int = 0

    @classmethod
    def of(cls, value: int) -> 'Score':
        return cls(win=False, value=value)

    def __str__(self) -> str:
        return 'Win' if self.win else str(self.value)


WIN = Score(win=True)


def rank(board: Board) -> Score:
    """
    Scores a board: legal move count per column plus bonuses for empty,
    partially collected and fully collected monochrome columns.
    Returns WIN when every column is empty or holds all tokens of one color.
    """
    n = len(board.columns)
    score = 0
    done = True
    for i, col in enumerate(board.columns):
        score += sum(1 for _ in column_moves(board, i))
        if not col:
            score += EMPTY_BONUS * n
            continue
        color = col[-1]
        if not board.is_monochrome(i):
            done = False
            continue
        try:
            total = board.colors_count[color]
        except KeyError:
            raise RuntimeError(f'color {color} is missing from the board color counts') from None
        if len(col) == total:
            score += COMPLETE_BONUS * n
        else:
            score += PARTIAL_BONUS * n
            done = False
    if done:
        return WIN
    return Score.of(score)


def is_solved(board: Board) -> bool:
    return rank(board) == WIN
