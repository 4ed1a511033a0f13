from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence

Color = int  # opaque identifier, equality only
Column = List[Color]  # bottom first, last element is the top


class Move(NamedTuple):
    """Pour from column `src` onto column `dst` (indices into Board.columns)."""
    src: int
    dst: int


@dataclass
class Board:
    """Represents the puzzle state: the columns of tokens and the per-color totals."""
    column_size: int
    columns: List[Column]
    colors_count: Dict[Color, int] = field(default_factory=dict)

    @classmethod
    def new(cls, column_size: int, initial_columns: Iterable[Sequence[Color]]) -> 'Board':
        """
        Builds a board from a layout. Columns longer than `column_size` are
        truncated (excess tokens dropped); color totals are counted afterwards.
        Colors must be plain ints; anything else raises ValueError.
        """
        if column_size < 1:
            raise ValueError(f'column_size must be positive, got {column_size}')
        columns: List[Column] = []
        counts: Dict[Color, int] = {}
        for col in initial_columns:
            kept = list(col)[:column_size]
            for c in kept:
                # bool is an int subclass but never a color
                if not isinstance(c, int) or isinstance(c, bool):
                    raise ValueError(f'color must be an int, got {c!r}')
                counts[c] = counts.get(c, 0) + 1
            columns.append(kept)
        return cls(column_size=column_size, columns=columns, colors_count=counts)

    def top(self, col: int) -> Optional[Color]:
        """Returns the top color of a column, or None when it is empty."""
        column = self.columns[col]
        return column[-1] if column else None

    def free_slots(self, col: int) -> int:
        return self.column_size - len(self.columns[col])

    def can_move(self, src: int, dst: int) -> bool:
        """Checks whether pouring `src` onto `dst` is a legal move."""
        if src == dst:
            return False
        color = self.top(src)
        if color is None:
            return False
        dst_top = self.top(dst)
        if dst_top is not None and dst_top != color:
            return False
        return self.free_slots(dst) > 0

    def apply_move(self, move: Move) -> int:
        """
        Pours the top run of `move.src` onto `move.dst` in place.
        Tokens move one at a time while the destination has room and the next
        source token has the same color. Returns the number of tokens moved.
        """
        src, dst = self.columns[move.src], self.columns[move.dst]
        if not src:
            raise ValueError('cannot move from an empty column')
        color = src[-1]
        moved = 0
        while len(dst) < self.column_size and src and src[-1] == color:
            dst.append(src.pop())
            moved += 1
        return moved

    def undo_move(self, move: Move, count: int) -> None:
        """Reverses an apply_move(move) that transferred `count` tokens."""
        src, dst = self.columns[move.src], self.columns[move.dst]
        if count > len(dst):
            raise ValueError(f'cannot undo {count} tokens from a column holding {len(dst)}')
        for _ in range(count):
            src.append(dst.pop())

    def clone(self) -> 'Board':
        # colors_count never changes after construction, so it can be shared
        return Board(
            column_size=self.column_size,
            columns=[list(col) for col in self.columns],
            colors_count=self.colors_count,
        )

    def color_totals(self) -> Dict[Color, int]:
        """Recounts every color from the current columns."""
        totals: Dict[Color, int] = {}
        for col in self.columns:
            for c in col:
                totals[c] = totals.get(c, 0) + 1
        return totals

    def is_monochrome(self, col: int) -> bool:
        column = self.columns[col]
        return bool(column) and all(c == column[-1] for c in column)

    def pretty(self) -> str:
        """Generates a human-readable view, top row first, one `[c]` cell per column."""
        lines: List[str] = []
        for level in range(self.column_size - 1, -1, -1):
            row: List[str] = []
            for col in self.columns:
                row.append(f'[{_symbol(col[level])}]' if level < len(col) else '[ ]')
            lines.append(' '.join(row))
        return '\n'.join(lines)


def _symbol(color: Color) -> str:
    # Only single digits have a display symbol
    return str(color) if 0 <= color <= 9 else '?'
