from __future__ import annotations

import random
import re
from typing import Dict, List, Optional, Tuple

from .board import Board, Color, Column

Layout = Tuple[int, List[Column]]  # (column_size, columns)

# Hardcoded puzzles, bottom token first.
SAMPLE_LAYOUTS: Dict[str, Layout] = {
    'two-stacks': (4, [[1, 2, 3, 4], [1, 2, 3, 4], [], [], []]),
    'three-colors': (3, [[1, 2, 3], [2, 3, 1], [3, 1, 2], [], []]),
    'classic': (4, [[1, 2, 3, 1], [2, 3, 1, 2], [3, 1, 2, 3], [], []]),
}


def sample_board(name: str) -> Board:
    """Builds a fresh Board from one of SAMPLE_LAYOUTS."""
    try:
        column_size, columns = SAMPLE_LAYOUTS[name]
    except KeyError:
        raise ValueError(f'unknown sample {name!r}; expected one of {", ".join(sorted(SAMPLE_LAYOUTS))}') from None
    return Board.new(column_size, [list(col) for col in columns])


def deal_layout(colors: int, column_size: int, empty_columns: int = 2, seed: Optional[int] = None) -> Layout:
    """
    Shuffles `column_size` tokens of each of `colors` colors into full columns,
    followed by `empty_columns` empty ones. Colors are numbered from 1.
    """
    if colors < 1:
        raise ValueError('colors must be positive')
    if column_size < 1:
        raise ValueError('column_size must be positive')
    if empty_columns < 0:
        raise ValueError('empty_columns must not be negative')
    rng = random.Random(seed)
    tokens: List[Color] = [c for c in range(1, colors + 1) for _ in range(column_size)]
    rng.shuffle(tokens)
    columns: List[Column] = [tokens[i:i + column_size] for i in range(0, len(tokens), column_size)]
    columns.extend([] for _ in range(empty_columns))
    return column_size, columns


def deal_board(colors: int, column_size: int, empty_columns: int = 2, seed: Optional[int] = None) -> Board:
    column_size, columns = deal_layout(colors, column_size, empty_columns, seed)
    return Board.new(column_size, columns)


def parse_layout(text: str) -> List[Column]:
    """
    Parses a layout such as "1 2 3 4 | 1,2,3,4 | | |": columns are separated
    by '|', tokens by whitespace or commas, bottom token first.
    """
    columns: List[Column] = []
    for i, part in enumerate(text.split('|')):
        tokens = [t for t in re.split(r'[\s,]+', part.strip()) if t]
        try:
            columns.append([int(t) for t in tokens])
        except ValueError:
            raise ValueError(f'column {i} has a non-integer token: {part.strip()!r}') from None
    return columns
