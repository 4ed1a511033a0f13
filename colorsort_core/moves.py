from __future__ import annotations

from typing import Iterator, List

from .board import Board, Move


def column_moves(board: Board, col: int) -> Iterator[Move]:
    """Yields every legal move out of column `col`, in destination index order."""
    if not board.columns[col]:
        return
    for dst in range(len(board.columns)):
        if board.can_move(col, dst):
            yield Move(col, dst)


def all_moves(board: Board) -> Iterator[Move]:
    """Yields every legal move on the board in canonical (src, dst) order."""
    for col in range(len(board.columns)):
        yield from column_moves(board, col)


def legal_moves(board: Board) -> List[Move]:
    return list(all_moves(board))


def is_legal_move(board: Board, move: Move) -> bool:
    """Checks that a move references valid columns and passes Board.can_move."""
    n = len(board.columns)
    if not (0 <= move.src < n and 0 <= move.dst < n):
        return False
    return board.can_move(move.src, move.dst)
