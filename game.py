from __future__ import annotations

# Facade module that re-exports the color-sort core.
# The Flask app, tools and tests import from here.
# Single-responsibility modules live under colorsort_core/*.

from colorsort_core.board import Board, Color, Column, Move
from colorsort_core.moves import column_moves, all_moves, legal_moves, is_legal_move
from colorsort_core.score import Score, WIN, rank, is_solved
from colorsort_core.search import (
    DEFAULT_DEPTH,
    DEFAULT_ITERATIONS,
    DEFAULT_STRATEGY,
    STRATEGIES,
    MoveTree,
    SolveResult,
    deepening_cycle,
    replay,
    settings_from_env,
    solve,
    tree_cycle,
)
from colorsort_core.deal import (
    SAMPLE_LAYOUTS,
    deal_board,
    deal_layout,
    parse_layout,
    sample_board,
)

__all__ = [
    'Board', 'Color', 'Column', 'Move',
    'column_moves', 'all_moves', 'legal_moves', 'is_legal_move',
    'Score', 'WIN', 'rank', 'is_solved',
    'DEFAULT_DEPTH', 'DEFAULT_ITERATIONS', 'DEFAULT_STRATEGY', 'STRATEGIES',
    'MoveTree', 'SolveResult', 'deepening_cycle', 'replay', 'settings_from_env', 'solve', 'tree_cycle',
    'SAMPLE_LAYOUTS', 'deal_board', 'deal_layout', 'parse_layout', 'sample_board',
    'main',
]


def main() -> None:
    # CLI driver delegated to colorsort_core.cli
    from colorsort_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
