"""
Color-sort core Python package.

This package contains the puzzle data structures, move generation, scoring
and search used by game.py, cli.py and the Flask app.
Modules:
- board.py: Board, Color, Column, Move
- moves.py: column_moves, all_moves, legal_moves
- score.py: Score, WIN, rank
- search.py: MoveTree, deepening_cycle, solve
- deal.py: sample layouts, seeded deals, layout parsing
"""
