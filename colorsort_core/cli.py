from __future__ import annotations

import argparse
from typing import List, Optional

from .board import Board
from .deal import SAMPLE_LAYOUTS, deal_board, parse_layout, sample_board
from .score import rank
from .search import STRATEGIES, replay, settings_from_env, solve


def build_parser() -> argparse.ArgumentParser:
    depth, iterations, strategy = settings_from_env()
    parser = argparse.ArgumentParser(description='Color-sort puzzle solver')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--sample', choices=sorted(SAMPLE_LAYOUTS), default=None, help='Solve a built-in puzzle')
    source.add_argument('--layout', default=None, help='Columns separated by "|", tokens bottom first, e.g. "1 2|2 1||"')
    parser.add_argument('--size', type=int, default=4, help='Column capacity for --layout and random deals')
    parser.add_argument('--colors', type=int, default=4, help='Number of colors for a random deal')
    parser.add_argument('--empty', type=int, default=2, help='Empty columns for a random deal')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for a random deal')
    parser.add_argument('--depth', type=int, default=depth, help='Lookahead depth per cycle')
    parser.add_argument('--iterations', type=int, default=iterations, help='Maximum outer cycles')
    parser.add_argument('--strategy', choices=STRATEGIES, default=strategy, help='Search strategy')
    parser.add_argument('--quiet', action='store_true', help='Print only the move list and the result')
    return parser


def board_from_args(args: argparse.Namespace) -> Board:
    if args.sample:
        return sample_board(args.sample)
    if args.layout is not None:
        return Board.new(args.size, parse_layout(args.layout))
    return deal_board(args.colors, args.size, args.empty, seed=args.seed)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        board = board_from_args(args)
    except ValueError as e:
        parser.error(str(e))
    if args.depth < 1 or args.iterations < 1:
        parser.error('--depth and --iterations must be positive')

    initial = board.clone()
    if not args.quiet:
        print('Initial state:')
        print(initial.pretty())
    res = solve(board, depth=args.depth, iterations=args.iterations, strategy=args.strategy)

    if args.quiet:
        print(' '.join(f'{m.src}->{m.dst}' for m in res.moves))
    else:
        for move, snapshot in zip(res.moves, replay(initial, res.moves)):
            print(f'\nMove {move.src} -> {move.dst}')
            print(snapshot.pretty())
    if res.win:
        print(f'\nSolved in {len(res.moves)} moves ({res.iterations} cycles).')
        return 0
    print(f'\nNot solved after {res.iterations} cycles ({len(res.moves)} moves, score {rank(res.board)}).')
    return 1
