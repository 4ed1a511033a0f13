from __future__ import annotations

import argparse
import os
import random
import sys
import time
from typing import Dict, List

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import game  # type: ignore  # noqa: E402


def run_strategy(layout, strategy: str, depth: int, iterations: int):
    column_size, columns = layout
    board = game.Board.new(column_size, columns)
    t0 = time.time()
    res = game.solve(board, depth=depth, iterations=iterations, strategy=strategy)
    took = int((time.time() - t0) * 1000)
    return res.win, len(res.moves), res.iterations, took


def process(args: argparse.Namespace) -> None:
    rng = random.Random(args.seed)
    totals: Dict[str, List[int]] = {s: [0, 0, 0] for s in game.STRATEGIES}  # wins, moves, ms
    mismatches = 0
    for _ in range(args.count):
        seed = rng.randrange(1_000_000)
        layout = game.deal_layout(args.colors, args.size, args.empty, seed=seed)
        outcomes = {}
        for strategy in game.STRATEGIES:
            win, n_moves, cycles, ms = run_strategy(layout, strategy, args.depth, args.iterations)
            outcomes[strategy] = win
            totals[strategy][0] += int(win)
            totals[strategy][1] += n_moves if win else 0
            totals[strategy][2] += ms
            print(f"seed={seed} {strategy}: win={win} moves={n_moves} cycles={cycles} ({ms}ms)")
        if len(set(outcomes.values())) > 1:
            mismatches += 1
    for strategy, (wins, moves, ms) in totals.items():
        avg = (moves / wins) if wins else 0.0
        print(f"{strategy}: solved {wins}/{args.count}, avg moves when solved {avg:.1f}, total {ms}ms")
    print(f"Checked {args.count} deals, solve-success mismatches={mismatches}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare the tree and deepening strategies on seeded deals")
    parser.add_argument('--count', type=int, default=10, help='Number of deals')
    parser.add_argument('--colors', type=int, default=3, help='Colors per deal')
    parser.add_argument('--size', type=int, default=3, help='Column capacity')
    parser.add_argument('--empty', type=int, default=2, help='Empty columns per deal')
    parser.add_argument('--depth', type=int, default=3, help='Lookahead depth')
    parser.add_argument('--iterations', type=int, default=50, help='Outer cycle cap')
    parser.add_argument('--seed', type=int, default=0, help='Seed for the deal seeds')
    args = parser.parse_args()
    process(args)


if __name__ == '__main__':
    main()
