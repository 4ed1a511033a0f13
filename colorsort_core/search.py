from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .board import Board, Move
from .moves import all_moves, legal_moves
from .score import Score, WIN, rank

DEFAULT_DEPTH = 4
DEFAULT_ITERATIONS = 100
DEFAULT_STRATEGY = 'tree'
STRATEGIES = ('tree', 'deepening')


def _debug_enabled() -> bool:
    return os.getenv('COLORSORT_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def _trace(msg: str) -> None:
    if _debug_enabled():
        print(f"[search] {msg}")


def settings_from_env() -> Tuple[int, int, str]:
    """
    Reads (depth, iterations, strategy) defaults from the environment:
    COLORSORT_DEPTH, COLORSORT_ITERATIONS, COLORSORT_STRATEGY.
    Unparseable values fall back to the module defaults.
    """
    def _int(name: str, default: int) -> int:
        raw = os.getenv(name)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            _trace(f"ignoring {name}={raw!r}: not an integer")
            return default

    strategy = os.getenv('COLORSORT_STRATEGY', DEFAULT_STRATEGY).strip().lower()
    if strategy not in STRATEGIES:
        _trace(f"ignoring COLORSORT_STRATEGY={strategy!r}")
        strategy = DEFAULT_STRATEGY
    return _int('COLORSORT_DEPTH', DEFAULT_DEPTH), _int('COLORSORT_ITERATIONS', DEFAULT_ITERATIONS), strategy


# ---------- Strategy A: bounded exhaustive tree ----------

@dataclass
class TreeNode:
    """One board snapshot in a MoveTree; children are (move, node index) in canonical move order."""
    board: Board
    score: Score
    children: List[Tuple[Move, int]] = field(default_factory=list)


@dataclass
class MoveTree:
    """
    Arena of TreeNodes indexed by integer handles; nodes[0] is the root.
    A child is always stored after its parent, so a reverse scan of the
    arena visits every child before the node that owns it.
    """
    nodes: List[TreeNode]

    @classmethod
    def build(cls, board: Board, depth: int) -> 'MoveTree':
        """Materializes every legal line of play from `board` up to `depth` moves."""
        root = board.clone()
        nodes: List[TreeNode] = [TreeNode(board=root, score=rank(root))]
        stack: List[Tuple[int, int]] = [(0, depth)]
        while stack:
            idx, remaining = stack.pop()
            node = nodes[idx]
            # A won board ends its line; expanding it cannot change the result.
            if remaining <= 0 or node.score == WIN:
                continue
            for move in all_moves(node.board):
                child = node.board.clone()
                child.apply_move(move)
                nodes.append(TreeNode(board=child, score=rank(child)))
                child_idx = len(nodes) - 1
                node.children.append((move, child_idx))
                stack.append((child_idx, remaining - 1))
        return cls(nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def find_best(self) -> Tuple[Board, Score, List[Move]]:
        """
        Returns (board, score, moves) for the best line in the tree.
        Leaves and won nodes score their own rank; inner nodes take their best
        child, ties going to the earliest child in move order.
        """
        values: List[Score] = [WIN] * len(self.nodes)
        picks: List[Optional[Tuple[Move, int]]] = [None] * len(self.nodes)
        for idx in range(len(self.nodes) - 1, -1, -1):
            node = self.nodes[idx]
            if node.score == WIN or not node.children:
                values[idx] = node.score
                continue
            best = node.children[0]
            for move, child_idx in node.children[1:]:
                if values[best[1]] == WIN:
                    break
                if values[child_idx] > values[best[1]]:
                    best = (move, child_idx)
            values[idx] = values[best[1]]
            picks[idx] = best

        moves: List[Move] = []
        idx = 0
        pick = picks[0]
        while pick is not None:
            move, idx = pick
            moves.append(move)
            pick = picks[idx]
        return self.nodes[idx].board, values[0], moves


def tree_cycle(board: Board, depth: int) -> Tuple[Score, List[Move]]:
    tree = MoveTree.build(board, depth)
    _, score, moves = tree.find_best()
    _trace(f"tree depth={depth} nodes={len(tree)} score={score} moves={len(moves)}")
    return score, moves


# ---------- Strategy B: iterative deepening ----------

@dataclass
class _BestLine:
    score: Optional[Score] = None
    moves: List[Move] = field(default_factory=list)

    def offer(self, score: Score, moves: Sequence[Move]) -> None:
        if self.score is None or score > self.score:
            self.score = score
            self.moves = list(moves)


def _explore(board: Board, remaining: int, path: List[Move], best: _BestLine) -> bool:
    """
    Depth-limited search over `board` using apply/undo, so the board is
    unchanged on return. Returns True as soon as a winning line is recorded.
    """
    score = rank(board)
    if score == WIN:
        best.score = WIN
        best.moves = list(path)
        return True
    moves = legal_moves(board) if remaining > 0 else []
    if not moves:
        best.offer(score, path)
        return False
    for move in moves:
        count = board.apply_move(move)
        path.append(move)
        try:
            won = _explore(board, remaining - 1, path, best)
        finally:
            path.pop()
            board.undo_move(move, count)
        if won:
            return True
    return False


def deepening_cycle(board: Board, max_depth: int) -> Tuple[Score, List[Move]]:
    """
    Runs depth-limited searches at depths 0..max_depth. Stops at the first
    depth that finds a win; otherwise returns the best line of the deepest
    depth explored.
    """
    best = _BestLine()
    for depth in range(max_depth + 1):
        best = _BestLine()
        if _explore(board, depth, [], best):
            _trace(f"deepening win at depth={depth} moves={len(best.moves)}")
            break
    if best.score is None:
        raise RuntimeError('depth-limited search recorded no line')
    _trace(f"deepening depth={max_depth} score={best.score} moves={len(best.moves)}")
    return best.score, best.moves


# ---------- Outer loop ----------

@dataclass
class SolveResult:
    """Outcome of solve(): committed moves, whether the board was won, and the final board."""
    win: bool
    moves: List[Move]
    iterations: int
    board: Board


def solve(
    board: Board,
    depth: int = DEFAULT_DEPTH,
    iterations: int = DEFAULT_ITERATIONS,
    strategy: str = DEFAULT_STRATEGY,
) -> SolveResult:
    """
    Searches and commits moves on `board` (mutated in place) until it is won,
    `iterations` outer cycles have run, or no legal move is left.
    Running out of cycles is not an error: the result reports win=False.
    """
    if depth < 1:
        raise ValueError(f'depth must be positive, got {depth}')
    if iterations < 1:
        raise ValueError(f'iterations must be positive, got {iterations}')
    if strategy not in STRATEGIES:
        raise ValueError(f'unknown strategy {strategy!r}; expected one of {", ".join(STRATEGIES)}')
    cycle = tree_cycle if strategy == 'tree' else deepening_cycle

    committed: List[Move] = []
    win = rank(board) == WIN
    count = 0
    while not win and count < iterations:
        count += 1
        _, next_moves = cycle(board, depth)
        if not next_moves:
            _trace(f"cycle {count}: no legal moves, stopping")
            break
        for move in next_moves:
            board.apply_move(move)
        committed.extend(next_moves)
        win = rank(board) == WIN
        _trace(f"cycle {count}: committed {len(next_moves)} moves, total={len(committed)} win={win}")
    return SolveResult(win=win, moves=committed, iterations=count, board=board)


def replay(board: Board, moves: Sequence[Move]) -> List[Board]:
    """Applies `moves` to a copy of `board` and returns the snapshot after each move."""
    current = board.clone()
    snapshots: List[Board] = []
    for move in moves:
        current.apply_move(move)
        snapshots.append(current.clone())
    return snapshots
