from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    Board,
    Move,
    SAMPLE_LAYOUTS,
    STRATEGIES,
    WIN,
    deal_board,
    legal_moves,
    rank,
    replay,
    sample_board,
    settings_from_env,
    solve,
)

# The exhaustive tree grows with branching^depth and branching with the
# square of the column count; keep requests small on both axes.
MAX_DEPTH = int(os.getenv("COLORSORT_MAX_DEPTH", "6"))
MAX_ITERATIONS = int(os.getenv("COLORSORT_MAX_ITERATIONS", "500"))
MAX_COLUMNS = int(os.getenv("COLORSORT_MAX_COLUMNS", "10"))
MAX_COLUMN_SIZE = int(os.getenv("COLORSORT_MAX_COLUMN_SIZE", "8"))

app = Flask(__name__)


def _request_body() -> Optional[Dict[str, Any]]:
    """Returns the JSON object body ({} when absent), or None when it is not an object."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _check_board_size(columns: int, column_size: int) -> None:
    if not 1 <= columns <= MAX_COLUMNS:
        raise ValueError(f"number of columns must be between 1 and {MAX_COLUMNS}")
    if not 1 <= column_size <= MAX_COLUMN_SIZE:
        raise ValueError(f"column size must be between 1 and {MAX_COLUMN_SIZE}")


def _board_to_json(b: Board) -> Dict[str, Any]:
    return {
        "columnSize": int(b.column_size),
        "columns": [[int(c) for c in col] for col in b.columns],
        "pretty": b.pretty(),
    }


def _json_to_board(obj: Dict[str, Any]) -> Board:
    columns = obj["columns"]
    if not isinstance(columns, list) or not all(isinstance(col, list) for col in columns):
        raise ValueError("columns must be a list of lists")
    column_size = int(obj["columnSize"])
    _check_board_size(len(columns), column_size)
    return Board.new(column_size, columns)


def _moves_to_json(moves: List[Move]) -> List[List[int]]:
    return [[int(m.src), int(m.dst)] for m in moves]


def _bad_request(msg: str) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": msg}), 400


def _search_params(body: Dict[str, Any]) -> Tuple[int, int, str]:
    depth, iterations, strategy = settings_from_env()
    depth = int(body.get("depth", depth))
    iterations = int(body.get("iterations", iterations))
    strategy = str(body.get("strategy", strategy))
    if not 1 <= depth <= MAX_DEPTH:
        raise ValueError(f"depth must be between 1 and {MAX_DEPTH}")
    if not 1 <= iterations <= MAX_ITERATIONS:
        raise ValueError(f"iterations must be between 1 and {MAX_ITERATIONS}")
    if strategy not in STRATEGIES:
        raise ValueError(f"strategy must be one of {', '.join(STRATEGIES)}")
    return depth, iterations, strategy


@app.get("/api/samples")
def api_samples() -> Any:
    return jsonify({"ok": True, "samples": sorted(SAMPLE_LAYOUTS)})


@app.post("/api/new")
def api_new() -> Any:
    body = _request_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        if body.get("sample"):
            board = sample_board(str(body["sample"]))
        else:
            colors = int(body.get("colors", 4))
            size = int(body.get("size", 4))
            empty = int(body.get("empty", 2))
            _check_board_size(colors + max(empty, 0), size)
            board = deal_board(colors, size, empty, seed=body.get("seed", None))
    except (ValueError, TypeError) as e:
        return _bad_request(str(e))
    return jsonify({
        "ok": True,
        "state": _board_to_json(board),
        "legalMoves": _moves_to_json(legal_moves(board)),
    })


@app.post("/api/legal")
def api_legal() -> Any:
    body = _request_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        board = _json_to_board(body["state"])
    except (KeyError, ValueError, TypeError) as e:
        return _bad_request(f"bad state: {e}")
    return jsonify({"ok": True, "legalMoves": _moves_to_json(legal_moves(board))})


@app.post("/api/move")
def api_move() -> Any:
    body = _request_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        board = _json_to_board(body["state"])
        src, dst = body["move"]
        move = Move(int(src), int(dst))
    except (KeyError, ValueError, TypeError) as e:
        return _bad_request(f"bad request: {e}")
    legal = legal_moves(board)
    if move not in legal:
        return jsonify({"ok": False, "error": "Illegal move", "legalMoves": _moves_to_json(legal)}), 400
    moved = board.apply_move(move)
    return jsonify({
        "ok": True,
        "moved": moved,
        "state": _board_to_json(board),
        "legalMoves": _moves_to_json(legal_moves(board)),
        "win": rank(board) == WIN,
    })


@app.post("/api/rank")
def api_rank() -> Any:
    body = _request_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        board = _json_to_board(body["state"])
    except (KeyError, ValueError, TypeError) as e:
        return _bad_request(f"bad state: {e}")
    score = rank(board)
    return jsonify({"ok": True, "win": score == WIN, "score": None if score.win else score.value})


@app.post("/api/solve")
def api_solve() -> Any:
    body = _request_body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    try:
        board = _json_to_board(body["state"])
        depth, iterations, strategy = _search_params(body)
    except (KeyError, ValueError, TypeError) as e:
        return _bad_request(f"bad request: {e}")
    initial = board.clone()
    res = solve(board, depth=depth, iterations=iterations, strategy=strategy)
    return jsonify({
        "ok": True,
        "win": bool(res.win),
        "moves": _moves_to_json(res.moves),
        "iterations": res.iterations,
        "strategy": strategy,
        "snapshots": [_board_to_json(b) for b in replay(initial, res.moves)],
        "final": _board_to_json(res.board),
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
