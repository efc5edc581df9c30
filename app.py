from __future__ import annotations

import os
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request, send_from_directory

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import (  # noqa: E402
    Board,
    EMPTY,
    GameSession,
    activate_cell,
    config_from_env,
    new_session,
    parse_submission,
    pick_move,
    submit_score,
)
from samegame_core.config import submit_timeout, submit_url  # noqa: E402

load_dotenv()

CONFIG = config_from_env()

# Serve static assets from ./static (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)


class BadState(ValueError):
    pass


# ---------- JSON codec ----------

def _board_to_json(b: Board) -> Dict[str, Any]:
    return {
        "width": int(b.width),
        "height": int(b.height),
        "grid": [None if t == EMPTY else int(t) for t in b.grid],
    }


def state_to_json(s: GameSession) -> Dict[str, Any]:
    return {
        "board": _board_to_json(s.board),
        "imageCount": int(s.image_count),
        "score": int(s.score),
        "status": s.status,
        "moves": int(s.moves),
    }


def _json_int(value: Any, what: str) -> int:
    # JSON numbers like 1.9, true, NaN or Infinity are not valid here
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadState(f"{what} must be an integer, got {value!r}")
    return value


def json_to_state(obj: Any) -> GameSession:
    """Rebuilds a session from the client's copy. Raises BadState on anything malformed."""
    if not isinstance(obj, dict):
        raise BadState("state required")
    try:
        b = obj["board"]
        if not isinstance(b, dict):
            raise BadState("board must be an object")
        width = _json_int(b["width"], "width")
        height = _json_int(b["height"], "height")
        cells = b["grid"]
        if not isinstance(cells, list):
            raise BadState("grid must be a list")
        grid: List[int] = [EMPTY if t is None else _json_int(t, "tile") for t in cells]
        image_count = _json_int(obj.get("imageCount", CONFIG.image_count), "imageCount")
        score = _json_int(obj.get("score", 0), "score")
        moves = _json_int(obj.get("moves", 0), "moves")
        board = Board(width=width, height=height, grid=grid)
        return GameSession.from_board(board, image_count, score=score, moves=moves)
    except KeyError as e:
        raise BadState(f"missing {e}") from None
    except BadState:
        raise
    except ValueError as e:
        raise BadState(str(e)) from None


def _bad_state(e: Exception) -> Any:
    return jsonify({"ok": False, "error": f"bad state: {e}"}), 400


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (required by main.js) ----------

@app.get("/api/config")
def api_config() -> Any:
    return jsonify({
        "ok": True,
        "rows": CONFIG.rows,
        "cols": CONFIG.cols,
        "imageCount": CONFIG.image_count,
        "blockSize": CONFIG.block_size,
        "submitEnabled": bool(submit_url()),
    })


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    seed = body.get("seed", None)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return jsonify({"ok": False, "error": "seed must be an integer"}), 400
    session = new_session(CONFIG.rows, CONFIG.cols, CONFIG.image_count, seed=seed)
    return jsonify({"ok": True, "state": state_to_json(session), "gameOver": session.is_over})


@app.post("/api/activate")
def api_activate() -> Any:
    body = _json_body()
    try:
        session = json_to_state(body.get("state"))
    except BadState as e:
        return _bad_state(e)
    try:
        x = _json_int(body["x"], "x")
        y = _json_int(body["y"], "y")
    except (KeyError, BadState):
        return jsonify({"ok": False, "error": "x and y must be integers"}), 400
    res = activate_cell(session, x, y)
    return jsonify({
        "ok": True,
        "state": state_to_json(session),
        "removed": [[cx, cy] for (cx, cy) in res.removed] if res else [],
        "scoreDelta": res.score_delta if res else 0,
        "gameOver": session.is_over,
    })


@app.post("/api/hint")
def api_hint() -> Any:
    body = _json_body()
    try:
        session = json_to_state(body.get("state"))
    except BadState as e:
        return _bad_state(e)
    choice = pick_move(session.board, "greedy")
    if choice is None:
        return jsonify({"ok": True, "move": None, "size": 0})
    (x, y), size = choice
    return jsonify({"ok": True, "move": [x, y], "size": size})


@app.post("/api/submit")
def api_submit() -> Any:
    body = request.get_json(force=True, silent=True)
    try:
        submission = parse_submission(body)
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    url = submit_url()
    if not url:
        app.logger.warning("score submission attempted but SAMEGAME_SUBMIT_URL is not set")
        return jsonify({"ok": False, "error": "Score submission is not configured."}), 503
    result = submit_score(url, submission, timeout=submit_timeout())
    if not result.ok:
        app.logger.warning("score submission failed: %s", result.error)
        return jsonify({"ok": False, "error": result.error or "submission failed"}), 502
    return jsonify({"ok": True, "response": result.body})


def _run(port: Optional[int] = None) -> None:
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=port or int(os.getenv("PORT", "5000")), debug=debug)


# Entrypoint for "python app.py"
if __name__ == "__main__":
    _run()
