from __future__ import annotations

# Facade module that re-exports SameGame core functionality.
# Used by the Flask app, the command line entry point and tests.
# Single-responsibility modules live under samegame_core/*.

from samegame_core.board import Board, Coord, EMPTY, Tile
from samegame_core.deal import deal_board
from samegame_core.cluster import (
    neighbors,
    find_connected_cluster,
    remove_cells,
    collapse_columns,
    has_any_legal_move,
)
from samegame_core.state import (
    PLAYING,
    GAME_OVER,
    MIN_CLUSTER,
    ActivationResult,
    GameSession,
    activate_cell,
    cluster_score,
    new_session,
)
from samegame_core.autoplay import STRATEGIES, list_moves, pick_move, play_out
from samegame_core.config import GameConfig, config_from_env
from samegame_core.submit import ScoreSubmission, SubmitResult, parse_submission, submit_score

__all__ = [
    'Board', 'Coord', 'EMPTY', 'Tile', 'deal_board',
    'neighbors', 'find_connected_cluster', 'remove_cells', 'collapse_columns', 'has_any_legal_move',
    'PLAYING', 'GAME_OVER', 'MIN_CLUSTER', 'ActivationResult', 'GameSession',
    'activate_cell', 'cluster_score', 'new_session',
    'STRATEGIES', 'list_moves', 'pick_move', 'play_out',
    'GameConfig', 'config_from_env',
    'ScoreSubmission', 'SubmitResult', 'parse_submission', 'submit_score',
]


def main() -> None:
    # CLI driver delegated to samegame_core.cli
    from samegame_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
