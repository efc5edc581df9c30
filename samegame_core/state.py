from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, Coord, EMPTY
from .cluster import collapse_columns, find_connected_cluster, has_any_legal_move, remove_cells
from .config import debug_enabled
from .deal import deal_board

PLAYING = 'playing'
GAME_OVER = 'game_over'

MIN_CLUSTER = 2


def cluster_score(size: int) -> int:
    """Points awarded for clearing a cluster of the given size."""
    return size * size


@dataclass(frozen=True)
class ActivationResult:
    """What a successful click changed, for the presentation layer to redraw."""
    score_delta: int
    removed: Tuple[Coord, ...]


@dataclass
class GameSession:
    """Represents one play session: the board it mutates, the running score and its status."""
    board: Board
    image_count: int
    score: int = 0
    status: str = PLAYING
    moves: int = 0

    @classmethod
    def from_board(cls, board: Board, image_count: int, score: int = 0, moves: int = 0) -> 'GameSession':
        """Wraps an existing board, validating tiles and entering game over if it is already deadlocked."""
        if image_count < 1:
            raise ValueError(f'image_count must be at least 1, got {image_count}')
        if score < 0:
            raise ValueError(f'score must be non-negative, got {score}')
        if moves < 0:
            raise ValueError(f'moves must be non-negative, got {moves}')
        for tile in board.grid:
            if tile != EMPTY and not 0 <= tile < image_count:
                raise ValueError(f'tile {tile} outside [0, {image_count})')
        session = cls(board=board, image_count=image_count, score=score, moves=moves)
        session.refresh_status()
        return session

    @property
    def is_over(self) -> bool:
        return self.status == GAME_OVER

    def refresh_status(self) -> str:
        if not has_any_legal_move(self.board):
            self.status = GAME_OVER
        return self.status


def new_session(
    rows: int,
    cols: int,
    image_count: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> GameSession:
    """Deals a fresh random board and starts a session at score 0."""
    board = deal_board(rows, cols, image_count, seed=seed, rng=rng)
    session = GameSession.from_board(board, image_count)
    if debug_enabled():
        print(f"[engine] new {cols}x{rows} board, {image_count} tiles, status={session.status}")
    return session


def activate_cell(session: GameSession, x: int, y: int) -> Optional[ActivationResult]:
    """
    Clears the cluster under (x, y) if it holds at least two tiles.
    Returns None without touching the session for off-grid, empty or singleton cells,
    and once the session is over.
    """
    if session.is_over:
        return None
    board = session.board
    if board.is_empty(x, y):
        return None
    cluster = find_connected_cluster(board, x, y)
    if len(cluster) < MIN_CLUSTER:
        return None

    remove_cells(board, cluster)
    delta = cluster_score(len(cluster))
    session.score += delta
    session.moves += 1
    collapse_columns(board)
    session.refresh_status()
    if debug_enabled():
        print(f"[engine] cleared {len(cluster)} at {(x, y)} +{delta} score={session.score} status={session.status}")
    return ActivationResult(score_delta=delta, removed=tuple(cluster))
