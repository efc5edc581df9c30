from __future__ import annotations

import random
from typing import List, Optional, Tuple

from .board import Board, Coord, EMPTY
from .cluster import find_connected_cluster
from .state import ActivationResult, GameSession, MIN_CLUSTER, activate_cell

STRATEGIES = ('greedy', 'random')


def list_moves(board: Board) -> List[Tuple[Coord, int]]:
    """Returns one representative coordinate per legal cluster, with the cluster size, in scan order."""
    seen = [False] * (board.width * board.height)
    moves: List[Tuple[Coord, int]] = []
    for x, y in board.coords():
        idx = board.index(x, y)
        if seen[idx] or board.grid[idx] == EMPTY:
            continue
        cluster = find_connected_cluster(board, x, y)
        for cx, cy in cluster:
            seen[board.index(cx, cy)] = True
        if len(cluster) >= MIN_CLUSTER:
            moves.append(((x, y), len(cluster)))
    return moves


def pick_move(board: Board, strategy: str = 'greedy', rng: Optional[random.Random] = None) -> Optional[Tuple[Coord, int]]:
    """Chooses a move: the largest cluster for 'greedy' (first in scan order on ties), any for 'random'."""
    if strategy not in STRATEGIES:
        raise ValueError(f'unknown strategy {strategy!r}; expected one of {STRATEGIES}')
    moves = list_moves(board)
    if not moves:
        return None
    if strategy == 'random':
        return (rng or random.Random()).choice(moves)
    best = moves[0]
    for mv in moves[1:]:
        if mv[1] > best[1]:
            best = mv
    return best


def play_out(session: GameSession, strategy: str = 'greedy', seed: Optional[int] = None) -> List[ActivationResult]:
    """Plays the session to game over with the given strategy and returns each activation."""
    rng = random.Random(seed)
    results: List[ActivationResult] = []
    while not session.is_over:
        choice = pick_move(session.board, strategy, rng)
        if choice is None:
            # Only reachable when a caller edited the board behind the session's back.
            session.refresh_status()
            break
        (x, y), _size = choice
        res = activate_cell(session, x, y)
        if res is None:
            break
        results.append(res)
    return results
