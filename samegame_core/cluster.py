from __future__ import annotations

from typing import Iterable, List

from .board import Board, Coord, EMPTY, Tile


def neighbors(coord: Coord) -> List[Coord]:
    """Gets the orthogonal neighbors of a coordinate in expansion order: right, left, down, up."""
    x, y = coord
    return [
        (x + 1, y),
        (x - 1, y),
        (x, y + 1),
        (x, y - 1),
    ]


def find_connected_cluster(board: Board, x: int, y: int) -> List[Coord]:
    """
    Finds every cell reachable from (x, y) through orthogonally adjacent cells of the same tile.
    Uses an explicit stack so the search depth is not bounded by the recursion limit.
    Neighbors are pushed in reverse so cells come out in the same pre-order a recursive
    right/left/down/up search would produce, starting with (x, y) itself.
    Returns [] for off-grid or empty origins.
    """
    if not board.in_bounds(x, y):
        return []
    target: Tile = board.at(x, y)
    if target == EMPTY:
        return []

    visited = [False] * (board.width * board.height)
    result: List[Coord] = []
    stack: List[Coord] = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if not board.in_bounds(cx, cy):
            continue
        idx = board.index(cx, cy)
        if visited[idx] or board.grid[idx] != target:
            continue
        visited[idx] = True
        result.append((cx, cy))
        stack.extend(reversed(neighbors((cx, cy))))
    return result


def remove_cells(board: Board, cells: Iterable[Coord]) -> int:
    """Marks the given cells empty and returns how many tiles were cleared."""
    cleared = 0
    for x, y in cells:
        if board.at(x, y) != EMPTY:
            board.set(x, y, EMPTY)
            cleared += 1
    return cleared


def collapse_columns(board: Board) -> None:
    """Compacts the tiles of each column toward the bottom, keeping their top-to-bottom order."""
    for x in range(board.width):
        tiles = [t for t in board.column(x) if t != EMPTY]
        gap = board.height - len(tiles)
        for y in range(board.height):
            board.set(x, y, EMPTY if y < gap else tiles[y - gap])


def has_any_legal_move(board: Board) -> bool:
    """
    Reports whether any cluster of two or more tiles remains.
    A cell's cluster has size >= 2 exactly when the cell has a same-tile neighbor, so checking
    the right and down neighbor of every cell gives the same answer as a full cluster search.
    """
    for y in range(board.height):
        for x in range(board.width):
            tile = board.grid[board.index(x, y)]
            if tile == EMPTY:
                continue
            if x + 1 < board.width and board.grid[board.index(x + 1, y)] == tile:
                return True
            if y + 1 < board.height and board.grid[board.index(x, y + 1)] == tile:
                return True
    return False
