from __future__ import annotations

import random
from typing import List, Optional

from .board import Board, Tile


def deal_board(
    rows: int,
    cols: int,
    image_count: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """Creates a rows x cols board with every tile drawn uniformly from [0, image_count)."""
    if image_count < 1:
        raise ValueError(f'image_count must be at least 1, got {image_count}')
    rng = rng or random.Random(seed)
    grid: List[Tile] = [rng.randrange(image_count) for _ in range(rows * cols)]
    return Board(width=cols, height=rows, grid=grid)
