from __future__ import annotations

import argparse
from typing import List, Optional

from .autoplay import STRATEGIES, pick_move
from .board import Coord
from .config import config_from_env
from .state import activate_cell, new_session


def _parse_coord(text: str) -> Optional[Coord]:
    sep = ',' if ',' in text else ' '
    try:
        x_s, y_s = [t for t in text.split(sep) if t != '']
        return (int(x_s), int(y_s))
    except ValueError:
        return None


def _prompt_move() -> Optional[Coord]:
    while True:
        text = input('Enter a cell as x,y or x y (q to quit): ').strip()
        if text.lower() in ('q', 'quit', 'exit'):
            return None
        coord = _parse_coord(text)
        if coord is None:
            print('Could not parse. Try again.')
            continue
        return coord


def main(argv: Optional[List[str]] = None) -> None:
    defaults = config_from_env()
    parser = argparse.ArgumentParser(description='SameGame in the terminal')
    parser.add_argument('--rows', type=int, default=defaults.rows, help='Board height')
    parser.add_argument('--cols', type=int, default=defaults.cols, help='Board width')
    parser.add_argument('--images', type=int, default=defaults.image_count, help='Number of tile types')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--auto', action='store_true', help='Let the computer play the whole game')
    parser.add_argument('--strategy', choices=list(STRATEGIES), default='greedy', help='Strategy for --auto')
    args = parser.parse_args(argv)

    session = new_session(args.rows, args.cols, args.images, seed=args.seed)
    print('Initial board:')
    print(session.board.pretty())

    while not session.is_over:
        if args.auto:
            choice = pick_move(session.board, args.strategy)
            if choice is None:
                break
            coord = choice[0]
            print(f"Auto picks {coord}")
        else:
            coord = _prompt_move()
            if coord is None:
                print(f"Quit with score {session.score}.")
                return
        res = activate_cell(session, *coord)
        if res is None:
            print('Nothing to clear there. Pick a tile with a same-colored neighbor.')
            continue
        print(f"Cleared {len(res.removed)} tiles: +{res.score_delta} (score {session.score})")
        print(session.board.pretty())

    print(f"Game over! Final score: {session.score} after {session.moves} moves, {session.board.tile_count()} tiles left.")
