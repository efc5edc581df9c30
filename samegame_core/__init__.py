"""
SameGame core Python package.

This package contains the board data structures and the pure-logic engine
used by game.py, the Flask app and the terminal front end.
Modules:
- board.py: Board, Tile, Coord, EMPTY
- deal.py: random board generation
- cluster.py: connectivity search, column collapse, move detection
- state.py: GameSession and activate_cell
- autoplay.py: move enumeration and scripted strategies
- config.py: environment-driven settings
- submit.py: remote score submission client
"""
