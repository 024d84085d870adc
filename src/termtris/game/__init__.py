"""Game module for termtris.

Exports the falling-block engine and supporting classes:
- GameGrid: Fixed playfield and row clearing
- Piece: Active tetromino with shift and rotation
- TetrominoType: Enum of available shapes, also used as color tags
- Direction: Shift directions
- Game: Engine state machine (shift, turn, hard drop, tick)
- GameController: Pause gate in front of the engine
"""

from .grid import GameGrid, WIDTH, HEIGHT
from .pieces import Piece, TetrominoType, Direction
from .core import Game, GameConfig, Action
from .controls import GameController

__all__ = [
    "GameGrid",
    "WIDTH",
    "HEIGHT",
    "Piece",
    "TetrominoType",
    "Direction",
    "Game",
    "GameConfig",
    "Action",
    "GameController",
]
