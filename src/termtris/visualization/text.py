from __future__ import annotations

from typing import List

import numpy as np

from termtris.game import Game

BLOCK = "█"
EMPTY = "·"


def format_grid(grid: np.ndarray) -> str:
    return "\n".join("".join(BLOCK if cell else EMPTY for cell in row) for row in grid)


def format_game(game: Game, paused: bool = False) -> str:
    """Grid with the active piece, framed by walls, plus a status line."""
    lines: List[str] = []
    for row in game.get_state():
        lines.append("|" + "".join(BLOCK * 2 if cell else "  " for cell in row) + "|")
    lines.append("+" + "-" * (2 * game.grid.width) + "+")
    status = f"Score: {game.score}"
    if game.over:
        status += "  GAME OVER"
    elif paused:
        status += "  PAUSED"
    lines.append(status)
    return "\n".join(lines)
