from __future__ import annotations

from .core import Action, Game


class GameController:
    """Pause gate in front of the engine.

    While paused every action is dropped before it reaches the game; reading
    the game state is unaffected.
    """

    def __init__(self, game: Game) -> None:
        self.game = game
        self.pause = False

    def toggle_pause(self) -> None:
        self.pause = not self.pause

    def send(self, action: Action) -> None:
        if not self.pause:
            self.game.step(action)
