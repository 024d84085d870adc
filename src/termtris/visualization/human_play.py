from __future__ import annotations

import argparse
from typing import Dict, List, Optional

import pygame

from termtris.game import Action, Game, GameConfig, GameController
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.SHIFT_LEFT,
    pygame.K_a: Action.SHIFT_LEFT,
    pygame.K_RIGHT: Action.SHIFT_RIGHT,
    pygame.K_d: Action.SHIFT_RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_w: Action.ROTATE,
    pygame.K_DOWN: Action.HARD_DROP,
    pygame.K_s: Action.HARD_DROP,
}

TICK_EVENT = pygame.USEREVENT + 1


def run(tick_ms: int = 500, seed: Optional[int] = None) -> int:
    game = Game(GameConfig(random_seed=seed))
    controller = GameController(game)
    renderer = Renderer(cell_size=28)

    pygame.init()
    try:
        clock = pygame.time.Clock()
        screen = pygame.display.set_mode(renderer.window_size(game.grid.width, game.grid.height))
        pygame.display.set_caption("termtris")
        pygame.time.set_timer(TICK_EVENT, tick_ms)

        running = True
        while running and not game.over:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == TICK_EVENT:
                    controller.send(Action.TICK)
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_SPACE:
                        controller.toggle_pause()
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            controller.send(action)

            status = f"Score: {game.score}"
            if controller.pause:
                status += "  PAUSED"
            renderer.draw(screen, game.get_state(), status)
            clock.tick(60)
    finally:
        pygame.quit()
    return game.score


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Falling-block puzzle in a pygame window")
    p.add_argument("--tick-ms", type=int, default=500)
    p.add_argument("--seed", type=int, default=None)
    args = p.parse_args(argv)
    score = run(args.tick_ms, args.seed)
    print(f"Score: {score}")


if __name__ == "__main__":  # pragma: no cover
    main()
