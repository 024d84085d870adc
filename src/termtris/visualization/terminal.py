from __future__ import annotations

import argparse
import curses
from typing import Dict, List, Optional

from termtris.game import Action, Game, GameConfig, GameController, TetrominoType
from .events import EventKind, receiver


KEY_TO_ACTION: Dict[int, Action] = {
    ord("a"): Action.SHIFT_LEFT,
    curses.KEY_LEFT: Action.SHIFT_LEFT,
    ord("d"): Action.SHIFT_RIGHT,
    curses.KEY_RIGHT: Action.SHIFT_RIGHT,
    ord("w"): Action.ROTATE,
    curses.KEY_UP: Action.ROTATE,
    ord("s"): Action.HARD_DROP,
    curses.KEY_DOWN: Action.HARD_DROP,
}

QUIT_KEYS = (ord("q"), 3)  # 3 is Ctrl-C in raw mode
PAUSE_KEY = ord(" ")

CURSES_COLORS = {
    TetrominoType.I: curses.COLOR_CYAN,
    TetrominoType.O: curses.COLOR_YELLOW,
    TetrominoType.T: curses.COLOR_MAGENTA,
    TetrominoType.S: curses.COLOR_GREEN,
    TetrominoType.Z: curses.COLOR_RED,
    TetrominoType.J: curses.COLOR_BLUE,
    TetrominoType.L: curses.COLOR_WHITE,
}
WALL = "|"


def handle_key(controller: GameController, key: int) -> bool:
    """Apply one key press. Returns False when the player asked to quit."""
    if key in QUIT_KEYS:
        return False
    if key == PAUSE_KEY:
        controller.toggle_pause()
        return True
    action = KEY_TO_ACTION.get(key)
    if action is not None:
        controller.send(action)
    return True


def _init_colors() -> None:
    if not curses.has_colors():
        return
    curses.start_color()
    for kind, clr in CURSES_COLORS.items():
        curses.init_pair(int(kind), clr, clr)


def _block_attr(pair: int) -> int:
    return curses.color_pair(pair) if curses.has_colors() else curses.A_REVERSE


def draw(screen, controller: GameController) -> None:
    game = controller.game
    state = game.get_state()
    height, width = state.shape
    for y in range(height):
        screen.addstr(y, 0, WALL, curses.A_BOLD)
        for x in range(width):
            v = int(state[y, x])
            if v:
                screen.addstr(y, 1 + 2 * x, "  ", _block_attr(v))
            else:
                screen.addstr(y, 1 + 2 * x, "  ")
        screen.addstr(y, 1 + 2 * width, WALL, curses.A_BOLD)
    status = f" Score: {game.score}"
    if controller.pause:
        status += "  PAUSED"
    screen.addstr(height, 0, "+" + "-" * (2 * width) + "+", curses.A_BOLD)
    screen.addstr(height + 1, 0, status.ljust(2 * width + 2))
    screen.refresh()


def play(screen, controller: GameController, tick_ms: int) -> None:
    curses.curs_set(0)
    curses.raw()
    screen.keypad(True)
    _init_colors()
    screen.clear()
    draw(screen, controller)
    for event in receiver(screen, tick_ms):
        if event.kind is EventKind.TICK:
            controller.send(Action.TICK)
        elif not handle_key(controller, event.key):
            break
        draw(screen, controller)
        if controller.game.over:
            break


def positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Falling-block puzzle in the terminal")
    p.add_argument("--tick-ms", type=positive_int, default=500, help="Gravity interval in milliseconds")
    p.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    game = Game(GameConfig(random_seed=args.seed))
    controller = GameController(game)
    # curses.wrapper restores the terminal and cursor on every exit path
    curses.wrapper(play, controller, args.tick_ms)
    if game.over:
        print(f"Game over. Score: {game.score}")
    else:
        print(f"Score: {game.score}")


if __name__ == "__main__":  # pragma: no cover
    main()
