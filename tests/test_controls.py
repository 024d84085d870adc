from termtris.game import Action, Game, GameConfig, GameController


def make_controller():
    return GameController(Game(GameConfig(random_seed=2)))


def test_actions_pass_through_when_running():
    controller = make_controller()
    before = list(controller.game.piece.cells)
    controller.send(Action.TICK)
    assert controller.game.piece.cells == [(r + 1, c) for r, c in before]


def test_pause_suppresses_every_action():
    controller = make_controller()
    controller.toggle_pause()
    assert controller.pause
    before = list(controller.game.piece.cells)
    for action in Action:
        controller.send(action)
    assert controller.game.piece.cells == before
    assert controller.game.pieces_locked == 0
    # Render queries still work while paused
    assert controller.game.get_state().shape == (20, 10)


def test_toggle_twice_resumes():
    controller = make_controller()
    controller.toggle_pause()
    controller.toggle_pause()
    assert not controller.pause
    controller.send(Action.HARD_DROP)
    assert controller.game.piece_touches()[2]
