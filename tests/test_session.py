import pytest

from polyomino_bridge.game import Action, GameConfig, Scene, Session


def _lose(session: Session) -> None:
    session.game.position = (session.game.position[0], 100)
    session.handle(Action.DROP)


@pytest.fixture
def session():
    return Session(GameConfig(random_seed=11))


def test_starts_on_title(session):
    assert session.scene == Scene.TITLE
    assert session.game is None
    assert session.high_score == 0
    assert session.running


def test_game_actions_need_a_game(session):
    with pytest.raises(RuntimeError):
        session.handle(Action.DROP)


def test_update_on_title_is_noop(session):
    session.update(5.0)
    assert session.scene == Scene.TITLE


def test_start_game_switches_scene(session):
    game = session.start_game()
    assert session.scene == Scene.GAME
    assert session.game is game
    with pytest.raises(RuntimeError):
        session.start_game()


def test_update_drives_the_fall_clock(session):
    game = session.start_game()
    y = game.position[1]
    session.update(0.5)
    assert game.position[1] == y + 1


def test_game_over_returns_to_title_with_high_score(session):
    game = session.start_game()
    session.handle(Action.DROP)
    score = game.score
    assert score > 0
    _lose(session)
    assert session.scene == Scene.TITLE
    assert session.high_score == score
    assert session.last_score == score


def test_high_score_survives_new_games(session):
    session.start_game()
    session.handle(Action.DROP)
    _lose(session)
    best = session.high_score

    game = session.start_game()
    assert game.score == 0
    assert game.bridge == []
    # The first drop always lands, so lose on the second one.
    session.handle(Action.DROP)
    assert session.scene == Scene.GAME
    _lose(session)
    assert session.scene == Scene.TITLE
    assert session.high_score >= best


def test_rotate_actions_forwarded(session):
    game = session.start_game()
    w, h = game.piece.size
    session.handle(Action.ROTATE_RIGHT)
    assert game.piece.size == (h, w)
    session.handle(Action.ROTATE_LEFT)
    assert game.piece.size == (w, h)


def test_quit_stops_session(session):
    session.quit()
    assert not session.running
