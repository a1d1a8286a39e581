from flappy_bird.data_models import FrameState, RoundState
from flappy_bird.renderer import game_over_lines


def frame(score, best, record):
    return FrameState(state=RoundState.GAME_OVER, bird_x=70.0, bird_y=300.0,
                      bird_rotation=0.0, score=score, high_score=best, new_record=record)


def test_game_over_panel_without_record():
    assert game_over_lines(frame(2, 5, False)) == ["Score: 2", "Best: 5"]


def test_game_over_panel_flags_new_record():
    lines = game_over_lines(frame(7, 7, True))
    assert lines == ["Score: 7", "Best: 7", "!NEW RECORD!"]


def test_frame_state_game_over_flag():
    assert frame(0, 0, False).game_over
    playing = FrameState(state=RoundState.FLYING, bird_x=70.0, bird_y=300.0, bird_rotation=0.0)
    assert not playing.game_over
