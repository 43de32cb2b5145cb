import pytest
from wordle_app.models import ErrorKind, GameStatus
from wordle_app.services import GameService, get_game_service, initialize_game_service

from conftest import VOCABULARY, FixedChoice


@pytest.fixture
def service():
    return GameService(word_list=VOCABULARY, rng=FixedChoice("APPLE"))


def test_create_and_snapshot(service):
    game_id = service.create_new_game()
    state = service.get_game_state(game_id)
    assert state.game_id == game_id
    assert state.max_rounds == 6
    assert state.answer is None
    assert service.get_game_state("missing") is None


def test_key_input_routes_to_game(service):
    game_id = service.create_new_game()
    other_id = service.create_new_game()
    for letter in "CRANE":
        assert service.on_letter(game_id, letter) is True
    assert service.on_delete(game_id) is True
    assert service.get_game(game_id).current_guess == "CRAN"
    assert service.get_game(other_id).current_guess == ""

    result = service.on_submit(game_id)
    assert result.error_kind == ErrorKind.INCOMPLETE_GUESS


def test_unknown_game_returns_none(service):
    assert service.on_letter("missing", "A") is None
    assert service.on_delete("missing") is None
    assert service.on_submit("missing") is None
    assert service.make_guess("missing", "APPLE") is None


def test_make_guess_replaces_current_row(service):
    game_id = service.create_new_game()
    service.on_letter(game_id, "Z")
    result = service.make_guess(game_id, "apple")
    assert result.terminal == GameStatus.WON
    assert service.get_game_state(game_id).guesses == ["APPLE"]


@pytest.mark.parametrize("guess,error", [
    ("APPLEZ", "Guess must be exactly 5 letters"),
    ("AP-PLE", "Guess must be exactly 5 letters"),
    ("AP-LE", "Guess must contain only letters"),
])
def test_make_guess_rejects_malformed_words(service, guess, error):
    game_id = service.create_new_game()
    service.on_letter(game_id, "C")
    with pytest.raises(ValueError, match=error):
        service.make_guess(game_id, guess)

    state = service.get_game_state(game_id)
    assert state.current_letters == "C"
    assert state.current_round == 0
    assert state.game_over is False


@pytest.mark.parametrize("guess,error", [
    (None, "Guess must be a valid string"),
    (12345, "Guess must be a valid string"),
    ("APPLES", "Guess must be exactly 5 letters"),
    ("APP1E", "Guess must contain only letters"),
])
def test_check_guess_shape(service, guess, error):
    game_id = service.create_new_game()
    assert service.check_guess_shape(game_id, guess) == (False, error)


def test_check_guess_shape_accepts_unknown_words(service):
    # Membership is decided on submit, so the buffer can be kept
    game_id = service.create_new_game()
    assert service.check_guess_shape(game_id, "zzzzz") == (True, "")
    assert service.check_guess_shape("missing", "APPLE") == (False, "Game not found")


def test_delete_game(service):
    game_id = service.create_new_game()
    assert service.delete_game(game_id) is True
    assert service.delete_game(game_id) is False


def test_global_service():
    service = initialize_game_service(word_list=VOCABULARY)
    assert get_game_service() is service
    assert len(service.word_source) == len(VOCABULARY)
