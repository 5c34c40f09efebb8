import pytest

from hanzicards.question import Question
from hanzicards.state import State
from hanzicards.storage import StorageError
from hanzicards.words import (
    find_word,
    get_next_word,
    get_state,
    get_word_limit,
    set_guess_counter,
    update_counter,
)
from hanzicards.word import Word


def _words(*counts):
    return [Word(chinese=f"w{i}", correct_guesses=c) for i, c in enumerate(counts)]


def test_find_word_returns_copy():
    words = _words(0, 5)
    found = find_word("w1", words)
    assert found == words[1]
    found.correct_guesses = 99
    assert words[1].correct_guesses == 5


def test_find_word_missing():
    assert find_word("nope", _words(0)) is None


def test_set_guess_counter():
    words = _words(0, 1)
    assert set_guess_counter(words, "w1", 7) is True
    assert words[1].correct_guesses == 7
    assert set_guess_counter(words, "zz", 7) is False


def test_update_counter_skips_non_writing_while_learning():
    words = _words(2)
    state = State(current_word="w0", question_type=Question.MEANING, reviews=False)
    assert update_counter(words, state, 2, False) is True
    assert words[0].correct_guesses == 2


def test_update_counter_increments_in_review():
    words = _words(3)
    state = State(current_word="w0", question_type=Question.MEANING, reviews=True)
    assert update_counter(words, state, 3, True) is True
    assert words[0].correct_guesses == 4


def test_update_counter_resets_on_wrong_writing():
    words = _words(3)
    state = State(current_word="w0", question_type=Question.WRITING, reviews=False)
    assert update_counter(words, state, 3, False) is True
    assert words[0].correct_guesses == 0


def test_update_counter_missing_word():
    state = State(current_word="none", question_type=Question.WRITING, reviews=False)
    assert update_counter(_words(1), state, 1, True) is False


def test_word_limit_learning():
    assert get_word_limit(State(reviews=False), _words(1, 1, 1, 1, 1)) == 3


@pytest.mark.parametrize("counts, limit", [((1, 1, 1, 1, 0), 2), ((1, 2, 1, 1, 1), 3)])
def test_word_limit_review(counts, limit):
    assert get_word_limit(State(reviews=True), _words(*counts)) == limit


def test_next_word_learning_takes_first_new():
    words = _words(2, 0, 0)
    assert get_next_word(State(reviews=False), words) == words[1]


def test_next_word_learning_none_left():
    assert get_next_word(State(reviews=False), _words(1, 2)) is None


def test_next_word_review_picks_least_known():
    words = _words(0, 2, 5, 2)
    chosen = {get_next_word(State(reviews=True), words).chinese for _ in range(50)}
    assert chosen <= {"w1", "w3"}
    assert chosen


def test_next_word_review_nothing_learnt():
    assert get_next_word(State(reviews=True), _words(0, 0)) is None


def _write(path, state, words):
    lines = [state.serialize()] + [w.serialize() for w in words]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_get_state(tmp_path):
    path = tmp_path / "hanzi.tsv"
    words = _words(0, 1)
    state = State(current_word="w1", reviews=False)
    _write(path, state, words)
    current, loaded, loaded_state = get_state(path)
    assert current == words[1]
    assert loaded == words
    assert loaded_state == state


def test_get_state_unknown_word(tmp_path):
    path = tmp_path / "hanzi.tsv"
    _write(path, State(current_word="gone"), _words(0))
    with pytest.raises(StorageError, match="Invalid state. Word gone not found in the list"):
        get_state(path)