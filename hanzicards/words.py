"""Selecting words and tracking how often each has been answered correctly."""

from __future__ import annotations

import dataclasses
import math
import random
from os import PathLike

from .question import Question
from .state import State
from .storage import StorageError, read_file
from .word import Word

_U8_MAX = 0xFF


def get_state(path: str | PathLike[str]) -> tuple[Word, list[Word], State]:
    """Load the file and return the current word, all words and the state."""
    state, words = read_file(path)
    word = find_word(state.current_word, words)
    if word is None:
        raise StorageError(f"Invalid state. Word {state.current_word} not found in the list")
    return word, words, state


def get_next_word(state: State, words: list[Word]) -> Word | None:
    """Pick the next word: the first new one when learning, a least-known learnt one in review."""
    if not state.reviews:
        fresh = next((w for w in words if w.correct_guesses == 0), None)
        return dataclasses.replace(fresh) if fresh is not None else None

    learnt = [w for w in words if w.correct_guesses > 0]
    if not learnt:
        return None
    lowest = min(w.correct_guesses for w in learnt)
    candidates = [w for w in learnt if w.correct_guesses == lowest]
    return dataclasses.replace(random.choice(candidates))


def find_word(chinese: str, words: list[Word]) -> Word | None:
    """Return a copy of the word written ``chinese``, if present."""
    found = next((w for w in words if w.chinese == chinese), None)
    return dataclasses.replace(found) if found is not None else None


def update_counter(
    words: list[Word], state: State, correct_guesses: int, answer_correct: bool
) -> bool:
    """Record the answer on the current word where it counts; False if the word is missing."""
    if not state.reviews and state.question_type is not Question.WRITING:
        return True
    counter = correct_guesses + 1 if answer_correct else 0
    return set_guess_counter(words, state.current_word, counter)


def set_guess_counter(words: list[Word], chinese: str, value: int) -> bool:
    """Set the correct-guess count of the word written ``chinese``; False if it is missing."""
    for word in words:
        if word.chinese == chinese:
            word.correct_guesses = value
            return True
    return False


def get_word_limit(state: State, words: list[Word]) -> int:
    """How many words a learning or review round lasts."""
    if not state.reviews:
        return 3
    learnt = sum(1 for w in words if w.correct_guesses > 0)
    return min(math.ceil(math.sqrt(learnt)), _U8_MAX)