"""Question kinds asked about a word and the outcome of answering them."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum


class Question(Enum):
    """What the learner is asked about the current word."""

    ALL_REVEALED = "a"
    MEANING = "m"
    READING = "r"
    WRITING = "w"

    def next(self, reviews: bool) -> Question:
        """Return the question to ask next.

        In review mode a random non-revealing question is chosen; otherwise the
        kinds cycle in a fixed order.
        """
        if reviews:
            return random.choice(_FOR_REVIEW)
        return _CYCLE[self]

    def serialize(self) -> str:
        return self.value

    @classmethod
    def deserialize(cls, text: str) -> Question:
        """Parse a stored code, falling back to ``ALL_REVEALED``."""
        try:
            return cls(text)
        except ValueError:
            return cls.ALL_REVEALED


_FOR_REVIEW = (Question.MEANING, Question.READING, Question.WRITING)

_CYCLE = {
    Question.ALL_REVEALED: Question.MEANING,
    Question.MEANING: Question.READING,
    Question.READING: Question.WRITING,
    Question.WRITING: Question.ALL_REVEALED,
}


class Outcome(Enum):
    NONE = "none"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass(frozen=True)
class QuestionResult:
    """How the previous answer turned out; ``expected`` holds the right answer when wrong."""

    outcome: Outcome
    expected: str = ""

    @classmethod
    def none(cls) -> QuestionResult:
        return cls(Outcome.NONE)

    @classmethod
    def correct(cls) -> QuestionResult:
        return cls(Outcome.CORRECT)

    @classmethod
    def incorrect(cls, expected: str) -> QuestionResult:
        return cls(Outcome.INCORRECT, expected)