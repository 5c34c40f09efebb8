"""Session state: which word is asked, in which mode, and how far along."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .question import Question

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U16_MAX = 0xFFFF
_U8_MAX = 0xFF


def _parse_unsigned(text: str, maximum: int) -> int:
    if _UNSIGNED.fullmatch(text):
        value = int(text)
        if value <= maximum:
            return value
    return 0


def _parse_bool(text: str, default: bool) -> bool:
    return {"true": True, "false": False}.get(text, default)


@dataclass
class State:
    """Progress of the learning session, stored as the first line of the word file."""

    previous_correct_guesses: int = 0
    previous_word: str = ""
    current_word: str = ""
    question_type: Question = Question.ALL_REVEALED
    reviews: bool = True
    word_number: int = 0

    def update(self, answer_correct: bool, previous_correct_guesses: int, word_limit: int) -> None:
        """Advance after an answer, switching between learning and review when the limit is hit."""
        self.previous_correct_guesses = previous_correct_guesses
        self.previous_word = self.current_word

        if self._should_count_word(answer_correct):
            self.word_number += 1

        if self.word_number < word_limit:
            if self.reviews or answer_correct:
                self.question_type = self.question_type.next(self.reviews)
            return

        self.word_number = 0
        self.reviews = not self.reviews
        self.question_type = (
            self.question_type.next(True) if self.reviews else Question.ALL_REVEALED
        )

    def _should_count_word(self, answer_correct: bool) -> bool:
        if self.reviews:
            return True
        return self.question_type is Question.WRITING and answer_correct

    def serialize(self) -> str:
        return "\t".join(
            (
                str(self.previous_correct_guesses),
                self.previous_word,
                self.current_word,
                self.question_type.serialize(),
                "true" if self.reviews else "false",
                str(self.word_number),
            )
        )

    @classmethod
    def deserialize(cls, text: str) -> State:
        """Parse a stored line, using defaults for anything missing or malformed."""
        fields = text.split("\t")
        fields += [""] * (6 - len(fields))
        return cls(
            previous_correct_guesses=_parse_unsigned(fields[0], _U16_MAX),
            previous_word=fields[1],
            current_word=fields[2],
            question_type=Question.deserialize(fields[3]),
            reviews=_parse_bool(fields[4], True),
            word_number=_parse_unsigned(fields[5], _U8_MAX),
        )