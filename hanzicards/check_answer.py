"""Checking a submitted answer against the word being asked."""

from __future__ import annotations

from urllib.parse import unquote_to_bytes

from .question import Question
from .tones import add_tone_marks
from .word import Word

_SEPARATORS = str.maketrans({";": ","})


def check_answer(answer: str, tones: str, word: Word, question: Question) -> str | None:
    """Return ``None`` if the answer is right, otherwise the expected answer.

    ``answer`` is the raw, percent-encoded form value.
    """
    decoded = unquote_to_bytes(answer).decode("utf-8", errors="replace").lower()

    if question is Question.ALL_REVEALED:
        return None
    if question is Question.MEANING:
        correct = _check_meaning(decoded, word)
    elif question is Question.READING:
        correct = _check_reading(decoded, tones, word)
    else:
        correct = decoded == word.chinese

    if correct and decoded:
        return None
    return _correct_answer(word, question)


def _check_reading(answer: str, tones: str, word: Word) -> bool:
    latin = word.latin.replace("ü", "v").replace(" ", "")
    return answer.replace("+", "") == latin.strip() and tones == word.tones.strip()


def _meanings(text: str) -> list[str]:
    return [part.strip().lower() for part in text.translate(_SEPARATORS).split(",")]


def _check_meaning(answer: str, word: Word) -> bool:
    answer = answer.replace("+", " ")
    return answer in _meanings(word.translation) + _meanings(word.clarification)


def _correct_answer(word: Word, question: Question) -> str:
    if question is Question.MEANING:
        return _combined_meanings(word)
    if question is Question.READING:
        return add_tone_marks(word.latin, word.tones)
    if question is Question.WRITING:
        return word.chinese
    return ""


def _combined_meanings(word: Word) -> str:
    if word.translation and word.clarification:
        return f"{word.translation}; {word.clarification}"
    return word.translation + word.clarification