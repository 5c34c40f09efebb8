import pytest

from hanzicards.check_answer import check_answer
from hanzicards.question import Question
from hanzicards.tones import add_tone_marks
from hanzicards.word import Word


@pytest.fixture
def word():
    return Word(
        chinese="你好",
        latin="ni hao",
        tones="33",
        translation="hello, hi",
        clarification="greeting",
    )


def test_meaning_plus_means_space():
    word = Word(chinese="早上好", translation="good morning")
    assert check_answer("good+morning", "", word, Question.MEANING) is None


def test_meaning_semicolon_separates():
    word = Word(chinese="走", translation="walk; go")
    assert check_answer("go", "", word, Question.MEANING) is None


def test_meaning_wrong_gives_combined(word):
    assert check_answer("bye", "", word, Question.MEANING) == "hello, hi; greeting"


def test_meaning_without_clarification_gives_translation():
    word = Word(chinese="好", translation="good")
    assert check_answer("bad", "", word, Question.MEANING) == "good"


def test_empty_answer_rejected_even_if_meaning_empty():
    word = Word(chinese="好", translation="", clarification="")
    assert check_answer("", "", word, Question.MEANING) == ""


@pytest.mark.parametrize("answer", ["nihao", "ni+hao", "NiHao"])
def test_reading_accepted(word, answer):
    assert check_answer(answer, "33", word, Question.READING) is None


def test_reading_wrong_tones(word):
    expected = add_tone_marks(word.latin, word.tones)
    assert check_answer("nihao", "31", word, Question.READING) == expected


def test_reading_wrong_letters(word):
    expected = add_tone_marks(word.latin, word.tones)
    assert check_answer("nihau", "33", word, Question.READING) == expected


def test_reading_umlaut_as_v():
    word = Word(chinese="绿", latin="lü", tones="4")
    assert check_answer("lv", "4", word, Question.READING) is None


def test_writing_percent_encoded(word):
    assert check_answer("%E4%BD%A0%E5%A5%BD", "", word, Question.WRITING) is None


def test_writing_wrong(word):
    assert check_answer("%E5%A5%BD", "", word, Question.WRITING) == word.chinese


def test_all_revealed_always_none(word):
    assert check_answer("", "", word, Question.ALL_REVEALED) is None