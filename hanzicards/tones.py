"""Pinyin tone-mark placement."""

_MARKED = {
    "a": "āáǎà",
    "e": "ēéěè",
    "i": "īíǐì",
    "o": "ōóǒò",
    "u": "ūúǔù",
    "ü": "ǖǘǚǜ",
}


def add_tone_marks(latin: str, tones: str) -> str:
    """Join the space-separated syllables of ``latin``, marking each with its tone digit.

    Syllables without a matching digit in ``tones`` are left unmarked.
    """
    return "".join(
        _mark_syllable(syllable, tones[i] if i < len(tones) else "0")
        for i, syllable in enumerate(latin.split(" "))
    )


def _mark_syllable(syllable: str, tone: str) -> str:
    index = len(syllable) - 1
    ending = ""
    if syllable.endswith("ng"):
        index -= 2
        ending = "ng"
    elif syllable.endswith(("ao", "ou", "n")):
        index -= 1
        ending = syllable[-1]

    if index < 0:
        return syllable
    return syllable[:index] + _mark_char(syllable[index], tone) + ending


def _mark_char(char: str, tone: str) -> str:
    marks = _MARKED.get(char)
    if marks is None or tone not in "1234" or len(tone) != 1:
        return char
    return marks[int(tone) - 1]