"""A single vocabulary entry and its tab-separated storage form."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U16_MAX = 0xFFFF


def _parse_unsigned(text: str, maximum: int) -> int:
    if _UNSIGNED.fullmatch(text):
        value = int(text)
        if value <= maximum:
            return value
    return 0


@dataclass
class Word:
    """A word with its reading, tones, meaning and learning progress."""

    chinese: str = ""
    latin: str = ""
    tones: str = ""
    translation: str = ""
    clarification: str = ""
    correct_guesses: int = 0

    def serialize(self) -> str:
        return "\t".join(
            (
                str(self.correct_guesses),
                self.chinese,
                self.latin,
                self.tones,
                self.translation,
                self.clarification,
            )
        )

    @classmethod
    def deserialize(cls, text: str) -> Word:
        """Parse a stored line; missing fields are empty and a bad count is zero."""
        fields = text.split("\t")
        fields += [""] * (6 - len(fields))
        return cls(
            chinese=fields[1],
            latin=fields[2],
            tones=fields[3],
            translation=fields[4],
            clarification=fields[5],
            correct_guesses=_parse_unsigned(fields[0], _U16_MAX),
        )