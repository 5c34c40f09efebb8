"""Parsing of the URL-encoded answer form."""

from __future__ import annotations

import re
from dataclasses import dataclass

_TONE_ENTRY = re.compile(r"[0-9]{2}=[0-4]")


@dataclass(frozen=True)
class FormData:
    """Fields submitted with an answer."""

    answer: str
    tones: str
    veto: bool


def read_form(data: str) -> FormData:
    """Extract the answer, the tone digits and the veto flag from a form body."""
    fields = data.strip().lower().split("&")
    return FormData(_answer(fields), _tones(fields), _veto(fields))


def _answer(fields: list[str]) -> str:
    prefix = "answer="
    return next((f[len(prefix):] for f in fields if f.startswith(prefix)), "")


def _veto(fields: list[str]) -> bool:
    return any(f.startswith("veto") for f in fields)


def _tones(fields: list[str]) -> str:
    entries = sorted(
        f[4:] for f in fields if f.startswith("tone") and _TONE_ENTRY.fullmatch(f[4:])
    )
    result: list[str] = []
    for entry in entries:
        position = int(entry[:2])
        if position <= len(result):
            # Duplicate or zero position: there is no slot left for it.
            continue
        result.extend("0" * (position - 1 - len(result)))
        result.append(entry[3])
    return "".join(result)