# incant/core/domain/alphabet.py
"""
The fixed phoneme alphabet and the syllable well-formedness rule.

A syllable is exactly one consonant followed by exactly one vowel, so the
alphabet spans 10 x 5 = 50 possible syllables.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Union

from incant.core.domain.exceptions import MalformedSyllableError


class Vowel(str, Enum):
    A = "A"
    E = "E"
    I = "I"
    O = "O"
    U = "U"


class Consonant(str, Enum):
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    P = "P"
    R = "R"
    S = "S"
    T = "T"
    V = "V"
    W = "W"


VOWELS = frozenset(v.value for v in Vowel)
CONSONANTS = frozenset(c.value for c in Consonant)
PHONEMES = VOWELS | CONSONANTS


def is_vowel(ch: str) -> bool:
    return ch in VOWELS


def is_consonant(ch: str) -> bool:
    return ch in CONSONANTS


@dataclass(frozen=True, order=True)
class Syllable:
    """One consonant immediately followed by one vowel."""

    consonant: Consonant
    vowel: Vowel

    def __str__(self) -> str:
        return self.consonant.value + self.vowel.value

    @classmethod
    def of(cls, consonant: str, vowel: str) -> "Syllable":
        if not is_consonant(consonant) or not is_vowel(vowel):
            raise MalformedSyllableError(f"{consonant}{vowel}")
        return cls(Consonant(consonant), Vowel(vowel))

    @classmethod
    def parse(cls, text: Union[str, "Syllable"]) -> "Syllable":
        """Parses a two-letter spelling such as 'MA'."""
        if isinstance(text, Syllable):
            return text
        if not isinstance(text, str) or len(text) != 2:
            raise MalformedSyllableError(str(text))
        return cls.of(text[0], text[1])


SyllableLike = Union[str, Syllable]


def all_syllables() -> Iterator[Syllable]:
    """Every consonant/vowel cell, consonant-major."""
    for consonant in Consonant:
        for vowel in Vowel:
            yield Syllable(consonant, vowel)


def split_syllables(spelling: str) -> List[Syllable]:
    """
    Splits an undelimited spelling ('SEVA') into syllables.

    Raises:
        MalformedSyllableError: odd length or a pair that is not consonant+vowel.
    """
    if len(spelling) % 2:
        raise MalformedSyllableError(spelling)
    return [Syllable.of(spelling[i], spelling[i + 1]) for i in range(0, len(spelling), 2)]


def spell(syllables) -> str:
    return "".join(str(s) for s in syllables)
