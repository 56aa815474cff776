# tests/core/test_alphabet.py
import pytest

from incant.core.domain.alphabet import (
    Consonant,
    Syllable,
    Vowel,
    all_syllables,
    spell,
    split_syllables,
)
from incant.core.domain.exceptions import MalformedSyllableError


class TestSyllable:
    def test_parse_consonant_vowel(self):
        syllable = Syllable.parse("MA")
        assert syllable.consonant == Consonant.M
        assert syllable.vowel == Vowel.A
        assert str(syllable) == "MA"

    @pytest.mark.parametrize("text", ["AM", "MM", "AA", "XA", "MX", "M", "MAS", "", "ma"])
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(MalformedSyllableError):
            Syllable.parse(text)

    def test_parse_is_identity_on_syllables(self):
        syllable = Syllable.parse("TI")
        assert Syllable.parse(syllable) is syllable

    def test_value_semantics(self):
        assert Syllable.parse("SA") == Syllable.of("S", "A")
        assert len({Syllable.parse("SA"), Syllable.of("S", "A")}) == 1


def test_alphabet_spans_fifty_syllables():
    syllables = list(all_syllables())
    assert len(syllables) == 50
    assert len(set(syllables)) == 50


def test_split_syllables_round_trips_spelling():
    syllables = split_syllables("SEVA")
    assert [str(s) for s in syllables] == ["SE", "VA"]
    assert spell(syllables) == "SEVA"


@pytest.mark.parametrize("spelling", ["SEV", "ESVA", "SEVV"])
def test_split_syllables_rejects_bad_spelling(spelling):
    with pytest.raises(MalformedSyllableError):
        split_syllables(spelling)
