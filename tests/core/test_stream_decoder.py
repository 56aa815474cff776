# tests/core/test_stream_decoder.py
import random

import pytest

from incant.core.decoding.decoder import StreamDecoder, decode
from incant.core.domain.exceptions import (
    AmbiguousSegmentationError,
    MalformedInputError,
    TruncatedWordError,
    UnknownWordError,
)
from incant.core.lexicon.dictionary import ValidatedDictionary, WordDictionary
from incant.core.lexicon.table import LexiconTable
from incant.core.lexicon.validator import validate


@pytest.fixture
def add_multiply():
    """The two-word dialect from the design notes: MA -> Add, SA -> Multiply."""
    table = LexiconTable.build("v1", {"MA": "Add", "SA": "Multiply"})
    dictionary = WordDictionary(table)
    dictionary.register("MA")
    dictionary.register("SA")
    return validate(dictionary)


def _meanings(units):
    return [u.meaning for u in units]


class TestScenario:
    def test_masa_decodes_to_add_multiply(self, add_multiply):
        units = list(decode(add_multiply, "MASA"))

        assert _meanings(units) == ["Add", "Multiply"]
        assert [(u.start, u.end) for u in units] == [(0, 2), (2, 4)]
        assert [(u.syllable_start, u.syllable_end) for u in units] == [(0, 1), (1, 2)]

    def test_trailing_consonant_is_truncated_word(self, add_multiply):
        decoder = StreamDecoder(add_multiply)
        with pytest.raises(TruncatedWordError) as excinfo:
            list(decoder.decode("MAS"))

        assert excinfo.value.position == 2
        assert excinfo.value.kind == "truncated_word"


class TestMaximalMunch:
    def test_multi_syllable_words(self, spell_dictionary):
        units = list(decode(spell_dictionary, "SEVAMASEVITU"))

        assert [u.word.id for u in units] == ["SEVA", "MA", "SEVI", "TU"]
        assert _meanings(units) == ["X", "Add", "Y", "Two"]
        assert [(u.start, u.end) for u in units] == [(0, 4), (4, 6), (6, 10), (10, 12)]
        assert units[2].syllable_start == 3

    def test_empty_stream(self, spell_dictionary):
        assert list(decode(spell_dictionary, "")) == []

    def test_accepts_any_iterable_of_letters(self, spell_dictionary):
        units = list(decode(spell_dictionary, iter(["V", "A", "L", "A", "N", "A"])))
        assert [u.word.id for u in units] == ["VALA", "NA"]

    def test_round_trip(self, spell_dictionary):
        """Any word sequence spelled out decodes back to the same sequence."""
        rng = random.Random(7)
        ids = sorted(spell_dictionary.words)
        for _ in range(50):
            sequence = [rng.choice(ids) for _ in range(rng.randint(1, 8))]
            decoded = [u.word.id for u in decode(spell_dictionary, "".join(sequence))]
            assert decoded == sequence


class TestFaults:
    @pytest.mark.parametrize(
        "stream, position, char",
        [
            ("AMA", 0, "A"),    # vowel cannot start a syllable
            ("MM", 1, "M"),     # consonant cannot follow a consonant
            ("MAXA", 2, "X"),   # not a phoneme
            ("MAma", 2, "m"),   # lower case is not a phoneme
            ("MA SA", 2, " "),  # no delimiters in the stream
            ("MAE", 2, "E"),    # lone trailing vowel
        ],
    )
    def test_malformed_input(self, spell_dictionary, stream, position, char):
        with pytest.raises(MalformedInputError) as excinfo:
            list(decode(spell_dictionary, stream))

        assert excinfo.value.position == position
        assert excinfo.value.char == char
        assert excinfo.value.kind == "malformed_input"

    def test_gap_syllable_is_unknown_word(self, single_syllable):
        """WU is left blank in the table: well formed, but never a word."""
        with pytest.raises(UnknownWordError) as excinfo:
            list(decode(single_syllable, "MAWU"))

        assert excinfo.value.position == 2
        assert excinfo.value.syllable == "WU"

    def test_unknown_word_inside_partial_match(self, spell_dictionary):
        """SE starts SEVA/SEVI, but SE followed by MA matches nothing."""
        with pytest.raises(UnknownWordError) as excinfo:
            list(decode(spell_dictionary, "SEMA"))

        assert excinfo.value.position == 2
        assert excinfo.value.syllable == "MA"

    def test_stream_ends_mid_word(self, spell_dictionary):
        with pytest.raises(TruncatedWordError) as excinfo:
            list(decode(spell_dictionary, "MASE"))

        assert excinfo.value.position == 2
        assert excinfo.value.partial == "SE"

    def test_trailing_consonant_inside_word(self, spell_dictionary):
        with pytest.raises(TruncatedWordError) as excinfo:
            list(decode(spell_dictionary, "TISEV"))

        assert excinfo.value.position == 2
        assert excinfo.value.partial == "SEV"


class TestLaziness:
    def test_units_before_fault_are_yielded(self, single_syllable):
        units = decode(single_syllable, "MASAWU")

        assert next(units).meaning == "Add"
        assert next(units).meaning == "Multiply"
        with pytest.raises(UnknownWordError):
            next(units)

    def test_stream_is_read_on_demand(self, spell_dictionary):
        consumed = []

        def letters():
            for ch in "MASATITU":
                consumed.append(ch)
                yield ch

        units = decode(spell_dictionary, letters())
        assert next(units).word.id == "MA"
        assert "".join(consumed) == "MA"

    def test_decodes_are_independent(self, spell_dictionary):
        decoder = StreamDecoder(spell_dictionary)
        first = decoder.decode("MASA")
        second = decoder.decode("TUNA")

        assert next(first).word.id == "MA"
        assert next(second).word.id == "TU"
        assert next(first).word.id == "SA"
        assert next(second).word.id == "NA"


class TestDeterminism:
    def test_same_input_same_units(self, spell_dictionary):
        assert list(decode(spell_dictionary, "SEVIVALA")) == list(decode(spell_dictionary, "SEVIVALA"))

    def test_same_input_same_fault(self, spell_dictionary):
        faults = []
        for _ in range(2):
            with pytest.raises(UnknownWordError) as excinfo:
                list(decode(spell_dictionary, "TUSEMA"))
            faults.append((type(excinfo.value), excinfo.value.position, excinfo.value.syllable))
        assert faults[0] == faults[1]


def test_rejects_unvalidated_dictionary(lexicon):
    dictionary = WordDictionary(lexicon)
    dictionary.register("MA")
    with pytest.raises(TypeError):
        StreamDecoder(dictionary)


def test_ambiguous_dictionary_cannot_reach_decoder(lexicon):
    """
    Scenario: MA, SA and MASA are registered; MA is a prefix of MASA.
    Expected: there is no path to a decoder that skips validate().
    """
    dictionary = WordDictionary(lexicon)
    for spelling in ("MA", "SA", "MASA"):
        dictionary.register(spelling)

    assert not hasattr(dictionary, "seal")
    with pytest.raises(TypeError):
        ValidatedDictionary(lexicon, {w.id: w for w in dictionary.words()})
    with pytest.raises(TypeError):
        list(decode(dictionary, "MASA"))
    with pytest.raises(AmbiguousSegmentationError):
        validate(dictionary)
