# tests/core/test_ambiguity_validator.py
import pytest

from incant.core.domain.alphabet import split_syllables
from incant.core.domain.exceptions import AmbiguousSegmentationError
from incant.core.lexicon.dictionary import ValidatedDictionary, WordDictionary, single_syllable_dictionary
from incant.core.lexicon.table import LexiconTable
from incant.core.lexicon.trie import SyllableTrie
from incant.core.lexicon.validator import segmentations, validate


def _dictionary(lexicon, *spellings):
    dictionary = WordDictionary(lexicon)
    for spelling in spellings:
        dictionary.register(spelling)
    return dictionary


class TestSoundness:
    def test_proper_prefix_is_rejected(self, lexicon):
        """
        Scenario: MA is a word and so is MASA.
        Expected: the stream MASA could be one word or two, so validation fails.
        """
        with pytest.raises(AmbiguousSegmentationError) as excinfo:
            validate(_dictionary(lexicon, "MA", "SA", "MASA"))

        assert excinfo.value.words == ("MA", "MASA")
        assert excinfo.value.alt_split == ("MA", "SA")

    def test_prefix_rejected_even_when_remainder_is_no_word(self, lexicon):
        with pytest.raises(AmbiguousSegmentationError) as excinfo:
            validate(_dictionary(lexicon, "ME", "MESI"))

        assert excinfo.value.words == ("ME", "MESI")
        assert excinfo.value.alt_split == ("ME", "SI")

    def test_failed_validation_leaves_builder_open(self, lexicon):
        dictionary = _dictionary(lexicon, "MA", "MASA")
        with pytest.raises(AmbiguousSegmentationError):
            validate(dictionary)
        assert not dictionary.sealed

    def test_error_names_dialect_and_split(self, lexicon):
        with pytest.raises(AmbiguousSegmentationError) as excinfo:
            validate(_dictionary(lexicon, "TI", "TITU"))
        assert excinfo.value.dialect_id == "v1"
        assert "TI + TITU" in excinfo.value.message


class TestCompleteness:
    def test_single_syllable_words_always_validate(self, lexicon):
        validated = validate(single_syllable_dictionary(lexicon))
        assert isinstance(validated, ValidatedDictionary)
        assert len(validated) == len(lexicon)

    def test_full_grid_of_single_syllables_validates(self):
        table = LexiconTable.build("grid", {c + v: c + v for c in "KLMNPRSTVW" for v in "AEIOU"})
        assert len(validate(single_syllable_dictionary(table))) == 50

    def test_mixed_lengths_without_prefixes_validate(self, lexicon):
        validated = validate(_dictionary(lexicon, "MA", "SEVA", "SEVI", "VALA", "VILA", "TU"))
        assert set(validated.words) == {"MA", "SEVA", "SEVI", "VALA", "VILA", "TU"}

    def test_empty_dictionary_validates(self, lexicon):
        assert len(validate(WordDictionary(lexicon))) == 0


class TestSegmentations:
    def test_lists_every_parse_longest_first(self, lexicon):
        """The re-parse used by the pair check sees both readings of MASA."""
        words = _dictionary(lexicon, "MA", "SA", "MASA").words()
        trie = SyllableTrie.build(words)

        parses = [tuple(w.id for w in p) for p in segmentations(trie, split_syllables("MASA"))]
        assert parses == [("MASA",), ("MA", "SA")]

    def test_no_parse_for_unknown_stream(self, lexicon):
        trie = SyllableTrie.build(_dictionary(lexicon, "MA").words())
        assert list(segmentations(trie, split_syllables("MASA"))) == []
