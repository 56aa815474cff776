# incant/core/lexicon/validator.py
"""
Build-time ambiguity gate for word dictionaries.

A dictionary is accepted only if every concatenation of its words splits
back into words in exactly one way. Two checks run over a syllable trie:

1. Prefix check: no word may be a proper prefix of another. A prefix-free
   dictionary is uniquely decodable, and it is what lets the runtime
   decoder commit to a match without backtracking.
2. Pair check: every ordered pair A, B is concatenated and re-parsed with
   the runtime matching rule, this time exploring every word boundary.
   The only complete parse allowed is exactly (A, B).

Both failures raise `AmbiguousSegmentationError` carrying the offending
pair and the alternate split so a lexicon author can fix the entry.
"""

from __future__ import annotations

from itertools import product
from typing import Iterator, List, Sequence, Tuple

import structlog

from incant.core.domain.alphabet import Syllable, spell
from incant.core.domain.exceptions import AmbiguousSegmentationError
from incant.core.domain.models import Word
from incant.core.lexicon.dictionary import ValidatedDictionary, WordDictionary
from incant.core.lexicon.trie import SyllableTrie

logger = structlog.get_logger()


def segmentations(trie: SyllableTrie, syllables: Sequence[Syllable], start: int = 0) -> Iterator[Tuple[Word, ...]]:
    """
    Yields every complete partition of `syllables[start:]` into words.
    Longest matches are tried first, so the first result is the maximal-munch parse.
    """
    if start == len(syllables):
        yield ()
        return
    for word in trie.matches_at(syllables, start):
        for rest in segmentations(trie, syllables, start + len(word)):
            yield (word,) + rest


def _check_prefixes(dialect_id: str, words: List[Word], trie: SyllableTrie) -> None:
    for word in words:
        for depth, shorter in trie.words_along(word.syllables):
            if depth < len(word):
                raise AmbiguousSegmentationError(
                    dialect_id,
                    words=(shorter.id, word.id),
                    alt_split=(shorter.id, spell(word.syllables[depth:])),
                )


def _check_pairs(dialect_id: str, words: List[Word], trie: SyllableTrie) -> int:
    checked = 0
    for first, second in product(words, repeat=2):
        expected = (first.id, second.id)
        stream = first.syllables + second.syllables
        for parse in segmentations(trie, stream):
            ids = tuple(w.id for w in parse)
            if ids != expected:
                raise AmbiguousSegmentationError(dialect_id, words=expected, alt_split=ids)
        checked += 1
    return checked


def validate(dictionary: WordDictionary) -> ValidatedDictionary:
    """
    Proves the dictionary uniquely decodable, or raises.

    On success the builder is sealed and its immutable form returned.

    Raises:
        AmbiguousSegmentationError: with the offending pair and alternate split.
    """
    dialect_id = dictionary.dialect_id
    words = dictionary.words()
    trie = SyllableTrie.build(words)
    log = logger.bind(dialect=dialect_id, words=len(words))

    try:
        _check_prefixes(dialect_id, words, trie)
        pairs = _check_pairs(dialect_id, words, trie)
    except AmbiguousSegmentationError as e:
        log.warning("validation_failed", pair=list(e.words), alt_split=list(e.alt_split))
        raise

    validated = dictionary._seal()
    log.info("dictionary_validated", pairs_checked=pairs, trie_nodes=len(validated.trie))
    return validated
