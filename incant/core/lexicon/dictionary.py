# incant/core/lexicon/dictionary.py
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Union

import structlog

from incant.core.domain.alphabet import Syllable, SyllableLike, spell, split_syllables
from incant.core.domain.exceptions import (
    DictionarySealedError,
    DuplicateWordError,
    EmptySequenceError,
    MalformedSyllableError,
    UnknownSyllableError,
)
from incant.core.domain.models import Word, WordId
from incant.core.lexicon.table import LexiconTable
from incant.core.lexicon.trie import SyllableTrie

logger = structlog.get_logger()

SyllableSequence = Union[str, Iterable[SyllableLike]]

_SEAL_TOKEN = object()


def _to_syllables(sequence: SyllableSequence) -> List[Syllable]:
    if isinstance(sequence, str):
        return split_syllables(sequence)
    return [Syllable.parse(s) for s in sequence]


class WordDictionary:
    """
    Construction-phase dictionary of Words for one Lexicon Table.

    Words are registered one by one; the dictionary is handed to
    `incant.core.lexicon.validator.validate`, which seals it and returns a
    `ValidatedDictionary` on success.
    """

    def __init__(self, lexicon: LexiconTable):
        self.lexicon = lexicon
        self._words: Dict[WordId, Word] = {}
        self._sealed = False

    @property
    def dialect_id(self) -> str:
        return self.lexicon.dialect_id

    @property
    def sealed(self) -> bool:
        return self._sealed

    def register(self, syllables: SyllableSequence, meaning: Optional[str] = None) -> WordId:
        """
        Adds a word and returns its id (its spelling).

        Raises:
            DictionarySealedError: the dictionary already passed validation.
            EmptySequenceError: no syllables.
            MalformedSyllableError: a syllable is not consonant + vowel.
            UnknownSyllableError: a syllable has no entry in the lexicon.
            DuplicateWordError: the exact sequence is already registered.
        """
        if self._sealed:
            raise DictionarySealedError(self.dialect_id)

        try:
            parsed = _to_syllables(syllables)
        except MalformedSyllableError as e:
            raise MalformedSyllableError(e.text, self.dialect_id) from e
        if not parsed:
            raise EmptySequenceError(self.dialect_id)

        word_id = spell(parsed)
        primitives = []
        for syllable in parsed:
            primitive = self.lexicon.get(syllable)
            if primitive is None:
                raise UnknownSyllableError(self.dialect_id, str(syllable), word_id)
            primitives.append(primitive)

        if word_id in self._words:
            raise DuplicateWordError(self.dialect_id, word_id)

        if not meaning:
            meaning = " ".join(primitives)

        self._words[word_id] = Word(
            dialect_id=self.dialect_id,
            syllables=tuple(parsed),
            meaning=meaning,
            primitives=tuple(primitives),
        )
        return word_id

    def words(self) -> List[Word]:
        return list(self._words.values())

    def _seal(self) -> "ValidatedDictionary":
        # Called by validate() only, once the ambiguity checks have passed.
        self._sealed = True
        return ValidatedDictionary(self.lexicon, self._words, _token=_SEAL_TOKEN)

    def __contains__(self, word_id: object) -> bool:
        return word_id in self._words

    def __len__(self) -> int:
        return len(self._words)


class ValidatedDictionary:
    """
    Immutable, ambiguity-free dictionary. The only form the decoder accepts.
    Shareable across concurrent decodes without locking.

    Not constructible directly: obtain one from
    `incant.core.lexicon.validator.validate`.
    """

    __slots__ = ("_lexicon", "_words", "_trie")

    def __init__(self, lexicon: LexiconTable, words: Mapping[WordId, Word], *, _token: object = None):
        if _token is not _SEAL_TOKEN:
            raise TypeError("ValidatedDictionary is only produced by validate().")
        self._lexicon = lexicon
        self._words = MappingProxyType(dict(words))
        self._trie = SyllableTrie.build(self._words.values())

    @property
    def dialect_id(self) -> str:
        return self._lexicon.dialect_id

    @property
    def lexicon(self) -> LexiconTable:
        return self._lexicon

    @property
    def trie(self) -> SyllableTrie:
        return self._trie

    @property
    def words(self) -> Mapping[WordId, Word]:
        return self._words

    def meanings(self) -> List[str]:
        return sorted({w.meaning for w in self._words.values()})

    def __getitem__(self, word_id: WordId) -> Word:
        return self._words[word_id]

    def __contains__(self, word_id: object) -> bool:
        return word_id in self._words

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words.values())

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"ValidatedDictionary(dialect={self.dialect_id!r}, words={len(self._words)})"


def single_syllable_dictionary(lexicon: LexiconTable) -> WordDictionary:
    """Registers every populated syllable as its own word, meaning = primitive."""
    dictionary = WordDictionary(lexicon)
    for syllable in lexicon.syllables():
        dictionary.register([syllable])
    logger.debug("single_syllable_dictionary_built", dialect=lexicon.dialect_id, words=len(dictionary))
    return dictionary
