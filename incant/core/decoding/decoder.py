# incant/core/decoding/decoder.py
"""
Streaming decoder.

Turns an undelimited phoneme stream into DecodedUnits against a validated
dictionary. The dictionary is known to be ambiguity-free, so a single
left-to-right maximal-munch scan is enough: no backtracking, no
alternative parses to weigh.

Decoding is lazy. Each unit is yielded as soon as it is matched and a
fault is raised only when the scan reaches it, so a caller can stop
pulling at any point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from incant.core.domain.alphabet import Consonant, Syllable, Vowel, is_consonant, is_vowel, spell
from incant.core.domain.exceptions import MalformedInputError, TruncatedWordError, UnknownWordError
from incant.core.domain.models import DecodedUnit, Word
from incant.core.lexicon.dictionary import ValidatedDictionary


@dataclass(frozen=True)
class _Dangling:
    """A lone consonant at the very end of the stream."""
    position: int
    char: str


_Item = Union[Tuple[int, Syllable], _Dangling]


def _read_syllables(stream: Iterable[str]) -> Iterator[_Item]:
    """
    Pairs phonemes into syllables, yielding (phoneme offset, Syllable).

    Raises:
        MalformedInputError: a character outside the alphabet, or letters
            that do not alternate consonant, vowel.
    """
    chars = iter(stream)
    position = 0
    while True:
        first = next(chars, None)
        if first is None:
            return
        if not is_consonant(first):
            reason = "a vowel where a consonant must start the syllable" if is_vowel(first) else "not a phoneme"
            raise MalformedInputError(position, first, reason)

        second = next(chars, None)
        if second is None:
            yield _Dangling(position, first)
            return
        if not is_vowel(second):
            reason = "a consonant where a vowel must follow" if is_consonant(second) else "not a phoneme"
            raise MalformedInputError(position + 1, second, reason)

        yield position, Syllable(Consonant(first), Vowel(second))
        position += 2


class StreamDecoder:
    """
    Decodes phoneme streams against one validated dictionary.

    The decoder holds no per-stream state; every call to `decode` gets its
    own cursor, so one decoder can serve concurrent streams.
    """

    def __init__(self, dictionary: ValidatedDictionary):
        if not isinstance(dictionary, ValidatedDictionary):
            raise TypeError(
                f"StreamDecoder requires a ValidatedDictionary, got {type(dictionary).__name__}. "
                "Run incant.core.lexicon.validate() first."
            )
        self.dictionary = dictionary

    @property
    def dialect_id(self) -> str:
        return self.dictionary.dialect_id

    def decode(self, stream: Iterable[str]) -> Iterator[DecodedUnit]:
        """
        Lazily yields one DecodedUnit per matched word.

        Raises (when the scan reaches the fault):
            MalformedInputError: invalid character or broken alternation.
            UnknownWordError: no word starts with the syllables at the cursor.
            TruncatedWordError: the stream ends inside a word.
        """
        trie = self.dictionary.trie
        reader = _read_syllables(stream)
        pending: List[_Item] = []
        exhausted = False
        syllable_index = 0

        while True:
            node = trie.ROOT
            best: Optional[Tuple[Word, int]] = None
            failed: Optional[Tuple[int, Syllable]] = None
            dangling: Optional[_Dangling] = None
            depth = 0

            while True:
                if depth == len(pending):
                    if exhausted:
                        break
                    item = next(reader, None)
                    if item is None:
                        exhausted = True
                        break
                    pending.append(item)

                item = pending[depth]
                if isinstance(item, _Dangling):
                    dangling = item
                    break

                position, syllable = item
                child = trie.step(node, syllable)
                if child is None:
                    failed = (position, syllable)
                    break

                node = child
                depth += 1
                word = trie.word_at(node)
                if word is not None:
                    best = (word, depth)
                if not trie.has_children(node):
                    break

            if best is None:
                if not pending:
                    return
                if failed is not None:
                    position, syllable = failed
                    raise UnknownWordError(position, str(syllable))
                partial = spell(s for _, s in pending[:depth])
                if depth == 0 and dangling is not None:
                    raise TruncatedWordError(dangling.position, dangling.char)
                start = pending[0][0]
                raise TruncatedWordError(start, partial + (dangling.char if dangling else ""))

            word, length = best
            start = pending[0][0]
            end = start + 2 * length
            yield DecodedUnit(
                word=word,
                start=start,
                end=end,
                syllable_start=syllable_index,
                syllable_end=syllable_index + length,
            )
            del pending[:length]
            syllable_index += length


def decode(dictionary: ValidatedDictionary, stream: Iterable[str]) -> Iterator[DecodedUnit]:
    """Convenience wrapper: `StreamDecoder(dictionary).decode(stream)`."""
    return StreamDecoder(dictionary).decode(stream)
