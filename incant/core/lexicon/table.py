# incant/core/lexicon/table.py
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import structlog

from incant.core.domain.alphabet import Syllable, SyllableLike, all_syllables
from incant.core.domain.exceptions import DuplicateSyllableError, MalformedSyllableError

logger = structlog.get_logger()

Entries = Union[Mapping[SyllableLike, Optional[str]], Iterable[Tuple[SyllableLike, Optional[str]]]]


class LexiconTable:
    """
    Immutable mapping from populated Syllable to Primitive for one dialect.

    Blank cells are gaps: they are simply absent. Table layout (row and
    column order) is presentation only, so two tables with the same
    associations compare equal.
    """

    __slots__ = ("_dialect_id", "_entries")

    def __init__(self, dialect_id: str, entries: Mapping[Syllable, str]):
        self._dialect_id = dialect_id
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def build(cls, dialect_id: str, entries: Entries) -> "LexiconTable":
        """
        Validates raw entries and freezes them into a table.

        Raises:
            MalformedSyllableError: a key is not consonant + vowel.
            DuplicateSyllableError: a syllable appears twice in `entries`.
        """
        pairs = entries.items() if isinstance(entries, Mapping) else entries

        table: Dict[Syllable, str] = {}
        seen: Dict[Syllable, str] = {}
        gaps = 0
        for raw_syllable, primitive in pairs:
            try:
                syllable = Syllable.parse(raw_syllable)
            except MalformedSyllableError as e:
                raise MalformedSyllableError(e.text, dialect_id) from e

            label = primitive.strip() if isinstance(primitive, str) else None
            if syllable in seen:
                raise DuplicateSyllableError(dialect_id, str(syllable), seen[syllable], label or "")
            seen[syllable] = label or ""
            if not label:
                gaps += 1
                continue
            table[syllable] = label

        logger.debug("lexicon_table_built", dialect=dialect_id, entries=len(table), blank_cells=gaps)
        return cls(dialect_id, table)

    @property
    def dialect_id(self) -> str:
        return self._dialect_id

    def primitive(self, syllable: SyllableLike) -> str:
        """Returns the primitive for a syllable. Raises KeyError on a gap."""
        return self._entries[Syllable.parse(syllable)]

    def get(self, syllable: SyllableLike, default: Optional[str] = None) -> Optional[str]:
        try:
            return self._entries.get(Syllable.parse(syllable), default)
        except MalformedSyllableError:
            return default

    def syllables(self) -> List[Syllable]:
        return sorted(self._entries)

    def gaps(self) -> List[Syllable]:
        """Cells of the full consonant x vowel grid with no primitive."""
        return [s for s in all_syllables() if s not in self._entries]

    def as_dict(self) -> Dict[str, str]:
        return {str(s): self._entries[s] for s in sorted(self._entries)}

    def __contains__(self, syllable: object) -> bool:
        if isinstance(syllable, (str, Syllable)):
            return self.get(syllable) is not None
        return False

    def __iter__(self) -> Iterator[Syllable]:
        return iter(self.syllables())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexiconTable):
            return NotImplemented
        return self._dialect_id == other._dialect_id and dict(self._entries) == dict(other._entries)

    def __hash__(self) -> int:
        return hash((self._dialect_id, frozenset(self._entries.items())))

    def __repr__(self) -> str:
        return f"LexiconTable(dialect={self._dialect_id!r}, entries={len(self._entries)})"
