# incant/core/lexicon/trie.py
# Trie keyed by syllable. Shared by the validator and the runtime decoder
# so both apply the same matching rule.

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from incant.core.domain.alphabet import Syllable
from incant.core.domain.models import Word


class SyllableTrie:
    """
    Compact trie over word syllable sequences:
      - SyllableTrie.build(words) -> SyllableTrie
      - step(node, syllable) -> child node or None
      - word_at(node) -> Word ending at that node, if any
      - matches_at(syllables, start) -> every word that starts at `start`
    Internals:
      nodes: List[{'word': Optional[Word], 'edges': Dict[Syllable, int]}]
      node 0 is the root.
    """

    ROOT = 0

    __slots__ = ("_nodes",)

    def __init__(self, nodes: List[Dict]):
        self._nodes = nodes

    @classmethod
    def build(cls, words: Iterable[Word]) -> "SyllableTrie":
        nodes: List[Dict] = [{"word": None, "edges": {}}]
        for word in words:
            cur = cls.ROOT
            for syllable in word.syllables:
                nxt = nodes[cur]["edges"].get(syllable)
                if nxt is None:
                    nodes.append({"word": None, "edges": {}})
                    nxt = len(nodes) - 1
                    nodes[cur]["edges"][syllable] = nxt
                cur = nxt
            nodes[cur]["word"] = word
        return cls(nodes)

    def step(self, node: int, syllable: Syllable) -> Optional[int]:
        return self._nodes[node]["edges"].get(syllable)

    def word_at(self, node: int) -> Optional[Word]:
        return self._nodes[node]["word"]

    def has_children(self, node: int) -> bool:
        return bool(self._nodes[node]["edges"])

    def words_along(self, syllables: Sequence[Syllable]) -> Iterator[Tuple[int, Word]]:
        """Yields (length, word) for every registered word that is a prefix of `syllables`."""
        node = self.ROOT
        for depth, syllable in enumerate(syllables, start=1):
            node = self.step(node, syllable)
            if node is None:
                return
            word = self.word_at(node)
            if word is not None:
                yield depth, word

    def matches_at(self, syllables: Sequence[Syllable], start: int) -> List[Word]:
        """Words matching `syllables` from `start`, longest first."""
        found = [word for _, word in self.words_along(syllables[start:])]
        found.reverse()
        return found

    def __len__(self) -> int:
        return len(self._nodes)
