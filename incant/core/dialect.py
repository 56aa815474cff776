# incant/core/dialect.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from incant.core.decoding.decoder import StreamDecoder
from incant.core.decoding.emitter import ProgramEmitter
from incant.core.domain.models import DecodedUnit, Program
from incant.core.lexicon.dictionary import ValidatedDictionary
from incant.core.lexicon.table import LexiconTable


@dataclass(frozen=True)
class Dialect:
    """
    A fully built, read-only dialect: its table, its validated dictionary
    and its emission table. Safe to share between concurrent decodes.
    """
    id: str
    lexicon: LexiconTable
    dictionary: ValidatedDictionary
    emitter: ProgramEmitter

    @property
    def decoder(self) -> StreamDecoder:
        return StreamDecoder(self.dictionary)

    def decode(self, stream: Iterable[str]) -> Iterator[DecodedUnit]:
        return self.decoder.decode(stream)

    def compile(self, stream: Iterable[str]) -> Program:
        return self.emitter.emit(self.decode(stream))
