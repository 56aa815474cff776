# incant/core/ports/lexicon_repository.py
from typing import Dict, List, Protocol

from incant.core.domain.models import Instruction, WordEntry
from incant.core.lexicon.table import LexiconTable


class ILexiconRepository(Protocol):
    """
    Port for reading dialect lexicon data.
    Implementations could be FileSystemLexiconRepository or an in-memory fixture.
    """

    def list_dialects(self) -> List[str]:
        """Returns the ids of every dialect the source provides."""
        ...

    def load_table(self, dialect_id: str) -> LexiconTable:
        """
        Reads and builds the Lexicon Table of a dialect.

        Raises:
            FileNotFoundError: the dialect has no table source.
            LexiconError: the table is malformed.
        """
        ...

    def load_words(self, dialect_id: str) -> List[WordEntry]:
        """Returns the authored words of a dialect, in source order."""
        ...

    def load_instructions(self, dialect_id: str) -> Dict[str, List[Instruction]]:
        """Returns the meaning -> instructions emission table of a dialect."""
        ...

    def health_check(self) -> bool:
        """Returns True if the underlying storage is accessible."""
        ...
