# incant/services/dialect_registry.py
from threading import Lock
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional

import structlog

from incant.core.dialect import Dialect
from incant.core.domain.exceptions import DialectNotFoundError
from incant.core.ports.lexicon_repository import ILexiconRepository
from incant.core.use_cases.build_dialect import BuildDialect

logger = structlog.get_logger()


class DialectRegistry:
    """
    Process-wide store of built dialects.

    Dialects are built once at startup (or reload) and then only read.
    A dialect is swapped in only after it has been fully built and
    validated, so readers never see a half-built dialect. There is no
    default dialect: every lookup names one explicitly.
    """

    def __init__(self, repo: ILexiconRepository):
        self.repo = repo
        self._dialects: Dict[str, Dialect] = {}
        self._write_lock = Lock()

    def load(self, dialect_id: str) -> Dialect:
        """Builds (or rebuilds) one dialect. Build-time errors propagate."""
        dialect = BuildDialect(self.repo).execute(dialect_id)
        with self._write_lock:
            dialects = dict(self._dialects)
            dialects[dialect_id] = dialect
            self._dialects = dialects
        return dialect

    def load_all(self, dialect_ids: Optional[Iterable[str]] = None) -> List[str]:
        """
        Loads the given dialects, or every dialect the repository lists.
        Stops at the first dialect that fails to build.
        """
        ids = list(dialect_ids) if dialect_ids else self.repo.list_dialects()
        for dialect_id in ids:
            self.load(dialect_id)
        logger.info("dialects_ready", dialects=ids)
        return ids

    def get(self, dialect_id: str) -> Dialect:
        try:
            return self._dialects[dialect_id]
        except KeyError:
            raise DialectNotFoundError(dialect_id) from None

    def ids(self) -> List[str]:
        return sorted(self._dialects)

    @property
    def dialects(self):
        return MappingProxyType(self._dialects)

    @property
    def is_ready(self) -> bool:
        return bool(self._dialects)

    def __contains__(self, dialect_id: object) -> bool:
        return dialect_id in self._dialects

    def __len__(self) -> int:
        return len(self._dialects)
