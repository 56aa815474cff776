# incant/core/use_cases/decode_spell.py
from typing import Iterable, Iterator, List, Protocol

import structlog

from incant.core.dialect import Dialect
from incant.core.domain.exceptions import DecodeError
from incant.core.domain.models import DecodedUnit, Program
from incant.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class DialectSource(Protocol):
    def get(self, dialect_id: str) -> Dialect:
        ...


class DecodeSpell:
    """
    Use Case: Decodes a phoneme stream into a Program for the spell engine.

    The dialect must always be named; resolving it is delegated to the
    registry, which raises DialectNotFoundError for unknown ids.
    """

    def __init__(self, registry: DialectSource):
        self.registry = registry

    def iter_units(self, dialect_id: str, stream: Iterable[str]) -> Iterator[DecodedUnit]:
        """Lazy decode. Stopping iteration early is always safe."""
        return self.registry.get(dialect_id).decode(stream)

    def decode_units(self, dialect_id: str, stream: str) -> List[DecodedUnit]:
        """Decodes the whole stream, logging and re-raising any fault."""
        with tracer.start_as_current_span("use_case.decode_spell") as span:
            span.set_attribute("incant.dialect", dialect_id)
            span.set_attribute("incant.stream_length", len(stream))

            dialect = self.registry.get(dialect_id)
            log = logger.bind(dialect=dialect_id, length=len(stream))

            try:
                units = list(dialect.decode(stream))
            except DecodeError as e:
                span.set_attribute("incant.fault", e.kind)
                log.warning("decode_fault", kind=e.kind, position=e.position, error=e.message)
                raise

            span.set_attribute("incant.words", len(units))
            log.info("decode_success", words=len(units))
            return units

    def emit(self, dialect_id: str, units: Iterable[DecodedUnit]) -> Program:
        return self.registry.get(dialect_id).emitter.emit(units)

    def execute(self, dialect_id: str, stream: str) -> Program:
        """
        Executes the decode-then-emit pipeline.

        Returns:
            Program: instructions for the external engine.
        """
        return self.emit(dialect_id, self.decode_units(dialect_id, stream))
