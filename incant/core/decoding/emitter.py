# incant/core/decoding/emitter.py
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

import structlog

from incant.core.domain.exceptions import EmissionTableError
from incant.core.domain.models import DecodedUnit, Instruction, Program
from incant.core.lexicon.dictionary import ValidatedDictionary

logger = structlog.get_logger()

InstructionSpec = Union[Instruction, Mapping]


def _coerce(specs: Union[InstructionSpec, Sequence[InstructionSpec]]) -> tuple:
    if isinstance(specs, (Instruction, Mapping)):
        specs = [specs]
    return tuple(s if isinstance(s, Instruction) else Instruction.model_validate(s) for s in specs)


class ProgramEmitter:
    """
    Stateless translation from decoded words to engine instructions.

    Every meaning maps to one or more Instructions. Coverage is checked up
    front against the dictionary, so a missing mapping at emit time is a
    programming error rather than a decode fault.
    """

    def __init__(
        self,
        dialect_id: str,
        table: Mapping[str, Union[InstructionSpec, Sequence[InstructionSpec]]],
        dictionary: Optional[ValidatedDictionary] = None,
    ):
        self.dialect_id = dialect_id
        self._table: Mapping[str, tuple] = MappingProxyType(
            {meaning: _coerce(specs) for meaning, specs in table.items()}
        )

        empty = [m for m, instructions in self._table.items() if not instructions]
        if empty:
            raise EmissionTableError(dialect_id, empty)

        if dictionary is not None:
            missing = [m for m in dictionary.meanings() if m not in self._table]
            if missing:
                raise EmissionTableError(dialect_id, missing)
            unused = sorted(set(self._table) - set(dictionary.meanings()))
            if unused:
                logger.debug("emission_table_unused_meanings", dialect=dialect_id, meanings=unused)

    def instructions_for(self, meaning: str) -> tuple:
        try:
            return self._table[meaning]
        except KeyError:
            raise EmissionTableError(self.dialect_id, [meaning]) from None

    def emit(self, units: Iterable[DecodedUnit]) -> Program:
        """Maps units to a Program. Consumes a lazy decode to completion."""
        words: List[str] = []
        instructions: List[Instruction] = []
        for unit in units:
            words.append(unit.word.id)
            instructions.extend(self.instructions_for(unit.meaning))
        return Program(dialect=self.dialect_id, words=tuple(words), instructions=tuple(instructions))

    def as_dict(self) -> Dict[str, List[dict]]:
        return {m: [i.model_dump(mode="json") for i in ins] for m, ins in self._table.items()}
