# incant/core/domain/models.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from incant.core.domain.alphabet import Syllable, spell

WordId = str


# --- Decoding Entities ---

@dataclass(frozen=True)
class Word:
    """
    A registered, non-empty ordered sequence of syllables with a composite meaning.
    The id is the spelling, which is unique within a dialect.
    """
    dialect_id: str
    syllables: Tuple[Syllable, ...]
    meaning: str
    primitives: Tuple[str, ...]

    @property
    def id(self) -> WordId:
        return spell(self.syllables)

    def __len__(self) -> int:
        return len(self.syllables)

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class DecodedUnit:
    """
    One stretch of the input stream matched to one Word.

    `start`/`end` are phoneme offsets, `syllable_start`/`syllable_end`
    syllable indexes; both are half-open.
    """
    word: Word
    start: int
    end: int
    syllable_start: int
    syllable_end: int

    @property
    def meaning(self) -> str:
        return self.word.meaning


# --- Engine Output ---

class InstructionKind(str, Enum):
    """Families of instructions the spell engine accepts."""
    CONSTANT = "constant"         # Pushes a number, unit vector or target
    INPUT_FIELD = "input_field"   # Reads a world field (elevation, density, ...)
    OUTPUT_FIELD = "output_field" # Writes a world field (gravity)
    BINARY_OP = "binary_op"
    UNARY_OP = "unary_op"
    STACK = "stack"               # Drop, duplicate, swap, over
    CONTROL = "control"           # Caster-controlled sliders


class Instruction(BaseModel):
    """A single record for the external spell engine."""
    model_config = ConfigDict(frozen=True)

    kind: InstructionKind
    operand: str = Field(..., description="Engine-specific operand (e.g. 'add', '5')")
    cost: float = Field(1.0, ge=0.0, description="Casting cost of this instruction")


class Program(BaseModel):
    """
    Ordered instructions ready for the engine.
    Immutable once emitted.
    """
    model_config = ConfigDict(frozen=True)

    dialect: str
    words: Tuple[WordId, ...] = ()
    instructions: Tuple[Instruction, ...] = ()

    @property
    def total_cost(self) -> float:
        return sum(i.cost for i in self.instructions)


# --- Lexicon Source Records ---

class WordEntry(BaseModel):
    """A word as authored in a lexicon source, before registration."""
    spelling: str = Field(..., min_length=1, description="Undelimited syllables, e.g. 'SEVA'")
    meaning: Optional[str] = Field(None, description="Composite meaning; defaults to the joined primitives")
    note: Optional[str] = None
