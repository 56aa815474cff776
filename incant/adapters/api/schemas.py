# incant/adapters/api/schemas.py
from typing import Dict, List

from pydantic import BaseModel, Field

from incant.core.domain.models import Instruction
from incant.shared.config import settings


class DecodeRequest(BaseModel):
    stream: str = Field(
        ...,
        max_length=settings.MAX_STREAM_LENGTH,
        description="Undelimited phoneme letters, e.g. 'MASA'",
    )


class DecodedUnitOut(BaseModel):
    word: str
    meaning: str
    primitives: List[str]
    start: int
    end: int


class DecodeResponse(BaseModel):
    status: str = "success"
    dialect: str
    units: List[DecodedUnitOut]
    instructions: List[Instruction]
    total_cost: float


class DecodeFault(BaseModel):
    status: str = "error"
    kind: str
    position: int
    message: str


class WordOut(BaseModel):
    word: str
    meaning: str
    primitives: List[str]


class DialectSummary(BaseModel):
    id: str
    entries: int
    words: int


class DialectDetail(BaseModel):
    id: str
    table: Dict[str, str]
    gaps: List[str]
    words: List[WordOut]
