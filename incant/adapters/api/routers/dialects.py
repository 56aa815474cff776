# incant/adapters/api/routers/dialects.py
from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from incant.adapters.api.schemas import DialectDetail, DialectSummary, WordOut
from incant.core.domain.exceptions import DialectNotFoundError
from incant.services.dialect_registry import DialectRegistry
from incant.shared.container import Container

router = APIRouter(prefix="/dialects", tags=["Lexicon"])


@router.get("", response_model=List[DialectSummary])
@inject
async def list_dialects(
    registry: DialectRegistry = Depends(Provide[Container.dialect_registry]),
):
    """Dialects that passed validation and can be decoded against."""
    return [
        DialectSummary(id=d.id, entries=len(d.lexicon), words=len(d.dictionary))
        for d in (registry.get(i) for i in registry.ids())
    ]


@router.get("/{dialect_id}", response_model=DialectDetail)
@inject
async def get_dialect(
    dialect_id: str,
    registry: DialectRegistry = Depends(Provide[Container.dialect_registry]),
):
    """Flat syllable table, blank cells and registered words of one dialect."""
    try:
        dialect = registry.get(dialect_id)
    except DialectNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    return DialectDetail(
        id=dialect.id,
        table=dialect.lexicon.as_dict(),
        gaps=[str(s) for s in dialect.lexicon.gaps()],
        words=[
            WordOut(word=w.id, meaning=w.meaning, primitives=list(w.primitives))
            for w in dialect.dictionary
        ],
    )
