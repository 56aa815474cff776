# incant/adapters/api/routers/decoding.py
import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from incant.adapters.api.schemas import DecodedUnitOut, DecodeFault, DecodeRequest, DecodeResponse
from incant.core.domain.exceptions import DecodeError, DialectNotFoundError
from incant.core.use_cases.decode_spell import DecodeSpell
from incant.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(prefix="/decode", tags=["Decoding"])


@router.post(
    "/{dialect_id}",
    response_model=DecodeResponse,
    responses={422: {"model": DecodeFault}, 404: {"description": "Dialect not loaded"}},
)
@inject
async def decode_stream(
    dialect_id: str,
    payload: DecodeRequest = Body(...),
    use_case: DecodeSpell = Depends(Provide[Container.decode_spell_use_case]),
):
    """
    Decodes an undelimited phoneme stream against one dialect.

    - **404**: the dialect is not loaded (there is no default dialect).
    - **422**: the stream is malformed, contains an unknown word or ends mid-word;
      `position` is the phoneme offset where decoding stopped.
    """
    log = logger.bind(dialect=dialect_id, endpoint="decode")

    try:
        units = use_case.decode_units(dialect_id, payload.stream)
        program = use_case.emit(dialect_id, units)
    except DialectNotFoundError as e:
        log.warning("dialect_missing", error=e.message)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except DecodeError as e:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=DecodeFault(kind=e.kind, position=e.position, message=e.message).model_dump(),
        )

    return DecodeResponse(
        dialect=program.dialect,
        units=[
            DecodedUnitOut(
                word=u.word.id,
                meaning=u.meaning,
                primitives=list(u.word.primitives),
                start=u.start,
                end=u.end,
            )
            for u in units
        ],
        instructions=list(program.instructions),
        total_cost=program.total_cost,
    )
