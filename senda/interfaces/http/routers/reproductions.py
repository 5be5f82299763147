from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from senda.application.use_cases.reproduction import list_reproductions, record_reproduction
from senda.infrastructure.auth.context import AuthContext
from senda.interfaces.http.deps import get_auth_context, get_uow
from senda.interfaces.http.schemas.reproductions import ReproductionCreate, ReproductionResponse

router = APIRouter(prefix="/reproductions", tags=["reproduction"])


@router.get("", response_model=list[ReproductionResponse])
async def list_reproductions_endpoint(
    mother_id: UUID | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[ReproductionResponse]:
    items = await list_reproductions.execute(uow, context.user_id, mother_id=mother_id)
    return [ReproductionResponse.model_validate(item) for item in items]


@router.post("", response_model=ReproductionResponse, status_code=status.HTTP_201_CREATED)
async def record_reproduction_endpoint(
    payload: ReproductionCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ReproductionResponse:
    result = await record_reproduction.execute(
        uow,
        context.user_id,
        record_reproduction.RecordReproductionInput(
            mother_id=payload.mother_id,
            father_id=payload.father_id,
            service_method=payload.service_method.value,
            service_date=payload.service_date,
            notes=payload.notes,
        ),
    )
    return ReproductionResponse.model_validate(result)
