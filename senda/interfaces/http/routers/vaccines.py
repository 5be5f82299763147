from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from senda.application.use_cases.vaccines import create_vaccine, list_vaccines
from senda.infrastructure.auth.context import AuthContext
from senda.interfaces.http.deps import get_auth_context, get_uow
from senda.interfaces.http.schemas.vaccines import VaccineCreate, VaccineResponse

router = APIRouter(prefix="/vaccines", tags=["vaccines"])


@router.get("", response_model=list[VaccineResponse])
async def list_vaccines_endpoint(
    animal_id: UUID | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[VaccineResponse]:
    items = await list_vaccines.execute(uow, context.user_id, animal_id=animal_id)
    return [VaccineResponse.model_validate(item) for item in items]


@router.post("", response_model=VaccineResponse, status_code=status.HTTP_201_CREATED)
async def create_vaccine_endpoint(
    payload: VaccineCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> VaccineResponse:
    result = await create_vaccine.execute(
        uow,
        context.user_id,
        create_vaccine.CreateVaccineInput(
            animal_id=payload.animal_id,
            vaccine_type=payload.vaccine_type,
            date=payload.date,
            next_date=payload.next_date,
            notes=payload.notes,
        ),
    )
    return VaccineResponse.model_validate(result)
