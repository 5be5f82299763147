from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from senda.application.use_cases.animals import (
    create_animal,
    delete_animal,
    get_animal,
    get_carnet,
    list_animals,
    update_animal,
    update_health,
)
from senda.domain.models.animal import Animal
from senda.domain.services.filters import FilterColumn
from senda.domain.value_objects.display import (
    EAR_TAG_DISPLAY,
    GENDER_DISPLAY,
    STATUS_DISPLAY,
    lookup,
)
from senda.infrastructure.auth.context import AuthContext
from senda.interfaces.http.deps import get_auth_context, get_today, get_uow
from senda.interfaces.http.schemas.animals import (
    AnimalCreate,
    AnimalResponse,
    AnimalsListResponse,
    AnimalUpdate,
    CarnetResponse,
    CarnetVaccine,
    HealthUpdate,
)
from senda.utils.datetime_tz import format_long_date

router = APIRouter(prefix="/animals", tags=["animals"])

EMPTY_TABLE_MESSAGE = "No se encontraron animales"
NO_VACCINES_MESSAGE = "No hay vacunas registradas"


def to_response(animal: Animal) -> AnimalResponse:
    data = AnimalResponse.model_validate(animal).model_dump()
    status_display = lookup(STATUS_DISPLAY, animal.status)
    data["status_label"] = status_display.label
    data["status_color"] = status_display.color
    if animal.ear_tag:
        ear_tag_display = lookup(EAR_TAG_DISPLAY, animal.ear_tag)
        data["ear_tag_label"] = ear_tag_display.label
        data["ear_tag_color"] = ear_tag_display.color
    data["gender_label"] = lookup(GENDER_DISPLAY, animal.gender).label
    return AnimalResponse.model_validate(data)


@router.get("", response_model=AnimalsListResponse)
async def list_animals_endpoint(
    q: str | None = Query(None, description="Text search across name, tag and breed"),
    filter_column: FilterColumn | None = Query(None),
    filter_value: str | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalsListResponse:
    result = await list_animals.execute(
        uow,
        context.user_id,
        search=q,
        filter_column=filter_column,
        filter_value=filter_value,
    )
    items = [to_response(animal) for animal in result.items]
    return AnimalsListResponse(
        items=items,
        total=result.total,
        empty_message=None if items else EMPTY_TABLE_MESSAGE,
    )


@router.post("", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal_endpoint(
    payload: AnimalCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    result = await create_animal.execute(
        uow,
        context.user_id,
        create_animal.CreateAnimalInput(
            tag=payload.tag,
            name=payload.name,
            gender=payload.gender.value,
            breed=payload.breed,
            status=payload.status.value,
            birth_date=payload.birth_date,
            entry_date=payload.entry_date,
            ear_tag=payload.ear_tag.value,
            owner=payload.owner,
            farm=payload.farm,
            paddock=payload.paddock,
            purpose=payload.purpose.value,
            weight=payload.weight,
            category=payload.category.value,
        ),
    )
    return to_response(result)


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal_endpoint(
    animal_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    return to_response(await get_animal.execute(uow, context.user_id, animal_id))


@router.get("/{animal_id}/carnet", response_model=CarnetResponse)
async def get_carnet_endpoint(
    animal_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: DtDate = Depends(get_today),
) -> CarnetResponse:
    result = await get_carnet.execute(uow, context.user_id, animal_id, today)
    vaccines = [
        CarnetVaccine(
            id=v.id,
            vaccine_type=v.vaccine_type,
            date=v.date,
            next_date=v.next_date,
            notes=v.notes,
            date_label=format_long_date(v.date),
            next_date_label=format_long_date(v.next_date) if v.next_date else None,
        )
        for v in result.vaccines
    ]
    return CarnetResponse(
        animal=to_response(result.animal),
        age_label=result.age_label,
        birth_date_label=format_long_date(result.animal.birth_date),
        entry_date_label=format_long_date(result.animal.entry_date),
        vaccines=vaccines,
        empty_message=None if vaccines else NO_VACCINES_MESSAGE,
    )


@router.patch("/{animal_id}", response_model=AnimalResponse)
async def update_animal_endpoint(
    animal_id: UUID,
    payload: AnimalUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    fields = payload.model_dump(exclude_unset=True, mode="python")
    # Enum members are stored by value
    values = {k: getattr(v, "value", v) for k, v in fields.items()}
    result = await update_animal.execute(
        uow,
        context.user_id,
        animal_id,
        update_animal.UpdateAnimalInput(**values),
    )
    return to_response(result)


@router.put("/{animal_id}/health", response_model=AnimalResponse)
async def update_health_endpoint(
    animal_id: UUID,
    payload: HealthUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    result = await update_health.execute(
        uow,
        context.user_id,
        animal_id,
        update_health.HealthUpdateInput(
            status=payload.status.value,
            deworming_date=payload.deworming_date,
            professional=payload.professional,
            medications=payload.medications,
            last_vet_check=payload.last_vet_check,
            checkup_notes=payload.checkup_notes,
            notes=payload.notes,
        ),
    )
    return to_response(result)


@router.delete("/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animal_endpoint(
    animal_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_animal.execute(uow, context.user_id, animal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
