from __future__ import annotations

from datetime import date
from types import SimpleNamespace
from uuid import uuid4

import pytest

from senda.application.errors import NotFound, ValidationError
from senda.application.use_cases.animals import (
    create_animal,
    delete_animal,
    get_carnet,
    list_animals,
    update_animal,
    update_health,
)
from senda.domain.models.animal import Animal


class StubAnimals:
    def __init__(self, animals: list[Animal] | None = None) -> None:
        self.items = {a.id: a for a in animals or []}
        self.updates: list[dict] = []
        self.deleted: list = []

    async def add(self, animal: Animal) -> Animal:
        self.items[animal.id] = animal
        return animal

    async def get(self, user_id, animal_id):
        animal = self.items.get(animal_id)
        return animal if animal and animal.user_id == user_id else None

    async def list(self, user_id, **kwargs):
        return [a for a in self.items.values() if a.user_id == user_id]

    async def update(self, user_id, animal_id, data):
        animal = await self.get(user_id, animal_id)
        if animal is None:
            return None
        self.updates.append(data)
        for key, value in data.items():
            setattr(animal, key, value)
        return animal

    async def delete(self, user_id, animal_id):
        self.deleted.append(animal_id)
        return self.items.pop(animal_id, None) is not None


class StubChildren:
    def __init__(self) -> None:
        self.deleted_for: list = []

    async def delete_for_animal(self, user_id, animal_id):
        self.deleted_for.append(animal_id)
        return 2

    async def list(self, user_id, **kwargs):
        return []


def make_uow(animals: StubAnimals):
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    async def rollback():
        return None

    return SimpleNamespace(
        animals=animals,
        vaccines=StubChildren(),
        reproductions=StubChildren(),
        commit=commit,
        rollback=rollback,
        commits=commits,
    )


def make_animal(user_id, **overrides) -> Animal:
    values = {"tag": "SND-001", "name": "Lucera", "gender": "female", "breed": "Angus", "status": "healthy"}
    values.update(overrides)
    return Animal.create(user_id=user_id, **values)


@pytest.mark.asyncio
async def test_create_animal_stamps_owner_and_commits():
    user_id = uuid4()
    uow = make_uow(StubAnimals())
    created = await create_animal.execute(
        uow,
        user_id,
        create_animal.CreateAnimalInput(
            tag=" SND-001 ", name="Lucera", gender="female", breed="Angus", status="healthy"
        ),
    )
    assert created.user_id == user_id
    assert created.tag == "SND-001"
    assert uow.commits == [True]


@pytest.mark.asyncio
async def test_list_animals_rejects_unknown_filter_column():
    uow = make_uow(StubAnimals())
    with pytest.raises(ValidationError):
        await list_animals.execute(uow, uuid4(), filter_column="weight", filter_value="400")


@pytest.mark.asyncio
async def test_list_animals_applies_filter_and_reports_total():
    user_id = uuid4()
    repo = StubAnimals(
        [
            make_animal(user_id, tag="SND-001", gender="female"),
            make_animal(user_id, tag="SND-002", gender="male"),
        ]
    )
    result = await list_animals.execute(
        make_uow(repo), user_id, filter_column="gender", filter_value="macho"
    )
    assert [a.tag for a in result.items] == ["SND-002"]
    assert result.total == 2


@pytest.mark.asyncio
async def test_update_animal_only_sends_provided_fields():
    user_id = uuid4()
    animal = make_animal(user_id)
    repo = StubAnimals([animal])
    uow = make_uow(repo)
    updated = await update_animal.execute(
        uow, user_id, animal.id, update_animal.UpdateAnimalInput(name="Lucerita", farm="Sur")
    )
    assert updated.name == "Lucerita"
    assert repo.updates == [{"name": "Lucerita", "farm": "Sur"}]


@pytest.mark.asyncio
async def test_update_animal_missing_raises_not_found():
    with pytest.raises(NotFound):
        await update_animal.execute(
            make_uow(StubAnimals()), uuid4(), uuid4(), update_animal.UpdateAnimalInput(name="X1")
        )


@pytest.mark.asyncio
async def test_update_health_changes_status_only():
    user_id = uuid4()
    animal = make_animal(user_id)
    repo = StubAnimals([animal])
    updated = await update_health.execute(
        make_uow(repo),
        user_id,
        animal.id,
        update_health.HealthUpdateInput(status="sick", professional="Dra. Paz"),
    )
    assert updated.status == "sick"
    assert repo.updates == [{"status": "sick"}]


@pytest.mark.asyncio
async def test_delete_animal_removes_children_first():
    user_id = uuid4()
    animal = make_animal(user_id)
    uow = make_uow(StubAnimals([animal]))
    await delete_animal.execute(uow, user_id, animal.id)
    assert uow.vaccines.deleted_for == [animal.id]
    assert uow.reproductions.deleted_for == [animal.id]
    assert uow.animals.deleted == [animal.id]
    assert uow.commits == [True]


@pytest.mark.asyncio
async def test_delete_animal_of_other_user_is_not_found():
    animal = make_animal(uuid4())
    uow = make_uow(StubAnimals([animal]))
    with pytest.raises(NotFound):
        await delete_animal.execute(uow, uuid4(), animal.id)
    assert uow.animals.deleted == []


@pytest.mark.asyncio
async def test_get_carnet_builds_age_label():
    user_id = uuid4()
    animal = make_animal(user_id, birth_date=date(2020, 10, 5))
    result = await get_carnet.execute(
        make_uow(StubAnimals([animal])), user_id, animal.id, date(2024, 10, 5)
    )
    assert result.age_label == "4 años"
    assert result.vaccines == []
