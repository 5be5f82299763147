"""Form controllers backing the create/edit dialogs.

Values are validated locally with the same pydantic schemas the API enforces.
Field errors stay inline and no request is sent; a valid form issues exactly
one API call, then resets and fires `on_success`, or pushes a toast carrying
the server message.
"""

from __future__ import annotations

import inspect
import logging
from datetime import date
from typing import Any, Callable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from senda.application.errors import AppError
from senda.domain.models.reproduction import expected_birth_date
from senda.interfaces.client.api_client import SendaClient
from senda.interfaces.client.toasts import ToastQueue
from senda.interfaces.http.schemas.animals import AnimalCreate, AnimalUpdate, HealthUpdate
from senda.interfaces.http.schemas.reproductions import ReproductionCreate
from senda.interfaces.http.schemas.vaccines import VaccineCreate
from senda.utils.datetime_tz import local_today

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[dict[str, Any]], Any]


class FormController:
    schema: type[BaseModel]
    success_title = "Guardado"
    error_title = "Error al guardar"

    def __init__(
        self,
        client: SendaClient,
        *,
        toasts: ToastQueue | None = None,
        on_success: SuccessCallback | None = None,
    ) -> None:
        self.client = client
        self.toasts = toasts or ToastQueue()
        self.on_success = on_success
        self.values: dict[str, Any] = self.defaults()
        self.errors: dict[str, str] = {}
        self.submitting = False

    def defaults(self) -> dict[str, Any]:
        return {}

    def set(self, field_name: str, value: Any) -> None:
        self.values[field_name] = value
        self.errors.pop(field_name, None)

    def reset(self) -> None:
        self.values = self.defaults()
        self.errors = {}

    def payload_values(self) -> dict[str, Any]:
        # Empty inputs mean "not provided"
        return {k: v for k, v in self.values.items() if v not in ("", None)}

    def validate(self) -> BaseModel | None:
        try:
            model = self.schema.model_validate(self.payload_values())
        except PydanticValidationError as exc:
            self.errors = {
                ".".join(str(part) for part in err["loc"]) or "__root__": err["msg"]
                for err in exc.errors()
            }
            return None
        self.errors = {}
        return model

    async def send(self, model: BaseModel) -> dict[str, Any]:
        raise NotImplementedError

    def success_message(self, result: dict[str, Any]) -> str:
        return "Los datos se guardaron correctamente"

    async def submit(self) -> dict[str, Any] | None:
        model = self.validate()
        if model is None:
            return None
        self.submitting = True
        try:
            result = await self.send(model)
        except AppError as exc:
            logger.warning("%s submit failed: %s", type(self).__name__, exc.message)
            self.toasts.error(self.error_title, exc.message)
            return None
        finally:
            self.submitting = False
        self.toasts.success(self.success_title, self.success_message(result))
        self.reset()
        if self.on_success is not None:
            outcome = self.on_success(result)
            if inspect.isawaitable(outcome):
                await outcome
        return result


class AnimalFormController(FormController):
    schema = AnimalCreate
    success_title = "Animal registrado"
    error_title = "Error al registrar"

    def defaults(self) -> dict[str, Any]:
        today = local_today().isoformat()
        return {
            "tag": "",
            "name": "",
            "gender": "male",
            "birth_date": today,
            "entry_date": today,
            "breed": "",
            "status": "healthy",
            "ear_tag": "red",
            "weight": "",
            "owner": "",
            "purpose": "fattening",
            "farm": "",
            "category": "vaca",
        }

    async def send(self, model: BaseModel) -> dict[str, Any]:
        return await self.client.create_animal(model.model_dump(mode="json", exclude_none=True))

    def success_message(self, result: dict[str, Any]) -> str:
        return f"{result['name']} ha sido registrado correctamente"


class EditAnimalFormController(FormController):
    schema = AnimalUpdate
    success_title = "Animal actualizado"
    error_title = "Error al actualizar"
    fields = ("name", "gender", "birth_date", "entry_date", "breed", "ear_tag", "farm")

    def __init__(self, client: SendaClient, animal_id: str, **kwargs: Any) -> None:
        self.animal_id = animal_id
        self.loaded: dict[str, Any] = {}
        super().__init__(client, **kwargs)

    def defaults(self) -> dict[str, Any]:
        return {name: self.loaded.get(name) or "" for name in self.fields}

    async def load(self) -> bool:
        """Prefill the form with the stored animal."""
        try:
            animal = await self.client.get_animal(self.animal_id)
        except AppError as exc:
            self.toasts.error("Error", exc.message)
            return False
        self.loaded = animal
        self.reset()
        return True

    async def send(self, model: BaseModel) -> dict[str, Any]:
        payload = model.model_dump(mode="json", exclude_unset=True)
        return await self.client.update_animal(self.animal_id, payload)

    def success_message(self, result: dict[str, Any]) -> str:
        return f"{result['name']} ha sido actualizado correctamente"


class HealthFormController(FormController):
    schema = HealthUpdate
    success_title = "Estado actualizado"
    error_title = "Error al actualizar"

    def __init__(self, client: SendaClient, **kwargs: Any) -> None:
        self.animal_options: list[dict[str, str]] = []
        super().__init__(client, **kwargs)

    def defaults(self) -> dict[str, Any]:
        return {"animal_id": "", "status": "healthy"}

    async def load_options(self) -> bool:
        try:
            body = await self.client.list_animals()
        except AppError as exc:
            self.toasts.error("Error", "No se pudieron cargar los animales")
            logger.warning("Animal options could not be loaded: %s", exc.message)
            return False
        self.animal_options = [
            {"id": a["id"], "label": f"{a['name']} ({a['tag']})"} for a in body["items"]
        ]
        return True

    async def load(self, animal_id: str) -> bool:
        """Select `animal_id` and prefill its current status."""
        try:
            animal = await self.client.get_animal(animal_id)
        except AppError as exc:
            self.toasts.error("Error", exc.message)
            return False
        self.values["animal_id"] = animal["id"]
        self.values["status"] = animal["status"]
        return True

    def validate(self) -> BaseModel | None:
        model = super().validate()
        if not self.values.get("animal_id"):
            self.errors["animal_id"] = "Selecciona un animal"
            return None
        return model

    def payload_values(self) -> dict[str, Any]:
        values = super().payload_values()
        values.pop("animal_id", None)
        return values

    async def send(self, model: BaseModel) -> dict[str, Any]:
        return await self.client.update_health(
            self.values["animal_id"], model.model_dump(mode="json", exclude_none=True)
        )


class VaccineFormController(FormController):
    schema = VaccineCreate
    success_title = "Vacuna registrada"
    error_title = "Error al registrar"

    def __init__(self, client: SendaClient, **kwargs: Any) -> None:
        self.animal_options: list[dict[str, str]] = []
        super().__init__(client, **kwargs)

    def defaults(self) -> dict[str, Any]:
        return {
            "animal_id": "",
            "vaccine_type": "",
            "date": local_today().isoformat(),
            "next_date": "",
            "notes": "",
        }

    async def load_options(self) -> bool:
        try:
            body = await self.client.list_animals()
        except AppError as exc:
            self.toasts.error("Error", "No se pudieron cargar los animales")
            logger.warning("Animal options could not be loaded: %s", exc.message)
            return False
        self.animal_options = [
            {"id": a["id"], "label": f"{a['name']} ({a['tag']})"} for a in body["items"]
        ]
        return True

    async def send(self, model: BaseModel) -> dict[str, Any]:
        return await self.client.create_vaccine(model.model_dump(mode="json", exclude_none=True))


class ReproductionFormController(FormController):
    schema = ReproductionCreate
    success_title = "Reproducción registrada"
    error_title = "Error al registrar"

    def __init__(self, client: SendaClient, **kwargs: Any) -> None:
        self.mothers: list[dict[str, str]] = []
        self.fathers: list[dict[str, str]] = []
        super().__init__(client, **kwargs)

    def defaults(self) -> dict[str, Any]:
        today = local_today()
        return {
            "mother_id": "",
            "father_id": "",
            "service_method": "natural",
            "service_date": today.isoformat(),
            "expected_birth_date": expected_birth_date(today).isoformat(),
        }

    def set(self, field_name: str, value: Any) -> None:
        super().set(field_name, value)
        if field_name != "service_date" or not value:
            return
        try:
            service_date = value if isinstance(value, date) else date.fromisoformat(str(value))
        except ValueError:
            self.errors["service_date"] = "Fecha inválida"
            return
        self.values["expected_birth_date"] = expected_birth_date(service_date).isoformat()

    def payload_values(self) -> dict[str, Any]:
        values = super().payload_values()
        # Always recomputed by the server
        values.pop("expected_birth_date", None)
        return values

    async def load_options(self) -> bool:
        try:
            females = await self.client.list_animals(filter_column="gender", filter_value="female")
            males = await self.client.list_animals(filter_column="gender", filter_value="male")
        except AppError as exc:
            self.toasts.error("Error", "No se pudieron cargar los animales")
            logger.warning("Parent options could not be loaded: %s", exc.message)
            return False
        self.mothers = [{"id": a["id"], "label": f"{a['name']} ({a['tag']})"} for a in females["items"]]
        self.fathers = [{"id": a["id"], "label": f"{a['name']} ({a['tag']})"} for a in males["items"]]
        return True

    async def send(self, model: BaseModel) -> dict[str, Any]:
        return await self.client.create_reproduction(model.model_dump(mode="json", exclude_none=True))
