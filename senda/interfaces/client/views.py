"""Client-side view controllers.

Each view owns its local UI state and loads data through `SendaClient`.
Only the most recent request may update a view: every load bumps a
generation counter and results from older generations are dropped.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

from senda.application.errors import AppError
from senda.interfaces.client.api_client import SendaClient
from senda.interfaces.client.toasts import ToastQueue

logger = logging.getLogger(__name__)

EMPTY_TABLE_MESSAGE = "No se encontraron animales"
ANIMAL_NOT_FOUND_MESSAGE = "Animal no encontrado"
NO_ACTIVITY_MESSAGE = "No hay actividades para mostrar"
NO_NOTIFICATIONS_MESSAGE = "No hay notificaciones"
DEFAULT_POLL_SECONDS = 300


def _status_of(exc: AppError) -> int | None:
    return (exc.details or {}).get("status")


class View:
    error_title = "Error"

    def __init__(self, client: SendaClient, toasts: ToastQueue | None = None) -> None:
        self.client = client
        self.toasts = toasts or ToastQueue()
        self.loading = False
        self.error: str | None = None
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def _load(self, fetch: Callable[[], Awaitable[Any]]) -> bool:
        """Run `fetch` and apply its result unless a newer load started meanwhile."""
        self._generation += 1
        generation = self._generation
        self.loading = True
        try:
            result = await fetch()
        except AppError as exc:
            if generation != self._generation:
                return False
            logger.warning("%s failed to load: %s", type(self).__name__, exc.message)
            self.error = exc.message
            self._on_error(exc)
            return False
        finally:
            if generation == self._generation:
                self.loading = False
        if generation != self._generation:
            logger.debug("Dropping stale response for %s", type(self).__name__)
            return False
        self.error = None
        self._apply(result)
        return True

    def _apply(self, result: Any) -> None:
        raise NotImplementedError

    def _on_error(self, exc: AppError) -> None:
        self.toasts.error(self.error_title, exc.message)


class CattleTableView(View):
    error_title = "Error al cargar animales"

    def __init__(self, client: SendaClient, toasts: ToastQueue | None = None) -> None:
        super().__init__(client, toasts)
        self.rows: list[dict[str, Any]] = []
        self.total = 0
        self.search = ""
        self.filter_column: str | None = None
        self.filter_value = ""
        # Name of the open row dialog ("edit", "health", "carnet") and its animal
        self.dialog: str | None = None
        self.dialog_animal_id: str | None = None

    @property
    def empty_message(self) -> str | None:
        if self.loading or self.error or self.rows:
            return None
        return EMPTY_TABLE_MESSAGE

    async def load(self) -> bool:
        return await self._load(
            lambda: self.client.list_animals(
                q=self.search or None,
                filter_column=self.filter_column,
                filter_value=self.filter_value or None,
            )
        )

    def _apply(self, result: dict[str, Any]) -> None:
        self.rows = result["items"]
        self.total = result["total"]

    def _on_error(self, exc: AppError) -> None:
        super()._on_error(exc)
        self.rows = []

    async def set_search(self, text: str) -> bool:
        self.search = text
        return await self.load()

    async def set_filter(self, column: str | None, value: str = "") -> bool:
        self.filter_column = column
        self.filter_value = value
        return await self.load()

    def open_dialog(self, name: str, animal_id: str) -> None:
        self.dialog = name
        self.dialog_animal_id = animal_id

    def close_dialog(self) -> None:
        self.dialog = None
        self.dialog_animal_id = None

    async def delete(self, animal_id: str) -> bool:
        try:
            await self.client.delete_animal(animal_id)
        except AppError as exc:
            logger.warning("Animal %s could not be deleted: %s", animal_id, exc.message)
            self.toasts.error("Error al eliminar", exc.message)
            return False
        self.toasts.success("Animal eliminado", "El animal ha sido eliminado correctamente")
        await self.load()
        return True


class AnimalCardView(View):
    error_title = "Error al cargar el carnet"

    def __init__(self, client: SendaClient, animal_id: str, toasts: ToastQueue | None = None) -> None:
        super().__init__(client, toasts)
        self.animal_id = animal_id
        self.carnet: dict[str, Any] | None = None
        self.not_found = False

    @property
    def empty_message(self) -> str | None:
        return ANIMAL_NOT_FOUND_MESSAGE if self.not_found else None

    async def load(self) -> bool:
        return await self._load(lambda: self.client.get_carnet(self.animal_id))

    def _apply(self, result: dict[str, Any]) -> None:
        self.carnet = result
        self.not_found = False

    def _on_error(self, exc: AppError) -> None:
        self.carnet = None
        if _status_of(exc) == 404:
            # Missing record is an empty state, not a failure
            self.not_found = True
            self.error = None
            return
        super()._on_error(exc)


class GeneralDashboardView(View):
    error_title = "Error al cargar el panel"

    def __init__(self, client: SendaClient, toasts: ToastQueue | None = None) -> None:
        super().__init__(client, toasts)
        self.owner = "all"
        self.data: dict[str, Any] | None = None

    async def load(self) -> bool:
        owner = None if self.owner == "all" else self.owner
        return await self._load(lambda: self.client.general_dashboard(owner=owner))

    def _apply(self, result: dict[str, Any]) -> None:
        self.data = result

    async def set_owner(self, owner: str) -> bool:
        self.owner = owner or "all"
        return await self.load()


class MetricsGridView(View):
    def __init__(self, client: SendaClient, toasts: ToastQueue | None = None) -> None:
        super().__init__(client, toasts)
        self.metrics: dict[str, Any] | None = None

    async def load(self) -> bool:
        return await self._load(self.client.herd_metrics)

    def _apply(self, result: dict[str, Any]) -> None:
        self.metrics = result


class ReportsView(View):
    error_title = "Error al cargar reportes"

    def __init__(self, client: SendaClient, toasts: ToastQueue | None = None) -> None:
        super().__init__(client, toasts)
        self.date_range = "week"
        self.type = "all"
        self.items: list[dict[str, Any]] = []

    @property
    def empty_message(self) -> str | None:
        if self.loading or self.error or self.items:
            return None
        return NO_ACTIVITY_MESSAGE

    async def load(self) -> bool:
        return await self._load(
            lambda: self.client.activities(date_range=self.date_range, type=self.type)
        )

    def _apply(self, result: dict[str, Any]) -> None:
        self.items = result["items"]

    def _on_error(self, exc: AppError) -> None:
        super()._on_error(exc)
        self.items = []

    async def set_filter(self, *, date_range: str | None = None, type: str | None = None) -> bool:  # noqa: A002
        if date_range is not None:
            self.date_range = date_range
        if type is not None:
            self.type = type
        return await self.load()


class SidebarView(View):
    def __init__(self, client: SendaClient, toasts: ToastQueue | None = None) -> None:
        super().__init__(client, toasts)
        self.recent: list[dict[str, Any]] = []

    async def load(self) -> bool:
        return await self._load(self.client.recent_activity)

    def _apply(self, result: dict[str, Any]) -> None:
        self.recent = result["items"]

    def _on_error(self, exc: AppError) -> None:
        # The sidebar stays quiet; the list simply empties
        self.recent = []


class NotificationsView(View):
    error_title = "Error al cargar notificaciones"

    def __init__(
        self,
        client: SendaClient,
        toasts: ToastQueue | None = None,
        *,
        poll_seconds: float | None = None,
    ) -> None:
        super().__init__(client, toasts)
        # None follows the interval the server reports with each listing
        self._fixed_poll_seconds = poll_seconds
        self.poll_seconds = poll_seconds or DEFAULT_POLL_SECONDS
        self.items: list[dict[str, Any]] = []
        self.unread = 0
        self._task: asyncio.Task | None = None

    @property
    def empty_message(self) -> str | None:
        return None if self.items else NO_NOTIFICATIONS_MESSAGE

    async def load(self) -> bool:
        return await self._load(self.client.notifications)

    def _apply(self, result: dict[str, Any]) -> None:
        self.items = result["items"]
        self.unread = result["unread"]
        if self._fixed_poll_seconds is None and result.get("poll_seconds"):
            self.poll_seconds = result["poll_seconds"]

    async def _poll(self) -> None:
        while True:
            try:
                await self.load()
            except Exception:
                # A failed round must not stop polling
                logger.exception("Notifications poll failed")
            await asyncio.sleep(self.poll_seconds)

    def start(self) -> None:
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._poll())

    @property
    def polling(self) -> bool:
        return self._task is not None and not self._task.done()

    async def close(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def mark_read(self, key: str) -> bool:
        try:
            await self.client.mark_notifications_read([key])
        except AppError as exc:
            self.toasts.error(self.error_title, exc.message)
            return False
        for item in self.items:
            if item["key"] == key and not item["is_read"]:
                item["is_read"] = True
                self.unread -= 1
        return True

    async def mark_all_read(self) -> bool:
        try:
            await self.client.mark_all_notifications_read()
        except AppError as exc:
            self.toasts.error(self.error_title, exc.message)
            return False
        for item in self.items:
            item["is_read"] = True
        self.unread = 0
        return True
