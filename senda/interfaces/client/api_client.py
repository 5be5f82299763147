"""Async HTTP client for the Senda API used by the views and form controllers.

Every call maps a non-2xx answer to `DataAccessError` carrying the server's
message and status; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping
from uuid import UUID

import httpx

from senda.application.errors import AuthError, DataAccessError
from senda.interfaces.client.session import Session

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def _message_from(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase


class SendaClient:
    def __init__(
        self,
        base_url: str,
        *,
        session: Session | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.session = session
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> SendaClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        authenticated: bool = True,
    ) -> Any:
        headers: dict[str, str] = {}
        if authenticated:
            if self.session is None:
                raise AuthError("Not signed in")
            headers.update(self.session.headers())
        clean_params = {k: v for k, v in (params or {}).items() if v is not None}
        try:
            response = await self._http.request(
                method, API_PREFIX + path, params=clean_params, json=json, headers=headers
            )
        except httpx.HTTPError as exc:
            raise DataAccessError(str(exc)) from exc
        if response.is_error:
            message = _message_from(response)
            logger.debug("%s %s failed with %d: %s", method, path, response.status_code, message)
            raise DataAccessError(message, details={"status": response.status_code})
        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        return response.json()

    # auth
    async def signup(self, email: str, password: str) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/auth/signup",
            json={"email": email, "password": password},
            authenticated=False,
        )

    async def login(self, email: str, password: str) -> Session:
        body = await self._request(
            "POST",
            "/auth/login",
            json={"email": email, "password": password},
            authenticated=False,
        )
        self.session = Session(
            access_token=body["access_token"],
            user_id=UUID(body["user_id"]),
            email=body["email"],
        )
        return self.session

    async def logout(self) -> None:
        await self._request("POST", "/auth/logout", authenticated=False)
        self.session = None

    async def me(self) -> dict[str, Any]:
        return await self._request("GET", "/me")

    # animals
    async def list_animals(
        self,
        *,
        q: str | None = None,
        filter_column: str | None = None,
        filter_value: str | None = None,
    ) -> dict[str, Any]:
        params = {"q": q or None}
        if filter_column and filter_value:
            params.update(filter_column=filter_column, filter_value=filter_value)
        return await self._request("GET", "/animals", params=params)

    async def get_animal(self, animal_id: UUID | str) -> dict[str, Any]:
        return await self._request("GET", f"/animals/{animal_id}")

    async def get_carnet(self, animal_id: UUID | str) -> dict[str, Any]:
        return await self._request("GET", f"/animals/{animal_id}/carnet")

    async def create_animal(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/animals", json=payload)

    async def update_animal(self, animal_id: UUID | str, payload: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("PATCH", f"/animals/{animal_id}", json=payload)

    async def update_health(self, animal_id: UUID | str, payload: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("PUT", f"/animals/{animal_id}/health", json=payload)

    async def delete_animal(self, animal_id: UUID | str) -> None:
        await self._request("DELETE", f"/animals/{animal_id}")

    # vaccines and reproduction
    async def list_vaccines(self, *, animal_id: UUID | str | None = None) -> list[dict[str, Any]]:
        return await self._request("GET", "/vaccines", params={"animal_id": animal_id})

    async def create_vaccine(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/vaccines", json=payload)

    async def list_reproductions(self, *, mother_id: UUID | str | None = None) -> list[dict[str, Any]]:
        return await self._request("GET", "/reproductions", params={"mother_id": mother_id})

    async def create_reproduction(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/reproductions", json=payload)

    # dashboard and reports
    async def general_dashboard(self, *, owner: str | None = None) -> dict[str, Any]:
        return await self._request("GET", "/dashboard/general", params={"owner": owner})

    async def herd_metrics(self) -> dict[str, Any]:
        return await self._request("GET", "/dashboard/metrics")

    async def activities(self, *, date_range: str = "week", type: str = "all") -> dict[str, Any]:  # noqa: A002
        return await self._request(
            "GET", "/reports/activities", params={"date_range": date_range, "type": type}
        )

    async def recent_activity(self, *, limit: int = 5) -> dict[str, Any]:
        return await self._request("GET", "/reports/recent", params={"limit": limit})

    # notifications
    async def notifications(self) -> dict[str, Any]:
        return await self._request("GET", "/notifications")

    async def mark_notifications_read(self, keys: list[str]) -> dict[str, Any]:
        return await self._request("POST", "/notifications/read", json={"keys": keys})

    async def mark_all_notifications_read(self) -> dict[str, Any]:
        return await self._request("POST", "/notifications/read-all")
