from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(slots=True)
class Session:
    """Signed-in user as seen by the client; passed explicitly to the API client."""

    access_token: str
    user_id: UUID
    email: str

    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}
