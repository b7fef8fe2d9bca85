"""Webhook callbacks fired on changes to the account's resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from .core import CivoError, HttpTransport, SimpleResponse, find_match


@dataclass(frozen=True)
class Webhook:
    """A saved webhook callback."""

    id: str = ""
    events: tuple[str, ...] = ()
    url: str = ""
    secret: str = ""
    disabled: bool = False
    failures: int = 0
    last_failure_reason: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Webhook":
        if not isinstance(data, Mapping):
            raise CivoError("unexpected response, expected a webhook object")
        events = data.get("events") or []
        if not isinstance(events, list) or not all(isinstance(e, str) for e in events):
            raise CivoError("unexpected value for events")
        failures = data.get("failures") or 0
        if isinstance(failures, bool) or not isinstance(failures, int):
            raise CivoError("unexpected value for failures")
        return cls(
            id=data.get("id") or "",
            events=tuple(events),
            url=data.get("url") or "",
            secret=data.get("secret") or "",
            disabled=bool(data.get("disabled")),
            failures=failures,
            last_failure_reason=data.get("last_failure_reason") or "",
        )


@dataclass
class WebhookConfig:
    """The options for creating or updating a webhook."""

    events: Sequence[str] = field(default_factory=list)
    url: str = ""
    secret: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"events": list(self.events), "url": self.url, "secret": self.secret}


class WebhookService:
    """Operations on the account's webhooks."""

    def __init__(self, transport: HttpTransport) -> None:
        self.transport = transport

    def create(self, config: WebhookConfig) -> Webhook:
        data = self.transport.request("POST", "/v2/webhooks", config.to_dict())
        return Webhook.from_dict(data)

    def list(self) -> list[Webhook]:
        data = self.transport.request("GET", "/v2/webhooks", None)
        if not isinstance(data, list):
            raise CivoError("unexpected response, expected a list of webhooks")
        return [Webhook.from_dict(item) for item in data]

    def find(self, search: str) -> Webhook:
        """Find a webhook by exact or partial ID or URL."""
        return find_match(self.list(), search, ("url", "id"))

    def update(self, webhook_id: str, config: WebhookConfig) -> Webhook:
        data = self.transport.request(
            "PUT", f"/v2/webhooks/{webhook_id}", config.to_dict()
        )
        return Webhook.from_dict(data)

    def delete(self, webhook_id: str) -> SimpleResponse:
        data = self.transport.request("DELETE", f"/v2/webhooks/{webhook_id}", None)
        return SimpleResponse.from_dict(data)