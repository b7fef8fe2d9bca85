"""Shared pieces of the API client: transport, responses, errors and lookups."""

from __future__ import annotations

import json
import re
import urllib.error
import urllib.request
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping, Sequence, TypeVar

DEFAULT_BASE_URL = "https://api.civo.com"

T = TypeVar("T")


class CivoError(Exception):
    """Base error for everything the client raises."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return f"{type(self).__name__}: {self.message}"


class MultipleMatchesError(CivoError):
    """A search matched more than one resource."""


class ZeroMatchesError(CivoError):
    """A search matched no resource at all."""


@dataclass(frozen=True)
class SimpleResponse:
    """The short reply most mutating API calls return."""

    id: str = ""
    result: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimpleResponse":
        if not isinstance(data, Mapping):
            raise CivoError("unexpected response, expected an object")
        return cls(id=data.get("id") or "", result=data.get("result") or "")


class HttpTransport:
    """Sends JSON requests to the API and returns the decoded replies."""

    def __init__(
        self,
        api_key: str,
        region: str = "",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        user_agent: str = "civoapi",
    ) -> None:
        self.api_key = api_key
        self.region = region
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

    def request(self, method: str, path: str, body: Any = None) -> Any:
        """Perform one request; return the decoded JSON body or None when empty."""
        data = None if body is None else json.dumps(body).encode("utf-8")
        req = urllib.request.Request(
            self.base_url + path,
            data=data,
            method=method.upper(),
            headers={
                "Authorization": f"bearer {self.api_key}",
                "Accept": "application/json",
                "Content-Type": "application/json",
                "User-Agent": self.user_agent,
            },
        )
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                raw = resp.read()
        except urllib.error.HTTPError as exc:
            detail = exc.read().decode("utf-8", errors="replace")
            raise CivoError(f"{exc.code}: {detail}", status=exc.code) from exc
        except urllib.error.URLError as exc:
            raise CivoError(f"request to {path} failed: {exc.reason}") from exc

        if not raw.strip():
            return None
        try:
            return json.loads(raw)
        except ValueError as exc:
            raise CivoError(f"unable to decode response from {path}") from exc


def find_match(
    items: Iterable[T],
    search: str,
    fields: Sequence[str],
    label: str | None = None,
) -> T:
    """Find one item whose fields equal, or uniquely contain, the search text.

    An exact match on any field wins; otherwise exactly one partial match is
    required.
    """
    exact: T | None = None
    partial: list[T] = []
    for item in items:
        values = [getattr(item, name) or "" for name in fields]
        if search in values:
            exact = item
        elif any(search in value for value in values) and exact is None:
            partial.append(item)

    if exact is not None:
        return exact
    if len(partial) == 1:
        return partial[0]
    subject = f"{search} {label}" if label else search
    if partial:
        raise MultipleMatchesError(
            f"unable to find {subject} because there were multiple matches"
        )
    raise ZeroMatchesError(f"unable to find {subject}, zero matches")


_FRACTION = re.compile(r"\.(\d+)")


def parse_time(value: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp; empty values give None."""
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"invalid timestamp: {value!r}") from exc