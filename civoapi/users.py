"""User records as returned by the API."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from .core import CivoError, parse_time


@dataclass(frozen=True)
class User:
    """A user of the platform."""

    id: str = ""
    first_name: str = ""
    last_name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    company_name: str = ""
    email_address: str = ""
    status: str = ""
    flags: str = ""
    token: str = ""
    marketing_allowed: int = 0
    default_account_id: str = ""
    password_digest: str = ""
    partner: str = ""
    partner_user_id: str = ""
    referral_id: str = ""
    last_chosen_region: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        if not isinstance(data, Mapping):
            raise CivoError("unexpected response, expected a user object")
        marketing = data.get("marketing_allowed") or 0
        if isinstance(marketing, bool) or not isinstance(marketing, int):
            raise CivoError("unexpected value for marketing_allowed")
        text_fields = (
            "id",
            "first_name",
            "last_name",
            "company_name",
            "email_address",
            "status",
            "flags",
            "token",
            "default_account_id",
            "password_digest",
            "partner",
            "partner_user_id",
            "referral_id",
            "last_chosen_region",
        )
        return cls(
            created_at=parse_time(data.get("created_at")),
            updated_at=parse_time(data.get("updated_at")),
            marketing_allowed=marketing,
            **{name: data.get(name) or "" for name in text_fields},
        )