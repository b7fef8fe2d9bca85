"""Teams and their members, granting users access to an account."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from .core import CivoError, HttpTransport, SimpleResponse, find_match, parse_time


@dataclass(frozen=True)
class Team:
    """A named group of users."""

    id: str = ""
    name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Team":
        if not isinstance(data, Mapping):
            raise CivoError("unexpected response, expected a team object")
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            created_at=parse_time(data.get("created_at")),
            updated_at=parse_time(data.get("updated_at")),
        )


@dataclass(frozen=True)
class TeamMember:
    """The link between a user and a team, with permissions and roles."""

    id: str = ""
    team_id: str = ""
    user_id: str = ""
    permissions: str = ""
    roles: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TeamMember":
        if not isinstance(data, Mapping):
            raise CivoError("unexpected response, expected a team member object")
        return cls(
            id=data.get("id") or "",
            team_id=data.get("team_id") or "",
            user_id=data.get("user_id") or "",
            permissions=data.get("permissions") or "",
            roles=data.get("roles") or "",
            created_at=parse_time(data.get("created_at")),
            updated_at=parse_time(data.get("updated_at")),
        )


def _expect_list(data: Any, what: str) -> list:
    if not isinstance(data, list):
        raise CivoError(f"unexpected response, expected a list of {what}")
    return data


class TeamService:
    """Operations on the account's teams and their members."""

    def __init__(self, transport: HttpTransport) -> None:
        self.transport = transport

    def list(self) -> list[Team]:
        data = self.transport.request("GET", "/v2/teams", None)
        return [Team.from_dict(item) for item in _expect_list(data, "teams")]

    def create(self, name: str) -> Team:
        data = self.transport.request("POST", "/v2/teams", {"name": name})
        return Team.from_dict(data)

    def find(self, search: str) -> Team:
        """Find a team by exact or partial ID or name."""
        return find_match(self.list(), search, ("name", "id"), "team")

    def rename(self, team_id: str, name: str) -> Team:
        data = self.transport.request("PUT", f"/v2/teams/{team_id}", {"name": name})
        return Team.from_dict(data)

    def delete(self, team_id: str) -> SimpleResponse:
        data = self.transport.request("DELETE", f"/v2/teams/{team_id}", None)
        return SimpleResponse.from_dict(data)

    def list_members(self, team_id: str) -> list[TeamMember]:
        data = self.transport.request("GET", f"/v2/teams/{team_id}/members", None)
        return [TeamMember.from_dict(item) for item in _expect_list(data, "team members")]

    def add_member(
        self, team_id: str, user_id: str, permissions: str, roles: str
    ) -> list[TeamMember]:
        """Add a user to a team and return the team's members afterwards."""
        self.transport.request(
            "POST",
            f"/v2/teams/{team_id}/members",
            {"user_id": user_id, "permissions": permissions, "roles": roles},
        )
        return self.list_members(team_id)

    def update_member(
        self, team_id: str, member_id: str, permissions: str, roles: str
    ) -> TeamMember:
        data = self.transport.request(
            "POST",
            f"/v2/teams/{team_id}/members/{member_id}",
            {"permissions": permissions, "roles": roles},
        )
        return TeamMember.from_dict(data)

    def remove_member(self, team_id: str, member_id: str) -> SimpleResponse:
        data = self.transport.request(
            "DELETE", f"/v2/teams/{team_id}/members/{member_id}", None
        )
        return SimpleResponse.from_dict(data)