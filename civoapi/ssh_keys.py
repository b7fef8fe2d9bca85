"""SSH public keys uploaded to access instances."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .core import CivoError, HttpTransport, SimpleResponse, find_match


@dataclass(frozen=True)
class SSHKey:
    """An SSH public key record."""

    id: str = ""
    name: str = ""
    fingerprint: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SSHKey":
        if not isinstance(data, Mapping):
            raise CivoError("unexpected response, expected an SSH key object")
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            fingerprint=data.get("fingerprint") or "",
        )


class SSHKeyService:
    """Operations on the account's SSH keys."""

    def __init__(self, transport: HttpTransport) -> None:
        self.transport = transport

    def list(self) -> list[SSHKey]:
        data = self.transport.request("GET", "/v2/sshkeys", None)
        if not isinstance(data, list):
            raise CivoError("unexpected response, expected a list of SSH keys")
        return [SSHKey.from_dict(item) for item in data]

    def create(self, name: str, public_key: str) -> SimpleResponse:
        data = self.transport.request(
            "POST", "/v2/sshkeys", {"name": name, "public_key": public_key}
        )
        return SimpleResponse.from_dict(data)

    def update(self, name: str, ssh_key_id: str) -> SSHKey:
        data = self.transport.request("PUT", f"/v2/sshkeys/{ssh_key_id}", {"name": name})
        return SSHKey.from_dict(data)

    def find(self, search: str) -> SSHKey:
        """Find a key by exact or partial ID or name."""
        return find_match(self.list(), search, ("name", "id"))

    def delete(self, key_id: str) -> SimpleResponse:
        data = self.transport.request("DELETE", f"/v2/sshkeys/{key_id}", None)
        return SimpleResponse.from_dict(data)