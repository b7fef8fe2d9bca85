"""Block storage volumes that can be attached to instances and clusters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping

from .core import CivoError, HttpTransport, SimpleResponse, find_match, parse_time


def _as_int(value: Any, field: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise CivoError(f"unexpected value for {field}")
    return value


@dataclass(frozen=True)
class Volume:
    """A block of attachable storage."""

    id: str = ""
    name: str = ""
    instance_id: str = ""
    cluster_id: str = ""
    network_id: str = ""
    mount_point: str = ""
    status: str = ""
    size_gigabytes: int = 0
    bootable: bool = False
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Volume":
        if not isinstance(data, Mapping):
            raise CivoError("unexpected response, expected a volume object")
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            instance_id=data.get("instance_id") or "",
            cluster_id=data.get("cluster_id") or "",
            network_id=data.get("network_id") or "",
            mount_point=data.get("mountpoint") or "",
            status=data.get("status") or "",
            size_gigabytes=_as_int(data.get("size_gb"), "size_gb"),
            bootable=bool(data.get("bootable")),
            created_at=parse_time(data.get("created_at")),
        )


@dataclass(frozen=True)
class VolumeResult:
    """The reply to creating a volume."""

    id: str = ""
    name: str = ""
    result: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VolumeResult":
        if not isinstance(data, Mapping):
            raise CivoError("unexpected response, expected a volume result object")
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            result=data.get("result") or "",
        )


@dataclass
class VolumeConfig:
    """The settings required to create a new volume."""

    name: str = ""
    namespace: str = ""
    cluster_id: str = ""
    network_id: str = ""
    region: str = ""
    size_gigabytes: int = 0
    bootable: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "namespace": self.namespace,
            "cluster_id": self.cluster_id,
            "network_id": self.network_id,
            "region": self.region,
            "size_gb": self.size_gigabytes,
            "bootable": self.bootable,
        }


class VolumeService:
    """Operations on the account's volumes."""

    def __init__(self, transport: HttpTransport) -> None:
        self.transport = transport

    def list(self) -> list[Volume]:
        data = self.transport.request("GET", "/v2/volumes", None)
        if not isinstance(data, list):
            raise CivoError("unexpected response, expected a list of volumes")
        return [Volume.from_dict(item) for item in data]

    def get(self, volume_id: str) -> Volume:
        data = self.transport.request("GET", f"/v2/volumes/{volume_id}", None)
        return Volume.from_dict(data)

    def find(self, search: str) -> Volume:
        """Find a volume by exact or partial ID or name."""
        return find_match(self.list(), search, ("name", "id"))

    def for_cluster(self, cluster_id: str) -> list[Volume]:
        """Return the volumes that belong to the given cluster."""
        return [
            volume
            for volume in self.list()
            if volume.cluster_id and volume.cluster_id == cluster_id
        ]

    def dangling(self, cluster_ids: Iterable[str]) -> list[Volume]:
        """Return volumes naming a cluster that is not among the known clusters."""
        known = set(cluster_ids)
        return [
            volume
            for volume in self.list()
            if volume.cluster_id and volume.cluster_id not in known
        ]

    def create(self, config: VolumeConfig) -> VolumeResult:
        data = self.transport.request("POST", "/v2/volumes", config.to_dict())
        return VolumeResult.from_dict(data)

    def resize(self, volume_id: str, size: int) -> SimpleResponse:
        data = self.transport.request(
            "PUT",
            f"/v2/volumes/{volume_id}/resize",
            {"size_gb": size, "region": self.transport.region},
        )
        return SimpleResponse.from_dict(data)

    def attach(self, volume_id: str, instance_id: str) -> SimpleResponse:
        data = self.transport.request(
            "PUT",
            f"/v2/volumes/{volume_id}/attach",
            {"instance_id": instance_id, "region": self.transport.region},
        )
        return SimpleResponse.from_dict(data)

    def detach(self, volume_id: str) -> SimpleResponse:
        data = self.transport.request(
            "PUT",
            f"/v2/volumes/{volume_id}/detach",
            {"region": self.transport.region},
        )
        return SimpleResponse.from_dict(data)

    def delete(self, volume_id: str) -> SimpleResponse:
        data = self.transport.request("DELETE", f"/v2/volumes/{volume_id}", None)
        return SimpleResponse.from_dict(data)