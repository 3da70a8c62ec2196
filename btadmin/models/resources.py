"""Bigtable instance and cluster data models"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from btadmin.exceptions import BtadminError, ErrorKind
from btadmin.validation import (
    cluster_id_from_name,
    instance_id_from_name,
    location_from_name,
)


class InstanceType(str, Enum):
    """Instance tier"""
    PRODUCTION = "PRODUCTION"
    DEVELOPMENT = "DEVELOPMENT"


class StorageType(str, Enum):
    """Cluster storage medium"""
    SSD = "ssd"
    HDD = "hdd"


@dataclass
class ClusterSpec:
    """Requested configuration for a new cluster.

    ``nodes`` is None for clusters of DEVELOPMENT instances.
    """
    name: str
    location: str
    storage: StorageType
    nodes: Optional[int] = None


@dataclass
class InstanceSpec:
    """Requested configuration for a new instance"""
    clusters: List[ClusterSpec]
    type: InstanceType = InstanceType.PRODUCTION
    labels: Dict[str, str] = field(default_factory=dict)


@dataclass
class InstanceInfo:
    """Instance as reported by the admin API"""
    instance_id: str
    display_name: str
    type: str
    state: str
    labels: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_proto(cls, instance) -> "InstanceInfo":
        """Create an InstanceInfo from a ``bigtable_admin_v2.types.Instance``"""
        return cls(
            instance_id=instance_id_from_name(instance.name),
            display_name=instance.display_name,
            type=instance.type_.name,
            state=instance.state.name,
            labels=dict(instance.labels),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "instance_id": self.instance_id,
            "display_name": self.display_name,
            "type": self.type,
            "state": self.state,
            "labels": dict(self.labels),
        }


@dataclass
class ClusterInfo:
    """Cluster as reported by the admin API"""
    cluster_id: str
    location: str
    storage: str
    nodes: int
    state: str

    @classmethod
    def from_proto(cls, cluster) -> "ClusterInfo":
        """Create a ClusterInfo from a ``bigtable_admin_v2.types.Cluster``"""
        return cls(
            cluster_id=cluster_id_from_name(cluster.name),
            location=location_from_name(cluster.location),
            storage=cluster.default_storage_type.name,
            nodes=cluster.serve_nodes,
            state=cluster.state.name,
        )


@dataclass
class RunReport:
    """Everything the ``run`` operation collected before it stopped"""
    created: Optional[InstanceInfo] = None
    instances: Optional[List[InstanceInfo]] = None
    instance: Optional[InstanceInfo] = None
    clusters: Optional[List[ClusterInfo]] = None


@dataclass
class OperationResult:
    """Outcome of one admin operation.

    A failed result names the step that failed in ``message`` and carries the
    error category; ``data`` holds whatever the operation produced.
    """
    operation: str
    ok: bool
    message: str = ""
    error_kind: Optional[ErrorKind] = None
    data: Any = None

    @classmethod
    def success(cls, operation: str, message: str = "", data: Any = None) -> "OperationResult":
        return cls(operation=operation, ok=True, message=message, data=data)

    @classmethod
    def failure(
        cls,
        operation: str,
        prefix: str,
        error: BtadminError,
        data: Any = None,
    ) -> "OperationResult":
        return cls(
            operation=operation,
            ok=False,
            message=f"{prefix}: {error}",
            error_kind=error.kind,
            data=data,
        )
