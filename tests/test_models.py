"""Tests for instance and cluster models"""

from btadmin.exceptions import BigtableNotFoundError, ConfigurationError, ErrorKind
from btadmin.models.resources import (
    ClusterInfo,
    ClusterSpec,
    InstanceInfo,
    InstanceSpec,
    InstanceType,
    OperationResult,
    StorageType,
)


class TestSpecs:
    """Tests for request specs"""

    def test_instance_spec_defaults(self):
        spec = InstanceSpec(clusters=[])
        assert spec.type == InstanceType.PRODUCTION
        assert spec.labels == {}

    def test_cluster_spec_nodes_default_unset(self):
        spec = ClusterSpec(name="bar", location="us-central1-f", storage=StorageType.HDD)
        assert spec.nodes is None

    def test_enum_values(self):
        assert StorageType.SSD.value == "ssd"
        assert StorageType.HDD.value == "hdd"
        assert InstanceType.DEVELOPMENT.value == "DEVELOPMENT"


class TestFromProto:
    """Tests for conversion from SDK messages"""

    def test_instance_from_proto(self, instance_proto):
        info = InstanceInfo.from_proto(instance_proto)
        assert info.instance_id == "foo"
        assert info.display_name == "foo"
        assert info.type == "PRODUCTION"
        assert info.state == "READY"
        assert info.labels == {"prod-label": "prod-label"}

    def test_instance_to_dict(self, sample_instance):
        assert sample_instance.to_dict() == {
            "instance_id": "foo",
            "display_name": "foo",
            "type": "PRODUCTION",
            "state": "READY",
            "labels": {"prod-label": "prod-label"},
        }

    def test_cluster_from_proto(self, cluster_proto):
        info = ClusterInfo.from_proto(cluster_proto)
        assert info.cluster_id == "bar"
        assert info.location == "us-central1-f"
        assert info.storage == "SSD"
        assert info.nodes == 3
        assert info.state == "READY"


class TestOperationResult:
    """Tests for the tagged operation result"""

    def test_success(self):
        result = OperationResult.success("del-cluster", "Cluster deleted: bar")
        assert result.ok
        assert result.error_kind is None
        assert result.data is None

    def test_failure_carries_kind_and_prefix(self):
        result = OperationResult.failure(
            "del-cluster", "Error deleting cluster", BigtableNotFoundError("no such cluster")
        )
        assert not result.ok
        assert result.message == "Error deleting cluster: no such cluster"
        assert result.error_kind == ErrorKind.NOT_FOUND

    def test_configuration_error_kind(self):
        result = OperationResult.failure("run", "Error", ConfigurationError("bad"))
        assert result.error_kind == ErrorKind.CONFIGURATION
