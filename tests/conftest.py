"""Pytest configuration and fixtures"""

import pytest
from unittest.mock import AsyncMock, Mock
from google.cloud.bigtable_admin_v2 import types as admin_types

from btadmin.models.resources import ClusterInfo, InstanceInfo
from btadmin.services.bigtable_client import BigtableAdminClient
from btadmin.services.instance_service import InstanceAdminService

PROJECT_ID = "test-project"


@pytest.fixture
def sample_instance():
    """Instance as returned by the client wrapper"""
    return InstanceInfo(
        instance_id="foo",
        display_name="foo",
        type="PRODUCTION",
        state="READY",
        labels={"prod-label": "prod-label"},
    )


@pytest.fixture
def sample_cluster():
    """Cluster as returned by the client wrapper"""
    return ClusterInfo(
        cluster_id="bar",
        location="us-central1-f",
        storage="SSD",
        nodes=3,
        state="READY",
    )


@pytest.fixture
def mock_client(sample_instance, sample_cluster):
    """Admin client wrapper whose calls all succeed; the instance is absent"""
    client = AsyncMock(spec=BigtableAdminClient)
    client.project_id = PROJECT_ID
    client.instance_exists.return_value = False
    client.create_instance.return_value = sample_instance
    client.get_instances.return_value = [sample_instance]
    client.get_instance.return_value = sample_instance
    client.get_clusters.return_value = [sample_cluster]
    client.create_cluster.return_value = sample_cluster
    client.delete_instance.return_value = None
    client.delete_cluster.return_value = None
    return client


@pytest.fixture
def service(mock_client):
    """Instance admin service over the mock client"""
    return InstanceAdminService(mock_client)


@pytest.fixture
def instance_proto():
    """SDK Instance message"""
    return admin_types.Instance(
        name=f"projects/{PROJECT_ID}/instances/foo",
        display_name="foo",
        type_=admin_types.Instance.Type.PRODUCTION,
        state=admin_types.Instance.State.READY,
        labels={"prod-label": "prod-label"},
    )


@pytest.fixture
def cluster_proto():
    """SDK Cluster message"""
    return admin_types.Cluster(
        name=f"projects/{PROJECT_ID}/instances/foo/clusters/bar",
        location=f"projects/{PROJECT_ID}/locations/us-central1-f",
        state=admin_types.Cluster.State.READY,
        serve_nodes=3,
        default_storage_type=admin_types.StorageType.SSD,
    )


@pytest.fixture
def mock_admin():
    """SDK BigtableInstanceAdminAsyncClient stand-in"""
    admin = AsyncMock()
    admin.transport = Mock()
    admin.transport.close = AsyncMock()
    return admin


@pytest.fixture
def admin_client(mock_admin):
    """Client wrapper wired to the SDK stand-in"""
    client = BigtableAdminClient(PROJECT_ID, request_timeout=30.0)
    client._admin = mock_admin
    return client


@pytest.fixture
def make_operation():
    """Factory for long-running operations whose result() resolves to a value"""
    def _make(result):
        operation = Mock()
        operation.result = AsyncMock(return_value=result)
        return operation
    return _make
