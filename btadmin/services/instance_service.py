"""Bigtable instance and cluster lifecycle operations"""

import logging

from btadmin.config.settings import Settings
from btadmin.exceptions import BtadminError
from btadmin.models.resources import (
    ClusterSpec,
    InstanceSpec,
    InstanceType,
    OperationResult,
    RunReport,
    StorageType,
)
from btadmin.services.bigtable_client import BigtableAdminClient

logger = logging.getLogger("btadmin")

PRODUCTION_LABELS = {"prod-label": "prod-label"}
DEVELOPMENT_LABELS = {"dev-label": "dev-label"}


class InstanceAdminService:
    """Runs the admin operations against a single BigtableAdminClient.

    Every remote call is awaited before the next one starts. A failing step
    stops its operation and is reported through the returned OperationResult;
    nothing is retried or rolled back.
    """

    def __init__(
        self,
        client: BigtableAdminClient,
        instance_location: str = "us-central1-f",
        cluster_location: str = "us-central1-c",
        cluster_nodes: int = 3
    ):
        """
        Initialize instance admin service

        Args:
            client: Admin client wrapper shared by all operations
            instance_location: Zone of the cluster created with a new instance
            cluster_location: Zone of clusters added to an existing instance
            cluster_nodes: Node count of PRODUCTION clusters
        """
        self.client = client
        self.instance_location = instance_location
        self.cluster_location = cluster_location
        self.cluster_nodes = cluster_nodes

    @classmethod
    def from_settings(cls, client: BigtableAdminClient, settings: Settings) -> "InstanceAdminService":
        return cls(
            client,
            instance_location=settings.instance_location,
            cluster_location=settings.cluster_location,
            cluster_nodes=settings.cluster_nodes,
        )

    def production_instance_spec(self, cluster_id: str) -> InstanceSpec:
        """PRODUCTION instance with a single ssd cluster"""
        return InstanceSpec(
            clusters=[
                ClusterSpec(
                    name=cluster_id,
                    location=self.instance_location,
                    storage=StorageType.SSD,
                    nodes=self.cluster_nodes,
                )
            ],
            type=InstanceType.PRODUCTION,
            labels=dict(PRODUCTION_LABELS),
        )

    def development_instance_spec(self, cluster_id: str) -> InstanceSpec:
        """DEVELOPMENT instance with a single hdd cluster and no node count"""
        return InstanceSpec(
            clusters=[
                ClusterSpec(
                    name=cluster_id,
                    location=self.instance_location,
                    storage=StorageType.HDD,
                )
            ],
            type=InstanceType.DEVELOPMENT,
            labels=dict(DEVELOPMENT_LABELS),
        )

    def additional_cluster_spec(self, cluster_id: str) -> ClusterSpec:
        return ClusterSpec(
            name=cluster_id,
            location=self.cluster_location,
            storage=StorageType.SSD,
            nodes=self.cluster_nodes,
        )

    @staticmethod
    def _failed(operation: str, prefix: str, error: BtadminError, data=None) -> OperationResult:
        logger.debug(f"{prefix}: {error}", exc_info=error)
        return OperationResult.failure(operation, prefix, error, data=data)

    async def run_instance_operations(self, instance_id: str, cluster_id: str) -> OperationResult:
        """
        Ensure a PRODUCTION instance exists, then list and inspect it

        Steps: existence check, create when absent, list instances, get the
        instance, list its clusters. The first failing step ends the run; the
        report in ``data`` keeps what earlier steps collected.
        """
        operation = "run"
        report = RunReport()

        logger.info("Check Instance Exists")
        try:
            exists = await self.client.instance_exists(instance_id)
        except BtadminError as e:
            return self._failed(operation, "Error checking if Instance exists", e, report)

        if not exists:
            logger.info("Creating a PRODUCTION Instance")
            try:
                report.created = await self.client.create_instance(
                    instance_id, self.production_instance_spec(cluster_id)
                )
            except BtadminError as e:
                return self._failed(operation, "Error creating prod-instance", e, report)
            logger.info(f"Created Instance: {report.created.instance_id}")
        else:
            logger.info(f"Instance {instance_id} exists")

        logger.info("Listing Instances")
        try:
            report.instances = await self.client.get_instances()
        except BtadminError as e:
            return self._failed(operation, "Error listing instances", e, report)

        logger.info("Get Instance")
        try:
            report.instance = await self.client.get_instance(instance_id)
        except BtadminError as e:
            return self._failed(operation, "Error getting instance", e, report)

        logger.info("Listing Clusters")
        try:
            report.clusters = await self.client.get_clusters(instance_id)
        except BtadminError as e:
            return self._failed(operation, "Error listing clusters", e, report)

        return OperationResult.success(
            operation, f"Instance operations completed for {instance_id}", report
        )

    async def create_dev_instance(self, instance_id: str, cluster_id: str) -> OperationResult:
        """Create a DEVELOPMENT instance; duplicates are rejected by the API"""
        operation = "dev-instance"
        logger.info("Creating a DEVELOPMENT Instance")
        try:
            instance = await self.client.create_instance(
                instance_id, self.development_instance_spec(cluster_id)
            )
        except BtadminError as e:
            return self._failed(operation, "Error creating dev-instance", e)
        return OperationResult.success(
            operation, f"Created development instance: {instance.instance_id}", instance
        )

    async def delete_instance(self, instance_id: str) -> OperationResult:
        operation = "del-instance"
        logger.info("Deleting Instance")
        try:
            await self.client.delete_instance(instance_id)
        except BtadminError as e:
            return self._failed(operation, "Error deleting instance", e)
        return OperationResult.success(operation, f"Instance deleted: {instance_id}")

    async def add_cluster(self, instance_id: str, cluster_id: str) -> OperationResult:
        """
        Add a cluster to an existing instance

        A missing instance is not an error: nothing is created and the
        result says so.
        """
        operation = "add-cluster"
        try:
            exists = await self.client.instance_exists(instance_id)
        except BtadminError as e:
            return self._failed(operation, "Error checking if Instance exists", e)

        if not exists:
            logger.info("Instance does not exist")
            return OperationResult.success(operation, f"Instance {instance_id} does not exist")

        logger.info(f"Adding Cluster to Instance {instance_id}")
        try:
            cluster = await self.client.create_cluster(
                instance_id, self.additional_cluster_spec(cluster_id)
            )
        except BtadminError as e:
            return self._failed(operation, "Error creating cluster", e)
        return OperationResult.success(operation, f"Cluster created: {cluster.cluster_id}", cluster)

    async def delete_cluster(self, instance_id: str, cluster_id: str) -> OperationResult:
        operation = "del-cluster"
        logger.info("Deleting Cluster")
        try:
            await self.client.delete_cluster(instance_id, cluster_id)
        except BtadminError as e:
            return self._failed(operation, "Error deleting cluster", e)
        return OperationResult.success(operation, f"Cluster deleted: {cluster_id}")
