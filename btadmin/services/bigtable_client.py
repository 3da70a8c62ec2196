"""Async Bigtable instance admin client wrapper"""

import logging
from contextlib import contextmanager
from typing import List, Optional

import google.auth
from google.api_core import exceptions as api_exceptions
from google.api_core.client_options import ClientOptions
from google.auth.exceptions import DefaultCredentialsError, GoogleAuthError
from google.cloud.bigtable_admin_v2 import BigtableInstanceAdminAsyncClient
from google.cloud.bigtable_admin_v2 import types as admin_types
from google.oauth2 import service_account

from btadmin.config.settings import Settings
from btadmin.exceptions import (
    BigtableAlreadyExistsError,
    BigtableConnectionError,
    BigtableCredentialsError,
    BigtableError,
    BigtableNotFoundError,
    BigtablePermissionError,
    BigtableRequestError,
    ConfigurationError,
)
from btadmin.models.resources import (
    ClusterInfo,
    ClusterSpec,
    InstanceInfo,
    InstanceSpec,
    InstanceType,
    StorageType,
)
from btadmin.validation import (
    cluster_path,
    instance_path,
    location_path,
    project_path,
)

logger = logging.getLogger("btadmin")

_INSTANCE_TYPES = {
    InstanceType.PRODUCTION: admin_types.Instance.Type.PRODUCTION,
    InstanceType.DEVELOPMENT: admin_types.Instance.Type.DEVELOPMENT,
}

_STORAGE_TYPES = {
    StorageType.SSD: admin_types.StorageType.SSD,
    StorageType.HDD: admin_types.StorageType.HDD,
}


def translate_error(error: Exception, action: str) -> BigtableError:
    """
    Map a google-api-core or google-auth exception onto the btadmin hierarchy

    Args:
        error: Exception raised by the SDK
        action: Short description of the failed call, used in the message

    Returns:
        The matching BigtableError subclass instance
    """
    message = getattr(error, "message", None) or str(error)
    if isinstance(error, api_exceptions.NotFound):
        return BigtableNotFoundError(f"Failed to {action}: {message}")
    if isinstance(error, api_exceptions.AlreadyExists):
        return BigtableAlreadyExistsError(f"Failed to {action}: {message}")
    if isinstance(error, api_exceptions.Forbidden):
        return BigtablePermissionError(f"Failed to {action}: {message}")
    if isinstance(error, api_exceptions.Unauthorized):
        return BigtableCredentialsError(f"Failed to {action}: {message}")
    if isinstance(error, api_exceptions.BadRequest):
        return BigtableRequestError(f"Failed to {action}: {message}")
    if isinstance(error, (
        api_exceptions.ServiceUnavailable,
        api_exceptions.DeadlineExceeded,
        api_exceptions.RetryError,
    )):
        return BigtableConnectionError(f"Failed to {action}: {message}")
    if isinstance(error, GoogleAuthError):
        return BigtableCredentialsError(
            f"Failed to {action}: {message}\n"
            "Configure credentials using:\n"
            "  - gcloud CLI: gcloud auth application-default login\n"
            "  - Environment variable: GOOGLE_APPLICATION_CREDENTIALS\n"
            "  - Or set credentials_file in ~/.btadmin/config.toml"
        )
    return BigtableError(f"Failed to {action}: {message}")


@contextmanager
def _api_errors(action: str):
    """Re-raise SDK errors from the enclosed block as BigtableError"""
    try:
        yield
    except (api_exceptions.GoogleAPIError, GoogleAuthError) as e:
        logger.debug(f"Admin API call failed ({action}): {e!r}")
        raise translate_error(e, action) from e


def load_credentials(credentials_file: str) -> service_account.Credentials:
    """Load service account credentials from a JSON key file"""
    try:
        return service_account.Credentials.from_service_account_file(credentials_file)
    except (OSError, ValueError) as e:
        raise ConfigurationError(
            f"Cannot load credentials from '{credentials_file}': {e}"
        ) from e


def default_project_id() -> str:
    """
    Resolve the project from Application Default Credentials

    Raises:
        BigtableCredentialsError: If no default credentials are available
        ConfigurationError: If the credentials carry no project
    """
    try:
        _, project_id = google.auth.default()
    except DefaultCredentialsError as e:
        raise translate_error(e, "load default credentials") from e
    if not project_id:
        raise ConfigurationError(
            "No Google Cloud project configured. "
            "Pass --project or set BTADMIN_PROJECT_ID."
        )
    return project_id


class BigtableAdminClient:
    """Async wrapper around the Bigtable instance admin API.

    One instance owns one lazily created SDK client. Use it as an async
    context manager so the underlying gRPC channel is closed on exit:

        async with BigtableAdminClient("my-project") as client:
            exists = await client.instance_exists("my-instance")
    """

    def __init__(
        self,
        project_id: str,
        credentials=None,
        api_endpoint: Optional[str] = None,
        request_timeout: float = 60.0
    ):
        """
        Initialize admin client

        Args:
            project_id: Google Cloud project that owns the instances
            credentials: Optional google-auth credentials (ADC when None)
            api_endpoint: Optional admin API endpoint override
            request_timeout: Per-RPC timeout in seconds (default: 60)
        """
        self.project_id = project_id
        self.credentials = credentials
        self.api_endpoint = api_endpoint
        self.request_timeout = request_timeout
        self._admin: Optional[BigtableInstanceAdminAsyncClient] = None

    @classmethod
    def from_settings(cls, settings: Settings, project_id: Optional[str] = None) -> "BigtableAdminClient":
        """
        Build a client from settings

        Project precedence: explicit argument, settings, the service
        account key file, then Application Default Credentials.
        """
        project = project_id or settings.project_id
        credentials = None
        if settings.credentials_file:
            credentials = load_credentials(settings.credentials_file)
            project = project or credentials.project_id
        if not project:
            project = default_project_id()
        logger.debug(f"Using project {project}")
        return cls(
            project,
            credentials=credentials,
            api_endpoint=settings.api_endpoint,
            request_timeout=settings.request_timeout,
        )

    def _get_admin(self) -> BigtableInstanceAdminAsyncClient:
        """Get SDK admin client (lazy initialization)"""
        if self._admin is None:
            options = ClientOptions(api_endpoint=self.api_endpoint) if self.api_endpoint else None
            with _api_errors("create admin client"):
                self._admin = BigtableInstanceAdminAsyncClient(
                    credentials=self.credentials,
                    client_options=options,
                )
        return self._admin

    async def __aenter__(self):
        """Async context manager entry"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - close the gRPC channel"""
        await self.close()
        return False

    async def close(self) -> None:
        """Close the SDK client's transport if one was created"""
        if self._admin is None:
            return
        admin, self._admin = self._admin, None
        await admin.transport.close()

    def _cluster_proto(self, spec: ClusterSpec) -> admin_types.Cluster:
        cluster = admin_types.Cluster(
            location=location_path(self.project_id, spec.location),
            default_storage_type=_STORAGE_TYPES[spec.storage],
        )
        # DEVELOPMENT clusters must leave serve_nodes unset
        if spec.nodes is not None:
            cluster.serve_nodes = spec.nodes
        return cluster

    async def instance_exists(self, instance_id: str) -> bool:
        """Check whether an instance exists"""
        try:
            await self.get_instance(instance_id)
        except BigtableNotFoundError:
            return False
        return True

    async def create_instance(self, instance_id: str, spec: InstanceSpec) -> InstanceInfo:
        """
        Create an instance with its initial clusters

        Waits for the long-running operation to finish.

        Args:
            instance_id: New instance id, also used as its display name
            spec: Instance type, labels and clusters

        Returns:
            The created instance
        """
        admin = self._get_admin()
        instance = admin_types.Instance(
            display_name=instance_id,
            type_=_INSTANCE_TYPES[spec.type],
            labels=spec.labels,
        )
        clusters = {cluster.name: self._cluster_proto(cluster) for cluster in spec.clusters}
        with _api_errors(f"create instance {instance_id}"):
            operation = await admin.create_instance(
                parent=project_path(self.project_id),
                instance_id=instance_id,
                instance=instance,
                clusters=clusters,
                timeout=self.request_timeout,
            )
            created = await operation.result()
        return InstanceInfo.from_proto(created)

    async def get_instances(self) -> List[InstanceInfo]:
        """List all instances in the project"""
        admin = self._get_admin()
        with _api_errors("list instances"):
            response = await admin.list_instances(
                parent=project_path(self.project_id),
                timeout=self.request_timeout,
            )
        if response.failed_locations:
            logger.warning(
                f"Instances could not be listed in: {', '.join(response.failed_locations)}"
            )
        return [InstanceInfo.from_proto(instance) for instance in response.instances]

    async def get_instance(self, instance_id: str) -> InstanceInfo:
        """Fetch one instance"""
        admin = self._get_admin()
        with _api_errors(f"get instance {instance_id}"):
            instance = await admin.get_instance(
                name=instance_path(self.project_id, instance_id),
                timeout=self.request_timeout,
            )
        return InstanceInfo.from_proto(instance)

    async def delete_instance(self, instance_id: str) -> None:
        """Delete an instance and all of its clusters"""
        admin = self._get_admin()
        with _api_errors(f"delete instance {instance_id}"):
            await admin.delete_instance(
                name=instance_path(self.project_id, instance_id),
                timeout=self.request_timeout,
            )

    async def get_clusters(self, instance_id: str) -> List[ClusterInfo]:
        """List the clusters of an instance"""
        admin = self._get_admin()
        with _api_errors(f"list clusters of {instance_id}"):
            response = await admin.list_clusters(
                parent=instance_path(self.project_id, instance_id),
                timeout=self.request_timeout,
            )
        if response.failed_locations:
            logger.warning(
                f"Clusters could not be listed in: {', '.join(response.failed_locations)}"
            )
        return [ClusterInfo.from_proto(cluster) for cluster in response.clusters]

    async def create_cluster(self, instance_id: str, spec: ClusterSpec) -> ClusterInfo:
        """Create a cluster under an existing instance and wait for it"""
        admin = self._get_admin()
        with _api_errors(f"create cluster {spec.name}"):
            operation = await admin.create_cluster(
                parent=instance_path(self.project_id, instance_id),
                cluster_id=spec.name,
                cluster=self._cluster_proto(spec),
                timeout=self.request_timeout,
            )
            created = await operation.result()
        return ClusterInfo.from_proto(created)

    async def delete_cluster(self, instance_id: str, cluster_id: str) -> None:
        """Delete one cluster of an instance"""
        admin = self._get_admin()
        with _api_errors(f"delete cluster {cluster_id}"):
            await admin.delete_cluster(
                name=cluster_path(self.project_id, instance_id, cluster_id),
                timeout=self.request_timeout,
            )
