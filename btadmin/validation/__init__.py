"""API resource-name validation module"""

from .api_validators import (
    ValidationError,
    project_path,
    instance_path,
    cluster_path,
    location_path,
    instance_id_from_name,
    cluster_id_from_name,
    location_from_name,
)

__all__ = [
    "ValidationError",
    "project_path",
    "instance_path",
    "cluster_path",
    "location_path",
    "instance_id_from_name",
    "cluster_id_from_name",
    "location_from_name",
]
