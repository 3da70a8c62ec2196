"""Resource-name builders and validators for Bigtable admin API data"""

import re

from btadmin.exceptions import BtadminError, ErrorKind


_INSTANCE_NAME_RE = re.compile(r"^projects/(?P<project>[^/]+)/instances/(?P<instance>[^/]+)$")
_CLUSTER_NAME_RE = re.compile(
    r"^projects/(?P<project>[^/]+)/instances/(?P<instance>[^/]+)/clusters/(?P<cluster>[^/]+)$"
)
_LOCATION_NAME_RE = re.compile(r"^projects/(?P<project>[^/]+)/locations/(?P<location>[^/]+)$")


class ValidationError(BtadminError):
    """Raised when API response validation fails"""
    kind = ErrorKind.INVALID_ARGUMENT


def project_path(project_id: str) -> str:
    """Build the parent path used to create and list instances"""
    return f"projects/{project_id}"


def instance_path(project_id: str, instance_id: str) -> str:
    """Build the fully-qualified name of an instance"""
    return f"projects/{project_id}/instances/{instance_id}"


def cluster_path(project_id: str, instance_id: str, cluster_id: str) -> str:
    """Build the fully-qualified name of a cluster"""
    return f"projects/{project_id}/instances/{instance_id}/clusters/{cluster_id}"


def location_path(project_id: str, location: str) -> str:
    """Build the fully-qualified name of a zone, e.g. for ``us-central1-f``"""
    return f"projects/{project_id}/locations/{location}"


def instance_id_from_name(name: str) -> str:
    """
    Extract the instance id from a fully-qualified instance name

    Args:
        name: Name as returned by the API (``projects/p/instances/i``)

    Returns:
        The trailing instance id

    Raises:
        ValidationError: If the name is not an instance resource name
    """
    match = _INSTANCE_NAME_RE.match(name or "")
    if not match:
        raise ValidationError(f"Invalid instance resource name: {name!r}")
    return match.group("instance")


def cluster_id_from_name(name: str) -> str:
    """
    Extract the cluster id from a fully-qualified cluster name

    Raises:
        ValidationError: If the name is not a cluster resource name
    """
    match = _CLUSTER_NAME_RE.match(name or "")
    if not match:
        raise ValidationError(f"Invalid cluster resource name: {name!r}")
    return match.group("cluster")


def location_from_name(name: str) -> str:
    """Extract the zone from a location resource name.

    Bare zones are returned unchanged; an empty value is rejected.
    """
    if not name:
        raise ValidationError("Missing location in cluster data")
    match = _LOCATION_NAME_RE.match(name)
    if match:
        return match.group("location")
    if "/" in name:
        raise ValidationError(f"Invalid location resource name: {name!r}")
    return name
