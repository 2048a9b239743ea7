"""Status probes for EFS file systems and access points."""

from botocore.exceptions import BotoCoreError, ClientError

from provider_toolkit.common.error_utils import is_not_found_error
from provider_toolkit.state_waiter import Absent, Present, TransportError

ACCESS_POINT_NOT_FOUND_CODE = "AccessPointNotFound"
FILE_SYSTEM_NOT_FOUND_CODE = "FileSystemNotFound"


def _first_item(output, key):
    items = (output or {}).get(key) or []
    if not items or items[0] is None:
        return None
    return items[0]


def access_point_lifecycle_state(efs_client, access_point_id):
    """
    Build a probe returning the access point description and its LifeCycleState.

    Args:
        efs_client: Boto3 EFS client
        access_point_id: Access point ID (fsap-...)

    Returns:
        callable: Zero-argument probe returning a ProbeResult
    """

    def refresh():
        try:
            output = efs_client.describe_access_points(AccessPointId=access_point_id)
        except (ClientError, BotoCoreError) as e:
            if is_not_found_error(e, ACCESS_POINT_NOT_FOUND_CODE):
                return Absent()
            return TransportError(e)

        access_point = _first_item(output, "AccessPoints")
        if access_point is None:
            return Absent()
        return Present(access_point, access_point.get("LifeCycleState", ""))

    return refresh


def file_system_lifecycle_state(efs_client, file_system_id):
    """
    Build a probe returning the file system description and its LifeCycleState.

    Args:
        efs_client: Boto3 EFS client
        file_system_id: File system ID (fs-...)

    Returns:
        callable: Zero-argument probe returning a ProbeResult
    """

    def refresh():
        try:
            output = efs_client.describe_file_systems(FileSystemId=file_system_id)
        except (ClientError, BotoCoreError) as e:
            if is_not_found_error(e, FILE_SYSTEM_NOT_FOUND_CODE):
                return Absent()
            return TransportError(e)

        file_system = _first_item(output, "FileSystems")
        if file_system is None:
            return Absent()
        return Present(file_system, file_system.get("LifeCycleState", ""))

    return refresh
