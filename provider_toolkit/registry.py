"""
Registry of the waiters and ID codecs exposed on the command line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from provider_toolkit.services.apigatewayv2 import waiter as apigatewayv2_waiter
from provider_toolkit.services.ec2 import id_codec
from provider_toolkit.services.ec2 import waiter as ec2_waiter
from provider_toolkit.services.efs import waiter as efs_waiter
from provider_toolkit.services.kinesis import waiter as kinesis_waiter
from provider_toolkit.services.sns import waiter as sns_waiter


@dataclass(frozen=True)
class WaiterEntry:
    """A service waiter callable from the CLI."""

    service: str
    func: Callable
    description: str
    accepts_timeout: bool = False
    accepts_expected: bool = False


@dataclass(frozen=True)
class IdCodecEntry:
    """A composite ID format: how to build it and how to split it."""

    create: Callable[..., str]
    parse: Callable[[str], tuple]
    part_names: tuple
    optional_parts: int = 0


WAITERS: dict[str, WaiterEntry] = {
    "efs-access-point-created": WaiterEntry(
        "efs", efs_waiter.wait_access_point_created, "EFS access point becomes available"
    ),
    "efs-access-point-deleted": WaiterEntry(
        "efs", efs_waiter.wait_access_point_deleted, "EFS access point is gone"
    ),
    "efs-file-system-available": WaiterEntry(
        "efs", efs_waiter.wait_file_system_available, "EFS file system becomes available"
    ),
    "efs-file-system-deleted": WaiterEntry(
        "efs", efs_waiter.wait_file_system_deleted, "EFS file system is gone"
    ),
    "sns-subscription-confirmed": WaiterEntry(
        "sns",
        sns_waiter.wait_subscription_confirmed,
        "SNS subscription PendingConfirmation equals --expected",
        accepts_timeout=True,
        accepts_expected=True,
    ),
    "sns-subscription-deleted": WaiterEntry(
        "sns", sns_waiter.wait_subscription_deleted, "SNS subscription is gone"
    ),
    "apigatewayv2-domain-name-available": WaiterEntry(
        "apigatewayv2",
        apigatewayv2_waiter.wait_domain_name_available,
        "API Gateway v2 domain name finishes updating",
        accepts_timeout=True,
    ),
    "kinesis-stream-consumer-created": WaiterEntry(
        "kinesis", kinesis_waiter.wait_stream_consumer_created, "Kinesis consumer becomes ACTIVE"
    ),
    "kinesis-stream-consumer-deleted": WaiterEntry(
        "kinesis", kinesis_waiter.wait_stream_consumer_deleted, "Kinesis consumer is gone"
    ),
    "ec2-route-table-ready": WaiterEntry(
        "ec2", ec2_waiter.wait_route_table_ready, "Route table becomes visible"
    ),
    "ec2-route-table-deleted": WaiterEntry(
        "ec2", ec2_waiter.wait_route_table_deleted, "Route table is gone"
    ),
}


ID_CODECS: dict[str, IdCodecEntry] = {
    "client-vpn-authorization-rule": IdCodecEntry(
        id_codec.client_vpn_authorization_rule_create_id,
        id_codec.client_vpn_authorization_rule_parse_id,
        ("endpoint-id", "target-network-cidr", "group-id"),
        optional_parts=1,
    ),
    "client-vpn-network-association": IdCodecEntry(
        id_codec.client_vpn_network_association_create_id,
        id_codec.client_vpn_network_association_parse_id,
        ("endpoint-id", "association-id"),
    ),
    "client-vpn-route": IdCodecEntry(
        id_codec.client_vpn_route_create_id,
        id_codec.client_vpn_route_parse_id,
        ("endpoint-id", "target-subnet-id", "destination-cidr-block"),
    ),
    "transit-gateway-prefix-list-reference": IdCodecEntry(
        id_codec.transit_gateway_prefix_list_reference_create_id,
        id_codec.transit_gateway_prefix_list_reference_parse_id,
        ("transit-gateway-route-table-id", "prefix-list-id"),
    ),
}


ID_HASHES: dict[str, tuple[Callable[[str, str], str], tuple]] = {
    "route": (id_codec.route_create_id, ("route-table-id", "destination")),
    "vpn-attachment": (
        id_codec.vpn_gateway_vpc_attachment_create_id,
        ("vpn-gateway-id", "vpc-id"),
    ),
}
