"""
Composite resource IDs for EC2 resources.

Several EC2 resources have no single AWS identifier, so their ID is built by
joining the identifiers they depend on with a resource-specific separator, or
by hashing a natural key. These strings are persisted in state: separators,
prefixes and the hash algorithm must never change.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from provider_toolkit.common.hashcode import string_hash

CLIENT_VPN_AUTHORIZATION_RULE_ID_SEPARATOR = ","
CLIENT_VPN_NETWORK_ASSOCIATION_ID_SEPARATOR = ","
CLIENT_VPN_ROUTE_ID_SEPARATOR = ","
TRANSIT_GATEWAY_PREFIX_LIST_REFERENCE_SEPARATOR = "_"


class IdParseError(ValueError):
    """Raised when a composite ID does not match its expected form."""

    def __init__(self, resource_id: str, expected_form: str):
        super().__init__(f"unexpected format for ID ({resource_id!r}), expected {expected_form}")
        self.resource_id = resource_id
        self.expected_form = expected_form


def _check_separator(separator: str) -> None:
    if len(separator) != 1:
        raise ValueError(f"ID separator must be a single character, got {separator!r}")


def create_id(parts: Sequence[str], separator: str, optional_parts: Iterable[str] = ()) -> str:
    """
    Join ID parts with a separator.

    Args:
        parts: Required parts, all non-empty
        separator: Single-character separator
        optional_parts: Trailing parts, each appended only when non-empty

    Returns:
        str: The composite ID

    Raises:
        ValueError: If a required part is empty or a part contains the separator
    """
    _check_separator(separator)
    if not parts:
        raise ValueError("a composite ID needs at least one part")
    joined = list(parts) + [part for part in optional_parts if part]
    for index, part in enumerate(joined):
        if not part:
            raise ValueError(f"ID part {index} must not be empty")
        if separator in part:
            raise ValueError(f"ID part {part!r} must not contain the separator {separator!r}")
    return separator.join(joined)


def parse_id(resource_id: str, separator: str, arities: Iterable[int], expected_form: str) -> list[str]:
    """
    Split a composite ID and validate its shape.

    Args:
        resource_id: The ID to parse
        separator: Single-character separator
        arities: Accepted part counts, e.g. (2, 3)
        expected_form: Template quoted in the error message

    Returns:
        list: The non-empty parts

    Raises:
        IdParseError: On a wrong part count or an empty part
    """
    _check_separator(separator)
    parts = resource_id.split(separator)
    if len(parts) not in set(arities) or not all(parts):
        raise IdParseError(resource_id, expected_form)
    return parts


# Client VPN authorization rules: endpoint-id,target-network-cidr[,group-id]


def client_vpn_authorization_rule_create_id(endpoint_id, target_network_cidr, access_group_id=""):
    return create_id(
        [endpoint_id, target_network_cidr],
        CLIENT_VPN_AUTHORIZATION_RULE_ID_SEPARATOR,
        optional_parts=[access_group_id],
    )


def client_vpn_authorization_rule_parse_id(resource_id):
    """Return (endpoint_id, target_network_cidr, access_group_id); the group is "" when omitted."""
    sep = CLIENT_VPN_AUTHORIZATION_RULE_ID_SEPARATOR
    parts = parse_id(
        resource_id,
        sep,
        (2, 3),
        f"endpoint-id{sep}target-network-cidr or endpoint-id{sep}target-network-cidr{sep}group-id",
    )
    if len(parts) == 2:
        return parts[0], parts[1], ""
    return parts[0], parts[1], parts[2]


# Client VPN network associations: endpoint-id,association-id


def client_vpn_network_association_create_id(endpoint_id, association_id):
    return create_id([endpoint_id, association_id], CLIENT_VPN_NETWORK_ASSOCIATION_ID_SEPARATOR)


def client_vpn_network_association_parse_id(resource_id):
    sep = CLIENT_VPN_NETWORK_ASSOCIATION_ID_SEPARATOR
    endpoint_id, association_id = parse_id(resource_id, sep, (2,), f"endpoint-id{sep}association-id")
    return endpoint_id, association_id


# Client VPN routes: endpoint-id,target-subnet-id,destination-cidr-block


def client_vpn_route_create_id(endpoint_id, target_subnet_id, destination_cidr):
    return create_id([endpoint_id, target_subnet_id, destination_cidr], CLIENT_VPN_ROUTE_ID_SEPARATOR)


def client_vpn_route_parse_id(resource_id):
    sep = CLIENT_VPN_ROUTE_ID_SEPARATOR
    endpoint_id, target_subnet_id, destination_cidr = parse_id(
        resource_id,
        sep,
        (3,),
        f"endpoint-id{sep}target-subnet-id{sep}destination-cidr-block",
    )
    return endpoint_id, target_subnet_id, destination_cidr


# Transit gateway prefix list references: transit-gateway-route-table-id_prefix-list-id


def transit_gateway_prefix_list_reference_create_id(transit_gateway_route_table_id, prefix_list_id):
    return create_id(
        [transit_gateway_route_table_id, prefix_list_id],
        TRANSIT_GATEWAY_PREFIX_LIST_REFERENCE_SEPARATOR,
    )


def transit_gateway_prefix_list_reference_parse_id(resource_id):
    sep = TRANSIT_GATEWAY_PREFIX_LIST_REFERENCE_SEPARATOR
    route_table_id, prefix_list_id = parse_id(
        resource_id, sep, (2,), f"transit-gateway-route-table-id{sep}prefix-list-id"
    )
    return route_table_id, prefix_list_id


# Synthesized IDs


def route_create_id(route_table_id, destination):
    """Return a route ID: "r-" + route table ID + decimal hash of the destination."""
    return f"r-{route_table_id}{string_hash(destination)}"


def vpn_gateway_vpc_attachment_create_id(vpn_gateway_id, vpc_id):
    """Return a VPN gateway attachment ID: "vpn-attachment-" + hex hash of "<vpc>-<vgw>"."""
    return f"vpn-attachment-{string_hash(f'{vpc_id}-{vpn_gateway_id}'):x}"
