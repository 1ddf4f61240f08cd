"""
show vpc

Domain status on top, then the peer-link and one row per vPC. VLAN sets
(``up_vlans``) are kept as the device prints them, e.g. ``1-100,302-501``.
"""

from typing import Any, cast

from cisco_nxapi.base.codec import Field, Schema, Table
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import ResponseDict, ResultDict, ShowVPCDict

COMMAND = "show vpc"

PEER_LINK = Schema(
    {
        "id": Field("peer-link-id"),
        "interface": Field("peerlink-ifindex"),
        "port_state": Field("peer-link-port-state"),
        "up_vlans": Field("peer-up-vlan-bitset"),
    }
)

VPC = Schema(
    {
        "id": Field("vpc-id", int),
        "interface": Field("vpc-ifindex"),
        "port_state": Field("vpc-port-state"),
        "physical_port_removed": Field("phy-port-if-removed"),
        "through_peer_link": Field("vpc-thru-peerlink"),
        "consistency": Field("vpc-consistency"),
        "consistency_status": Field("vpc-consistency-status"),
        "up_vlans": Field("up-vlan-bitset"),
        "es_attr": Field("es-attr"),
    }
)

BODY = Schema(
    {
        "domain_id": Field("vpc-domain-id"),
        "peer_status": Field("vpc-peer-status"),
        "peer_status_reason": Field("vpc-peer-status-reason"),
        "peer_keepalive_status": Field("vpc-peer-keepalive-status"),
        "peer_consistency": Field("vpc-peer-consistency"),
        "per_vlan_peer_consistency": Field("vpc-per-vlan-peer-consistency"),
        "peer_consistency_status": Field("vpc-peer-consistency-status"),
        "type2_consistency": Field("vpc-type-2-consistency"),
        "type2_consistency_status": Field("vpc-type-2-consistency-status"),
        "role": Field("vpc-role"),
        "number_of_vpcs": Field("num-of-vpcs", int),
        "peer_gateway": Field("peer-gateway"),
        "dual_active_excluded_vlans": Field("dual-active-excluded-vlans"),
        "graceful_consistency_check": Field("vpc-graceful-consistency-check-status"),
        "auto_recovery_status": Field("vpc-auto-recovery-status"),
        "delay_restore_status": Field("vpc-delay-restore-status"),
        "delay_restore_svi_status": Field("vpc-delay-restore-svi-status"),
        "operational_l3_peer": Field("operational-l3-peer"),
        "peer_links": Table("TABLE_peerlink", "ROW_peerlink", PEER_LINK),
        "vpcs": Table("TABLE_vpc", "ROW_vpc", VPC),
    }
)


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> ShowVPCDict:
    return cast(ShowVPCDict, decode_body(data, BODY))
