"""
show bgp sessions

Peer totals per VRF. The flap and the last read/write of each neighbor are
reported as ISO-8601 durations (``P7DT12H2M5S``).
"""

from typing import Any, cast

from cisco_nxapi.base.codec import Field, Schema, Table
from cisco_nxapi.base.duration import Duration
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import BGPSessionsDict, ResponseDict, ResultDict

COMMAND = "show bgp sessions"

NEIGHBOR = Schema(
    {
        "neighbor_id": Field("neighbor-id"),
        "remote_as": Field("remoteas", int),
        "state": Field("state"),
        "local_port": Field("localport", int),
        "remote_port": Field("remoteport", int),
        "connections_dropped": Field("connectionsdropped", int),
        "notifications_sent": Field("notificationssent", int),
        "notifications_received": Field("notificationsreceived", int),
        "last_flap": Field("lastflap", Duration),
        "last_read": Field("lastread", Duration),
        "last_write": Field("lastwrite", Duration),
    }
)

VRF = Schema(
    {
        "vrf_name": Field("vrf-name-out"),
        "router_id": Field("router-id"),
        "local_as": Field("local-as", int),
        "vrf_peers": Field("vrfpeers", int),
        "vrf_established_peers": Field("vrfestablishedpeers", int),
        "neighbors": Table("TABLE_neighbor", "ROW_neighbor", NEIGHBOR),
    }
)

BODY = Schema(
    {
        "local_as": Field("localas", int),
        "total_peers": Field("totalpeers", int),
        "total_established_peers": Field("totalestablishedpeers", int),
        "vrfs": Table("TABLE_vrf", "ROW_vrf", VRF),
    }
)


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> BGPSessionsDict:
    return cast(BGPSessionsDict, decode_body(data, BODY))
