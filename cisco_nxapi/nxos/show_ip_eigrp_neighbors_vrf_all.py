"""show ip eigrp neighbors vrf all: peer uptimes are ISO-8601 durations."""

from typing import Any, cast

from cisco_nxapi.base.codec import Field, Schema, Table
from cisco_nxapi.base.duration import Duration
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import EIGRPNeighborsDict, ResponseDict, ResultDict

COMMAND = "show ip eigrp neighbors vrf all"

PEER = Schema(
    {
        "handle": Field("peer_handle", int),
        "address": Field("peer_ipaddr"),
        "interface": Field("peer_ifname"),
        "hold_time": Field("peer_holdtime", int),
        "srtt": Field("peer_srtt", int),
        "rto": Field("peer_rto", int),
        "queue_count": Field("peer_xmitq_count", int),
        "last_sequence": Field("peer_last_seqno", int),
        "uptime": Field("peer_uptime", Duration),
    }
)

VRF = Schema(
    {
        "vrf_name": Field("vrf"),
        "peers": Table("TABLE_peer", "ROW_peer", PEER),
    }
)

ASN = Schema({"asn": Field("asn"), "vrfs": Table("TABLE_vrf", "ROW_vrf", VRF)})

BODY = Schema({"autonomous_systems": Table("TABLE_asn", "ROW_asn", ASN)})


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> EIGRPNeighborsDict:
    return cast(EIGRPNeighborsDict, decode_body(data, BODY))
