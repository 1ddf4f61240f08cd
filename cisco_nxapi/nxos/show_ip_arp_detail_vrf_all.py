"""
show ip arp detail vrf all

Same layout as ``show ip arp`` but ``time-stamp`` is the wall clock time the
entry was learnt, and the physical interface behind an SVI is reported.
"""

from typing import Any, cast

from cisco_nxapi.base.codec import Field, Schema, Table
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import ARPDetailTableDict, ResponseDict, ResultDict
from cisco_nxapi.base.timestamp import TimeStamp

COMMAND = "show ip arp detail vrf all"

ADJACENCY = Schema(
    {
        "interface": Field("intf-out"),
        "ip": Field("ip-addr-out"),
        "mac": Field("mac"),
        "time_stamp": Field("time-stamp", TimeStamp),
        "physical_interface": Field("phy-intf"),
    }
)

VRF = Schema(
    {
        "vrf_name": Field("vrf-name-out"),
        "total": Field("cnt-total", int),
        "entries": Table("TABLE_adj", "ROW_adj", ADJACENCY),
    }
)

BODY = Schema({"vrfs": Table("TABLE_vrf", "ROW_vrf", VRF)})


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> ARPDetailTableDict:
    return cast(ARPDetailTableDict, decode_body(data, BODY))
