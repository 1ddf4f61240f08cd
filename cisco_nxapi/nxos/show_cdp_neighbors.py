"""
show cdp neighbors

``capability`` is a list when the neighbor advertises more than one and a
plain string otherwise; it always decodes to a list.
"""

from typing import Any, cast

from cisco_nxapi.base.codec import Field, ListOf, Schema, Table
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import CDPNeighborsDict, ResponseDict, ResultDict

COMMAND = "show cdp neighbors"

NEIGHBOR = Schema(
    {
        "ifindex": Field("ifindex", int),
        "device_id": Field("device_id"),
        "local_interface": Field("intf_id"),
        "ttl": Field("ttl", int),
        "capability": Field("capability", ListOf(str)),
        "platform_id": Field("platform_id"),
        "port_id": Field("port_id"),
    }
)

BODY = Schema(
    {
        "neighbors": Table(
            "TABLE_cdp_neighbor_brief_info", "ROW_cdp_neighbor_brief_info", NEIGHBOR
        )
    }
)


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> CDPNeighborsDict:
    return cast(CDPNeighborsDict, decode_body(data, BODY))
