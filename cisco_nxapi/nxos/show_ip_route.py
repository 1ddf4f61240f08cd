"""
show ip route

Routes are nested four levels deep: VRF, address family, prefix and path.
The uptime of each path is an ISO-8601 duration (``P7DT1H2M3S``).
"""

import logging
from typing import Any, List, cast

from cisco_nxapi.base.codec import Field, Schema, Table
from cisco_nxapi.base.duration import Duration
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import (
    ResponseDict,
    ResultDict,
    RouteDict,
    RouteTableDict,
)

logger = logging.getLogger(__name__)

COMMAND = "show ip route"

PATH = Schema(
    {
        "next_hop": Field("ipnexthop"),
        "interface": Field("ifname"),
        "client_name": Field("clientname"),
        "metric": Field("metric", int),
        "preference": Field("pref", int),
        "ubest": Field("ubest", bool),
        "mbest": Field("mbest", bool),
        "uptime": Field("uptime", Duration),
        "route_type": Field("type"),
        "tag": Field("tag", int),
    }
)

PREFIX = Schema(
    {
        "prefix": Field("ipprefix"),
        "ucast_nhops": Field("ucast-nhops", int),
        "mcast_nhops": Field("mcast-nhops", int),
        "attached": Field("attached", bool),
        "paths": Table("TABLE_path", "ROW_path", PATH),
    }
)

ADDRESS_FAMILY = Schema(
    {
        "address_family": Field("addrf"),
        "prefixes": Table("TABLE_prefix", "ROW_prefix", PREFIX),
    }
)

VRF = Schema(
    {
        "vrf_name": Field("vrf-name-out"),
        "address_families": Table("TABLE_addrf", "ROW_addrf", ADDRESS_FAMILY),
    }
)

BODY = Schema({"vrfs": Table("TABLE_vrf", "ROW_vrf", VRF)})


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> RouteTableDict:
    return cast(RouteTableDict, decode_body(data, BODY))


def routes(body: RouteTableDict, best_only: bool = False) -> List[RouteDict]:
    """
    One record per path, carrying its VRF, address family and prefix.

    :param body: a body returned by :func:`parse_body`.
    :param best_only: keep only the best unicast paths.
    """
    records = []
    for vrf in body["vrfs"]:
        for family in vrf["address_families"]:
            for prefix in family["prefixes"]:
                for path in prefix["paths"]:
                    if best_only and not path["ubest"]:
                        continue
                    records.append(
                        cast(
                            RouteDict,
                            {
                                "vrf_name": vrf["vrf_name"],
                                "address_family": family["address_family"],
                                "prefix": prefix["prefix"],
                                "attached": prefix["attached"],
                                "next_hop": path["next_hop"],
                                "interface": path["interface"],
                                "client_name": path["client_name"],
                                "metric": path["metric"],
                                "preference": path["preference"],
                                "best": path["ubest"],
                                "uptime": path["uptime"],
                            },
                        )
                    )
    logger.debug("Flattened %d route paths", len(records))
    return records
