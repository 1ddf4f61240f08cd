"""show ip arp: the age of each entry is a clock or compact duration."""

import logging
from typing import Any, List, cast

from cisco_nxapi.base import helpers
from cisco_nxapi.base.codec import Field, Schema, Table
from cisco_nxapi.base.duration import Duration
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import (
    ARPFlatEntryDict,
    ARPTableDict,
    ResponseDict,
    ResultDict,
)

logger = logging.getLogger(__name__)

COMMAND = "show ip arp"

ADJACENCY = Schema(
    {
        "interface": Field("intf-out"),
        "ip": Field("ip-addr-out"),
        "mac": Field("mac"),
        "age": Field("time-stamp", Duration),
        "flags": Field("flags"),
        "incomplete": Field("incomplete", bool),
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


def parse_body(data: Any) -> ARPTableDict:
    return cast(ARPTableDict, decode_body(data, BODY))


def flat(body: ARPTableDict) -> List[ARPFlatEntryDict]:
    """
    All ARP entries in one list, each tagged with its VRF.

    Addresses are normalised (IP without leading zeros and in lowercase, MAC
    in EUI format) and interfaces get their full name. Incomplete entries
    have no MAC and keep it empty.

    :param body: a body returned by :func:`parse_body`.
    :raise ValueError: if an address is not valid.
    """
    entries = []
    for vrf in body["vrfs"]:
        for adjacency in vrf["entries"]:
            entry = dict(adjacency, vrf_name=vrf["vrf_name"])
            if adjacency["ip"]:
                entry["ip"] = helpers.ip(adjacency["ip"])
            if adjacency["mac"]:
                entry["mac"] = helpers.mac(adjacency["mac"])
            if adjacency["interface"]:
                entry["interface"] = helpers.canonical_interface_name(
                    adjacency["interface"]
                )
            entries.append(cast(ARPFlatEntryDict, entry))
    logger.debug("Flattened %d ARP entries", len(entries))
    return entries
