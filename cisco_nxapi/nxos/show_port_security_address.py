"""show port-security address"""

import logging
from typing import Any, List, cast

from cisco_nxapi.base import helpers
from cisco_nxapi.base.codec import Field, ListOf, Schema, Table
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import (
    PortSecurityAddressDict,
    PortSecurityDict,
    ResponseDict,
    ResultDict,
)

logger = logging.getLogger(__name__)

COMMAND = "show port-security address"

ADDRESS = Schema(
    {
        "interface": Field("if_index"),
        "vlan_id": Field("vlan_id", int),
        "type": Field("type"),
        "mac": Field("mac_addr"),
        "remaining_age": Field("remain_age", int),
        "remote_learnt": Field("remote_learnt", int),
        "remote_aged": Field("remote_aged", int),
        "num_elems": Field("num_elems", ListOf(int)),
        "cmd_addr_index": Field("cmd_addr_index", ListOf(int)),
    }
)

BODY = Schema(
    {
        "total_addresses": Field("total_addr", int),
        "max_system_limit": Field("max_sys_limit", int),
        "addresses": Table(
            "TABLE_eth_port_sec_mac_addrs", "ROW_eth_port_sec_mac_addrs", ADDRESS
        ),
    }
)


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> PortSecurityDict:
    return cast(PortSecurityDict, decode_body(data, BODY))


def flat(body: PortSecurityDict) -> List[PortSecurityAddressDict]:
    """
    Secure addresses with the MAC in EUI format and the full interface name.

    :param body: a body returned by :func:`parse_body`.
    """
    addresses = []
    for address in body["addresses"]:
        entry = dict(address)
        if address["mac"]:
            entry["mac"] = helpers.mac(address["mac"])
        if address["interface"]:
            entry["interface"] = helpers.canonical_interface_name(address["interface"])
        addresses.append(cast(PortSecurityAddressDict, entry))
    logger.debug("Flattened %d secure addresses", len(addresses))
    return addresses
