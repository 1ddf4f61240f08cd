"""show ntp peer-status"""

from typing import Any, cast

from cisco_nxapi.base.codec import Field, Schema, Table
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import NTPPeerStatusDict, ResponseDict, ResultDict

COMMAND = "show ntp peer-status"

PEER = Schema(
    {
        "sync_mode": Field("syncmode"),
        "remote": Field("remote"),
        "local": Field("local"),
        "stratum": Field("st", int),
        "poll": Field("poll", int),
        "reach": Field("reach"),
        "delay": Field("delay", float),
        "vrf": Field("vrf"),
    }
)

BODY = Schema({"peers": Table("TABLE_peersstatus", "ROW_peersstatus", PEER)})


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> NTPPeerStatusDict:
    return cast(NTPPeerStatusDict, decode_body(data, BODY))
