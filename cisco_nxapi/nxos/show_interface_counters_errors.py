"""show interface counters errors"""

from typing import Any, cast

from cisco_nxapi.base.codec import Field, Schema, Table
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import (
    InterfaceCountersErrorsDict,
    ResponseDict,
    ResultDict,
)

COMMAND = "show interface counters errors"

INTERFACE = Schema(
    {
        "interface": Field("interface"),
        "align_err": Field("eth_align_err", int),
        "fcs_err": Field("eth_fcs_err", int),
        "xmit_err": Field("eth_xmit_err", int),
        "rcv_err": Field("eth_rcv_err", int),
        "undersize": Field("eth_undersize", int),
        "out_discards": Field("eth_outdisc", int),
    }
)

BODY = Schema({"interfaces": Table("TABLE_interface", "ROW_interface", INTERFACE)})


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> InterfaceCountersErrorsDict:
    return cast(InterfaceCountersErrorsDict, decode_body(data, BODY))
