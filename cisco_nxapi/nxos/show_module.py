"""show module"""

from typing import Any, cast

from cisco_nxapi.base.codec import Field, Schema, Table
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import ResponseDict, ResultDict, ShowModuleDict

COMMAND = "show module"

MODULE_INFO = Schema(
    {
        "module": Field("modinf", int),
        "ports": Field("ports", int),
        "module_type": Field("modtype"),
        "model": Field("model"),
        "status": Field("status"),
    }
)

MODULE_MAC = Schema(
    {
        "module": Field("modmac", int),
        "mac": Field("mac"),
        "serial_number": Field("serialnum"),
    }
)

MODULE_DIAG = Schema({"module": Field("mod", int), "diag_status": Field("diagstatus")})

MODULE_POWER = Schema(
    {
        "module": Field("modpwr", int),
        "power_status": Field("pwrstat"),
        "reason": Field("reason"),
    }
)

MODULE_VERSION = Schema(
    {
        "module": Field("modwwn", int),
        "hw": Field("hw"),
        "sw": Field("sw"),
        "slot_type": Field("slottype"),
    }
)

BODY = Schema(
    {
        "modules": Table("TABLE_modinfo", "ROW_modinfo", MODULE_INFO),
        "mac_info": Table("TABLE_modmacinfo", "ROW_modmacinfo", MODULE_MAC),
        "diagnostics": Table("TABLE_moddiaginfo", "ROW_moddiaginfo", MODULE_DIAG),
        "power": Table("TABLE_modpwrinfo", "ROW_modpwrinfo", MODULE_POWER),
        "versions": Table("TABLE_modwwninfo", "ROW_modwwninfo", MODULE_VERSION),
    }
)


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> ShowModuleDict:
    return cast(ShowModuleDict, decode_body(data, BODY))
