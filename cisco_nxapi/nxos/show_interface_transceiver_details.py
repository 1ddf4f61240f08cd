"""
show interface transceiver details

Interfaces without a transceiver only report ``sfp``. Digital optical
monitoring comes per lane; every measurement carries its alarm and warning
thresholds and a flag (``++``, ``+``, ``-``, ``--`` or empty).
"""

from typing import Any, Dict, cast

from cisco_nxapi.base.codec import Field, FieldSpec, Schema, Table
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import ResponseDict, ResultDict, TransceiverDetailsDict

COMMAND = "show interface transceiver details"


def _measurement(name: str, key: str, prefix: str) -> Dict[str, FieldSpec]:
    return {
        name: Field(key, float),
        name + "_alarm_high": Field(prefix + "_alrm_hi", float),
        name + "_alarm_low": Field(prefix + "_alrm_lo", float),
        name + "_warning_high": Field(prefix + "_warn_hi", float),
        name + "_warning_low": Field(prefix + "_warn_lo", float),
        name + "_flag": Field(prefix + "_flag"),
    }


LANE = Schema(
    {
        "lane_number": Field("lane_number", int),
        **_measurement("temperature", "temperature", "temp"),
        **_measurement("voltage", "voltage", "volt"),
        **_measurement("current", "current", "current"),
        **_measurement("tx_power", "tx_pwr", "tx_pwr"),
        **_measurement("rx_power", "rx_pwr", "rx_pwr"),
        "transmit_faults": Field("xmit_faults", int),
    }
)

INTERFACE = Schema(
    {
        "interface": Field("interface"),
        "sfp": Field("sfp"),
        "type": Field("type"),
        "name": Field("name"),
        "part_number": Field("partnum"),
        "revision": Field("rev"),
        "serial_number": Field("serialnum"),
        "nominal_bitrate": Field("nom_bitrate", int),
        "length_50_om3": Field("len_50_OM3", int),
        "cisco_id": Field("ciscoid"),
        "cisco_id_1": Field("ciscoid_1", int),
        "cisco_part_number": Field("cisco_part_number"),
        "cisco_product_id": Field("cisco_product_id"),
        "cisco_vendor_id": Field("cisco_vendor_id"),
        "lanes": Table("TABLE_lane", "ROW_lane", LANE),
    }
)

BODY = Schema({"interfaces": Table("TABLE_interface", "ROW_interface", INTERFACE)})


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> TransceiverDetailsDict:
    return cast(TransceiverDetailsDict, decode_body(data, BODY))
