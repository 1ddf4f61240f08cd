"""show hsrp"""

from typing import Any, cast

from cisco_nxapi.base.codec import Field, Schema, Table
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import HSRPDict, ResponseDict, ResultDict

COMMAND = "show hsrp"

SECONDARY_VIP = Schema({"address": Field("sh_vip_sec")})

GROUP = Schema(
    {
        "interface": Field("sh_if_index"),
        "group": Field("sh_group_num", int),
        "group_type": Field("sh_group_type"),
        "version": Field("sh_group_version"),
        "state": Field("sh_group_state"),
        "priority": Field("sh_prio", int),
        "configured_priority": Field("sh_cfg_prio", int),
        "forward_lower_threshold": Field("sh_fwd_lower_threshold", int),
        "forward_upper_threshold": Field("sh_fwd_upper_threshold", int),
        "can_forward": Field("sh_can_forward"),
        "preempt": Field("sh_preempt"),
        "hello_time": Field("sh_cur_hello", int),
        "hello_time_unit": Field("sh_cur_hello_attr"),
        "configured_hello_time": Field("sh_cfg_hello", int),
        "configured_hello_time_unit": Field("sh_cfg_hello_attr"),
        # seconds until the next hello, e.g. "0.544000"
        "next_hello": Field("sh_active_hello", float),
        "hold_time": Field("sh_cur_hold", int),
        "hold_time_unit": Field("sh_cur_hold_attr"),
        "configured_hold_time": Field("sh_cfg_hold", int),
        "configured_hold_time_unit": Field("sh_cfg_hold_attr"),
        "virtual_ip": Field("sh_vip"),
        "virtual_ip_source": Field("sh_vip_attr"),
        "virtual_ipv6": Field("sh_vip_v6"),
        "secondary_virtual_ips": Table(
            "TABLE_grp_vip_sec", "ROW_grp_vip_sec", SECONDARY_VIP
        ),
        "active_router": Field("sh_active_router_addr"),
        "active_router_v6": Field("sh_active_router_addr_v6"),
        "active_router_priority": Field("sh_active_router_prio", int),
        "active_router_timer": Field("sh_active_router_timer", float),
        "standby_router": Field("sh_standby_router_addr"),
        "standby_router_v6": Field("sh_standby_router_addr_v6"),
        "standby_router_priority": Field("sh_standby_router_prio", int),
        "authentication_type": Field("sh_authentication_type"),
        "authentication_data": Field("sh_authentication_data"),
        "virtual_mac": Field("sh_vmac"),
        "virtual_mac_source": Field("sh_vmac_attr"),
        "state_changes": Field("sh_num_of_state_changes", int),
        # seconds
        "last_state_change": Field("sh_last_state_change", int),
        "total_state_changes": Field("sh_num_of_total_state_changes", int),
        "last_total_state_change": Field("sh_last_total_state_change", int),
        "tracked_objects": Field("sh_num_track_obj", int),
        "redundancy_name": Field("sh_ip_redund_name"),
        "redundancy_name_source": Field("sh_ip_redund_name_attr"),
    }
)

BODY = Schema({"groups": Table("TABLE_grp_detail", "ROW_grp_detail", GROUP)})


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> HSRPDict:
    return cast(HSRPDict, decode_body(data, BODY))
