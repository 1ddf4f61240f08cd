# -*- coding: utf-8 -*-
# Copyright 2015 Spotify AB. All rights reserved.
#
# The contents of this file are licensed under the Apache License, Version 2.0
# (the "License"); you may not use this file except in compliance with the
# License. You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""
show environment

Temperature sensors, fans and power. Readings keep the units the device
reports them in ("42", "3000 W"), so they are left as text.
"""

from typing import Any, cast

from cisco_nxapi.base.codec import Field, Nested, Schema, Table
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import EnvironmentDict, ResponseDict, ResultDict

COMMAND = "show environment"

TEMPERATURE = Schema(
    {
        "module": Field("tempmod"),
        "sensor": Field("sensor"),
        "major_threshold": Field("majthres"),
        "minor_threshold": Field("minthres"),
        "current": Field("curtemp"),
        "alarm_status": Field("alarmstatus"),
    }
)

FAN_ZONE = Schema({"zone": Field("zone"), "speed": Field("zonespeed")})

FAN = Schema(
    {
        "name": Field("fanname"),
        "model": Field("fanmodel"),
        "hw_version": Field("fanhwver"),
        "direction": Field("fandir"),
        "status": Field("fanstatus"),
    }
)

FAN_DETAILS = Schema(
    {
        "zones": Table("TABLE_fan_zone_speed", "ROW_fan_zone_speed", FAN_ZONE),
        "fans": Table("TABLE_faninfo", "ROW_faninfo", FAN),
        "filter_status": Field("fan_filter_status"),
    }
)

POWER_SUPPLY = Schema(
    {
        "number": Field("psnum", int),
        "model": Field("psmodel"),
        "actual_output": Field("actual_out"),
        "actual_input": Field("actual_input"),
        "total_capacity": Field("tot_capa"),
        "status": Field("ps_status"),
    }
)

POWER_SUMMARY = Schema(
    {
        "redundancy_mode": Field("ps_redun_mode"),
        "operational_mode": Field("ps_oper_mode"),
        "total_capacity": Field("tot_pow_capacity"),
        "grid_a_capacity": Field("tot_gridA_capacity"),
        "grid_b_capacity": Field("tot_gridB_capacity"),
        "cumulative_power": Field("cumulative_power"),
        "output_actual_draw": Field("tot_pow_out_actual_draw"),
        "input_actual_draw": Field("tot_pow_input_actual_draw"),
        "allocated_budgeted": Field("tot_pow_alloc_budgeted"),
        "available": Field("available_pow"),
    }
)

MODULE_POWER = Schema(
    {
        "module": Field("modnum"),
        "model": Field("mod_model"),
        "actual_draw": Field("actual_draw"),
        "allocated": Field("allocated"),
        "status": Field("modstatus"),
    }
)

POWER = Schema(
    {
        "voltage_level": Field("voltage_level", int),
        "supplies": Table("TABLE_psinfo", "ROW_psinfo", POWER_SUPPLY),
        "summary": Nested("power_summary", POWER_SUMMARY),
        "modules": Table("TABLE_mod_pow_info", "ROW_mod_pow_info", MODULE_POWER),
    }
)

BODY = Schema(
    {
        "temperature": Table("TABLE_tempinfo", "ROW_tempinfo", TEMPERATURE),
        "fans": Nested("fandetails", FAN_DETAILS),
        "power": Nested("powersup", POWER),
    }
)


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> EnvironmentDict:
    return cast(EnvironmentDict, decode_body(data, BODY))
