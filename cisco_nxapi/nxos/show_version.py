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
show version

Software versions, image files and their compile times, chassis and memory,
kernel uptime, last reset and the installed package list.
"""

from typing import Any, cast

from cisco_nxapi.base import constants as c
from cisco_nxapi.base.codec import Field, Schema, Table
from cisco_nxapi.base.duration import Duration
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import ResponseDict, ResultDict, ShowVersionDict
from cisco_nxapi.base.timestamp import TimeStamp

COMMAND = "show version"

PACKAGE = Schema({"package_id": Field("package_id")})

BODY = Schema(
    {
        "header_str": Field("header_str"),
        "bios_ver_str": Field("bios_ver_str"),
        "kickstart_ver_str": Field("kickstart_ver_str"),
        "nxos_ver_str": Field("nxos_ver_str"),
        "bios_cmpl_time": Field("bios_cmpl_time", TimeStamp),
        "kick_file_name": Field("kick_file_name"),
        "nxos_file_name": Field("nxos_file_name"),
        "kick_cmpl_time": Field("kick_cmpl_time", TimeStamp),
        "nxos_cmpl_time": Field("nxos_cmpl_time", TimeStamp),
        "kick_tmstmp": Field("kick_tmstmp", TimeStamp),
        "nxos_tmstmp": Field("nxos_tmstmp", TimeStamp),
        "chassis_id": Field("chassis_id"),
        "cpu_name": Field("cpu_name"),
        "memory": Field("memory", int),
        "mem_type": Field("mem_type"),
        "proc_board_id": Field("proc_board_id"),
        "host_name": Field("host_name"),
        "bootflash_size": Field("bootflash_size", int),
        "kern_uptm_days": Field("kern_uptm_days", int),
        "kern_uptm_hrs": Field("kern_uptm_hrs", int),
        "kern_uptm_mins": Field("kern_uptm_mins", int),
        "kern_uptm_secs": Field("kern_uptm_secs", int),
        "rr_usecs": Field("rr_usecs", int),
        "rr_ctime": Field("rr_ctime", TimeStamp),
        "rr_reason": Field("rr_reason"),
        "rr_sys_ver": Field("rr_sys_ver"),
        "rr_service": Field("rr_service"),
        "plugins": Field("plugins"),
        "manufacturer": Field("manufacturer"),
        "packages": Table("TABLE_package_list", "ROW_package_list", PACKAGE),
    }
)


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> ShowVersionDict:
    return cast(ShowVersionDict, decode_body(data, BODY))


def uptime(body: ShowVersionDict) -> Duration:
    """Kernel uptime as a single Duration."""
    hours = body["kern_uptm_days"] * 24 + body["kern_uptm_hrs"]
    minutes = hours * 60 + body["kern_uptm_mins"]
    seconds = minutes * 60 + body["kern_uptm_secs"]
    return Duration(seconds * c.NS_SECOND)
