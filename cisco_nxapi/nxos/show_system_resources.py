"""show system resources"""

from typing import Any, cast

from cisco_nxapi.base.codec import Field, Schema, Table
from cisco_nxapi.base.envelope import decode_body, decode_response, decode_result
from cisco_nxapi.base.models import ResponseDict, ResultDict, SystemResourcesDict

COMMAND = "show system resources"

CPU_USAGE = Schema(
    {
        "cpu_id": Field("cpuid", int),
        "user": Field("user", float),
        "kernel": Field("kernel", float),
        "idle": Field("idle", float),
    }
)

BODY = Schema(
    {
        "load_avg_1min": Field("load_avg_1min", float),
        "load_avg_5min": Field("load_avg_5min", float),
        "load_avg_15min": Field("load_avg_15min", float),
        "processes_total": Field("processes_total", int),
        "processes_running": Field("processes_running", int),
        "cpu_state_user": Field("cpu_state_user", float),
        "cpu_state_kernel": Field("cpu_state_kernel", float),
        "cpu_state_idle": Field("cpu_state_idle", float),
        "cpus": Table("TABLE_cpu_usage", "ROW_cpu_usage", CPU_USAGE),
        "memory_usage_total": Field("memory_usage_total", int),
        "memory_usage_used": Field("memory_usage_used", int),
        "memory_usage_free": Field("memory_usage_free", int),
        "current_memory_status": Field("current_memory_status"),
    }
)


def parse_response(data: Any) -> ResponseDict:
    return decode_response(data, BODY)


def parse_result(data: Any) -> ResultDict:
    return decode_result(data, BODY)


def parse_body(data: Any) -> SystemResourcesDict:
    return cast(SystemResourcesDict, decode_body(data, BODY))
