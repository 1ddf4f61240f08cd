from typing import Any, Dict, List

from typing_extensions import TypedDict

from cisco_nxapi.base.duration import Duration
from cisco_nxapi.base.timestamp import TimeStamp

ResultDict = TypedDict(
    "ResultDict", {"code": str, "input": str, "msg": str, "body": Dict[str, Any]}
)

ResponseDict = TypedDict(
    "ResponseDict",
    {"sid": str, "type": str, "version": str, "outputs": List[ResultDict]},
)

PackageDict = TypedDict("PackageDict", {"package_id": str})

ShowVersionDict = TypedDict(
    "ShowVersionDict",
    {
        "header_str": str,
        "bios_ver_str": str,
        "kickstart_ver_str": str,
        "nxos_ver_str": str,
        "bios_cmpl_time": TimeStamp,
        "kick_file_name": str,
        "nxos_file_name": str,
        "kick_cmpl_time": TimeStamp,
        "nxos_cmpl_time": TimeStamp,
        "kick_tmstmp": TimeStamp,
        "nxos_tmstmp": TimeStamp,
        "chassis_id": str,
        "cpu_name": str,
        "memory": int,
        "mem_type": str,
        "proc_board_id": str,
        "host_name": str,
        "bootflash_size": int,
        "kern_uptm_days": int,
        "kern_uptm_hrs": int,
        "kern_uptm_mins": int,
        "kern_uptm_secs": int,
        "rr_usecs": int,
        "rr_ctime": TimeStamp,
        "rr_reason": str,
        "rr_sys_ver": str,
        "rr_service": str,
        "plugins": str,
        "manufacturer": str,
        "packages": List[PackageDict],
    },
)

BGPNeighborDict = TypedDict(
    "BGPNeighborDict",
    {
        "neighbor_id": str,
        "remote_as": int,
        "state": str,
        "local_port": int,
        "remote_port": int,
        "connections_dropped": int,
        "notifications_sent": int,
        "notifications_received": int,
        "last_flap": Duration,
        "last_read": Duration,
        "last_write": Duration,
    },
)

BGPVrfDict = TypedDict(
    "BGPVrfDict",
    {
        "vrf_name": str,
        "router_id": str,
        "local_as": int,
        "vrf_peers": int,
        "vrf_established_peers": int,
        "neighbors": List[BGPNeighborDict],
    },
)

BGPSessionsDict = TypedDict(
    "BGPSessionsDict",
    {
        "local_as": int,
        "total_peers": int,
        "total_established_peers": int,
        "vrfs": List[BGPVrfDict],
    },
)

ARPEntryDict = TypedDict(
    "ARPEntryDict",
    {
        "interface": str,
        "ip": str,
        "mac": str,
        "age": Duration,
        "flags": str,
        "incomplete": bool,
    },
)

ARPVrfDict = TypedDict(
    "ARPVrfDict", {"vrf_name": str, "total": int, "entries": List[ARPEntryDict]}
)

ARPTableDict = TypedDict("ARPTableDict", {"vrfs": List[ARPVrfDict]})

ARPFlatEntryDict = TypedDict(
    "ARPFlatEntryDict",
    {
        "vrf_name": str,
        "interface": str,
        "ip": str,
        "mac": str,
        "age": Duration,
        "flags": str,
        "incomplete": bool,
    },
)

ARPDetailEntryDict = TypedDict(
    "ARPDetailEntryDict",
    {
        "interface": str,
        "ip": str,
        "mac": str,
        "time_stamp": TimeStamp,
        "physical_interface": str,
    },
)

ARPDetailVrfDict = TypedDict(
    "ARPDetailVrfDict",
    {"vrf_name": str, "total": int, "entries": List[ARPDetailEntryDict]},
)

ARPDetailTableDict = TypedDict("ARPDetailTableDict", {"vrfs": List[ARPDetailVrfDict]})

TemperatureDict = TypedDict(
    "TemperatureDict",
    {
        "module": str,
        "sensor": str,
        "major_threshold": str,
        "minor_threshold": str,
        "current": str,
        "alarm_status": str,
    },
)

FanZoneDict = TypedDict("FanZoneDict", {"zone": str, "speed": str})

FanDict = TypedDict(
    "FanDict",
    {
        "name": str,
        "model": str,
        "hw_version": str,
        "direction": str,
        "status": str,
    },
)

FanDetailsDict = TypedDict(
    "FanDetailsDict",
    {"zones": List[FanZoneDict], "fans": List[FanDict], "filter_status": str},
)

ModulePowerDict = TypedDict(
    "ModulePowerDict",
    {
        "module": str,
        "model": str,
        "actual_draw": str,
        "allocated": str,
        "status": str,
    },
)

PowerSupplyDict = TypedDict(
    "PowerSupplyDict",
    {
        "number": int,
        "model": str,
        "actual_output": str,
        "actual_input": str,
        "total_capacity": str,
        "status": str,
    },
)

PowerSummaryDict = TypedDict(
    "PowerSummaryDict",
    {
        "redundancy_mode": str,
        "operational_mode": str,
        "total_capacity": str,
        "grid_a_capacity": str,
        "grid_b_capacity": str,
        "cumulative_power": str,
        "output_actual_draw": str,
        "input_actual_draw": str,
        "allocated_budgeted": str,
        "available": str,
    },
)

PowerDict = TypedDict(
    "PowerDict",
    {
        "voltage_level": int,
        "supplies": List[PowerSupplyDict],
        "summary": PowerSummaryDict,
        "modules": List[ModulePowerDict],
    },
)

EnvironmentDict = TypedDict(
    "EnvironmentDict",
    {
        "temperature": List[TemperatureDict],
        "fans": FanDetailsDict,
        "power": PowerDict,
    },
)

CPUUsageDict = TypedDict(
    "CPUUsageDict", {"cpu_id": int, "user": float, "kernel": float, "idle": float}
)

SystemResourcesDict = TypedDict(
    "SystemResourcesDict",
    {
        "load_avg_1min": float,
        "load_avg_5min": float,
        "load_avg_15min": float,
        "processes_total": int,
        "processes_running": int,
        "cpu_state_user": float,
        "cpu_state_kernel": float,
        "cpu_state_idle": float,
        "cpus": List[CPUUsageDict],
        "memory_usage_total": int,
        "memory_usage_used": int,
        "memory_usage_free": int,
        "current_memory_status": str,
    },
)

NTPPeerDict = TypedDict(
    "NTPPeerDict",
    {
        "sync_mode": str,
        "remote": str,
        "local": str,
        "stratum": int,
        "poll": int,
        "reach": str,
        "delay": float,
        "vrf": str,
    },
)

NTPPeerStatusDict = TypedDict("NTPPeerStatusDict", {"peers": List[NTPPeerDict]})

InterfaceErrorsDict = TypedDict(
    "InterfaceErrorsDict",
    {
        "interface": str,
        "align_err": int,
        "fcs_err": int,
        "xmit_err": int,
        "rcv_err": int,
        "undersize": int,
        "out_discards": int,
    },
)

InterfaceCountersErrorsDict = TypedDict(
    "InterfaceCountersErrorsDict", {"interfaces": List[InterfaceErrorsDict]}
)

CDPNeighborDict = TypedDict(
    "CDPNeighborDict",
    {
        "ifindex": int,
        "device_id": str,
        "local_interface": str,
        "ttl": int,
        "capability": List[str],
        "platform_id": str,
        "port_id": str,
    },
)

CDPNeighborsDict = TypedDict("CDPNeighborsDict", {"neighbors": List[CDPNeighborDict]})

ModuleInfoDict = TypedDict(
    "ModuleInfoDict",
    {"module": int, "ports": int, "module_type": str, "model": str, "status": str},
)

ModuleMacDict = TypedDict(
    "ModuleMacDict", {"module": int, "mac": str, "serial_number": str}
)

ModuleDiagDict = TypedDict("ModuleDiagDict", {"module": int, "diag_status": str})

ModulePowerStatusDict = TypedDict(
    "ModulePowerStatusDict", {"module": int, "power_status": str, "reason": str}
)

ModuleVersionDict = TypedDict(
    "ModuleVersionDict",
    {"module": int, "hw": str, "sw": str, "slot_type": str},
)

ShowModuleDict = TypedDict(
    "ShowModuleDict",
    {
        "modules": List[ModuleInfoDict],
        "mac_info": List[ModuleMacDict],
        "diagnostics": List[ModuleDiagDict],
        "power": List[ModulePowerStatusDict],
        "versions": List[ModuleVersionDict],
    },
)

PortSecurityAddressDict = TypedDict(
    "PortSecurityAddressDict",
    {
        "interface": str,
        "vlan_id": int,
        "type": str,
        "mac": str,
        "remaining_age": int,
        "remote_learnt": int,
        "remote_aged": int,
        "num_elems": List[int],
        "cmd_addr_index": List[int],
    },
)

PortSecurityDict = TypedDict(
    "PortSecurityDict",
    {
        "total_addresses": int,
        "max_system_limit": int,
        "addresses": List[PortSecurityAddressDict],
    },
)

HSRPSecondaryVipDict = TypedDict("HSRPSecondaryVipDict", {"address": str})

HSRPGroupDict = TypedDict(
    "HSRPGroupDict",
    {
        "interface": str,
        "group": int,
        "group_type": str,
        "version": str,
        "state": str,
        "priority": int,
        "configured_priority": int,
        "forward_lower_threshold": int,
        "forward_upper_threshold": int,
        "can_forward": str,
        "preempt": str,
        "hello_time": int,
        "hello_time_unit": str,
        "configured_hello_time": int,
        "configured_hello_time_unit": str,
        "next_hello": float,
        "hold_time": int,
        "hold_time_unit": str,
        "configured_hold_time": int,
        "configured_hold_time_unit": str,
        "virtual_ip": str,
        "virtual_ip_source": str,
        "virtual_ipv6": str,
        "secondary_virtual_ips": List[HSRPSecondaryVipDict],
        "active_router": str,
        "active_router_v6": str,
        "active_router_priority": int,
        "active_router_timer": float,
        "standby_router": str,
        "standby_router_v6": str,
        "standby_router_priority": int,
        "authentication_type": str,
        "authentication_data": str,
        "virtual_mac": str,
        "virtual_mac_source": str,
        "state_changes": int,
        "last_state_change": int,
        "total_state_changes": int,
        "last_total_state_change": int,
        "tracked_objects": int,
        "redundancy_name": str,
        "redundancy_name_source": str,
    },
)

HSRPDict = TypedDict("HSRPDict", {"groups": List[HSRPGroupDict]})

TransceiverLaneDict = TypedDict(
    "TransceiverLaneDict",
    {
        "lane_number": int,
        "temperature": float,
        "temperature_alarm_high": float,
        "temperature_alarm_low": float,
        "temperature_warning_high": float,
        "temperature_warning_low": float,
        "temperature_flag": str,
        "voltage": float,
        "voltage_alarm_high": float,
        "voltage_alarm_low": float,
        "voltage_warning_high": float,
        "voltage_warning_low": float,
        "voltage_flag": str,
        "current": float,
        "current_alarm_high": float,
        "current_alarm_low": float,
        "current_warning_high": float,
        "current_warning_low": float,
        "current_flag": str,
        "tx_power": float,
        "tx_power_alarm_high": float,
        "tx_power_alarm_low": float,
        "tx_power_warning_high": float,
        "tx_power_warning_low": float,
        "tx_power_flag": str,
        "rx_power": float,
        "rx_power_alarm_high": float,
        "rx_power_alarm_low": float,
        "rx_power_warning_high": float,
        "rx_power_warning_low": float,
        "rx_power_flag": str,
        "transmit_faults": int,
    },
)

TransceiverDict = TypedDict(
    "TransceiverDict",
    {
        "interface": str,
        "sfp": str,
        "type": str,
        "name": str,
        "part_number": str,
        "revision": str,
        "serial_number": str,
        "nominal_bitrate": int,
        "length_50_om3": int,
        "cisco_id": str,
        "cisco_id_1": int,
        "cisco_part_number": str,
        "cisco_product_id": str,
        "cisco_vendor_id": str,
        "lanes": List[TransceiverLaneDict],
    },
)

TransceiverDetailsDict = TypedDict(
    "TransceiverDetailsDict", {"interfaces": List[TransceiverDict]}
)

EIGRPPeerDict = TypedDict(
    "EIGRPPeerDict",
    {
        "handle": int,
        "address": str,
        "interface": str,
        "hold_time": int,
        "srtt": int,
        "rto": int,
        "queue_count": int,
        "last_sequence": int,
        "uptime": Duration,
    },
)

EIGRPVrfDict = TypedDict(
    "EIGRPVrfDict", {"vrf_name": str, "peers": List[EIGRPPeerDict]}
)

EIGRPAsnDict = TypedDict("EIGRPAsnDict", {"asn": str, "vrfs": List[EIGRPVrfDict]})

EIGRPNeighborsDict = TypedDict(
    "EIGRPNeighborsDict", {"autonomous_systems": List[EIGRPAsnDict]}
)

RoutePathDict = TypedDict(
    "RoutePathDict",
    {
        "next_hop": str,
        "interface": str,
        "client_name": str,
        "metric": int,
        "preference": int,
        "ubest": bool,
        "mbest": bool,
        "uptime": Duration,
        "route_type": str,
        "tag": int,
    },
)

RoutePrefixDict = TypedDict(
    "RoutePrefixDict",
    {
        "prefix": str,
        "ucast_nhops": int,
        "mcast_nhops": int,
        "attached": bool,
        "paths": List[RoutePathDict],
    },
)

RouteAddressFamilyDict = TypedDict(
    "RouteAddressFamilyDict",
    {"address_family": str, "prefixes": List[RoutePrefixDict]},
)

RouteVrfDict = TypedDict(
    "RouteVrfDict",
    {"vrf_name": str, "address_families": List[RouteAddressFamilyDict]},
)

RouteTableDict = TypedDict("RouteTableDict", {"vrfs": List[RouteVrfDict]})

RouteDict = TypedDict(
    "RouteDict",
    {
        "vrf_name": str,
        "address_family": str,
        "prefix": str,
        "attached": bool,
        "next_hop": str,
        "interface": str,
        "client_name": str,
        "metric": int,
        "preference": int,
        "best": bool,
        "uptime": Duration,
    },
)

VPCPeerLinkDict = TypedDict(
    "VPCPeerLinkDict",
    {"id": str, "interface": str, "port_state": str, "up_vlans": str},
)

VPCDict = TypedDict(
    "VPCDict",
    {
        "id": int,
        "interface": str,
        "port_state": str,
        "physical_port_removed": str,
        "through_peer_link": str,
        "consistency": str,
        "consistency_status": str,
        "up_vlans": str,
        "es_attr": str,
    },
)

ShowVPCDict = TypedDict(
    "ShowVPCDict",
    {
        "domain_id": str,
        "peer_status": str,
        "peer_status_reason": str,
        "peer_keepalive_status": str,
        "peer_consistency": str,
        "per_vlan_peer_consistency": str,
        "peer_consistency_status": str,
        "type2_consistency": str,
        "type2_consistency_status": str,
        "role": str,
        "number_of_vpcs": int,
        "peer_gateway": str,
        "dual_active_excluded_vlans": str,
        "graceful_consistency_check": str,
        "auto_recovery_status": str,
        "delay_restore_status": str,
        "delay_restore_svi_status": str,
        "operational_l3_peer": str,
        "peer_links": List[VPCPeerLinkDict],
        "vpcs": List[VPCDict],
    },
)
