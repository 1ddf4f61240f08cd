"""
Fork of pynxos library from network to code and mzbenami

Supports JSON-RPC, XML and the ins_api JSON format.
"""
from cisco_nxapi.nxapi_plumbing.device import Device
from cisco_nxapi.nxapi_plumbing.api_client import RPCClient, XMLClient, JSONClient
from cisco_nxapi.base.exceptions import (
    NXAPIError,
    NXAPICommandError,
    NXAPIConnectionError,
    NXAPIAuthError,
    NXAPIPostError,
)

__all__ = (
    "Device",
    "RPCClient",
    "XMLClient",
    "JSONClient",
    "NXAPIError",
    "NXAPICommandError",
    "NXAPIConnectionError",
    "NXAPIAuthError",
    "NXAPIPostError",
)
