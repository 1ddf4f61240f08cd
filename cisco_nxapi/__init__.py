import sys
import logging
from importlib.metadata import version, PackageNotFoundError

from cisco_nxapi.base import Duration, TimeStamp
from cisco_nxapi.base.exceptions import (
    NXAPIClientException,
    DecodeError,
    MalformedDuration,
    MalformedTimeStamp,
    UnsupportedCommand,
)
from cisco_nxapi.nxos import SUPPORTED_COMMANDS, get_decoder, decode
from cisco_nxapi.nxapi_plumbing import Device  # noqa

# Verify Python Version that is running
if sys.version_info < (3, 8):
    raise RuntimeError("cisco-nxapi requires Python 3.8 or greater")

try:
    __version__ = version("cisco-nxapi")
except PackageNotFoundError:
    __version__ = "Not installed"

__all__ = (
    "Device",
    "Duration",
    "TimeStamp",
    "SUPPORTED_COMMANDS",
    "get_decoder",
    "decode",
    "NXAPIClientException",
    "DecodeError",
    "MalformedDuration",
    "MalformedTimeStamp",
    "UnsupportedCommand",
)

logger = logging.getLogger("cisco_nxapi")
