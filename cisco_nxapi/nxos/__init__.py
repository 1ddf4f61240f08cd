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

"""Decoders for NX-OS show commands, one module per command."""

# Python std lib
import importlib
import logging
from types import ModuleType
from typing import Any, Dict

from cisco_nxapi.base.exceptions import UnsupportedCommand

logger = logging.getLogger(__name__)

SUPPORTED_COMMANDS = (
    "show bgp sessions",
    "show cdp neighbors",
    "show environment",
    "show hsrp",
    "show interface counters errors",
    "show interface transceiver details",
    "show ip arp",
    "show ip arp detail vrf all",
    "show ip eigrp neighbors vrf all",
    "show ip route",
    "show module",
    "show ntp peer-status",
    "show port-security address",
    "show system resources",
    "show version",
    "show vpc",
)

__all__ = ["SUPPORTED_COMMANDS", "get_decoder", "decode"]


def _normalize(command: str) -> str:
    command = " ".join(command.lower().split())
    # "show version | json" is the same command
    for suffix in ("| json", "| xml", "|json", "|xml"):
        if command.endswith(suffix):
            command = command[: -len(suffix)].rstrip()
    return command


def get_decoder(command: str) -> ModuleType:
    """
    Return the module decoding a show command.

    :param command: the command as sent to the device; case, repeated blanks
        and a trailing ``| json`` or ``| xml`` are ignored.
    :return: a module exposing ``COMMAND``, ``BODY``, ``parse_response``,
        ``parse_result`` and ``parse_body``.
    :raise UnsupportedCommand: when no decoder is registered for the command.

    Example::

    .. code-block:: python

        >>> get_decoder('show version')
        <module 'cisco_nxapi.nxos.show_version' from '...'>
        >>> get_decoder('show running-config')
        cisco_nxapi.base.exceptions.UnsupportedCommand: No decoder for "show running-config".
    """
    if not (isinstance(command, str) and command.strip()):
        raise UnsupportedCommand("Please provide a valid command.")

    normalized = _normalize(command)
    if normalized not in SUPPORTED_COMMANDS:
        raise UnsupportedCommand('No decoder for "{}".'.format(command))

    module_name = "cisco_nxapi.nxos.{}".format(
        normalized.replace(" ", "_").replace("-", "_")
    )
    logger.debug("Loading decoder %s for '%s'", module_name, command)
    return importlib.import_module(module_name)


def decode(command: str, data: Any) -> Dict[str, Any]:
    """Decode the body of a response to ``command``."""
    return get_decoder(command).parse_body(data)
