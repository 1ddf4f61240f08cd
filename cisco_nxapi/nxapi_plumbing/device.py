"""
A device reached over NX-API, whatever the API format.

Outputs come back normalised by the client, show_parsed() adds the decoding.
"""

import logging
from typing import List, Optional, Any, Dict

from cisco_nxapi.base.exceptions import NXAPIError, NXAPICommandError
from cisco_nxapi.nxapi_plumbing.api_client import (
    RPCClient,
    XMLClient,
    JSONClient,
    RPCBase,
)

logger = logging.getLogger(__name__)

API_CLIENTS = {"jsonrpc": RPCClient, "xml": XMLClient, "json": JSONClient}


class Device(object):
    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        transport: str = "http",
        api_format: str = "jsonrpc",
        port: Optional[int] = None,
        timeout: int = 30,
        verify: bool = True,
    ):
        self.host = host
        self.username = username
        self.password = password
        self.transport = transport
        self.api_format = api_format
        self.verify = verify
        self.port = port

        if api_format not in API_CLIENTS:
            raise NXAPIError("'{}' is an invalid api_format.".format(api_format))

        self.api: RPCBase = API_CLIENTS[api_format](
            host,
            username,
            password,
            transport=transport,
            port=port,
            timeout=timeout,
            verify=verify,
        )

    @staticmethod
    def _single_result(result: List[Dict[str, Any]]) -> Dict[str, Any]:
        if len(result) != 1:
            raise NXAPIError(
                "Length of response inconsistent with number of commands executed."
            )
        return result[0]

    def show(self, command: str, raw_text: bool = False) -> Any:
        """Send a non-configuration command.

        Args:
            command (str): The command to send to the device.

        Keyword Args:
            raw_text (bool): Whether to return raw text or structured data.

        Returns:
            The body of the output: a dict for structured data (leaves are
            text with the XML format), the CLI text with raw_text.
        """
        return self._single_result(self.show_list([command], raw_text))["body"]

    def show_list(
        self, commands: List[str], raw_text: bool = False
    ) -> List[Dict[str, Any]]:
        """Send a list of non-configuration commands.

        Args:
            commands (list): A list of commands to send to the device.

        Keyword Args:
            raw_text (bool): Whether to return raw text or structured data.

        Returns:
            One {code, input, msg, body} output per command, in order.
        """
        cmd_method = self.api.cmd_method_raw if raw_text else self.api.cmd_method
        return self.api._nxapi_command(commands, method=cmd_method)

    def show_parsed(self, command: str) -> Dict[str, Any]:
        """Send a show command and decode its body.

        Args:
            command (str): A command with a registered decoder, e.g. "show version".

        Raises:
            UnsupportedCommand: If no decoder is registered for the command.
            DecodeError: If a field of the body cannot be decoded.
        """
        # cisco_nxapi.nxos imports this package
        from cisco_nxapi.nxos import get_decoder

        decoder = get_decoder(command)
        logger.debug("Decoding '%s' with %s", command, decoder.__name__)
        output = self._single_result(self.show_list([command]))
        return decoder.parse_result(output)["body"]

    def config(self, command: str) -> Dict[str, Any]:
        """Send a configuration command.

        Args:
            command (str): The command to send to the device.

        Raises:
            NXAPICommandError: If there is a problem with the supplied command.
        """
        return self._single_result(self.config_list([command]))

    def config_list(self, commands: List[str]) -> List[Dict[str, Any]]:
        """Send a list of configuration commands.

        Args:
            commands (list): A list of commands to send to the device.

        Raises:
            NXAPICommandError: If there is a problem with one of the commands in the list.
        """
        return self.api._nxapi_command_conf(commands)

    def save(self, filename: str = "startup-config") -> bool:
        """Save a device's running configuration.

        Args:
            filename (str): The filename on the remote device.
                If none is supplied, the implementing class should
                save to the "startup configuration".
        """
        try:
            cmd = "copy run {}".format(filename)
            self.show(cmd, raw_text=True)
        except NXAPICommandError as e:
            if "overwrite" in e.message:
                return False
            raise
        return True

    def rollback(self, filename: str) -> None:
        """Rollback to a checkpoint file.

        Args:
            filename (str): The filename of the checkpoint file to load into the running
            configuration.
        """
        cmd = "rollback running-config file {}".format(filename)
        self.show(cmd, raw_text=True)

    def checkpoint(self, filename: str) -> None:
        """Save a checkpoint of the running configuration to the device.

        Args:
            filename (str): The filename to save the checkpoint as on the remote device.
        """
        self.show_list(
            ["terminal dont-ask", "checkpoint file {}".format(filename)], raw_text=True
        )
