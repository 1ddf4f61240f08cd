"""
NX-API clients: JSON-RPC, XML and the ins_api JSON format.

Every client normalises the device answer with cisco_nxapi.base.envelope, so
whatever the format, a command comes back as one ``{code, input, msg, body}``
output. The per-command decoders in cisco_nxapi.nxos take those outputs as is.
"""

import json
import logging
from typing import Optional, List, Dict, Any

import requests
from requests import Response
from requests.auth import HTTPBasicAuth
from requests.exceptions import ConnectionError
from urllib3.exceptions import InsecureRequestWarning

from cisco_nxapi.base.envelope import check_output, load_document, load_outputs
from cisco_nxapi.base.exceptions import (
    DecodeError,
    NXAPIError,
    NXAPIPostError,
    NXAPIAuthError,
    NXAPIConnectionError,
)

logger = logging.getLogger(__name__)


class RPCBase(object):
    """RPCBase class should be API-type neutral (i.e. shouldn't care whether XML or jsonrpc)."""

    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        transport: str = "https",
        port: Optional[int] = None,
        timeout: int = 30,
        verify: bool = True,
    ):
        if transport not in ["http", "https"]:
            raise NXAPIError("'{}' is an invalid transport.".format(transport))

        if port is None:
            if transport == "http":
                port = 80
            elif transport == "https":
                port = 443

        self.url = "{}://{}:{}/ins".format(transport, host, port)
        self.username = username
        self.password = password
        self.timeout = timeout
        self.verify = verify
        self.api: str
        self.cmd_method: str
        self.cmd_method_conf: str
        self.cmd_method_raw: str
        self.headers: Dict

    def _build_payload(self, commands: List[str], method: str) -> str:
        raise NotImplementedError("Method must be implemented in child class")

    def _is_envelope(self, document: Any) -> bool:
        raise NotImplementedError("Method must be implemented in child class")

    def _nxapi_command(
        self, commands: List[str], method: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Send commands down the NX-API channel, one normalised output per command."""
        if method is None:
            method = self.cmd_method
        if isinstance(commands, str):
            commands = [commands]

        response = self._send_request(commands, method=method)
        return self._process_api_response(response, commands)

    def _nxapi_command_conf(
        self, commands: List[str], method: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        if method is None:
            method = self.cmd_method_conf
        return self._nxapi_command(commands=commands, method=method)

    def _send_request(self, commands: List[str], method: str) -> Response:
        payload = self._build_payload(commands, method)
        logger.debug("POST %s method=%s commands=%s", self.url, method, commands)

        try:
            if not self.verify:
                requests.packages.urllib3.disable_warnings(InsecureRequestWarning)  # type: ignore

            response = requests.post(
                self.url,
                timeout=self.timeout,
                data=payload,
                headers=self.headers,
                auth=HTTPBasicAuth(self.username, self.password),
                verify=self.verify,
            )
        except ConnectionError as e:
            raise NXAPIConnectionError(str(e))

        if response.status_code == 401:
            msg = (
                "Authentication to NX-API failed please verify your username, password, "
                "and hostname."
            )
            raise NXAPIAuthError(msg)

        logger.debug("NX-API replied with status %s", response.status_code)
        return response

    def _process_api_response(
        self, response: Response, commands: List[str]
    ) -> List[Dict[str, Any]]:
        """
        Normalize the API response: one ``{code, input, msg, body}`` per command,
        with the sent command filled in where the device leaves it out.

        Command errors are raised whatever the HTTP status, NX-API reports them
        with 400 or 500 alongside a regular envelope.
        """
        try:
            document = load_document(response.text)
            if not self._is_envelope(document):
                raise DecodeError("response", "no {} envelope".format(self.api))
            outputs = load_outputs(document)["outputs"]
        except DecodeError as e:
            msg = """Invalid response returned on NX-API POST
commands: {}
status_code: {}
error: {}""".format(
                commands, response.status_code, e
            )
            raise NXAPIPostError(msg) from e

        if len(commands) != len(outputs):
            raise NXAPIError(
                "{} response doesn't match expected number of commands.".format(
                    self.api
                )
            )

        results = []
        for command, output in zip(commands, outputs):
            if not isinstance(output, dict):
                raise NXAPIPostError(
                    "Invalid output for '{}': {!r}".format(command, output)
                )
            output = dict(output, input=output.get("input") or command)
            check_output(output)
            results.append(
                {
                    "code": str(output.get("code", "200")),
                    "input": output["input"],
                    "msg": output.get("msg") or "",
                    "body": output.get("body"),
                }
            )
        return results


class RPCClient(RPCBase):
    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.headers = {"content-type": "application/json-rpc"}
        self.api = "jsonrpc"
        self.cmd_method = "cli"
        self.cmd_method_conf = "cli"
        self.cmd_method_raw = "cli_ascii"

    def _build_payload(
        self,
        commands: List[str],
        method: str,
        rpc_version: str = "2.0",
        api_version: str = "1.0",
    ) -> str:
        """Construct the JSON-RPC payload for NX-API."""
        payload_list = []
        for id_num, command in enumerate(commands, start=1):
            payload = {
                "jsonrpc": rpc_version,
                "method": method,
                "params": {"cmd": command, "version": float(api_version)},
                "id": id_num,
            }
            payload_list.append(payload)

        return json.dumps(payload_list)

    def _is_envelope(self, document: Any) -> bool:
        # a single command is answered with an object, several with a batch
        if isinstance(document, list):
            return True
        return isinstance(document, dict) and "jsonrpc" in document


class JSONClient(RPCBase):
    """The ins_api JSON format (cli_show / cli_conf)."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.headers = {"content-type": "application/json"}
        self.api = "json"
        self.cmd_method = "cli_show"
        self.cmd_method_conf = "cli_conf"
        self.cmd_method_raw = "cli_show_ascii"

    def _build_payload(
        self, commands: List[str], method: str, version: str = "1.0"
    ) -> str:
        payload = {
            "ins_api": {
                "version": version,
                "type": method,
                "chunk": "0",
                "sid": "1",
                # subsequent commands are separated by semi-colon
                "input": " ;".join(commands),
                "output_format": "json",
            }
        }
        return json.dumps(payload)

    def _is_envelope(self, document: Any) -> bool:
        return isinstance(document, dict) and bool(document.get("ins_api"))


class XMLClient(JSONClient):
    """The ins_api XML format, decoded to the same outputs as the JSON one."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.headers = {"content-type": "application/xml"}
        self.api = "xml"

    def _build_payload(
        self,
        commands: List[str],
        method: str,
        xml_version: str = "1.0",
        version: str = "1.0",
    ) -> str:
        # subsequent commands are separated by semi-colon
        xml_commands = " ;".join(commands)

        payload = """<?xml version="{xml_version}"?>
            <ins_api>
                <version>{version}</version>
                <type>{method}</type>
                <chunk>0</chunk>
                <sid>sid</sid>
                <input>{command}</input>
                <output_format>xml</output_format>
            </ins_api>""".format(
            xml_version=xml_version,
            version=version,
            method=method,
            command=xml_commands,
        )
        return payload
