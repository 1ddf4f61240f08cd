"""
Unwrap NX-API responses down to the command bodies.

NX-API answers in several shapes depending on the API format and on how the
output was captured::

    {"ins_api": {"outputs": {"output": {...}}, "sid": ..., "type": ..., "version": ...}}
    {"body": {...}, "code": "200", "input": "show version", "msg": "Success"}
    {"jsonrpc": "2.0", "result": {"body": {...}}, "id": 1}
    {...}                                                   # bare body
    <ins_api>...</ins_api>                                  # XML format
    <nf:rpc-reply>...<__readonly__>...</__readonly__>...    # '| xml' output

All of them are normalised to the ``ins_api`` layout before the bodies are
decoded.
"""

import json
import logging
from typing import Any, Dict, List

from lxml import etree

from cisco_nxapi.base import constants as c
from cisco_nxapi.base.codec import Schema
from cisco_nxapi.base.exceptions import DecodeError, NXAPICommandError
from cisco_nxapi.base.helpers import xml_pipe_normalization, xml_to_dict
from cisco_nxapi.base.models import ResponseDict, ResultDict

logger = logging.getLogger(__name__)


def _xml_document(root: etree._Element) -> Any:
    readonly = root.xpath("descendant-or-self::*[local-name()='__readonly__']")
    if readonly:
        return xml_to_dict(readonly[0])

    tag = etree.QName(root).localname
    if tag == "ins_api":
        return {"ins_api": xml_to_dict(root)}
    return xml_to_dict(root)


def load_document(data: Any) -> Any:
    """
    Turn a raw response into plain Python data.

    :param data: dict, list, JSON or XML text (str or bytes), a file-like
        object or an lxml element.
    :raise DecodeError: if the text is neither JSON nor XML.
    """
    if isinstance(data, etree._Element):
        return _xml_document(data)
    if hasattr(data, "read"):
        data = data.read()
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError("response", "not UTF-8: {}".format(e)) from e
    if not isinstance(data, str):
        return data

    text = data.strip()
    if not text:
        return {}
    if text.startswith("<"):
        try:
            return _xml_document(xml_pipe_normalization(text))
        except etree.XMLSyntaxError as e:
            raise DecodeError("response", "invalid XML: {}".format(e)) from e
    try:
        return json.loads(text)
    except ValueError as e:
        raise DecodeError("response", "invalid JSON: {}".format(e)) from e


def _from_jsonrpc(document: Dict) -> Dict[str, Any]:
    error = document.get("error")
    if error:
        data = error.get("data") or {}
        return {
            "code": str(error.get("code", "")),
            "input": "",
            "msg": data.get("msg") or error.get("message", ""),
            "body": {},
        }
    result = document.get("result") or {}
    body = result.get("body")
    if body is None:
        # cli_ascii puts the text under "msg"
        body = result.get("msg")
    return {
        "code": c.NXAPI_SUCCESS_CODE,
        "input": "",
        "msg": "Success",
        "body": body,
    }


def _object(value: Any, path: str) -> Dict[str, Any]:
    if value is None or value == "":
        return {}
    if not isinstance(value, dict):
        raise DecodeError(
            path, "expected an object, got {}".format(type(value).__name__)
        )
    return value


def _is_result(document: Dict) -> bool:
    return "body" in document and ("code" in document or "input" in document)


def load_outputs(data: Any) -> Dict[str, Any]:
    """
    Normalise any response shape to ``{sid, type, version, outputs}``.

    ``outputs`` is always a list of raw ``{body, code, input, msg}`` objects.
    """
    document = load_document(data)
    response: Dict[str, Any] = {"sid": "", "type": "", "version": "", "outputs": []}

    if isinstance(document, list):
        # JSON-RPC batch
        for i, entry in enumerate(document):
            if not isinstance(entry, dict):
                raise DecodeError(
                    "response[{}]".format(i),
                    "expected an object, got {}".format(type(entry).__name__),
                )
            response["outputs"].append(_from_jsonrpc(entry))
        return response
    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise DecodeError(
            "response", "expected an object, got {}".format(type(document).__name__)
        )

    if "ins_api" in document:
        ins_api = _object(document["ins_api"], "response.ins_api")
        outputs = _object(ins_api.get("outputs"), "response.ins_api.outputs").get(
            "output", []
        )
        if not isinstance(outputs, list):
            outputs = [outputs]
        for key in ("sid", "type", "version"):
            response[key] = str(ins_api.get(key, ""))
        response["outputs"] = outputs
    elif "jsonrpc" in document:
        response["outputs"] = [_from_jsonrpc(document)]
    elif _is_result(document):
        response["outputs"] = [document]
    else:
        logger.debug("No envelope found, decoding a bare body")
        response["outputs"] = [
            {"code": c.NXAPI_SUCCESS_CODE, "input": "", "msg": "", "body": document}
        ]
    return response


def check_output(output: Dict[str, Any]) -> None:
    """
    Raise the device error carried by a normalised output, if any.

    :raise NXAPICommandError: if the output code is not 200.
    """
    code = str(output.get("code", c.NXAPI_SUCCESS_CODE))
    if code != c.NXAPI_SUCCESS_CODE:
        command = output.get("input", "")
        message = output.get("clierror") or output.get("msg", "")
        raise NXAPICommandError(command, message)


def _decode_output(output: Any, schema: Schema, path: str) -> ResultDict:
    if not isinstance(output, dict):
        raise DecodeError(
            path, "expected an object, got {}".format(type(output).__name__)
        )
    check_output(output)
    return {
        "code": str(output.get("code", c.NXAPI_SUCCESS_CODE)),
        "input": output.get("input") or "",
        "msg": output.get("msg") or "",
        "body": schema.decode(output.get("body"), path),
    }


def _single_output(data: Any) -> Dict[str, Any]:
    outputs = load_outputs(data)["outputs"]
    if len(outputs) != 1:
        raise DecodeError(
            "outputs", "expected exactly one output, got {}".format(len(outputs))
        )
    return outputs[0]


def decode_response(data: Any, schema: Schema) -> ResponseDict:
    """
    Decode a full response, one result per command output.

    :raise NXAPICommandError: if an output carries a code other than 200.
    :raise DecodeError: if a body does not match the schema.
    """
    response = load_outputs(data)
    outputs: List[ResultDict] = []
    for i, output in enumerate(response["outputs"]):
        outputs.append(_decode_output(output, schema, "outputs[{}].body".format(i)))
    return {
        "sid": response["sid"],
        "type": response["type"],
        "version": response["version"],
        "outputs": outputs,
    }


def decode_result(data: Any, schema: Schema) -> ResultDict:
    """Decode a response holding a single command output."""
    return _decode_output(_single_output(data), schema, "body")


def decode_body(data: Any, schema: Schema) -> Dict[str, Any]:
    """Decode a response holding a single command output, returning only its body."""
    return decode_result(data, schema)["body"]
