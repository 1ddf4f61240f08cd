"""Helper functions for the NX-API decoders."""

import ipaddress
import logging

# std libs
import re
from typing import Optional, Dict, Any, List, Union

# third party libs
from lxml import etree
from netaddr import EUI
from netaddr import mac_unix
from netutils.interface import canonical_interface_name as _canonical_interface_name

# local modules
from cisco_nxapi.base import constants
from cisco_nxapi.base.duration import Duration
from cisco_nxapi.base.timestamp import TimeStamp

# -------------------------------------------------------------------
# Functional Global
# -------------------------------------------------------------------
logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# helper classes -- will not be exported
# -------------------------------------------------------------------
class _MACFormat(mac_unix):
    pass


_MACFormat.word_fmt = "%.2X"


# -------------------------------------------------------------------
# callable helpers
# -------------------------------------------------------------------
def get_table_rows(parent_table: Optional[Dict], table_name: str, row_name: str) -> List:
    """
    Return the rows of an NX-OS table as a flat list.

    Inconsistent behavior:
    {'TABLE_intf': [{'ROW_intf': {
    vs
    {'TABLE_mac_address': {'ROW_mac_address': [{
    vs
    {'TABLE_vrf': {'ROW_vrf': {'TABLE_adj': {'ROW_adj': {
    """
    if not parent_table:
        return []
    _table = parent_table.get(table_name)
    if _table is None or _table == "":
        return []
    if not isinstance(_table, list):
        _table = [_table]

    _table_rows = []
    for _table_entry in _table:
        if not isinstance(_table_entry, dict):
            logger.debug("Skipping non-object entry in %s: %r", table_name, _table_entry)
            continue
        _rows = _table_entry.get(row_name)
        if _rows is None:
            continue
        if not isinstance(_rows, list):
            _rows = [_rows]
        _table_rows.extend(_rows)
    return _table_rows


def xml_pipe_normalization(xml_output: Union[str, bytes]) -> etree._Element:
    """Convert string output from '| xml' to lxml etree."""
    if isinstance(xml_output, bytes):
        xml_output = xml_output.decode()
    # NX-OS appends ]]>]]> to some of the '| xml' output (remove this)
    xml_output = re.sub(re.escape(constants.XML_PIPE_TRAILER), "", xml_output)
    xml_output = xml_output.strip()

    # etree fromstring() requires byte string
    return etree.fromstring(xml_output.encode())


def xml_to_dict(xml_element: etree._Element) -> Any:
    """
    Convert an XML element into the dict shape NX-API uses for JSON.

    Namespaces are dropped; repeated child elements become a list. Leaves
    become their text ("" when empty).
    """
    children = [child for child in xml_element if isinstance(child.tag, str)]
    if not children:
        return xml_element.text if xml_element.text is not None else ""

    result: Dict[str, Any] = {}
    for child in children:
        key = etree.QName(child).localname
        value = xml_to_dict(child)
        if key in result:
            if not isinstance(result[key], list):
                result[key] = [result[key]]
            result[key].append(value)
        else:
            result[key] = value
    return result


def mac(raw: str) -> str:
    """
    Converts a raw string to a standardised MAC Address EUI Format.

    :param raw: the raw string containing the value of the MAC Address
    :return: a string with the MAC Address in EUI format

    Example:

    .. code-block:: python

        >>> mac('0123.4567.89ab')
        u'01:23:45:67:89:AB'
    """
    if raw.endswith(":"):
        flat_raw = raw.replace(":", "")
        raw = "{flat_raw}{zeros_stuffed}".format(
            flat_raw=flat_raw, zeros_stuffed="0" * (12 - len(flat_raw))
        )
    return str(EUI(raw, dialect=_MACFormat))


def ip(addr: str, version: Optional[int] = None) -> str:
    """
    Converts a raw string to a valid IP address. Optional version argument will detect that \
    object matches specified version.

    :param addr: the raw string containing the value of the IP Address
    :param version: insist on a specific IP address version.
    :return: a string containing the IP Address in a standard format (no leading zeros, \
    zeros-grouping, lowercase)
    """
    scope = ""
    if "%" in addr:
        addr, scope = addr.split("%", 1)
    addr_obj = ipaddress.ip_address(addr)
    if version and addr_obj.version != version:
        raise ValueError("{} is not an ipv{} address".format(addr, version))
    return_addr = str(addr_obj)
    if scope:
        return_addr = "%s%%%s" % (return_addr, scope)
    return return_addr


def canonical_interface_name(interface: str) -> str:
    """Expand an NX-OS interface abbreviation (Eth1/1 -> Ethernet1/1)."""
    return _canonical_interface_name(interface)


def jsonify(data: Any) -> Any:
    """
    Prepare a decoded record for json.dumps().

    Durations and timestamps are ints underneath; render them as their
    canonical strings instead.
    """
    if isinstance(data, (Duration, TimeStamp)):
        return str(data)
    if isinstance(data, dict):
        return {k: jsonify(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [jsonify(v) for v in data]
    return data
