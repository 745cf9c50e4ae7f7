"""
XML-RPC Parser

Parses XML-RPC methodResponse documents into response envelopes.

XMLParser.parse_value decodes a lone <value> document. The client never
calls it; it exists so the value decoder can be tested on its own.
"""

import base64
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from lxml import etree

from inwx_client.exceptions import INWXXMLError
from inwx_client.models import RPCResponse

logger = logging.getLogger("inwx.parser")

# Secure parser
_parser = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    remove_blank_text=True,
)

_DATETIME_FORMATS = (
    "%Y%m%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%Y%m%dT%H%M%S",
)


def parse_datetime(text: str) -> datetime:
    """Parse an XML-RPC dateTime.iso8601 value."""
    text = text.strip()
    for fmt in _DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise INWXXMLError(f"Invalid dateTime.iso8601 value: {text!r}")


def _parse_xml(xml_data: bytes) -> etree._Element:
    """Parse XML with secure parser."""
    try:
        return etree.fromstring(xml_data, _parser)
    except etree.XMLSyntaxError as e:
        raise INWXXMLError(f"XML parse error: {e}")


def _parse_value(value_elem: etree._Element) -> Any:
    """Decode a <value> element into a Python object."""
    if len(value_elem) == 0:
        # Untyped value defaults to string
        return value_elem.text or ""

    typed = value_elem[0]
    tag = typed.tag
    text = typed.text or ""

    if tag == "string":
        return text

    if tag in ("int", "i4", "i8"):
        try:
            return int(text.strip())
        except ValueError:
            raise INWXXMLError(f"Invalid <{tag}> value: {text!r}")

    if tag == "boolean":
        if text.strip() not in ("0", "1"):
            raise INWXXMLError(f"Invalid <boolean> value: {text!r}")
        return text.strip() == "1"

    if tag == "double":
        try:
            return float(text.strip())
        except ValueError:
            raise INWXXMLError(f"Invalid <double> value: {text!r}")

    if tag == "dateTime.iso8601":
        return parse_datetime(text)

    if tag == "base64":
        try:
            return base64.b64decode(text)
        except ValueError as e:
            raise INWXXMLError(f"Invalid <base64> value: {e}")

    if tag == "nil":
        return None

    if tag == "array":
        data = typed.find("data")
        if data is None:
            raise INWXXMLError("<array> without <data>")
        return [_parse_value(v) for v in data.findall("value")]

    if tag == "struct":
        return _parse_struct(typed)

    raise INWXXMLError(f"Unknown value type <{tag}>")


def _parse_struct(struct_elem: etree._Element) -> Dict[str, Any]:
    """Decode a <struct> element into a dict."""
    result = {}
    for member in struct_elem.findall("member"):
        name = member.find("name")
        value = member.find("value")
        if name is None or value is None:
            raise INWXXMLError("<member> requires <name> and <value>")
        result[name.text or ""] = _parse_value(value)
    return result


def _to_int(value: Any, field_name: str) -> int:
    """Coerce an envelope field to int."""
    if isinstance(value, bool):
        raise INWXXMLError(f"Envelope field '{field_name}' is not an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise INWXXMLError(f"Envelope field '{field_name}' is not an integer: {value!r}")


class XMLParser:
    """
    Parses XML-RPC responses.

    All methods are static and return structured response objects.
    """

    @staticmethod
    def parse_value(xml_data: bytes) -> Any:
        """
        Parse a standalone <value> document.

        Args:
            xml_data: Raw XML bytes of a <value> element

        Returns:
            Decoded Python object
        """
        root = _parse_xml(xml_data)
        if root.tag != "value":
            raise INWXXMLError(f"Expected <value>, got <{root.tag}>")
        return _parse_value(root)

    @staticmethod
    def parse_method_response(xml_data: bytes) -> RPCResponse:
        """
        Parse methodResponse into the API envelope.

        A <fault> becomes an envelope carrying faultCode/faultString so
        it is classified like any other rejected command.

        Args:
            xml_data: Raw XML bytes

        Returns:
            RPCResponse object

        Raises:
            INWXXMLError: If the document is not a valid methodResponse
        """
        root = _parse_xml(xml_data)
        if root.tag != "methodResponse":
            raise INWXXMLError(f"Expected <methodResponse>, got <{root.tag}>")

        fault = root.find("fault/value")
        if fault is not None:
            fault_data = _parse_value(fault)
            if not isinstance(fault_data, dict):
                raise INWXXMLError("Fault value is not a struct")
            logger.debug(f"Fault received: {fault_data}")
            return RPCResponse(
                code=_to_int(fault_data.get("faultCode"), "faultCode"),
                message=str(fault_data.get("faultString", "")),
            )

        value = root.find("params/param/value")
        if value is None:
            raise INWXXMLError("No params element found")

        envelope = _parse_value(value)
        if not isinstance(envelope, dict):
            raise INWXXMLError("Response value is not a struct")

        if "code" not in envelope:
            raise INWXXMLError("Response has no code")

        res_data: Optional[Any] = envelope.get("resData")
        if res_data is None:
            res_data = {}
        elif not isinstance(res_data, dict):
            raise INWXXMLError("resData is not a struct")

        return RPCResponse(
            code=_to_int(envelope["code"], "code"),
            message=str(envelope.get("msg", "")),
            reason_code=str(envelope.get("reasonCode", "")),
            reason=str(envelope.get("reason", "")),
            data=res_data,
        )
