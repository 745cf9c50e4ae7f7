"""
XML-RPC Builder

Builds XML-RPC methodCall documents.
"""

import base64
from datetime import datetime, timezone
from typing import Any, List

from lxml import etree

from inwx_client.exceptions import INWXXMLError

# XML-RPC <int> is a signed 32-bit value
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

DATETIME_FORMAT = "%Y%m%dT%H:%M:%S"


def _to_bytes(root: etree._Element) -> bytes:
    """Convert element tree to XML bytes."""
    return etree.tostring(
        root,
        xml_declaration=True,
        encoding="UTF-8",
        pretty_print=False
    )


def _add_value(parent: etree._Element, value: Any) -> None:
    """Append a <value> element encoding value to parent."""
    value_elem = etree.SubElement(parent, "value")

    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        etree.SubElement(value_elem, "boolean").text = "1" if value else "0"

    elif isinstance(value, int):
        tag = "int" if INT_MIN <= value <= INT_MAX else "i8"
        etree.SubElement(value_elem, tag).text = str(value)

    elif isinstance(value, float):
        etree.SubElement(value_elem, "double").text = repr(value)

    elif isinstance(value, str):
        etree.SubElement(value_elem, "string").text = value

    elif isinstance(value, datetime):
        # Aware values are sent as UTC; naive values are taken to be UTC
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        etree.SubElement(value_elem, "dateTime.iso8601").text = value.strftime(DATETIME_FORMAT)

    elif isinstance(value, (bytes, bytearray)):
        etree.SubElement(value_elem, "base64").text = base64.b64encode(bytes(value)).decode("ascii")

    elif isinstance(value, (list, tuple)):
        data = etree.SubElement(etree.SubElement(value_elem, "array"), "data")
        for item in value:
            _add_value(data, item)

    elif isinstance(value, dict):
        struct = etree.SubElement(value_elem, "struct")
        for key, item in value.items():
            if not isinstance(key, str):
                raise INWXXMLError(f"Struct keys must be strings, got {type(key).__name__}")
            member = etree.SubElement(struct, "member")
            etree.SubElement(member, "name").text = key
            _add_value(member, item)

    elif value is None:
        raise INWXXMLError("Cannot encode None: the API does not accept nil values")

    else:
        raise INWXXMLError(f"Cannot encode value of type {type(value).__name__}")


class XMLBuilder:
    """
    Builds XML-RPC requests.

    All methods are static and return XML bytes ready to send.
    """

    @staticmethod
    def build_method_call(method: str, params: List[Any]) -> bytes:
        """
        Build a methodCall document.

        Args:
            method: Remote method name, e.g. "domain.check"
            params: Positional parameters

        Returns:
            XML bytes

        Raises:
            INWXXMLError: If a parameter cannot be encoded
        """
        root = etree.Element("methodCall")

        # lxml rejects control characters and NULL bytes with ValueError
        try:
            etree.SubElement(root, "methodName").text = method

            params_elem = etree.SubElement(root, "params")
            for param in params:
                _add_value(etree.SubElement(params_elem, "param"), param)
        except ValueError as e:
            raise INWXXMLError(f"Cannot encode request for {method!r}: {e}") from e

        return _to_bytes(root)
