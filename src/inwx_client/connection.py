"""
RPC Connection

HTTPS transport for XML-RPC calls.
"""

import logging
from typing import Any, Dict, Optional

import requests

from inwx_client import __version__
from inwx_client.exceptions import INWXConnectionError
from inwx_client.models import RPCResponse
from inwx_client.xml_builder import XMLBuilder
from inwx_client.xml_parser import XMLParser

logger = logging.getLogger("inwx.connection")


class RPCConnection:
    """
    Sends XML-RPC method calls over HTTPS.

    The underlying requests.Session keeps the session cookie set by
    account.login, so every call after login is authenticated.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 30,
        verify: bool = True,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize connection.

        Args:
            url: XML-RPC endpoint URL
            timeout: Request timeout in seconds
            verify: Whether to verify the server certificate
            session: Optional pre-configured requests session
        """
        self.url = url
        self.timeout = timeout
        self.verify = verify
        self._session = session or requests.Session()
        self._session.headers.update({
            "Content-Type": "text/xml; charset=utf-8",
            "User-Agent": f"inwx-client/{__version__}",
        })

    def call(self, method: str, args: Dict[str, Any]) -> RPCResponse:
        """
        Perform a single method call.

        Args:
            method: Remote method name
            args: Named arguments, sent as one struct parameter

        Returns:
            Decoded response envelope

        Raises:
            INWXConnectionError: On network failure or non-200 status
            INWXXMLError: If the request or response XML is invalid
        """
        body = XMLBuilder.build_method_call(method, [args])
        logger.debug(f"Calling {method} at {self.url}")

        try:
            http_response = self._session.post(
                self.url,
                data=body,
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.RequestException as e:
            raise INWXConnectionError(f"Request to {self.url} failed: {e}") from e

        if http_response.status_code != 200:
            raise INWXConnectionError(
                f"Unexpected HTTP status {http_response.status_code} from {self.url}"
            )

        response = XMLParser.parse_method_response(http_response.content)
        logger.debug(f"{method} -> {response.code} {response.message}")
        return response

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()
