"""
INWX Client

Session handling and response classification for the DomRobot API.
"""

import logging
from typing import Any, Dict, Optional, Union

from inwx_client.account import AccountAPI
from inwx_client.connection import RPCConnection
from inwx_client.contact import ContactAPI
from inwx_client.data_parser import DataParser
from inwx_client.domain import DomainAPI
from inwx_client.exceptions import (
    INWXAuthenticationError,
    INWXCommandError,
    INWXDecodeError,
    INWXError,
    INWXObjectExists,
    INWXObjectNotFound,
)
from inwx_client.models import LoginResult, RPCRequest, RPCResponse
from inwx_client.nameserver import NameserverAPI

logger = logging.getLogger("inwx.client")

API_URL = "https://api.domrobot.com/xmlrpc/"
API_SANDBOX_URL = "https://api.ote.domrobot.com/xmlrpc/"
API_LANGUAGE = "eng"

METHOD_ACCOUNT_LOGIN = "account.login"
METHOD_ACCOUNT_LOGOUT = "account.logout"


def classify_response(response: RPCResponse) -> Optional[INWXCommandError]:
    """
    Map a response envelope to an error, or None on success.

    Codes 1000-1500 (inclusive) are success.
    """
    if response.success:
        return None

    code = response.code
    args = (response.message, code, response.reason_code, response.reason)

    # Authentication errors
    if code in (2200, 2201, 2202):
        return INWXAuthenticationError(*args)

    # Object exists
    if code == 2302:
        return INWXObjectExists(*args)

    # Object not found
    if code == 2303:
        return INWXObjectNotFound(*args)

    return INWXCommandError(*args)


def check_response(response: RPCResponse) -> RPCResponse:
    """
    Raise the classified error if the response is not successful.

    Raises:
        INWXCommandError: If command failed
        INWXAuthenticationError: If authentication failed
        INWXObjectNotFound: If object not found
        INWXObjectExists: If object already exists
    """
    error = classify_response(response)
    if error is not None:
        raise error
    return response


class INWXClient:
    """
    Client for the INWX DomRobot XML-RPC API.

    Example:
        client = INWXClient("user", "secret", sandbox=True)

        with client:
            for item in client.domains.check(["example.com", "example.net"]):
                print(f"{item.domain}: {item.status}")

            record_id = client.nameservers.create_record(
                NameserverRecordRequest(domain="example.com", type="A", content="192.0.2.1")
            )
    """

    def __init__(
        self,
        username: str,
        password: str,
        sandbox: bool = False,
        timeout: float = 30,
        verify: bool = True,
        log_level: Union[int, str, None] = None,
        connection: Optional[RPCConnection] = None,
    ):
        """
        Initialize client.

        Args:
            username: Account username
            password: Account password
            sandbox: Use the OTE (testing) endpoint instead of production
            timeout: HTTP timeout in seconds
            verify: Whether to verify the server certificate
            log_level: If set, level applied to the process-wide "inwx"
                logger. This affects every client instance, not just this one.
            connection: Transport to use instead of a new RPCConnection
        """
        if log_level is not None:
            logging.getLogger("inwx").setLevel(log_level)

        self.username = username
        self._password = password
        self.base_url = API_SANDBOX_URL if sandbox else API_URL
        self._connection = connection or RPCConnection(self.base_url, timeout=timeout, verify=verify)
        self._logged_in = False

        logger.debug(f"Base URL: {self.base_url}")

        self.domains = DomainAPI(self)
        self.nameservers = NameserverAPI(self)
        self.contacts = ContactAPI(self)
        self.account = AccountAPI(self)

    @property
    def is_logged_in(self) -> bool:
        """Check if login succeeded and logout has not been called."""
        return self._logged_in

    def __enter__(self):
        """Context manager entry."""
        self.login()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if self._logged_in:
            try:
                self.logout()
            except Exception as e:
                logger.warning(f"Logout failed: {e}")
        self.close()
        return False

    # =========================================================================
    # Request Handling
    # =========================================================================

    def new_request(self, method: str, args: Optional[Dict[str, Any]] = None) -> RPCRequest:
        """Create a request, adding the fixed API language argument."""
        request_args = dict(args) if args else {}
        request_args["lang"] = API_LANGUAGE
        return RPCRequest(method=method, args=request_args)

    def do(self, request: RPCRequest) -> Dict[str, Any]:
        """
        Send a request and return its resData.

        Raises:
            INWXConnectionError: On transport failure
            INWXCommandError: If the response code is not a success code
        """
        response = self._connection.call(request.method, request.args)
        check_response(response)
        return response.data

    def call(self, method: str, args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Build and send a request in one step."""
        return self.do(self.new_request(method, args))

    def close(self) -> None:
        """Release the HTTP session."""
        self._connection.close()

    # =========================================================================
    # Session Commands
    # =========================================================================

    def login(self) -> LoginResult:
        """
        Login with the configured credentials.

        Returns:
            Login result. If needs_unlock is set, call account.unlock(tan).

        Raises:
            INWXAuthenticationError: If login fails
            INWXDecodeError: If the login result is malformed; the
                server session is logged out first
        """
        data = self.call(METHOD_ACCOUNT_LOGIN, {
            "user": self.username,
            "pass": self._password,
        })
        self._logged_in = True

        try:
            result = DataParser.parse_login(data)
        except INWXDecodeError:
            try:
                self.logout()
            except INWXError as e:
                logger.warning(f"Logout failed: {e}")
            raise

        logger.info(f"Logged in as {self.username}")
        return result

    def logout(self) -> None:
        """Logout. Callers are responsible for invoking this."""
        try:
            self.call(METHOD_ACCOUNT_LOGOUT)
        finally:
            self._logged_in = False
        logger.info("Logged out")
