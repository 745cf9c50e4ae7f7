"""
INWX Client

Python client for the INWX DomRobot XML-RPC API.
"""

__version__ = "0.2.0"

from inwx_client.client import (
    API_SANDBOX_URL,
    API_URL,
    INWXClient,
    check_response,
    classify_response,
)
from inwx_client.connection import RPCConnection
from inwx_client.exceptions import (
    INWXAuthenticationError,
    INWXCommandError,
    INWXConnectionError,
    INWXDecodeError,
    INWXError,
    INWXObjectExists,
    INWXObjectNotFound,
    INWXValidationError,
    INWXXMLError,
)
from inwx_client.models import (
    AccountInfo,
    Contact,
    ContactListResult,
    ContactRequest,
    DomainCheckItem,
    DomainInfo,
    DomainListItem,
    DomainListResult,
    DomainRegisterRequest,
    DomainRegisterResult,
    LoginResult,
    NameserverCheckResult,
    NameserverCreateRequest,
    NameserverInfo,
    NameserverListItem,
    NameserverListResult,
    NameserverRecord,
    NameserverRecordRequest,
    RPCRequest,
    RPCResponse,
)

__all__ = [
    "__version__",
    "API_URL",
    "API_SANDBOX_URL",
    "INWXClient",
    "RPCConnection",
    "check_response",
    "classify_response",
    # Exceptions
    "INWXError",
    "INWXValidationError",
    "INWXConnectionError",
    "INWXXMLError",
    "INWXDecodeError",
    "INWXCommandError",
    "INWXAuthenticationError",
    "INWXObjectNotFound",
    "INWXObjectExists",
    # Models
    "RPCRequest",
    "RPCResponse",
    "DomainRegisterRequest",
    "NameserverRecordRequest",
    "NameserverCreateRequest",
    "ContactRequest",
    "LoginResult",
    "AccountInfo",
    "DomainCheckItem",
    "DomainRegisterResult",
    "DomainInfo",
    "DomainListItem",
    "DomainListResult",
    "Contact",
    "ContactListResult",
    "NameserverCheckResult",
    "NameserverInfo",
    "NameserverRecord",
    "NameserverListItem",
    "NameserverListResult",
]
