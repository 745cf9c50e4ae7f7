"""
Account Service

account.* methods.
"""

import logging
from typing import TYPE_CHECKING, Protocol

from inwx_client.data_parser import DataParser
from inwx_client.exceptions import INWXValidationError
from inwx_client.models import AccountInfo, LoginResult

if TYPE_CHECKING:
    from inwx_client.client import INWXClient

logger = logging.getLogger("inwx.account")

METHOD_ACCOUNT_INFO = "account.info"
METHOD_ACCOUNT_UNLOCK = "account.unlock"


class AccountService(Protocol):
    """Account operations."""

    def login(self) -> LoginResult:
        ...

    def logout(self) -> None:
        ...

    def unlock(self, tan: str) -> None:
        ...

    def info(self) -> AccountInfo:
        ...


class AccountAPI:
    """AccountService backed by an INWXClient."""

    def __init__(self, client: "INWXClient"):
        self._client = client

    def login(self) -> LoginResult:
        return self._client.login()

    def logout(self) -> None:
        self._client.logout()

    def unlock(self, tan: str) -> None:
        """
        Unlock a session of an account with two-factor authentication.

        Args:
            tan: Current one-time code
        """
        if not tan:
            raise INWXValidationError("TAN is required")
        self._client.call(METHOD_ACCOUNT_UNLOCK, {"tan": tan})
        logger.info("Session unlocked")

    def info(self) -> AccountInfo:
        data = self._client.call(METHOD_ACCOUNT_INFO)
        return DataParser.parse_account_info(data)
