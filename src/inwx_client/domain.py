"""
Domain Service

domain.* methods.
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional, Protocol, Union

from inwx_client.args_builder import ArgsBuilder, paging_args
from inwx_client.data_parser import DataParser
from inwx_client.exceptions import INWXValidationError
from inwx_client.models import (
    DomainCheckItem,
    DomainInfo,
    DomainListResult,
    DomainRegisterRequest,
    DomainRegisterResult,
)

if TYPE_CHECKING:
    from inwx_client.client import INWXClient

logger = logging.getLogger("inwx.domain")

METHOD_DOMAIN_CHECK = "domain.check"
METHOD_DOMAIN_CREATE = "domain.create"
METHOD_DOMAIN_DELETE = "domain.delete"
METHOD_DOMAIN_INFO = "domain.info"
METHOD_DOMAIN_LIST = "domain.list"


class DomainService(Protocol):
    """Domain operations."""

    def check(self, domains: Union[str, List[str]], extended: bool = True) -> List[DomainCheckItem]:
        ...

    def register(self, request: DomainRegisterRequest) -> DomainRegisterResult:
        ...

    def delete(self, domain: str, scheduled_date: datetime) -> None:
        ...

    def info(self, domain: str, ro_id: int = 0) -> DomainInfo:
        ...

    def list(
        self,
        domain: Optional[str] = None,
        page: Optional[int] = None,
        page_limit: Optional[int] = None,
    ) -> DomainListResult:
        ...


class DomainAPI:
    """DomainService backed by an INWXClient."""

    def __init__(self, client: "INWXClient"):
        self._client = client

    def check(self, domains: Union[str, List[str]], extended: bool = True) -> List[DomainCheckItem]:
        """
        Check availability of one or more domains in a single call.

        Args:
            domains: Domain name(s) to check
            extended: Request the extended (wide) response with price and status

        Returns:
            One item per checked domain

        Raises:
            INWXValidationError: If no domain was given
            INWXCommandError: If command fails
        """
        if isinstance(domains, str):
            domains = [domains]
        if not domains:
            raise INWXValidationError("At least one domain is required")

        data = self._client.call(METHOD_DOMAIN_CHECK, ArgsBuilder.build_domain_check(domains, extended))
        return DataParser.parse_domain_check(data)

    def register(self, request: DomainRegisterRequest) -> DomainRegisterResult:
        """
        Register a domain.

        Raises:
            INWXValidationError: If request is missing
            INWXObjectExists: If the domain is already registered
        """
        if request is None:
            raise INWXValidationError("Register request can't be None")

        data = self._client.call(METHOD_DOMAIN_CREATE, ArgsBuilder.build_domain_register(request))
        result = DataParser.parse_domain_register(data)
        logger.info(f"Registered {request.domain} (roId {result.ro_id})")
        return result

    def delete(self, domain: str, scheduled_date: datetime) -> None:
        """
        Delete a domain at the given date.

        Args:
            domain: Domain name
            scheduled_date: When the deletion takes effect
        """
        self._client.call(METHOD_DOMAIN_DELETE, ArgsBuilder.build_domain_delete(domain, scheduled_date))
        logger.info(f"Scheduled deletion of {domain}")

    def info(self, domain: str, ro_id: int = 0) -> DomainInfo:
        """
        Get domain details including contacts.

        Args:
            domain: Domain name
            ro_id: Registry object id, omitted when 0

        Raises:
            INWXObjectNotFound: If domain not found
        """
        data = self._client.call(METHOD_DOMAIN_INFO, ArgsBuilder.build_object_info(domain, ro_id, wide="2"))
        return DataParser.parse_domain_info(data)

    def list(
        self,
        domain: Optional[str] = None,
        page: Optional[int] = None,
        page_limit: Optional[int] = None,
    ) -> DomainListResult:
        """List domains in the account, optionally filtered by a search pattern."""
        args = paging_args(page, page_limit)
        if domain is not None:
            args["domain"] = domain
        data = self._client.call(METHOD_DOMAIN_LIST, args)
        return DataParser.parse_domain_list(data)
