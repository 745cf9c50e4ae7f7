"""
Nameserver Service

nameserver.* methods: zones and DNS records.
"""

import logging
from typing import TYPE_CHECKING, List, Optional, Protocol

from inwx_client.args_builder import ArgsBuilder, paging_args
from inwx_client.data_parser import DataParser
from inwx_client.exceptions import INWXValidationError
from inwx_client.models import (
    NameserverCheckResult,
    NameserverCreateRequest,
    NameserverInfo,
    NameserverListResult,
    NameserverRecordRequest,
)

if TYPE_CHECKING:
    from inwx_client.client import INWXClient

logger = logging.getLogger("inwx.nameserver")

METHOD_NAMESERVER_CHECK = "nameserver.check"
METHOD_NAMESERVER_CREATE = "nameserver.create"
METHOD_NAMESERVER_CREATE_RECORD = "nameserver.createRecord"
METHOD_NAMESERVER_DELETE = "nameserver.delete"
METHOD_NAMESERVER_DELETE_RECORD = "nameserver.deleteRecord"
METHOD_NAMESERVER_INFO = "nameserver.info"
METHOD_NAMESERVER_LIST = "nameserver.list"
METHOD_NAMESERVER_UPDATE_RECORD = "nameserver.updateRecord"


class NameserverService(Protocol):
    """Nameserver (zone) and record operations."""

    def check(self, domain: str, nameservers: List[str]) -> NameserverCheckResult:
        ...

    def create(self, request: NameserverCreateRequest) -> int:
        ...

    def info(self, domain: str, ro_id: int = 0) -> NameserverInfo:
        ...

    def list(
        self,
        domain: Optional[str] = None,
        page: Optional[int] = None,
        page_limit: Optional[int] = None,
    ) -> NameserverListResult:
        ...

    def delete(self, domain: Optional[str] = None, ro_id: int = 0) -> None:
        ...

    def create_record(self, request: NameserverRecordRequest) -> int:
        ...

    def update_record(self, record_id: int, request: Optional[NameserverRecordRequest]) -> None:
        ...

    def delete_record(self, record_id: int) -> None:
        ...


class NameserverAPI:
    """NameserverService backed by an INWXClient."""

    def __init__(self, client: "INWXClient"):
        self._client = client

    def check(self, domain: str, nameservers: List[str]) -> NameserverCheckResult:
        """Check whether the given nameservers answer for domain."""
        data = self._client.call(METHOD_NAMESERVER_CHECK, {
            "domain": domain,
            "ns": list(nameservers),
        })
        return DataParser.parse_nameserver_check(data)

    def create(self, request: NameserverCreateRequest) -> int:
        """
        Create a zone.

        Returns:
            roId of the new zone
        """
        if request is None:
            raise INWXValidationError("Create request can't be None")

        data = self._client.call(METHOD_NAMESERVER_CREATE, ArgsBuilder.build_nameserver_create(request))
        ro_id = DataParser.parse_id(data, "roId")
        logger.info(f"Created zone {request.domain} (roId {ro_id})")
        return ro_id

    def info(self, domain: str, ro_id: int = 0) -> NameserverInfo:
        """
        Get zone details and records.

        Args:
            domain: Zone name
            ro_id: Registry object id, omitted when 0
        """
        data = self._client.call(METHOD_NAMESERVER_INFO, ArgsBuilder.build_object_info(domain, ro_id))
        return DataParser.parse_nameserver_info(data)

    def list(
        self,
        domain: Optional[str] = None,
        page: Optional[int] = None,
        page_limit: Optional[int] = None,
    ) -> NameserverListResult:
        args = paging_args(page, page_limit)
        if domain is not None:
            args["domain"] = domain
        data = self._client.call(METHOD_NAMESERVER_LIST, args)
        return DataParser.parse_nameserver_list(data)

    def delete(self, domain: Optional[str] = None, ro_id: int = 0) -> None:
        """
        Delete a zone by name or roId.

        Raises:
            INWXValidationError: If neither domain nor ro_id is given
        """
        if not domain and not ro_id:
            raise INWXValidationError("Either domain or ro_id is required")

        args = {}
        if domain:
            args["domain"] = domain
        if ro_id:
            args["roId"] = ro_id
        self._client.call(METHOD_NAMESERVER_DELETE, args)
        logger.info(f"Deleted zone {domain or ro_id}")

    def create_record(self, request: NameserverRecordRequest) -> int:
        """
        Create a DNS record.

        Returns:
            Id of the new record
        """
        if request is None:
            raise INWXValidationError("Record request can't be None")

        data = self._client.call(METHOD_NAMESERVER_CREATE_RECORD, ArgsBuilder.build_record(request))
        return DataParser.parse_id(data)

    def update_record(self, record_id: int, request: Optional[NameserverRecordRequest]) -> None:
        """
        Update a DNS record.

        Raises:
            INWXValidationError: If request is None (nothing is sent)
        """
        if request is None:
            raise INWXValidationError("Request can't be None")

        args = ArgsBuilder.build_record(request)
        args["id"] = record_id
        self._client.call(METHOD_NAMESERVER_UPDATE_RECORD, args)

    def delete_record(self, record_id: int) -> None:
        self._client.call(METHOD_NAMESERVER_DELETE_RECORD, {"id": record_id})
