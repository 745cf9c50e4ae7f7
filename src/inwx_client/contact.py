"""
Contact Service

contact.* methods for registrant/admin/tech/billing handles.
"""

from typing import TYPE_CHECKING, Optional, Protocol

from inwx_client.args_builder import ArgsBuilder, paging_args
from inwx_client.data_parser import DataParser
from inwx_client.exceptions import INWXValidationError
from inwx_client.models import Contact, ContactListResult, ContactRequest

if TYPE_CHECKING:
    from inwx_client.client import INWXClient

METHOD_CONTACT_CREATE = "contact.create"
METHOD_CONTACT_DELETE = "contact.delete"
METHOD_CONTACT_INFO = "contact.info"
METHOD_CONTACT_LIST = "contact.list"
METHOD_CONTACT_UPDATE = "contact.update"


class ContactService(Protocol):
    """Contact handle operations."""

    def create(self, request: ContactRequest) -> int:
        ...

    def info(self, contact_id: int) -> Contact:
        ...

    def update(self, contact_id: int, request: Optional[ContactRequest]) -> None:
        ...

    def delete(self, contact_id: int) -> None:
        ...

    def list(
        self,
        search: Optional[str] = None,
        page: Optional[int] = None,
        page_limit: Optional[int] = None,
    ) -> ContactListResult:
        ...


class ContactAPI:
    """ContactService backed by an INWXClient."""

    def __init__(self, client: "INWXClient"):
        self._client = client

    def create(self, request: ContactRequest) -> int:
        """
        Create a contact handle.

        Returns:
            Id of the new contact
        """
        if request is None:
            raise INWXValidationError("Contact request can't be None")

        data = self._client.call(METHOD_CONTACT_CREATE, ArgsBuilder.build_contact(request))
        return DataParser.parse_id(data)

    def info(self, contact_id: int) -> Contact:
        data = self._client.call(METHOD_CONTACT_INFO, {"id": contact_id, "wide": "1"})
        return DataParser.parse_contact_info(data)

    def update(self, contact_id: int, request: Optional[ContactRequest]) -> None:
        """
        Update a contact handle. Only fields set on request are sent.

        Raises:
            INWXValidationError: If request is None
        """
        if request is None:
            raise INWXValidationError("Request can't be None")

        args = ArgsBuilder.build_contact(request)
        args["id"] = contact_id
        self._client.call(METHOD_CONTACT_UPDATE, args)

    def delete(self, contact_id: int) -> None:
        self._client.call(METHOD_CONTACT_DELETE, {"id": contact_id})

    def list(
        self,
        search: Optional[str] = None,
        page: Optional[int] = None,
        page_limit: Optional[int] = None,
    ) -> ContactListResult:
        args = paging_args(page, page_limit)
        if search is not None:
            args["search"] = search
        data = self._client.call(METHOD_CONTACT_LIST, args)
        return DataParser.parse_contact_list(data)
