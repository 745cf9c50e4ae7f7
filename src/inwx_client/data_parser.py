"""
Response Data Parser

Projects the loosely typed resData struct onto result models.

Missing keys decode to the zero value of the field type, so minor
schema additions or omissions on the registry side do not break
callers. A key that is present with a value of the wrong shape raises
INWXDecodeError instead.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from inwx_client.exceptions import INWXDecodeError, INWXXMLError
from inwx_client.models import (
    AccountInfo,
    Contact,
    ContactListResult,
    DomainCheckItem,
    DomainInfo,
    DomainListItem,
    DomainListResult,
    DomainRegisterResult,
    LoginResult,
    NameserverCheckResult,
    NameserverInfo,
    NameserverListItem,
    NameserverListResult,
    NameserverRecord,
)
from inwx_client.xml_parser import parse_datetime


def _get_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise INWXDecodeError(f"Field '{key}' is not a string: {value!r}")


def _get_int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise INWXDecodeError(f"Field '{key}' is not an integer: {value!r}")


def _get_float(data: Dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None or value == "":
        return 0.0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise INWXDecodeError(f"Field '{key}' is not a number: {value!r}")


def _get_datetime(data: Dict[str, Any], key: str) -> Optional[datetime]:
    value = data.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return parse_datetime(value)
        except INWXXMLError:
            pass
    raise INWXDecodeError(f"Field '{key}' is not a timestamp: {value!r}")


def _get_str_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise INWXDecodeError(f"Field '{key}' is not a list: {value!r}")
    if not all(isinstance(item, str) for item in value):
        raise INWXDecodeError(f"Field '{key}' contains non-string items")
    return list(value)


def _get_struct(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise INWXDecodeError(f"Field '{key}' is not a struct: {value!r}")
    return value


def _get_struct_list(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise INWXDecodeError(f"Field '{key}' is not a list of structs")
    return value


class DataParser:
    """
    Parses resData into result models.

    All methods are static.
    """

    # -------------------------------------------------------------------------
    # Account
    # -------------------------------------------------------------------------

    @staticmethod
    def parse_login(data: Dict[str, Any]) -> LoginResult:
        return LoginResult(
            customer_id=_get_int(data, "customerId"),
            account_id=_get_int(data, "accountId"),
            tfa=_get_str(data, "tfa"),
        )

    @staticmethod
    def parse_account_info(data: Dict[str, Any]) -> AccountInfo:
        return AccountInfo(
            account_id=_get_int(data, "accountId"),
            customer_id=_get_int(data, "customerId"),
            customer_no=_get_int(data, "customerNo"),
            username=_get_str(data, "username"),
            name=_get_str(data, "name"),
            email=_get_str(data, "email"),
        )

    # -------------------------------------------------------------------------
    # Domain
    # -------------------------------------------------------------------------

    @staticmethod
    def parse_domain_check(data: Dict[str, Any]) -> List[DomainCheckItem]:
        """Parse domain.check resData (one entry per checked name)."""
        return [
            DomainCheckItem(
                available=_get_int(item, "avail"),
                status=_get_str(item, "status"),
                name=_get_str(item, "name"),
                domain=_get_str(item, "domain"),
                tld=_get_str(item, "tld"),
                check_method=_get_str(item, "checkmethod"),
                price=_get_float(item, "price"),
                check_time=_get_float(item, "checktime"),
            )
            for item in _get_struct_list(data, "domain")
        ]

    @staticmethod
    def parse_domain_register(data: Dict[str, Any]) -> DomainRegisterResult:
        return DomainRegisterResult(
            ro_id=_get_int(data, "roId"),
            price=_get_float(data, "price"),
            currency=_get_str(data, "currency"),
        )

    @staticmethod
    def parse_contact(data: Dict[str, Any]) -> Contact:
        """Parse a contact struct."""
        return Contact(
            ro_id=_get_int(data, "roId"),
            id=_get_int(data, "id"),
            type=_get_str(data, "type"),
            name=_get_str(data, "name"),
            org=_get_str(data, "org"),
            street=_get_str(data, "street"),
            city=_get_str(data, "city"),
            postal_code=_get_str(data, "pc"),
            state_province=_get_str(data, "sp"),
            country=_get_str(data, "cc"),
            phone=_get_str(data, "voice"),
            fax=_get_str(data, "fax"),
            email=_get_str(data, "email"),
            remarks=_get_str(data, "remarks"),
            protection=_get_int(data, "protection"),
        )

    @staticmethod
    def parse_domain_info(data: Dict[str, Any]) -> DomainInfo:
        """
        Parse domain.info resData.

        With wide=2 the registry embeds full contact data under
        "contact", keyed by role (registrant, admin, tech, billing).
        """
        contacts = {}
        for role, contact_data in _get_struct(data, "contact").items():
            if not isinstance(contact_data, dict):
                raise INWXDecodeError(f"Contact '{role}' is not a struct")
            contacts[role] = DataParser.parse_contact(contact_data)

        return DomainInfo(
            ro_id=_get_int(data, "roId"),
            domain=_get_str(data, "domain"),
            domain_ace=_get_str(data, "domainAce"),
            period=_get_str(data, "period"),
            cr_date=_get_datetime(data, "crDate"),
            ex_date=_get_datetime(data, "exDate"),
            up_date=_get_datetime(data, "upDate"),
            re_date=_get_datetime(data, "reDate"),
            sc_date=_get_datetime(data, "scDate"),
            transfer_lock=_get_int(data, "transferLock"),
            status=_get_str(data, "status"),
            auth_code=_get_str(data, "authCode"),
            renewal_mode=_get_str(data, "renewalMode"),
            transfer_mode=_get_str(data, "transferMode"),
            registrant=_get_int(data, "registrant"),
            admin=_get_int(data, "admin"),
            tech=_get_int(data, "tech"),
            billing=_get_int(data, "billing"),
            nameservers=_get_str_list(data, "ns"),
            no_delegation=_get_str(data, "noDelegation"),
            contacts=contacts,
        )

    @staticmethod
    def parse_domain_list(data: Dict[str, Any]) -> DomainListResult:
        return DomainListResult(
            count=_get_int(data, "count"),
            domains=[
                DomainListItem(
                    ro_id=_get_int(item, "roId"),
                    domain=_get_str(item, "domain"),
                    status=_get_str(item, "status"),
                    cr_date=_get_datetime(item, "crDate"),
                    ex_date=_get_datetime(item, "exDate"),
                    re_date=_get_datetime(item, "reDate"),
                    renewal_mode=_get_str(item, "renewalMode"),
                )
                for item in _get_struct_list(data, "domain")
            ],
        )

    # -------------------------------------------------------------------------
    # Nameserver
    # -------------------------------------------------------------------------

    @staticmethod
    def parse_nameserver_check(data: Dict[str, Any]) -> NameserverCheckResult:
        return NameserverCheckResult(
            details=_get_str_list(data, "details"),
            status=_get_str(data, "status"),
        )

    @staticmethod
    def parse_record(data: Dict[str, Any]) -> NameserverRecord:
        return NameserverRecord(
            id=_get_int(data, "id"),
            name=_get_str(data, "name"),
            type=_get_str(data, "type"),
            content=_get_str(data, "content"),
            ttl=_get_int(data, "ttl"),
            prio=_get_int(data, "prio"),
            url_redirect_type=_get_str(data, "urlRedirectType"),
            url_redirect_title=_get_str(data, "urlRedirectTitle"),
            url_redirect_description=_get_str(data, "urlRedirectDescription"),
            url_redirect_fav_icon=_get_str(data, "urlRedirectFavIcon"),
            url_redirect_keywords=_get_str(data, "urlRedirectKeywords"),
        )

    @staticmethod
    def parse_nameserver_info(data: Dict[str, Any]) -> NameserverInfo:
        """Parse nameserver.info resData including its record list."""
        return NameserverInfo(
            ro_id=_get_int(data, "roId"),
            domain=_get_str(data, "domain"),
            type=_get_str(data, "type"),
            master_ip=_get_str(data, "masterIp"),
            last_zone_check=_get_datetime(data, "lastZoneCheck"),
            soa_serial=_get_str(data, "SOAserial"),
            count=_get_int(data, "count"),
            records=[DataParser.parse_record(r) for r in _get_struct_list(data, "record")],
        )

    @staticmethod
    def parse_nameserver_list(data: Dict[str, Any]) -> NameserverListResult:
        return NameserverListResult(
            count=_get_int(data, "count"),
            domains=[
                NameserverListItem(
                    ro_id=_get_int(item, "roId"),
                    domain=_get_str(item, "domain"),
                    type=_get_str(item, "type"),
                    master_ip=_get_str(item, "masterIp"),
                    mail=_get_str(item, "mail"),
                    web=_get_str(item, "web"),
                    url=_get_str(item, "url"),
                    ipv4=_get_str(item, "ipv4"),
                    ipv6=_get_str(item, "ipv6"),
                )
                for item in _get_struct_list(data, "domains")
            ],
        )

    # -------------------------------------------------------------------------
    # Contact
    # -------------------------------------------------------------------------

    @staticmethod
    def parse_contact_info(data: Dict[str, Any]) -> Contact:
        return DataParser.parse_contact(_get_struct(data, "contact"))

    @staticmethod
    def parse_contact_list(data: Dict[str, Any]) -> ContactListResult:
        return ContactListResult(
            count=_get_int(data, "count"),
            contacts=[DataParser.parse_contact(c) for c in _get_struct_list(data, "contact")],
        )

    # -------------------------------------------------------------------------
    # Generic
    # -------------------------------------------------------------------------

    @staticmethod
    def parse_id(data: Dict[str, Any], key: str = "id") -> int:
        """Parse a single numeric id (record id, contact id, roId)."""
        return _get_int(data, key)
