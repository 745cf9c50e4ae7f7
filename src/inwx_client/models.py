"""
INWX Client Models

Data classes for API requests and responses.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


# =============================================================================
# Envelope Models
# =============================================================================

@dataclass
class RPCRequest:
    """Method name plus named arguments for a single call."""
    method: str
    args: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RPCResponse:
    """Generic API response envelope."""
    code: int
    message: str
    reason_code: str = ""
    reason: str = ""
    data: Dict[str, Any] = field(default_factory=dict)  # resData

    @property
    def success(self) -> bool:
        """Check if response indicates success."""
        return 1000 <= self.code <= 1500


# =============================================================================
# Request Models
# =============================================================================

@dataclass
class DomainRegisterRequest:
    """
    Domain registration (domain.create).

    Contact handles are always sent. Every optional field left at None
    is omitted so the registry applies its own default.
    """
    domain: str
    registrant: int
    admin: int
    tech: int
    billing: int
    period: Optional[str] = None  # e.g. "1Y"
    nameservers: Optional[List[str]] = None
    transfer_lock: Optional[str] = None
    renewal_mode: Optional[str] = None  # AUTORENEW, AUTODELETE, AUTOEXPIRE
    whois_provider: Optional[str] = None
    whois_url: Optional[str] = None
    sc_date: Optional[str] = None
    ext_date: Optional[str] = None
    asynchron: Optional[str] = None
    voucher: Optional[str] = None
    testing: Optional[str] = None


@dataclass
class NameserverRecordRequest:
    """DNS record for nameserver.createRecord / nameserver.updateRecord."""
    type: str
    content: str
    ro_id: Optional[int] = None
    domain: Optional[str] = None
    name: Optional[str] = None
    ttl: Optional[int] = None
    prio: Optional[int] = None
    url_redirect_type: Optional[str] = None
    url_redirect_title: Optional[str] = None
    url_redirect_description: Optional[str] = None
    url_redirect_fav_icon: Optional[str] = None
    url_redirect_keywords: Optional[str] = None


@dataclass
class NameserverCreateRequest:
    """Zone creation (nameserver.create)."""
    domain: str
    type: str = "MASTER"  # MASTER or SLAVE
    nameservers: Optional[List[str]] = None
    master_ip: Optional[str] = None  # required for SLAVE zones
    web: Optional[str] = None
    mail: Optional[str] = None
    soa_email: Optional[str] = None
    url_redirect: Optional[str] = None
    testing: Optional[bool] = None


@dataclass
class ContactRequest:
    """
    Contact handle data for contact.create and contact.update.

    For create, type/name/street/city/postal_code/country/phone/email
    are required by the registry. For update, send only what changes.
    """
    type: Optional[str] = None  # PERSON, ORG or ROLE
    name: Optional[str] = None
    org: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    state_province: Optional[str] = None
    country: Optional[str] = None  # ISO 3166 alpha-2
    phone: Optional[str] = None  # +49.1234567
    fax: Optional[str] = None
    email: Optional[str] = None
    remarks: Optional[str] = None
    protection: Optional[int] = None
    testing: Optional[bool] = None


# =============================================================================
# Result Models
# =============================================================================

# -----------------------------------------------------------------------------
# Account
# -----------------------------------------------------------------------------

@dataclass
class LoginResult:
    """account.login response."""
    customer_id: int = 0
    account_id: int = 0
    tfa: str = ""  # "0" when two-factor auth is not active

    @property
    def needs_unlock(self) -> bool:
        """True if the session must be unlocked with a TAN."""
        return self.tfa not in ("", "0")


@dataclass
class AccountInfo:
    """account.info response."""
    account_id: int = 0
    customer_id: int = 0
    customer_no: int = 0
    username: str = ""
    name: str = ""
    email: str = ""


# -----------------------------------------------------------------------------
# Domain
# -----------------------------------------------------------------------------

@dataclass
class DomainCheckItem:
    """Single domain.check result."""
    available: int = 0
    status: str = ""
    name: str = ""
    domain: str = ""
    tld: str = ""
    check_method: str = ""
    price: float = 0.0
    check_time: float = 0.0

    @property
    def is_available(self) -> bool:
        return self.available == 1


@dataclass
class DomainRegisterResult:
    """domain.create response."""
    ro_id: int = 0
    price: float = 0.0
    currency: str = ""


@dataclass
class Contact:
    """Contact handle, as embedded in domain.info or returned by contact.info."""
    ro_id: int = 0
    id: int = 0
    type: str = ""
    name: str = ""
    org: str = ""
    street: str = ""
    city: str = ""
    postal_code: str = ""
    state_province: str = ""
    country: str = ""
    phone: str = ""
    fax: str = ""
    email: str = ""
    remarks: str = ""
    protection: int = 0


@dataclass
class DomainInfo:
    """domain.info response."""
    ro_id: int = 0
    domain: str = ""
    domain_ace: str = ""
    period: str = ""
    cr_date: Optional[datetime] = None
    ex_date: Optional[datetime] = None
    up_date: Optional[datetime] = None
    re_date: Optional[datetime] = None
    sc_date: Optional[datetime] = None
    transfer_lock: int = 0
    status: str = ""
    auth_code: str = ""
    renewal_mode: str = ""
    transfer_mode: str = ""
    registrant: int = 0
    admin: int = 0
    tech: int = 0
    billing: int = 0
    nameservers: List[str] = field(default_factory=list)
    no_delegation: str = ""
    contacts: Dict[str, Contact] = field(default_factory=dict)  # keyed by role


@dataclass
class DomainListItem:
    """Single entry of domain.list."""
    ro_id: int = 0
    domain: str = ""
    status: str = ""
    cr_date: Optional[datetime] = None
    ex_date: Optional[datetime] = None
    re_date: Optional[datetime] = None
    renewal_mode: str = ""


@dataclass
class DomainListResult:
    """domain.list response."""
    count: int = 0
    domains: List[DomainListItem] = field(default_factory=list)


# -----------------------------------------------------------------------------
# Nameserver
# -----------------------------------------------------------------------------

@dataclass
class NameserverCheckResult:
    """nameserver.check response."""
    details: List[str] = field(default_factory=list)
    status: str = ""


@dataclass
class NameserverRecord:
    """DNS record as returned by nameserver.info."""
    id: int = 0
    name: str = ""
    type: str = ""
    content: str = ""
    ttl: int = 0
    prio: int = 0
    url_redirect_type: str = ""
    url_redirect_title: str = ""
    url_redirect_description: str = ""
    url_redirect_fav_icon: str = ""
    url_redirect_keywords: str = ""


@dataclass
class NameserverInfo:
    """nameserver.info response."""
    ro_id: int = 0
    domain: str = ""
    type: str = ""
    master_ip: str = ""
    last_zone_check: Optional[datetime] = None
    soa_serial: str = ""
    count: int = 0
    records: List[NameserverRecord] = field(default_factory=list)


@dataclass
class NameserverListItem:
    """Single zone in nameserver.list."""
    ro_id: int = 0
    domain: str = ""
    type: str = ""
    master_ip: str = ""
    mail: str = ""
    web: str = ""
    url: str = ""
    ipv4: str = ""
    ipv6: str = ""


@dataclass
class NameserverListResult:
    """nameserver.list response."""
    count: int = 0
    domains: List[NameserverListItem] = field(default_factory=list)


# -----------------------------------------------------------------------------
# Contact
# -----------------------------------------------------------------------------

@dataclass
class ContactListResult:
    """contact.list response."""
    count: int = 0
    contacts: List[Contact] = field(default_factory=list)
