"""
Argument Builder

Maps typed request objects onto the argument structs the API expects.
Unset (None) fields are left out so the registry applies its defaults.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from inwx_client.models import (
    ContactRequest,
    DomainRegisterRequest,
    NameserverCreateRequest,
    NameserverRecordRequest,
)


def _put(args: Dict[str, Any], key: str, value: Any) -> None:
    """Set key only if value was given."""
    if value is not None:
        args[key] = value


def format_rfc3339(value: datetime) -> str:
    """
    Format a datetime as RFC 3339 without fractional seconds.

    UTC renders as "Z", other offsets as +HH:MM. Naive values are
    taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    offset = value.utcoffset()
    base = value.strftime("%Y-%m-%dT%H:%M:%S")
    if not offset:
        return base + "Z"

    total_minutes = int(offset.total_seconds()) // 60
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{base}{sign}{hours:02d}:{minutes:02d}"


def paging_args(page: Optional[int], page_limit: Optional[int]) -> Dict[str, Any]:
    """Build page/pagelimit arguments for list methods."""
    args: Dict[str, Any] = {}
    _put(args, "page", page)
    _put(args, "pagelimit", page_limit)
    return args


class ArgsBuilder:
    """
    Builds argument mappings from request objects.

    All methods are static and return a fresh dict.
    """

    @staticmethod
    def build_domain_check(domains: List[str], extended: bool) -> Dict[str, Any]:
        args: Dict[str, Any] = {"domain": list(domains)}
        if extended:
            args["wide"] = "2"
        return args

    @staticmethod
    def build_domain_register(request: DomainRegisterRequest) -> Dict[str, Any]:
        """Build domain.create arguments."""
        args: Dict[str, Any] = {
            "domain": request.domain,
            "registrant": request.registrant,
            "admin": request.admin,
            "tech": request.tech,
            "billing": request.billing,
        }
        _put(args, "period", request.period)
        if request.nameservers is not None:
            args["ns"] = list(request.nameservers)
        _put(args, "transferLock", request.transfer_lock)
        _put(args, "renewalMode", request.renewal_mode)
        _put(args, "whoisProvider", request.whois_provider)
        _put(args, "whoisUrl", request.whois_url)
        _put(args, "scDate", request.sc_date)
        _put(args, "extDate", request.ext_date)
        _put(args, "asynchron", request.asynchron)
        _put(args, "voucher", request.voucher)
        _put(args, "testing", request.testing)
        return args

    @staticmethod
    def build_domain_delete(domain: str, scheduled_date: datetime) -> Dict[str, Any]:
        return {
            "domain": domain,
            "scDate": format_rfc3339(scheduled_date),
        }

    @staticmethod
    def build_object_info(domain: str, ro_id: Optional[int], wide: Optional[str] = None) -> Dict[str, Any]:
        """
        Build domain.info / nameserver.info arguments.

        roId is only sent when non-zero.
        """
        args: Dict[str, Any] = {"domain": domain}
        _put(args, "wide", wide)
        if ro_id:
            args["roId"] = ro_id
        return args

    @staticmethod
    def build_record(request: NameserverRecordRequest) -> Dict[str, Any]:
        """Build nameserver.createRecord / updateRecord arguments."""
        args: Dict[str, Any] = {
            "type": request.type,
            "content": request.content,
        }
        if request.ro_id:
            args["roId"] = request.ro_id
        _put(args, "domain", request.domain)
        _put(args, "name", request.name)
        _put(args, "ttl", request.ttl)
        _put(args, "prio", request.prio)
        _put(args, "urlRedirectType", request.url_redirect_type)
        _put(args, "urlRedirectTitle", request.url_redirect_title)
        _put(args, "urlRedirectDescription", request.url_redirect_description)
        _put(args, "urlRedirectFavIcon", request.url_redirect_fav_icon)
        _put(args, "urlRedirectKeywords", request.url_redirect_keywords)
        return args

    @staticmethod
    def build_nameserver_create(request: NameserverCreateRequest) -> Dict[str, Any]:
        args: Dict[str, Any] = {
            "domain": request.domain,
            "type": request.type,
        }
        if request.nameservers is not None:
            args["ns"] = list(request.nameservers)
        _put(args, "masterIp", request.master_ip)
        _put(args, "web", request.web)
        _put(args, "mail", request.mail)
        _put(args, "soaEmail", request.soa_email)
        _put(args, "urlRedirect", request.url_redirect)
        _put(args, "testing", request.testing)
        return args

    @staticmethod
    def build_contact(request: ContactRequest) -> Dict[str, Any]:
        """Build contact.create / contact.update arguments."""
        args: Dict[str, Any] = {}
        _put(args, "type", request.type)
        _put(args, "name", request.name)
        _put(args, "org", request.org)
        _put(args, "street", request.street)
        _put(args, "city", request.city)
        _put(args, "pc", request.postal_code)
        _put(args, "sp", request.state_province)
        _put(args, "cc", request.country)
        _put(args, "voice", request.phone)
        _put(args, "fax", request.fax)
        _put(args, "email", request.email)
        _put(args, "remarks", request.remarks)
        _put(args, "protection", request.protection)
        _put(args, "testing", request.testing)
        return args
