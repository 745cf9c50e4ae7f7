"""Tests for the domain service."""

from datetime import datetime, timedelta, timezone

import pytest

from inwx_client.exceptions import INWXDecodeError, INWXObjectExists, INWXValidationError
from inwx_client.models import Contact, DomainRegisterRequest

CHECK_DATA = {
    "domain": [
        {
            "avail": 0,
            "status": "REGISTERED",
            "name": "foobar",
            "domain": "foobar.com",
            "tld": "com",
            "checkmethod": "WHOIS",
            "price": 0.0,
            "checktime": 0.12,
        },
        {
            "avail": 1,
            "status": "FREE",
            "name": "python-meets-inwx",
            "domain": "python-meets-inwx.com",
            "tld": "com",
            "checkmethod": "WHOIS",
            "price": 9.9,
            "checktime": 0.08,
        },
    ]
}

INFO_DATA = {
    "roId": 1234,
    "domain": "example.com",
    "domainAce": "example.com",
    "period": "1Y",
    "crDate": datetime(2017, 1, 1, 12, 0, 0),
    "exDate": datetime(2018, 1, 1, 12, 0, 0),
    "transferLock": 1,
    "status": "OK",
    "authCode": "abc123",
    "renewalMode": "AUTORENEW",
    "registrant": 11,
    "admin": 12,
    "tech": 13,
    "billing": 14,
    "ns": ["ns.inwx.de", "ns2.inwx.de"],
    "contact": {
        "registrant": {
            "roId": 11,
            "id": 11,
            "type": "PERSON",
            "name": "Max Mustermann",
            "street": "Main St 1",
            "city": "Berlin",
            "pc": "10115",
            "cc": "DE",
            "voice": "+49.301234567",
            "email": "max@example.com",
            "protection": 1,
        },
    },
}


class TestCheck:

    def test_batches_all_names(self, client, connection):
        connection.queue(CHECK_DATA)

        items = client.domains.check(["foobar.com", "python-meets-inwx.com"])

        assert len(connection.calls) == 1
        assert connection.last_method == "domain.check"
        assert connection.last_args == {
            "domain": ["foobar.com", "python-meets-inwx.com"],
            "wide": "2",
            "lang": "eng",
        }
        assert [i.domain for i in items] == ["foobar.com", "python-meets-inwx.com"]
        assert not items[0].is_available
        assert items[1].is_available
        assert items[1].price == pytest.approx(9.9)
        assert items[1].check_method == "WHOIS"

    def test_basic_response_omits_wide(self, client, connection):
        client.domains.check(["foobar.com"], extended=False)
        assert "wide" not in connection.last_args

    def test_single_name(self, client, connection):
        client.domains.check("foobar.com")
        assert connection.last_args["domain"] == ["foobar.com"]

    def test_empty_list_rejected_locally(self, client, connection):
        with pytest.raises(INWXValidationError):
            client.domains.check([])
        assert connection.calls == []

    def test_no_results(self, client, connection):
        assert client.domains.check(["foobar.com"]) == []


class TestRegister:

    def test_omits_unset_fields(self, client, connection):
        connection.queue({"roId": 999, "price": 9.9, "currency": "EUR"})
        request = DomainRegisterRequest(
            domain="python-meets-inwx.com",
            registrant=1081859,
            admin=1081859,
            tech=1081859,
            billing=1081859,
        )

        result = client.domains.register(request)

        assert connection.last_method == "domain.create"
        assert connection.last_args == {
            "domain": "python-meets-inwx.com",
            "registrant": 1081859,
            "admin": 1081859,
            "tech": 1081859,
            "billing": 1081859,
            "lang": "eng",
        }
        assert result.ro_id == 999
        assert result.price == pytest.approx(9.9)
        assert result.currency == "EUR"

    def test_set_fields_use_wire_keys(self, client, connection):
        request = DomainRegisterRequest(
            domain="python-meets-inwx.com",
            registrant=1, admin=2, tech=3, billing=4,
            period="2Y",
            nameservers=["ns.ote.inwx.de", "ns2.ote.inwx.de"],
            renewal_mode="AUTODELETE",
            transfer_lock="1",
            whois_provider="provider",
            whois_url="https://whois.example",
            voucher="V1",
            testing="1",
        )

        client.domains.register(request)
        args = connection.last_args

        assert args["period"] == "2Y"
        assert args["ns"] == ["ns.ote.inwx.de", "ns2.ote.inwx.de"]
        assert args["renewalMode"] == "AUTODELETE"
        assert args["transferLock"] == "1"
        assert args["whoisProvider"] == "provider"
        assert args["whoisUrl"] == "https://whois.example"
        assert args["voucher"] == "V1"
        assert args["testing"] == "1"
        assert "scDate" not in args
        assert "asynchron" not in args

    def test_already_registered(self, client, connection):
        connection.queue(code=2302, message="Object exists")
        request = DomainRegisterRequest(domain="foobar.com", registrant=1, admin=1, tech=1, billing=1)

        with pytest.raises(INWXObjectExists):
            client.domains.register(request)

    def test_none_request(self, client, connection):
        with pytest.raises(INWXValidationError):
            client.domains.register(None)
        assert connection.calls == []


class TestDelete:

    def test_utc_date_rendered_with_z(self, client, connection):
        client.domains.delete("example.com", datetime(2024, 1, 15, tzinfo=timezone.utc))

        assert connection.last_method == "domain.delete"
        assert connection.last_args == {
            "domain": "example.com",
            "scDate": "2024-01-15T00:00:00Z",
            "lang": "eng",
        }

    def test_offset_date(self, client, connection):
        tz = timezone(timedelta(hours=2))
        client.domains.delete("example.com", datetime(2024, 1, 15, 10, 30, tzinfo=tz))
        assert connection.last_args["scDate"] == "2024-01-15T10:30:00+02:00"


class TestInfo:

    def test_ro_id_omitted_when_zero(self, client, connection):
        client.domains.info("example.com")
        assert connection.last_args == {"domain": "example.com", "wide": "2", "lang": "eng"}

    def test_ro_id_sent_when_set(self, client, connection):
        client.domains.info("example.com", ro_id=1234)
        assert connection.last_args["roId"] == 1234

    def test_decodes_fields(self, client, connection):
        connection.queue(INFO_DATA)

        info = client.domains.info("example.com")

        assert info.ro_id == 1234
        assert info.domain == "example.com"
        assert info.cr_date == datetime(2017, 1, 1, 12, 0, 0)
        assert info.ex_date == datetime(2018, 1, 1, 12, 0, 0)
        assert info.transfer_lock == 1
        assert info.renewal_mode == "AUTORENEW"
        assert info.nameservers == ["ns.inwx.de", "ns2.inwx.de"]
        assert (info.registrant, info.admin, info.tech, info.billing) == (11, 12, 13, 14)

        registrant = info.contacts["registrant"]
        assert isinstance(registrant, Contact)
        assert registrant.name == "Max Mustermann"
        assert registrant.postal_code == "10115"
        assert registrant.country == "DE"
        assert registrant.phone == "+49.301234567"
        assert registrant.protection == 1

    def test_missing_keys_decode_to_zero_values(self, client, connection):
        # Absent and present-but-empty are not distinguished.
        connection.queue({"domain": "example.com", "status": ""})

        info = client.domains.info("example.com")

        assert info.domain == "example.com"
        assert info.status == ""
        assert info.ro_id == 0
        assert info.period == ""
        assert info.up_date is None
        assert info.nameservers == []
        assert info.contacts == {}

    def test_wrong_shape_raises_decode_error(self, client, connection):
        connection.queue({"domain": "example.com", "ns": "ns.inwx.de"})
        with pytest.raises(INWXDecodeError):
            client.domains.info("example.com")

    def test_non_numeric_int_field_raises_decode_error(self, client, connection):
        connection.queue({"roId": "not-a-number"})
        with pytest.raises(INWXDecodeError):
            client.domains.info("example.com")


class TestList:

    def test_list(self, client, connection):
        connection.queue({
            "count": 2,
            "domain": [
                {"roId": 1, "domain": "a.com", "status": "OK", "exDate": datetime(2025, 5, 1)},
                {"roId": 2, "domain": "b.com", "status": "OK"},
            ],
        })

        result = client.domains.list(domain="*.com", page=1, page_limit=20)

        assert connection.last_method == "domain.list"
        assert connection.last_args == {"domain": "*.com", "page": 1, "pagelimit": 20, "lang": "eng"}
        assert result.count == 2
        assert [d.domain for d in result.domains] == ["a.com", "b.com"]
        assert result.domains[0].ex_date == datetime(2025, 5, 1)
        assert result.domains[1].ex_date is None

    def test_list_without_filters(self, client, connection):
        client.domains.list()
        assert connection.last_args == {"lang": "eng"}
