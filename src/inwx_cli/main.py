"""
INWX CLI Main Entry Point

Command-line interface for INWX API operations.
"""

import getpass
import logging
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

import click

from inwx_client import INWXClient, __version__
from inwx_client.exceptions import (
    INWXAuthenticationError,
    INWXCommandError,
    INWXConnectionError,
    INWXError,
    INWXObjectExists,
    INWXObjectNotFound,
)
from inwx_client.models import (
    ContactRequest,
    DomainRegisterRequest,
    NameserverCreateRequest,
    NameserverRecordRequest,
)
from inwx_cli.config import CLIConfig, create_sample_config
from inwx_cli.output import OutputFormatter, print_error, print_info, print_success


# Global state for the CLI session
class CLIState:
    config: Optional[CLIConfig] = None
    formatter: Optional[OutputFormatter] = None


state = CLIState()


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config file path")
@click.option("--profile", "-p", default="default", help="Config profile to use")
@click.option("--username", "-u", help="Account username (or INWX_USERNAME env)")
@click.option("--password", "-P", help="Password (or INWX_PASSWORD env)")
@click.option("--sandbox/--production", default=None, help="Use the OTE sandbox endpoint")
@click.option("--timeout", type=int, default=None, help="HTTP timeout in seconds")
@click.option("--no-verify", is_flag=True, help="Disable server certificate verification")
@click.option("--tan", help="Two-factor TAN used to unlock the session after login")
@click.option("--format", "-f", "output_format", type=click.Choice(["table", "json"]), default="table",
              help="Output format")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_path, profile, username, password, sandbox, timeout, no_verify, tan,
        output_format, quiet, debug):
    """
    INWX CLI - Domain, DNS and contact management

    \b
    Configuration:
      Use a config file at ~/.inwx/config.yaml or specify options on command line.
      Run 'inwx config init' to create a sample config file.

    \b
    Examples:
      inwx --sandbox -u myuser domain check example.com example.net
      inwx -c config.yaml nameserver info example.com
      inwx --profile production domain info example.com
    """
    # Load config
    if config_path:
        loaded_config = CLIConfig.from_file(Path(config_path), profile)
    else:
        loaded_config = CLIConfig.find_and_load(profile) or CLIConfig(profile=profile)

    loaded_config.apply_env()

    # CLI options override config file and environment
    if username:
        loaded_config.credentials.username = username
    if password:
        loaded_config.credentials.password = password
    if sandbox is not None:
        loaded_config.api.sandbox = sandbox
    if timeout is not None:
        loaded_config.api.timeout = timeout
    if no_verify:
        loaded_config.api.verify = False

    # Setup logging
    level = logging.DEBUG if debug else getattr(logging, loaded_config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(name)s: %(message)s")

    state.config = loaded_config
    state.formatter = OutputFormatter(format=output_format, quiet=quiet)

    ctx.ensure_object(dict)
    ctx.obj["tan"] = tan


def get_client(ctx) -> INWXClient:
    """
    Create client and login.

    Args:
        ctx: Click context

    Returns:
        Logged-in INWX client
    """
    config = state.config

    username = config.credentials.username
    if not username:
        print_error("No username specified. Use --username, INWX_USERNAME or config file.")
        sys.exit(1)

    password = config.credentials.password
    if not password:
        password = getpass.getpass("Password: ")

    client = INWXClient(
        username=username,
        password=password,
        sandbox=config.api.sandbox,
        timeout=config.api.timeout,
        verify=config.api.verify,
    )

    try:
        result = client.login()
        if result.needs_unlock:
            tan = ctx.obj.get("tan") or click.prompt("TAN")
            client.account.unlock(tan)
        return client

    except INWXConnectionError as e:
        print_error(f"Connection failed: {e}")
        _abandon(client)
        sys.exit(1)
    except INWXAuthenticationError as e:
        print_error(f"Authentication failed: {e}")
        _abandon(client)
        sys.exit(1)
    except INWXError as e:
        print_error(f"Login failed: {e}")
        _abandon(client)
        sys.exit(1)


def _abandon(client: INWXClient) -> None:
    """Logout if a session is open (e.g. unlock failed), then close."""
    if client.is_logged_in:
        try:
            client.logout()
        except INWXError as e:
            logging.getLogger("inwx.cli").warning(f"Logout failed: {e}")
    client.close()


@contextmanager
def session(ctx, subject: str = "") -> Iterator[INWXClient]:
    """
    Yield a logged-in client; report errors and always logout.

    Args:
        ctx: Click context
        subject: Object name used in not-found/exists messages
    """
    client = get_client(ctx)
    try:
        yield client
    except INWXObjectNotFound:
        print_error(f"Not found: {subject}")
        sys.exit(1)
    except INWXObjectExists:
        print_error(f"Already exists: {subject}")
        sys.exit(1)
    except INWXCommandError as e:
        print_error(f"Command failed: {e}")
        sys.exit(1)
    except INWXError as e:
        print_error(str(e))
        sys.exit(1)
    finally:
        try:
            client.logout()
        except INWXError as e:
            logging.getLogger("inwx.cli").warning(f"Logout failed: {e}")
        client.close()


# =============================================================================
# Config Commands
# =============================================================================

@cli.group()
def config():
    """Configuration management commands."""
    pass


@config.command("init")
@click.option("--path", "-p", type=click.Path(), default="~/.inwx/config.yaml", help="Config file path")
def config_init(path):
    """Create sample configuration file."""
    path = Path(path).expanduser()

    # Create parent directory
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.exists():
        if not click.confirm(f"{path} already exists. Overwrite?"):
            return

    path.write_text(create_sample_config())

    print_success(f"Created config file: {path}")
    print_info("Edit the file to configure your INWX credentials.")


@config.command("show")
def config_show():
    """Show current configuration."""
    config = state.config
    info = {
        "Profile": config.profile,
        "Username": config.credentials.username or "(not set)",
        "Password": "********" if config.credentials.password else "(not set)",
        "Sandbox": config.api.sandbox,
        "Timeout": config.api.timeout,
        "Verify": config.api.verify,
        "Log level": config.log_level,
    }
    state.formatter.output(info)


# =============================================================================
# Account Commands
# =============================================================================

@cli.group()
def account():
    """Account commands."""
    pass


@account.command("info")
@click.pass_context
def account_info(ctx):
    """Show account details."""
    with session(ctx) as client:
        state.formatter.output(client.account.info())


# =============================================================================
# Domain Commands
# =============================================================================

@cli.group()
def domain():
    """Domain management commands."""
    pass


@domain.command("check")
@click.argument("names", nargs=-1, required=True)
@click.option("--basic", is_flag=True, help="Request the short response without prices")
@click.pass_context
def domain_check(ctx, names, basic):
    """
    Check domain availability.

    NAMES: One or more domain names to check.
    """
    with session(ctx) as client:
        state.formatter.output(client.domains.check(list(names), extended=not basic))


@domain.command("info")
@click.argument("name")
@click.option("--ro-id", type=int, default=0, help="Registry object id")
@click.pass_context
def domain_info(ctx, name, ro_id):
    """
    Get domain information.

    NAME: Domain name to query.
    """
    with session(ctx, name) as client:
        state.formatter.output(client.domains.info(name, ro_id=ro_id))


@domain.command("register")
@click.argument("name")
@click.option("--registrant", "-r", type=int, required=True, help="Registrant contact id")
@click.option("--admin", "-a", type=int, required=True, help="Admin contact id")
@click.option("--tech", "-t", type=int, required=True, help="Tech contact id")
@click.option("--billing", "-b", type=int, required=True, help="Billing contact id")
@click.option("--ns", "-n", multiple=True, help="Nameserver (can specify multiple)")
@click.option("--period", help="Registration period, e.g. 1Y")
@click.option("--renewal-mode", type=click.Choice(["AUTORENEW", "AUTODELETE", "AUTOEXPIRE"]),
              help="Renewal mode")
@click.option("--transfer-lock", type=click.Choice(["0", "1"]), help="Transfer lock")
@click.option("--voucher", help="Voucher code")
@click.pass_context
def domain_register(ctx, name, registrant, admin, tech, billing, ns, period, renewal_mode,
                    transfer_lock, voucher):
    """
    Register a new domain.

    NAME: Domain name to register.
    """
    request = DomainRegisterRequest(
        domain=name,
        registrant=registrant,
        admin=admin,
        tech=tech,
        billing=billing,
        period=period,
        nameservers=list(ns) if ns else None,
        renewal_mode=renewal_mode,
        transfer_lock=transfer_lock,
        voucher=voucher,
    )

    with session(ctx, name) as client:
        result = client.domains.register(request)
        state.formatter.output(result)
        state.formatter.success(f"Domain registered: {name}")


@domain.command("delete")
@click.argument("name")
@click.option("--date", "scheduled", type=click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"]),
              help="Scheduled deletion date (UTC, default: now)")
@click.option("--confirm", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def domain_delete(ctx, name, scheduled, confirm):
    """
    Delete a domain.

    NAME: Domain name to delete.
    """
    if not confirm:
        if not click.confirm(f"Are you sure you want to delete {name}?"):
            return

    scheduled = scheduled or datetime.now(timezone.utc).replace(microsecond=0)

    with session(ctx, name) as client:
        client.domains.delete(name, scheduled)
        state.formatter.success(f"Domain deletion scheduled: {name}")


@domain.command("list")
@click.option("--search", "-s", help="Domain search pattern, e.g. *.com")
@click.option("--page", type=int, help="Page number")
@click.option("--page-limit", type=int, help="Entries per page")
@click.pass_context
def domain_list(ctx, search, page, page_limit):
    """List domains in the account."""
    with session(ctx) as client:
        result = client.domains.list(domain=search, page=page, page_limit=page_limit)
        state.formatter.output(result.domains)
        state.formatter.info(f"{result.count} domain(s)")


# =============================================================================
# Nameserver Commands
# =============================================================================

@cli.group()
def nameserver():
    """Nameserver (zone) and DNS record commands."""
    pass


@nameserver.command("check")
@click.argument("name")
@click.argument("nameservers", nargs=-1, required=True)
@click.pass_context
def nameserver_check(ctx, name, nameservers):
    """
    Check nameservers for a domain.

    NAME: Domain name. NAMESERVERS: Nameserver hostnames.
    """
    with session(ctx, name) as client:
        state.formatter.output(client.nameservers.check(name, list(nameservers)))


@nameserver.command("create")
@click.argument("name")
@click.option("--type", "zone_type", type=click.Choice(["MASTER", "SLAVE"]), default="MASTER",
              help="Zone type")
@click.option("--ns", "-n", multiple=True, help="Nameserver (can specify multiple)")
@click.option("--master-ip", help="Master IP for SLAVE zones")
@click.option("--web", help="Create a web record pointing to this IP")
@click.option("--mail", help="Create a mail record pointing to this IP")
@click.option("--soa-email", help="SOA contact email")
@click.pass_context
def nameserver_create(ctx, name, zone_type, ns, master_ip, web, mail, soa_email):
    """
    Create a zone.

    NAME: Domain name.
    """
    request = NameserverCreateRequest(
        domain=name,
        type=zone_type,
        nameservers=list(ns) if ns else None,
        master_ip=master_ip,
        web=web,
        mail=mail,
        soa_email=soa_email,
    )

    with session(ctx, name) as client:
        ro_id = client.nameservers.create(request)
        state.formatter.success(f"Zone created: {name} (roId {ro_id})")


@nameserver.command("info")
@click.argument("name")
@click.option("--ro-id", type=int, default=0, help="Registry object id")
@click.pass_context
def nameserver_info(ctx, name, ro_id):
    """
    Show a zone and its records.

    NAME: Domain name.
    """
    with session(ctx, name) as client:
        info = client.nameservers.info(name, ro_id=ro_id)
        if state.formatter.format == "json":
            state.formatter.output(info)
        else:
            state.formatter.info(f"{info.domain} ({info.type}, roId {info.ro_id})")
            state.formatter.output(info.records)


@nameserver.command("list")
@click.option("--search", "-s", help="Domain search pattern")
@click.option("--page", type=int, help="Page number")
@click.option("--page-limit", type=int, help="Entries per page")
@click.pass_context
def nameserver_list(ctx, search, page, page_limit):
    """List zones in the account."""
    with session(ctx) as client:
        result = client.nameservers.list(domain=search, page=page, page_limit=page_limit)
        state.formatter.output(result.domains)
        state.formatter.info(f"{result.count} zone(s)")


@nameserver.command("delete")
@click.argument("name")
@click.option("--confirm", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def nameserver_delete(ctx, name, confirm):
    """
    Delete a zone.

    NAME: Domain name.
    """
    if not confirm:
        if not click.confirm(f"Are you sure you want to delete the zone {name}?"):
            return

    with session(ctx, name) as client:
        client.nameservers.delete(domain=name)
        state.formatter.success(f"Zone deleted: {name}")


def _record_options(func):
    """Shared options for record create/update."""
    options = [
        click.option("--type", "record_type", required=True, help="Record type (A, AAAA, CNAME, MX, TXT, ...)"),
        click.option("--content", required=True, help="Record content"),
        click.option("--name", "record_name", help="Record name (subdomain)"),
        click.option("--ttl", type=int, help="TTL in seconds"),
        click.option("--prio", type=int, help="Priority (MX, SRV)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@nameserver.command("record-create")
@click.argument("name")
@_record_options
@click.pass_context
def record_create(ctx, name, record_type, content, record_name, ttl, prio):
    """
    Create a DNS record.

    NAME: Domain name of the zone.
    """
    request = NameserverRecordRequest(
        domain=name,
        type=record_type,
        content=content,
        name=record_name,
        ttl=ttl,
        prio=prio,
    )

    with session(ctx, name) as client:
        record_id = client.nameservers.create_record(request)
        state.formatter.success(f"Record created: {record_id}")


@nameserver.command("record-update")
@click.argument("record_id", type=int)
@_record_options
@click.pass_context
def record_update(ctx, record_id, record_type, content, record_name, ttl, prio):
    """
    Update a DNS record.

    RECORD_ID: Record id.
    """
    request = NameserverRecordRequest(
        type=record_type,
        content=content,
        name=record_name,
        ttl=ttl,
        prio=prio,
    )

    with session(ctx, str(record_id)) as client:
        client.nameservers.update_record(record_id, request)
        state.formatter.success(f"Record updated: {record_id}")


@nameserver.command("record-delete")
@click.argument("record_id", type=int)
@click.option("--confirm", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def record_delete(ctx, record_id, confirm):
    """
    Delete a DNS record.

    RECORD_ID: Record id.
    """
    if not confirm:
        if not click.confirm(f"Are you sure you want to delete record {record_id}?"):
            return

    with session(ctx, str(record_id)) as client:
        client.nameservers.delete_record(record_id)
        state.formatter.success(f"Record deleted: {record_id}")


# =============================================================================
# Contact Commands
# =============================================================================

@cli.group()
def contact():
    """Contact handle commands."""
    pass


def _contact_options(required: bool):
    """Shared options for contact create/update."""
    def decorator(func):
        options = [
            click.option("--type", "contact_type", type=click.Choice(["PERSON", "ORG", "ROLE"]),
                         required=required, help="Contact type"),
            click.option("--name", required=required, help="Full name"),
            click.option("--org", help="Organization"),
            click.option("--street", required=required, help="Street address"),
            click.option("--city", required=required, help="City"),
            click.option("--postal-code", required=required, help="Postal code"),
            click.option("--state-province", help="State or province"),
            click.option("--country", required=required, help="Country code (ISO 3166)"),
            click.option("--phone", required=required, help="Phone, e.g. +49.1234567"),
            click.option("--fax", help="Fax"),
            click.option("--email", required=required, help="Email"),
            click.option("--remarks", help="Remarks"),
        ]
        for option in reversed(options):
            func = option(func)
        return func
    return decorator


@contact.command("create")
@_contact_options(required=True)
@click.pass_context
def contact_create(ctx, contact_type, **fields):
    """Create a contact handle."""
    request = ContactRequest(type=contact_type, **fields)

    with session(ctx, fields.get("name", "")) as client:
        contact_id = client.contacts.create(request)
        state.formatter.success(f"Contact created: {contact_id}")


@contact.command("info")
@click.argument("contact_id", type=int)
@click.pass_context
def contact_info(ctx, contact_id):
    """
    Show a contact handle.

    CONTACT_ID: Contact id.
    """
    with session(ctx, str(contact_id)) as client:
        state.formatter.output(client.contacts.info(contact_id))


@contact.command("update")
@click.argument("contact_id", type=int)
@_contact_options(required=False)
@click.pass_context
def contact_update(ctx, contact_id, contact_type, **fields):
    """
    Update a contact handle. Only given options are changed.

    CONTACT_ID: Contact id.
    """
    request = ContactRequest(type=contact_type, **fields)

    with session(ctx, str(contact_id)) as client:
        client.contacts.update(contact_id, request)
        state.formatter.success(f"Contact updated: {contact_id}")


@contact.command("delete")
@click.argument("contact_id", type=int)
@click.option("--confirm", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def contact_delete(ctx, contact_id, confirm):
    """
    Delete a contact handle.

    CONTACT_ID: Contact id.
    """
    if not confirm:
        if not click.confirm(f"Are you sure you want to delete contact {contact_id}?"):
            return

    with session(ctx, str(contact_id)) as client:
        client.contacts.delete(contact_id)
        state.formatter.success(f"Contact deleted: {contact_id}")


@contact.command("list")
@click.option("--search", "-s", help="Search term")
@click.option("--page", type=int, help="Page number")
@click.option("--page-limit", type=int, help="Entries per page")
@click.pass_context
def contact_list(ctx, search, page, page_limit):
    """List contact handles."""
    with session(ctx) as client:
        result = client.contacts.list(search=search, page=page, page_limit=page_limit)
        state.formatter.output(result.contacts)
        state.formatter.info(f"{result.count} contact(s)")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
