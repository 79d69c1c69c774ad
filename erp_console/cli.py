"""
erp-console command line

Same operations as the web console, with the token kept in ERP_TOKEN_FILE.

Usage:
    erp-console login --username admin
    erp-console list inventory products --per-page 50
    erp-console journal-entry --description "Rent" --line 1000:0:500 --line 6100:500:0
    erp-console notifications --watch
"""
import argparse
import asyncio
import getpass
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from erp_console.connectors.erp_connector import ErpConnector
from erp_console.core.config import settings
from erp_console.core.errors import (
    ErpApiError, ErpConsoleError, FormValidationError, SessionExpiredError, get_error_message,
)
from erp_console.core.logging_setup import setup_logging
from erp_console.core.token_store import FileTokenStore
from erp_console.repositories.erp_api import ErpApi
from erp_console.services.dashboard_service import DashboardService
from erp_console.services.global_search import DebouncedSearch
from erp_console.services.journal_entry_service import JournalEntryService
from erp_console.services.notification_center import NotificationCenter, format_relative_time
from erp_console.services.tabular_service import ImportService, export_csv, import_csv, render_table

logger = logging.getLogger(__name__)

SESSION_EXPIRED_MESSAGE = "Session expired - run `erp-console login`"


def _parse_params(values: Optional[List[str]]) -> Dict[str, str]:
    """--param key=value pairs (filters and nested path ids)"""
    params = {}
    for value in values or []:
        key, sep, val = value.partition("=")
        if not sep or not key:
            raise FormValidationError(f"Expected KEY=VALUE, got '{value}'")
        params[key] = val
    return params


def _parse_json(text: Optional[str]) -> Optional[Dict[str, Any]]:
    if text is None:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormValidationError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise FormValidationError("Expected a JSON object")
    return data


def parse_line(text: str) -> Dict[str, str]:
    """ACCOUNT:DEBIT:CREDIT -> journal line dict"""
    parts = text.split(":")
    if len(parts) != 3 or not parts[0]:
        raise argparse.ArgumentTypeError(f"Expected ACCOUNT:DEBIT:CREDIT, got '{text}'")
    account_id, debit, credit = parts
    return {"account_id": account_id, "debit": debit or "0", "credit": credit or "0"}


def _show(data: Any) -> None:
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")
    print(json.dumps(data, indent=2, default=str))


# ==================== COMMANDS ====================

async def cmd_login(api: ErpApi, args) -> int:
    password = args.password or getpass.getpass("Password: ")
    try:
        result = await api.auth.login(args.username, password)
    except SessionExpiredError as e:
        print(f"❌ {e.body_message or 'Invalid username or password'}", file=sys.stderr)
        return 1
    name = result.user.username if result.user else args.username
    print(f"✅ Logged in as {name}")
    return 0


async def cmd_logout(api: ErpApi, args) -> int:
    api.auth.logout()
    print("Logged out")
    return 0


async def cmd_whoami(api: ErpApi, args) -> int:
    user = await api.auth.me()
    print(f"{user.username} ({user.full_name or '-'}) {user.email or ''}".rstrip())
    return 0


async def cmd_dashboard(api: ErpApi, args) -> int:
    data = await DashboardService(api).load_stats()
    for card in data["cards"]:
        print(f"{card['label']:<14} {card['value']:>8}  {card['href']}")
    return 0


async def cmd_list(api: ErpApi, args) -> int:
    repository = api.resource(args.module, args.resource)
    params = _parse_params(args.param)

    if args.all or args.csv:
        items = [item async for item in repository.iter_all(per_page=args.per_page, **params)]
        footer = f"{len(items)} records"
    else:
        result = await repository.list(page=args.page, per_page=args.per_page, **params)
        if isinstance(result, list):
            items = result
            footer = f"{len(items)} records"
        else:
            items = result.items
            footer = f"Page {result.page} of {result.total_pages} ({result.total} total)"

    if args.csv:
        sys.stdout.write(export_csv(items, args.columns))
        return 0
    print(render_table(items, args.columns))
    print(footer)
    return 0


async def cmd_create(api: ErpApi, args) -> int:
    repository = api.resource(args.module, args.resource)
    created = await repository.create(_parse_json(args.data) or {}, **_parse_params(args.param))
    print(f"✅ {repository.spec.display_name} created successfully")
    _show(created)
    return 0


async def cmd_action(api: ErpApi, args) -> int:
    repository = api.resource(args.module, args.resource)
    result = await repository.perform(
        args.id, args.action, _parse_json(args.data), **_parse_params(args.param)
    )
    print(f"✅ {repository.spec.display_name} {args.id}: {args.action}")
    if result is not None:
        _show(result)
    return 0


async def cmd_journal_entry(api: ErpApi, args) -> int:
    entry = await JournalEntryService(api.finance).submit({
        "description": args.description,
        "reference": args.reference,
        "lines": args.line,
    })
    print("✅ Journal entry created successfully")
    _show(entry)
    return 0


def _print_notifications(notifications, unread_count) -> None:
    print(f"🔔 {unread_count} unread")
    for n in notifications:
        marker = " " if n.read else "*"
        print(f"{marker} [{n.notification_type}] {n.title} - {format_relative_time(n.created_at)}")


async def cmd_notifications(api: ErpApi, args) -> int:
    center = NotificationCenter(api.notifications, interval=args.interval,
                                on_update=_print_notifications)
    if not args.watch:
        await center.refresh()
        if center.last_error is not None:
            raise center.last_error
        return 0

    async with center:
        await center.join()
    return 0


async def cmd_search(api: ErpApi, args) -> int:
    search = DebouncedSearch()
    search.submit(args.query)
    results = await search.results()
    if not results:
        print("No results")
        return 0
    for result in results:
        print(f"{result['type']:<9} {result['name']:<22} {result['description']:<16} {result['path']}")
    return 0


async def cmd_import(api: ErpApi, args) -> int:
    repository = api.resource(args.module, args.resource)
    rows = import_csv(Path(args.file).read_text(encoding="utf-8-sig"))
    result = await ImportService.import_rows(repository, rows, **_parse_params(args.param))
    print(f"Imported {result['created']} of {len(rows)} rows")
    for error in result["errors"]:
        print(f"  row {error['row']}: {error['error']}", file=sys.stderr)
    return 0 if result["failed"] == 0 else 1


def cmd_serve(args) -> int:
    import uvicorn

    uvicorn.run("erp_console.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


COMMANDS = {
    "login": cmd_login,
    "logout": cmd_logout,
    "whoami": cmd_whoami,
    "dashboard": cmd_dashboard,
    "list": cmd_list,
    "create": cmd_create,
    "action": cmd_action,
    "journal-entry": cmd_journal_entry,
    "notifications": cmd_notifications,
    "search": cmd_search,
    "import": cmd_import,
}


# ==================== PARSER ====================

def _add_resource_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("module", help="ERP module (finance, inventory, sales, ...)")
    parser.add_argument("resource", help="Resource inside the module (accounts, products, ...)")
    parser.add_argument("--param", action="append", metavar="KEY=VALUE",
                        help="Filter or parent id (e.g. project_id=42); repeatable")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="erp-console", description="ERP console")
    parser.add_argument("--api-url", default=None, help="ERP backend URL (default: ERP_API_URL)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("login", help="Log in and store the session token")
    p.add_argument("--username", "-u", required=True)
    p.add_argument("--password", "-p", default=None, help="Prompted when omitted")

    sub.add_parser("logout", help="Forget the stored session token")
    sub.add_parser("whoami", help="Show the current user")
    sub.add_parser("dashboard", help="Headline counts")

    p = sub.add_parser("list", help="List a resource")
    _add_resource_args(p)
    p.add_argument("--page", type=int, default=1)
    p.add_argument("--per-page", type=int, default=None)
    p.add_argument("--all", action="store_true", help="Fetch every page")
    p.add_argument("--csv", action="store_true", help="Write every record as CSV")
    p.add_argument("--columns", nargs="+", default=None, help="Columns to show")

    p = sub.add_parser("create", help="Create a record")
    _add_resource_args(p)
    p.add_argument("--data", required=True, help="JSON object with the form fields")

    p = sub.add_parser("action", help="Run a state transition (post, approve, ...)")
    _add_resource_args(p)
    p.add_argument("id")
    p.add_argument("action")
    p.add_argument("--data", default=None, help="Optional JSON body")

    p = sub.add_parser("journal-entry", help="Create a balanced journal entry")
    p.add_argument("--description", required=True)
    p.add_argument("--reference", default=None)
    p.add_argument("--line", action="append", type=parse_line, required=True,
                   metavar="ACCOUNT:DEBIT:CREDIT")

    p = sub.add_parser("notifications", help="Show notifications")
    p.add_argument("--watch", action="store_true", help="Keep polling until interrupted")
    p.add_argument("--interval", type=float, default=None,
                   help="Seconds between polls (default: ERP_NOTIFICATION_POLL_SECONDS)")

    p = sub.add_parser("search", help="Search the sample catalog")
    p.add_argument("query")

    p = sub.add_parser("import", help="Create records from a CSV file")
    _add_resource_args(p)
    p.add_argument("file")

    p = sub.add_parser("serve", help="Run the web console")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--reload", action="store_true")

    return parser


def main(argv: Optional[List[str]] = None, connector: Optional[ErpConnector] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level or settings.LOG_LEVEL)

    if args.command == "serve":
        return cmd_serve(args)

    if connector is None:
        connector = ErpConnector(
            base_url=args.api_url,
            token_store=FileTokenStore(settings.ERP_TOKEN_FILE),
        )
    api = ErpApi(connector)

    try:
        return asyncio.run(COMMANDS[args.command](api, args))
    except SessionExpiredError:
        print(SESSION_EXPIRED_MESSAGE, file=sys.stderr)
        return 1
    except ErpApiError as e:
        print(f"❌ {get_error_message(e, e.message)}", file=sys.stderr)
        return 1
    except ErpConsoleError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
