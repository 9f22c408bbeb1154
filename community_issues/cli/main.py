"""
Community Issue Reporter CLI.

Talks to a running API through IssueApiClient; every command works on a fresh
IssueSession, so the server list is always the starting point.
"""

import argparse

import httpx
from dotenv import load_dotenv

from ..client import FeedFilters, IssueApiClient, IssueApiError, IssueFormState, IssueSession
from ..config import get_settings
from ..constants import DEFAULT_CATEGORY, ISSUE_CATEGORIES
from ..logging import get_logger
from ..models import STATUS_VALUES, IssueStatus
from .formatters import FORMATS, format_output

logger = get_logger("cli")


def cmd_report(api: IssueApiClient, args) -> int:
    """Submit a new issue."""
    form = IssueFormState(
        title=args.title or "",
        description=args.description or "",
        category=args.category,
        location=args.location or "",
        contact=args.contact or "",
    )
    if args.lat is not None and args.lon is not None:
        form.use_coordinates(args.lat, args.lon)

    missing = form.missing_fields()
    if missing:
        print(f"Error: Missing fields: {','.join(missing)}")
        return 1

    session = IssueSession(api)
    if not form.submit(session):
        print(f"Error: {form.error}")
        return 1

    created = session.issues[0]
    logger.info("issue_reported", issue_id=created.id)
    print("✓ Issue submitted successfully!")
    print(f"ID: {created.id}")
    print(f"Status: {created.status.value}")
    return 0


def cmd_list(api: IssueApiClient, args) -> int:
    """List issues with optional category, status and search filters."""
    session = IssueSession(api)
    if not session.refresh():
        print(f"Error: {session.error}")
        return 1

    filters = FeedFilters(
        category=args.category,
        status=IssueStatus(args.status) if args.status else None,
        search=args.search or "",
    )
    view = session.view(filters)

    if view.empty_message and args.format == "text":
        print(view.empty_message)
        return 0

    print(format_output(view.issues, args.format, verbose=args.verbose), end="")
    if args.format != "json":
        print(view.summary)
    return 0


def cmd_show(api: IssueApiClient, args) -> int:
    """Show a single issue."""
    try:
        issue = api.fetch_issue(args.id)
    except IssueApiError as e:
        print(f"Error: {e.message}")
        return 1

    print(format_output([issue], args.format, verbose=True), end="")
    return 0


def cmd_status(api: IssueApiClient, args) -> int:
    """Change the status of an issue."""
    session = IssueSession(api)
    try:
        updated = session.change_status(args.id, args.status)
    except IssueApiError as e:
        print(f"Error: {e.message}")
        return 1

    print(f"Issue {updated.id} is now {updated.status.value}")
    return 0


def cmd_stats(api: IssueApiClient, args) -> int:
    """Show counts per status."""
    session = IssueSession(api)
    if not session.refresh():
        print(f"Error: {session.error}")
        return 1

    stats = session.stats

    print("\n" + "=" * 80)
    print("COMMUNITY ISSUE STATISTICS")
    print("=" * 80)
    print(f"\nTotal Issues: {stats.total}")
    print(f"Open: {stats.open}")
    print(f"In Progress: {stats.in_progress}")
    print(f"Resolved: {stats.resolved}")
    print("=" * 80)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Community Issue Reporter - Report local problems and track their status"
    )
    parser.add_argument("--api-url", help="Base URL of the issue API")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Report command
    report_parser = subparsers.add_parser("report", help="Report a new issue")
    report_parser.add_argument("--title", help="Brief description")
    report_parser.add_argument("--description", help="Details of the problem")
    report_parser.add_argument(
        "--category", choices=ISSUE_CATEGORIES, default=DEFAULT_CATEGORY
    )
    report_parser.add_argument("--location", help="Address or coordinates")
    report_parser.add_argument("--lat", type=float, help="Latitude (fills --location)")
    report_parser.add_argument("--lon", type=float, help="Longitude (fills --location)")
    report_parser.add_argument("--contact", help="Phone or email (optional)")

    # List command
    list_parser = subparsers.add_parser("list", help="List reported issues")
    list_parser.add_argument("--category", help="Only this category")
    list_parser.add_argument("--status", choices=STATUS_VALUES, help="Only this status")
    list_parser.add_argument("--search", help="Text to find in title or description")
    list_parser.add_argument("--format", choices=FORMATS, default="text")
    list_parser.add_argument("--verbose", "-v", action="store_true")

    # Show command
    show_parser = subparsers.add_parser("show", help="Show one issue")
    show_parser.add_argument("id", help="Issue ID")
    show_parser.add_argument("--format", choices=FORMATS, default="text")

    # Status command
    status_parser = subparsers.add_parser("status", help="Change an issue's status")
    status_parser.add_argument("id", help="Issue ID")
    status_parser.add_argument("status", choices=STATUS_VALUES)

    subparsers.add_parser("stats", help="Show statistics")

    return parser


COMMANDS = {
    "report": cmd_report,
    "list": cmd_list,
    "show": cmd_show,
    "status": cmd_status,
    "stats": cmd_stats,
}


def main(argv: list[str] | None = None, api: IssueApiClient | None = None) -> int:
    """Main entry point with CLI interface."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in COMMANDS:
        parser.print_help()
        return 1

    if api is not None:
        return COMMANDS[args.command](api, args)

    base_url = args.api_url or get_settings().api_base_url
    with IssueApiClient(base_url) as client:
        try:
            return COMMANDS[args.command](client, args)
        except httpx.HTTPError as e:
            logger.error("api_unreachable", base_url=base_url, error=str(e))
            print(f"Error: could not reach the issue API at {base_url}")
            return 1


if __name__ == "__main__":
    raise SystemExit(main())
