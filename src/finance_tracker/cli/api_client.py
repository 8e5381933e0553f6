"""CLI for poking a running finance tracker API.

Usage:
  poetry run finance-cli health
  poetry run finance-cli login <firebase-id-token> --name "Ada" --email ada@example.com
  poetry run finance-cli --token <session-token> expenses --month 2 --year 2024
  poetry run finance-cli --token <session-token> daily --month 2 --year 2024
"""
import argparse
import json
import os
import sys

import httpx

TOKEN_ENV = "FINANCE_TRACKER_TOKEN"


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def _params(args: argparse.Namespace, *names: str) -> dict[str, object]:
    """Collect set CLI options into query params, using the API's parameter names."""
    aliases = {"start_date": "startDate", "end_date": "endDate", "expense_type": "expenseType"}
    params: dict[str, object] = {}
    for name in names:
        value = getattr(args, name, None)
        if value is not None:
            params[aliases.get(name, name)] = value
    return params


def cmd_health(client: httpx.Client, _: argparse.Namespace) -> int:
    r = client.get("/health")
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_login(client: httpx.Client, args: argparse.Namespace) -> int:
    body = {
        "firebaseToken": args.firebase_token,
        "user": {"name": args.name, "email": args.email},
    }
    r = client.post(f"{args.prefix}/auth", json=body)
    r.raise_for_status()
    data = r.json()
    print(f"Session token: {data['data']['token']}", file=sys.stderr)
    print_json(data)
    return 0


def cmd_me(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(f"{args.prefix}/auth/me")
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_expenses(client: httpx.Client, args: argparse.Namespace) -> int:
    params = _params(
        args, "page", "limit", "start_date", "end_date", "month", "year",
        "categories", "expense_type", "need_or_want", "sort",
    )
    r = client.get(f"{args.prefix}/expenses", params=params)
    r.raise_for_status()
    data = r.json()["data"]
    pagination = data["pagination"]
    print(
        f"Page {pagination['currentPage']}/{pagination['totalPages']} "
        f"({pagination['totalItems']} expenses)",
        file=sys.stderr,
    )
    print_json(data)
    return 0


def cmd_daily(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(f"{args.prefix}/expenses/analytics/daily", params=_params(args, "month", "year"))
    r.raise_for_status()
    print_json(r.json()["data"])
    return 0


def cmd_top_categories(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(
        f"{args.prefix}/expenses/analytics/top-categories",
        params=_params(args, "month", "year", "limit"),
    )
    r.raise_for_status()
    print_json(r.json()["data"])
    return 0


def cmd_earnings(client: httpx.Client, args: argparse.Namespace) -> int:
    params = _params(args, "page", "limit", "month", "year", "type", "sort")
    r = client.get(f"{args.prefix}/earnings", params=params)
    r.raise_for_status()
    print_json(r.json()["data"])
    return 0


def cmd_savings(client: httpx.Client, args: argparse.Namespace) -> int:
    params = _params(args, "page", "limit", "month", "year", "type", "category", "sort")
    r = client.get(f"{args.prefix}/savings", params=params)
    r.raise_for_status()
    print_json(r.json()["data"])
    return 0


def cmd_categories(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(f"{args.prefix}/expense-categories", params=_params(args, "search"))
    r.raise_for_status()
    print_json(r.json()["data"])
    return 0


def cmd_types(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(f"{args.prefix}/expense-types", params=_params(args, "search"))
    r.raise_for_status()
    print_json(r.json()["data"])
    return 0


HANDLERS = {
    "health": cmd_health,
    "login": cmd_login,
    "me": cmd_me,
    "expenses": cmd_expenses,
    "daily": cmd_daily,
    "top-categories": cmd_top_categories,
    "earnings": cmd_earnings,
    "savings": cmd_savings,
    "categories": cmd_categories,
    "types": cmd_types,
}


def _add_month_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--month", type=int, default=None, help="Month 1-12 (needs --year)")
    p.add_argument("--year", type=int, default=None, help="Four-digit year")


def _add_page_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--page", type=int, default=None, help="1-based page (default: 1)")
    p.add_argument("--limit", type=int, default=None, help="Page size (default: 10)")
    p.add_argument("--sort", default=None, help="Sort field, '-' prefix for descending")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Call finance tracker API routes and print the JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--base-url",
        default="http://localhost:5000",
        help="Server base URL (default: http://localhost:5000)",
    )
    parser.add_argument("--prefix", default="/api", help="API prefix (default: /api)")
    parser.add_argument(
        "--token",
        default=os.getenv(TOKEN_ENV),
        help=f"Session token for private routes (default: ${TOKEN_ENV})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    subparsers.add_parser("health", help="GET /health")

    p = subparsers.add_parser("login", help="POST /auth with a Firebase ID token")
    p.add_argument("firebase_token", help="Firebase ID token")
    p.add_argument("--name", required=True, help="Display name")
    p.add_argument("--email", required=True, help="Email address")

    subparsers.add_parser("me", help="GET /auth/me")

    p = subparsers.add_parser("expenses", help="GET /expenses")
    _add_page_args(p)
    _add_month_args(p)
    p.add_argument("--start-date", dest="start_date", default=None, help="ISO date, inclusive")
    p.add_argument("--end-date", dest="end_date", default=None, help="ISO date, inclusive")
    p.add_argument("--categories", default=None, help="Comma-separated category ids")
    p.add_argument("--expense-type", dest="expense_type", type=int, default=None, help="Expense type id")
    p.add_argument("--need-or-want", dest="need_or_want", choices=["need", "want"], default=None)

    p = subparsers.add_parser("daily", help="GET /expenses/analytics/daily")
    _add_month_args(p)

    p = subparsers.add_parser("top-categories", help="GET /expenses/analytics/top-categories")
    _add_month_args(p)
    p.add_argument("--limit", type=int, default=None, help="Max categories (default: 10)")

    p = subparsers.add_parser("earnings", help="GET /earnings")
    _add_page_args(p)
    _add_month_args(p)
    p.add_argument("--type", choices=["salary", "freelance", "others"], default=None)

    p = subparsers.add_parser("savings", help="GET /savings")
    _add_page_args(p)
    _add_month_args(p)
    p.add_argument("--type", choices=["add", "withdraw"], default=None)
    p.add_argument("--category", choices=["fixed", "topup"], default=None)

    for name, path in (("categories", "/expense-categories"), ("types", "/expense-types")):
        p = subparsers.add_parser(name, help=f"GET {path}")
        p.add_argument("--search", default=None, help="Name substring")

    return parser


def run_command(client: httpx.Client, args: argparse.Namespace) -> int:
    """Dispatch a parsed command against `client`; report HTTP failures on stderr."""
    handler = HANDLERS[args.command]
    try:
        return handler(client, args)
    except httpx.HTTPStatusError as e:
        print(f"HTTP error: {e.response.status_code}", file=sys.stderr)
        if e.response.content:
            try:
                print(e.response.json(), file=sys.stderr)
            except ValueError:
                print(e.response.text, file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    headers = {"Authorization": f"Bearer {args.token}"} if args.token else {}
    try:
        with httpx.Client(
            base_url=args.base_url.rstrip("/"), headers=headers, timeout=args.timeout
        ) as client:
            return run_command(client, args)
    except httpx.RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
