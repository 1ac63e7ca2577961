"""CLI for user management and report inspection.

Usage:
    python -m fintrack.cli create-user --username alice --email alice@example.com
    python -m fintrack.cli list-users
    python -m fintrack.cli issue-token --email alice@example.com
    python -m fintrack.cli stats --email alice@example.com [--now 2024-07-15T12:00:00]
    python -m fintrack.cli expenses-chart --email alice@example.com --range 12m
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.config import settings
from fintrack.database import async_session_factory
from fintrack.models import *  # noqa: F401, F403 (registers every mapped model)
from fintrack.models.user import User
from fintrack.reporting.clock import Clock, FixedClock, SystemClock
from fintrack.reporting.ranges import DEFAULT_RANGE
from fintrack.schemas.dashboard import DashboardStatsResponse, ExpenseChartResponse
from fintrack.services.auth_service import create_access_token, get_user_by_email
from fintrack.services.dashboard_service import get_dashboard_stats, get_expense_chart
from fintrack.services.record_store import SqlRecordStore


def _clock(args: argparse.Namespace) -> Clock:
    if getattr(args, "now", None):
        try:
            return FixedClock(datetime.fromisoformat(args.now))
        except ValueError:
            print(f"Error: invalid --now value '{args.now}', expected an ISO timestamp")
            sys.exit(1)
    return SystemClock(settings.TIMEZONE)


async def _require_user(db: AsyncSession, email: str) -> User:
    user = await get_user_by_email(db, email)
    if user is None:
        print(f"Error: user '{email}' not found")
        sys.exit(1)
    return user


async def create_user(db: AsyncSession, args: argparse.Namespace) -> None:
    existing = (
        await db.execute(
            select(User).where((User.username == args.username) | (User.email == args.email))
        )
    ).scalar_one_or_none()
    if existing is not None:
        print(f"Error: username '{args.username}' or email '{args.email}' already exists")
        sys.exit(1)

    user = User(username=args.username, email=args.email)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    print(f"Created user: {user.username} (id={user.id})")


async def list_users(db: AsyncSession, _args: argparse.Namespace) -> None:
    result = await db.execute(select(User).order_by(User.username))
    users = result.scalars().all()

    if not users:
        print("No users found.")
        return

    print(f"{'ID':<38} {'Username':<20} {'Email':<30} {'Active':<8}")
    print("-" * 96)
    for u in users:
        print(
            f"{str(u.id):<38} {u.username:<20} {u.email:<30} "
            f"{'yes' if u.is_active else 'no':<8}"
        )
    print(f"\nTotal: {len(users)} user(s)")


async def issue_token(db: AsyncSession, args: argparse.Namespace) -> None:
    user = await _require_user(db, args.email)
    print(create_access_token(user.id))


async def stats(db: AsyncSession, args: argparse.Namespace) -> None:
    clock = _clock(args)
    user = await _require_user(db, args.email)
    store = SqlRecordStore(db, tz=settings.TIMEZONE)
    result = await get_dashboard_stats(store, user.id, clock)
    print(DashboardStatsResponse.from_stats(result).model_dump_json(by_alias=True, indent=2))


async def expenses_chart(db: AsyncSession, args: argparse.Namespace) -> None:
    clock = _clock(args)
    user = await _require_user(db, args.email)
    store = SqlRecordStore(db, tz=settings.TIMEZONE)
    series = await get_expense_chart(store, user.id, args.range, clock)
    print(ExpenseChartResponse.from_series(series).model_dump_json(by_alias=True, indent=2))


async def _run(args: argparse.Namespace) -> None:
    async with async_session_factory() as db:
        await args.func(db, args)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fintrack.cli", description="FinTrack administration")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # create-user
    p_create = subparsers.add_parser("create-user", help="Create a new user")
    p_create.add_argument("--username", required=True)
    p_create.add_argument("--email", required=True)
    p_create.set_defaults(func=create_user)

    # list-users
    p_list = subparsers.add_parser("list-users", help="List all users")
    p_list.set_defaults(func=list_users)

    # issue-token
    p_token = subparsers.add_parser("issue-token", help="Print a bearer token for a user")
    p_token.add_argument("--email", required=True)
    p_token.set_defaults(func=issue_token)

    # stats
    p_stats = subparsers.add_parser("stats", help="Print a user's dashboard stats")
    p_stats.add_argument("--email", required=True)
    p_stats.add_argument("--now", default=None, help="ISO timestamp to report as of")
    p_stats.set_defaults(func=stats)

    # expenses-chart
    p_chart = subparsers.add_parser("expenses-chart", help="Print a user's expense chart")
    p_chart.add_argument("--email", required=True)
    p_chart.add_argument("--range", default=DEFAULT_RANGE, help="6m, 12m or ytd")
    p_chart.add_argument("--now", default=None, help="ISO timestamp to report as of")
    p_chart.set_defaults(func=expenses_chart)

    return parser


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=settings.LOG_LEVEL)
    args = build_parser().parse_args(argv)
    asyncio.run(_run(args))


if __name__ == "__main__":
    main()
