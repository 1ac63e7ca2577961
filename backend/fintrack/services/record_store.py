from __future__ import annotations

import logging
import uuid
from datetime import tzinfo
from typing import Protocol

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fintrack.models.salary import Salary
from fintrack.models.transaction import Transaction
from fintrack.reporting.records import (
    Record,
    ReportWindow,
    salary_record,
    transaction_record,
)

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    async def fetch_records(
        self, user_id: uuid.UUID, window: ReportWindow | None = None
    ) -> list[Record]:
        """Return every transaction and salary record of a user, optionally windowed."""


def transaction_to_record(txn: Transaction, tz: tzinfo | str | None = None) -> Record:
    return transaction_record(
        kind=txn.type,
        amount=txn.amount,
        occurred_at=txn.transaction_date,  # type: ignore[arg-type]
        category_name=txn.category.name if txn.category is not None else None,
        ref=f"transaction:{txn.id}",
        tz=tz,
    )


def salary_to_record(salary: Salary, tz: tzinfo | str | None = None) -> Record:
    return salary_record(
        amount=salary.amount,
        occurred_at=salary.salary_date,  # type: ignore[arg-type]
        ref=f"salary:{salary.id}",
        tz=tz,
    )


class SqlRecordStore:
    def __init__(self, db: AsyncSession, tz: tzinfo | str | None = None):
        self.db = db
        self.tz = tz

    async def fetch_records(
        self, user_id: uuid.UUID, window: ReportWindow | None = None
    ) -> list[Record]:
        txn_stmt = (
            select(Transaction)
            .options(selectinload(Transaction.category))
            .where(Transaction.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        salary_stmt = (
            select(Salary)
            .where(Salary.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        if window is not None:
            # Rows without a date are still fetched so validation can reject them.
            txn_stmt = txn_stmt.where(
                or_(
                    and_(
                        Transaction.transaction_date >= window.start,
                        Transaction.transaction_date < window.end,
                    ),
                    Transaction.transaction_date.is_(None),
                )
            )
            salary_stmt = salary_stmt.where(
                or_(
                    and_(Salary.salary_date >= window.start, Salary.salary_date < window.end),
                    Salary.salary_date.is_(None),
                )
            )

        transactions = (await self.db.execute(txn_stmt)).scalars().all()
        salaries = (await self.db.execute(salary_stmt)).scalars().all()
        logger.debug(
            "Fetched %d transactions and %d salaries for user %s",
            len(transactions), len(salaries), user_id,
        )

        records = [transaction_to_record(t, self.tz) for t in transactions]
        records.extend(salary_to_record(s, self.tz) for s in salaries)
        return records
