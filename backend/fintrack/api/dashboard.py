from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from fintrack.api.deps import get_clock, get_current_user, get_record_store
from fintrack.models.user import User
from fintrack.reporting.clock import Clock
from fintrack.reporting.ranges import DEFAULT_RANGE
from fintrack.schemas.dashboard import DashboardStatsResponse, ExpenseChartResponse
from fintrack.services.dashboard_service import get_dashboard_stats, get_expense_chart
from fintrack.services.record_store import RecordStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def stats(
    store: RecordStore = Depends(get_record_store),
    clock: Clock = Depends(get_clock),
    current_user: User = Depends(get_current_user),
) -> DashboardStatsResponse:
    result = await get_dashboard_stats(store, current_user.id, clock)
    return DashboardStatsResponse.from_stats(result)


@router.get("/expenses-chart", response_model=ExpenseChartResponse)
async def expenses_chart(
    range_: str = Query(DEFAULT_RANGE, alias="range"),
    store: RecordStore = Depends(get_record_store),
    clock: Clock = Depends(get_clock),
    current_user: User = Depends(get_current_user),
) -> ExpenseChartResponse:
    series = await get_expense_chart(store, current_user.id, range_, clock)
    return ExpenseChartResponse.from_series(series)


@router.get("/health")
async def health() -> dict:
    return {"status": "Dashboard API is running"}
