from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from fintrack.reporting.report import DashboardStats, ExpenseSeries


class CamelModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class DashboardStatsResponse(CamelModel):
    total_balance: float
    monthly_income: float
    monthly_expenses: float
    savings_rate: float

    @classmethod
    def from_stats(cls, stats: DashboardStats) -> DashboardStatsResponse:
        return cls(
            total_balance=float(stats.total_balance),
            monthly_income=float(stats.monthly_income),
            monthly_expenses=float(stats.monthly_expenses),
            savings_rate=float(stats.savings_rate),
        )


class MonthlyData(CamelModel):
    month: str
    amount: float


class CategoryExpenseData(CamelModel):
    name: str
    amount: float
    percentage: float


class ExpenseChartResponse(CamelModel):
    monthly_data: list[MonthlyData]
    category_data: list[CategoryExpenseData]

    @classmethod
    def from_series(cls, series: ExpenseSeries) -> ExpenseChartResponse:
        return cls(
            monthly_data=[
                MonthlyData(month=m.month, amount=float(m.amount)) for m in series.monthly
            ],
            category_data=[
                CategoryExpenseData(
                    name=c.name, amount=float(c.total), percentage=float(c.percentage)
                )
                for c in series.categories
            ],
        )
