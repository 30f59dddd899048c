from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from salestrack.core.dates import utc_day
from salestrack.core.money import ZERO, to_decimal


@dataclass(frozen=True)
class DateSummary:
    date: date
    total_amount: Decimal
    total_revenue: Decimal
    count: int


@dataclass(frozen=True)
class ProductSummary:
    product_name: str
    total_amount: Decimal
    total_revenue: Decimal


@dataclass(frozen=True)
class SellerSummary:
    username: str
    total_amount: Decimal
    total_revenue: Decimal


def sale_revenue(sale) -> Decimal:
    return to_decimal(sale.amount, "amount") * to_decimal(sale.price, "price")


def _accumulate(sales: Iterable, key_func):
    # dict preserves first-encounter order of keys
    buckets: dict = {}
    for sale in sales:
        key = key_func(sale)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = [ZERO, ZERO, 0]
        bucket[0] += to_decimal(sale.amount, "amount")
        bucket[1] += sale_revenue(sale)
        bucket[2] += 1
    return buckets


def group_by_date(sales: Iterable) -> list[DateSummary]:
    buckets = _accumulate(sales, lambda sale: utc_day(sale.date))
    return [
        DateSummary(date=day, total_amount=amount, total_revenue=revenue, count=count)
        for day, (amount, revenue, count) in sorted(buckets.items(), key=lambda item: item[0])
    ]


def group_by_product(sales: Iterable) -> list[ProductSummary]:
    buckets = _accumulate(sales, lambda sale: sale.product_name)
    return [
        ProductSummary(product_name=name, total_amount=amount, total_revenue=revenue)
        for name, (amount, revenue, _count) in buckets.items()
    ]


def group_by_seller(sales: Iterable, limit: Optional[int] = None) -> list[SellerSummary]:
    """Seller totals, highest revenue first.

    ``sorted`` is stable, so sellers with equal revenue stay in the order
    they were first seen in ``sales``.
    """
    buckets = _accumulate(sales, lambda sale: sale.username)
    summaries = sorted(
        (
            SellerSummary(username=name, total_amount=amount, total_revenue=revenue)
            for name, (amount, revenue, _count) in buckets.items()
        ),
        key=lambda summary: summary.total_revenue,
        reverse=True,
    )
    if limit is not None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        summaries = summaries[:limit]
    return summaries


def total_revenue(sales: Iterable) -> Decimal:
    return sum((sale_revenue(sale) for sale in sales), ZERO)


def total_amount(sales: Iterable) -> Decimal:
    return sum((to_decimal(sale.amount, "amount") for sale in sales), ZERO)


def _first_max(summaries: list[DateSummary], metric) -> Optional[DateSummary]:
    # summaries are date-ascending; strict ">" keeps the earliest day on ties
    best = None
    for summary in summaries:
        if best is None or metric(summary) > metric(best):
            best = summary
    return best


def busiest_day(sales: Iterable) -> Optional[DateSummary]:
    return _first_max(group_by_date(sales), lambda summary: summary.count)


def highest_revenue_day(sales: Iterable) -> Optional[DateSummary]:
    return _first_max(group_by_date(sales), lambda summary: summary.total_revenue)


__all__ = [
    "DateSummary",
    "ProductSummary",
    "SellerSummary",
    "busiest_day",
    "group_by_date",
    "group_by_product",
    "group_by_seller",
    "highest_revenue_day",
    "sale_revenue",
    "total_amount",
    "total_revenue",
]
