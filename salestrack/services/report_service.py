"""Report content built from a sale set.

Every builder here reads the same aggregation helpers, so a figure such as
the total revenue is identical in the text, workbook and document outputs.
Rendering to bytes lives in ``export_service``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from salestrack.core.aggregation import (
    DateSummary,
    busiest_day,
    group_by_date,
    group_by_product,
    group_by_seller,
    highest_revenue_day,
    sale_revenue,
    total_revenue,
)
from salestrack.core.constants import CHART_STATUS_INSUFFICIENT, CHART_STATUS_OK
from salestrack.core.dates import sale_timestamp, utc_day
from salestrack.core.money import ZERO, format_money, format_quantity, to_decimal

REPORT_TITLE = "Sales Report"

SHEET_ALL_SALES = "All Sales"
SHEET_BY_DATE = "By Date"
SHEET_BY_USERNAME = "By Username"
SHEET_BY_PRODUCT = "By Product"
SHEET_SUMMARY = "Summary"

SUMMARY_TOTAL_SALES = "Total Sales"
SUMMARY_TOTAL_REVENUE = "Total Revenue"


@dataclass(frozen=True)
class TableRow:
    product_name: str
    amount: Decimal
    date: datetime


@dataclass(frozen=True)
class ChartPoint:
    label: object
    value: Decimal


@dataclass(frozen=True)
class ChartSeries:
    title: str
    x_label: str
    y_label: str
    points: tuple[ChartPoint, ...]
    min_points: int = 2

    @property
    def insufficient_data(self) -> bool:
        if len(self.points) < self.min_points:
            return True
        return max(point.value for point in self.points) == ZERO

    @property
    def status(self) -> str:
        return CHART_STATUS_INSUFFICIENT if self.insufficient_data else CHART_STATUS_OK


@dataclass(frozen=True)
class ReportTable:
    title: str
    headers: Optional[tuple[str, ...]]
    rows: list[tuple] = field(default_factory=list)


@dataclass(frozen=True)
class WorkbookReport:
    sheets: tuple[ReportTable, ...]

    @property
    def sheet_names(self) -> list[str]:
        return [sheet.title for sheet in self.sheets]

    def sheet(self, title: str) -> ReportTable:
        for sheet in self.sheets:
            if sheet.title == title:
                return sheet
        raise KeyError(title)


@dataclass(frozen=True)
class ReportDocument:
    title: str
    sales_table: ReportTable
    summary_lines: tuple[str, ...]
    product_table: ReportTable
    daily_revenue_table: ReportTable
    top_sellers_table: ReportTable
    sales_chart: ChartSeries
    revenue_chart: ChartSeries
    seller_ranking: ChartSeries


def _sorted_by_date(sales: Iterable) -> list:
    return sorted(sales, key=lambda sale: sale_timestamp(sale.date))


def _format_day(value: Optional[date]) -> str:
    return value.isoformat() if value is not None else "none"


def _format_timestamp(value: datetime) -> str:
    return sale_timestamp(value).isoformat()


def _summary_lines(sales: Sequence) -> tuple[str, ...]:
    busiest: Optional[DateSummary] = busiest_day(sales)
    top_revenue: Optional[DateSummary] = highest_revenue_day(sales)

    if busiest is None:
        busiest_line = "Date with highest sales: none"
    else:
        busiest_line = "Date with highest sales: {}, Sales Count: {}".format(
            _format_day(busiest.date), busiest.count
        )

    revenue_line = "Total Revenue: {}".format(format_money(total_revenue(sales)))

    if top_revenue is None:
        top_revenue_line = "Day with highest revenue: none"
    else:
        top_revenue_line = "Day with highest revenue: {}, Revenue: {}".format(
            _format_day(top_revenue.date), format_money(top_revenue.total_revenue)
        )

    return busiest_line, revenue_line, top_revenue_line


def build_table_report(sales: Iterable) -> list[TableRow]:
    return [
        TableRow(
            product_name=sale.product_name,
            amount=to_decimal(sale.amount, "amount"),
            date=sale_timestamp(sale.date),
        )
        for sale in _sorted_by_date(sales)
    ]


def build_chart_series(sales: Iterable) -> ChartSeries:
    return ChartSeries(
        title="Sales Over Time",
        x_label="Date",
        y_label="Total Amount",
        points=tuple(
            ChartPoint(label=summary.date, value=summary.total_amount)
            for summary in group_by_date(sales)
        ),
    )


def build_revenue_series(sales: Iterable) -> ChartSeries:
    return ChartSeries(
        title="Revenue Over Time",
        x_label="Date",
        y_label="Total Revenue",
        points=tuple(
            ChartPoint(label=summary.date, value=summary.total_revenue)
            for summary in group_by_date(sales)
        ),
    )


def build_seller_ranking(sales: Iterable, limit: int = 3) -> ChartSeries:
    # a single seller still makes a meaningful bar
    return ChartSeries(
        title="Top Sellers",
        x_label="Username",
        y_label="Total Revenue",
        points=tuple(
            ChartPoint(label=summary.username, value=summary.total_revenue)
            for summary in group_by_seller(sales, limit=limit)
        ),
        min_points=1,
    )


def build_text_report(sales: Iterable) -> str:
    sales = list(sales)
    lines = ["Sales Report:", "=================="]

    for sale in _sorted_by_date(sales):
        lines.append(
            "Product: {}, Amount: {}, Price: {}, Revenue: {}, Date: {}".format(
                sale.product_name,
                format_quantity(sale.amount),
                format_money(sale.price),
                format_money(sale_revenue(sale)),
                _format_timestamp(sale.date),
            )
        )

    for line in _summary_lines(sales):
        lines.append("")
        lines.append(line)

    lines.append("")
    lines.append("Product Statistics:")
    for product in group_by_product(sales):
        lines.append(
            "Product: {}, Total Amount: {}, Total Revenue: {}".format(
                product.product_name,
                format_quantity(product.total_amount),
                format_money(product.total_revenue),
            )
        )

    lines.append("")
    lines.append("Daily Revenue:")
    for day in group_by_date(sales):
        lines.append(
            "Date: {}, Total Revenue: {}".format(
                _format_day(day.date), format_money(day.total_revenue)
            )
        )

    return "\n".join(lines) + "\n"


def build_workbook(sales: Iterable) -> WorkbookReport:
    sales = list(sales)

    all_sales = ReportTable(
        title=SHEET_ALL_SALES,
        headers=("Id", "Product Name", "Amount", "Date", "Price", "Username", "Revenue"),
        rows=[
            (
                sale.id,
                sale.product_name,
                to_decimal(sale.amount, "amount"),
                sale_timestamp(sale.date),
                to_decimal(sale.price, "price"),
                sale.username,
                sale_revenue(sale),
            )
            for sale in _sorted_by_date(sales)
        ],
    )

    by_date = ReportTable(
        title=SHEET_BY_DATE,
        headers=("Date", "Total Amount", "Total Revenue", "Count"),
        rows=[
            (summary.date, summary.total_amount, summary.total_revenue, summary.count)
            for summary in group_by_date(sales)
        ],
    )

    by_username = ReportTable(
        title=SHEET_BY_USERNAME,
        headers=("Username", "Total Amount", "Total Revenue"),
        rows=[
            (summary.username, summary.total_amount, summary.total_revenue)
            for summary in sorted(group_by_seller(sales), key=lambda item: item.username)
        ],
    )

    by_product = ReportTable(
        title=SHEET_BY_PRODUCT,
        headers=("Product Name", "Total Amount", "Total Revenue"),
        rows=[
            (summary.product_name, summary.total_amount, summary.total_revenue)
            for summary in sorted(group_by_product(sales), key=lambda item: item.product_name)
        ],
    )

    summary = ReportTable(
        title=SHEET_SUMMARY,
        headers=None,
        rows=[
            (SUMMARY_TOTAL_SALES, len(sales)),
            (SUMMARY_TOTAL_REVENUE, total_revenue(sales)),
        ],
    )

    return WorkbookReport(sheets=(all_sales, by_date, by_username, by_product, summary))


def build_document(sales: Iterable, top_sellers: int = 3) -> ReportDocument:
    sales = list(sales)

    sales_table = ReportTable(
        title="Sales",
        headers=("Product", "Amount", "Price", "Revenue", "Date"),
        rows=[
            (
                sale.product_name,
                format_quantity(sale.amount),
                format_money(sale.price),
                format_money(sale_revenue(sale)),
                _format_day(utc_day(sale.date)),
            )
            for sale in _sorted_by_date(sales)
        ],
    )

    product_table = ReportTable(
        title="Product Statistics",
        headers=("Product", "Total Amount", "Total Revenue"),
        rows=[
            (
                product.product_name,
                format_quantity(product.total_amount),
                format_money(product.total_revenue),
            )
            for product in group_by_product(sales)
        ],
    )

    daily_revenue_table = ReportTable(
        title="Daily Revenue",
        headers=("Date", "Total Revenue"),
        rows=[
            (_format_day(day.date), format_money(day.total_revenue))
            for day in group_by_date(sales)
        ],
    )

    top_sellers_table = ReportTable(
        title="Top Sellers",
        headers=("Rank", "Username", "Total Amount", "Total Revenue"),
        rows=[
            (
                str(rank),
                seller.username,
                format_quantity(seller.total_amount),
                format_money(seller.total_revenue),
            )
            for rank, seller in enumerate(group_by_seller(sales, limit=top_sellers), start=1)
        ],
    )

    return ReportDocument(
        title=REPORT_TITLE,
        sales_table=sales_table,
        summary_lines=_summary_lines(sales),
        product_table=product_table,
        daily_revenue_table=daily_revenue_table,
        top_sellers_table=top_sellers_table,
        sales_chart=build_chart_series(sales),
        revenue_chart=build_revenue_series(sales),
        seller_ranking=build_seller_ranking(sales, limit=top_sellers),
    )


__all__ = [
    "ChartPoint",
    "ChartSeries",
    "ReportDocument",
    "ReportTable",
    "TableRow",
    "WorkbookReport",
    "build_chart_series",
    "build_document",
    "build_revenue_series",
    "build_seller_ranking",
    "build_table_report",
    "build_text_report",
    "build_workbook",
]
