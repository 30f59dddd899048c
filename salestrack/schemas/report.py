from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SalesTableRow(BaseModel):
    product_name: str = Field(serialization_alias="productName")
    amount: Decimal
    date: datetime

    model_config = ConfigDict(from_attributes=True)


class ChartPointRead(BaseModel):
    label: Union[date, str]
    value: Decimal

    model_config = ConfigDict(from_attributes=True)


class ChartSeriesRead(BaseModel):
    title: str
    x_label: str
    y_label: str
    status: str
    points: List[ChartPointRead]

    model_config = ConfigDict(from_attributes=True)


class ReportTableRead(BaseModel):
    title: str
    headers: Optional[List[str]]
    rows: List[List[str]]

    model_config = ConfigDict(from_attributes=True)


class ReportDocumentRead(BaseModel):
    title: str
    sales_table: ReportTableRead
    summary_lines: List[str]
    product_table: ReportTableRead
    daily_revenue_table: ReportTableRead
    top_sellers_table: ReportTableRead
    sales_chart: ChartSeriesRead
    revenue_chart: ChartSeriesRead
    seller_ranking: ChartSeriesRead

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "ChartPointRead",
    "ChartSeriesRead",
    "ReportDocumentRead",
    "ReportTableRead",
    "SalesTableRow",
]
