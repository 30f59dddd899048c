from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from salestrack.config import get_settings
from salestrack.core.constants import (
    API_PREFIX,
    EXCEL_REPORT_FILENAME,
    PDF_MEDIA_TYPE,
    PDF_REPORT_FILENAME,
    TEXT_MEDIA_TYPE,
    TEXT_REPORT_FILENAME,
    XLSX_MEDIA_TYPE,
)
from salestrack.dependencies import get_sale_service, require_user
from salestrack.schemas.report import ChartSeriesRead, ReportDocumentRead, SalesTableRow
from salestrack.services.export_service import render_pdf, render_workbook
from salestrack.services.report_service import (
    build_chart_series,
    build_document,
    build_table_report,
    build_text_report,
    build_workbook,
)
from salestrack.services.sale_service import SaleService

router = APIRouter(prefix=f"{API_PREFIX}/reports", tags=["Reports"])


def _attachment(content: bytes, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/sales-table", response_model=List[SalesTableRow])
def sales_table(
    service: SaleService = Depends(get_sale_service),
    _user: str = Depends(require_user),
):
    return [SalesTableRow.model_validate(row) for row in build_table_report(service.report_sales())]


@router.get("/sales-chart", response_model=ChartSeriesRead)
def sales_chart(
    service: SaleService = Depends(get_sale_service),
    _user: str = Depends(require_user),
):
    return ChartSeriesRead.model_validate(build_chart_series(service.report_sales()))


@router.get("/text-report")
def text_report(
    service: SaleService = Depends(get_sale_service),
    _user: str = Depends(require_user),
):
    report = build_text_report(service.report_sales())
    return _attachment(report.encode("utf-8"), f"{TEXT_MEDIA_TYPE}; charset=utf-8", TEXT_REPORT_FILENAME)


@router.get("/sales-excel")
def sales_excel(
    service: SaleService = Depends(get_sale_service),
    _user: str = Depends(require_user),
):
    content = render_workbook(build_workbook(service.report_sales()))
    return _attachment(content, XLSX_MEDIA_TYPE, EXCEL_REPORT_FILENAME)


@router.get("/document", response_model=ReportDocumentRead)
def report_document(
    service: SaleService = Depends(get_sale_service),
    _user: str = Depends(require_user),
):
    document = build_document(service.report_sales(), top_sellers=get_settings().TOP_SELLERS_LIMIT)
    return ReportDocumentRead.model_validate(document)


@router.get("/pdf-report")
def pdf_report(
    service: SaleService = Depends(get_sale_service),
    _user: str = Depends(require_user),
):
    document = build_document(service.report_sales(), top_sellers=get_settings().TOP_SELLERS_LIMIT)
    return _attachment(render_pdf(document), PDF_MEDIA_TYPE, PDF_REPORT_FILENAME)


__all__ = ["router"]
