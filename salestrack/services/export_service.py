import logging
from datetime import date, datetime
from io import BytesIO
from xml.sax.saxutils import escape

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from reportlab.graphics.charts.barcharts import VerticalBarChart
from reportlab.graphics.charts.linecharts import HorizontalLineChart
from reportlab.graphics.shapes import Drawing, Group, String
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from salestrack.core.constants import CHART_PLACEHOLDER
from salestrack.core.dates import to_utc
from salestrack.services.report_service import ChartSeries, ReportDocument, ReportTable, WorkbookReport

logger = logging.getLogger(__name__)

_HEADER_FONT = Font(bold=True)
_BODY_FILL = PatternFill(fill_type="solid", start_color="D3D3D3", end_color="D3D3D3")
_DATE_FORMAT = "yyyy-mm-dd"
_DATETIME_FORMAT = "yyyy-mm-dd hh:mm:ss"

_CHART_WIDTH = 16 * cm
_CHART_HEIGHT = 9 * cm


# ==============================
# Workbook (.xlsx)
# ==============================


def _excel_value(value):
    # Excel has no timezone support; cells hold the UTC wall-clock time.
    if isinstance(value, datetime):
        return to_utc(value).replace(tzinfo=None)
    return value


def _format_worksheet(worksheet, has_header):
    if worksheet.max_row < 1 or worksheet.max_column < 1:
        return

    first_body_row = 2 if has_header else 1
    if has_header:
        for cell in worksheet[1]:
            cell.font = _HEADER_FONT
    else:
        for (cell,) in worksheet.iter_rows(min_col=1, max_col=1):
            cell.font = _HEADER_FONT

    for row in worksheet.iter_rows(min_row=first_body_row):
        for cell in row:
            cell.fill = _BODY_FILL
            if isinstance(cell.value, datetime):
                cell.number_format = _DATETIME_FORMAT
            elif isinstance(cell.value, date):
                cell.number_format = _DATE_FORMAT


def _write_sheet(workbook, table: ReportTable):
    worksheet = workbook.create_sheet(title=table.title)
    if table.headers:
        worksheet.append(list(table.headers))
    for row in table.rows:
        worksheet.append([_excel_value(value) for value in row])
    _format_worksheet(worksheet, has_header=bool(table.headers))
    return worksheet


def render_workbook(report: WorkbookReport) -> bytes:
    workbook = Workbook()
    workbook.remove(workbook.active)
    for table in report.sheets:
        _write_sheet(workbook, table)

    buffer = BytesIO()
    workbook.save(buffer)
    logger.info("Rendered workbook with sheets: %s", ", ".join(report.sheet_names))
    return buffer.getvalue()


# ==============================
# Document (.pdf)
# ==============================


def _point_label(label):
    if isinstance(label, date):
        return label.strftime("%m-%d")
    return str(label)


def _chart_drawing(series: ChartSeries, color, *, bars=False) -> Drawing:
    """Draw one series as a line or bar chart with title and axis labels."""
    drawing = Drawing(_CHART_WIDTH, _CHART_HEIGHT)

    chart = VerticalBarChart() if bars else HorizontalLineChart()
    chart.x = 50
    chart.y = 45
    chart.width = _CHART_WIDTH - 80
    chart.height = _CHART_HEIGHT - 90
    chart.data = [[float(point.value) for point in series.points]]
    chart.categoryAxis.categoryNames = [_point_label(point.label) for point in series.points]
    chart.categoryAxis.labels.fontSize = 8
    chart.valueAxis.valueMin = 0
    chart.valueAxis.valueMax = max(chart.data[0]) * 1.1
    chart.valueAxis.labels.fontSize = 8

    if bars:
        chart.bars[0].fillColor = color
    else:
        chart.joinedLines = 1
        chart.lines[0].strokeColor = color
        chart.lines[0].strokeWidth = 2

    drawing.add(chart)
    drawing.add(
        String(_CHART_WIDTH / 2, _CHART_HEIGHT - 20, series.title, textAnchor="middle", fontSize=14)
    )
    drawing.add(String(_CHART_WIDTH / 2, 10, series.x_label, textAnchor="middle", fontSize=10))
    y_label = Group(String(0, 0, series.y_label, textAnchor="middle", fontSize=10))
    y_label.translate(14, chart.y + chart.height / 2)
    y_label.rotate(90)
    drawing.add(y_label)
    return drawing


def _pdf_table(table: ReportTable, col_widths):
    data = [list(table.headers)] if table.headers else []
    data.extend(list(row) for row in table.rows)
    flowable = Table(data, colWidths=col_widths, repeatRows=1 if table.headers else 0)
    flowable.setStyle(
        TableStyle(
            [
                ("GRID", (0, 0), (-1, -1), 1, colors.black),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ]
        )
    )
    return flowable


def render_pdf(document: ReportDocument) -> bytes:
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ReportTitle",
        parent=styles["Title"],
        fontSize=24,
        alignment=TA_CENTER,
        spaceAfter=20,
    )
    bold_style = ParagraphStyle("ReportBold", parent=styles["Normal"], fontName="Helvetica-Bold")
    placeholder_style = ParagraphStyle("ChartPlaceholder", parent=bold_style, alignment=TA_CENTER)
    heading_style = styles["Heading3"]

    buffer = BytesIO()
    pdf = SimpleDocTemplate(buffer, pagesize=A4, title=document.title)
    width = pdf.width

    story = [Paragraph(escape(document.title), title_style)]
    story.append(_pdf_table(document.sales_table, [width * w for w in (0.25, 0.15, 0.2, 0.2, 0.2)]))
    story.append(Spacer(1, 20))

    for line in document.summary_lines:
        story.append(Paragraph(escape(line), bold_style))
        story.append(Spacer(1, 12))

    for table, weights in (
        (document.product_table, (0.4, 0.25, 0.35)),
        (document.daily_revenue_table, (0.5, 0.5)),
        (document.top_sellers_table, (0.1, 0.4, 0.25, 0.25)),
    ):
        story.append(Paragraph(escape(table.title), heading_style))
        story.append(_pdf_table(table, [width * w for w in weights]))
        story.append(Spacer(1, 20))

    for series, color, bars in (
        (document.sales_chart, colors.blue, False),
        (document.revenue_chart, colors.green, False),
        (document.seller_ranking, colors.orange, True),
    ):
        if series.insufficient_data:
            story.append(Paragraph(CHART_PLACEHOLDER, placeholder_style))
        else:
            story.append(_chart_drawing(series, color, bars=bars))
        story.append(Spacer(1, 20))

    pdf.build(story)
    logger.info("Rendered PDF report (%d sales rows)", len(document.sales_table.rows))
    return buffer.getvalue()


__all__ = ["render_pdf", "render_workbook"]
