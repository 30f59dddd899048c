
API_PREFIX = "/api"

TEXT_REPORT_FILENAME = "SalesReport.txt"
PDF_REPORT_FILENAME = "SalesReport.pdf"
EXCEL_REPORT_FILENAME = "SalesData.xlsx"

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PDF_MEDIA_TYPE = "application/pdf"
TEXT_MEDIA_TYPE = "text/plain"

CHART_STATUS_OK = "ok"
CHART_STATUS_INSUFFICIENT = "insufficient_data"
CHART_PLACEHOLDER = "No sales data available to generate chart."
