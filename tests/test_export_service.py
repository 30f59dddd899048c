import unittest
from datetime import date, datetime
from io import BytesIO

from openpyxl import load_workbook

from salestrack.services.export_service import render_pdf, render_workbook
from salestrack.services.report_service import build_document, build_workbook
from tests.helpers import make_sale, scenario_sales


class WorkbookExportTest(unittest.TestCase):
    def _load(self, sales):
        return load_workbook(BytesIO(render_workbook(build_workbook(sales))))

    def test_sheets_and_summary(self):
        workbook = self._load(scenario_sales())
        self.assertEqual(
            workbook.sheetnames,
            ["All Sales", "By Date", "By Username", "By Product", "Summary"],
        )
        summary = workbook["Summary"]
        self.assertEqual(summary["A1"].value, "Total Sales")
        self.assertEqual(summary["B1"].value, 3)
        self.assertEqual(summary["A2"].value, "Total Revenue")
        self.assertAlmostEqual(float(summary["B2"].value), 35.0)
        self.assertTrue(summary["A1"].font.b)

    def test_all_sales_sheet(self):
        sheet = self._load(scenario_sales())["All Sales"]
        headers = [cell.value for cell in sheet[1]]
        self.assertEqual(headers, ["Id", "Product Name", "Amount", "Date", "Price", "Username", "Revenue"])
        self.assertTrue(sheet["A1"].font.b)
        self.assertEqual(sheet["B2"].value, "A")
        self.assertEqual(sheet["D2"].value, datetime(2024, 1, 1, 12, 0))
        self.assertEqual(sheet["B2"].fill.fgColor.rgb[-6:], "D3D3D3")

    def test_by_date_sheet_uses_dates(self):
        sheet = self._load(scenario_sales())["By Date"]
        self.assertEqual(sheet.max_row, 3)
        self.assertEqual(sheet["A2"].value.date(), date(2024, 1, 1))
        self.assertEqual(sheet["D2"].value, 2)

    def test_empty_workbook_has_headers_only(self):
        workbook = self._load([])
        self.assertEqual(workbook["All Sales"].max_row, 1)
        self.assertEqual(workbook["Summary"]["B1"].value, 0)


class PdfExportTest(unittest.TestCase):
    def test_renders_pdf(self):
        sales = scenario_sales() + [make_sale("C", 4, "2.50", date(2024, 1, 3), username="amy")]
        content = render_pdf(build_document(sales))
        self.assertTrue(content.startswith(b"%PDF"))
        self.assertGreater(len(content), 1000)

    def test_renders_pdf_without_sales(self):
        content = render_pdf(build_document([]))
        self.assertTrue(content.startswith(b"%PDF"))


if __name__ == "__main__":
    unittest.main()
