import unittest
from datetime import date, datetime, timezone
from decimal import Decimal

from salestrack.core.aggregation import total_revenue
from salestrack.core.constants import CHART_STATUS_INSUFFICIENT, CHART_STATUS_OK
from salestrack.services.report_service import (
    SHEET_SUMMARY,
    SUMMARY_TOTAL_REVENUE,
    SUMMARY_TOTAL_SALES,
    build_chart_series,
    build_document,
    build_revenue_series,
    build_seller_ranking,
    build_table_report,
    build_text_report,
    build_workbook,
)
from tests.helpers import make_sale, scenario_sales


class TableReportTest(unittest.TestCase):
    def test_rows_sorted_by_date(self):
        sales = [
            make_sale("late", 1, 1, date(2024, 5, 3)),
            make_sale("early", 2, 1, date(2024, 5, 1)),
            make_sale("middle", 3, 1, date(2024, 5, 2)),
        ]
        rows = build_table_report(sales)
        self.assertEqual([row.product_name for row in rows], ["early", "middle", "late"])
        self.assertEqual(rows[0].amount, Decimal("2"))

    def test_accepts_iso_strings_and_plain_dates(self):
        sales = [make_sale("datetime", 1, 1, datetime(2024, 5, 3, 8, 0, tzinfo=timezone.utc))]
        string_sale = make_sale("string", 1, 2, date(2024, 5, 1))
        string_sale.date = "2024-05-02T09:00:00Z"
        plain_date = make_sale("plain", 1, 3, date(2024, 5, 1))
        plain_date.date = date(2024, 5, 1)
        sales += [string_sale, plain_date]

        rows = build_table_report(sales)
        self.assertEqual([row.product_name for row in rows], ["plain", "string", "datetime"])
        self.assertEqual(rows[1].date, datetime(2024, 5, 2, 9, 0, tzinfo=timezone.utc))

        text = build_text_report(sales)
        self.assertIn("Product: string, Amount: 1, Price: 2.00, Revenue: 2.00, Date: 2024-05-02T09:00:00+00:00", text)
        self.assertIn("Date: 2024-05-01, Total Revenue: 3.00", text)

        all_sales = build_workbook(sales).sheet("All Sales").rows
        self.assertEqual(all_sales[0][3], datetime(2024, 5, 1, tzinfo=timezone.utc))
        self.assertEqual(len(build_document(sales).sales_table.rows), 3)


class ChartSeriesTest(unittest.TestCase):
    def test_amount_series(self):
        series = build_chart_series(scenario_sales())
        self.assertEqual(series.status, CHART_STATUS_OK)
        self.assertEqual(
            [(p.label, p.value) for p in series.points],
            [(date(2024, 1, 1), Decimal("3")), (date(2024, 1, 2), Decimal("1"))],
        )

    def test_revenue_series(self):
        series = build_revenue_series(scenario_sales())
        self.assertEqual([p.value for p in series.points], [Decimal("25"), Decimal("10")])

    def test_empty_input_is_insufficient(self):
        series = build_chart_series([])
        self.assertTrue(series.insufficient_data)
        self.assertEqual(series.status, CHART_STATUS_INSUFFICIENT)

    def test_single_day_is_insufficient(self):
        sales = [make_sale("A", 1, 1, date(2024, 1, 1)), make_sale("B", 1, 1, date(2024, 1, 1))]
        self.assertTrue(build_chart_series(sales).insufficient_data)

    def test_zero_maximum_is_insufficient(self):
        sales = [make_sale("A", 0, 1, date(2024, 1, 1)), make_sale("A", 0, 1, date(2024, 1, 2))]
        self.assertTrue(build_chart_series(sales).insufficient_data)

    def test_seller_ranking_accepts_single_seller(self):
        ranking = build_seller_ranking(scenario_sales(), limit=3)
        self.assertFalse(ranking.insufficient_data)
        self.assertEqual([p.label for p in ranking.points], ["bob"])
        self.assertTrue(build_seller_ranking([]).insufficient_data)


class TextReportTest(unittest.TestCase):
    def test_scenario_text(self):
        text = build_text_report(scenario_sales())
        expected = "\n".join(
            [
                "Sales Report:",
                "==================",
                "Product: A, Amount: 2, Price: 10.00, Revenue: 20.00, Date: 2024-01-01T12:00:00+00:00",
                "Product: B, Amount: 1, Price: 5.00, Revenue: 5.00, Date: 2024-01-01T12:00:00+00:00",
                "Product: A, Amount: 1, Price: 10.00, Revenue: 10.00, Date: 2024-01-02T12:00:00+00:00",
                "",
                "Date with highest sales: 2024-01-01, Sales Count: 2",
                "",
                "Total Revenue: 35.00",
                "",
                "Day with highest revenue: 2024-01-01, Revenue: 25.00",
                "",
                "Product Statistics:",
                "Product: A, Total Amount: 3, Total Revenue: 30.00",
                "Product: B, Total Amount: 1, Total Revenue: 5.00",
                "",
                "Daily Revenue:",
                "Date: 2024-01-01, Total Revenue: 25.00",
                "Date: 2024-01-02, Total Revenue: 10.00",
            ]
        ) + "\n"
        self.assertEqual(text, expected)

    def test_empty_text_uses_placeholders(self):
        text = build_text_report([])
        self.assertIn("Date with highest sales: none", text)
        self.assertIn("Total Revenue: 0.00", text)
        self.assertIn("Day with highest revenue: none", text)

    def test_deterministic(self):
        self.assertEqual(build_text_report(scenario_sales()), build_text_report(scenario_sales()))


class WorkbookReportTest(unittest.TestCase):
    def test_sheet_order(self):
        workbook = build_workbook(scenario_sales())
        self.assertEqual(
            workbook.sheet_names,
            ["All Sales", "By Date", "By Username", "By Product", "Summary"],
        )

    def test_summary_matches_total_revenue(self):
        for sales in ([], scenario_sales()):
            with self.subTest(count=len(sales)):
                summary = dict(build_workbook(sales).sheet(SHEET_SUMMARY).rows)
                self.assertEqual(summary[SUMMARY_TOTAL_SALES], len(sales))
                self.assertEqual(summary[SUMMARY_TOTAL_REVENUE], total_revenue(sales))

    def test_grouped_sheets(self):
        sales = scenario_sales() + [make_sale("C", 1, 7, date(2024, 1, 3), username="amy")]
        workbook = build_workbook(sales)
        self.assertEqual(
            workbook.sheet("By Date").rows[0],
            (date(2024, 1, 1), Decimal("3"), Decimal("25"), 2),
        )
        self.assertEqual([row[0] for row in workbook.sheet("By Username").rows], ["amy", "bob"])
        self.assertEqual([row[0] for row in workbook.sheet("By Product").rows], ["A", "B", "C"])
        self.assertEqual(len(workbook.sheet("All Sales").rows), 4)
        self.assertEqual(workbook.sheet("All Sales").rows[0][-1], Decimal("20"))

    def test_unknown_sheet(self):
        with self.assertRaises(KeyError):
            build_workbook([]).sheet("Nope")


class DocumentReportTest(unittest.TestCase):
    def test_document_content(self):
        sales = scenario_sales() + [
            make_sale("C", 1, 100, datetime(2024, 1, 3, tzinfo=timezone.utc), username="amy"),
            make_sale("C", 1, 1, datetime(2024, 1, 3, tzinfo=timezone.utc), username="cid"),
            make_sale("C", 1, 2, datetime(2024, 1, 3, tzinfo=timezone.utc), username="dee"),
        ]
        document = build_document(sales, top_sellers=3)
        self.assertEqual(document.title, "Sales Report")
        self.assertEqual(document.sales_table.headers, ("Product", "Amount", "Price", "Revenue", "Date"))
        self.assertEqual(len(document.sales_table.rows), 6)
        self.assertEqual(document.summary_lines[1], "Total Revenue: 138.00")
        self.assertEqual([row[1] for row in document.top_sellers_table.rows], ["amy", "bob", "dee"])
        self.assertEqual(document.sales_chart.title, "Sales Over Time")
        self.assertEqual(document.revenue_chart.title, "Revenue Over Time")
        self.assertEqual(len(document.seller_ranking.points), 3)

    def test_total_revenue_consistent_across_formats(self):
        sales = scenario_sales()
        text_line = [line for line in build_text_report(sales).splitlines() if line.startswith("Total Revenue")]
        document = build_document(sales)
        summary = dict(build_workbook(sales).sheet(SHEET_SUMMARY).rows)
        self.assertEqual(text_line, [document.summary_lines[1]])
        self.assertEqual(document.summary_lines[1], "Total Revenue: {:.2f}".format(summary[SUMMARY_TOTAL_REVENUE]))

    def test_empty_document(self):
        document = build_document([])
        self.assertEqual(document.sales_table.rows, [])
        self.assertTrue(document.sales_chart.insufficient_data)
        self.assertTrue(document.revenue_chart.insufficient_data)
        self.assertTrue(document.seller_ranking.insufficient_data)


if __name__ == "__main__":
    unittest.main()
