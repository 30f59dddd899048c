import argparse
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from salestrack.config import get_settings
from salestrack.core.constants import EXCEL_REPORT_FILENAME, PDF_REPORT_FILENAME, TEXT_REPORT_FILENAME
from salestrack.core.logging import setup_logging
from salestrack.database import SessionLocal, init_db
from salestrack.services.export_service import render_pdf, render_workbook
from salestrack.services.report_service import build_document, build_text_report, build_workbook
from salestrack.services.sale_service import SaleService

FORMATS = ("text", "excel", "pdf")


def parse_args():
    parser = argparse.ArgumentParser(description="Write sales reports to disk.")
    parser.add_argument("--out", default=".", help="Output directory.")
    parser.add_argument(
        "--formats",
        nargs="*",
        choices=FORMATS,
        default=list(FORMATS),
        help="Reports to write. Default: all.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    init_db()
    db = SessionLocal()
    try:
        sales = SaleService(db).report_sales()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Export failed: {exc}") from exc
    finally:
        db.close()

    written = []
    if "text" in args.formats:
        path = out_dir / TEXT_REPORT_FILENAME
        path.write_text(build_text_report(sales), encoding="utf-8")
        written.append(path)
    if "excel" in args.formats:
        path = out_dir / EXCEL_REPORT_FILENAME
        path.write_bytes(render_workbook(build_workbook(sales)))
        written.append(path)
    if "pdf" in args.formats:
        path = out_dir / PDF_REPORT_FILENAME
        document = build_document(sales, top_sellers=get_settings().TOP_SELLERS_LIMIT)
        path.write_bytes(render_pdf(document))
        written.append(path)

    print(f"{len(sales)} sales exported:")
    for path in written:
        print(f"  {path}")


if __name__ == "__main__":
    main()
