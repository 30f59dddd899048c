from salestrack.services.account_service import authenticate_user, register_user
from salestrack.services.export_service import render_pdf, render_workbook
from salestrack.services.sale_service import SaleService

__all__ = [
    "SaleService",
    "authenticate_user",
    "register_user",
    "render_pdf",
    "render_workbook",
]
