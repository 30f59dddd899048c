from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from salestrack.config import get_settings
from salestrack.core.security import authenticate_request
from salestrack.database.session import get_db
from salestrack.services.sale_service import SaleService


def require_user(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> str:
    cookie_token = request.cookies.get(get_settings().JWT_COOKIE_NAME)
    return authenticate_request(authorization, cookie_token)


def get_sale_service(db: Session = Depends(get_db)) -> SaleService:
    return SaleService(db)


__all__ = ["get_db", "get_sale_service", "require_user"]
