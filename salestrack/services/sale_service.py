from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from salestrack.core.dates import to_utc
from salestrack.core.errors import Forbidden, IdMismatch, InvalidOwner, NotFound, StaleWrite
from salestrack.models.sale import Sale
from salestrack.services.account_service import user_exists
from salestrack.services.sale_store import SaleStore

logger = logging.getLogger(__name__)


class SaleService:
    """Sale CRUD with ownership rules; the caller identity is always explicit."""

    def __init__(self, db: Session, store: SaleStore | None = None):
        self.db = db
        self.store = store or SaleStore(db)

    def list(self) -> list[Sale]:
        return self.store.all()

    def report_sales(self) -> list[Sale]:
        return self.store.all()

    def get(self, sale_id: int) -> Sale:
        sale = self.store.get(sale_id)
        if sale is None:
            raise NotFound("Sale {} not found.".format(sale_id))
        return sale

    def _require_user(self, caller: str) -> None:
        if not caller or not user_exists(self.db, caller):
            raise InvalidOwner("Invalid username.")

    def create(self, payload, caller: str) -> Sale:
        self._require_user(caller)
        sale = Sale(
            product_name=payload.product_name,
            amount=payload.amount,
            price=payload.price,
            date=to_utc(payload.date),
            username=caller,
        )
        self.store.add(sale)
        logger.info("Sale %s created by %s", sale.id, caller)
        return sale

    def update(self, sale_id: int, payload, caller: str) -> Sale:
        if payload.id != sale_id:
            raise IdMismatch(
                "Sale id in body ({}) does not match the addressed id ({}).".format(payload.id, sale_id)
            )

        sale = self.get(sale_id)
        self._require_user(caller)
        if sale.username != caller:
            logger.warning("User %s tried to update sale %s owned by %s", caller, sale_id, sale.username)
            raise Forbidden("Only the owner can update this sale.")

        version = getattr(payload, "version", None)
        if version is not None and version != sale.version:
            raise StaleWrite(
                "Sale {} was modified by another request (version {} != {}).".format(
                    sale_id, version, sale.version
                )
            )

        sale.product_name = payload.product_name
        sale.amount = payload.amount
        sale.price = payload.price
        sale.date = to_utc(payload.date)
        sale.username = caller
        self.store.save(sale)
        logger.info("Sale %s updated by %s (version %s)", sale_id, caller, sale.version)
        return sale

    def delete(self, sale_id: int) -> None:
        sale = self.get(sale_id)
        self.store.delete(sale)
        logger.info("Sale %s deleted", sale_id)


__all__ = ["SaleService"]
