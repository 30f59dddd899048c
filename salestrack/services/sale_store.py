from typing import Optional, cast

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from salestrack.core.errors import StaleWrite
from salestrack.models.sale import Sale


class SaleStore:
    """Persistence for sale rows on top of a SQLAlchemy session.

    Writes are guarded by the ``version`` column: SQLAlchemy issues
    ``UPDATE ... WHERE version = :loaded`` and reports a lost race as
    ``StaleDataError``, which is surfaced here as ``StaleWrite``.
    """

    def __init__(self, db: Session):
        self.db = db

    def all(self) -> list[Sale]:
        sales = self.db.execute(select(Sale).order_by(Sale.date, Sale.id)).scalars().all()
        return cast(list[Sale], list(sales))

    def get(self, sale_id: int) -> Optional[Sale]:
        return self.db.get(Sale, sale_id)

    def add(self, sale: Sale) -> Sale:
        self.db.add(sale)
        self.db.commit()
        self.db.refresh(sale)
        return sale

    def save(self, sale: Sale) -> Sale:
        try:
            self.db.commit()
        except StaleDataError as exc:
            self.db.rollback()
            raise StaleWrite("Sale {} was modified by another request.".format(sale.id)) from exc
        self.db.refresh(sale)
        return sale

    def delete(self, sale: Sale) -> None:
        self.db.delete(sale)
        try:
            self.db.commit()
        except StaleDataError as exc:
            self.db.rollback()
            raise StaleWrite("Sale {} was modified by another request.".format(sale.id)) from exc


__all__ = ["SaleStore"]
