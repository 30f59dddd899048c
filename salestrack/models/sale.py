from sqlalchemy import Column, Index, Integer, String

from salestrack.core.money import to_decimal
from salestrack.database.base import Base
from salestrack.database.types import ExactDecimal, UTCDateTime


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    product_name = Column(String(200), nullable=False)

    amount = Column(ExactDecimal(18, 4), nullable=False)
    price = Column(ExactDecimal(18, 4), nullable=False)
    date = Column(UTCDateTime, nullable=False)

    username = Column(String(150), nullable=False)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        Index("idx_sales_date", "date"),
        Index("idx_sales_username", "username"),
    )

    @property
    def revenue(self):
        return to_decimal(self.amount, "amount") * to_decimal(self.price, "price")

    def __repr__(self):
        return "<Sale id={} product={!r} amount={} price={}>".format(
            self.id, self.product_name, self.amount, self.price
        )


__all__ = ["Sale"]
