from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy.orm import sessionmaker

from salestrack.database.engine import build_engine, init_db
from salestrack.models.sale import Sale


def make_sale(product, amount, price, when, username="bob", sale_id=None):
    if isinstance(when, date) and not isinstance(when, datetime):
        when = datetime(when.year, when.month, when.day, 12, 0, tzinfo=timezone.utc)
    return Sale(
        id=sale_id,
        product_name=product,
        amount=Decimal(str(amount)),
        price=Decimal(str(price)),
        date=when,
        username=username,
    )


def scenario_sales():
    return [
        make_sale("A", 2, 10, date(2024, 1, 1)),
        make_sale("B", 1, 5, date(2024, 1, 1)),
        make_sale("A", 1, 10, date(2024, 1, 2)),
    ]


def memory_session_factory():
    engine = build_engine("sqlite:///:memory:")
    init_db(bind=engine)
    return sessionmaker(bind=engine, expire_on_commit=False)
