import argparse
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy import delete, select

from salestrack.core.logging import setup_logging
from salestrack.database import SessionLocal, init_db
from salestrack.models.sale import Sale
from salestrack.models.user import User
from salestrack.schemas.sale import SaleCreate
from salestrack.services.account_service import register_user
from salestrack.services.sale_service import SaleService

DEMO_PASSWORD = "Demo-pass1"

DEMO_SALES = (
    ("alice", "Espresso Beans", "3", "12.50", 0),
    ("alice", "Filter Papers", "10", "1.20", 0),
    ("bob", "Espresso Beans", "1", "12.50", 1),
    ("bob", "Grinder", "1", "89.99", 2),
    ("carol", "Filter Papers", "25", "1.10", 2),
    ("carol", "Milk Jug", "2", "14.00", 3),
)


def parse_args():
    parser = argparse.ArgumentParser(description="Seed demo users and sales.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    init_db()

    db = SessionLocal()
    try:
        if args.reset:
            db.execute(delete(Sale))
            db.execute(delete(User))
            db.commit()

        has_user = db.execute(select(User.id).limit(1)).first()
        if has_user:
            print("Seed skipped: users already exist.")
            return

        for username in sorted({row[0] for row in DEMO_SALES}):
            register_user(db, username, f"{username}@example.com", DEMO_PASSWORD)

        service = SaleService(db)
        start = datetime.now(timezone.utc).replace(hour=9, minute=0, second=0, microsecond=0)
        for username, product_name, amount, price, day_offset in DEMO_SALES:
            payload = SaleCreate(
                product_name=product_name,
                amount=Decimal(amount),
                price=Decimal(price),
                date=start - timedelta(days=3 - day_offset),
            )
            service.create(payload, username)

        print(f"Seed data created. Demo users share the password {DEMO_PASSWORD!r}.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
