"""
Load the reference data set: two companies and three invoices.

    python -m apps.api.core.seed

Existing rows are removed first, so the command can be re-run at will.
"""

from sqlalchemy import text
from sqlalchemy.orm import Session

from apps.api.core.logging import get_logger

logger = get_logger(__name__)

COMPANIES = [
    {"code": "apple", "name": "Apple", "description": "Maker of OSX."},
    {"code": "ibm", "name": "IBM", "description": "Big blue."},
]

INVOICES = [
    {"id": 1, "comp_code": "apple", "amt": 100, "paid": False, "add_date": "2018-01-01 00:00:00", "paid_date": None},
    {"id": 2, "comp_code": "apple", "amt": 200, "paid": False, "add_date": "2018-02-01 00:00:00", "paid_date": None},
    {"id": 3, "comp_code": "ibm", "amt": 300, "paid": False, "add_date": "2018-03-01 00:00:00", "paid_date": None},
]


def seed_demo_data(db: Session) -> None:
    db.execute(text("DELETE FROM invoices"))
    db.execute(text("DELETE FROM companies"))

    db.execute(
        text(
            "INSERT INTO companies (code, name, description) "
            "VALUES (:code, :name, :description)"
        ),
        COMPANIES,
    )
    db.execute(
        text(
            "INSERT INTO invoices (id, comp_code, amt, paid, add_date, paid_date) "
            "VALUES (:id, :comp_code, :amt, :paid, :add_date, :paid_date)"
        ),
        INVOICES,
    )
    db.commit()

    logger.info(f"Seeded {len(COMPANIES)} companies and {len(INVOICES)} invoices")


if __name__ == "__main__":
    from apps.api.core.db import SessionLocal, run_migrations

    run_migrations()
    db = SessionLocal()
    try:
        seed_demo_data(db)
    finally:
        db.close()
