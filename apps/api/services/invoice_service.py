from typing import List, Optional

from sqlalchemy import Boolean, DateTime, Float, Integer, String, bindparam, text
from sqlalchemy.orm import Session

from apps.api.core.logging import get_logger

logger = get_logger(__name__)

# Result typing for raw statements, so SQLite's 0/1 and timestamp strings
# come back as bool and datetime like they do on other backends.
INVOICE_COLUMNS = {
    "id": Integer,
    "comp_code": String,
    "amt": Float,
    "paid": Boolean,
    "add_date": DateTime,
    "paid_date": DateTime,
}

INVOICE_DETAIL_COLUMNS = {
    **INVOICE_COLUMNS,
    "code": String,
    "name": String,
    "description": String,
}

# Unpaid → paid stamps paid_date, paid → paid keeps it, anything → unpaid
# clears it. Evaluated by the database in the same statement as the write.
UPDATE_INVOICE_SQL = """
    UPDATE invoices
       SET amt = :amt,
           paid = :paid,
           paid_date = CASE
                           WHEN :paid THEN COALESCE(paid_date, CURRENT_TIMESTAMP)
                           ELSE NULL
                       END
     WHERE id = :id
    RETURNING id, comp_code, amt, paid, add_date, paid_date
"""


class InvoiceService:
    """
    Data-access layer for invoices.

    Returns plain dicts shaped for the API; None means no invoice has the
    requested id.
    """

    def __init__(self, db: Session):
        self.db = db

    # ------------------------------------------------------------
    # Fetch all invoices (id + owning company)
    # ------------------------------------------------------------
    def list_invoices(self) -> List[dict]:
        result = self.db.execute(
            text("SELECT id, comp_code FROM invoices ORDER BY id")
        )
        return [dict(row) for row in result.mappings()]

    # ------------------------------------------------------------
    # Fetch single invoice joined to its company
    # ------------------------------------------------------------
    def get_invoice(self, invoice_id: int) -> Optional[dict]:
        stmt = text(
            """
            SELECT i.id, i.comp_code, i.amt, i.paid, i.add_date, i.paid_date,
                   c.code, c.name, c.description
              FROM invoices AS i
              JOIN companies AS c ON i.comp_code = c.code
             WHERE i.id = :id
            """
        ).columns(**INVOICE_DETAIL_COLUMNS)

        row = self.db.execute(stmt, {"id": invoice_id}).mappings().first()
        if row is None:
            logger.debug(f"Invoice not found: {invoice_id}")
            return None

        return {
            "id": row["id"],
            "amt": row["amt"],
            "paid": row["paid"],
            "add_date": row["add_date"],
            "paid_date": row["paid_date"],
            "company": {
                "code": row["code"],
                "name": row["name"],
                "description": row["description"],
            },
        }

    # ------------------------------------------------------------
    # Create (paid, add_date, paid_date come from server defaults)
    # ------------------------------------------------------------
    def create_invoice(self, comp_code: Optional[str], amt: Optional[float]) -> dict:
        """
        Insert an unpaid invoice for comp_code.

        An unknown comp_code raises IntegrityError from the foreign key.
        """
        stmt = text(
            """
            INSERT INTO invoices (comp_code, amt)
            VALUES (:comp_code, :amt)
            RETURNING id, comp_code, amt, paid, add_date, paid_date
            """
        ).columns(**INVOICE_COLUMNS)

        row = self.db.execute(stmt, {"comp_code": comp_code, "amt": amt}).mappings().one()
        invoice = dict(row)
        self.db.commit()

        logger.info(f"Created invoice {invoice['id']} for {comp_code}")
        return invoice

    # ------------------------------------------------------------
    # Update amount and payment state
    # ------------------------------------------------------------
    def update_invoice(
        self,
        invoice_id: int,
        amt: Optional[float],
        paid: Optional[bool],
    ) -> Optional[dict]:
        stmt = (
            text(UPDATE_INVOICE_SQL)
            .bindparams(bindparam("paid", type_=Boolean))
            .columns(**INVOICE_COLUMNS)
        )

        row = self.db.execute(
            stmt, {"id": invoice_id, "amt": amt, "paid": paid}
        ).mappings().first()
        if row is None:
            self.db.rollback()
            logger.debug(f"Invoice not found: {invoice_id}")
            return None

        invoice = dict(row)
        self.db.commit()

        logger.info(f"Updated invoice {invoice_id} (paid={invoice['paid']})")
        return invoice

    # ------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------
    def delete_invoice(self, invoice_id: int) -> bool:
        deleted = self.db.execute(
            text("DELETE FROM invoices WHERE id = :id RETURNING id"),
            {"id": invoice_id},
        ).scalar_one_or_none()
        if deleted is None:
            self.db.rollback()
            logger.debug(f"Invoice not found: {invoice_id}")
            return False

        self.db.commit()
        logger.info(f"Deleted invoice {invoice_id}")
        return True
