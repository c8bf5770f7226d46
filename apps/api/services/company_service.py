import re
import unicodedata
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.orm import Session

from apps.api.core.logging import get_logger

logger = get_logger(__name__)


class InvalidCompanyName(ValueError):
    """The name has no letters or digits to build a code from."""


def slugify(value: str) -> str:
    """
    Lowercase URL-safe code for a company name.

    Accented letters are folded to ASCII first, so
    "Café Nestlé" -> "cafe-nestle" and
    "Apple Computer, Inc." -> "apple-computer-inc".
    May return "" when nothing alphanumeric is left.
    """
    value = unicodedata.normalize("NFKD", value or "")
    value = value.encode("ascii", "ignore").decode("ascii")
    value = value.strip().lower()
    value = re.sub(r"[^a-z0-9]+", "-", value)
    return value.strip("-")


class CompanyService:
    """
    Data-access layer for companies.

    Every operation runs a fixed parameterized statement on the session it
    was constructed with. "No such company" is reported as None; the route
    decides how to answer it.
    """

    def __init__(self, db: Session):
        self.db = db

    # ------------------------------------------------------------
    # Fetch all companies
    # ------------------------------------------------------------
    def list_companies(self) -> List[dict]:
        result = self.db.execute(
            text(
                """
                SELECT code, name, description
                  FROM companies
                 ORDER BY code
                """
            )
        )
        return [dict(row) for row in result.mappings()]

    # ------------------------------------------------------------
    # Fetch single company with the ids of its invoices
    # ------------------------------------------------------------
    def get_company(self, code: str) -> Optional[dict]:
        row = self.db.execute(
            text(
                """
                SELECT code, name, description
                  FROM companies
                 WHERE code = :code
                """
            ),
            {"code": code},
        ).mappings().first()
        if row is None:
            logger.debug(f"Company not found: {code}")
            return None

        invoice_ids = self.db.execute(
            text(
                """
                SELECT id
                  FROM invoices
                 WHERE comp_code = :code
                 ORDER BY id
                """
            ),
            {"code": code},
        ).scalars().all()

        company = dict(row)
        company["invoices"] = list(invoice_ids)
        return company

    # ------------------------------------------------------------
    # Create
    # ------------------------------------------------------------
    def create_company(self, name: Optional[str], description: Optional[str]) -> dict:
        """
        Insert a company whose code is the slug of its name.

        A name that slugs to an existing code raises IntegrityError; a name
        with nothing to slug raises InvalidCompanyName. A missing name is
        left for the NOT NULL constraints to reject.
        """
        code = None
        if name is not None:
            code = slugify(name)
            if not code:
                raise InvalidCompanyName(f"Cannot build a company code from name: {name!r}")

        row = self.db.execute(
            text(
                """
                INSERT INTO companies (code, name, description)
                VALUES (:code, :name, :description)
                RETURNING code, name, description
                """
            ),
            {"code": code, "name": name, "description": description},
        ).mappings().one()
        company = dict(row)
        self.db.commit()

        logger.info(f"Created company {company['code']}")
        return company

    # ------------------------------------------------------------
    # Full-field update
    # ------------------------------------------------------------
    def update_company(
        self,
        code: str,
        name: Optional[str],
        description: Optional[str],
    ) -> Optional[dict]:
        row = self.db.execute(
            text(
                """
                UPDATE companies
                   SET name = :name, description = :description
                 WHERE code = :code
                RETURNING code, name, description
                """
            ),
            {"code": code, "name": name, "description": description},
        ).mappings().first()
        if row is None:
            self.db.rollback()
            logger.debug(f"Company not found: {code}")
            return None

        company = dict(row)
        self.db.commit()

        logger.info(f"Updated company {code}")
        return company

    # ------------------------------------------------------------
    # Delete (invoices go with it through ON DELETE CASCADE)
    # ------------------------------------------------------------
    def delete_company(self, code: str) -> bool:
        deleted = self.db.execute(
            text("DELETE FROM companies WHERE code = :code RETURNING code"),
            {"code": code},
        ).scalar_one_or_none()
        if deleted is None:
            self.db.rollback()
            logger.debug(f"Company not found: {code}")
            return False

        self.db.commit()
        logger.info(f"Deleted company {code}")
        return True
