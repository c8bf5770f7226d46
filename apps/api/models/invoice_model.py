from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    false,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from apps.api.core.db import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Owning company; deleting the company deletes its invoices
    comp_code = Column(
        String,
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False,
    )

    amt = Column(Float, nullable=False)

    # --- Payment state ---
    # paid_date is set on the unpaid → paid transition and cleared when unpaid
    paid = Column(Boolean, nullable=False, server_default=false())
    add_date = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    paid_date = Column(DateTime, nullable=True)

    company = relationship("Company", back_populates="invoices")
