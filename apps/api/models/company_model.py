from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from apps.api.core.db import Base

class Company(Base):
    __tablename__ = "companies"

    # Slug of the name, generated on insert
    code = Column(String, primary_key=True, nullable=False)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    # Relationship: one-to-many (companies → invoices)
    invoices = relationship(
        "Invoice",
        back_populates="company",
        passive_deletes=True,
    )
