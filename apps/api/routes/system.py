from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from apps.api.core.db import get_db

router = APIRouter()


@router.get("/health")
def health(db: Session = Depends(get_db)):
    """Liveness plus a round trip to the database."""
    db.execute(text("SELECT 1"))
    return {"status": "ok", "database": "ok"}
