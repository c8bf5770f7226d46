"""
Tests for CompanyService and slug generation.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from apps.api.services.company_service import CompanyService, InvalidCompanyName, slugify


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Spotify", "spotify"),
        ("IBM", "ibm"),
        ("Acme Widgets, Inc.", "acme-widgets-inc"),
        ("  Ben & Jerry's  ", "ben-jerry-s"),
        ("3M", "3m"),
        ("--Already-Slugged--", "already-slugged"),
        ("Café Nestlé", "cafe-nestle"),
        ("Société Générale", "societe-generale"),
        ("!!!", ""),
        ("日本", ""),
    ],
)
def test_slugify(name, expected):
    assert slugify(name) == expected


class TestCompanyService:
    def test_get_company_missing_returns_none(self, db):
        assert CompanyService(db).get_company("boop") is None

    def test_get_company_attaches_sorted_invoice_ids(self, db):
        company = CompanyService(db).get_company("apple")

        assert company["invoices"] == [1, 2]

    def test_create_company_duplicate_slug_raises(self, db):
        service = CompanyService(db)

        with pytest.raises(IntegrityError):
            service.create_company("IBM", "Another big blue")
        db.rollback()

    def test_update_missing_returns_none(self, db):
        assert CompanyService(db).update_company("boop", "Boop", None) is None

    def test_delete_reports_existence(self, db):
        service = CompanyService(db)

        assert service.delete_company("ibm") is True
        assert service.delete_company("ibm") is False

    def test_create_company_with_empty_slug_raises(self, db):
        service = CompanyService(db)

        with pytest.raises(InvalidCompanyName):
            service.create_company("???", "Nothing to slug")

        assert [c["code"] for c in service.list_companies()] == ["apple", "ibm"]
