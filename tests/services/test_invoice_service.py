"""
Tests for InvoiceService, focused on the paid / paid_date transitions.
"""

from datetime import datetime

from apps.api.services.invoice_service import InvoiceService


class TestInvoicePaidDate:
    def test_unpaid_to_paid_stamps_paid_date(self, db):
        invoice = InvoiceService(db).update_invoice(1, 100, True)

        assert invoice["paid"] is True
        assert isinstance(invoice["paid_date"], datetime)

    def test_paid_to_paid_keeps_paid_date(self, db):
        service = InvoiceService(db)
        first = service.update_invoice(1, 100, True)

        second = service.update_invoice(1, 250, True)

        assert second["amt"] == 250
        assert second["paid_date"] == first["paid_date"]

    def test_paid_to_unpaid_clears_paid_date(self, db):
        service = InvoiceService(db)
        service.update_invoice(1, 100, True)

        invoice = service.update_invoice(1, 100, False)

        assert invoice["paid"] is False
        assert invoice["paid_date"] is None

    def test_unpaid_to_unpaid_leaves_paid_date_null(self, db):
        invoice = InvoiceService(db).update_invoice(2, 10, False)

        assert invoice["paid_date"] is None

    def test_update_missing_returns_none(self, db):
        assert InvoiceService(db).update_invoice(999, 1, True) is None


class TestInvoiceService:
    def test_get_invoice_joins_company(self, db):
        invoice = InvoiceService(db).get_invoice(3)

        assert invoice["company"] == {
            "code": "ibm",
            "name": "IBM",
            "description": "Big blue.",
        }
        assert invoice["add_date"] == datetime(2018, 3, 1)
        assert "comp_code" not in invoice

    def test_create_invoice_uses_defaults(self, db):
        invoice = InvoiceService(db).create_invoice("apple", 42.5)

        assert invoice["paid"] is False
        assert invoice["paid_date"] is None
        assert isinstance(invoice["add_date"], datetime)

    def test_delete_reports_existence(self, db):
        service = InvoiceService(db)

        assert service.delete_invoice(2) is True
        assert service.delete_invoice(2) is False
        assert service.get_invoice(2) is None
