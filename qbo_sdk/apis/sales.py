"""
QuickBooks Online sales transaction APIs.
"""

from .mixins import (
    CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin,
    PdfMixin, SendPdfMixin, EntityApi
)


class Estimates(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, SendPdfMixin, EntityApi):
    """Estimates API. PDFs can be e-mailed but not downloaded."""

    ENTITY = 'Estimate'


class SalesReceipts(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, PdfMixin, EntityApi):
    ENTITY = 'SalesReceipt'


class CreditMemos(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi):
    ENTITY = 'CreditMemo'


class RefundReceipts(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi):
    ENTITY = 'RefundReceipt'


class Payments(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi):
    """Customer payments recorded against invoices (not card charges)."""

    ENTITY = 'Payment'


class PaymentMethods(CreateMixin, ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    ENTITY = 'PaymentMethod'
