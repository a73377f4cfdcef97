"""
QuickBooks Online purchasing and vendor APIs.
"""

from .mixins import CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi


class Bills(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi):
    ENTITY = 'Bill'


class BillPayments(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi):
    ENTITY = 'BillPayment'


class Purchases(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi):
    """Expenses: cash, check and credit card purchases."""

    ENTITY = 'Purchase'


class PurchaseOrders(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi):
    ENTITY = 'PurchaseOrder'


class Vendors(CreateMixin, ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    ENTITY = 'Vendor'


class VendorCredits(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi):
    ENTITY = 'VendorCredit'
