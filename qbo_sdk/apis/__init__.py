"""
QuickBooks Online SDK APIs.
"""

from .api_base import ApiBase
from .accounting import Accounts, Attachables, Budgets, Classes, Departments, Items, JournalEntries, Terms
from .batch import Batch
from .change_data_capture import ChangeDataCapture
from .charges import Charges
from .company import CompanyInfo, Preferences, Employees, TimeActivities
from .customers import Customers
from .invoices import Invoices
from .purchasing import Bills, BillPayments, Purchases, PurchaseOrders, Vendors, VendorCredits
from .reports import Reports
from .sales import Estimates, SalesReceipts, CreditMemos, RefundReceipts, Payments, PaymentMethods
from .tax import TaxAgencies, TaxCodes, TaxRates, TaxServices

__all__ = [
    'ApiBase',
    'Accounts',
    'Attachables',
    'Batch',
    'BillPayments',
    'Bills',
    'Budgets',
    'ChangeDataCapture',
    'Charges',
    'Classes',
    'CompanyInfo',
    'CreditMemos',
    'Customers',
    'Departments',
    'Employees',
    'Estimates',
    'Invoices',
    'Items',
    'JournalEntries',
    'PaymentMethods',
    'Payments',
    'Preferences',
    'PurchaseOrders',
    'Purchases',
    'RefundReceipts',
    'Reports',
    'SalesReceipts',
    'TaxAgencies',
    'TaxCodes',
    'TaxRates',
    'TaxServices',
    'Terms',
    'TimeActivities',
    'VendorCredits',
    'Vendors',
]
