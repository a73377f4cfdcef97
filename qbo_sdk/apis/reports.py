"""
QuickBooks Online Reports API.

Every report accepts an optional dict of report options (start_date,
end_date, accounting_method, summarize_column_by, ...) sent as query
parameters. Dates may be given as date objects and lists are comma-joined.
"""

from typing import Optional, Dict, Any

from .api_base import ApiBase


class Reports(ApiBase):
    """Reports API."""

    def get(self, report_type: str, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Fetch a report by its QBO name (e.g. 'BalanceSheet').

        Returns:
            The report body with Header, Columns and Rows.
        """
        return self._report(report_type, options)

    def balance_sheet(self, options=None):
        return self.get('BalanceSheet', options)

    def profit_and_loss(self, options=None):
        return self.get('ProfitAndLoss', options)

    def profit_and_loss_detail(self, options=None):
        return self.get('ProfitAndLossDetail', options)

    def trial_balance(self, options=None):
        return self.get('TrialBalance', options)

    def cash_flow(self, options=None):
        return self.get('CashFlow', options)

    def inventory_valuation_summary(self, options=None):
        return self.get('InventoryValuationSummary', options)

    def customer_sales(self, options=None):
        return self.get('CustomerSales', options)

    def item_sales(self, options=None):
        return self.get('ItemSales', options)

    def customer_income(self, options=None):
        return self.get('CustomerIncome', options)

    def customer_balance(self, options=None):
        return self.get('CustomerBalance', options)

    def customer_balance_detail(self, options=None):
        return self.get('CustomerBalanceDetail', options)

    def aged_receivables(self, options=None):
        return self.get('AgedReceivables', options)

    def aged_receivable_detail(self, options=None):
        return self.get('AgedReceivableDetail', options)

    def vendor_balance(self, options=None):
        return self.get('VendorBalance', options)

    def vendor_balance_detail(self, options=None):
        return self.get('VendorBalanceDetail', options)

    def aged_payables(self, options=None):
        return self.get('AgedPayables', options)

    def aged_payable_detail(self, options=None):
        return self.get('AgedPayableDetail', options)

    def vendor_expenses(self, options=None):
        return self.get('VendorExpenses', options)

    def general_ledger_detail(self, options=None):
        return self.get('GeneralLedger', options)

    def department_sales(self, options=None):
        return self.get('DepartmentSales', options)

    def class_sales(self, options=None):
        return self.get('ClassSales', options)

    def account_list_detail(self, options=None):
        return self.get('AccountList', options)
