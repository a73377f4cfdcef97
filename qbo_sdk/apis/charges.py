"""
QuickBooks Payments Charges API.

These calls go to the payments endpoint rather than the accounting API.
Amounts are strings or decimals in the charge currency.
"""

from typing import Dict, Any

from .api_base import ApiBase


class Charges(ApiBase):
    """Credit card charges, captures and refunds."""

    def card_token(self, card: Dict[str, Any]) -> Dict[str, Any]:
        """Exchange card details for a single-use token."""
        return self._request('POST', '/tokens', body=card)

    def create(self, charge: Dict[str, Any]) -> Dict[str, Any]:
        """
        Process a charge using card details or a token.

        Set capture to false in the charge to only authorize the funds.
        """
        return self._request('POST', '/charges', body=charge)

    def get(self, charge_id: str) -> Dict[str, Any]:
        return self._request('GET', f'/charges/{charge_id}')

    def capture(self, charge_id: str, capture: Dict[str, Any]) -> Dict[str, Any]:
        """Capture funds for a charge that was only authorized."""
        return self._request('POST', f'/charges/{charge_id}/capture', body=capture)

    def refund(self, charge_id: str, refund: Dict[str, Any]) -> Dict[str, Any]:
        """Refund a charge fully or partially."""
        return self._request('POST', f'/charges/{charge_id}/refunds', body=refund)

    def get_refund(self, charge_id: str, refund_id: str) -> Dict[str, Any]:
        return self._request('GET', f'/charges/{charge_id}/refunds/{refund_id}')
