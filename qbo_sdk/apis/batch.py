"""
QuickBooks Online Batch API.
"""

import logging
from typing import List, Dict, Any

from .api_base import ApiBase
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)

MAX_BATCH_ITEMS = 25


class Batch(ApiBase):
    """
    Batch API.

    Runs several create, update, delete and query operations in one request.
    Each item carries a caller-chosen bId used to match BatchItemResponse
    entries, e.g.:

        {'bId': '1', 'operation': 'create', 'Vendor': {'DisplayName': 'Acme'}}
        {'bId': '2', 'Query': 'select * from Customer'}
    """

    def post(self, items: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Submit batch items.

        Returns:
            Body with the BatchItemResponse list.

        Raises:
            ValidationError: if more than 25 items are given.
        """
        if len(items) > MAX_BATCH_ITEMS:
            raise ValidationError(
                f"A batch may contain at most {MAX_BATCH_ITEMS} items, got {len(items)}"
            )

        logger.info(f"Submitting batch of {len(items)} items")
        return self._request('POST', '/batch', body={'BatchItemRequest': items})
