"""
QuickBooks Online Customers API.
"""

from typing import Optional, Generator, List, Dict, Any

from .mixins import CreateMixin, ReadMixin, UpdateMixin, QueryMixin, EntityApi


class Customers(CreateMixin, ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    """
    Customers API.

    QBO does not delete customers; deactivate them by updating
    Active to false instead.
    """

    ENTITY = 'Customer'

    def get_updated_since_generator(
        self,
        last_updated_time: Optional[str] = None
    ) -> Generator[List[Dict[str, Any]], None, None]:
        """
        Generator that yields batches of customers.

        Args:
            last_updated_time: ISO timestamp for incremental sync.
                              If None, fetches all customers.

        Yields:
            List of customer dictionaries per batch.
        """
        criteria = [{'field': 'asc', 'value': 'MetaData.LastUpdatedTime'}]
        if last_updated_time:
            criteria.insert(0, {
                'field': 'MetaData.LastUpdatedTime',
                'value': last_updated_time,
                'operator': '>'
            })

        yield from self.get_all_generator(criteria)
