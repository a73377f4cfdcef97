"""
QuickBooks Online Invoices API.
"""

from typing import Optional, Generator, List, Dict, Any

from .mixins import (
    CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, PdfMixin, EntityApi
)


class Invoices(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, PdfMixin, EntityApi):
    """Invoices API, including PDF download and e-mail."""

    ENTITY = 'Invoice'

    def get_updated_since_generator(
        self,
        last_updated_time: Optional[str] = None
    ) -> Generator[List[Dict[str, Any]], None, None]:
        """
        Generator that yields batches of invoices.

        Args:
            last_updated_time: ISO timestamp for incremental sync.
                              If None, fetches all invoices.

        Yields:
            List of invoice dictionaries per batch.
        """
        criteria = [{'field': 'asc', 'value': 'MetaData.LastUpdatedTime'}]
        if last_updated_time:
            # Incremental - only records updated after the checkpoint
            criteria.insert(0, {
                'field': 'MetaData.LastUpdatedTime',
                'value': last_updated_time,
                'operator': '>'
            })

        yield from self.get_all_generator(criteria)
