"""
Operation mixins for QBO entity resources.

Each resource class names its entity in ENTITY and mixes in the operations
QBO supports for it.
"""

from typing import Optional, Generator, List, Dict, Any

from .api_base import ApiBase, DEFAULT_PAGE_SIZE


class EntityApi(ApiBase):
    """Base for resources bound to a single QBO entity type."""

    ENTITY: str = None


class CreateMixin:

    def create(self, entity: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create the entity in QuickBooks.

        Returns:
            The persisted entity, including Id and SyncToken.
        """
        return self._create(self.ENTITY, entity)


class ReadMixin:

    def get(self, entity_id) -> Dict[str, Any]:
        """Retrieve the entity by ID."""
        return self._read(self.ENTITY, entity_id)


class UpdateMixin:

    def update(self, entity: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update the entity. It must include Id and SyncToken.

        Raises:
            ValidationError: if Id or SyncToken is missing.
        """
        return self._update(self.ENTITY, entity)


class DeleteMixin:

    def delete(self, id_or_entity) -> Dict[str, Any]:
        """
        Delete the entity.

        Args:
            id_or_entity: The persisted entity, or just its ID (it is read first)
        """
        return self._delete(self.ENTITY, id_or_entity)


class QueryMixin:

    def find(self, criteria=None) -> Dict[str, Any]:
        """
        Find entities, optionally matching criteria.

        Args:
            criteria: String, dict of field/value pairs, or list of
                      {'field', 'value', 'operator'} dicts. The keys limit,
                      offset, asc, desc and count are options, not filters.

        Returns:
            The QueryResponse body.
        """
        return self._query(self.ENTITY, criteria)

    def count(self, criteria=None) -> int:
        """Count entities matching criteria."""
        data = self._query(self.ENTITY, criteria, count=True) or {}
        return data.get('QueryResponse', {}).get('totalCount', 0)

    def get_all_generator(
        self,
        criteria=None,
        page_size: int = DEFAULT_PAGE_SIZE
    ) -> Generator[List[Dict[str, Any]], None, None]:
        """
        Generator that yields batches of entities.

        Yields:
            List of entity dictionaries per batch.
        """
        yield from self._query_generator(self.ENTITY, criteria, page_size)


class SendPdfMixin:

    def send_pdf(self, entity_id, send_to: Optional[str] = None) -> Dict[str, Any]:
        """
        E-mail the entity PDF.

        Args:
            entity_id: ID of the persisted entity
            send_to: Recipient address. Defaults to the entity's BillEmail.
        """
        params = {'sendTo': send_to} if send_to else None
        data = self._request(
            'POST', f"{self._entity_path(self.ENTITY)}/{entity_id}/send", params=params
        )
        return self._unwrap(data, self.ENTITY)


class PdfMixin(SendPdfMixin):

    def get_pdf(self, entity_id) -> bytes:
        """Download the entity as a PDF."""
        return self._request('GET', f"{self._entity_path(self.ENTITY)}/{entity_id}/pdf")
