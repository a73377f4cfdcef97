"""
QuickBooks Online Change Data Capture (CDC) API.
"""

from datetime import date, datetime
from typing import Dict, Any, Sequence, Union

from .api_base import ApiBase


def format_changed_since(since: Union[str, date, datetime]) -> str:
    """Format a timestamp as QBO expects, e.g. '2012-07-20T22:25:51-07:00'."""
    if isinstance(since, datetime):
        if since.tzinfo is None:
            since = since.astimezone()
        return since.isoformat(timespec='seconds')
    if isinstance(since, date):
        return since.isoformat()
    return since


class ChangeDataCapture(ApiBase):
    """CDC API - entities changed since a point in time (up to 30 days back)."""

    def get(
        self,
        entities: Union[str, Sequence[str]],
        since: Union[str, date, datetime]
    ) -> Dict[str, Any]:
        """
        Fetch entities changed since a timestamp.

        Args:
            entities: Comma separated string or list of entity names
            since: Timestamp string, date or datetime

        Returns:
            Body with the CDCResponse list.
        """
        if not isinstance(entities, str):
            entities = ','.join(entities)

        params = {
            'entities': entities,
            'changedSince': format_changed_since(since),
        }
        return self._request('GET', '/cdc', params=params)
