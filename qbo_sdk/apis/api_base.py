"""
Base API class for QuickBooks Online SDK.

Provides core HTTP request handling, CRUD dispatch, response unwrapping
and pagination for QBO queries.
"""

import re
import time
import uuid
import logging
from collections.abc import Mapping
from typing import Optional, Dict, Any, Generator, List

import requests
from requests_oauthlib import OAuth1

from ..criteria import build_query, capitalize, paginate_criteria, report_params
from ..exceptions import (
    QBOSDKError,
    AuthenticationError,
    InvalidTokenError,
    APIError,
    ForbiddenError,
    RateLimitError,
    NotFoundError,
    ValidationError,
    ServerError,
    InternalServerError,
    ServiceUnavailableError
)
from ..version import __version__

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 1000

USER_AGENT = f'qbo-sdk: version {__version__}'

# Charges and card tokens live on the Payments API, not the accounting API
PAYMENT_PATH = re.compile(r'^/(charge|tokens)')


def _is_blank(value) -> bool:
    return value is None or value == ''


class ApiBase:
    """
    Base class for QBO API resources.

    Handles:
    - URL building for the accounting and payments endpoints
    - OAuth1 signed HTTP requests
    - Error handling and retries
    - Entity CRUD, queries, reports and pagination
    """

    def __init__(self):
        self._auth: Optional[OAuth1] = None
        self._server_url: Optional[str] = None
        self._payment_url: Optional[str] = None
        self._realm_id: Optional[str] = None
        self._minor_version: Optional[int] = None
        self._timeout: float = 30
        self._max_retries: int = 3
        self._retry_delay: float = 1.0

    def set_credentials(
        self,
        consumer_key: str,
        consumer_secret: str,
        access_token: str,
        access_token_secret: str
    ):
        """Set the OAuth1 credentials used to sign requests."""
        self._auth = OAuth1(
            consumer_key,
            client_secret=consumer_secret,
            resource_owner_key=access_token,
            resource_owner_secret=access_token_secret
        )

    def set_server_url(self, url: str):
        """Set the accounting API base URL (without realm)."""
        self._server_url = url.rstrip('/')

    def set_payment_url(self, url: str):
        """Set the payments API base URL."""
        self._payment_url = url.rstrip('/')

    def set_realm_id(self, realm_id: str):
        """Set the company/realm ID."""
        self._realm_id = realm_id

    def set_minor_version(self, version: Optional[int]):
        """Set the QBO API minor version. None disables the parameter."""
        self._minor_version = version

    def set_timeout(self, timeout: float):
        self._timeout = timeout

    def set_retry_policy(self, max_retries: int, retry_delay: float):
        """Set total attempts per request and the base delay between them."""
        self._max_retries = max(1, max_retries)
        self._retry_delay = retry_delay

    def _is_payment_path(self, path: str) -> bool:
        return bool(PAYMENT_PATH.match(path))

    def _get_headers(self, path: str, has_body: bool) -> Dict[str, str]:
        """Get headers for API requests."""
        if self._auth is None:
            raise AuthenticationError("OAuth credentials not set")

        headers = {
            'User-Agent': USER_AGENT,
            'Accept': 'application/json',
        }
        if has_body:
            headers['Content-Type'] = 'application/json'

        if self._is_payment_path(path):
            headers['Request-Id'] = str(uuid.uuid4())
            headers['company_id'] = str(self._realm_id)

        if path.endswith('pdf'):
            headers['Accept'] = 'application/pdf'

        return headers

    def _build_url(self, path: str) -> str:
        """Build full URL for a path such as '/customer/1'."""
        if self._is_payment_path(path):
            if not self._payment_url:
                raise QBOSDKError("Payments URL not configured")
            return f"{self._payment_url}{path}"

        if not self._server_url:
            raise QBOSDKError("Server URL not configured")
        if not self._realm_id:
            raise QBOSDKError("Realm ID not configured")

        return f"{self._server_url}/{self._realm_id}{path}"

    def _parse_error_detail(self, response: requests.Response) -> str:
        """Extract the error message from a QBO fault or payments error body."""
        try:
            error_json = response.json()
        except ValueError:
            return response.text[:500] if response.text else ""

        if not isinstance(error_json, dict):
            return response.text[:500]

        # Accounting API: {"Fault": {"Error": [{"Message": ..., "Detail": ...}]}}
        if 'Fault' in error_json:
            errors = error_json['Fault'].get('Error', [])
            if errors:
                return errors[0].get('Detail', errors[0].get('Message', ''))

        # Payments API: {"errors": [{"message": ..., "detail": ...}]}
        errors = error_json.get('errors')
        if errors:
            return errors[0].get('detail') or errors[0].get('message', '')

        return response.text[:500]

    def _handle_response(self, response: requests.Response, raw: bool = False) -> Any:
        """Handle API response and raise appropriate errors."""
        status_code = response.status_code

        if 200 <= status_code < 300:
            if raw:
                return response.content
            if not response.content:
                return None
            try:
                data = response.json()
            except ValueError:
                raise QBOSDKError(
                    f"Invalid JSON in response: {response.text[:500]}",
                    response=response.text
                )
            logger.debug(f"Response body: {data}")
            return data

        error_detail = self._parse_error_detail(response)
        kwargs = {'status_code': status_code, 'response': response.text}

        if status_code == 401:
            raise InvalidTokenError(f"Authentication failed: {error_detail}", response=response.text)
        elif status_code == 403:
            raise ForbiddenError(f"Access forbidden: {error_detail}", **kwargs)
        elif status_code == 404:
            raise NotFoundError(f"Resource not found: {error_detail}", **kwargs)
        elif status_code == 400:
            raise ValidationError(f"Validation error: {error_detail}", **kwargs)
        elif status_code == 429:
            retry_after = response.headers.get('Retry-After')
            raise RateLimitError(
                "Rate limit exceeded",
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
                **kwargs
            )
        elif status_code == 500:
            raise InternalServerError(f"Server error ({status_code}): {error_detail}", **kwargs)
        elif status_code == 503:
            raise ServiceUnavailableError(f"Server error ({status_code}): {error_detail}", **kwargs)
        elif status_code > 500:
            raise ServerError(f"Server error ({status_code}): {error_detail}", **kwargs)
        else:
            raise APIError(f"API error ({status_code}): {error_detail}", **kwargs)

    def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Make a signed HTTP request with retry logic.

        Rate limited requests are retried for every method; server and
        network errors only for GET, since a POST may already have been applied.

        Args:
            method: HTTP method
            path: Path relative to the realm (or payments) base, e.g. '/customer/1'
            body: JSON-serializable request body
            params: Extra query parameters

        Returns:
            Parsed JSON body, raw bytes for PDF paths, or None for an empty body
        """
        method = method.upper()
        url = self._build_url(path)
        headers = self._get_headers(path, body is not None)

        params = dict(params or {})
        if self._minor_version and not self._is_payment_path(path):
            params['minorversion'] = self._minor_version

        retry_transient = method == 'GET'
        last_exception = None

        for attempt in range(self._max_retries):
            logger.debug(f"Invoking endpoint: {method} {url} params={params}")
            if body is not None:
                logger.debug(f"Request body: {body}")

            try:
                response = requests.request(
                    method=method,
                    url=url,
                    params=params or None,
                    headers=headers,
                    json=body,
                    auth=self._auth,
                    timeout=self._timeout
                )
                return self._handle_response(response, raw=path.endswith('pdf'))

            except RateLimitError as e:
                last_exception = e
                if attempt < self._max_retries - 1:
                    delay = e.retry_after if e.retry_after is not None else self._retry_delay * (2 ** attempt)
                    logger.warning(f"Rate limited, waiting {delay}s (attempt {attempt + 1})")
                    time.sleep(delay)

            except ServerError as e:
                if not retry_transient:
                    raise
                last_exception = e
                if attempt < self._max_retries - 1:
                    delay = self._retry_delay * (attempt + 1)
                    logger.warning(f"Server error, retrying in {delay}s: {e}")
                    time.sleep(delay)

            except requests.RequestException as e:
                last_exception = QBOSDKError(f"Network error: {e}")
                if not retry_transient:
                    raise last_exception from e
                if attempt < self._max_retries - 1:
                    delay = self._retry_delay * (attempt + 1)
                    logger.warning(f"Network error, retrying in {delay}s: {e}")
                    time.sleep(delay)

        raise last_exception or QBOSDKError("Request failed after retries")

    @staticmethod
    def _unwrap(data: Any, entity_name: str) -> Any:
        """
        Strip the entity envelope from a response.

        QBO returns {"Customer": {...}, "time": ...}; callers get the inner
        entity. Bodies without the key (or non-dict bodies) pass through.
        """
        if isinstance(data, Mapping):
            return data.get(capitalize(entity_name)) or data
        return data

    @staticmethod
    def _entity_path(entity_name: str) -> str:
        return f"/{entity_name.lower()}"

    def _create(self, entity_name: str, entity: Dict[str, Any]) -> Any:
        """Create an entity."""
        data = self._request('POST', self._entity_path(entity_name), body=entity)
        return self._unwrap(data, entity_name)

    def _read(self, entity_name: str, entity_id) -> Any:
        """Read an entity by ID."""
        data = self._request('GET', f"{self._entity_path(entity_name)}/{entity_id}")
        return self._unwrap(data, entity_name)

    def _update(self, entity_name: str, entity: Dict[str, Any]) -> Any:
        """
        Full update of an entity.

        Raises:
            ValidationError: if the entity lacks Id or SyncToken. No request is made.
        """
        if (
            not isinstance(entity, Mapping)
            or _is_blank(entity.get('Id'))
            or _is_blank(entity.get('SyncToken'))
        ):
            raise ValidationError(
                f"{capitalize(entity_name)} must contain Id and SyncToken fields: {entity!r}"
            )

        data = self._request(
            'POST', f"{self._entity_path(entity_name)}?operation=update", body=entity
        )
        return self._unwrap(data, entity_name)

    def _delete(self, entity_name: str, id_or_entity) -> Any:
        """
        Delete an entity.

        QBO requires the full entity (Id and SyncToken) in the delete body, so
        a bare ID is read first. The response body is returned as is, with the
        entity envelope and server time.
        """
        if isinstance(id_or_entity, Mapping):
            entity = id_or_entity
        else:
            logger.debug(f"Reading {entity_name} {id_or_entity} before delete")
            entity = self._read(entity_name, id_or_entity)

        return self._request(
            'POST', f"{self._entity_path(entity_name)}?operation=delete", body=entity
        )

    def _query(self, entity_name: str, criteria=None, count: bool = False) -> Dict[str, Any]:
        """Execute a QBO query and return the full response body."""
        query = build_query(entity_name, criteria, count=count)
        return self._request('GET', f"/query?query={query}")

    def _report(self, report_type: str, options=None) -> Dict[str, Any]:
        """Fetch a report."""
        return self._request('GET', f"/reports/{report_type}", params=report_params(options))

    def _query_generator(
        self,
        entity_name: str,
        criteria=None,
        page_size: int = DEFAULT_PAGE_SIZE
    ) -> Generator[List[Dict[str, Any]], None, None]:
        """
        Generator that yields paginated query results.

        Args:
            entity_name: The entity name (e.g., 'Customer', 'Invoice')
            criteria: Query criteria; any limit/offset is replaced per page
            page_size: Number of records per page

        Yields:
            List of entity dictionaries per page
        """
        if page_size < 1:
            raise ValidationError(f"page_size must be at least 1, got {page_size}")

        page_size = min(page_size, MAX_PAGE_SIZE)
        start_position = 1

        while True:
            page_criteria = paginate_criteria(criteria, start_position, page_size)
            logger.debug(f"Querying {entity_name} from position {start_position}")

            response = self._query(entity_name, page_criteria) or {}
            query_response = response.get('QueryResponse', {})

            entities = query_response.get(entity_name, [])

            if not entities:
                break

            yield entities

            if len(entities) < page_size:
                break

            start_position += page_size
