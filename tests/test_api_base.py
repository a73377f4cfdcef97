import json
from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses

from qbo_sdk import QuickBooksOnlineSDK
from qbo_sdk.apis import ApiBase
from qbo_sdk.apis.api_base import USER_AGENT
from qbo_sdk.exceptions import (
    QBOSDKError,
    AuthenticationError,
    InvalidTokenError,
    APIError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ValidationError,
    InternalServerError,
    ServiceUnavailableError,
    ServerError,
)

from .conftest import CREDENTIALS, REALM_ID

FAULT_BODY = {
    'Fault': {
        'Error': [{
            'Message': 'Object Not Found',
            'Detail': 'Object Not Found : Something you are trying to use has been made inactive',
            'code': '610',
        }],
        'type': 'ValidationFault',
    },
    'time': '2024-01-15T10:30:00.000-08:00',
}


class TestUnwrap:
    def test_unwraps_entity_key(self):
        body = {'Customer': {'Id': '1', 'DisplayName': 'Acme'}, 'time': 'now'}
        assert ApiBase._unwrap(body, 'customer') == {'Id': '1', 'DisplayName': 'Acme'}

    def test_capitalizes_camel_case_names(self):
        body = {'JournalEntry': {'Id': '9'}}
        assert ApiBase._unwrap(body, 'journalEntry') == {'Id': '9'}

    def test_body_without_key_passes_through(self):
        body = {'QueryResponse': {}, 'time': 'now'}
        assert ApiBase._unwrap(body, 'Customer') is body

    def test_non_dict_passes_through(self):
        assert ApiBase._unwrap(b'%PDF-1.4', 'Invoice') == b'%PDF-1.4'
        assert ApiBase._unwrap(None, 'Invoice') is None


class TestRequestBuilder:
    @responses.activate
    def test_request_is_signed_and_routed_to_realm(self, sdk, base_url):
        responses.add(responses.GET, f"{base_url}/customer/1", json={'Customer': {'Id': '1'}})

        sdk.customers.get('1')

        request = responses.calls[0].request
        assert request.url == f"{base_url}/customer/1"
        assert request.headers['User-Agent'] == USER_AGENT
        assert request.headers['Accept'] == 'application/json'
        assert request.headers['Authorization'].startswith('OAuth ')
        assert 'oauth_consumer_key="test-consumer-key"' in request.headers['Authorization']
        assert 'oauth_token="test-access-token"' in request.headers['Authorization']
        assert 'Request-Id' not in request.headers

    @responses.activate
    def test_body_is_sent_as_json(self, sdk, base_url):
        responses.add(responses.POST, f"{base_url}/customer", json={'Customer': {'Id': '1'}})

        sdk.customers.create({'DisplayName': 'Acme'})

        request = responses.calls[0].request
        assert request.headers['Content-Type'] == 'application/json'
        assert json.loads(request.body) == {'DisplayName': 'Acme'}

    @responses.activate
    def test_minor_version_is_appended(self, base_url):
        sdk = QuickBooksOnlineSDK(realm_id=REALM_ID, minor_version=65, **CREDENTIALS)
        responses.add(responses.POST, f"{base_url}/customer", json={'Customer': {'Id': '1'}})

        sdk.customers.update({'Id': '1', 'SyncToken': '0'})

        query = parse_qs(urlsplit(responses.calls[0].request.url).query)
        assert query == {'operation': ['update'], 'minorversion': ['65']}

    @responses.activate
    def test_pdf_path_returns_raw_bytes(self, sdk, base_url):
        pdf = b'%PDF-1.4 binary \x00\xff'
        responses.add(
            responses.GET,
            f"{base_url}/invoice/5/pdf",
            body=pdf,
            content_type='application/pdf',
        )

        result = sdk.invoices.get_pdf('5')

        assert result == pdf
        assert responses.calls[0].request.headers['Accept'] == 'application/pdf'

    @responses.activate
    def test_empty_body_returns_none(self, sdk, base_url):
        responses.add(responses.GET, f"{base_url}/customer/1", body=b'', status=200)
        assert sdk.customers.get('1') is None

    @responses.activate
    def test_invalid_json_raises(self, sdk, base_url):
        responses.add(responses.GET, f"{base_url}/customer/1", body='<html>oops</html>', status=200)
        with pytest.raises(QBOSDKError, match='Invalid JSON'):
            sdk.customers.get('1')

    def test_unconfigured_resource_raises(self):
        with pytest.raises(QBOSDKError, match='Server URL not configured'):
            ApiBase()._request('GET', '/customer/1')

    def test_missing_credentials_raise(self):
        api = ApiBase()
        api.set_server_url('https://example.test/v3/company/')
        api.set_realm_id('1')
        with pytest.raises(AuthenticationError):
            api._request('GET', '/customer/1')


class TestErrorHandling:
    @pytest.mark.parametrize('status,exc_class', [
        (400, ValidationError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, APIError),
    ])
    @responses.activate
    def test_status_codes_map_to_exceptions(self, sdk, base_url, status, exc_class):
        responses.add(responses.GET, f"{base_url}/customer/1", json=FAULT_BODY, status=status)

        with pytest.raises(exc_class) as exc_info:
            sdk.customers.get('1')

        assert exc_info.value.status_code == status
        assert 'Something you are trying to use has been made inactive' in str(exc_info.value)
        assert len(responses.calls) == 1

    @responses.activate
    def test_unauthorized_raises_invalid_token(self, sdk, base_url):
        responses.add(responses.GET, f"{base_url}/customer/1", body='Unauthorized', status=401)

        with pytest.raises(InvalidTokenError, match='Unauthorized'):
            sdk.customers.get('1')

    @responses.activate
    def test_fault_without_detail_uses_message(self, sdk, base_url):
        body = {'Fault': {'Error': [{'Message': 'Duplicate Name Exists Error'}]}}
        responses.add(responses.POST, f"{base_url}/customer", json=body, status=400)

        with pytest.raises(ValidationError, match='Duplicate Name Exists Error'):
            sdk.customers.create({'DisplayName': 'Acme'})

    @responses.activate
    def test_get_server_errors_are_retried(self, sdk, base_url):
        responses.add(responses.GET, f"{base_url}/customer/1", json=FAULT_BODY, status=500)

        with pytest.raises(InternalServerError):
            sdk.customers.get('1')

        assert len(responses.calls) == 3

    @responses.activate
    def test_get_recovers_after_server_error(self, sdk, base_url):
        responses.add(responses.GET, f"{base_url}/customer/1", status=503)
        responses.add(responses.GET, f"{base_url}/customer/1", json={'Customer': {'Id': '1'}})

        assert sdk.customers.get('1') == {'Id': '1'}
        assert len(responses.calls) == 2

    @responses.activate
    def test_post_server_errors_are_not_retried(self, sdk, base_url):
        responses.add(responses.POST, f"{base_url}/customer", status=503)

        with pytest.raises(ServiceUnavailableError):
            sdk.customers.create({'DisplayName': 'Acme'})

        assert len(responses.calls) == 1

    @responses.activate
    def test_other_5xx_raise_server_error(self, sdk, base_url):
        responses.add(responses.POST, f"{base_url}/customer", status=502)

        with pytest.raises(ServerError) as exc_info:
            sdk.customers.create({'DisplayName': 'Acme'})

        assert exc_info.value.status_code == 502

    @responses.activate
    def test_rate_limited_post_is_retried(self, sdk, base_url):
        responses.add(responses.POST, f"{base_url}/customer", status=429, headers={'Retry-After': '0'})
        responses.add(responses.POST, f"{base_url}/customer", json={'Customer': {'Id': '1'}})

        assert sdk.customers.create({'DisplayName': 'Acme'}) == {'Id': '1'}
        assert len(responses.calls) == 2

    @responses.activate
    def test_rate_limit_exhausts_retries(self, sdk, base_url):
        responses.add(responses.GET, f"{base_url}/customer/1", status=429)

        with pytest.raises(RateLimitError):
            sdk.customers.get('1')

        assert len(responses.calls) == 3

    @responses.activate
    def test_network_errors_on_get_are_retried(self, sdk, base_url):
        responses.add(
            responses.GET,
            f"{base_url}/customer/1",
            body=requests.exceptions.ConnectionError('connection reset'),
        )

        with pytest.raises(QBOSDKError, match='Network error'):
            sdk.customers.get('1')

        assert len(responses.calls) == 3

    @responses.activate
    def test_network_errors_on_post_are_not_retried(self, sdk, base_url):
        responses.add(
            responses.POST,
            f"{base_url}/customer",
            body=requests.exceptions.ConnectionError('connection reset'),
        )

        with pytest.raises(QBOSDKError, match='Network error'):
            sdk.customers.create({'DisplayName': 'Acme'})

        assert len(responses.calls) == 1

    @responses.activate
    def test_max_retries_of_one_disables_retry(self, base_url):
        sdk = QuickBooksOnlineSDK(realm_id=REALM_ID, max_retries=1, **CREDENTIALS)
        responses.add(responses.GET, f"{base_url}/customer/1", status=500)

        with pytest.raises(InternalServerError):
            sdk.customers.get('1')

        assert len(responses.calls) == 1
