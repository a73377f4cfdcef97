import pytest

from qbo_sdk import QuickBooksOnlineSDK, API_BASE_SANDBOX, PAYMENTS_BASE_SANDBOX

REALM_ID = '4620816365031234'

CREDENTIALS = {
    'consumer_key': 'test-consumer-key',
    'consumer_secret': 'test-consumer-secret',
    'access_token': 'test-access-token',
    'access_token_secret': 'test-access-token-secret',
}


@pytest.fixture
def sdk():
    return QuickBooksOnlineSDK(realm_id=REALM_ID, retry_delay=0, **CREDENTIALS)


@pytest.fixture
def base_url():
    return f"{API_BASE_SANDBOX}/{REALM_ID}"


@pytest.fixture
def payments_url():
    return PAYMENTS_BASE_SANDBOX
