"""
QuickBooks Online SDK.

Client for the QuickBooks Online V3 accounting API and the QuickBooks
Payments API, authenticated with OAuth1.
"""

import logging
from typing import Optional

from requests_oauthlib import OAuth1Session
from requests_oauthlib.oauth1_session import TokenMissing, TokenRequestDenied

from .apis import (
    ApiBase,
    Accounts,
    Attachables,
    Batch,
    BillPayments,
    Bills,
    Budgets,
    ChangeDataCapture,
    Charges,
    Classes,
    CompanyInfo,
    CreditMemos,
    Customers,
    Departments,
    Employees,
    Estimates,
    Invoices,
    Items,
    JournalEntries,
    PaymentMethods,
    Payments,
    Preferences,
    PurchaseOrders,
    Purchases,
    RefundReceipts,
    Reports,
    SalesReceipts,
    TaxAgencies,
    TaxCodes,
    TaxRates,
    TaxServices,
    Terms,
    TimeActivities,
    VendorCredits,
    Vendors,
)
from .criteria import criteria_to_string, build_query
from .exceptions import (
    QBOSDKError,
    ConfigurationError,
    AuthenticationError,
    InvalidGrantError,
    InvalidTokenError,
    APIError,
    ValidationError,
    NotFoundError,
    RateLimitError,
    ServerError
)
from .version import __version__

logger = logging.getLogger(__name__)

REQUEST_TOKEN_URL = 'https://oauth.intuit.com/oauth/v1/get_request_token'
ACCESS_TOKEN_URL = 'https://oauth.intuit.com/oauth/v1/get_access_token'
APP_CENTER_BASE = 'https://appcenter.intuit.com'
APP_CENTER_URL = f'{APP_CENTER_BASE}/Connect/Begin?oauth_token='

API_BASE_SANDBOX = 'https://sandbox-quickbooks.api.intuit.com/v3/company'
API_BASE_PRODUCTION = 'https://quickbooks.api.intuit.com/v3/company'

PAYMENTS_BASE_SANDBOX = 'https://sandbox.api.intuit.com/quickbooks/v4/payments'
PAYMENTS_BASE_PRODUCTION = 'https://api.intuit.com/quickbooks/v4/payments'

ENVIRONMENTS = ('sandbox', 'production')


def get_request_token(consumer_key: str, consumer_secret: str, callback_uri: str) -> dict:
    """
    First leg of the OAuth1 handshake.

    Returns:
        Dict with 'oauth_token' and 'oauth_token_secret'
    """
    session = OAuth1Session(
        consumer_key,
        client_secret=consumer_secret,
        callback_uri=callback_uri
    )
    try:
        return session.fetch_request_token(REQUEST_TOKEN_URL)
    except (TokenRequestDenied, TokenMissing) as e:
        raise AuthenticationError(f"Request token failed: {e}")


def get_authorize_url(oauth_token: str) -> str:
    """URL the user is sent to in order to authorize the app."""
    return f'{APP_CENTER_URL}{oauth_token}'


def get_access_token(
    consumer_key: str,
    consumer_secret: str,
    oauth_token: str,
    oauth_token_secret: str,
    verifier: str
) -> dict:
    """
    Exchange an authorized request token for an access token.

    Returns:
        Dict with 'oauth_token' and 'oauth_token_secret'
    """
    session = OAuth1Session(
        consumer_key,
        client_secret=consumer_secret,
        resource_owner_key=oauth_token,
        resource_owner_secret=oauth_token_secret,
        verifier=verifier
    )
    try:
        return session.fetch_access_token(ACCESS_TOKEN_URL)
    except TokenRequestDenied as e:
        raise InvalidGrantError(f"Access token exchange failed: {e}")
    except TokenMissing as e:
        raise AuthenticationError(f"Access token exchange failed: {e}")


class QuickBooksOnlineSDK:
    """
    QuickBooks Online SDK client.

    One instance per connected company. Provides access to API resources:

        sdk = QuickBooksOnlineSDK(key, secret, token, token_secret, realm_id)
        customer = sdk.customers.create({'DisplayName': 'Acme'})
        sdk.invoices.find({'CustomerRef': customer['Id'], 'limit': 10})
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        access_token: str,
        access_token_secret: str,
        realm_id: str,
        environment: str = 'sandbox',
        debug: bool = False,
        minor_version: Optional[int] = None,
        timeout: float = 30,
        max_retries: int = 3,
        retry_delay: float = 1.0
    ):
        """
        Initialize the SDK.

        Args:
            consumer_key: OAuth consumer (application) key
            consumer_secret: OAuth consumer secret
            access_token: User-specific OAuth access token
            access_token_secret: User-specific OAuth access token secret
            realm_id: QBO company/realm ID
            environment: 'sandbox' or 'production'
            debug: Log every request and response at DEBUG level
            minor_version: QBO API minor version (not sent when None)
            timeout: HTTP timeout in seconds
            max_retries: Total attempts per request
            retry_delay: Base delay between attempts in seconds
        """
        if environment not in ENVIRONMENTS:
            raise ConfigurationError(
                f"Unknown environment {environment!r}, expected one of {ENVIRONMENTS}"
            )

        self._realm_id = realm_id
        self._environment = environment

        if environment == 'production':
            self._base_url = API_BASE_PRODUCTION
            self._payment_url = PAYMENTS_BASE_PRODUCTION
        else:
            self._base_url = API_BASE_SANDBOX
            self._payment_url = PAYMENTS_BASE_SANDBOX

        if debug:
            logging.getLogger('qbo_sdk').setLevel(logging.DEBUG)

        self.accounts = Accounts()
        self.attachables = Attachables()
        self.bills = Bills()
        self.bill_payments = BillPayments()
        self.budgets = Budgets()
        self.classes = Classes()
        self.company_info = CompanyInfo()
        self.credit_memos = CreditMemos()
        self.customers = Customers()
        self.departments = Departments()
        self.employees = Employees()
        self.estimates = Estimates()
        self.invoices = Invoices()
        self.items = Items()
        self.journal_entries = JournalEntries()
        self.payments = Payments()
        self.payment_methods = PaymentMethods()
        self.preferences = Preferences()
        self.purchases = Purchases()
        self.purchase_orders = PurchaseOrders()
        self.refund_receipts = RefundReceipts()
        self.sales_receipts = SalesReceipts()
        self.tax_agencies = TaxAgencies()
        self.tax_codes = TaxCodes()
        self.tax_rates = TaxRates()
        self.tax_services = TaxServices()
        self.terms = Terms()
        self.time_activities = TimeActivities()
        self.vendors = Vendors()
        self.vendor_credits = VendorCredits()

        self.reports = Reports()
        self.batch = Batch()
        self.cdc = ChangeDataCapture()
        self.charges = Charges()

        self._configure_apis(
            consumer_key,
            consumer_secret,
            access_token,
            access_token_secret,
            minor_version,
            timeout,
            max_retries,
            retry_delay
        )

    @classmethod
    def from_settings(cls, **overrides) -> 'QuickBooksOnlineSDK':
        """
        Build a client from qbo_sdk.settings (environment variables).

        Keyword arguments override individual settings.
        """
        from . import settings

        config = {
            'consumer_key': settings.QBO_CONSUMER_KEY,
            'consumer_secret': settings.QBO_CONSUMER_SECRET,
            'access_token': settings.QBO_ACCESS_TOKEN,
            'access_token_secret': settings.QBO_ACCESS_TOKEN_SECRET,
            'realm_id': settings.QBO_REALM_ID,
            'environment': settings.QBO_ENVIRONMENT,
            'debug': settings.QBO_DEBUG,
            'minor_version': settings.QBO_MINOR_VERSION,
            'timeout': settings.QBO_REQUEST_TIMEOUT,
            'max_retries': settings.QBO_MAX_RETRIES,
            'retry_delay': settings.QBO_RETRY_DELAY,
        }
        config.update(overrides)

        required = ('consumer_key', 'consumer_secret', 'access_token', 'access_token_secret', 'realm_id')
        missing = [name for name in required if not config.get(name)]
        if missing:
            raise ConfigurationError(f"QBO credentials not configured: {', '.join(missing)}")

        return cls(**config)

    @property
    def realm_id(self) -> str:
        return self._realm_id

    @property
    def environment(self) -> str:
        return self._environment

    def _apis(self):
        return [api for api in vars(self).values() if isinstance(api, ApiBase)]

    def _configure_apis(
        self,
        consumer_key,
        consumer_secret,
        access_token,
        access_token_secret,
        minor_version,
        timeout,
        max_retries,
        retry_delay
    ):
        """Configure all API resources."""
        for api in self._apis():
            api.set_server_url(self._base_url)
            api.set_payment_url(self._payment_url)
            api.set_realm_id(self._realm_id)
            api.set_credentials(consumer_key, consumer_secret, access_token, access_token_secret)
            api.set_minor_version(minor_version)
            api.set_timeout(timeout)
            api.set_retry_policy(max_retries, retry_delay)

        logger.debug(f"Configured QBO client for realm_id={self._realm_id} ({self._environment})")


__all__ = [
    'QuickBooksOnlineSDK',
    'get_request_token',
    'get_authorize_url',
    'get_access_token',
    'criteria_to_string',
    'build_query',
    'QBOSDKError',
    'ConfigurationError',
    'AuthenticationError',
    'InvalidGrantError',
    'InvalidTokenError',
    'APIError',
    'ValidationError',
    'NotFoundError',
    'RateLimitError',
    'ServerError',
    '__version__',
]
