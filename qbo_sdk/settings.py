"""
Settings for the QuickBooks Online SDK.

All values come from environment variables (a local .env file is loaded
first), so credentials never live in code.
"""

import os
import logging.config

from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _get_bool(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


# =============================================================================
# QuickBooks Online Credentials (OAuth1)
# =============================================================================

QBO_CONSUMER_KEY = os.getenv('QBO_CONSUMER_KEY')
QBO_CONSUMER_SECRET = os.getenv('QBO_CONSUMER_SECRET')
QBO_ACCESS_TOKEN = os.getenv('QBO_ACCESS_TOKEN')
QBO_ACCESS_TOKEN_SECRET = os.getenv('QBO_ACCESS_TOKEN_SECRET')
QBO_REALM_ID = os.getenv('QBO_REALM_ID')
QBO_ENVIRONMENT = os.getenv('QBO_ENVIRONMENT', 'sandbox')


# =============================================================================
# API Configuration
# =============================================================================

# Unset means no minorversion parameter is sent
_minor_version = os.getenv('QBO_MINOR_VERSION')
QBO_MINOR_VERSION = int(_minor_version) if _minor_version else None

QBO_DEBUG = _get_bool('QBO_DEBUG')

QBO_REQUEST_TIMEOUT = int(os.getenv('QBO_REQUEST_TIMEOUT', '30'))

# Total attempts per request, including the first one
QBO_MAX_RETRIES = int(os.getenv('QBO_MAX_RETRIES', '3'))

# Base delay between attempts, in seconds
QBO_RETRY_DELAY = float(os.getenv('QBO_RETRY_DELAY', '1.0'))


# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} - {name} - {levelname} - {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'qbo_sdk': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'urllib3': {
            'level': 'WARNING',
        },
    },
}


def configure_logging():
    """Apply the LOGGING configuration."""
    logging.config.dictConfig(LOGGING)
