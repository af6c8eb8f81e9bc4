import re
from enum import StrEnum


# Identifier counter
COUNTER_KEY = 'next.url.id'

# Fingerprint cache value meaning "the link this entry pointed to has expired"
EXPIRED_FINGERPRINT_SENTINEL = '{}'

# Tokens accepted at the router/encoder boundary
TOKEN_PATTERN = re.compile(r'[A-Za-z0-9]{1,11}')


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
