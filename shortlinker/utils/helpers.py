"""Helper utilities for AWS lambda functions.

Functions:
    base_url() -> str
        Extract correct public base URL from API Gateway event
    get_short_url() -> str
        Get string representation of short URL for a given token
    require_token() -> str
        Ensure a shortlink token was provided
    is_routable_token() -> bool
        Check a token against the redirect route pattern
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler) -> Callable
        Decorator: Turn unexpected handler exceptions into HTTP 500 responses

Example:
    Typical usage inside a Lambda handler:

        >>> from shortlinker.utils.helpers import base_url
        >>> event = {
        ...     "requestContext": {
        ...         "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
        ...         "stage": "Prod"
        ...     }
        ... }
        >>> base_url(event)
        'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'

        >>> base_url({})
        'http://localhost:3000'
"""

import os
import logging
import functools
from collections.abc import Callable

from shortlinker.constants import TOKEN_PATTERN
from shortlinker.exceptions import InvalidTokenError, MissingEnvironmentVariableError
from shortlinker.types import LambdaEvent, LambdaContext, LambdaResponse
from shortlinker.utils.runtime import running_locally
from shortlinker.utils.responses import response_500


logger = logging.getLogger(__name__)


def base_url(event: LambdaEvent) -> str:
    """Extract public base URL from API Gateway event

    Works seamlessly with both custom and default AWS API Gateway domains.
    If a custom domain is configured, the stage name is omitted.
    If using the default AWS execute-api domain, the stage name is included.

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: Base URL, e.g.:
             - "https://sho.rt"
             - "https://abc123.execute-api.us-east-1.amazonaws.com/Prod"
    """
    request_context = event.get('requestContext', {})
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain and 'execute-api' not in domain:
        # If the domain is a custom domain (no execute-api), skip stage
        return f'https://{domain}'
    elif domain:
        # Otherwise include the stage (for AWS default domains)
        return f'https://{domain}/{stage}'
    else:
        # Fallback: local invocation (SAM CLI, tests, etc.)
        return 'http://localhost:3000'


def get_short_url(token: str, event: LambdaEvent) -> str:
    """Get string representation of shortened URL

    Args:
        token (str): shortlink token
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: short url string representation
    """
    return f'{base_url(event).rstrip("/")}/{token}'


def require_token(token: str | None) -> str:
    """Ensure a shortlink token was provided in the request.

    Raises:
        InvalidTokenError: If the token is missing, empty or not a string.

    Example:
        >>> require_token('doesnotexist')
        'doesnotexist'
    """
    if not isinstance(token, str) or not token:
        raise InvalidTokenError("Missing 'shortlink' in request.")
    return token


def is_routable_token(token: str) -> bool:
    """Return True if the token matches the redirect route: 1 to 11 characters of [A-Za-z0-9].

    Longer or non-alphanumeric paths never name a shortlink.
    """
    return TOKEN_PATTERN.fullmatch(token) is not None


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable[[LambdaEvent, LambdaContext], LambdaResponse]) -> Callable:
    """Decorator: respond with HTTP 500 when a lambda handler raises unexpectedly.

    When running locally the original exception is re-raised so the
    traceback shows up in SAM.
    """

    @functools.wraps(handler)
    def wrapper(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
        try:
            return handler(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled exception in lambda handler. Responding with 500.')
            return response_500()

    return wrapper
