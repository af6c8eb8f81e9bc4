import logging
from typing import Any

from shortlinker.dao.redis import ShortlinkRedisDAO
from shortlinker.dao.exceptions import DataStoreError, ShortlinkNotFoundError
from shortlinker.exceptions import ConfigurationError, InvalidTokenError
from shortlinker.types import LambdaEvent, LambdaResponse
from shortlinker.utils import load_config, redis_config, require_token, is_routable_token, get_short_url, app_prefix
from shortlinker.utils.helpers import guarantee_500_response
from shortlinker.utils.responses import response_307, response_500, response_error
from shortlinker.lambdas.constants import (
    INVALID_SHORTLINK,
    SHORTLINK_NOT_FOUND,
    REDIRECT_SUCCESS,
    DATA_STORE_UNAVAILABLE,
    CONFIGURATION_ERROR,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: Any) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect shortlinks

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract shortlink token from request path
    - Step 2: Resolve the token to its original URL
    - Step 3: Redirect client to the original URL

    HTTP responses:
        307: Successful redirect
            headers:
                Location: original URL
        400: Missing shortlink in path parameters
        404: Unknown (or expired) shortlink, or a path which is not a shortlink
        500: Internal server error
        503: Data store unavailable

    Args:
        event (dict):
            API Gateway event payload containing the shortlink path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        dict:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'shortlink': '1'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        307
        >>> response['headers']['Location']
        'https://example.com'
    """
    # 0- Get application's config
    try:
        dao_config = redis_config(load_config('redirect_url'))
    except ConfigurationError:
        logger.exception('Failed to load AppConfig for redirect URL function. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500()

    # 1- Extract shortlink token from request's path
    path_parameters = event.get('pathParameters') or {}
    try:
        token = require_token(path_parameters.get('shortlink'))
    except InvalidTokenError as e:
        logger.info('Missing "shortlink" in path. Responding with 400.', extra={'event': INVALID_SHORTLINK})
        return response_error(e)
    if not is_routable_token(token):
        logger.info('Path is not a shortlink. Responding with 404.', extra={'shortlink': token, 'event': SHORTLINK_NOT_FOUND})
        return response_error(ShortlinkNotFoundError(f"Unknown short URL '{token}'."))
    logger.debug('Client requested short URL %s.', get_short_url(token, event))

    # 2- Resolve the shortlink
    try:
        dao = ShortlinkRedisDAO(**dao_config, prefix=app_prefix())
        url = dao.unshorten(token=token)
    except ShortlinkNotFoundError as e:
        logger.info('Shortlink not found. Responding with 404.', extra={'shortlink': token, 'event': SHORTLINK_NOT_FOUND})
        return response_error(e)
    except DataStoreError as e:
        logger.error(
            'Data store unavailable. Responding with 503.',
            extra={'operation': e.operation, 'key': e.key, 'event': DATA_STORE_UNAVAILABLE},
        )
        return response_error(e)

    # 3- Redirect client to the original URL
    logger.info('Redirecting client to original URL. Responding with 307.', extra={'shortlink': token, 'event': REDIRECT_SUCCESS})
    return response_307(location=url)
