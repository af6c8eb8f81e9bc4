import json
import logging
from typing import Any

from shortlinker.dao.redis import ShortlinkRedisDAO
from shortlinker.dao.exceptions import DataStoreError
from shortlinker.exceptions import ConfigurationError, InvalidInputError
from shortlinker.types import LambdaEvent, LambdaResponse
from shortlinker.utils import load_config, redis_config, get_short_url, app_prefix
from shortlinker.utils.helpers import guarantee_500_response
from shortlinker.utils.responses import response, response_500, response_error
from shortlinker.lambdas.constants import (
    INVALID_REQUEST,
    SHORTLINK_CREATED,
    DATA_STORE_UNAVAILABLE,
    CONFIGURATION_ERROR,
)


logger = logging.getLogger(__name__)


def parse_shorten_request(body: str | None) -> tuple[str, int]:
    """Extract (url, expiration_in_minutes) from a shorten request body

    Raises:
        InvalidInputError:
            If the body isn't a JSON object, 'url' is missing or empty, or
            'expiration_in_minutes' isn't a non-negative integer.

    Example:
        >>> parse_shorten_request('{"url": "https://example.com", "expiration_in_minutes": 60}')
        ('https://example.com', 60)
    """
    try:
        request_body = json.loads(body or '{}')
    except json.JSONDecodeError as e:
        raise InvalidInputError('invalid JSON body') from e
    if not isinstance(request_body, dict):
        raise InvalidInputError('JSON body must be an object')

    url = request_body.get('url')
    if not isinstance(url, str) or not url.strip():
        raise InvalidInputError("missing 'url' in JSON body")

    expiration = request_body.get('expiration_in_minutes', 0)
    if not isinstance(expiration, int) or isinstance(expiration, bool) or expiration < 0:
        raise InvalidInputError("'expiration_in_minutes' must be a non-negative integer")

    return url, expiration


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: Any) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Validate the request body
    - Step 2: Shorten the URL (reusing a live shortlink of the same URL)
    - Step 3: Respond to user with 201 created

    HTTP responses:
        201: Shortlink created (or reused)
            shortlink: token of the shortlink
            short_url: public URL of the shortlink
        400: Bad client request
            message: invalid JSON, missing 'url' or invalid 'expiration_in_minutes'
        500: Internal server error
        503: Data store unavailable

    Args:
        event (dict):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object containing runtime information.

    Returns:
        dict:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'body': '{"url": "https://example.com", "expiration_in_minutes": 60}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        201
        >>> json.loads(response['body'])['shortlink']
        '1'
    """
    # 0- Get application's config
    try:
        dao_config = redis_config(load_config('shorten_url'))
    except ConfigurationError:
        logger.exception('Failed to load AppConfig for shorten URL function. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500()

    # 1- Validate request body
    try:
        url, expiration_in_minutes = parse_shorten_request(event.get('body'))
    except InvalidInputError as e:
        logger.info('Invalid shorten request. Responding with 400.', extra={'reason': str(e), 'event': INVALID_REQUEST})
        return response_error(e)

    # 2- Shorten the URL
    try:
        dao = ShortlinkRedisDAO(**dao_config, prefix=app_prefix())
        token = dao.shorten(url=url, expiration_in_minutes=expiration_in_minutes)
    except DataStoreError as e:
        logger.error(
            'Data store unavailable. Responding with 503.',
            extra={'operation': e.operation, 'key': e.key, 'event': DATA_STORE_UNAVAILABLE},
        )
        return response_error(e)

    # 3- Respond with the shortlink
    short_url = get_short_url(token, event)
    logger.info('Shortened URL. Responding with 201.', extra={'shortlink': token, 'event': SHORTLINK_CREATED})
    return response(201, {'shortlink': token, 'short_url': short_url})
