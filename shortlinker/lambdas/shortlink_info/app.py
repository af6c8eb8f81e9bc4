import logging
from typing import Any

from shortlinker.dao.redis import ShortlinkRedisDAO
from shortlinker.dao.exceptions import DataStoreError, ShortlinkNotFoundError
from shortlinker.exceptions import ConfigurationError, InvalidTokenError
from shortlinker.types import LambdaEvent, LambdaResponse
from shortlinker.utils import load_config, redis_config, require_token, app_prefix
from shortlinker.utils.helpers import guarantee_500_response
from shortlinker.utils.responses import response, response_500, response_error
from shortlinker.lambdas.constants import (
    INVALID_SHORTLINK,
    SHORTLINK_NOT_FOUND,
    SHORTLINK_INFO_SUCCESS,
    DATA_STORE_UNAVAILABLE,
    CONFIGURATION_ERROR,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: Any) -> LambdaResponse:
    """Handle incoming API Gateway requests for shortlink metadata

    GET /api/info?shortlink=<token>

    HTTP responses:
        200: Link detail
            url, created_at, expiration_in_minutes
            expires_at: ISO-8601 expiry, null for links which never expire
        400: Missing 'shortlink' query parameter, or a token with characters outside [0-9a-zA-Z]
        404: Unknown (or expired) shortlink
        500: Internal server error
        503: Data store unavailable

    Example:
        >>> event = {'queryStringParameters': {'shortlink': '1'}}
        >>> json.loads(lambda_handler(event, None)['body'])
        {'url': 'https://example.com', 'created_at': '2025-10-15T00:00:00+00:00', 'expiration_in_minutes': 60, 'expires_at': '2025-10-15T01:00:00+00:00'}
    """
    try:
        dao_config = redis_config(load_config('shortlink_info'))
    except ConfigurationError:
        logger.exception('Failed to load AppConfig for shortlink info function. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500()

    query = event.get('queryStringParameters') or {}
    try:
        token = require_token(query.get('shortlink'))
    except InvalidTokenError as e:
        logger.info('Missing "shortlink" query parameter. Responding with 400.', extra={'event': INVALID_SHORTLINK})
        return response_error(e)

    try:
        dao = ShortlinkRedisDAO(**dao_config, prefix=app_prefix())
        detail = dao.info(token=token)
    except InvalidTokenError as e:
        logger.info('Invalid "shortlink" query parameter. Responding with 400.', extra={'shortlink': token, 'event': INVALID_SHORTLINK})
        return response_error(e)
    except ShortlinkNotFoundError as e:
        logger.info('Shortlink not found. Responding with 404.', extra={'shortlink': token, 'event': SHORTLINK_NOT_FOUND})
        return response_error(e)
    except DataStoreError as e:
        logger.error(
            'Data store unavailable. Responding with 503.',
            extra={'operation': e.operation, 'key': e.key, 'event': DATA_STORE_UNAVAILABLE},
        )
        return response_error(e)

    logger.info('Found shortlink detail. Responding with 200.', extra={'shortlink': token, 'event': SHORTLINK_INFO_SUCCESS})
    expires_at = detail.expires_at
    return response(200, {**detail.to_dict(), 'expires_at': expires_at.isoformat() if expires_at else None})
