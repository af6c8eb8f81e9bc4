"""API Gateway (Lambda proxy) response builders"""

import json

from shortlinker.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from shortlinker.exceptions import ShortlinkerError
from shortlinker.types import LambdaResponse


JSON_HEADERS = {'Content-Type': 'application/json'}


def response(status: int, body: object, headers: dict | None = None) -> LambdaResponse:
    return {
        'statusCode': status,
        'headers': {**JSON_HEADERS, **(headers or {})},
        'body': json.dumps(body),
    }


def response_500(message: str | None = None) -> LambdaResponse:
    base = 'Internal Server Error'
    body = {
        'message': base if not message else f'{base} ({message})',
        'error_code': UNKNOWN_INTERNAL_SERVER_ERROR,
    }
    return response(500, body)


def response_error(error: ShortlinkerError) -> LambdaResponse:
    """Map an application error onto its HTTP status.

    Example:
        >>> response_error(ShortlinkNotFoundError("Unknown short URL 'abc'."))['statusCode']
        404
    """
    return response(error.status, {'message': str(error), 'error_code': error.error_code})


def response_307(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 307,
        'headers': {'Location': location},
        'body': '',
    }
