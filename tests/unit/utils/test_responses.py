"""Unit tests for API Gateway response builders in responses.py."""

import json

import pytest

from shortlinker.dao.exceptions import DataStoreError, ShortlinkNotFoundError
from shortlinker.exceptions import InvalidInputError, InvalidTokenError
from shortlinker.utils.responses import response, response_307, response_500, response_error


def test_response_serializes_body():
    result = response(201, {'shortlink': '1'})

    assert result == {
        'statusCode': 201,
        'headers': {'Content-Type': 'application/json'},
        'body': '{"shortlink": "1"}',
    }


def test_response_merges_headers():
    result = response(200, {}, headers={'Cache-Control': 'no-store'})

    assert result['headers'] == {'Content-Type': 'application/json', 'Cache-Control': 'no-store'}


@pytest.mark.parametrize(
    'message, expected',
    [
        (None, 'Internal Server Error'),
        ('config', 'Internal Server Error (config)'),
    ],
)
def test_response_500(message, expected):
    result = response_500(message)
    body = json.loads(result['body'])

    assert result['statusCode'] == 500
    assert body == {'message': expected, 'error_code': 'UNKNOWN_INTERNAL_SERVER_ERROR'}


@pytest.mark.parametrize(
    'error, status, error_code',
    [
        (InvalidInputError('bad input'), 400, 'app:invalid_input_error'),
        (InvalidTokenError('bad token'), 400, 'app:invalid_token_error'),
        (ShortlinkNotFoundError('no such link'), 404, 'dao:shortlink_not_found_error'),
        (DataStoreError('redis down', operation='GET', key='next.url.id'), 503, DataStoreError.error_code),
    ],
)
def test_response_error(error, status, error_code):
    result = response_error(error)
    body = json.loads(result['body'])

    assert result['statusCode'] == status
    assert body['error_code'] == error_code
    assert body['message'] == str(error)


def test_response_307():
    assert response_307(location='https://example.com') == {
        'statusCode': 307,
        'headers': {'Location': 'https://example.com'},
        'body': '',
    }
