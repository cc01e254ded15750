"""Tests for response helpers."""

from __future__ import annotations

import json
import os
from decimal import Decimal

from versa.utils.responses import error_response
from versa.utils.responses import get_cors_headers
from versa.utils.responses import json_response


def test_cors_allows_any_origin_by_default() -> None:
    headers = get_cors_headers({'headers': {'origin': 'https://example.com'}})
    assert headers['Access-Control-Allow-Origin'] == '*'


def test_cors_echoes_configured_origin() -> None:
    os.environ['CORS_ALLOWED_ORIGINS'] = 'https://a.example, https://b.example'
    headers = get_cors_headers({'headers': {'Origin': 'https://b.example'}})
    assert headers['Access-Control-Allow-Origin'] == 'https://b.example'


def test_cors_falls_back_to_first_configured_origin() -> None:
    os.environ['CORS_ALLOWED_ORIGINS'] = 'https://a.example'
    headers = get_cors_headers({'headers': {'origin': 'https://evil.example'}})
    assert headers['Access-Control-Allow-Origin'] == 'https://a.example'


def test_json_response_shape() -> None:
    response = json_response(201, {'itemId': 'abc'})
    assert response['statusCode'] == 201
    assert response['headers']['Content-Type'] == 'application/json'
    assert response['headers']['Access-Control-Allow-Origin'] == '*'
    assert json.loads(response['body']) == {'itemId': 'abc'}


def test_json_response_encodes_dynamodb_numbers() -> None:
    body = {'location': {'lat': Decimal('22.3'), 'lng': Decimal('114')}}
    payload = json.loads(json_response(200, body)['body'])
    assert payload == {'location': {'lat': 22.3, 'lng': 114}}
    assert isinstance(payload['location']['lng'], int)


def test_error_response_with_detail() -> None:
    response = error_response(400, 'Invalid', detail='Field: limit')
    assert json.loads(response['body']) == {'error': 'Invalid', 'detail': 'Field: limit'}
    assert 'Access-Control-Allow-Origin' in response['headers']
