"""Response builders shared by the request handlers.

Every builder returns an API-Gateway-style response dict:

    {
        'statusCode': 404,
        'headers': {'Content-Type': 'application/json'},
        'body': '{"error": "Not Found", "message": "..."}'
    }

Error bodies always carry the HTTP reason phrase under "error" and a
human-readable "message"; an "errorCode" is added when one is known.
"""

import json
from http import HTTPStatus
from typing import Any

from ttlshortener.types import HandlerResponse


JSON_HEADERS = {'Content-Type': 'application/json'}


def json_response(status: int, body: dict[str, Any], headers: dict[str, str] | None = None) -> HandlerResponse:
    return {
        'statusCode': status,
        'headers': {**JSON_HEADERS, **(headers or {})},
        'body': json.dumps(body),
    }


def error_response(status: int, message: str, error_code: str | None = None) -> HandlerResponse:
    body = {'error': HTTPStatus(status).phrase, 'message': message}
    if error_code:
        body['errorCode'] = error_code
    return json_response(status, body)


def response_400(message: str, error_code: str | None = None) -> HandlerResponse:
    return error_response(400, message, error_code)


def response_404(message: str, error_code: str | None = None) -> HandlerResponse:
    return error_response(404, message, error_code)


def response_409(message: str, error_code: str | None = None) -> HandlerResponse:
    return error_response(409, message, error_code)


def response_410(message: str, error_code: str | None = None) -> HandlerResponse:
    return error_response(410, message, error_code)


def response_500(message: str | None = None, error_code: str | None = None) -> HandlerResponse:
    return error_response(500, message or 'An unexpected error occurred', error_code)


def response_302(*, location: str) -> HandlerResponse:
    return {
        'statusCode': 302,
        'headers': {'Location': location},
        'body': json.dumps({}),  # no body needed for redirects
    }
