import json
import logging

from ttlshortener.types import HandlerEvent, HandlerResponse
from ttlshortener.dao.base import ShortURLBaseDAO
from ttlshortener.dao.exceptions import (
    InvalidShortcodeError,
    InvalidURLError,
    InvalidValidityError,
    ShortcodeGenerationError,
    ShortURLAlreadyExistsError,
)
from ttlshortener.utils.constants import Defaults
from ttlshortener.utils.helpers import get_short_url, guarantee_500_response, isoformat_utc
from ttlshortener.handlers.responses import json_response, response_400, response_409, response_500
from ttlshortener.handlers.constants import (
    INVALID_JSON_BODY,
    MISSING_TARGET_URL,
    INVALID_TARGET_URL,
    INVALID_VALIDITY,
    INVALID_SHORTCODE,
    SHORTCODE_CONFLICT,
    SHORTCODE_RESERVED,
    SHORTCODE_GENERATION_FAILED,
    SHORTEN_SUCCESS,
    RESERVED_SHORTCODES,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def handler(
    event: HandlerEvent,
    dao: ShortURLBaseDAO,
    default_validity: int = Defaults.VALIDITY_MINUTES,
    short_link_base: str | None = None,
) -> HandlerResponse:
    """Handle a request to shorten a URL

    This handler follows this procedure to shorten URLs:
    - Step 1: Parse the JSON request body
    - Step 2: Extract target URL, validity and optional shortcode
    - Step 3: Store the mapping via the DAO
    - Step 4: Respond with the short link and its expiry

    Request body:
        url (str): target URL (required)
        validity (int): lifetime in minutes (optional, defaults to `default_validity`)
        shortcode (str): requested shortcode (optional)

    HTTP responses:
        201: Short URL created
            shortLink: public short URL
            expiry: ISO-8601 UTC expiry timestamp
        400: Bad client request
            message: invalid JSON, missing/invalid URL, invalid validity or shortcode
        409: Conflict
            message: requested shortcode is already in use or is a reserved route name
        500: Internal server error
            message: no free shortcode could be generated, or unexpected failure

    Args:
        event (dict):
            Request event; the JSON payload is read from `event['body']`.
        dao (ShortURLBaseDAO):
            Store holding the short URL mappings.
        default_validity (int):
            Validity in minutes used when the body omits one.
        short_link_base (str | None):
            Base URL for short links. Resolved from BASE_URL or the event when None.

    Returns:
        dict: response with statusCode, headers and JSON body.

    Example:
        >>> event = {'body': '{"url": "https://example.com", "shortcode": "abc"}'}
        >>> response = handler(event, dao)
        >>> response['statusCode']
        201
        >>> json.loads(response['body'])['shortLink']
        'http://localhost:3000/abc'
    """
    # 1- Parse request body
    try:
        body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        logger.warning('URL shortening failed: invalid JSON body.', extra={'event': INVALID_JSON_BODY})
        return response_400('Request body must be valid JSON', error_code=INVALID_JSON_BODY)
    if not isinstance(body, dict):
        logger.warning('URL shortening failed: JSON body is not an object.', extra={'event': INVALID_JSON_BODY})
        return response_400('Request body must be a JSON object', error_code=INVALID_JSON_BODY)

    # 2- Extract parameters
    target_url = body.get('url')
    if not target_url:
        logger.warning('URL shortening failed: missing URL parameter.', extra={'event': MISSING_TARGET_URL})
        return response_400('URL is required', error_code=MISSING_TARGET_URL)
    validity = body.get('validity', default_validity)
    shortcode = body.get('shortcode') or None
    if isinstance(shortcode, str) and shortcode in RESERVED_SHORTCODES:
        logger.warning('URL shortening failed: shortcode is a reserved route name.', extra={'shortcode': shortcode, 'event': SHORTCODE_RESERVED})
        return response_409('Shortcode is reserved', error_code=SHORTCODE_RESERVED)

    # 3- Store short URL mapping
    try:
        short_url = dao.create(target_url, validity=validity, shortcode=shortcode)
    except InvalidURLError:
        logger.warning('URL shortening failed: invalid URL format.', extra={'targetUrl': target_url, 'event': INVALID_TARGET_URL})
        return response_400('Invalid URL format', error_code=INVALID_TARGET_URL)
    except InvalidValidityError:
        logger.warning('URL shortening failed: invalid validity period.', extra={'validity': validity, 'event': INVALID_VALIDITY})
        return response_400('Validity must be a positive integer representing minutes', error_code=INVALID_VALIDITY)
    except InvalidShortcodeError:
        logger.warning('URL shortening failed: invalid shortcode format.', extra={'shortcode': shortcode, 'event': INVALID_SHORTCODE})
        return response_400('Shortcode must be alphanumeric, 3-20 characters long', error_code=INVALID_SHORTCODE)
    except ShortURLAlreadyExistsError:
        logger.warning('URL shortening failed: shortcode already exists.', extra={'shortcode': shortcode, 'event': SHORTCODE_CONFLICT})
        return response_409('Shortcode already exists', error_code=SHORTCODE_CONFLICT)
    except ShortcodeGenerationError:
        logger.error('URL shortening failed: shortcode space exhausted.', extra={'event': SHORTCODE_GENERATION_FAILED})
        return response_500('Could not generate a unique shortcode', error_code=SHORTCODE_GENERATION_FAILED)

    # 4- Respond with the new short link
    short_link = get_short_url(short_url.shortcode, event, short_link_base)
    expiry = isoformat_utc(short_url.expires_at)
    logger.info(
        'URL shortened successfully. Responding with 201.',
        extra={'shortcode': short_url.shortcode, 'shortLink': short_link, 'expiry': expiry, 'event': SHORTEN_SUCCESS},
    )
    return json_response(201, {'shortLink': short_link, 'expiry': expiry})
