import logging

from ttlshortener.types import HandlerEvent, HandlerResponse
from ttlshortener.dao.base import ShortURLBaseDAO
from ttlshortener.dao.exceptions import ShortURLExpiredError, ShortURLNotFoundError
from ttlshortener.utils.helpers import guarantee_500_response
from ttlshortener.handlers.responses import response_302, response_400, response_404, response_410
from ttlshortener.handlers.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    SHORT_URL_EXPIRED,
    REDIRECT_SUCCESS,
    RESERVED_SHORTCODES,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def handler(event: HandlerEvent, dao: ShortURLBaseDAO) -> HandlerResponse:
    """Redirect a client from a shortcode to its target URL

    This handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Count the hit and fetch the target URL (one atomic DAO call)
    - Step 3: Redirect client to target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
        400: missing shortcode in path parameters
        404: shortcode not found (or reserved route name)
        410: short URL has expired (and was just evicted)

    Args:
        event (dict):
            Request event containing the shortcode path parameter.
        dao (ShortURLBaseDAO):
            Store holding the short URL mappings.

    Returns:
        dict: response with statusCode, headers and body.

    Example:
        >>> event = {'pathParameters': {'shortcode': 'Gh71TC'}}
        >>> response = handler(event, dao)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400("Missing 'shortcode' in path", error_code=MISSING_SHORTCODE)
    if shortcode in RESERVED_SHORTCODES:
        logger.warning('Redirect requested for a reserved route name. Responding with 404.', extra={'shortcode': shortcode})
        return response_404('Route not found')

    # 2- Hit the link and get its target
    try:
        target_url = dao.hit(shortcode)
    except ShortURLNotFoundError:
        logger.warning('Redirect failed: shortcode not found.', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND})
        return response_404('Shortcode not found', error_code=SHORT_URL_NOT_FOUND)
    except ShortURLExpiredError:
        logger.info('Evicted expired shortcode during redirect.', extra={'shortcode': shortcode, 'event': SHORT_URL_EXPIRED})
        return response_410('Short URL has expired', error_code=SHORT_URL_EXPIRED)

    # 3- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'shortcode': shortcode, 'targetUrl': target_url, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=target_url)
