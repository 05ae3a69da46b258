import logging

from ttlshortener.types import HandlerEvent, HandlerResponse
from ttlshortener.dao.base import ShortURLBaseDAO
from ttlshortener.dao.exceptions import ShortURLExpiredError, ShortURLNotFoundError
from ttlshortener.utils.helpers import guarantee_500_response, isoformat_utc
from ttlshortener.handlers.responses import json_response, response_400, response_404, response_410
from ttlshortener.handlers.constants import MISSING_SHORTCODE, SHORT_URL_NOT_FOUND, SHORT_URL_EXPIRED, STATS_SUCCESS


logger = logging.getLogger(__name__)


@guarantee_500_response
def handler(event: HandlerEvent, dao: ShortURLBaseDAO) -> HandlerResponse:
    """Return statistics for a short URL without counting a hit

    HTTP responses:
        200: Statistics
            shortcode, originalUrl, createdAt, expiry, accessCount
        400: missing shortcode in path parameters
        404: shortcode not found
        410: short URL has expired (and was just evicted)

    Example:
        >>> response = handler({'pathParameters': {'shortcode': 'abc123'}}, dao)
        >>> json.loads(response['body'])['accessCount']
        0
    """
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400("Missing 'shortcode' in path", error_code=MISSING_SHORTCODE)

    try:
        short_url = dao.get(shortcode)
    except ShortURLNotFoundError:
        logger.warning('Statistics request failed: shortcode not found.', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND})
        return response_404('Shortcode not found', error_code=SHORT_URL_NOT_FOUND)
    except ShortURLExpiredError:
        logger.info('Evicted expired shortcode during statistics request.', extra={'shortcode': shortcode, 'event': SHORT_URL_EXPIRED})
        return response_410('Short URL has expired', error_code=SHORT_URL_EXPIRED)

    logger.info('Statistics retrieved.', extra={'shortcode': shortcode, 'event': STATS_SUCCESS})
    return json_response(
        200,
        {
            'shortcode': short_url.shortcode,
            'originalUrl': short_url.target,
            'createdAt': isoformat_utc(short_url.created_at),
            'expiry': isoformat_utc(short_url.expires_at),
            'accessCount': short_url.hits,
        },
    )
