import logging
from datetime import datetime, UTC

from ttlshortener.types import HandlerEvent, HandlerResponse
from ttlshortener.dao.base import ShortURLBaseDAO
from ttlshortener.utils.helpers import guarantee_500_response, isoformat_utc
from ttlshortener.handlers.responses import json_response


logger = logging.getLogger(__name__)


@guarantee_500_response
def handler(event: HandlerEvent, dao: ShortURLBaseDAO) -> HandlerResponse:
    """Report service liveness

    Responds 200 with {"status": "OK", "timestamp": ..., "entries": ...}, or
    503 with status "UNAVAILABLE" when the store fails its healthcheck.
    """
    timestamp = isoformat_utc(datetime.now(UTC))

    if not dao.healthcheck():
        logger.error('Store healthcheck failed. Responding with 503.')
        return json_response(503, {'status': 'UNAVAILABLE', 'timestamp': timestamp})

    return json_response(200, {'status': 'OK', 'timestamp': timestamp, 'entries': dao.count()})
