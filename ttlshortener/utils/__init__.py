from ttlshortener.utils.config import app_env, app_name, load_config
from ttlshortener.utils.helpers import base_url, get_short_url, isoformat_utc, guarantee_500_response
from ttlshortener.utils.shortener import generate_shortcode, is_valid_shortcode, is_valid_url, is_valid_validity
from ttlshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'is_valid_shortcode',
    'is_valid_url',
    'is_valid_validity',
    'app_env',
    'app_name',
    'load_config',
    'base_url',
    'get_short_url',
    'isoformat_utc',
    'guarantee_500_response',
    'initialize_logging',
]
