# Structured log events / response error codes shared by the request handlers
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
MISSING_TARGET_URL = 'MISSING_TARGET_URL'
MISSING_SHORTCODE = 'MISSING_SHORTCODE'
INVALID_TARGET_URL = 'INVALID_TARGET_URL'
INVALID_VALIDITY = 'INVALID_VALIDITY'
INVALID_SHORTCODE = 'INVALID_SHORTCODE'
SHORTCODE_CONFLICT = 'SHORTCODE_CONFLICT'
SHORTCODE_RESERVED = 'SHORTCODE_RESERVED'
SHORTCODE_GENERATION_FAILED = 'SHORTCODE_GENERATION_FAILED'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
SHORT_URL_EXPIRED = 'SHORT_URL_EXPIRED'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
STATS_SUCCESS = 'STATS_SUCCESS'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'

# First path segments owned by other routes; never resolved as shortcodes
RESERVED_SHORTCODES = frozenset({'shorturls', 'health'})
