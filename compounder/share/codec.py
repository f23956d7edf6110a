"""Share-link encoding and decoding."""

import logging
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from compounder.models import InputSource, ParameterOverrides, Parameters
from compounder.validation import (
    validate_capital,
    validate_profit_rate,
    validate_trade_count,
)

logger = logging.getLogger(__name__)

CAPITAL_KEY = "capital"
PROFIT_KEY = "profit"
TRADES_KEY = "trades"


def format_number(value: float) -> str:
    """Shortest round-trip text for a number, without a trailing .0."""
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def encode_share_url(params: Parameters, base_url: str) -> str:
    """
    Build a share link carrying the parameter set.

    Any query string or fragment already on base_url is discarded.

    Args:
        params: Parameter set to encode
        base_url: Page URL the link should open

    Returns:
        base_url with capital, profit and trades query parameters
    """
    scheme, netloc, path, _, _ = urlsplit(base_url)
    query = urlencode(
        [
            (CAPITAL_KEY, format_number(params.starting_capital)),
            (PROFIT_KEY, format_number(params.profit_per_trade)),
            (TRADES_KEY, format_number(params.num_trades)),
        ]
    )
    return urlunsplit((scheme, netloc, path, query, ""))


def decode_share_query(query: str) -> ParameterOverrides:
    """
    Parse share-link query parameters.

    Each field is validated on its own with URL-source bounds; a field that
    is missing or rejected is left unset instead of failing the whole decode.

    Args:
        query: Query string, with or without the leading "?"

    Returns:
        ParameterOverrides with the accepted fields set
    """
    values = parse_qs(query.lstrip("?"))

    def first(key: str):
        found = values.get(key)
        return found[0] if found else None

    overrides = ParameterOverrides(
        starting_capital=validate_capital(first(CAPITAL_KEY)),
        profit_per_trade=validate_profit_rate(first(PROFIT_KEY), InputSource.URL),
        num_trades=validate_trade_count(first(TRADES_KEY), InputSource.URL),
    )
    logger.debug(f"Decoded share query {query!r} -> {overrides.as_dict()}")
    return overrides


def decode_share_url(url: str) -> ParameterOverrides:
    """Parse the query string of a full share link."""
    return decode_share_query(urlsplit(url).query)
