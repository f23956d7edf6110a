"""Parameter validation for direct entry and share-link restore.

Validators never raise. A rejected value is reported as None and the
caller keeps its current value.
"""

import logging
import math
from typing import Optional, Union

from compounder.models import InputSource, bounds_for

logger = logging.getLogger(__name__)

RawValue = Union[str, int, float, None]


def _parse_number(raw: RawValue, strip_separators: bool = False) -> Optional[float]:
    """Parse a finite float from a string or number."""
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    elif isinstance(raw, str):
        text = raw.strip()
        if strip_separators:
            text = text.replace(",", "")
        # float() also takes Python literal underscores ("1_0")
        if not text or "_" in text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(value):
        return None
    return value


def _parse_integer(raw: RawValue) -> Optional[int]:
    """Parse an integral value; fractional input is rejected."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw

    value = _parse_number(raw)
    if value is None or not value.is_integer():
        return None
    return int(value)


def validate_capital(raw: RawValue) -> Optional[float]:
    """
    Validate a starting capital value.

    Thousands separators are accepted ("100,000").

    Args:
        raw: Candidate value from a control or a share link

    Returns:
        Capital as a float, or None if not a finite number > 0
    """
    value = _parse_number(raw, strip_separators=True)
    if value is None or value <= 0:
        logger.debug(f"Rejected starting capital {raw!r}")
        return None
    return value


def validate_profit_rate(
    raw: RawValue, source: Union[InputSource, str] = InputSource.DIRECT
) -> Optional[float]:
    """
    Validate a profit-per-trade percentage against the bounds for its source.

    Args:
        raw: Candidate percentage (5 = 5%)
        source: InputSource.DIRECT (slider range) or InputSource.URL (wider range)

    Returns:
        Percentage as a float, or None if unparseable or out of bounds
    """
    bounds = bounds_for(source)
    value = _parse_number(raw)
    if value is None or not bounds.accepts_profit(value):
        logger.debug(f"Rejected profit per trade {raw!r} from {InputSource(source).value}")
        return None
    return value


def validate_trade_count(
    raw: RawValue, source: Union[InputSource, str] = InputSource.DIRECT
) -> Optional[int]:
    """
    Validate a number of trades against the bounds for its source.

    Args:
        raw: Candidate trade count
        source: InputSource.DIRECT (slider range) or InputSource.URL (wider range)

    Returns:
        Trade count as an int, or None if not integral or out of bounds
    """
    bounds = bounds_for(source)
    value = _parse_integer(raw)
    if value is None or not bounds.accepts_trades(value):
        logger.debug(f"Rejected number of trades {raw!r} from {InputSource(source).value}")
        return None
    return value
