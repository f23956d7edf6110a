"""Calculation pipeline and the session controller driving it."""

import logging
from dataclasses import replace
from typing import Callable, List, Optional, Union

from config.settings import Settings
from compounder.core.logging_setup import setup_logging
from compounder.exceptions import ClipboardError
from compounder.models import (
    Calculation,
    InputSource,
    ParameterOverrides,
    Parameters,
)
from compounder.portfolio import compound_trades, derive_metrics
from compounder.share import (
    ClipboardWriter,
    decode_share_query,
    decode_share_url,
    encode_share_url,
)
from compounder.validation import (
    RawValue,
    validate_capital,
    validate_profit_rate,
    validate_trade_count,
)

logger = logging.getLogger(__name__)

Listener = Callable[[Calculation], None]


def calculate(params: Parameters) -> Calculation:
    """
    Run the compounding engine and derive summary metrics.

    Args:
        params: Validated parameter set

    Returns:
        Calculation with the per-trade history and summary figures
    """
    result = compound_trades(params.starting_capital, params.profit_per_trade, params.num_trades)
    metrics = derive_metrics(params.starting_capital, result.final)
    return Calculation(
        parameters=params,
        history=result.history,
        final_capital=result.final,
        total_profit=metrics.total_profit,
        total_return_percent=metrics.total_return_percent,
    )


class CalculatorSession:
    """
    Holds the current parameter set and its calculation.

    Lifecycle:
    1. Start from configured defaults
    2. Optionally restore once from a share link
    3. Apply user edits one field at a time
    4. Recompute the full trajectory whenever the parameter set changes
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clipboard: Optional[ClipboardWriter] = None,
    ):
        """
        Initialize the session.

        Args:
            settings: Calculator configuration (defaults when None)
            clipboard: Where share links are written
        """
        self.settings = settings or Settings()
        self.clipboard = clipboard
        self._listeners: List[Listener] = []

        defaults = self.settings.calculator
        self._parameters = Parameters(
            starting_capital=defaults.starting_capital,
            profit_per_trade=defaults.profit_per_trade,
            num_trades=defaults.num_trades,
        )
        self._calculation = calculate(self._parameters)

    @property
    def parameters(self) -> Parameters:
        return self._parameters

    @property
    def calculation(self) -> Calculation:
        return self._calculation

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked with every new calculation."""
        self._listeners.append(listener)

    def _apply(self, params: Parameters) -> None:
        """Recompute if the parameter set changed."""
        if params == self._parameters:
            return

        self._parameters = params
        self._calculation = calculate(params)
        logger.debug(
            f"Recomputed {params.num_trades} trades at {params.profit_per_trade}% "
            f"from ${params.starting_capital:,.2f}: "
            f"final ${self._calculation.final_capital:,.2f}"
        )
        for listener in self._listeners:
            listener(self._calculation)

    # Share-link restore

    def restore(self, overrides: ParameterOverrides) -> Parameters:
        """
        Apply decoded share-link values.

        Args:
            overrides: Accepted fields from a share link

        Returns:
            The resulting parameter set
        """
        if overrides.is_empty:
            logger.debug("Share link carried no valid parameters")
            return self._parameters

        logger.info(f"Restoring parameters from share link: {overrides.as_dict()}")
        self._apply(self._parameters.with_overrides(overrides))
        return self._parameters

    def restore_from_query(self, query: str) -> Parameters:
        """Restore from a share-link query string."""
        return self.restore(decode_share_query(query))

    def restore_from_url(self, url: str) -> Parameters:
        """Restore from a full share link."""
        return self.restore(decode_share_url(url))

    # User edits

    def set_starting_capital(self, raw: RawValue) -> bool:
        """
        Update the starting capital.

        Args:
            raw: Text or number entered by the user

        Returns:
            True if accepted, False if ignored as invalid
        """
        value = validate_capital(raw)
        if value is None:
            return False
        self._apply(replace(self._parameters, starting_capital=value))
        return True

    def set_profit_per_trade(
        self, raw: RawValue, source: Union[InputSource, str] = InputSource.DIRECT
    ) -> bool:
        """
        Update the profit per trade percentage.

        Args:
            raw: Text or number entered by the user
            source: Bounds to validate against

        Returns:
            True if accepted, False if ignored as invalid
        """
        value = validate_profit_rate(raw, source)
        if value is None:
            return False
        self._apply(replace(self._parameters, profit_per_trade=value))
        return True

    def set_num_trades(
        self, raw: RawValue, source: Union[InputSource, str] = InputSource.DIRECT
    ) -> bool:
        """
        Update the number of trades.

        Args:
            raw: Text or number entered by the user
            source: Bounds to validate against

        Returns:
            True if accepted, False if ignored as invalid
        """
        value = validate_trade_count(raw, source)
        if value is None:
            return False
        self._apply(replace(self._parameters, num_trades=value))
        return True

    # Sharing

    def share_url(self, base_url: Optional[str] = None) -> str:
        """Build a share link for the current parameters."""
        return encode_share_url(self._parameters, base_url or self.settings.share.base_url)

    def share(self, base_url: Optional[str] = None) -> bool:
        """
        Copy a share link for the current parameters to the clipboard.

        Args:
            base_url: Page URL (configured share URL when None)

        Returns:
            True if the link was copied
        """
        url = self.share_url(base_url)
        if self.clipboard is None:
            logger.warning("No clipboard configured, share link not copied")
            return False

        try:
            self.clipboard.write_text(url)
        except (ClipboardError, OSError) as e:
            logger.warning(f"Failed to copy URL: {e}")
            return False

        logger.info(f"Share link copied: {url}")
        return True


def create_session(
    settings: Optional[Settings] = None,
    url: Optional[str] = None,
    clipboard: Optional[ClipboardWriter] = None,
    configure_logging: bool = False,
) -> CalculatorSession:
    """
    Factory function to create a calculator session.

    Args:
        settings: Calculator configuration
        url: Page URL to restore parameters from, if opened via a share link
        clipboard: Where share links are written
        configure_logging: Install console and file logging from settings.logging

    Returns:
        Configured CalculatorSession instance
    """
    settings = settings or Settings()
    if configure_logging:
        setup_logging(settings.logging.level, settings.logging.file)

    session = CalculatorSession(settings, clipboard)
    if url:
        session.restore_from_url(url)
    return session
