"""Shared signal construction for strategies."""

from __future__ import annotations

import numpy as np
import pandas as pd

from crypto_indicators.domain.models import Action


def actions_from_conditions(buy: pd.Series, sell: pd.Series) -> pd.Series:
    """Combine boolean masks into a per-bar action series.

    Bars matching neither mask, or both, are HOLD. Comparisons against NaN
    evaluate False, so undefined indicator values also HOLD.
    """
    buy_mask = buy.fillna(False).astype(bool)
    sell_mask = sell.fillna(False).astype(bool)
    values = np.select(
        [buy_mask & ~sell_mask, sell_mask & ~buy_mask],
        [int(Action.BUY), int(Action.SELL)],
        default=int(Action.HOLD),
    )
    return pd.Series(values, index=buy.index, dtype=int, name="action")


def sign_actions(values: pd.Series) -> pd.Series:
    """BUY on positive values, SELL on negative ones."""
    return actions_from_conditions(values > 0, values < 0)
