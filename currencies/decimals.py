"""
decimals.py - Precision resolution for currency identifiers

Resolves the number of decimal places a currency uses for its smallest unit.

Rules:
- Token: the registry's decimals for the symbol
- ExternalContract: None (precision is owned by the contract's own metadata)
- Pair: the finer of the two sides, or None if either side is unknown.
  A pool share must be at least as precise as its most precise underlying
  asset, otherwise representing shares loses value to rounding.
"""

from __future__ import annotations
from typing import Optional

from .core import CurrencyId, DexShare, ExternalContract, Pair, Token


def dex_share_decimals(share: DexShare) -> Optional[int]:
    """Decimals of one pair side, resolved as a standalone currency."""
    return decimals(share.to_currency_id())


def decimals(currency_id: CurrencyId) -> Optional[int]:
    """
    Return the decimal places of a currency, or None if not known locally.

    Example:
        >>> decimals(join_pair(ACA, DOT))   # ACA has 12, DOT has 10
        12
    """
    if isinstance(currency_id, Token):
        return currency_id.symbol.decimals
    if isinstance(currency_id, Pair):
        left = dex_share_decimals(currency_id.left)
        right = dex_share_decimals(currency_id.right)
        if left is None or right is None:
            return None
        return max(left, right)
    if isinstance(currency_id, ExternalContract):
        return None
    raise TypeError(f"Expected CurrencyId, got {type(currency_id).__name__}")
