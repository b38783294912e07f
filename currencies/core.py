"""
Core types and pure functions for currency identifiers.

This module provides the foundational data structures for the identifier codec:
1. Constants: byte layout of the 32-byte and 4-byte representations
2. Exceptions: CurrencyError and the decode failures
3. Address helpers: parsing and formatting of 20-byte contract addresses
4. Immutable data structures: DexShare and CurrencyId variants
5. Pair composition: split_pair and join_pair

All values are frozen dataclasses. No function in this module has side effects,
so every value can be shared freely between threads.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Optional, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .symbols import TokenSymbol


# ============================================================================
# CONSTANTS
# ============================================================================
#
# Byte layout of the 32-byte representation (big-endian, indices 0-31):
#
#   Token:             [0 x 23][0x00][0 0 0 code][0 0 0 0]
#   Pair:              [0 x 23][0x01][left index][right index]
#   ExternalContract:  [0 x 12][20-byte address]
#
# Pre-deployed contracts parse this layout. It must not change without a migration.
#

# Length of an external contract address.
ADDRESS_LENGTH = 20

# Length of the address-shaped representation.
CURRENCY_ID_LENGTH = 32

# Length of the compact numeric index.
INDEX_LENGTH = 4

# Position of the variant discriminator. Everything before it is zero for
# Token and Pair values (the reserved system range).
DISCRIMINATOR_OFFSET = 23

# Padding in front of an external contract address.
ADDRESS_OFFSET = CURRENCY_ID_LENGTH - ADDRESS_LENGTH

# Discriminator values.
TAG_TOKEN = 0
TAG_DEX_SHARE = 1

# High bit of a symbol code selects the ecosystem.
ECOSYSTEM_BIT = 0x80


# ============================================================================
# EXCEPTIONS
# ============================================================================

class CurrencyError(Exception):
    """Base exception for all currency identifier errors."""
    pass


class CurrencyDecodeError(CurrencyError, ValueError):
    """Raised when untrusted input cannot be decoded into a currency identifier."""
    pass


class UnknownSymbolCode(CurrencyDecodeError):
    """Raised when an integer code is not assigned to any token symbol."""

    def __init__(self, code: Any):
        self.code = code
        super().__init__(f"Unknown token symbol code: {code!r}")


class UnknownSymbolName(CurrencyDecodeError):
    """Raised when a symbol name is not assigned to any token symbol."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"Unknown token symbol name: {name!r}")


class MalformedEncoding(CurrencyDecodeError):
    """Raised when encoded input does not match any recognized layout."""
    pass


# ============================================================================
# ADDRESS HELPERS
# ============================================================================

def parse_address(value: Union[str, bytes, bytearray, memoryview]) -> bytes:
    """
    Normalize an external contract address to 20 raw bytes.

    Accepts raw bytes or a hex string, with or without the "0x" prefix.

    Raises:
        ValueError: If the value is not a 20-byte address.
    """
    if isinstance(value, str):
        text = value[2:] if value[:2].lower() == "0x" else value
        if len(text) != 2 * ADDRESS_LENGTH:
            raise ValueError(
                f"Address must have {2 * ADDRESS_LENGTH} hex digits, got {len(text)}"
            )
        try:
            raw = bytes.fromhex(text)
        except ValueError:
            raise ValueError(f"Address is not valid hex: {value!r}") from None
        if len(raw) != ADDRESS_LENGTH:
            raise ValueError(f"Address is not valid hex: {value!r}")
        return raw
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        if len(raw) != ADDRESS_LENGTH:
            raise ValueError(f"Address must be {ADDRESS_LENGTH} bytes, got {len(raw)}")
        return raw
    raise ValueError(f"Address must be bytes or hex string, got {type(value).__name__}")


def format_address(address: bytes) -> str:
    """Return the lower-case 0x-prefixed hex form of an address."""
    return "0x" + parse_address(address).hex()


def _check_symbol(symbol: Any) -> None:
    from .symbols import TokenSymbol

    if not isinstance(symbol, TokenSymbol):
        raise ValueError(f"symbol must be TokenSymbol, got {type(symbol).__name__}")


# ============================================================================
# DEX SHARE
# ============================================================================

@total_ordering
class DexShare:
    """
    One side of a trading-pair share identifier.

    Exactly two variants exist: DexShare.Token and DexShare.ExternalContract.
    Values order by variant first (Token before ExternalContract), then by
    symbol code or address bytes.
    """
    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls is DexShare:
            raise TypeError("DexShare cannot be instantiated; use DexShare.Token or DexShare.ExternalContract")
        return super().__new__(cls)

    def _sort_key(self) -> Tuple[int, Any]:
        raise NotImplementedError

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, DexShare):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def to_currency_id(self) -> CurrencyId:
        """Reconstitute this side as a standalone CurrencyId."""
        raise NotImplementedError

    @staticmethod
    def from_currency_id(currency_id: CurrencyId) -> DexShare:
        """
        Convert a Token or ExternalContract CurrencyId into a DexShare side.

        Raises:
            ValueError: If currency_id is a Pair (pairs never nest).
        """
        if isinstance(currency_id, Token):
            return DexShareToken(currency_id.symbol)
        if isinstance(currency_id, ExternalContract):
            return DexShareExternalContract(currency_id.address)
        raise ValueError(f"{currency_id!r} cannot be one side of a pair")


@dataclass(frozen=True, slots=True)
class DexShareToken(DexShare):
    """Pair side backed by a registered token symbol."""
    symbol: TokenSymbol

    def __post_init__(self):
        _check_symbol(self.symbol)

    def _sort_key(self) -> Tuple[int, Any]:
        return (0, int(self.symbol))

    def to_currency_id(self) -> CurrencyId:
        return Token(self.symbol)

    def __repr__(self) -> str:
        return f"Token({self.symbol.name})"


@dataclass(frozen=True, slots=True)
class DexShareExternalContract(DexShare):
    """Pair side backed by an externally deployed contract."""
    address: bytes

    def __post_init__(self):
        object.__setattr__(self, 'address', parse_address(self.address))

    def _sort_key(self) -> Tuple[int, Any]:
        return (1, self.address)

    def to_currency_id(self) -> CurrencyId:
        return ExternalContract(self.address)

    def __repr__(self) -> str:
        return f"ExternalContract({format_address(self.address)})"


# The only permitted pair sides.
_DEX_SHARE_VARIANTS = (DexShareToken, DexShareExternalContract)


# ============================================================================
# CURRENCY ID
# ============================================================================

@total_ordering
class CurrencyId:
    """
    Identifier of an asset circulating on the ledger.

    Exactly three variants exist:
    - CurrencyId.Token(symbol): a plain registered asset
    - CurrencyId.Pair(left, right): a liquidity-pool share between two assets.
      The sides are ordered: Pair(a, b) and Pair(b, a) are different identifiers.
    - CurrencyId.ExternalContract(address): an asset managed by an external contract

    Values are immutable and hashable. They order by variant (Token, Pair,
    ExternalContract), then by payload.

    Example:
        >>> aca = CurrencyId.Token(TokenSymbol.ACA)
        >>> dot = CurrencyId.Token(TokenSymbol.DOT)
        >>> lp = join_pair(aca, dot)
        >>> lp.split_pair() == (aca, dot)
        True
        >>> lp.decimals()
        12
    """
    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls is CurrencyId:
            raise TypeError("CurrencyId cannot be instantiated; use Token, Pair or ExternalContract")
        return super().__new__(cls)

    def _sort_key(self) -> Tuple[int, Any]:
        raise NotImplementedError

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, CurrencyId):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    # Variant predicates

    def is_token(self) -> bool:
        return isinstance(self, Token)

    def is_pair(self) -> bool:
        return isinstance(self, Pair)

    def is_external_contract(self) -> bool:
        return isinstance(self, ExternalContract)

    # Pair composition

    def split_pair(self) -> Optional[Tuple[CurrencyId, CurrencyId]]:
        """See split_pair()."""
        return split_pair(self)

    @staticmethod
    def join_pair(left: CurrencyId, right: CurrencyId) -> Optional[CurrencyId]:
        """See join_pair()."""
        return join_pair(left, right)

    # Precision and binary forms

    def decimals(self) -> Optional[int]:
        """Decimal places of this currency, or None if not known locally."""
        from .decimals import decimals
        return decimals(self)

    def to_bytes32(self) -> bytes:
        """Encode into the 32-byte address-shaped representation."""
        from .codec import encode_bytes32
        return encode_bytes32(self)

    def to_u32(self) -> int:
        """Encode into the compact 4-byte numeric index (lossy, one-way)."""
        from .codec import to_u32
        return to_u32(self)

    @staticmethod
    def from_bytes32(data: Union[bytes, bytearray, memoryview]) -> CurrencyId:
        """Decode a 32-byte representation. Raises CurrencyDecodeError."""
        from .codec import decode_bytes32
        return decode_bytes32(data)


@dataclass(frozen=True, slots=True)
class Token(CurrencyId):
    """A registered token, identified by its symbol."""
    symbol: TokenSymbol

    def __post_init__(self):
        _check_symbol(self.symbol)

    def _sort_key(self) -> Tuple[int, Any]:
        return (0, int(self.symbol))

    def __repr__(self) -> str:
        return f"Token({self.symbol.name})"


@dataclass(frozen=True, slots=True)
class Pair(CurrencyId):
    """
    Share of a liquidity pool between two assets.

    Both sides are DexShare values, so a Pair can never contain another Pair.
    Use join_pair() to build one from two CurrencyId values.
    """
    left: DexShare
    right: DexShare

    def __post_init__(self):
        for side, value in (("left", self.left), ("right", self.right)):
            if not isinstance(value, _DEX_SHARE_VARIANTS):
                raise ValueError(
                    f"Pair {side} side must be DexShare.Token or DexShare.ExternalContract, "
                    f"got {type(value).__name__}"
                )

    def _sort_key(self) -> Tuple[int, Any]:
        return (1, (self.left._sort_key(), self.right._sort_key()))

    def __repr__(self) -> str:
        return f"Pair({self.left!r}, {self.right!r})"


@dataclass(frozen=True, slots=True)
class ExternalContract(CurrencyId):
    """
    An asset managed by an externally deployed contract.

    The address is stored as 20 raw bytes; hex strings are accepted on construction.
    """
    address: bytes

    def __post_init__(self):
        object.__setattr__(self, 'address', parse_address(self.address))

    def _sort_key(self) -> Tuple[int, Any]:
        return (2, self.address)

    def __repr__(self) -> str:
        return f"ExternalContract({format_address(self.address)})"


# Variant namespaces: CurrencyId.Token(...), DexShare.ExternalContract(...)
CurrencyId.Token = Token
CurrencyId.Pair = Pair
CurrencyId.ExternalContract = ExternalContract
DexShare.Token = DexShareToken
DexShare.ExternalContract = DexShareExternalContract


# ============================================================================
# PAIR COMPOSITION
# ============================================================================

def split_pair(currency_id: CurrencyId) -> Optional[Tuple[CurrencyId, CurrencyId]]:
    """
    Split a Pair into its two underlying currencies.

    Each side comes back as a Token or ExternalContract CurrencyId.

    Returns:
        (left, right) for a Pair, None for any other variant.
    """
    if not isinstance(currency_id, Pair):
        return None
    return currency_id.left.to_currency_id(), currency_id.right.to_currency_id()


def join_pair(left: CurrencyId, right: CurrencyId) -> Optional[CurrencyId]:
    """
    Build a Pair from two underlying currencies.

    Inverse of split_pair(): split_pair(join_pair(a, b)) == (a, b).

    Returns:
        The Pair, or None if either input is itself a Pair.
    """
    if isinstance(left, Pair) or isinstance(right, Pair):
        return None
    return Pair(DexShare.from_currency_id(left), DexShare.from_currency_id(right))
