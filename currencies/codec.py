"""
codec.py - Binary representations of currency identifiers

Two representations are supported:

1. 32-byte address-shaped form (encode_bytes32 / decode_bytes32).
   Lets every CurrencyId live in the contract address space. Token and Pair
   values sit in the reserved system range (first 23 bytes zero); an
   external contract keeps its full 20-byte address in the low bytes.

   Token:             [0 x 23][0x00][00 00 00 code][00 00 00 00]
   Pair:              [0 x 23][0x01][left index  ][right index ]
   ExternalContract:  [0 x 12][address (20 bytes)             ]

   Pre-deployed contracts parse this layout, so it is a compatibility
   contract: changing it requires a migration of those contracts.

2. 4-byte numeric index (to_u32).
   Compact, one-way and lossy. There is no decoder.

Encoding is total over well-typed input. Decoding treats its input as
untrusted: anything that does not match a layout above raises a
CurrencyDecodeError subclass, and callers must reject it.
"""

from __future__ import annotations
from typing import Union

from .core import (
    ADDRESS_OFFSET,
    CURRENCY_ID_LENGTH,
    DISCRIMINATOR_OFFSET,
    INDEX_LENGTH,
    TAG_DEX_SHARE,
    TAG_TOKEN,
    CurrencyId,
    DexShare,
    DexShareToken,
    ExternalContract,
    MalformedEncoding,
    Pair,
    Token,
)
from .symbols import TokenSymbol

BytesLike = Union[bytes, bytearray, memoryview]

# Slices of the 32-byte form
_LEFT = slice(DISCRIMINATOR_OFFSET + 1, DISCRIMINATOR_OFFSET + 1 + INDEX_LENGTH)
_RIGHT = slice(_LEFT.stop, _LEFT.stop + INDEX_LENGTH)
_TOKEN_CODE = _LEFT.stop - 1


# ============================================================================
# 4-BYTE INDEX
# ============================================================================

def _index_bytes(currency_id: CurrencyId) -> bytes:
    """Big-endian 4-byte index of a Token or ExternalContract."""
    if isinstance(currency_id, Token):
        return currency_id.symbol.code.to_bytes(INDEX_LENGTH, "big")
    if isinstance(currency_id, ExternalContract):
        # TODO: replace truncation with a hash of the full address so distinct
        # contracts sharing a 4-byte prefix get distinct indexes.
        return currency_id.address[:INDEX_LENGTH]
    raise TypeError(f"Expected Token or ExternalContract, got {currency_id!r}")


def to_u32(currency_id: CurrencyId) -> int:
    """
    Encode a currency into its compact 4-byte numeric index.

    - Token: the symbol code in the low byte
    - ExternalContract: the first 4 address bytes (lossy)
    - Pair: both sides are written to the same 4 bytes and the right side
      overwrites the left, so only the right side is reflected in the
      result. Two pairs with the same right side share an index.

    Returns:
        An int in [0, 2**32).
    """
    if isinstance(currency_id, Pair):
        index = bytearray(INDEX_LENGTH)
        for side in (currency_id.left, currency_id.right):
            index[:] = _index_bytes(side.to_currency_id())
        return int.from_bytes(index, "big")
    return int.from_bytes(_index_bytes(currency_id), "big")


# ============================================================================
# 32-BYTE FORM
# ============================================================================

def encode_bytes32(currency_id: CurrencyId) -> bytes:
    """
    Encode a currency into its 32-byte address-shaped form.

    Every CurrencyId has exactly one encoding. A Pair side that is an
    external contract is written as its 4-byte index; decode_bytes32 cannot
    recover it.
    """
    out = bytearray(CURRENCY_ID_LENGTH)
    if isinstance(currency_id, Token):
        out[DISCRIMINATOR_OFFSET] = TAG_TOKEN
        out[_LEFT] = _index_bytes(currency_id)
    elif isinstance(currency_id, Pair):
        out[DISCRIMINATOR_OFFSET] = TAG_DEX_SHARE
        out[_LEFT] = _index_bytes(currency_id.left.to_currency_id())
        out[_RIGHT] = _index_bytes(currency_id.right.to_currency_id())
    elif isinstance(currency_id, ExternalContract):
        out[ADDRESS_OFFSET:] = currency_id.address
    else:
        raise TypeError(f"Expected CurrencyId, got {type(currency_id).__name__}")
    return bytes(out)


def _is_zero(chunk: bytes) -> bool:
    return not any(chunk)


def _decode_share(index: bytes) -> DexShare:
    # Only token sides can be recovered; an external contract side is
    # indistinguishable from a truncated address.
    if not _is_zero(index[:-1]):
        raise MalformedEncoding(
            f"Pair side {index.hex()} is not a token symbol"
        )
    return DexShareToken(TokenSymbol.from_code(index[-1]))


def decode_bytes32(data: BytesLike) -> CurrencyId:
    """
    Decode a 32-byte address-shaped form.

    Raises:
        MalformedEncoding: If the input is not 32 bytes or matches no layout.
        UnknownSymbolCode: If a token code is not assigned.
        TypeError: If data is not bytes-like.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes, got {type(data).__name__}")
    raw = bytes(data)
    if len(raw) != CURRENCY_ID_LENGTH:
        raise MalformedEncoding(
            f"Expected {CURRENCY_ID_LENGTH} bytes, got {len(raw)}"
        )

    if _is_zero(raw[:DISCRIMINATOR_OFFSET]):
        tag = raw[DISCRIMINATOR_OFFSET]
        left, right = raw[_LEFT], raw[_RIGHT]
        if tag == TAG_TOKEN:
            if not _is_zero(left[:-1]) or not _is_zero(right):
                raise MalformedEncoding(f"Invalid token padding: {raw.hex()}")
            return Token(TokenSymbol.from_code(raw[_TOKEN_CODE]))
        if tag == TAG_DEX_SHARE:
            return Pair(_decode_share(left), _decode_share(right))
        raise MalformedEncoding(f"Unknown discriminator {tag}: {raw.hex()}")

    if _is_zero(raw[:ADDRESS_OFFSET]):
        return ExternalContract(raw[ADDRESS_OFFSET:])

    raise MalformedEncoding(f"Not a currency id: {raw.hex()}")
