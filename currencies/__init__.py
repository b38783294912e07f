"""
currencies - Currency identifiers for a multi-asset ledger

One identifier type covers registered tokens, liquidity-pool shares and
externally deployed contract tokens, and converts to the 32-byte
address-shaped form used by the contract-execution environment.

Usage:
    from currencies import ACA, DOT, CurrencyId, join_pair, decode_bytes32

    lp = join_pair(ACA, DOT)             # Pair(Token(ACA), Token(DOT))
    lp.decimals()                        # 12, the finer of ACA (12) and DOT (10)

    raw = lp.to_bytes32()                # 32 bytes, byte 23 = 1
    assert decode_bytes32(raw) == lp

    usdc = CurrencyId.ExternalContract("0x" + "11" * 20)
    usdc.to_bytes32()                    # 12 zero bytes + the address
"""

# Core types
from .core import (
    CurrencyId,
    Token,
    Pair,
    ExternalContract,
    DexShare,
    DexShareToken,
    DexShareExternalContract,
    split_pair,
    join_pair,
    parse_address,
    format_address,
    CurrencyError,
    CurrencyDecodeError,
    UnknownSymbolCode,
    UnknownSymbolName,
    MalformedEncoding,
    ADDRESS_LENGTH,
    CURRENCY_ID_LENGTH,
    INDEX_LENGTH,
)

# Registry
from .symbols import (
    TokenSymbol,
    Ecosystem,
    SymbolInfo,
    SYMBOL_TABLE,
    RESERVED_CODES,
    get_info,
    currency_id_from_name,
    ACA, AUSD, DOT, LDOT, XBTC, RENBTC, POLKABTC, PLM, PHA, HDT, BCG,
    KAR, KUSD, KSM, LKSM, SDN, KILT,
)

# Precision
from .decimals import decimals, dex_share_decimals

# Binary forms
from .codec import encode_bytes32, decode_bytes32, to_u32

__all__ = [
    # Core
    'CurrencyId', 'Token', 'Pair', 'ExternalContract',
    'DexShare', 'DexShareToken', 'DexShareExternalContract',
    'split_pair', 'join_pair', 'parse_address', 'format_address',
    'CurrencyError', 'CurrencyDecodeError',
    'UnknownSymbolCode', 'UnknownSymbolName', 'MalformedEncoding',
    'ADDRESS_LENGTH', 'CURRENCY_ID_LENGTH', 'INDEX_LENGTH',
    # Registry
    'TokenSymbol', 'Ecosystem', 'SymbolInfo', 'SYMBOL_TABLE', 'RESERVED_CODES',
    'get_info', 'currency_id_from_name',
    'ACA', 'AUSD', 'DOT', 'LDOT', 'XBTC', 'RENBTC', 'POLKABTC', 'PLM', 'PHA', 'HDT', 'BCG',
    'KAR', 'KUSD', 'KSM', 'LKSM', 'SDN', 'KILT',
    # Precision
    'decimals', 'dex_share_decimals',
    # Binary forms
    'encode_bytes32', 'decode_bytes32', 'to_u32',
]

__version__ = '0.1.0'
