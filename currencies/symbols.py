"""
symbols.py - The built-in token symbol registry

The registry is a closed set fixed at import time. The TokenSymbol enum body is
the single declarative table: each member carries its code, display name and
decimals, and every lookup below is derived from it.

Code layout (one byte):
    Bit 8    : 0 for the Polkadot ecosystem, 1 for the Kusama ecosystem
    Bit 7    : Reserved
    Bits 6-1 : Token ID

Gaps in the numbering are reserved. A code is never reassigned to a different
token, because deployed contracts and stored identifiers depend on it.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Mapping, Tuple, Union

from .core import (
    ECOSYSTEM_BIT,
    Token,
    UnknownSymbolCode,
    UnknownSymbolName,
)


class Ecosystem(Enum):
    """Relay-chain ecosystem a token symbol belongs to, selected by the high code bit."""
    POLKADOT = "polkadot"
    KUSAMA = "kusama"


@dataclass(frozen=True, slots=True)
class SymbolInfo:
    """Static metadata of one registered token symbol."""
    code: int
    symbol: str
    display_name: str
    decimals: int


class TokenSymbol(IntEnum):
    """
    Registered token symbols.

    Each member is declared as (code, display name, decimals). The integer
    value is the code, which is also the wire byte and the sort key.
    """

    def __new__(cls, code: int, display_name: str, decimals: int):
        obj = int.__new__(cls, code)
        obj._value_ = code
        obj.display_name = display_name
        obj.decimals = decimals
        return obj

    # Polkadot ecosystem
    ACA = (0, "Acala", 12)
    AUSD = (1, "Acala Dollar", 12)
    DOT = (2, "Polkadot", 10)
    LDOT = (3, "Liquid DOT", 10)
    XBTC = (4, "ChainX BTC", 8)
    RENBTC = (5, "Ren Protocol BTC", 8)
    POLKABTC = (6, "PolkaBTC", 8)
    PLM = (7, "Plasm", 18)
    PHA = (8, "Phala", 12)
    HDT = (9, "HydraDX", 12)
    BCG = (11, "Bit.Country", 18)

    # Kusama ecosystem
    KAR = (128, "Karura", 12)
    KUSD = (129, "Karura Dollar", 12)
    KSM = (130, "Kusama", 12)
    LKSM = (131, "Liquid KSM", 12)
    SDN = (135, "Shiden", 18)
    KILT = (138, "Kilt", 15)

    @property
    def code(self) -> int:
        return int(self)

    @property
    def ecosystem(self) -> Ecosystem:
        return Ecosystem.KUSAMA if self.code & ECOSYSTEM_BIT else Ecosystem.POLKADOT

    @property
    def info(self) -> SymbolInfo:
        return SymbolInfo(self.code, self.name, self.display_name, self.decimals)

    @classmethod
    def from_code(cls, code: int) -> TokenSymbol:
        """
        Look up a symbol by its code.

        Raises:
            UnknownSymbolCode: If no symbol is assigned to the code.
        """
        if isinstance(code, bool) or not isinstance(code, int):
            raise UnknownSymbolCode(code)
        try:
            return cls(code)
        except ValueError:
            raise UnknownSymbolCode(code) from None

    @classmethod
    def from_name(cls, name: Union[str, bytes]) -> TokenSymbol:
        """
        Look up a symbol by its ticker, e.g. "ACA" or b"ACA". Case-sensitive.

        Raises:
            UnknownSymbolName: If no symbol has that ticker.
        """
        text = name
        if isinstance(name, (bytes, bytearray)):
            try:
                text = bytes(name).decode("ascii")
            except UnicodeDecodeError:
                raise UnknownSymbolName(name) from None
        if not isinstance(text, str) or text not in cls.__members__:
            raise UnknownSymbolName(name)
        return cls.__members__[text]


# Codes held back for Kusama counterparts of Polkadot tokens.
RESERVED_CODES: Mapping[int, str] = {
    132: "XBTC",
    133: "RENBTC",
    134: "POLKABTC",
    136: "PHA",
    137: "HDT",
    139: "BCG",
}

# Derived once at import; never mutated.
SYMBOL_TABLE: Tuple[SymbolInfo, ...] = tuple(symbol.info for symbol in TokenSymbol)


def get_info() -> List[Tuple[str, int]]:
    """Return (ticker, decimals) for every registered symbol, in declaration order."""
    return [(info.symbol, info.decimals) for info in SYMBOL_TABLE]


def currency_id_from_name(name: Union[str, bytes]) -> Token:
    """Build a Token CurrencyId from a ticker such as b"DOT"."""
    return Token(TokenSymbol.from_name(name))


# ============================================================================
# CURRENCY ID CONSTANTS
# ============================================================================

ACA = Token(TokenSymbol.ACA)
AUSD = Token(TokenSymbol.AUSD)
DOT = Token(TokenSymbol.DOT)
LDOT = Token(TokenSymbol.LDOT)
XBTC = Token(TokenSymbol.XBTC)
RENBTC = Token(TokenSymbol.RENBTC)
POLKABTC = Token(TokenSymbol.POLKABTC)
PLM = Token(TokenSymbol.PLM)
PHA = Token(TokenSymbol.PHA)
HDT = Token(TokenSymbol.HDT)
BCG = Token(TokenSymbol.BCG)
KAR = Token(TokenSymbol.KAR)
KUSD = Token(TokenSymbol.KUSD)
KSM = Token(TokenSymbol.KSM)
LKSM = Token(TokenSymbol.LKSM)
SDN = Token(TokenSymbol.SDN)
KILT = Token(TokenSymbol.KILT)
