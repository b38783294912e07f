"""
serde.py - JSON serialization of currency identifiers

Identifiers serialize to externally tagged JSON values, the shape used by the
chain's RPC and metadata tooling:

    Token             {"Token": "ACA"}
    Pair              {"DexShare": [{"Token": "ACA"}, {"Erc20": "0x..."}]}
    ExternalContract  {"Erc20": "0x..."}

Deserialization treats input as untrusted and raises CurrencyDecodeError
subclasses for anything it does not recognize.
"""

from __future__ import annotations
import json
from typing import Any, Dict, Union

from .core import (
    CurrencyId,
    DexShare,
    DexShareExternalContract,
    DexShareToken,
    ExternalContract,
    MalformedEncoding,
    Pair,
    Token,
    format_address,
    parse_address,
)
from .symbols import TokenSymbol

TAG_TOKEN = "Token"
TAG_DEX_SHARE = "DexShare"
TAG_ERC20 = "Erc20"


def _share_to_json(share: DexShare) -> Dict[str, str]:
    if isinstance(share, DexShareToken):
        return {TAG_TOKEN: share.symbol.name}
    return {TAG_ERC20: format_address(share.address)}


def to_json_value(currency_id: CurrencyId) -> Dict[str, Any]:
    """Convert a currency into a JSON-compatible value."""
    if isinstance(currency_id, Token):
        return {TAG_TOKEN: currency_id.symbol.name}
    if isinstance(currency_id, Pair):
        return {TAG_DEX_SHARE: [_share_to_json(currency_id.left), _share_to_json(currency_id.right)]}
    if isinstance(currency_id, ExternalContract):
        return {TAG_ERC20: format_address(currency_id.address)}
    raise TypeError(f"Expected CurrencyId, got {type(currency_id).__name__}")


def _unwrap(value: Any) -> tuple:
    """Return (tag, payload) of an externally tagged value."""
    if not isinstance(value, dict) or len(value) != 1:
        raise MalformedEncoding(f"Expected a single-key object, got {value!r}")
    (tag, payload), = value.items()
    return tag, payload


def _parse_address(payload: Any) -> bytes:
    if not isinstance(payload, str):
        raise MalformedEncoding(f"Address must be a hex string, got {payload!r}")
    try:
        return parse_address(payload)
    except ValueError as e:
        raise MalformedEncoding(str(e)) from None


def _share_from_json(value: Any) -> DexShare:
    tag, payload = _unwrap(value)
    if tag == TAG_TOKEN:
        return DexShareToken(TokenSymbol.from_name(payload))
    if tag == TAG_ERC20:
        return DexShareExternalContract(_parse_address(payload))
    raise MalformedEncoding(f"Unknown pair side tag: {tag!r}")


def from_json_value(value: Any) -> CurrencyId:
    """
    Convert a JSON-compatible value back into a currency.

    Raises:
        MalformedEncoding: If the value has an unknown shape or tag.
        UnknownSymbolName: If a token ticker is not registered.
    """
    tag, payload = _unwrap(value)
    if tag == TAG_TOKEN:
        return Token(TokenSymbol.from_name(payload))
    if tag == TAG_DEX_SHARE:
        if not isinstance(payload, list) or len(payload) != 2:
            raise MalformedEncoding(f"DexShare needs exactly two sides, got {payload!r}")
        return Pair(_share_from_json(payload[0]), _share_from_json(payload[1]))
    if tag == TAG_ERC20:
        return ExternalContract(_parse_address(payload))
    raise MalformedEncoding(f"Unknown currency tag: {tag!r}")


def dumps(currency_id: CurrencyId) -> str:
    """Serialize a currency to a JSON string."""
    return json.dumps(to_json_value(currency_id), sort_keys=True)


def loads(text: Union[str, bytes]) -> CurrencyId:
    """Deserialize a currency from a JSON string or UTF-8 bytes."""
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedEncoding(f"Invalid JSON: {e}") from None
    except RecursionError:
        raise MalformedEncoding("Invalid JSON: nested too deeply") from None
    return from_json_value(value)
