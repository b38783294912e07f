#!/usr/bin/env python3
"""
demo.py - Walkthrough: currency identifiers step by step

Each step builds on the previous one.

WHAT YOU'LL LEARN:
  1: The registry       - symbols, codes, decimals
  2: Identifiers        - Token, Pair, ExternalContract
  3: Pair composition   - join_pair / split_pair
  4: Precision          - decimals of pool shares
  5: The 32-byte form   - encode, decode, rejection of bad input
  6: The 4-byte index   - and why it is lossy

Run:
    python demo.py
"""

from currencies import (
    TokenSymbol, CurrencyId, get_info,
    join_pair, split_pair,
    encode_bytes32, decode_bytes32, to_u32,
    CurrencyDecodeError,
    ACA, DOT, KAR,
)


def header(step: int, title: str) -> None:
    print()
    print(f"── Step {step}: {title} " + "─" * (60 - len(title)))


def show_bytes(raw: bytes) -> str:
    return " ".join(raw[i:i + 4].hex() for i in range(0, len(raw), 4))


def main() -> None:
    header(1, "The registry")
    for name, decimals in get_info():
        symbol = TokenSymbol.from_name(name)
        print(f"  {symbol.code:3d}  {name:<9} {symbol.display_name:<17} {decimals:2d} dp  {symbol.ecosystem.value}")

    header(2, "Identifiers")
    usdc = CurrencyId.ExternalContract("0x" + "11" * 20)
    lp = join_pair(ACA, DOT)
    for currency_id in (KAR, lp, usdc):
        print(f"  {currency_id!r}")

    header(3, "Pair composition")
    print(f"  join_pair(ACA, DOT)      = {lp!r}")
    print(f"  split_pair(lp)           = {split_pair(lp)!r}")
    print(f"  join_pair(lp, ACA)       = {join_pair(lp, ACA)!r}   (pairs never nest)")

    header(4, "Precision")
    print(f"  ACA={ACA.decimals()}  DOT={DOT.decimals()}  ACA/DOT={lp.decimals()}")
    print(f"  ACA/external = {join_pair(ACA, usdc).decimals()}   (external precision is not known locally)")

    header(5, "The 32-byte form")
    for currency_id in (ACA, KAR, lp, usdc):
        raw = encode_bytes32(currency_id)
        print(f"  {show_bytes(raw)}  {decode_bytes32(raw)!r}")
    bad = bytes(23) + b"\x02" + bytes(8)
    try:
        decode_bytes32(bad)
    except CurrencyDecodeError as e:
        print(f"  discriminator 2 rejected: {type(e).__name__}: {e}")

    header(6, "The 4-byte index")
    print(f"  to_u32(KAR)           = {to_u32(KAR):#010x}")
    print(f"  to_u32(ACA/DOT)       = {to_u32(lp):#010x}   (only the right side survives)")
    print(f"  to_u32(external)      = {to_u32(usdc):#010x}   (address prefix)")


if __name__ == "__main__":
    main()
