"""
test_core_types.py - Unit tests for core data structures

Tests:
- Address helpers: parsing, formatting, validation
- DexShare: creation, validation, conversion to/from CurrencyId
- CurrencyId: variants, predicates, immutability, hashing, ordering
- Pair composition: split_pair, join_pair
"""

import dataclasses

import pytest

from currencies import (
    CurrencyId, Token, Pair, ExternalContract,
    DexShare, DexShareToken, DexShareExternalContract,
    TokenSymbol, split_pair, join_pair,
    parse_address, format_address,
    ACA, AUSD, DOT, KAR,
)


class TestAddressHelpers:
    """Tests for address parsing and formatting."""

    def test_parse_raw_bytes(self, address_11):
        assert parse_address(address_11) == address_11

    def test_parse_bytearray(self, address_11):
        assert parse_address(bytearray(address_11)) == address_11

    def test_parse_hex_with_prefix(self, address_erc20):
        assert parse_address("0x5dddfce53ee040d9eb21afbc0ae1bb4dbb0ba643") == address_erc20

    def test_parse_hex_without_prefix_upper(self, address_erc20):
        assert parse_address("5DDDFCE53EE040D9EB21AFBC0AE1BB4DBB0BA643") == address_erc20

    @pytest.mark.parametrize("value", [
        b"\x11" * 19,
        b"\x11" * 21,
        "0x" + "11" * 19,
        "0x" + "zz" * 20,
        "0x" + "1 " * 20,
        20,
        None,
    ])
    def test_parse_invalid(self, value):
        with pytest.raises(ValueError):
            parse_address(value)

    def test_format(self, address_erc20):
        assert format_address(address_erc20) == "0x5dddfce53ee040d9eb21afbc0ae1bb4dbb0ba643"


class TestDexShare:
    """Tests for pair sides."""

    def test_token_side(self):
        share = DexShareToken(TokenSymbol.ACA)
        assert share.symbol is TokenSymbol.ACA
        assert share.to_currency_id() == ACA

    def test_external_side_normalizes_hex(self, address_11):
        share = DexShareExternalContract("0x" + "11" * 20)
        assert share.address == address_11
        assert share.to_currency_id() == ExternalContract(address_11)

    def test_variant_namespace(self):
        assert DexShare.Token is DexShareToken
        assert DexShare.ExternalContract is DexShareExternalContract

    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError, match="DexShare.Token or DexShare.ExternalContract"):
            DexShare()

    def test_token_side_requires_symbol(self):
        with pytest.raises(ValueError, match="TokenSymbol"):
            DexShareToken(0)

    def test_from_currency_id(self, erc20):
        assert DexShare.from_currency_id(DOT) == DexShareToken(TokenSymbol.DOT)
        assert DexShare.from_currency_id(erc20) == DexShareExternalContract(erc20.address)

    def test_from_pair_raises(self, aca_dot):
        with pytest.raises(ValueError, match="cannot be one side"):
            DexShare.from_currency_id(aca_dot)

    def test_side_is_not_currency_id(self):
        """A pair side and a currency with the same payload are different types."""
        assert DexShareToken(TokenSymbol.ACA) != ACA

    def test_ordering(self, address_11):
        shares = [
            DexShareExternalContract(address_11),
            DexShareToken(TokenSymbol.KAR),
            DexShareToken(TokenSymbol.ACA),
        ]
        assert sorted(shares) == [
            DexShareToken(TokenSymbol.ACA),
            DexShareToken(TokenSymbol.KAR),
            DexShareExternalContract(address_11),
        ]


class TestCurrencyIdVariants:
    """Tests for CurrencyId construction and predicates."""

    def test_variant_namespace(self):
        assert CurrencyId.Token is Token
        assert CurrencyId.Pair is Pair
        assert CurrencyId.ExternalContract is ExternalContract

    def test_token_predicates(self):
        assert ACA.is_token()
        assert not ACA.is_pair()
        assert not ACA.is_external_contract()

    def test_pair_predicates(self, aca_dot):
        assert aca_dot.is_pair()
        assert not aca_dot.is_token()
        assert not aca_dot.is_external_contract()

    def test_external_predicates(self, erc20):
        assert erc20.is_external_contract()
        assert not erc20.is_token()
        assert not erc20.is_pair()

    def test_token_requires_symbol(self):
        with pytest.raises(ValueError, match="TokenSymbol"):
            Token(2)

    def test_pair_rejects_currency_sides(self):
        """Pairs are built from DexShare sides, so nesting is impossible."""
        with pytest.raises(ValueError, match="DexShare"):
            Pair(ACA, DexShareToken(TokenSymbol.DOT))
        with pytest.raises(ValueError, match="DexShare"):
            Pair(DexShareToken(TokenSymbol.DOT), join_pair(ACA, DOT))

    def test_pair_rejects_unknown_share_variant(self):
        """Only the two DexShare variants may be pair sides."""
        class OtherShare(DexShare):
            __slots__ = ()

        with pytest.raises(ValueError, match="DexShare.Token or DexShare.ExternalContract"):
            Pair(OtherShare(), DexShareToken(TokenSymbol.DOT))
        with pytest.raises(ValueError, match="right side"):
            Pair(DexShareToken(TokenSymbol.DOT), OtherShare())

    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError, match="Token, Pair or ExternalContract"):
            CurrencyId()

    def test_external_contract_validates_length(self):
        with pytest.raises(ValueError):
            ExternalContract(b"\x00" * 32)

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ACA.symbol = TokenSymbol.DOT

    def test_hashable(self, aca_dot, erc20):
        balances = {ACA: 1, aca_dot: 2, erc20: 3}
        assert balances[Token(TokenSymbol.ACA)] == 1
        assert balances[join_pair(ACA, DOT)] == 2
        assert balances[ExternalContract(erc20.address)] == 3

    def test_pair_sides_are_ordered(self):
        assert join_pair(ACA, DOT) != join_pair(DOT, ACA)

    def test_pair_sides_may_repeat(self):
        same = join_pair(ACA, ACA)
        assert same.left == same.right

    def test_repr(self, address_11):
        assert repr(ACA) == "Token(ACA)"
        assert repr(join_pair(ACA, DOT)) == "Pair(Token(ACA), Token(DOT))"
        assert repr(ExternalContract(address_11)) == f"ExternalContract(0x{'11' * 20})"


class TestCurrencyIdOrdering:
    """CurrencyId values order by variant, then payload."""

    def test_variant_order(self, aca_dot, erc20):
        assert sorted([erc20, aca_dot, KAR]) == [KAR, aca_dot, erc20]

    def test_token_order_by_code(self):
        assert sorted([KAR, DOT, ACA, AUSD]) == [ACA, AUSD, DOT, KAR]

    def test_pair_order(self):
        assert join_pair(ACA, KAR) < join_pair(AUSD, ACA)
        assert join_pair(ACA, DOT) < join_pair(ACA, KAR)

    def test_le_ge(self):
        assert ACA <= ACA
        assert KAR >= DOT

    def test_not_comparable_with_other_types(self):
        with pytest.raises(TypeError):
            ACA < 0


class TestPairComposition:
    """Tests for split_pair and join_pair."""

    def test_join_tokens(self):
        pair = join_pair(ACA, DOT)
        assert pair == Pair(DexShareToken(TokenSymbol.ACA), DexShareToken(TokenSymbol.DOT))

    def test_join_token_and_external(self, erc20):
        pair = join_pair(ACA, erc20)
        assert pair.right == DexShareExternalContract(erc20.address)

    def test_join_rejects_pair(self, aca_dot):
        assert join_pair(aca_dot, ACA) is None
        assert join_pair(ACA, aca_dot) is None
        assert join_pair(aca_dot, aca_dot) is None

    def test_split(self, aca_dot):
        assert split_pair(aca_dot) == (ACA, DOT)
        assert aca_dot.split_pair() == (ACA, DOT)

    def test_split_external_side(self, aca_erc20, erc20):
        assert split_pair(aca_erc20) == (ACA, erc20)

    def test_split_non_pair(self, erc20):
        assert split_pair(ACA) is None
        assert erc20.split_pair() is None

    def test_staticmethod_join(self):
        assert CurrencyId.join_pair(ACA, DOT) == join_pair(ACA, DOT)
