"""
conftest.py - Shared pytest fixtures for currency identifier tests

Provides common fixtures used across unit and conformance tests:
- Sample addresses (plain, reserved-range)
- Sample identifiers for every variant
- Byte helpers for building 32-byte inputs by hand
"""

import pytest

from currencies import (
    CurrencyId,
    ACA, AUSD, DOT, KAR, KSM,
    join_pair,
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def bytes32(**positions: int) -> bytes:
    """
    Build a 32-byte value that is zero except at the given positions.

    Example:
        bytes32(b23=1, b27=0, b31=2)  # Pair(ACA, DOT)
    """
    out = bytearray(32)
    for key, value in positions.items():
        out[int(key[1:])] = value
    return bytes(out)


@pytest.fixture
def make_bytes32():
    """The bytes32() helper, for tests that build wire inputs by hand."""
    return bytes32


# =============================================================================
# ADDRESS FIXTURES
# =============================================================================

@pytest.fixture
def address_11():
    """Twenty 0x11 bytes."""
    return bytes([0x11]) * 20


@pytest.fixture
def address_erc20():
    """A realistic-looking contract address."""
    return bytes.fromhex("5dddfce53ee040d9eb21afbc0ae1bb4dbb0ba643")


# =============================================================================
# IDENTIFIER FIXTURES
# =============================================================================

@pytest.fixture
def aca_dot():
    """Liquidity share of the ACA/DOT pool."""
    return join_pair(ACA, DOT)


@pytest.fixture
def erc20(address_erc20):
    return CurrencyId.ExternalContract(address_erc20)


@pytest.fixture
def aca_erc20(erc20):
    """Pair with one external contract side."""
    return join_pair(ACA, erc20)


@pytest.fixture
def sample_ids(aca_dot, erc20, aca_erc20):
    """One or more identifiers of every variant."""
    return [ACA, AUSD, DOT, KAR, KSM, aca_dot, join_pair(KAR, KSM), erc20, aca_erc20]

