"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of currency identifiers.
Any compliant implementation MUST pass these tests.

The tests are organized by invariant:
1. test_registry.py - Symbol codes decode to exactly the assigned symbols
2. test_wire_format.py - Bit-exact 32-byte layout and its round trip
3. test_pair_composition.py - split_pair / join_pair are inverses
4. test_precision.py - Decimals resolution rules
5. test_index.py - Compact 4-byte index behavior
6. test_serialization.py - JSON form round trip

These tests use hypothesis for property-based testing.
"""
