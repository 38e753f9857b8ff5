"""Fuzz testing infrastructure for identlex.

This package contains differential property tests that compare the
recognizers against independent oracles (stdlib ipaddress and uuid,
regular expressions, direct checksum arithmetic).

Python 3.13+.
"""
