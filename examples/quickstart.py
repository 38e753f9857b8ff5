"""Quickstart example for identlex.

This example demonstrates validating identifiers and reading the
structured errors returned on failure.

Note: parse functions never raise on bad input. Always check the errors
tuple before using the value.
"""

import logging

from identlex import (
    format_uuid,
    is_nil_uuid,
    parse_boolean,
    parse_ipv4,
    parse_ipv6,
    parse_isbn,
    parse_mac,
    parse_uuid,
)
from identlex.diagnostics import DiagnosticFormatter, ErrorCategory, OutputFormat

# Library logs go through the standard logging module; show them here.
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

# Example 1: IP addresses
print("=" * 50)
print("Example 1: IP Addresses")
print("=" * 50)

address, errors = parse_ipv4("192.168.1.1")
if address is not None:
    print(address.kind, address.value)
# Output: ip_v4 192.168.1.1

address, errors = parse_ipv4("1922.168.1.1")
print(errors[0])
# Output: Expected "." at position 4 but found "2"
print(errors[0].format_error())

address, errors = parse_ipv6("2001::8a2e:0370:7334")
print(errors[0])
# Output: Expected a hex digit at position 6 but found ":"

# Example 2: MAC addresses
print("\n" + "=" * 50)
print("Example 2: MAC Addresses")
print("=" * 50)

for candidate in ("00:1a:2b:3c:4d:5e", "001a.2b3c.4d5e", "00-1a-2b-3c-4d-5e-6f-70"):
    mac, _ = parse_mac(candidate)
    if mac is not None:
        print(f"{candidate:26} {mac.family:6} {mac.notation}")

# Example 3: UUIDs
print("\n" + "=" * 50)
print("Example 3: UUIDs")
print("=" * 50)

uuid, _ = parse_uuid("02357C30-AFE7-11E4-AB7D-12E3F512A338")
if uuid is not None:
    print(format_uuid(uuid))
    # Output: 02357c30-afe7-11e4-ab7d-12e3f512a338
    print(is_nil_uuid(uuid))
    # Output: False

# Example 4: ISBN - malformed vs. well-formed but invalid
print("\n" + "=" * 50)
print("Example 4: ISBN")
print("=" * 50)

for candidate in ("978-0-306-40615-7", "978-0-306-40615-8", "978-0-306-4061"):
    value, errors = parse_isbn(candidate)
    if not errors:
        print(f"{candidate}: valid")
    elif errors[0].category is ErrorCategory.SEMANTIC:
        print(f"{candidate}: well-formed but invalid ({errors[0]})")
    else:
        print(f"{candidate}: malformed ({errors[0]})")

# Example 5: Boolean tokens and JSON diagnostics
print("\n" + "=" * 50)
print("Example 5: Boolean Tokens")
print("=" * 50)

json_formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
for candidate in ("yes", "off", "yess"):
    value, errors = parse_boolean(candidate)
    if errors and errors[0].diagnostic is not None:
        print(candidate, json_formatter.format(errors[0].diagnostic))
    else:
        print(candidate, value)
