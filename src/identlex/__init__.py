"""identlex - Grammar-based validation of textual identifiers.

Recognizes and canonicalizes IPv4/IPv6 addresses, MAC addresses, UUIDs,
ISBN-10/13 numbers and boolean tokens with a hand-rolled parser-combinator
core that reports exact error positions. Nothing here performs I/O or acts
on the identifiers it validates.

Public API:
    parse_ipv4, parse_ipv6, parse_mac, parse_uuid, parse_isbn, parse_boolean
        Each returns tuple[value | None, tuple[IdentError, ...]]
    format_uuid, is_nil_uuid, is_max_uuid - UUID helpers

Exceptions:
    IdentError - Base exception class
    IdentSyntaxError - Input does not match the grammar
    IdentSemanticError - Input matches the grammar but fails a check

Submodules:
    identlex.syntax - Cursor, parse results and combinators
    identlex.formats - Recognizers and their value types
    identlex.diagnostics - Diagnostic codes, templates and formatter
"""

from .diagnostics import IdentError, IdentSemanticError, IdentSyntaxError
from .formats.boolean import parse as parse_boolean
from .formats.ipv4 import parse as parse_ipv4
from .formats.ipv6 import parse as parse_ipv6
from .formats.isbn import parse as parse_isbn
from .formats.mac import parse as parse_mac
from .formats.uuid import format as format_uuid
from .formats.uuid import is_max as is_max_uuid
from .formats.uuid import is_nil as is_nil_uuid
from .formats.uuid import parse as parse_uuid

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("identlex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "IdentError",
    "IdentSemanticError",
    "IdentSyntaxError",
    "__version__",
    "format_uuid",
    "is_max_uuid",
    "is_nil_uuid",
    "parse_boolean",
    "parse_ipv4",
    "parse_ipv6",
    "parse_isbn",
    "parse_mac",
    "parse_uuid",
]
