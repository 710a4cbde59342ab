"""jabberid -- Jabber ID (JID) parsing, validation and comparison.

Public API re-exports::

    from jabberid import Address, parse_address, InvalidAddressError
"""

__version__ = "0.1.0"

from jabberid.errors import (
    JabberIDError,
    InvalidAddressError,
    InvalidAddressReason,
    ConfigError,
)

from jabberid.address import (
    MAX_PART_BYTES,
    MAX_JID_BYTES,
    Address,
    parse_address,
    is_valid_address,
)

__all__ = [
    "__version__",
    # Errors
    "JabberIDError",
    "InvalidAddressError",
    "InvalidAddressReason",
    "ConfigError",
    # Address
    "MAX_PART_BYTES",
    "MAX_JID_BYTES",
    "Address",
    "parse_address",
    "is_valid_address",
]
