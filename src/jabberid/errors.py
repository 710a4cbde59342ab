"""jabberid exception hierarchy.

All package-specific exceptions inherit from :class:`JabberIDError`.
"""

from __future__ import annotations

from enum import Enum


class InvalidAddressReason(str, Enum):
    """Why an address was rejected, in the order the checks run."""

    MALFORMED = "malformed"
    PART_TOO_LONG = "part_too_long"
    EMPTY_NODE = "empty_node"
    INVALID_NODE_CHARACTERS = "invalid_node_characters"
    EMPTY_RESOURCE = "empty_resource"
    INVALID_RESOURCE_CHARACTERS = "invalid_resource_characters"
    EMPTY_DOMAIN = "empty_domain"
    INVALID_DOMAIN_CHARACTERS = "invalid_domain_characters"


_MESSAGES = {
    InvalidAddressReason.MALFORMED: "jid is malformed",
    InvalidAddressReason.PART_TOO_LONG: "jid too long",
    InvalidAddressReason.EMPTY_NODE: "empty node",
    InvalidAddressReason.INVALID_NODE_CHARACTERS: "node contains invalid characters",
    InvalidAddressReason.EMPTY_RESOURCE: "empty resource",
    InvalidAddressReason.INVALID_RESOURCE_CHARACTERS: "resource contains invalid characters",
    InvalidAddressReason.EMPTY_DOMAIN: "empty domain",
    InvalidAddressReason.INVALID_DOMAIN_CHARACTERS: "domain contains invalid characters",
}


class JabberIDError(Exception):
    """Base exception for all jabberid errors."""


class InvalidAddressError(JabberIDError):
    """Raised when a JID fails parsing or validation.

    Attributes:
        reason: The first check that failed.
        raw: The input that was rejected, when it came from a single string.
    """

    def __init__(self, reason: InvalidAddressReason, raw: str | None = None) -> None:
        self.reason = reason
        self.raw = raw
        message = _MESSAGES[reason]
        if raw is not None:
            message = f"{message}: {raw!r}"
        super().__init__(message)


class ConfigError(JabberIDError):
    """Raised when a configuration value is invalid."""
