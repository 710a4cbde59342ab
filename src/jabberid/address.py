"""JID parsing and validation.

A JID has the form ``[node "@"] domain ["/" resource]``
(e.g. ``alice@wonderland.lit/tea``). See RFC 6122 section 2.

Each part is limited to 1023 bytes of UTF-8. Only character-class exclusion
checks are applied to the parts; no stringprep profile is run. The domain is
lowercased (ASCII only), the node and resource keep their case.
"""

from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass, replace

from jabberid.errors import InvalidAddressError, InvalidAddressReason

logger = logging.getLogger(__name__)

# The node is only taken when an "@" comes before the first "/", so the
# resource may contain both separators verbatim.
_JID_RE = re.compile(
    r"(?:(?P<node>[^@/]*)@)??(?P<domain>[^@/]*)(?:/(?P<resource>.*))?",
    re.DOTALL,
)

_CONTROL = r"\x00-\x1f\x7f-\x9f"

# RFC 6122 appendix A (nodeprep prohibited output, ASCII subset).
_NODE_FORBIDDEN_RE = re.compile(rf"[{_CONTROL} \"&'/:<>@]")
# RFC 3454 appendix C (nameprep).
_DOMAIN_FORBIDDEN_RE = re.compile(rf"[{_CONTROL} ]")
# RFC 6122 appendix B (resourceprep).
_RESOURCE_FORBIDDEN_RE = re.compile(rf"[{_CONTROL}]")

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
# Trimmed before the empty node/resource checks; NUL counts as blank.
_ASCII_WHITESPACE = " \t\n\v\f\r\0"

MAX_PART_BYTES = 1023
MAX_JID_BYTES = 3 * MAX_PART_BYTES + 2


def _byte_length(part: str | None) -> int:
    return len(part.encode("utf-8")) if part is not None else 0


def _validate(node: str | None, domain: str, resource: str | None) -> None:
    """Raise :class:`InvalidAddressError` for the first rule the parts break."""
    if any(_byte_length(part) > MAX_PART_BYTES for part in (node, domain, resource)):
        raise InvalidAddressError(InvalidAddressReason.PART_TOO_LONG)
    if node is not None and not node.strip(_ASCII_WHITESPACE):
        raise InvalidAddressError(InvalidAddressReason.EMPTY_NODE)
    if node is not None and _NODE_FORBIDDEN_RE.search(node):
        raise InvalidAddressError(InvalidAddressReason.INVALID_NODE_CHARACTERS)
    if resource is not None and not resource.strip(_ASCII_WHITESPACE):
        raise InvalidAddressError(InvalidAddressReason.EMPTY_RESOURCE)
    if resource is not None and _RESOURCE_FORBIDDEN_RE.search(resource):
        raise InvalidAddressError(InvalidAddressReason.INVALID_RESOURCE_CHARACTERS)
    if domain == "" and (node is not None or resource is not None):
        raise InvalidAddressError(InvalidAddressReason.EMPTY_DOMAIN)
    if _DOMAIN_FORBIDDEN_RE.search(domain):
        raise InvalidAddressError(InvalidAddressReason.INVALID_DOMAIN_CHARACTERS)


@dataclass(frozen=True, eq=False)
class Address:
    """A validated JID.

    Constructing an ``Address`` directly validates the three parts as given,
    without splitting.  Use :meth:`parse` for a raw ``node@domain/resource``
    string.  ``None`` means a part is absent, which is not the same as an
    empty string: an empty node or resource is rejected.

    Equality, ordering and hashing use the lowercased string form, so
    ``Foo@Bar.com`` and ``foo@bar.com`` are interchangeable as mapping keys.
    """

    node: str | None
    domain: str | None
    resource: str | None = None

    def __post_init__(self) -> None:
        domain = self.domain if self.domain is not None else ""
        _validate(self.node, domain, self.resource)
        object.__setattr__(self, "domain", domain.translate(_ASCII_LOWER))

    # -- construction -------------------------------------------------------

    @classmethod
    def parse(cls, raw: str | Address | None) -> Address:
        """Parse and validate a raw JID string.

        ``None`` is read as the empty JID.  An existing :class:`Address` is
        returned unchanged.

        Raises:
            InvalidAddressError: If *raw* cannot be split or a part is invalid.
        """
        if isinstance(raw, Address):
            return raw
        text = raw if raw is not None else ""
        m = _JID_RE.fullmatch(text)
        if not m:
            logger.debug("Rejected JID %r: %s", text, InvalidAddressReason.MALFORMED.value)
            raise InvalidAddressError(InvalidAddressReason.MALFORMED, text)
        try:
            return cls(m.group("node"), m.group("domain"), m.group("resource"))
        except InvalidAddressError as exc:
            logger.debug("Rejected JID %r: %s", text, exc.reason.value)
            raise InvalidAddressError(exc.reason, text) from None

    @classmethod
    def from_parts(
        cls,
        node: str | Address | None,
        domain: str | None = None,
        resource: str | None = None,
    ) -> Address:
        """Build an address from up to three parts.

        With only *node* given it is treated as a full raw JID and parsed,
        so ``from_parts("alice@wonderland.lit")`` and
        ``from_parts("alice", "wonderland.lit")`` are equal.  An existing
        :class:`Address` passed as *node* is returned unchanged.
        """
        if isinstance(node, Address):
            return node
        if domain is None and resource is None:
            return cls.parse(node)
        return cls(node, domain, resource)

    @classmethod
    def is_valid(
        cls,
        node: str | Address | None,
        domain: str | None = None,
        resource: str | None = None,
    ) -> bool:
        """Return True if :meth:`from_parts` accepts the arguments."""
        try:
            cls.from_parts(node, domain, resource)
        except InvalidAddressError:
            return False
        return True

    # -- rendering ----------------------------------------------------------

    def to_string(self) -> str:
        """Return the JID as a string.

        One of ``""``, ``domain``, ``node@domain``, ``domain/resource`` or
        ``node@domain/resource``.
        """
        s = self.domain or ""
        if self.node is not None:
            s = f"{self.node}@{s}"
        if self.resource is not None:
            s = f"{s}/{self.resource}"
        return s

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    # -- derived addresses and queries ----------------------------------------

    def bare(self) -> Address:
        """Return a new address without the resource part."""
        return self.with_resource(None)

    def with_resource(self, resource: str | None) -> Address:
        """Return a copy of this address with *resource*, validated again."""
        return replace(self, resource=resource)

    def is_bare(self) -> bool:
        return self.resource is None

    def is_domain_only(self) -> bool:
        """True for a non-empty address made of the domain alone."""
        return not self.is_empty() and self.to_string() == self.domain

    def is_empty(self) -> bool:
        """True for the empty JID ``""``."""
        return self.to_string() == ""

    # -- comparison -----------------------------------------------------------

    def _key(self) -> str:
        return self.to_string().lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())


def parse_address(raw: str | Address | None) -> Address:
    """Parse and validate a JID string.

    Raises:
        InvalidAddressError: If *raw* is not a valid JID.
    """
    return Address.parse(raw)


def is_valid_address(
    node: str | Address | None,
    domain: str | None = None,
    resource: str | None = None,
) -> bool:
    """Return True if the arguments form a valid JID; never raises."""
    return Address.is_valid(node, domain, resource)
