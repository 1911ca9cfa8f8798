"""Address parsing for ``"Display Name" <email@domain>`` strings.

The grammar is deliberately small: one bracket pair and one layer of
surrounding double or single quotes are stripped, nothing else. Hosts
that need full RFC 5322 parsing should hand in structured addresses.

Contents:
    * :class:`Address` - Host-side structured address.
    * :class:`AddressSpec` - Normalized ``{email, name?}`` pair sent on the wire.
    * :func:`extract_email` / :func:`extract_name` - String heuristics.
    * :func:`map_addresses`, :func:`map_from_address`, :func:`map_reply_to` -
      Normalizers for the message address fields.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

_BRACKETED_EMAIL = re.compile(r".*<(.*)>")
_LEADING_NAME = re.compile(r"(.*)<.*>")
_DOUBLE_QUOTES = re.compile(r'^"|"$')
_SINGLE_QUOTES = re.compile(r"^'|'$")


@dataclass(frozen=True, slots=True)
class Address:
    """Structured address as supplied by the host.

    Example:
        >>> Address(address="ops@example.com", name="Ops").name
        'Ops'
    """

    address: str
    name: str | None = None


@dataclass(frozen=True, slots=True)
class AddressSpec:
    """Normalized address in the vendor schema.

    Example:
        >>> AddressSpec(email="a@example.com").to_wire()
        {'email': 'a@example.com'}
        >>> AddressSpec(email="a@example.com", name="A").to_wire()
        {'email': 'a@example.com', 'name': 'A'}
    """

    email: str
    name: str | None = None

    def to_wire(self) -> dict[str, str]:
        """Return the JSON-ready mapping, omitting an absent name."""
        wire = {"email": self.email}
        if self.name is not None:
            wire["name"] = self.name
        return wire


AddressLike = str | Address | Mapping[str, Any]
"""Single address in any of the shapes a host may pass."""

AddressInput = AddressLike | Sequence[AddressLike] | None
"""Address field value: absent, single address, or ordered list."""


def extract_email(address: str) -> str:
    """Return the bracketed part of *address*, or the trimmed whole string.

    Examples:
        >>> extract_email('"Zapal" <hello@zapal.tech>')
        'hello@zapal.tech'
        >>> extract_email("  hello@zapal.tech ")
        'hello@zapal.tech'
        >>> extract_email("Name < spaced@example.com >")
        'spaced@example.com'
    """
    return _BRACKETED_EMAIL.sub(r"\1", address.strip(), count=1).strip()


def extract_name(address: str) -> str:
    """Return the display name preceding the bracket pair.

    One layer of double quotes, then one layer of single quotes, is removed.
    Without a bracket pair the trimmed input comes back (minus quotes).

    Examples:
        >>> extract_name('"Zapal" <hello@zapal.tech>')
        'Zapal'
        >>> extract_name("'Ops Team' <ops@example.com>")
        'Ops Team'
        >>> extract_name("hello@zapal.tech")
        'hello@zapal.tech'
        >>> extract_name("<hello@zapal.tech>")
        ''
    """
    name = _LEADING_NAME.sub(r"\1", address.strip(), count=1).strip()
    name = _DOUBLE_QUOTES.sub("", name).strip()
    return _SINGLE_QUOTES.sub("", name).strip()


def parse_address_string(address: str) -> AddressSpec:
    """Parse a free-form address string into an :class:`AddressSpec`.

    The name is dropped when extraction changed nothing (no bracket pair) or
    produced an empty string.

    Examples:
        >>> parse_address_string('"Zapal" <hello@zapal.tech>')
        AddressSpec(email='hello@zapal.tech', name='Zapal')
        >>> parse_address_string(" hello@zapal.tech ")
        AddressSpec(email='hello@zapal.tech', name=None)
    """
    name = extract_name(address)
    if not name or name == address.strip():
        return AddressSpec(email=extract_email(address))
    return AddressSpec(email=extract_email(address), name=name)


def normalize_address(address: Address | Mapping[str, Any]) -> AddressSpec:
    """Normalize a structured address, dropping a name equal to the address.

    Examples:
        >>> normalize_address(Address(address="a@example.com", name="a@example.com"))
        AddressSpec(email='a@example.com', name=None)
        >>> normalize_address({"address": "a@example.com", "name": "A"})
        AddressSpec(email='a@example.com', name='A')
    """
    if isinstance(address, Address):
        raw_address, raw_name = address.address, address.name
    else:
        raw_address = str(address.get("address") or "")
        raw_name = address.get("name")
    name = None if not raw_name or raw_name == raw_address else str(raw_name)
    return AddressSpec(email=extract_email(raw_address), name=name)


def _map_one(address: AddressLike) -> AddressSpec:
    if isinstance(address, str):
        return parse_address_string(address)
    return normalize_address(address)


def map_addresses(addresses: AddressInput) -> list[AddressSpec]:
    """Normalize an address field into an ordered list.

    Examples:
        >>> map_addresses(None)
        []
        >>> [a.email for a in map_addresses(["a@example.com", Address("b@example.com", "B")])]
        ['a@example.com', 'b@example.com']
    """
    if not addresses:
        return []
    if isinstance(addresses, (str, Address, Mapping)):
        return [_map_one(addresses)]
    return [_map_one(address) for address in addresses]


def map_from_address(
    address: AddressLike | None,
    default_from_name: str,
    default_from_address: str,
) -> AddressSpec:
    """Resolve the sender, falling back to the configured default identity.

    Examples:
        >>> map_from_address(None, "Zapal", "hello@zapal.tech")
        AddressSpec(email='hello@zapal.tech', name='Zapal')
        >>> map_from_address("ops@example.com", "Zapal", "hello@zapal.tech")
        AddressSpec(email='ops@example.com', name=None)
    """
    if not address:
        return AddressSpec(email=default_from_address, name=default_from_name)
    return _map_one(address)


def map_reply_to(reply_to: AddressInput) -> AddressSpec | None:
    """Resolve a single reply-to address; lists contribute their first entry.

    Examples:
        >>> map_reply_to('"Support" <support@example.com>')
        AddressSpec(email='support@example.com', name='Support')
        >>> map_reply_to([]) is None
        True
    """
    if isinstance(reply_to, str):
        return parse_address_string(reply_to)
    if isinstance(reply_to, (Address, Mapping)):
        return normalize_address(reply_to)
    addresses = map_addresses(reply_to)
    return addresses[0] if addresses else None


__all__ = [
    "Address",
    "AddressInput",
    "AddressLike",
    "AddressSpec",
    "extract_email",
    "extract_name",
    "map_addresses",
    "map_from_address",
    "map_reply_to",
    "normalize_address",
    "parse_address_string",
]
