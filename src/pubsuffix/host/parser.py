from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable
from urllib.parse import unquote

from pubsuffix.errors import InvalidDomain
from pubsuffix.host.idna_codec import (
    IDNAOption,
    check_ace_labels,
    is_transitional_different,
    to_ascii,
    to_unicode,
)

# RFC 3986 reg-name characters; "." is kept as the label separator.
REG_NAME_RE = re.compile(r"[a-z0-9\-_~!$&'()*+,;=.]*", re.IGNORECASE)
GEN_DELIMS_RE = re.compile(r"[:/?#\[\]@ ]")

MAX_LABEL_LENGTH = 63
MAX_DOMAIN_LENGTH = 253


@runtime_checkable
class Host(Protocol):
    @property
    def content(self) -> str | None: ...


@dataclass(frozen=True)
class ParsedHost:
    labels: tuple[str, ...]
    is_transitional_different: bool = False


def _coerce(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise TypeError("The host must be a string or a stringable object, got bool")
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, Host):
        return value.content
    if isinstance(value, (bytes, bytearray)) or type(value).__str__ is object.__str__:
        raise TypeError(f"The host must be a string or a stringable object, got {type(value).__name__}")
    return str(value)


def _is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def _check_length(domain: str, ascii_domain: str) -> None:
    if len(ascii_domain.rstrip(".")) > MAX_DOMAIN_LENGTH:
        raise InvalidDomain.due_to_invalid_length(domain)
    if any(len(label) > MAX_LABEL_LENGTH for label in ascii_domain.split(".")):
        raise InvalidDomain.due_to_invalid_length(domain)


def _reverse_labels(domain: str) -> tuple[str, ...]:
    return tuple(reversed(domain.split(".")))


def parse_labels(
    value: Any,
    ascii_option: int = IDNAOption.DEFAULT,
    unicode_option: int = IDNAOption.DEFAULT,
) -> ParsedHost:
    """Split a host into labels, top-level label first.

    ``None`` gives no labels at all while the empty string gives a single
    empty label, which callers treat as malformed.
    """
    domain = _coerce(value)
    if domain is None:
        return ParsedHost(labels=())
    if domain == "":
        return ParsedHost(labels=("",))
    if _is_ipv4(domain):
        raise InvalidDomain.due_to_ipv4_host(domain)

    formatted = unquote(domain)
    if REG_NAME_RE.fullmatch(formatted):
        lowered = formatted.lower()
        _check_length(domain, lowered)
        check_ace_labels(lowered)
        return ParsedHost(labels=_reverse_labels(lowered))

    if formatted.isascii() or GEN_DELIMS_RE.search(formatted):
        raise InvalidDomain.due_to_invalid_characters(domain)

    ascii_domain = to_ascii(formatted, ascii_option)
    _check_length(domain, ascii_domain)
    unicode_domain = to_unicode(ascii_domain, unicode_option)
    return ParsedHost(
        labels=_reverse_labels(unicode_domain),
        is_transitional_different=is_transitional_different(formatted, ascii_option),
    )
