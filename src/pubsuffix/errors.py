from __future__ import annotations

from typing import Any


class PubSuffixError(Exception):
    """Base class for every error raised by pubsuffix."""


class InvalidDomain(PubSuffixError, ValueError):
    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value

    @classmethod
    def due_to_invalid_public_suffix(cls, public_suffix: str) -> InvalidDomain:
        return cls(f'The public suffix "{public_suffix}" is invalid', public_suffix)

    @classmethod
    def due_to_invalid_characters(cls, domain: str) -> InvalidDomain:
        return cls(f'The domain "{domain}" is invalid: it contains invalid characters', domain)

    @classmethod
    def due_to_idna_error(cls, domain: str, exc: Exception) -> InvalidDomain:
        return cls(f'The host "{domain}" is invalid: {exc}', domain)

    @classmethod
    def due_to_ipv4_host(cls, domain: str) -> InvalidDomain:
        return cls(f'The domain "{domain}" is invalid: this is an IPv4 host', domain)

    @classmethod
    def due_to_invalid_length(cls, domain: str) -> InvalidDomain:
        return cls(f'The domain "{domain}" is invalid: its length is out of bounds', domain)


class UnableToResolveDomain(PubSuffixError, LookupError):
    def __init__(self, section: Any) -> None:
        super().__init__(f'"{section}" is an unknown Public Suffix List section')
        self.value = section
