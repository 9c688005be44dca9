from __future__ import annotations

import enum

import idna

from pubsuffix.errors import InvalidDomain

ACE_PREFIX = "xn--"

# UTS #46 deviation characters and their transitional mapping.
DEVIATIONS = {
    "ß": "ss",
    "ς": "σ",
    "\u200c": "",
    "\u200d": "",
}


class IDNAOption(enum.IntFlag):
    """IDNA processing flags, numbered like the ICU ``IDNA_*`` constants."""

    DEFAULT = 0
    USE_STD3_RULES = 2
    NONTRANSITIONAL_TO_ASCII = 16
    NONTRANSITIONAL_TO_UNICODE = 32


def _remap(domain: str, option: int) -> str:
    std3_rules = bool(option & IDNAOption.USE_STD3_RULES)
    try:
        return idna.uts46_remap(domain, std3_rules=std3_rules)
    except (idna.IDNAError, UnicodeError) as exc:
        raise InvalidDomain.due_to_idna_error(domain, exc) from exc


def _apply_deviations(domain: str) -> str:
    for char, replacement in DEVIATIONS.items():
        domain = domain.replace(char, replacement)
    return domain


def is_transitional_different(domain: str, option: int = IDNAOption.DEFAULT) -> bool:
    mapped = _remap(domain, option)
    return any(char in mapped for char in DEVIATIONS)


def to_ascii(domain: str, option: int = IDNAOption.DEFAULT) -> str:
    if domain.isascii():
        return domain.lower()

    mapped = _remap(domain, option)
    if not option & IDNAOption.NONTRANSITIONAL_TO_ASCII:
        mapped = _apply_deviations(mapped)

    converted: list[str] = []
    for label in mapped.split("."):
        if label.isascii():
            converted.append(label)
            continue
        try:
            converted.append(idna.alabel(label).decode("ascii"))
        except (idna.IDNAError, UnicodeError) as exc:
            raise InvalidDomain.due_to_idna_error(domain, exc) from exc
    return ".".join(converted)


def to_unicode(domain: str, option: int = IDNAOption.DEFAULT) -> str:
    if ACE_PREFIX not in domain.lower():
        return domain

    converted: list[str] = []
    for label in domain.split("."):
        lowered = label.lower()
        if not lowered.startswith(ACE_PREFIX):
            converted.append(lowered)
            continue
        try:
            decoded = idna.ulabel(lowered)
        except (idna.IDNAError, UnicodeError) as exc:
            raise InvalidDomain.due_to_idna_error(domain, exc) from exc
        if not option & IDNAOption.NONTRANSITIONAL_TO_UNICODE:
            decoded = _apply_deviations(decoded)
        converted.append(decoded)
    return ".".join(converted)


def check_ace_labels(domain: str) -> None:
    """Raise ``InvalidDomain`` unless every ``xn--`` label decodes to a valid U-label."""
    for label in domain.split("."):
        if not label.startswith(ACE_PREFIX):
            continue
        try:
            idna.ulabel(label)
        except (idna.IDNAError, UnicodeError) as exc:
            raise InvalidDomain.due_to_idna_error(domain, exc) from exc
