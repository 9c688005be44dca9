from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pubsuffix.errors import InvalidDomain, UnableToResolveDomain
from pubsuffix.host.idna_codec import ACE_PREFIX, IDNAOption, to_ascii, to_unicode
from pubsuffix.host.parser import parse_labels


class Section(str, Enum):
    ICANN = "ICANN_DOMAINS"
    PRIVATE = "PRIVATE_DOMAINS"
    UNKNOWN = ""


def _resolve_section(section: Any, content: str | None) -> Section:
    try:
        resolved = Section(section)
    except ValueError as exc:
        raise UnableToResolveDomain(section) from exc
    if content is None:
        return Section.UNKNOWN
    return resolved


def _join_labels(labels: tuple[str, ...]) -> str | None:
    if not labels:
        return None
    content = ".".join(reversed(labels))
    if labels[0] == "":
        raise InvalidDomain.due_to_invalid_public_suffix(content)
    return content


@dataclass(frozen=True)
class PublicSuffix:
    """Public suffix of a domain name, tagged with its Public Suffix List section.

    Instances are built through the ``from_*`` classmethods, which validate the
    value; every transformation returns a new instance (or the same one when
    nothing changes).
    """

    content: str | None
    section: Section
    labels: tuple[str, ...]
    ascii_idna_option: IDNAOption = IDNAOption.DEFAULT
    unicode_idna_option: IDNAOption = IDNAOption.DEFAULT
    is_transitional_different: bool = False

    @classmethod
    def _create(
        cls,
        value: Any = None,
        section: Section | str = Section.UNKNOWN,
        ascii_idna_option: int = IDNAOption.DEFAULT,
        unicode_idna_option: int = IDNAOption.DEFAULT,
    ) -> PublicSuffix:
        parsed = parse_labels(value, ascii_idna_option, unicode_idna_option)
        content = _join_labels(parsed.labels)
        return cls(
            content=content,
            section=_resolve_section(section, content),
            labels=parsed.labels,
            ascii_idna_option=IDNAOption(ascii_idna_option),
            unicode_idna_option=IDNAOption(unicode_idna_option),
            is_transitional_different=parsed.is_transitional_different,
        )

    @classmethod
    def from_icann_section(
        cls,
        value: Any = None,
        ascii_idna_option: int = IDNAOption.DEFAULT,
        unicode_idna_option: int = IDNAOption.DEFAULT,
    ) -> PublicSuffix:
        return cls._create(value, Section.ICANN, ascii_idna_option, unicode_idna_option)

    @classmethod
    def from_private_section(
        cls,
        value: Any = None,
        ascii_idna_option: int = IDNAOption.DEFAULT,
        unicode_idna_option: int = IDNAOption.DEFAULT,
    ) -> PublicSuffix:
        return cls._create(value, Section.PRIVATE, ascii_idna_option, unicode_idna_option)

    @classmethod
    def from_unknown_section(
        cls,
        value: Any = None,
        ascii_idna_option: int = IDNAOption.DEFAULT,
        unicode_idna_option: int = IDNAOption.DEFAULT,
    ) -> PublicSuffix:
        return cls._create(value, Section.UNKNOWN, ascii_idna_option, unicode_idna_option)

    @classmethod
    def from_null(
        cls,
        ascii_idna_option: int = IDNAOption.DEFAULT,
        unicode_idna_option: int = IDNAOption.DEFAULT,
    ) -> PublicSuffix:
        return cls._create(None, Section.UNKNOWN, ascii_idna_option, unicode_idna_option)

    @classmethod
    def from_state(cls, state: Mapping[str, Any]) -> PublicSuffix:
        return cls._create(
            state.get("content"),
            state.get("section", Section.UNKNOWN),
            state.get("ascii_idna_option", IDNAOption.DEFAULT),
            state.get("unicode_idna_option", IDNAOption.DEFAULT),
        )

    def to_state(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "section": self.section.value,
            "ascii_idna_option": int(self.ascii_idna_option),
            "unicode_idna_option": int(self.unicode_idna_option),
        }

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            type(self)._create,
            (self.content, self.section, self.ascii_idna_option, self.unicode_idna_option),
        )

    def __len__(self) -> int:
        return len(self.labels)

    def __str__(self) -> str:
        return self.content or ""

    def label_count(self) -> int:
        return len(self.labels)

    def to_json(self) -> str | None:
        return self.content

    def is_resolvable(self) -> bool:
        return self.content is not None and not self.content.endswith(".") and len(self.labels) > 1

    def is_known(self) -> bool:
        return self.section is not Section.UNKNOWN

    def is_icann(self) -> bool:
        return self.section is Section.ICANN

    def is_private(self) -> bool:
        return self.section is Section.PRIVATE

    def to_ascii(self) -> PublicSuffix:
        if self.content is None:
            return self
        converted = to_ascii(self.content, self.ascii_idna_option)
        if converted == self.content:
            return self
        return self._create(converted, self.section, self.ascii_idna_option, self.unicode_idna_option)

    def to_unicode(self) -> PublicSuffix:
        # Only ACE labels can change; anything else is already in Unicode form.
        if self.content is None or ACE_PREFIX not in self.content:
            return self
        converted = to_unicode(self.content, self.unicode_idna_option)
        if converted == self.content:
            return self
        return self._create(converted, self.section, self.ascii_idna_option, self.unicode_idna_option)

    def with_ascii_idna_option(self, option: int) -> PublicSuffix:
        if option == self.ascii_idna_option:
            return self
        return self._create(self.content, self.section, option, self.unicode_idna_option)

    def with_unicode_idna_option(self, option: int) -> PublicSuffix:
        if option == self.unicode_idna_option:
            return self
        return self._create(self.content, self.section, self.ascii_idna_option, option)


def section_from_name(name: Section | str) -> Section | str:
    """Map ``icann``/``private``/``unknown`` to a section; other tags pass through untouched."""
    if isinstance(name, Section) or not isinstance(name, str):
        return name
    member = Section.__members__.get(name.strip().upper())
    return member if member is not None else name


def from_section(
    value: Any,
    section: Section | str,
    ascii_idna_option: int = IDNAOption.DEFAULT,
    unicode_idna_option: int = IDNAOption.DEFAULT,
) -> PublicSuffix:
    return PublicSuffix._create(value, section, ascii_idna_option, unicode_idna_option)
