from __future__ import annotations

import dataclasses
import pickle

import pytest

from pubsuffix.errors import InvalidDomain, UnableToResolveDomain
from pubsuffix.host.idna_codec import IDNAOption
from pubsuffix.models.public_suffix import PublicSuffix, Section, from_section, section_from_name

NONTRANSITIONAL = IDNAOption.NONTRANSITIONAL_TO_ASCII | IDNAOption.NONTRANSITIONAL_TO_UNICODE


def test_single_label_suffix_is_not_resolvable() -> None:
    suffix = PublicSuffix.from_icann_section("uk")
    assert suffix.content == "uk"
    assert suffix.label_count() == 1
    assert not suffix.is_resolvable()
    assert suffix.is_icann()


def test_two_label_icann_suffix() -> None:
    suffix = PublicSuffix.from_icann_section("co.uk")
    assert suffix.is_resolvable()
    assert suffix.content == "co.uk"
    assert suffix.labels == ("uk", "co")
    assert len(suffix) == 2
    assert suffix.is_icann()
    assert suffix.is_known()
    assert not suffix.is_private()
    assert str(suffix) == "co.uk"
    assert suffix.to_json() == "co.uk"


@pytest.mark.parametrize("value", ["com", "co.uk", "github.io", "s3.us-east-1.amazonaws.com"])
def test_content_is_labels_in_domain_order(value: str) -> None:
    suffix = PublicSuffix.from_unknown_section(value)
    assert suffix.content == ".".join(reversed(suffix.labels))


def test_private_section() -> None:
    suffix = PublicSuffix.from_private_section("github.io")
    assert suffix.is_private()
    assert suffix.is_known()
    assert suffix.section is Section.PRIVATE


def test_unknown_section() -> None:
    suffix = PublicSuffix.from_unknown_section("example")
    assert suffix.content == "example"
    assert not suffix.is_known()
    assert not suffix.is_icann()
    assert not suffix.is_private()


def test_from_null_is_empty() -> None:
    suffix = PublicSuffix.from_null()
    assert suffix.content is None
    assert suffix.labels == ()
    assert suffix.label_count() == 0
    assert not suffix.is_known()
    assert not suffix.is_resolvable()
    assert str(suffix) == ""
    assert suffix.to_json() is None


@pytest.mark.parametrize("factory", [PublicSuffix.from_icann_section, PublicSuffix.from_private_section])
def test_absent_suffix_forces_unknown_section(factory) -> None:
    suffix = factory(None)
    assert suffix.section is Section.UNKNOWN
    assert not suffix.is_known()


@pytest.mark.parametrize("value", ["", "com.", "co.uk."])
def test_empty_top_level_label_is_invalid(value: str) -> None:
    with pytest.raises(InvalidDomain) as excinfo:
        PublicSuffix.from_icann_section(value)
    assert excinfo.value.value == value


@pytest.mark.parametrize("section", ["ICANN", "icann", "BOGUS", None])
def test_unknown_section_tag_is_rejected(section) -> None:
    with pytest.raises(UnableToResolveDomain) as excinfo:
        from_section("co.uk", section)
    assert excinfo.value.value == section


def test_unknown_section_tag_is_rejected_for_absent_suffix() -> None:
    with pytest.raises(UnableToResolveDomain):
        from_section(None, "BOGUS")


def test_section_from_name() -> None:
    assert section_from_name("icann") is Section.ICANN
    assert section_from_name(" Private ") is Section.PRIVATE
    assert section_from_name("unknown") is Section.UNKNOWN
    assert section_from_name("PRIVATE_DOMAINS") == "PRIVATE_DOMAINS"
    assert from_section("co.uk", section_from_name("PRIVATE_DOMAINS")).is_private()


def test_invalid_hosts_are_rejected() -> None:
    with pytest.raises(InvalidDomain):
        PublicSuffix.from_icann_section("192.168.1.1")
    with pytest.raises(InvalidDomain):
        PublicSuffix.from_icann_section("co uk")


def test_value_is_lowercased() -> None:
    assert PublicSuffix.from_icann_section("CO.UK").content == "co.uk"


def test_accepts_another_suffix_as_value() -> None:
    private = PublicSuffix.from_private_section("co.uk")
    icann = PublicSuffix.from_icann_section(private)
    assert icann.content == "co.uk"
    assert icann.is_icann()


def test_instances_are_immutable() -> None:
    suffix = PublicSuffix.from_icann_section("co.uk")
    with pytest.raises(dataclasses.FrozenInstanceError):
        suffix.content = "com"  # type: ignore[misc]


def test_to_ascii_returns_same_instance_for_ascii_suffix() -> None:
    suffix = PublicSuffix.from_icann_section("example.com")
    assert suffix.to_ascii() is suffix


def test_to_ascii_on_null_returns_same_instance() -> None:
    suffix = PublicSuffix.from_null()
    assert suffix.to_ascii() is suffix
    assert suffix.to_unicode() is suffix


def test_to_ascii_converts_unicode_suffix() -> None:
    suffix = PublicSuffix.from_icann_section("рф")
    assert suffix.content == "рф"
    ascii_suffix = suffix.to_ascii()
    assert ascii_suffix.content == "xn--p1ai"
    assert ascii_suffix.is_icann()
    assert ascii_suffix.to_ascii() is ascii_suffix
    assert suffix.content == "рф"


def test_to_ascii_is_idempotent() -> None:
    suffix = PublicSuffix.from_private_section("公司.cn")
    assert suffix.to_ascii().to_ascii() == suffix.to_ascii()


def test_to_unicode_converts_ace_labels() -> None:
    suffix = PublicSuffix.from_icann_section("xn--55qx5d.cn", IDNAOption.USE_STD3_RULES)
    unicode_suffix = suffix.to_unicode()
    assert unicode_suffix.content == "公司.cn"
    assert unicode_suffix.content != suffix.content
    assert unicode_suffix.is_icann()
    assert unicode_suffix.is_resolvable()
    assert unicode_suffix.ascii_idna_option == IDNAOption.USE_STD3_RULES
    assert unicode_suffix.to_ascii().content == "xn--55qx5d.cn"


def test_to_unicode_without_ace_marker_returns_same_instance() -> None:
    suffix = PublicSuffix.from_icann_section("co.uk")
    assert suffix.to_unicode() is suffix


def test_transitional_processing_is_the_default() -> None:
    suffix = PublicSuffix.from_unknown_section("faß.de")
    assert suffix.content == "fass.de"
    assert suffix.is_transitional_different


def test_nontransitional_processing_keeps_sharp_s() -> None:
    suffix = PublicSuffix.from_unknown_section("faß.de", NONTRANSITIONAL, NONTRANSITIONAL)
    assert suffix.content == "faß.de"
    assert suffix.is_transitional_different
    assert suffix.to_ascii().content == "xn--fa-hia.de"


def test_plain_ascii_suffix_is_not_transitional_different() -> None:
    assert not PublicSuffix.from_icann_section("co.uk").is_transitional_different


def test_with_same_idna_option_returns_same_instance() -> None:
    suffix = PublicSuffix.from_icann_section("co.uk")
    assert suffix.with_ascii_idna_option(IDNAOption.DEFAULT) is suffix
    assert suffix.with_unicode_idna_option(0) is suffix


def test_with_idna_option_keeps_other_fields() -> None:
    suffix = PublicSuffix.from_private_section("github.io", IDNAOption.USE_STD3_RULES)
    changed = suffix.with_unicode_idna_option(IDNAOption.NONTRANSITIONAL_TO_UNICODE)
    assert changed is not suffix
    assert changed.unicode_idna_option == IDNAOption.NONTRANSITIONAL_TO_UNICODE
    assert changed.ascii_idna_option == IDNAOption.USE_STD3_RULES
    assert changed.content == "github.io"
    assert changed.is_private()
    assert suffix.unicode_idna_option == IDNAOption.DEFAULT

    other = suffix.with_ascii_idna_option(IDNAOption.NONTRANSITIONAL_TO_ASCII)
    assert other.ascii_idna_option == IDNAOption.NONTRANSITIONAL_TO_ASCII
    assert other.unicode_idna_option == IDNAOption.DEFAULT


def test_with_idna_option_on_null_stays_unknown() -> None:
    suffix = PublicSuffix.from_null().with_ascii_idna_option(IDNAOption.NONTRANSITIONAL_TO_ASCII)
    assert suffix.content is None
    assert suffix.section is Section.UNKNOWN


def test_state_round_trip() -> None:
    suffix = PublicSuffix.from_icann_section("co.uk", IDNAOption.NONTRANSITIONAL_TO_ASCII)
    state = suffix.to_state()
    assert state == {
        "content": "co.uk",
        "section": "ICANN_DOMAINS",
        "ascii_idna_option": 16,
        "unicode_idna_option": 0,
    }
    assert PublicSuffix.from_state(state) == suffix


def test_from_state_revalidates() -> None:
    with pytest.raises(UnableToResolveDomain):
        PublicSuffix.from_state({"content": "co.uk", "section": "NOPE"})


def test_pickle_round_trip() -> None:
    suffix = PublicSuffix.from_private_section("github.io")
    restored = pickle.loads(pickle.dumps(suffix))
    assert restored == suffix
    assert restored.is_private()


def test_malformed_a_label_fails_at_construction() -> None:
    with pytest.raises(InvalidDomain):
        PublicSuffix.from_icann_section("xn--zz.com")


@pytest.mark.parametrize(
    "value",
    ["co.uk", "xn--p1ai", "xn--55qx5d.cn", "xn--fa-hia.de", "рф", "公司.cn", "faß.de", "*.ck", "github.io"],
)
@pytest.mark.parametrize("options", [(IDNAOption.DEFAULT, IDNAOption.DEFAULT), (NONTRANSITIONAL, NONTRANSITIONAL)])
def test_transformations_never_raise_on_constructed_values(value: str, options) -> None:
    suffix = PublicSuffix.from_private_section(value, *options)
    unicode_suffix = suffix.to_unicode()
    ascii_suffix = suffix.to_ascii()
    assert unicode_suffix.is_private()
    assert ascii_suffix.is_private()
    assert ascii_suffix.to_ascii() is ascii_suffix
    assert unicode_suffix.to_unicode() is unicode_suffix


@pytest.mark.parametrize("section", [None, 42, ["icann"]])
def test_non_string_section_names_are_unresolvable(section) -> None:
    assert section_from_name(section) is section
    with pytest.raises(UnableToResolveDomain):
        from_section("co.uk", section_from_name(section))
