"""Tests for find() and guess_country() over the default and custom directories."""

import pytest

from countrypick.application import find, guess_country
from countrypick.domain import CountryDirectory, UnsupportedFieldError


def test_find_by_iso2() -> None:
    country = find("iso2", "ua")
    assert country is not None
    assert country.name == "Ukraine"
    assert country.dial_code == "380"


def test_find_by_dial_code_returns_first_in_directory_order() -> None:
    assert find("dial_code", "380").iso2 == "ua"
    # Canada precedes the United States in the directory, so it wins for "1".
    assert find("dial_code", "1").iso2 == "ca"
    assert find("dialCode", "7").iso2 == "kz"


def test_find_first_match_follows_custom_order() -> None:
    countries = [
        ("United States", "us", "1", "(...) ...-....", 0),
        ("Canada", "ca", "1", "(...) ...-....", 1, ["204"]),
    ]
    assert find("dial_code", "1", countries).iso2 == "us"
    assert find("dial_code", "1", list(reversed(countries))).iso2 == "ca"


def test_find_by_name_and_format() -> None:
    assert find("name", "Poland").iso2 == "pl"
    assert find("format", "...-...-...").iso2 == "pl"


def test_find_by_area_codes_uses_sequence_equality() -> None:
    countries = CountryDirectory.from_tuples(
        [("Dominican Republic", "do", "1", "", 2, ["809", "829", "849"])]
    )
    assert find("area_codes", ["809", "829", "849"], countries).iso2 == "do"
    assert find("areaCodes", ("809", "829", "849"), countries).iso2 == "do"
    assert find("area_codes", ["809"], countries) is None


def test_find_not_found_returns_none() -> None:
    assert find("iso2", "zz") is None
    assert find("dial_code", "0000") is None


def test_find_by_priority_is_unsupported() -> None:
    with pytest.raises(UnsupportedFieldError, match='Field "priority" is not supported'):
        find("priority", 0)
    with pytest.raises(UnsupportedFieldError):
        find("priority", 1, [("Ukraine", "ua", "380", "", 1)])


def test_find_by_unknown_field_is_unsupported() -> None:
    with pytest.raises(UnsupportedFieldError, match='"capital"'):
        find("capital", "Kyiv")


def test_guess_country_by_dial_code() -> None:
    assert guess_country("+380 67 123 45 67").iso2 == "ua"
    assert guess_country("+48").iso2 == "pl"


def test_guess_country_prefers_longest_dial_code() -> None:
    # 1268 (Antigua and Barbuda) beats 1 (North America).
    assert guess_country("+1 268 555 0100").iso2 == "ag"


def test_guess_country_uses_area_codes() -> None:
    assert guess_country("+1 (204) 555-0100").iso2 == "ca"
    assert guess_country("+1 787 555 0100").iso2 == "pr"
    assert guess_country("+7 33 123 4567").iso2 == "kz"


def test_guess_country_falls_back_to_priority() -> None:
    assert guess_country("+1 212 555 0100").iso2 == "us"
    assert guess_country("+7 912 345 67 89").iso2 == "ru"
    assert guess_country("+39 06 1234 5678").iso2 == "it"


def test_guess_country_priority_tie_uses_directory_order() -> None:
    countries = [("A", "aa", "99", "", 0), ("B", "bb", "99", "", 0)]
    assert guess_country("+99 1", countries).iso2 == "aa"


def test_guess_country_without_match() -> None:
    assert guess_country("") is None
    assert guess_country(None) is None
    assert guess_country("+0") is None
