from __future__ import annotations

import random

import pytest

from provisioning.domain.identifiers import (
    generate_identifier,
    identifier_in_range,
    identifier_range,
    is_valid_mobile_number,
)
from provisioning.domain.kinds import ACCOUNTS, CARDS, LOANS, get_kind


@pytest.mark.parametrize("kind", [ACCOUNTS, CARDS, LOANS], ids=lambda k: k.name)
def test_generated_identifier_has_kind_digit_length(kind):
    rng = random.Random(42)
    for _ in range(200):
        value = kind.identifier_type(generate_identifier(kind.identifier_digits, rng))
        assert len(str(value)) == kind.identifier_digits
        assert identifier_in_range(value, kind.identifier_digits)


def test_identifier_range_bounds():
    assert identifier_range(9) == (100_000_000, 999_999_999)
    assert identifier_range(12) == (100_000_000_000, 999_999_999_999)
    assert identifier_range(13) == (1_000_000_000_000, 9_999_999_999_999)
    with pytest.raises(ValueError):
        identifier_range(0)


def test_identifier_in_range_rejects_garbage():
    assert not identifier_in_range("abc", 9)
    assert not identifier_in_range(None, 9)
    assert not identifier_in_range(99_999_999, 9)
    assert identifier_in_range("123456789", 9)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("9848149507", True),
        ("6000000000", True),
        ("5848149507", False),
        ("984814950", False),
        ("98481495071", False),
        ("98481495a7", False),
        ("", False),
        (None, False),
    ],
)
def test_mobile_number_pattern(value, expected):
    assert is_valid_mobile_number(value) is expected


def test_get_kind_lookup():
    assert get_kind("Cards") is CARDS
    assert ACCOUNTS.owner_linked and not LOANS.owner_linked
    with pytest.raises(ValueError):
        get_kind("mortgages")
