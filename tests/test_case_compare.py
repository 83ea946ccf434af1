import pytest

from cookbook.case_compare import iequals

FIRST = "Thanks for reading me!"
SECOND = "Thanks for reading ME!"


def test_strings_differing_only_in_case_are_equal():
    assert iequals(FIRST, SECOND) is True


def test_comparison_is_symmetric():
    assert iequals(SECOND, FIRST) == iequals(FIRST, SECOND)


def test_lowered_and_uppered_copies_agree():
    assert iequals(FIRST.lower(), SECOND.upper()) is True


@pytest.mark.parametrize(
    "first, second",
    [("abc", "abd"), ("a", "aa"), ("", "x"), (FIRST, FIRST[:-1])],
)
def test_different_strings_are_not_equal(first, second):
    assert iequals(first, second) is False


def test_empty_strings_are_equal():
    assert iequals("", "") is True