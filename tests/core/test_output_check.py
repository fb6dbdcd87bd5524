"""Test suite for output normalization and pass/fail comparison."""

import pytest

from talentiq.core.problems import check_if_tests_passed, normalize_output


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("[ 0, 1 ]", "[0,1]"),
        ("  [1 ,2]  \n\n[ 3 , 4 ]\n", "[1,2]\n[3,4]"),
        ("[ 'o', 'l' ]", "['o','l']"),
        ("true\n  \nfalse", "true\nfalse"),
        ("", ""),
    ],
)
def test_normalize_output(raw, expected):
    assert normalize_output(raw) == expected


def test_check_passes_across_runtime_formatting():
    assert check_if_tests_passed("[ 0, 1 ]\n[ 1, 2 ]\n", "[0,1]\n[1,2]")


def test_check_fails_on_different_values():
    assert not check_if_tests_passed("[0,2]", "[0,1]")


def test_check_is_case_sensitive():
    assert not check_if_tests_passed("True", "true")
