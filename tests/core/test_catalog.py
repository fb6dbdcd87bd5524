"""Test suite for the built-in problem catalog."""

from talentiq.boundary.execution import LANGUAGE_CONFIG
from talentiq.core.problems import PROBLEMS, get_problem, list_problems


def test_catalog_ids():
    assert [p.id for p in list_problems()] == [
        "two-sum",
        "reverse-string",
        "valid-palindrome",
        "maximum-subarray",
        "container-with-most-water",
    ]


def test_every_problem_covers_every_language():
    for problem in PROBLEMS.values():
        assert set(problem.starter_code) == set(LANGUAGE_CONFIG)
        assert set(problem.expected_output) == set(LANGUAGE_CONFIG)
        assert problem.difficulty in {"easy", "medium", "hard"}


def test_get_problem():
    assert get_problem("two-sum").title == "Two Sum"
    assert get_problem("missing") is None
