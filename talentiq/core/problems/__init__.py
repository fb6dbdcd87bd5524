"""
Practice problem catalog and output checking.

Exports:
  - Problem, PROBLEMS, get_problem, list_problems: Built-in catalog
  - normalize_output, check_if_tests_passed: Output comparison
"""

from talentiq.core.problems.catalog import PROBLEMS, Problem, get_problem, list_problems
from talentiq.core.problems.output_check import check_if_tests_passed, normalize_output

__all__ = [
    "PROBLEMS",
    "Problem",
    "check_if_tests_passed",
    "get_problem",
    "list_problems",
    "normalize_output",
]
