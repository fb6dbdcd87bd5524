"""
Output normalization for checking program output against an expected answer.

The comparison is intentionally crude: it tolerates whitespace differences
inside list literals and around commas, and blank lines, then compares the
remaining text exactly. It is not a general-purpose diff.

Dependencies: re (stdlib)
System role: Pass/fail decision for code runs against a problem
"""

import re

_OPEN_BRACKET_SPACE = re.compile(r"\[\s+")
_CLOSE_BRACKET_SPACE = re.compile(r"\s+\]")
_COMMA_SPACE = re.compile(r"\s*,\s*")


def normalize_output(output: str) -> str:
    """
    Normalize program output for comparison.

    Trims the whole text and every line, removes whitespace after ``[`` and
    before ``]``, collapses whitespace around commas to a bare comma, and
    drops empty lines.

    Args:
        output: Raw stdout text

    Returns:
        str: Normalized text, lines joined by ``\\n``
    """
    lines = []
    for line in output.strip().split("\n"):
        line = line.strip()
        line = _OPEN_BRACKET_SPACE.sub("[", line)
        line = _CLOSE_BRACKET_SPACE.sub("]", line)
        line = _COMMA_SPACE.sub(",", line)
        if line:
            lines.append(line)
    return "\n".join(lines)


def check_if_tests_passed(actual_output: str, expected_output: str) -> bool:
    """Compare normalized actual and expected output for exact equality."""
    return normalize_output(actual_output) == normalize_output(expected_output)
