"""
Practice problem schemas.

Dependencies: pydantic
System role: Problem browsing and code run API contracts
"""

from pydantic import Field

from talentiq.models.common import CamelModel


class ProblemExample(CamelModel):
    input: str
    output: str
    explanation: str | None = None


class ProblemSummary(CamelModel):
    """Problem list entry."""

    id: str
    title: str
    difficulty: str
    category: str


class ProblemDetail(ProblemSummary):
    """Full problem with per-language starter code and expected output."""

    description: str
    examples: list[ProblemExample]
    constraints: list[str]
    starter_code: dict[str, str]
    expected_output: dict[str, str]


class ProblemListResponse(CamelModel):
    message: str
    problems: list[ProblemSummary]


class ProblemResponse(CamelModel):
    message: str
    problem: ProblemDetail


class RunCodeRequest(CamelModel):
    """Code submission for a problem."""

    language: str = Field(description="javascript, python or java")
    code: str = Field(description="Complete program source")


class RunCodeResponse(CamelModel):
    """Execution outcome and pass/fail against the expected output."""

    success: bool
    output: str | None = None
    error: str | None = None
    passed: bool = False
