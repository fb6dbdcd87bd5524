"""
Problem service.

Browses the built-in problem catalog and runs submitted code against a
problem's expected output.

Dependencies: talentiq.core.problems, talentiq.boundary.execution
System role: Practice problem use cases
"""

import logging
from dataclasses import dataclass

from talentiq.boundary.execution import LANGUAGE_CONFIG, PistonClient
from talentiq.core.exceptions import ProblemNotFoundError, ValidationError
from talentiq.core.problems import Problem, check_if_tests_passed, get_problem, list_problems

logger = logging.getLogger(__name__)


@dataclass
class RunOutcome:
    """Execution result plus whether it matched the expected output."""

    success: bool
    output: str | None = None
    error: str | None = None
    passed: bool = False


class ProblemService:
    """Problem catalog and code run orchestrator."""

    def __init__(self, executor: PistonClient) -> None:
        self.executor = executor

    def list_problems(self) -> list[Problem]:
        return list_problems()

    def get_problem(self, problem_id: str) -> Problem:
        """
        Get problem by id.

        Raises:
            ProblemNotFoundError: If the id is not in the catalog
        """
        problem = get_problem(problem_id)
        if problem is None:
            raise ProblemNotFoundError(problem_id)
        return problem

    async def run(self, problem_id: str, language: str, code: str) -> RunOutcome:
        """
        Execute code and compare normalized output with the expected answer.

        Args:
            problem_id: Catalog problem id
            language: javascript, python or java
            code: Program source

        Returns:
            RunOutcome: Execution result and pass/fail

        Raises:
            ProblemNotFoundError: If the problem is unknown
            ValidationError: If the language is not supported
        """
        problem = self.get_problem(problem_id)
        if language not in LANGUAGE_CONFIG or language not in problem.expected_output:
            raise ValidationError(f"Unsupported language - {language}", field="language")

        result = await self.executor.execute(language, code)
        passed = bool(
            result.success
            and result.output is not None
            and check_if_tests_passed(result.output, problem.expected_output[language])
        )
        logger.info(
            "Code run finished",
            extra={"problem_id": problem_id, "language": language, "passed": passed},
        )
        return RunOutcome(
            success=result.success,
            output=result.output,
            error=result.error,
            passed=passed,
        )
