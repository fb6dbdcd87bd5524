"""
Practice problem API endpoints.

Routes:
- GET /problems - List problems
- GET /problems/{problem_id} - Get problem
- POST /problems/{problem_id}/run - Run code against a problem

Dependencies: talentiq.application.services.problem_service, talentiq.models
System role: Problem browsing and code execution HTTP API
"""

from fastapi import APIRouter, Depends

from talentiq.api.deps import get_current_user, get_problem_service
from talentiq.api.routers.error_handling import handle_service_errors
from talentiq.application.services import ProblemService
from talentiq.boundary.db.models.user_model import UserModel
from talentiq.models.problem import (
    ProblemDetail,
    ProblemListResponse,
    ProblemResponse,
    ProblemSummary,
    RunCodeRequest,
    RunCodeResponse,
)

router = APIRouter(prefix="/problems", tags=["problems"])


@router.get("", response_model=ProblemListResponse)
@handle_service_errors("Failed to list problems")
async def list_problems(
    problem_service: ProblemService = Depends(get_problem_service),
) -> ProblemListResponse:
    return ProblemListResponse(
        message="Problems retrieved successfully",
        problems=[ProblemSummary.model_validate(p) for p in problem_service.list_problems()],
    )


@router.get("/{problem_id}", response_model=ProblemResponse)
@handle_service_errors("Failed to get problem")
async def get_problem(
    problem_id: str,
    problem_service: ProblemService = Depends(get_problem_service),
) -> ProblemResponse:
    """
    Get a problem with starter code.

    Raises:
        HTTPException(404): Problem not found
    """
    problem = problem_service.get_problem(problem_id)
    return ProblemResponse(
        message="Problem retrieved successfully",
        problem=ProblemDetail.model_validate(problem),
    )


@router.post("/{problem_id}/run", response_model=RunCodeResponse)
@handle_service_errors("Failed to run code")
async def run_code(
    problem_id: str,
    request: RunCodeRequest,
    user: UserModel = Depends(get_current_user),
    problem_service: ProblemService = Depends(get_problem_service),
) -> RunCodeResponse:
    """
    Execute code and report whether its output matches the expected answer.

    Execution failures (compile errors, runtime errors, provider outages)
    are returned with ``success: false`` rather than as an error status.

    Raises:
        HTTPException(400): Unsupported language
        HTTPException(404): Problem not found
    """
    outcome = await problem_service.run(problem_id, request.language, request.code)
    return RunCodeResponse.model_validate(outcome)
