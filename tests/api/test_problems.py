"""Test suite for problem endpoints."""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from talentiq.api.deps import get_current_user, get_problem_service
from talentiq.api.routers.error_handling import register_exception_handlers
from talentiq.api.routers.problems import router as problems_router
from talentiq.application.services import ProblemService
from talentiq.boundary.execution import ExecutionResult, PistonClient


@pytest.fixture
def executor():
    return AsyncMock(spec=PistonClient)


@pytest.fixture
def client(fake_user, executor):
    app = FastAPI()
    app.include_router(problems_router)
    register_exception_handlers(app)
    app.dependency_overrides[get_problem_service] = lambda: ProblemService(executor=executor)
    app.dependency_overrides[get_current_user] = lambda: fake_user
    return TestClient(app)


def test_list_problems(client):
    response = client.get("/problems")

    assert response.status_code == 200
    problems = response.json()["problems"]
    assert len(problems) == 5
    assert problems[0] == {
        "id": "two-sum",
        "title": "Two Sum",
        "difficulty": "easy",
        "category": "Array • Hash Table",
    }


def test_get_problem_includes_starter_code(client):
    response = client.get("/problems/reverse-string")

    assert response.status_code == 200
    problem = response.json()["problem"]
    assert set(problem["starterCode"]) == {"javascript", "python", "java"}
    assert problem["expectedOutput"]["python"].startswith("['o'")
    assert problem["examples"][0]["input"]


def test_get_unknown_problem_returns_404(client):
    response = client.get("/problems/unknown")

    assert response.status_code == 404
    assert response.json() == {"detail": "Problem not found"}


def test_run_code_reports_pass(client, executor):
    executor.execute.return_value = ExecutionResult(success=True, output="6\n1\n23\n")

    response = client.post(
        "/problems/maximum-subarray/run",
        json={"language": "python", "code": "print(6)"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "output": "6\n1\n23\n",
        "error": None,
        "passed": True,
    }


def test_run_code_unsupported_language_returns_400(client, executor):
    response = client.post(
        "/problems/two-sum/run",
        json={"language": "cobol", "code": "DISPLAY 1"},
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "Unsupported language - cobol"}
    executor.execute.assert_not_awaited()
